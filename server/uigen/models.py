from pathlib import Path
from typing import List, Literal, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

Theme = Literal["modern", "minimal", "professional"]
Source = Literal["model", "fallback"]


class GenerationOptions(BaseModel):
    model_config = ConfigDict(frozen=True)

    app_idea: str = Field(..., description="Free-text description of the app to generate")
    theme: Theme = Field("modern", description="Visual theme requested of the model")
    features: Tuple[str, ...] = Field(default_factory=tuple, description="Ordered feature list")
    api_key: Optional[str] = Field(None, description="Per-call credential override")


class GenerationResult(BaseModel):
    code: str
    source: Source
    reason: Optional[str] = None


class GeneratedArtifact(BaseModel):
    path: Path
    code: str
    source: Source
    reason: Optional[str] = None


class ValidationResult(BaseModel):
    path: str
    passed: bool
    missing: List[str] = Field(default_factory=list)
    error: Optional[str] = None


# -------------------------
# HTTP request/response shapes
# -------------------------
class GenerateUIRequest(BaseModel):
    app_idea: str
    theme: Theme = "modern"
    features: List[str] = Field(default_factory=list)
    validate_output: bool = Field(False, alias="validate")

    model_config = ConfigDict(populate_by_name=True)


class GenerateUIResponse(BaseModel):
    path: str
    source: Source
    reason: Optional[str] = None
    validation: Optional[ValidationResult] = None


class ValidateRequest(BaseModel):
    path: Optional[str] = None
