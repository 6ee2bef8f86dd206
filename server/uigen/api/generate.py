# uigen/api/generate.py
from functools import lru_cache

from fastapi import APIRouter, Depends, HTTPException

from uigen.core.generator import UIGenerator
from uigen.models import (
    GenerateUIRequest,
    GenerateUIResponse,
    GenerationOptions,
    ValidateRequest,
    ValidationResult,
)
from uigen.utils.file_helpers import resolve_under_root


router = APIRouter()


@lru_cache(maxsize=1)
def get_generator() -> UIGenerator:
    return UIGenerator()


@router.post("/ui", response_model=GenerateUIResponse)
def generate_ui(req: GenerateUIRequest, generator: UIGenerator = Depends(get_generator)):
    options = GenerationOptions(app_idea=req.app_idea, theme=req.theme, features=tuple(req.features))
    try:
        artifact = generator.generate_artifact(options)
    except OSError as e:
        raise HTTPException(status_code=500, detail=f"failed to write generated UI: {e}")

    validation = None
    if req.validate_output:
        validation = generator.validate_generated_ui(artifact.path)

    return GenerateUIResponse(
        path=str(artifact.path),
        source=artifact.source,
        reason=artifact.reason,
        validation=validation,
    )


@router.post("/validate", response_model=ValidationResult)
def validate_ui(req: ValidateRequest, generator: UIGenerator = Depends(get_generator)):
    if req.path is None:
        return generator.validate_generated_ui()
    target = resolve_under_root(generator.project_root, req.path)
    if target is None:
        raise HTTPException(status_code=400, detail="path must be a relative path inside the project root")
    return generator.validate_generated_ui(target)
