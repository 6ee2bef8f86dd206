# uigen/core/validator.py
import logging
from pathlib import Path
from typing import List, Union

from uigen.models import ValidationResult
from uigen.utils.config import STORE_HOOK

logger = logging.getLogger(__name__)

# Checked in this order; missing markers are reported in the same order.
REQUIRED_MARKERS: List[str] = [
    "'use client'",
    "export default function GeneratedUI",
    STORE_HOOK,
    "onClick",
    "console.log",
]


def find_missing_markers(content: str) -> List[str]:
    return [m for m in REQUIRED_MARKERS if m not in content]


def validate_artifact(path: Union[str, Path]) -> ValidationResult:
    """
    Read the saved artifact and check it for the required markers.
    Never raises: a missing or unreadable file is a failed result with an
    error message and every marker listed as missing.
    """
    p = Path(path)
    logger.info("Validating generated UI: %s", p)
    try:
        if not p.is_file():
            raise FileNotFoundError(f"Generated file not found: {p}")
        content = p.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.error("UI validation failed: %s", e)
        return ValidationResult(path=str(p), passed=False, missing=list(REQUIRED_MARKERS), error=str(e))

    missing = find_missing_markers(content)
    if missing:
        logger.warning("Validation warnings, missing markers: %s", missing)
    else:
        logger.info("UI validation passed")
    return ValidationResult(path=str(p), passed=not missing, missing=missing)
