from uigen.core.generator import UIGenerator, generate_ui
from uigen.models import GenerationOptions, ValidationResult

__all__ = ["UIGenerator", "generate_ui", "GenerationOptions", "ValidationResult"]
