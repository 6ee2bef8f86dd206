# uigen/core/generator.py
"""
UI generation orchestrator.
- Exposes:
    UIGenerator.generate_ui(options) -> Path
    UIGenerator.generate_artifact(options) -> GeneratedArtifact
    UIGenerator.validate_generated_ui(path) -> ValidationResult
    generate_ui(options, project_root=None) -> Path
- Sequence: prompt -> Gemini (or fallback template) -> write app/GeneratedUI.tsx.
  Only filesystem failures escape; generation itself always yields source text.
"""
import logging
from pathlib import Path
from typing import Any, Dict, Optional, Union

from uigen.core.llm_client import GenerationClient
from uigen.core.prompts import build_ui_prompt
from uigen.core.validator import validate_artifact
from uigen.core.writer import ArtifactWriter
from uigen.models import GeneratedArtifact, GenerationOptions, ValidationResult
from uigen.utils.config import Settings, load_settings

logger = logging.getLogger(__name__)

OptionsLike = Union[GenerationOptions, Dict[str, Any]]


def _coerce_options(options: OptionsLike) -> GenerationOptions:
    if isinstance(options, GenerationOptions):
        return options
    return GenerationOptions(**options)


class UIGenerator:
    def __init__(self,
                 project_root: Optional[Union[str, Path]] = None,
                 settings: Optional[Settings] = None,
                 client: Optional[GenerationClient] = None):
        # settings (and with them the API key) are resolved once, here
        self.settings = settings or load_settings()
        root = project_root if project_root is not None else self.settings.project_root
        self.project_root = Path(root)
        self.client = client or self._build_client(self.settings.api_key)
        self.writer = ArtifactWriter(self.project_root)

    def _build_client(self, api_key: Optional[str]) -> GenerationClient:
        s = self.settings
        return GenerationClient(
            api_key=api_key,
            model=s.model,
            endpoint=s.endpoint,
            timeout=s.http_timeout,
            debug=s.debug,
            log_dir=s.log_dir,
        )

    @property
    def output_path(self) -> Path:
        return self.writer.output_path

    def _client_for(self, options: GenerationOptions) -> GenerationClient:
        if options.api_key and options.api_key != self.client.api_key:
            return self._build_client(options.api_key)
        return self.client

    def generate_artifact(self, options: OptionsLike) -> GeneratedArtifact:
        opts = _coerce_options(options)
        logger.info("Starting UI generation")
        logger.debug("Options: theme=%s features=%s", opts.theme, list(opts.features))
        logger.info("App idea: %s", opts.app_idea)

        prompt = build_ui_prompt(opts.app_idea, opts)
        result = self._client_for(opts).generate_with_provenance(prompt)

        try:
            path = self.writer.write(result.code)
        except OSError:
            logger.exception("UI generation failed while saving %s", self.output_path)
            raise

        logger.info("UI generation completed (%s): %s", result.source, path)
        return GeneratedArtifact(path=path, code=result.code, source=result.source, reason=result.reason)

    def generate_ui(self, options: OptionsLike) -> Path:
        return self.generate_artifact(options).path

    def validate_generated_ui(self, path: Optional[Union[str, Path]] = None) -> ValidationResult:
        return validate_artifact(path if path is not None else self.output_path)


def generate_ui(options: OptionsLike, project_root: Optional[Union[str, Path]] = None) -> Path:
    """Convenience entry point using environment configuration."""
    return UIGenerator(project_root=project_root).generate_ui(options)
