# uigen/core/writer.py
import logging
from pathlib import Path
from typing import Union

from uigen.utils.config import OUTPUT_FILENAME, OUTPUT_SUBDIR

logger = logging.getLogger(__name__)


class ArtifactWriter:
    """Writes generated source to <project_root>/app/GeneratedUI.tsx, overwriting."""

    def __init__(self, project_root: Union[str, Path]):
        self.project_root = Path(project_root)

    @property
    def output_dir(self) -> Path:
        return self.project_root.resolve() / OUTPUT_SUBDIR

    @property
    def output_path(self) -> Path:
        return self.output_dir / OUTPUT_FILENAME

    def write(self, code: str) -> Path:
        target = self.output_path
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(code, encoding="utf-8")
        logger.info("Saved generated UI to: %s", target)
        return target
