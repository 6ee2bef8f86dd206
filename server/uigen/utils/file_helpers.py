import os
from pathlib import Path
from typing import Optional


# --- Helper: safe path normalize & reject traversal/abs paths ---
def _safe_normalize(p: str) -> Optional[str]:
    if not isinstance(p, str) or p.strip() == "":
        return None
    p = p.replace("\\", "/")
    # disallow absolute paths
    if os.path.isabs(p) or p.startswith("/"):
        return None
    clean = os.path.normpath(p).replace("\\", "/")
    if clean == ".." or clean.startswith("../") or "/../" in clean:
        return None
    if clean == ".":
        return None
    return clean


def resolve_under_root(root: Path, rel_path: str) -> Optional[Path]:
    """
    Join a client-supplied relative path onto root. Returns None for empty,
    absolute or traversing paths.
    """
    sp = _safe_normalize(rel_path)
    if sp is None:
        return None
    return Path(root).resolve() / sp
