# uigen/core/extractor.py
import re
from typing import Optional

SOURCE_TAGS = {"typescript", "tsx", "ts", "javascript", "jsx", "js"}

# ```tag [info]\n body \n```  Both fences open a line; the info string holds no backticks,
# so inline mentions like "use ```tsx``` fences" are not fences.
_FENCE_RE = re.compile(
    r"^[ \t]*```(?P<tag>[\w+#.-]*)[^\n`]*\n(?P<body>.*?)^[ \t]*```",
    re.DOTALL | re.MULTILINE,
)


def extract_code(raw: Optional[str]) -> str:
    """
    Best-effort extraction of source code from a model response.

    Returns the body of the first fenced block that is untagged or tagged with
    a source language, trimmed. Blocks tagged with anything else (json, bash,
    ...) are skipped. With no usable block the whole response is returned
    trimmed, assuming the model answered with bare source.
    """
    text = raw or ""
    for m in _FENCE_RE.finditer(text):
        tag = m.group("tag").lower()
        if tag and tag not in SOURCE_TAGS:
            continue
        return m.group("body").strip()
    return text.strip()
