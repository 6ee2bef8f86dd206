# uigen/core/llm_client.py
import os
import json
import time
import logging
from typing import Any, Dict, List, Optional

import requests
from pydantic import BaseModel, Field, ValidationError

from uigen.core.extractor import extract_code
from uigen.core.fallback import fallback_template
from uigen.models import GenerationResult
from uigen.utils.config import GENERATION_CONFIG, GEMINI_ENDPOINT, GEMINI_MODEL, LOG_DIR

logger = logging.getLogger(__name__)


class GenerationError(RuntimeError):
    """Raised inside the client when the model call cannot produce text."""

    def __init__(self, reason: str, message: str):
        super().__init__(message)
        self.reason = reason


# -------------------------
# generateContent response shape
# -------------------------
class GeminiPart(BaseModel):
    text: Optional[str] = Field(None, description="Generated text")


class GeminiContent(BaseModel):
    parts: List[GeminiPart] = Field(default_factory=list)


class GeminiCandidate(BaseModel):
    content: Optional[GeminiContent] = None


class GeminiResponse(BaseModel):
    candidates: List[GeminiCandidate] = Field(default_factory=list)

    def first_text(self) -> str:
        if not self.candidates:
            return ""
        content = self.candidates[0].content
        if content is None or not content.parts:
            return ""
        return content.parts[0].text or ""


def _save_debug_log(log_dir: str, prefix: str, payload: Dict[str, Any]):
    fname = f"{int(time.time())}_{prefix}.json"
    try:
        os.makedirs(log_dir, exist_ok=True)
        with open(os.path.join(log_dir, fname), "w", encoding="utf-8") as fh:
            json.dump(payload, fh, indent=2, ensure_ascii=False)
    except Exception:
        logger.exception("Failed to write debug log")


class GenerationClient:
    """
    Single-shot Gemini caller that always returns usable source text.

    Without an API key no request is made. Any failure of the request (transport,
    non-2xx status, unexpected payload, empty text) is logged and replaced by the
    fallback template; there are no retries.
    """

    def __init__(self,
                 api_key: Optional[str] = None,
                 model: str = GEMINI_MODEL,
                 endpoint: str = GEMINI_ENDPOINT,
                 timeout: Optional[float] = None,
                 debug: bool = False,
                 log_dir: str = LOG_DIR,
                 session: Optional[requests.Session] = None):
        self.api_key = api_key or None
        self.model = model
        self.endpoint = endpoint.rstrip("/")
        self.timeout = timeout
        self.debug = debug
        self.log_dir = log_dir
        self.session = session or requests.Session()

    @property
    def url(self) -> str:
        return f"{self.endpoint}/{self.model}:generateContent"

    def _request_body(self, prompt: str) -> Dict[str, Any]:
        return {
            "contents": [{"parts": [{"text": prompt}]}],
            "generationConfig": dict(GENERATION_CONFIG),
        }

    def _call_api(self, prompt: str) -> str:
        try:
            resp = self.session.post(
                self.url,
                params={"key": self.api_key},
                json=self._request_body(prompt),
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            # requests/urllib3 messages carry the full URL, including ?key=
            raise GenerationError("transport_error", f"Gemini request failed: {self._redact(str(e))}") from e

        if not resp.ok:
            raise GenerationError("http_error", f"Gemini API error: {resp.status_code}")

        try:
            data = resp.json()
        except ValueError as e:
            raise GenerationError("invalid_response", f"Gemini returned non-JSON body: {e}") from e

        if self.debug:
            _save_debug_log(self.log_dir, "gemini_response", {"prompt": prompt, "response": data})

        try:
            parsed = GeminiResponse.model_validate(data)
        except ValidationError as e:
            raise GenerationError("invalid_response", f"Unexpected Gemini payload: {e}") from e

        text = parsed.first_text()
        if not text.strip():
            raise GenerationError("empty_response", "Empty response from Gemini API")

        code = extract_code(text)
        if not code:
            raise GenerationError("empty_response", "No source code in Gemini response")
        return code

    def _redact(self, text: str) -> str:
        if self.api_key:
            text = text.replace(self.api_key, "***")
        return text

    def generate_with_provenance(self, prompt: str) -> GenerationResult:
        if not self.api_key:
            logger.warning("GEMINI_API_KEY not found, using fallback generation")
            return GenerationResult(code=fallback_template(), source="fallback", reason="no_api_key")

        logger.info("Calling Gemini API (%s) for UI generation", self.model)
        start_ts = time.time()
        try:
            code = self._call_api(prompt)
        except GenerationError as e:
            logger.warning("Gemini API call failed (%s): %s; using fallback", e.reason, e)
            if self.debug:
                _save_debug_log(self.log_dir, f"gemini_error_{e.reason}", {"prompt": prompt, "error": repr(e)})
            return GenerationResult(code=fallback_template(), source="fallback", reason=e.reason)
        except Exception as e:
            # no traceback: exception text may embed the request URL and its key
            logger.error("Unexpected error during Gemini call (%s): %s; using fallback",
                         type(e).__name__, self._redact(str(e)))
            return GenerationResult(code=fallback_template(), source="fallback", reason="unexpected_error")

        logger.info("Gemini API generation successful in %.2fs", time.time() - start_ts)
        return GenerationResult(code=code, source="model")

    def generate(self, prompt: str) -> str:
        return self.generate_with_provenance(prompt).code
