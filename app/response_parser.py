
import json
import logging
from typing import Any

from .models import ExtractionResult

logger = logging.getLogger(__name__)

NO_VALID_RESPONSE = "No valid response from Gemini."
PARSE_ERROR_PREFIX = "Error parsing Gemini response: "


def _first(value: Any) -> Any:
    """First element of a non-empty list, else None."""
    if isinstance(value, list) and value:
        return value[0]
    return None


class ResponseParser:
    """Pulls ``candidates[0].content.parts[0].text`` out of a Gemini reply.

    Never raises: a malformed body or a missing step becomes an error string.
    """

    def extract(self, raw: str) -> ExtractionResult:
        try:
            root = json.loads(raw)
        except (TypeError, ValueError, RecursionError) as exc:
            logger.warning("Could not decode Gemini response: %s", exc)
            return ExtractionResult(ok=False, error=f"{PARSE_ERROR_PREFIX}{exc}")

        candidate = _first(root.get("candidates")) if isinstance(root, dict) else None
        content = candidate.get("content") if isinstance(candidate, dict) else None
        part = _first(content.get("parts")) if isinstance(content, dict) else None
        text = part.get("text") if isinstance(part, dict) else None

        if text is None:
            logger.warning("Gemini response has no candidates[0].content.parts[0].text")
            return ExtractionResult(ok=False, error=NO_VALID_RESPONSE)
        if not isinstance(text, str):
            text = str(text)
        return ExtractionResult(ok=True, text=text)
