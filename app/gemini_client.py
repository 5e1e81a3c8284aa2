import logging
import re

import httpx

from .models import GenerateContentRequest

logger = logging.getLogger(__name__)

KEY_PARAM_RE = re.compile(r"([?&]key=)[^&\s\"']+")


class RedactApiKeyFilter(logging.Filter):
    """Masks ``?key=…`` in records, e.g. httpx's "HTTP Request: POST <url>" line."""

    def filter(self, record: logging.LogRecord) -> bool:
        message = record.getMessage()
        redacted = KEY_PARAM_RE.sub(r"\1***", message)
        if redacted != message:
            record.msg, record.args = redacted, ()
        return True


# httpx logs every request URL at INFO
logging.getLogger("httpx").addFilter(RedactApiKeyFilter())


class GeminiClient:
    """
    Minimal Gemini ``generateContent`` client (query-param authentication).
    """

    def __init__(
        self,
        api_url: str | None,
        api_key: str | None,
        http_client: httpx.AsyncClient,
    ):
        if not api_url:
            raise ValueError(
                "No Gemini API URL found ─ set GEMINI_API_URL in your environment "
                "or pass api_url='…' to GeminiClient()."
            )
        if not api_key:
            raise ValueError(
                "No Gemini API key found ─ set GEMINI_API_KEY in your environment "
                "or pass api_key='…' to GeminiClient()."
            )
        self.api_url = api_url
        self.api_key = api_key
        self._http = http_client

    # ---------- helper (build full URL with ?key=…) ----------
    def _url(self) -> tuple[str, dict]:
        """Return (url, params) so every call includes ?key=…"""
        return self.api_url, {"key": self.api_key}

    # ---------- public method ----------
    async def generate(self, prompt: str) -> str:
        """
        POST the prompt and return the raw response body.

        Raises ``httpx.HTTPStatusError`` on a non-2xx answer and
        ``httpx.RequestError`` on network / DNS / TLS failure.
        """
        url, params = self._url()
        payload = GenerateContentRequest.from_prompt(prompt)
        logger.debug("Calling Gemini at %s (prompt: %d chars)", url, len(prompt))

        resp = await self._http.post(
            url,
            params=params,
            headers={"Content-Type": "application/json"},
            json=payload.model_dump(),
        )
        logger.info("Gemini response: %s", resp.status_code)
        resp.raise_for_status()
        return resp.text
