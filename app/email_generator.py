# app/email_generator.py
from __future__ import annotations

import logging

import httpx

from .gemini_client import GeminiClient
from .models import EmailRequest
from .prompt_builder import PromptBuilder
from .response_parser import ResponseParser
from .utils import post_process_email

logger = logging.getLogger(__name__)


class EmailGenerator:
    """
    Reply pipeline.

    Responsibilities
    ----------------
    1. Build prompt  (email content + tone)              -> PromptBuilder
    2. Call Gemini with the prompt                       -> GeminiClient
    3. Extract the generated text from the JSON reply    -> ResponseParser
    4. Add greeting / sign-off where missing             -> post_process_email
    """

    def __init__(
        self,
        client: GeminiClient,
        builder: PromptBuilder,
        parser: ResponseParser,
    ) -> None:
        self._client = client
        self._builder = builder
        self._parser = parser

    # --------------------------------------------------------------------- #
    # public API
    # --------------------------------------------------------------------- #
    async def generate_reply(self, request: EmailRequest) -> str:
        """
        Produce ONE email reply.

        Parameters
        ----------
        request : EmailRequest
            Email to answer and the optional tone.

        Returns
        -------
        str
            The finished reply, or a human-readable error sentence. Provider
            and unexpected failures never raise.
        """
        try:
            prompt = self._builder.build(request.email_content, request.tone)
            raw = await self._client.generate(prompt)

            result = self._parser.extract(raw)
            if not result.ok:
                return result.error  # type: ignore[return-value]

            return post_process_email(result.text)

        except httpx.HTTPStatusError as exc:
            body = exc.response.text
            logger.warning("Gemini API error %s: %s", exc.response.status_code, body)
            return f"Gemini API Error: {body}"
        except Exception as exc:  # noqa: BLE001
            logger.exception("Unexpected error while generating reply")
            return f"Unexpected Error: {exc}"
