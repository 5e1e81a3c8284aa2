import pytest
import httpx
from unittest.mock import AsyncMock, Mock
from app.email_generator import EmailGenerator
from app.gemini_client import GeminiClient
from app.models import EmailRequest, ExtractionResult
from app.prompt_builder import PromptBuilder
from app.response_parser import ResponseParser

GEMINI_URL = "https://generativelanguage.googleapis.com/v1beta/models/gemini-2.0-flash:generateContent"


def _status_error(status: int, body: str) -> httpx.HTTPStatusError:
    request = httpx.Request("POST", GEMINI_URL)
    response = httpx.Response(status, text=body, request=request)
    return httpx.HTTPStatusError("error", request=request, response=response)


def _generator_with_transport(handler) -> EmailGenerator:
    http = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    client = GeminiClient(GEMINI_URL, "test-key", http)
    return EmailGenerator(client, PromptBuilder(), ResponseParser())


@pytest.mark.asyncio
async def test_generate_reply_runs_the_pipeline_in_order():
    # Arrange
    mock_client = Mock()
    mock_client.generate = AsyncMock(return_value="raw_response")
    mock_builder = Mock()
    mock_builder.build = Mock(return_value="built_prompt")
    mock_parser = Mock()
    mock_parser.extract = Mock(return_value=ExtractionResult(ok=True, text="Hi Sam, sounds good. Regards"))
    generator = EmailGenerator(mock_client, mock_builder, mock_parser)
    req = EmailRequest(emailContent="Hello", tone="formal")

    # Act
    result = await generator.generate_reply(req)

    # Assert
    mock_builder.build.assert_called_once_with("Hello", "formal")
    mock_client.generate.assert_awaited_once_with("built_prompt")
    mock_parser.extract.assert_called_once_with("raw_response")
    assert result == "Hi Sam, sounds good. Regards"

@pytest.mark.asyncio
async def test_generate_reply_returns_extraction_error_undecorated():
    mock_client = Mock()
    mock_client.generate = AsyncMock(return_value="{}")
    mock_parser = Mock()
    mock_parser.extract = Mock(
        return_value=ExtractionResult(ok=False, error="No valid response from Gemini.")
    )
    generator = EmailGenerator(mock_client, PromptBuilder(), mock_parser)

    result = await generator.generate_reply(EmailRequest(emailContent="Test"))

    assert result == "No valid response from Gemini."

@pytest.mark.asyncio
async def test_generate_reply_converts_provider_error():
    mock_client = Mock()
    mock_client.generate = AsyncMock(side_effect=_status_error(429, "rate limited"))
    mock_parser = Mock()
    generator = EmailGenerator(mock_client, PromptBuilder(), mock_parser)

    result = await generator.generate_reply(EmailRequest(emailContent="msg"))

    assert result == "Gemini API Error: rate limited"
    mock_parser.extract.assert_not_called()

@pytest.mark.asyncio
async def test_generate_reply_converts_unexpected_exception():
    mock_client = Mock()
    mock_client.generate = AsyncMock(side_effect=RuntimeError("boom"))
    generator = EmailGenerator(mock_client, PromptBuilder(), ResponseParser())

    result = await generator.generate_reply(EmailRequest(emailContent="msg"))

    assert result == "Unexpected Error: boom"

@pytest.mark.asyncio
async def test_generate_reply_converts_network_failure():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    generator = _generator_with_transport(handler)

    result = await generator.generate_reply(EmailRequest(emailContent="msg"))

    assert result == "Unexpected Error: connection refused"

@pytest.mark.asyncio
async def test_end_to_end_meeting_confirmation():
    body = '{"candidates":[{"content":{"parts":[{"text":"The meeting is confirmed for 3 PM."}]}}]}'
    generator = _generator_with_transport(lambda request: httpx.Response(200, text=body))

    result = await generator.generate_reply(
        EmailRequest(emailContent="Please confirm the meeting time.", tone="formal")
    )

    assert result == (
        "Dear [Recipient],\n\nThe meeting is confirmed for 3 PM."
        "\n\nBest regards,\n[Your Name]"
    )

@pytest.mark.asyncio
async def test_end_to_end_rate_limited():
    generator = _generator_with_transport(lambda request: httpx.Response(429, text="rate limited"))

    result = await generator.generate_reply(EmailRequest(emailContent="Please confirm the meeting time."))

    assert result == "Gemini API Error: rate limited"

@pytest.mark.asyncio
async def test_end_to_end_malformed_json():
    generator = _generator_with_transport(lambda request: httpx.Response(200, text="<html>oops"))

    result = await generator.generate_reply(EmailRequest(emailContent="anything"))

    assert result.startswith("Error parsing Gemini response:")

@pytest.mark.asyncio
async def test_end_to_end_blank_text():
    body = '{"candidates":[{"content":{"parts":[{"text":"   \\n "}]}}]}'
    generator = _generator_with_transport(lambda request: httpx.Response(200, text=body))

    result = await generator.generate_reply(EmailRequest(emailContent="anything"))

    assert result == "Error: No email generated."
