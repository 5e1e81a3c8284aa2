
import logging

from fastapi import FastAPI, APIRouter, Depends
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse
from .config import get_settings
from .di import email_generator, lifespan
from .email_generator import EmailGenerator
from .models import EmailRequest

logging.basicConfig(
    level=get_settings().log_level,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

router = APIRouter()

@router.get("/health", response_class=PlainTextResponse)
async def health():
    return "Smart Email Assistant is up!"

@router.post("/generate", response_class=PlainTextResponse)
async def generate_email(
    req: EmailRequest,
    generator: EmailGenerator = Depends(email_generator),
):
    try:
        return await generator.generate_reply(req)
    except Exception as exc:  # noqa: BLE001
        logger.exception("Reply pipeline failed")
        return PlainTextResponse(f"Internal Server Error: {exc}", status_code=500)


app = FastAPI(title="Smart Email Assistant", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)
app.include_router(router, prefix="/api/email", tags=["Email"])


"""
curl -X POST http://localhost:8000/api/email/generate \
  -H "Content-Type: application/json" \
  -d '{
    "emailContent": "Hi, can we move our sync to Thursday afternoon?",
    "tone": "friendly"
  }'
"""


if __name__ == "__main__":
    import requests

    API_URL = "http://localhost:8000/api/email/generate"

    payload = {
        "emailContent": (
            # "Please confirm the meeting time."
            # "Could you send over the signed contract by Friday?"
            "Hi, can we move our sync to Thursday afternoon?"
        ),
        "tone": "friendly",
    }

    response = requests.post(API_URL, json=payload, timeout=60)
    print(payload["emailContent"])
    print("Status code:", response.status_code)
    print("Reply:\n" + response.text)
