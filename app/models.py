
from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional

class EmailRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    email_content: Optional[str] = Field("", alias="emailContent", description="Email to reply to")
    tone: Optional[str] = Field(None, description="Desired tone, e.g. 'formal'")


# ---------- outbound Gemini payload ----------
class Part(BaseModel):
    text: str

class Content(BaseModel):
    role: str = "user"
    parts: List[Part]

class GenerateContentRequest(BaseModel):
    contents: List[Content]

    @classmethod
    def from_prompt(cls, prompt: str) -> "GenerateContentRequest":
        return cls(contents=[Content(role="user", parts=[Part(text=prompt)])])


class ExtractionResult(BaseModel):
    ok: bool                       # True if a text was found
    text: Optional[str] = None
    error: Optional[str] = None    # fallback / parse error message
