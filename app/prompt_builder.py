
from typing import List, Optional


PREAMBLE: List[str] = [
    "You are a professional email writing assistant. ",
    "Write a clear, concise, and polished email reply. ",
    "Do NOT include a subject line unless explicitly asked. ",
    "Ensure proper greeting, structured body, and professional closing. ",
    "Keep it between 80–150 words. ",
    "Avoid repetition or generic filler text. ",
    "Here is the email content: \n",
]

TONE_CLAUSE: str = "The tone should be {tone}. "
SCENARIO: str = "Scenario:\n{email_content}"


class PromptBuilder:
    """
    Builds the single instruction string sent to Gemini for one email.
    """

    def build(self, email_content: Optional[str], tone: Optional[str] = None) -> str:
        parts: List[str] = list(PREAMBLE)
        if tone is not None and tone.strip():
            parts.append(TONE_CLAUSE.format(tone=tone))
        parts.append(SCENARIO.format(email_content=email_content or ""))
        return "".join(parts)
