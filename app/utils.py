from typing import Optional

NO_EMAIL_GENERATED = "Error: No email generated."
DEFAULT_GREETING = "Dear [Recipient],\n\n"
DEFAULT_SIGN_OFF = "\n\nBest regards,\n[Your Name]"

GREETING_PREFIXES = ("dear", "hi")
SIGN_OFF_MARKERS = ("regards", "sincerely")   # "best regards" is covered by "regards"


def ensure_greeting(email: str) -> str:
    """Prepend a placeholder greeting unless the text opens with Dear / Hi."""
    if email.lower().startswith(GREETING_PREFIXES):
        return email
    return DEFAULT_GREETING + email


def ensure_sign_off(email: str) -> str:
    """Append a placeholder sign-off unless one is already present anywhere."""
    lowered = email.lower()
    if any(marker in lowered for marker in SIGN_OFF_MARKERS):
        return email
    return email + DEFAULT_SIGN_OFF


def post_process_email(email: Optional[str]) -> str:
    """
    Tidy the raw model output into a sendable reply.

    • Blank output → ``"Error: No email generated."``
    • Surrounding whitespace is trimmed first.
    • Greeting is checked before the sign-off.
    """
    if email is None or not email.strip():
        return NO_EMAIL_GENERATED

    email = email.strip()
    email = ensure_greeting(email)
    return ensure_sign_off(email)
