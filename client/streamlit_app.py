"""Simple client-side Streamlit UI for the Smart Email Assistant backend.

Features
--------
* Text area for the email you received and a tone picker.
* Sidebar to configure the **API base URL**.
* Shows the generated reply in a copyable code block and keeps the previous
  replies of this session in `st.session_state`.

Run with:
    $ streamlit run client/streamlit_app.py

Make sure your backend is up (default assumes http://localhost:8000) or
change the "API Base URL" in the sidebar.
"""

from __future__ import annotations

from typing import Dict, List

import requests
import streamlit as st

TONES: List[str] = ["", "professional", "formal", "friendly", "casual", "apologetic", "concise"]

st.set_page_config(page_title="Smart Email Assistant", page_icon="✉️", layout="wide")

###############################################################################
# Session-state helpers
###############################################################################

if "replies" not in st.session_state:
    # Each entry is {"email": str, "tone": str, "reply": str}
    st.session_state.replies: List[Dict[str, str]] = []

###############################################################################
# Sidebar - configuration
###############################################################################
st.sidebar.header("Server configuration")
API_BASE_URL: str = st.sidebar.text_input(
    "API Base URL", value="http://localhost:8000", help="Where the FastAPI backend lives"
)

try:
    health = requests.get(f"{API_BASE_URL}/api/email/health", timeout=5)
    st.sidebar.caption(f"✅ {health.text}" if health.ok else f"⚠️ {health.status_code}")
except requests.RequestException:
    st.sidebar.caption("⚠️ Backend unreachable")

st.title("Smart Email Assistant")

with st.form("generate"):
    email_content = st.text_area("Email you received", height=220)
    tone = st.selectbox("Tone", TONES, format_func=lambda t: t or "(none)")
    submitted = st.form_submit_button("Generate reply")

if submitted:
    payload = {"emailContent": email_content, "tone": tone or None}
    try:
        r = requests.post(
            f"{API_BASE_URL}/api/email/generate",
            json=payload,
            timeout=60,
        )
        reply = r.text
    except Exception as exc:  # noqa: BLE001
        reply = f"⚠️ Error talking to backend: {exc}"

    st.session_state.replies.insert(0, {"email": email_content, "tone": tone, "reply": reply})

###############################################################################
# Display replies
###############################################################################

for i, entry in enumerate(st.session_state.replies):
    st.subheader("Latest reply" if i == 0 else f"Reply #{len(st.session_state.replies) - i}")
    st.code(entry["reply"], language=None)
    with st.expander("Original email"):
        st.text(entry["email"])
