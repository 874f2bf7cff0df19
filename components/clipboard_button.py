"""Copy button that writes to the clipboard of the user's browser.

The button is a small static component (``clipboard_frontend/index.html``).
The click happens inside the component frame, so the browser grants the
clipboard write, and the outcome is sent back as the component value.
"""

from __future__ import annotations
import pathlib

import streamlit as st
import streamlit.components.v1 as stc

from logic.actions import browser_copy_result
from models.text_models import ClipboardResult

_FRONTEND_DIR = pathlib.Path(__file__).resolve().parent / "clipboard_frontend"
_clipboard_button = stc.declare_component("clipboard_button", path=str(_FRONTEND_DIR))


def clipboard_button(
    text: str,
    *,
    label: str,
    copied_label: str,
    ack_ms: int,
    key: str,
) -> ClipboardResult | None:
    """Render the copy button and return the result of a new click.

    The component keeps its last value across reruns; each reply carries a
    nonce so one click is reported exactly once.
    """
    value = _clipboard_button(
        text=text,
        label=label,
        copiedLabel=copied_label,
        ackMs=ack_ms,
        key=key,
        default=None,
    )
    nonce_key = f"{key}_nonce"
    if not value or value.get("nonce") == st.session_state.get(nonce_key):
        return None
    st.session_state[nonce_key] = value.get("nonce")
    return browser_copy_result(value)
