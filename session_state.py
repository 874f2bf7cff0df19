# session_state.py
# ─────────────────────────────────────────────────────────────────────────────
"""Helpers to initialize and manage Streamlit session state for the text cleaner."""

from __future__ import annotations
from collections.abc import MutableMapping
from typing import Any, cast

import streamlit as st

from logic.buffer_controller import BufferController
from logic.feedback import FeedbackTracker
from utils import config

EDITOR_KEY = "editor_text"
CONTROLLER_KEY = "buffer_controller"
FEEDBACK_KEY = "feedback"
CONFIRM_CLEAR_KEY = "confirm_clear"
COPY_ERROR_KEY = "copy_error"
TOAST_KEY = "pending_toast"

_INIT_FLAG = "_cleaner_state_init"


def _session(state: MutableMapping[str, Any] | None) -> MutableMapping[str, Any]:
    if state is None:
        return cast(MutableMapping[str, Any], st.session_state)
    return state


def initialize_session_state(state: MutableMapping[str, Any] | None = None) -> None:
    """Create the buffer controller and UI flags once per session (idempotent)."""
    state = _session(state)
    if state.get(_INIT_FLAG):
        return
    controller = BufferController(words_per_minute=config.WORDS_PER_MINUTE)

    def _mirror_to_editor(text: str) -> None:
        # keep the text area widget in step with the buffer
        state[EDITOR_KEY] = text

    controller.subscribe(_mirror_to_editor)
    state[CONTROLLER_KEY] = controller
    state[FEEDBACK_KEY] = FeedbackTracker(duration=config.ACK_DURATION_SECONDS)
    state.setdefault(EDITOR_KEY, "")
    state.setdefault(CONFIRM_CLEAR_KEY, False)
    state.setdefault(COPY_ERROR_KEY, None)
    state.setdefault(TOAST_KEY, None)
    state[_INIT_FLAG] = True


def get_controller(state: MutableMapping[str, Any] | None = None) -> BufferController:
    state = _session(state)
    initialize_session_state(state)
    return state[CONTROLLER_KEY]


def get_feedback(state: MutableMapping[str, Any] | None = None) -> FeedbackTracker:
    state = _session(state)
    initialize_session_state(state)
    return state[FEEDBACK_KEY]


def sync_from_editor(state: MutableMapping[str, Any] | None = None) -> None:
    """Copy the text area's current value into the buffer."""
    state = _session(state)
    controller = get_controller(state)
    text = state.get(EDITOR_KEY) or ""
    if text != controller.get_text():
        controller.set_text(text)
