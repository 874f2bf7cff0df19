from typing import Any
from unittest.mock import patch

import streamlit.runtime.secrets as st_secrets

with patch.object(st_secrets.Secrets, "_parse", return_value={}):
    from session_state import (
        CONFIRM_CLEAR_KEY,
        EDITOR_KEY,
        get_controller,
        get_feedback,
        initialize_session_state,
        sync_from_editor,
    )
    from logic.commands import dispatch
    from utils import config


def test_initialize_is_idempotent() -> None:
    state: dict[str, Any] = {}
    initialize_session_state(state)
    controller = state["buffer_controller"]
    initialize_session_state(state)
    assert state["buffer_controller"] is controller
    assert state[EDITOR_KEY] == ""
    assert state[CONFIRM_CLEAR_KEY] is False


def test_editor_changes_reach_buffer() -> None:
    state: dict[str, Any] = {}
    state[EDITOR_KEY] = "pasted text here"
    sync_from_editor(state)
    controller = get_controller(state)
    assert controller.get_text() == "pasted text here"
    assert controller.stats.word_count == 3


def test_buffer_changes_are_mirrored_to_editor() -> None:
    state: dict[str, Any] = {}
    controller = get_controller(state)
    controller.set_text("**bold**")
    dispatch("clean", controller)
    assert state[EDITOR_KEY] == "bold"


def test_feedback_tracker_uses_configured_window() -> None:
    state: dict[str, Any] = {}
    assert get_feedback(state).duration == config.ACK_DURATION_SECONDS
