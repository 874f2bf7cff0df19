"""Streamlit front end for the text cleaner.

Every button works through an ``on_click`` callback so that buffer changes
land in session state before the script reruns and the text area is drawn.
"""

from __future__ import annotations
import asyncio

import streamlit as st

from components.clipboard_button import clipboard_button
from logic.actions import (
    CLEAR_CONTROL,
    COPY_CONTROL,
    DOWNLOAD_MIME,
    acknowledge_copy,
    build_download,
    clear_text,
    copy_text,
)
from logic.commands import dispatch, get_command, list_commands
from logic.text_stats import format_count, format_reading_time
from models.text_models import ClipboardResult
from services.logger import log_action
from session_state import (
    CONFIRM_CLEAR_KEY,
    COPY_ERROR_KEY,
    EDITOR_KEY,
    TOAST_KEY,
    get_controller,
    get_feedback,
    initialize_session_state,
    sync_from_editor,
)
from utils import config

COPY_LABEL = "📋 Copy to Clipboard"
COPIED_LABEL = "✅ Copied!"
COPY_FAILED_MESSAGE = "Clipboard copy failed. Please copy manually."
STATS_HINT = "Counts refresh when the text box loses focus or on Ctrl+Enter."


# -- callbacks -----------------------------------------------------------------


def _run_command(name: str) -> None:
    controller = get_controller()
    log_action(name, controller.get_text())
    dispatch(name, controller)
    st.session_state[TOAST_KEY] = f"{get_command(name).label} applied"


def _record_copy(result: ClipboardResult) -> None:
    log_action(COPY_CONTROL, get_controller().get_text(), ok=result.ok, mode=config.CLIPBOARD_MODE)
    st.session_state[COPY_ERROR_KEY] = None if result.ok else COPY_FAILED_MESSAGE


def _copy_on_host() -> None:
    result = asyncio.run(copy_text(get_controller(), get_feedback()))
    if result is not None:
        _record_copy(result)


def _log_download() -> None:
    log_action("download", get_controller().get_text())


def _ask_clear() -> None:
    st.session_state[CONFIRM_CLEAR_KEY] = True


def _answer_clear(confirmed: bool) -> None:
    st.session_state[CONFIRM_CLEAR_KEY] = False
    controller = get_controller()
    text = controller.get_text()
    if clear_text(controller, confirmed):
        log_action(CLEAR_CONTROL, text)
        st.session_state[TOAST_KEY] = "Text cleared"


# -- rendering -----------------------------------------------------------------


def _render_stats() -> None:
    stats = get_controller().stats
    col_words, col_chars, col_time = st.columns(3)
    col_words.metric("Words", format_count(stats.word_count))
    col_chars.metric("Characters", format_count(stats.char_count))
    col_time.metric("Reading time", format_reading_time(stats.reading_minutes))
    st.caption(STATS_HINT)


def _render_toolbar() -> None:
    commands = list_commands()
    for col, cmd in zip(st.columns(len(commands)), commands):
        col.button(
            cmd.label,
            key=f"btn_{cmd.name}",
            help=cmd.help,
            on_click=_run_command,
            args=(cmd.name,),
            use_container_width=True,
        )


def _render_copy_error() -> None:
    if st.session_state.get(COPY_ERROR_KEY):
        st.error(st.session_state[COPY_ERROR_KEY], icon="⚠️")


@st.fragment(run_every=0.5)
def _render_host_copy_button() -> None:
    # reruns on a timer so the "Copied!" label reverts without user input
    active = get_feedback().is_active(COPY_CONTROL)
    st.button(
        COPIED_LABEL if active else COPY_LABEL,
        key="btn_copy",
        type="primary" if active else "secondary",
        on_click=_copy_on_host,
        use_container_width=True,
    )
    _render_copy_error()


def _render_browser_copy_button(text: str) -> None:
    # the frame owns the "Copied!" label and its revert timer
    result = clipboard_button(
        text,
        label=COPY_LABEL,
        copied_label=COPIED_LABEL,
        ack_ms=config.ACK_DURATION_MS,
        key="btn_copy_browser",
    )
    if result is not None:
        _record_copy(acknowledge_copy(result))
    _render_copy_error()


def _render_actions() -> None:
    text = get_controller().get_text()
    payload = build_download(text, config.DOWNLOAD_FILE_NAME)
    col_copy, col_download, col_clear = st.columns(3)
    with col_copy:
        if config.CLIPBOARD_MODE == "server":
            _render_host_copy_button()
        else:
            _render_browser_copy_button(text)
    with col_download:
        st.download_button(
            "💾 Download .txt",
            data=payload.data if payload else "",
            file_name=payload.file_name if payload else config.DOWNLOAD_FILE_NAME,
            mime=payload.mime if payload else DOWNLOAD_MIME,
            disabled=payload is None,
            on_click=_log_download,
            key="btn_download",
            use_container_width=True,
        )
    with col_clear:
        st.button(
            "🗑️ Clear",
            key="btn_clear",
            on_click=_ask_clear,
            use_container_width=True,
        )

    if st.session_state.get(CONFIRM_CLEAR_KEY):
        st.warning("Clear all text? This cannot be undone.")
        col_yes, col_no = st.columns(2)
        col_yes.button("Yes, clear", key="confirm_clear_yes", on_click=_answer_clear, args=(True,))
        col_no.button("Cancel", key="confirm_clear_no", on_click=_answer_clear, args=(False,))


def run_cleaner() -> None:
    """Render the complete cleaner page."""
    initialize_session_state()

    st.title("🧹 Plain Text Cleaner")
    st.markdown(
        "Paste text below and clean it up with one click: strip markdown and "
        "chat-assistant artifacts, tidy whitespace or fix capitalisation."
    )

    toast = st.session_state.get(TOAST_KEY)
    if toast:
        st.toast(toast, icon="✨")
        st.session_state[TOAST_KEY] = None

    st.text_area(
        "Your text",
        key=EDITOR_KEY,
        height=320,
        placeholder="Paste or type your text here…",
        on_change=sync_from_editor,
        help=STATS_HINT,
    )
    _render_stats()
    _render_toolbar()
    _render_actions()
