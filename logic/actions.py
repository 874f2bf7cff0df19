"""Copy, download and clear actions on the text buffer."""

from __future__ import annotations
import logging
from collections.abc import Mapping
from typing import Any

from logic.buffer_controller import BufferController
from logic.feedback import FeedbackTracker
from models.text_models import ClipboardResult, DownloadPayload
from services.clipboard import ClipboardWriter, write_clipboard

logger = logging.getLogger(__name__)

__all__ = [
    "COPY_CONTROL",
    "CLEAR_CONTROL",
    "DOWNLOAD_FILE_NAME",
    "DOWNLOAD_MIME",
    "acknowledge_copy",
    "browser_copy_result",
    "copy_text",
    "build_download",
    "clear_text",
]

COPY_CONTROL = "copy"
CLEAR_CONTROL = "clear"
DOWNLOAD_FILE_NAME = "cleaned_text.txt"
DOWNLOAD_MIME = "text/plain"


def acknowledge_copy(
    result: ClipboardResult, feedback: FeedbackTracker | None = None
) -> ClipboardResult:
    """Start the "Copied!" window on success, log the reason on failure."""
    if result.ok:
        if feedback is not None:
            feedback.trigger(COPY_CONTROL)
    else:
        logger.warning("Copy failed: %s", result.reason)
    return result


async def copy_text(
    controller: BufferController,
    feedback: FeedbackTracker | None = None,
    writer: ClipboardWriter | None = None,
) -> ClipboardResult | None:
    """Copy the buffer to the clipboard of the host running the app.

    Returns ``None`` without touching the clipboard when the buffer is empty.
    A successful write starts the "Copied!" acknowledgement; a failed one
    leaves both the buffer and the acknowledgement state untouched.
    """
    text = controller.get_text()
    if not text:
        return None
    result = await write_clipboard(text, writer)
    return acknowledge_copy(result, feedback)


def browser_copy_result(value: Mapping[str, Any] | None) -> ClipboardResult | None:
    """Convert the browser clipboard button's reply into a ``ClipboardResult``.

    The button answers ``{"ok": bool, "reason": str | None, "nonce": ...}``
    after each click; ``None`` means it has not been clicked yet.
    """
    if not value:
        return None
    reason = value.get("reason") or None
    if value.get("ok"):
        return ClipboardResult(ok=True)
    return ClipboardResult(ok=False, reason=str(reason) if reason else "clipboard unavailable")


def build_download(
    text: str, file_name: str = DOWNLOAD_FILE_NAME
) -> DownloadPayload | None:
    """Package ``text`` as a plain-text download, or ``None`` if it is empty."""
    if not text:
        return None
    return DownloadPayload(file_name=file_name, mime=DOWNLOAD_MIME, data=text)


def clear_text(controller: BufferController, confirmed: bool) -> bool:
    """Empty the buffer if the user ``confirmed`` the prompt.

    Returns:
        ``True`` if the buffer was cleared.
    """
    if not confirmed:
        return False
    controller.set_text("")
    return True
