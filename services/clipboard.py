"""Clipboard access for the Copy action."""

from __future__ import annotations
import asyncio
import logging
from typing import Callable

import pyperclip
from tenacity import retry, retry_if_exception_type, stop_after_attempt, wait_fixed

from models.text_models import ClipboardResult

logger = logging.getLogger(__name__)

__all__ = ["write_clipboard", "ClipboardWriter"]

ClipboardWriter = Callable[[str], None]


@retry(
    stop=stop_after_attempt(2),
    wait=wait_fixed(0.1),
    retry=retry_if_exception_type(pyperclip.PyperclipException),
    reraise=True,
)
def _write_with_retry(writer: ClipboardWriter, text: str) -> None:
    writer(text)


async def write_clipboard(
    text: str, writer: ClipboardWriter | None = None
) -> ClipboardResult:
    """Write ``text`` to the system clipboard without blocking the caller.

    Args:
        text: Exact text to place on the clipboard.
        writer: Function performing the write; defaults to ``pyperclip.copy``.

    Returns:
        ``ClipboardResult`` with ``ok=False`` and a reason when the clipboard
        is unavailable or access is denied.
    """
    writer = writer or pyperclip.copy
    try:
        await asyncio.to_thread(_write_with_retry, writer, text)
    except pyperclip.PyperclipException as exc:
        logger.error("Clipboard write failed: %s", exc)
        return ClipboardResult(ok=False, reason=str(exc) or "clipboard unavailable")
    return ClipboardResult(ok=True)
