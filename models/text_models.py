"""Data models shared by the cleanup logic and the Streamlit UI."""
from __future__ import annotations
from typing import Optional
from pydantic import BaseModel, Field


class StatsSnapshot(BaseModel):
    """Statistics derived from the text buffer at its last change."""

    word_count: int = Field(default=0, ge=0)
    char_count: int = Field(default=0, ge=0)
    reading_minutes: int = Field(default=0, ge=0)


class ClipboardResult(BaseModel):
    """Outcome of a clipboard write."""

    ok: bool
    reason: Optional[str] = None


class DownloadPayload(BaseModel):
    """Buffer contents packaged as a downloadable file."""

    file_name: str = "cleaned_text.txt"
    mime: str = "text/plain"
    data: str
