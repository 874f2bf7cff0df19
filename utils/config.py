# config.py
"""Globale Konfiguration für den Text Cleaner.

Lädt Einstellungen aus .env (lokal) oder st.secrets (Deployment)
und stellt zentrale Parameter zur Verfügung.
"""
import logging
import os
import pathlib

import streamlit as st
from dotenv import load_dotenv

logger = logging.getLogger(__name__)

PROJECT_ROOT = pathlib.Path(__file__).resolve().parent.parent

# .env-Datei laden (sofern vorhanden)
load_dotenv()


def _int_setting(raw: object, default: int, name: str) -> int:
    """Parse a positive integer setting, falling back to ``default``."""
    try:
        value = int(str(raw).strip())
    except (TypeError, ValueError):
        logger.warning("Invalid %s=%r, using %s", name, raw, default)
        return default
    if value <= 0:
        logger.warning("Non-positive %s=%r, using %s", name, raw, default)
        return default
    return value


# "browser": Copy schreibt in die Zwischenablage des Nutzers (Standard)
# "server": pyperclip auf dem Host, nur wenn Browser und Server derselbe Rechner sind
CLIPBOARD_MODES = ("browser", "server")


def _clipboard_mode(raw: object, default: str = "browser") -> str:
    mode = str(raw).strip().lower()
    if mode not in CLIPBOARD_MODES:
        logger.warning("Invalid CLIPBOARD_MODE=%r, using %s", raw, default)
        return default
    return mode


# Allgemeine Umgebungsvariablen
WORDS_PER_MINUTE = _int_setting(os.getenv("WORDS_PER_MINUTE", "200"), 200, "WORDS_PER_MINUTE")
ACK_DURATION_MS = _int_setting(os.getenv("ACK_DURATION_MS", "2000"), 2000, "ACK_DURATION_MS")
DOWNLOAD_FILE_NAME = os.getenv("DOWNLOAD_FILE_NAME", "cleaned_text.txt").strip() or "cleaned_text.txt"
LOG_FILE = pathlib.Path(os.getenv("LOG_FILE", str(PROJECT_ROOT / "cleaner.log")))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
CLIPBOARD_MODE = _clipboard_mode(os.getenv("CLIPBOARD_MODE", "browser"))

# Übernahme aus Streamlit Secrets (falls vorhanden)
try:
    secrets_data = st.secrets.get("cleaner")
except st.errors.StreamlitSecretNotFoundError:
    secrets_data = None

if secrets_data:
    if secrets_data.get("WORDS_PER_MINUTE") is not None:
        WORDS_PER_MINUTE = _int_setting(
            secrets_data["WORDS_PER_MINUTE"], WORDS_PER_MINUTE, "WORDS_PER_MINUTE"
        )
    if secrets_data.get("ACK_DURATION_MS") is not None:
        ACK_DURATION_MS = _int_setting(
            secrets_data["ACK_DURATION_MS"], ACK_DURATION_MS, "ACK_DURATION_MS"
        )
    if secrets_data.get("DOWNLOAD_FILE_NAME"):
        DOWNLOAD_FILE_NAME = str(secrets_data["DOWNLOAD_FILE_NAME"]).strip()
    if secrets_data.get("CLIPBOARD_MODE"):
        CLIPBOARD_MODE = _clipboard_mode(secrets_data["CLIPBOARD_MODE"], CLIPBOARD_MODE)
    if secrets_data.get("LOG_LEVEL"):
        LOG_LEVEL = str(secrets_data["LOG_LEVEL"]).upper()

ACK_DURATION_SECONDS = ACK_DURATION_MS / 1000
