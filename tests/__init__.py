"""Tests for the plain text cleaner."""
