"""Pure text transforms applied by the cleanup toolbar.

Every function maps a string to a new string and never raises; input that
does not match a pattern passes through unchanged.
"""
from __future__ import annotations
import re

__all__ = [
    "clean_formatting",
    "fix_spacing",
    "sentence_case",
    "title_case",
]

# (pattern, replacement) pairs, applied in order
_CHAR_REPLACEMENTS: list[tuple[str, str]] = [
    ("[\u200b\u200c\u200d\ufeff]", ""),  # zero-width characters and BOM
    ("\u00a0", " "),
    ("[\u201c\u201d]", '"'),
    ("[\u2018\u2019]", "'"),
    ("[\u2013\u2014]", "-"),
    ("\u2026", "..."),
]

_BOLD_RE = re.compile(r"(?:\*\*|__)(.*?)(?:\*\*|__)")
_ITALIC_RE = re.compile(r"(?:\*|_)(.*?)(?:\*|_)")
_HEADING_RE = re.compile(r"^#{1,6}\s+", re.MULTILINE)
_BLOCKQUOTE_RE = re.compile(r"^>\s+", re.MULTILINE)
_INLINE_CODE_RE = re.compile(r"`(.*?)`")
_BR_TAG_RE = re.compile(r"<br\s*/?>", re.IGNORECASE)

_SENTENCE_START_RE = re.compile(r"(^\s*|[.!?]\s+|\n\s*)([a-z])")
_PRONOUN_FIXES: list[tuple[re.Pattern[str], str]] = [
    (re.compile(r"\bi\b"), "I"),
    (re.compile(r"\bi'm\b"), "I'm"),
    (re.compile(r"\bi've\b"), "I've"),
    (re.compile(r"\bi'll\b"), "I'll"),
]

_WORD_START_RE = re.compile(r"(^|[\s-])([^\W\d_])")


def clean_formatting(text: str) -> str:
    """Strip markdown and chat-assistant formatting artifacts from *text*.

    Typographic characters are normalised first (invisible characters,
    non-breaking spaces, curly quotes, dashes, ellipsis). Markdown markup is
    then removed while keeping the wrapped text: bold before italics so that
    ``**bold**`` is never split into single-star fragments, followed by
    headings, blockquotes, inline code and finally ``<br>`` tags, which become
    newlines.
    """
    for pattern, replacement in _CHAR_REPLACEMENTS:
        text = re.sub(pattern, replacement, text)

    text = _BOLD_RE.sub(r"\1", text)
    text = _ITALIC_RE.sub(r"\1", text)
    text = _HEADING_RE.sub("", text)
    text = _BLOCKQUOTE_RE.sub("", text)
    text = _INLINE_CODE_RE.sub(r"\1", text)
    return _BR_TAG_RE.sub("\n", text)


def fix_spacing(text: str) -> str:
    """Return *text* with normalised whitespace.

    Runs of spaces/tabs collapse to one space, trailing blanks are removed
    from each line, blank-line runs are capped at one empty line and the
    result is trimmed. Applying it twice gives the same result as once.
    """
    text = re.sub(r"[ \t]{2,}", " ", text)
    text = re.sub(r"[ \t]+$", "", text, flags=re.MULTILINE)
    text = re.sub(r"\n{3,}", "\n\n", text)
    return text.strip()


def sentence_case(text: str) -> str:
    """Lowercase *text* and capitalise the first letter of every sentence.

    A sentence starts at the beginning of the text, after ``.``, ``!`` or
    ``?`` followed by whitespace, or after a newline. The pronoun ``I`` and
    its common contractions are restored afterwards; other proper nouns keep
    the lowercase form.
    """
    text = text.lower()
    text = _SENTENCE_START_RE.sub(lambda m: m.group(1) + m.group(2).upper(), text)
    for pattern, replacement in _PRONOUN_FIXES:
        text = pattern.sub(replacement, text)
    return text


def title_case(text: str) -> str:
    """Lowercase *text* and capitalise the first letter of every word.

    Words start at the beginning of the text, after whitespace or after a
    hyphen, so ``quick-brown`` becomes ``Quick-Brown``.
    """
    text = text.lower()
    return _WORD_START_RE.sub(lambda m: m.group(1) + m.group(2).upper(), text)
