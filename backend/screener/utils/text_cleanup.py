"""
Text cleanup utilities for raw resume text extraction.
"""

from __future__ import annotations

import re
import unicodedata

# Typographic characters that PDF/DOCX decoders emit, mapped to plain ASCII
_REPLACEMENTS = {
    "\u2019": "'",   # right single quote
    "\u2018": "'",   # left single quote
    "\u201c": '"',   # left double quote
    "\u201d": '"',   # right double quote
    "\u2013": "-",   # en-dash
    "\u2014": "-",   # em-dash
    "\u2026": "...", # ellipsis
    "\u00a0": " ",   # non-breaking space
    "\u200b": "",    # zero-width space
    "\ufeff": "",    # BOM
}

_CID_RE = re.compile(r"\(cid:\d+\)")


def normalize_text(text: str) -> str:
    """Normalize unicode and whitespace in decoded document text.

    Line structure is kept: the name heuristic and the skills-section scan
    both depend on line boundaries and blank lines.
    """
    text = unicodedata.normalize("NFKC", text)
    for old, new in _REPLACEMENTS.items():
        text = text.replace(old, new)

    # pdfminer glyph artifacts
    text = _CID_RE.sub("", text)

    text = re.sub(r"[ \t]+", " ", text)
    text = re.sub(r"\n{3,}", "\n\n", text)

    lines = [line.strip() for line in text.splitlines()]
    return "\n".join(lines).strip()
