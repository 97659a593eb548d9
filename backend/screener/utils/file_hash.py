"""
File hashing utility — MD5 hash used to tag sessions with the uploaded document.
"""

import hashlib


def md5_hash(data: bytes) -> str:
    """Return hex MD5 digest of raw bytes."""
    return hashlib.md5(data).hexdigest()


def text_hash(text: str) -> str:
    """Return hex MD5 digest of UTF-8 text (for pasted resumes)."""
    return md5_hash(text.encode("utf-8"))
