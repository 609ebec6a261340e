import re
from typing import Any, Optional


# Whitespace as browsers and Node trim it. Differs from str.isspace():
# includes U+FEFF, excludes U+0085 and the \x1c-\x1f separators.
JS_WHITESPACE = (
    " \t\n\v\f\r\u00a0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000\ufeff"
)


def is_blank(text: Optional[str]) -> bool:
    return not text or not text.strip(JS_WHITESPACE)


def utf16_length(text: str) -> int:
    """Length in UTF-16 code units. Astral characters count twice."""
    return len(text.encode("utf-16-le")) // 2


def normalize_whitespace(text: str) -> str:
    """Collapse runs of whitespace. For display only, never before scoring."""
    text = text or ""
    text = text.strip()
    text = re.sub(r"\s+", " ", text)
    return text


def preview(text: Any, limit: int = 40) -> str:
    """Short single-line preview of a message for logs."""
    text = normalize_whitespace(str(text or ""))
    if len(text) <= limit:
        return text
    return text[: limit - 3] + "..."
