from __future__ import annotations

import re

"""Column header normalization.

Turns a raw spreadsheet header into the key used in output records, either as
camelCase (default) or as the trimmed, whitespace-collapsed original text.
"""

__all__ = [
    "normalize_header",
]

_WHITESPACE_RE = re.compile(r"\s+")
# 区切り文字: 空白 / ハイフン / アンダースコア / ピリオド (連続は 1 つ扱い)
_SEPARATOR_RE = re.compile(r"[\s\-_.]+")


def _collapse_whitespace(header: object) -> str:
    return _WHITESPACE_RE.sub(" ", str(header).strip())


def normalize_header(header: object, camel_case: bool = True) -> str:
    """Normalize one raw header.

    Args:
        header: Raw header cell (converted with ``str``)
        camel_case: When False only trim and collapse whitespace; other
            separators are kept literally

    Returns:
        Normalized key. Empty string when the header holds no word at all;
        callers drop such columns.

    Examples:
        >>> normalize_header("First Name")
        'firstName'
        >>> normalize_header("total.amount")
        'totalAmount'
        >>> normalize_header("  First   Name ", camel_case=False)
        'First Name'
    """
    collapsed = _collapse_whitespace(header)
    if not camel_case:
        return collapsed

    words = [w for w in _SEPARATOR_RE.split(collapsed) if w]
    if not words:
        return ""
    head, *tail = words
    return head.lower() + "".join(w[:1].upper() + w[1:].lower() for w in tail)
