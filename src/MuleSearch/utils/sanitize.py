"""Filename sanitizing for search result names."""

from __future__ import annotations

import re
from typing import Final

_UNSAFE_CHAR_RE: Final = re.compile(r"[^a-zA-Z0-9]")
_FALLBACK: Final = "."

_ACCENTED_UPPER: Final = (
    "ÄÁÀÂÆÅÃĂĄǍ"
    "ÉÈÊËĖĘȨĒĔĚ"
    "ÍÌÎÏǏĨĮĪ"
    "ÓÒÔÖŐŒØǑÕȌ"
    "ÚÙÛÜŰǓŨŲŪ"
    "ÝŶŸ"
    "ÇÑÞßĐĎŇČŚŠŽŤÐŁŃǸŊŜŹŻ"
)
_ACCENTED_LOWER: Final = (
    "äáàâæåãăąǎ"
    "éèêëėęȩēĕě"
    "íìîïǐĩįī"
    "óòôöőœøǒõȍ"
    "úùûüűǔũųū"
    "ýŷÿ"
    "çñþđďňčśšžťðłńǹŋŝźż"
)

# Static substitution table for accented Latin letters.
SUBSTITUTIONS: Final[dict[str, str]] = dict.fromkeys(_ACCENTED_UPPER + _ACCENTED_LOWER, ".")


def sanitize_filename(filename: str) -> str:
    """Replace every character outside ``[a-zA-Z0-9]``.

    Characters found in ``SUBSTITUTIONS`` take the mapped replacement; any
    other character becomes ``"."``.

    Args:
        filename: Raw result name.

    Returns:
        Name of the same length made of ASCII letters, digits and
        replacement characters.
    """
    return _UNSAFE_CHAR_RE.sub(lambda m: SUBSTITUTIONS.get(m.group(0), _FALLBACK), filename)
