"""Locale utilities for culture-name recognition.

Satellite resource files carry a culture name between the base name and the
extension ("Strings.de-DE.resx"). Babel's CLDR data decides whether such a
segment names a real culture or is just part of the file name
("Strings.Designer.resx").

Python 3.13+.
"""

from __future__ import annotations

import functools
import logging
import re
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from babel import Locale

__all__ = [
    "get_babel_locale",
    "is_culture_name",
    "normalize_locale",
]

logger = logging.getLogger(__name__)

# Culture names are 2-20 letters and hyphens: "de", "pt-BR", "zh-Hans", "sr-Latn-RS".
_CULTURE_SHAPE: re.Pattern[str] = re.compile(r"[A-Za-z][A-Za-z-]{1,19}")


def normalize_locale(locale_code: str) -> str:
    """Convert BCP-47 locale code to POSIX format for Babel.

    BCP-47 uses hyphens (en-US), while Babel/POSIX uses underscores (en_US).

    Args:
        locale_code: BCP-47 locale code (e.g., "en-US", "pt-BR")

    Returns:
        POSIX-formatted locale code (e.g., "en_US", "pt_BR")

    Example:
        >>> normalize_locale("en-US")
        'en_US'
        >>> normalize_locale("en")  # Already normalized
        'en'
    """
    return locale_code.replace("-", "_")


@functools.lru_cache(maxsize=128)
def get_babel_locale(locale_code: str) -> Locale:
    """Get a Babel Locale object with caching.

    Thread-safe via lru_cache internal locking.

    Args:
        locale_code: Locale code (BCP-47 or POSIX format accepted)

    Returns:
        Babel Locale object

    Raises:
        babel.core.UnknownLocaleError: If locale is not recognized
        ValueError: If locale format is invalid

    Example:
        >>> locale = get_babel_locale("pt-BR")
        >>> locale.language
        'pt'
        >>> locale.territory
        'BR'
    """
    # Lazy import: Babel loads CLDR data at import time; defer until needed
    from babel import Locale  # noqa: PLC0415

    normalized = normalize_locale(locale_code)
    return Locale.parse(normalized)


@functools.lru_cache(maxsize=256)
def is_culture_name(segment: str) -> bool:
    """Check whether a file-name segment is a culture name.

    Args:
        segment: Text between the last two dots of "Name.<segment>.resx"

    Returns:
        True if the segment has culture-name shape and Babel knows the locale

    Example:
        >>> is_culture_name("de-DE")
        True
        >>> is_culture_name("Designer")
        False
    """
    from babel import UnknownLocaleError  # noqa: PLC0415

    if _CULTURE_SHAPE.fullmatch(segment) is None:
        return False
    try:
        get_babel_locale(segment)
    except (UnknownLocaleError, ValueError):
        logger.debug("Not a culture name: %s", segment)
        return False
    return True
