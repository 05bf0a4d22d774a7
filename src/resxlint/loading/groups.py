"""Resource group discovery.

A resource group is one neutral-language file plus its translations in the
same directory:

    Strings.resx          base
    Strings.de.resx       satellite (culture "de")
    Strings.pt-BR.resx    satellite (culture "pt-BR")
    Strings.Designer.resx base of its own ("Designer" is not a culture)

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

from resxlint.locale_utils import is_culture_name

__all__ = [
    "ResourceGroup",
    "discover_groups",
    "expand_paths",
    "split_culture",
]

logger = logging.getLogger(__name__)

RESX_SUFFIX = ".resx"


@dataclass(frozen=True, slots=True)
class ResourceGroup:
    """Base file and its satellites.

    Attributes:
        base: Neutral-language file
        satellites: Culture-specific files, sorted by path
    """

    base: Path
    satellites: tuple[Path, ...] = ()


def split_culture(path: Path) -> tuple[str, str | None]:
    """Split a .resx file name into (base stem, culture).

    Example:
        >>> split_culture(Path("Strings.de-DE.resx"))
        ('Strings', 'de-DE')
        >>> split_culture(Path("Strings.Designer.resx"))
        ('Strings.Designer', None)
    """
    stem = path.stem
    head, dot, segment = stem.rpartition(".")
    if dot and head and is_culture_name(segment):
        return head, segment
    return stem, None


def expand_paths(paths: Iterable[str | Path]) -> list[Path]:
    """Collect .resx files; directories are searched recursively.

    Returns:
        Distinct files, sorted
    """
    files: set[Path] = set()
    for raw in paths:
        path = Path(raw)
        if path.is_dir():
            files.update(
                p for p in path.rglob("*") if p.is_file() and p.name.lower().endswith(RESX_SUFFIX)
            )
        elif path.is_file():
            files.add(path)
        else:
            logger.warning("Path does not exist: %s", path)
    return sorted(files)


def discover_groups(paths: Iterable[str | Path]) -> list[ResourceGroup]:
    """Group .resx files into base files and their satellites.

    Args:
        paths: Files and directories

    Returns:
        Groups sorted by base path. Satellites whose base file is not among
        the inputs are logged and skipped.
    """
    bases: dict[tuple[Path, str], Path] = {}
    satellites: dict[tuple[Path, str], list[Path]] = {}

    for file in expand_paths(paths):
        stem, culture = split_culture(file)
        key = (file.parent, stem)
        if culture is None:
            bases[key] = file
        else:
            satellites.setdefault(key, []).append(file)

    for key, files in satellites.items():
        if key not in bases:
            for file in files:
                logger.warning("No base resource file for satellite: %s", file)

    groups = [
        ResourceGroup(base, tuple(sorted(satellites.get(key, ()))))
        for key, base in bases.items()
    ]
    groups.sort(key=lambda group: group.base)
    logger.info("Discovered %d resource group(s)", len(groups))
    return groups
