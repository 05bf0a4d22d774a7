"""Resource group validation.

One pass over a resource group: validate the base file entries into
ResourceItems, then, only if the base file is clean, verify every satellite
against them. A group that produced any error exposes no items, so no
accessor is ever generated from a broken group; sibling groups are
unaffected.

No module-level state: each call owns its DiagnosticCollector, so groups can
be validated concurrently and their results merged by the caller.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass
from pathlib import Path

from resxlint.diagnostics import (
    Diagnostic,
    DiagnosticCollector,
    DiagnosticSink,
    ErrorTemplate,
    ResxFormatError,
    ValidationResult,
)
from resxlint.enums import Policy
from resxlint.loading import ResourceGroup, discover_groups, read_resx
from resxlint.model import ResourceItem, ResxEntry
from resxlint.validation.entry import validate_entry
from resxlint.validation.satellite import verify_satellite

__all__ = [
    "GroupResult",
    "validate_files",
    "validate_group",
    "validate_project",
]

logger = logging.getLogger(__name__)

type SatelliteEntries = (
    Mapping[str, Iterable[ResxEntry]] | Iterable[tuple[str, Iterable[ResxEntry]]]
)


@dataclass(frozen=True, slots=True)
class GroupResult:
    """Outcome of validating one resource group.

    Attributes:
        items: Base items in source order; empty if the group has any error
        result: Every diagnostic of the group
    """

    items: tuple[ResourceItem, ...]
    result: ValidationResult

    @property
    def is_valid(self) -> bool:
        """True if the group produced no errors."""
        return self.result.is_valid


class _ForwardingSink:
    """Collects diagnostics and forwards each one to a caller-owned sink."""

    __slots__ = ("_collector", "_sink")

    def __init__(self, collector: DiagnosticCollector, sink: DiagnosticSink) -> None:
        self._collector = collector
        self._sink = sink

    @property
    def error_count(self) -> int:
        return self._collector.error_count

    def error(self, file: str | None, diagnostic: Diagnostic) -> None:
        self._collector.error(file, diagnostic)
        self._sink.error(file, diagnostic)

    def warning(self, file: str | None, diagnostic: Diagnostic) -> None:
        self._collector.warning(file, diagnostic)
        self._sink.warning(file, diagnostic)


def _group_sink(sink: DiagnosticSink | None) -> tuple[DiagnosticCollector, DiagnosticSink]:
    collector = DiagnosticCollector()
    if sink is None:
        return collector, collector
    return collector, _ForwardingSink(collector, sink)


def _unique_entries(
    entries: Iterable[ResxEntry], sink: DiagnosticSink, file: str
) -> Iterator[ResxEntry]:
    """Yield entries with distinct names; later duplicates are errors."""
    seen: set[str] = set()
    for entry in entries:
        if entry.name in seen:
            sink.error(file, ErrorTemplate.resource_name_duplicated(entry.name))
            continue
        seen.add(entry.name)
        yield entry


def _run_group(
    base_file: str,
    base_entries: Iterable[ResxEntry],
    satellites: SatelliteEntries,
    sink: DiagnosticSink,
    policy: Policy,
) -> tuple[ResourceItem, ...]:
    items: dict[str, ResourceItem] = {}
    for entry in _unique_entries(base_entries, sink, base_file):
        item = validate_entry(entry, sink, policy=policy, file=base_file)
        if item is None:
            logger.debug("Rejected %s in %s", entry.name, base_file)
            continue
        items[item.name] = item

    if sink.error_count > 0:
        logger.info("Skipping satellites of %s: base file has errors", base_file)
        return ()

    pairs = satellites.items() if isinstance(satellites, Mapping) else satellites
    for file, entries in pairs:
        verify_satellite(
            file,
            _unique_entries(entries, sink, file),
            items,
            sink,
            policy=policy,
            base_file=base_file,
        )

    if sink.error_count > 0:
        return ()
    return tuple(items.values())


def _finish(
    base_file: str, items: tuple[ResourceItem, ...], collector: DiagnosticCollector
) -> GroupResult:
    result = collector.result()
    logger.info(
        "Validated %s: %d item(s), %d error(s), %d warning(s)",
        base_file,
        len(items),
        result.error_count,
        result.warning_count,
    )
    return GroupResult(items, result)


def validate_group(
    base_file: str,
    base_entries: Iterable[ResxEntry],
    satellites: SatelliteEntries = (),
    *,
    policy: Policy = Policy.STRICT,
    sink: DiagnosticSink | None = None,
) -> GroupResult:
    """Validate a base file and its satellites from already-read entries.

    Args:
        base_file: Neutral-language file name, used for attribution
        base_entries: Base entries in source order
        satellites: Satellite file name -> entries, as a mapping or pairs
        policy: Strictness for undeclared parameters and satellite mismatches
        sink: Optional caller-owned sink that also receives every diagnostic

    Returns:
        GroupResult with the items (empty on any error) and diagnostics

    Example:
        >>> result = validate_group(
        ...     "Strings.resx",
        ...     [ResxEntry("greeting", "Hello, {0}!", "{string name}")],
        ...     {"Strings.de.resx": [ResxEntry("greeting", "Hallo, {0}!")]},
        ... )
        >>> [item.name for item in result.items]
        ['greeting']
    """
    collector, target = _group_sink(sink)
    items = _run_group(base_file, base_entries, satellites, target, policy)
    return _finish(base_file, items, collector)


def _read_into(path: str | Path, sink: DiagnosticSink) -> tuple[ResxEntry, ...] | None:
    """Read a file, forwarding its structural diagnostics to the sink.

    Returns:
        Entries, or None if the file could not be parsed at all
    """
    try:
        read = read_resx(path)
    except ResxFormatError as e:
        logger.warning("Cannot read %s: %s", e.path, e)
        sink.error(e.path, ErrorTemplate.file_unreadable(e.path, str(e)))
        return None
    for diagnostic in read.result.errors:
        sink.error(diagnostic.file, diagnostic)
    for diagnostic in read.result.warnings:
        sink.warning(diagnostic.file, diagnostic)
    return read.entries


def validate_files(
    base_path: str | Path,
    satellite_paths: Iterable[str | Path] = (),
    *,
    policy: Policy = Policy.STRICT,
    sink: DiagnosticSink | None = None,
) -> GroupResult:
    """Read and validate one resource group from disk.

    Satellites are read only once the base file is known to be clean.
    """
    collector, target = _group_sink(sink)
    base_file = str(base_path)
    base_entries = _read_into(base_path, target)
    if base_entries is None:
        return GroupResult((), collector.result())

    def _satellites() -> Iterator[tuple[str, tuple[ResxEntry, ...]]]:
        for path in satellite_paths:
            entries = _read_into(path, target)
            if entries is not None:
                yield str(path), entries

    items = _run_group(base_file, base_entries, _satellites(), target, policy)
    return _finish(base_file, items, collector)


def validate_project(
    paths: Iterable[str | Path],
    *,
    policy: Policy = Policy.STRICT,
    sink: DiagnosticSink | None = None,
) -> dict[ResourceGroup, GroupResult]:
    """Discover resource groups under `paths` and validate each one.

    Args:
        paths: .resx files and directories (searched recursively)
        policy: Strictness for undeclared parameters and satellite mismatches
        sink: Optional caller-owned sink that receives every diagnostic

    Returns:
        GroupResult per discovered group, in base-path order
    """
    return {
        group: validate_files(group.base, group.satellites, policy=policy, sink=sink)
        for group in discover_groups(paths)
    }
