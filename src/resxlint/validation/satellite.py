"""Satellite (translated) file verification.

Checks each entry of a culture-specific file against the ResourceItem built
from the neutral-language file. Satellite comments are never interpreted:
the base file alone decides parameters, types and variant lists. Nothing a
satellite contains is added to the item set.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping

from resxlint.constants import STRING_TYPE
from resxlint.diagnostics import DiagnosticSink, ErrorTemplate
from resxlint.enums import Policy
from resxlint.model import Enumeration, ResourceItem, ResxEntry
from resxlint.syntax import scan_placeholders
from resxlint.validation.entry import (
    check_format_specifiers,
    parse_include_value,
    report_by_policy,
)

__all__ = ["verify_satellite"]

_UNKNOWN_BASE_FILE = "<base>"


def _verify_value(
    entry: ResxEntry,
    item: ResourceItem,
    sink: DiagnosticSink,
    *,
    policy: Policy,
    file: str,
    base_file: str,
) -> None:
    name, value = entry.name, entry.value

    if item.suppress_validation:
        return

    if Enumeration.guard(item.mode):
        if not item.mode.allows(value):
            sink.error(
                file,
                ErrorTemplate.satellite_value_not_in_variants(
                    name, value, file, base_file, item.mode.describe()
                ),
            )
        return

    scan = scan_placeholders(value)
    if scan.error is not None:
        sink.error(
            file, ErrorTemplate.invalid_format_item(name, scan.error.position, scan.error.message)
        )
        return

    expected = item.expected_placeholder_indexes
    if not scan.matches(expected):
        report_by_policy(
            sink,
            file,
            ErrorTemplate.satellite_placeholder_mismatch(
                name, base_file, file, len(expected), scan.indexes
            ),
            policy,
        )

    check_format_specifiers(name, value, scan.specifier_uses, item.parameters, sink, file)


def verify_satellite(
    file: str,
    entries: Iterable[ResxEntry],
    items: Mapping[str, ResourceItem],
    sink: DiagnosticSink,
    *,
    policy: Policy = Policy.STRICT,
    base_file: str | None = None,
) -> None:
    """Verify a translated file against the base items.

    Args:
        file: Satellite file, every diagnostic is attributed to it
        entries: Satellite entries in source order
        items: Base items by name
        sink: Diagnostic destination
        policy: STRICT reports placeholder mismatches as errors, LENIENT
            as warnings
        base_file: Neutral-language file named in cross-file messages

    Example:
        >>> from resxlint.diagnostics import DiagnosticCollector
        >>> from resxlint.model import Parameter, Parameterized
        >>> items = {"b": ResourceItem("b", "{0}", mode=Parameterized((Parameter("int", "i"),)))}
        >>> sink = DiagnosticCollector()
        >>> verify_satellite("Strings.de.resx", [ResxEntry("b", "d{0}d")], items, sink)
        >>> sink.result().is_valid
        True
    """
    base = base_file if base_file is not None else _UNKNOWN_BASE_FILE

    for entry in entries:
        item = items.get(entry.name)
        if item is None:
            sink.warning(file, ErrorTemplate.satellite_orphan_resource(entry.name, file, base))
            continue

        if entry.is_include:
            parsed = parse_include_value(entry.value)
            if parsed is None:
                sink.error(file, ErrorTemplate.include_value_corrupted(entry.name))
                continue
            entry_type = parsed[1]
        else:
            entry_type = STRING_TYPE

        if entry_type != item.type:
            sink.error(file, ErrorTemplate.satellite_type_mismatch(entry.name, base, file))
            continue

        if not entry.is_include:
            _verify_value(entry, item, sink, policy=policy, file=file, base_file=base)
