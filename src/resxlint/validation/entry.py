"""Base-file entry validation.

Turns one ResxEntry of the neutral-language file into a ResourceItem,
reporting every problem through the caller's DiagnosticSink. An entry that
produced an error yields no item.

Checks for a string entry, in order:
    1. Comment grammar (parse_comment)
    2. Enumeration: value must be one of the declared variants
    3. Placeholder syntax (scan_placeholders)
    4. Declared parameters vs. placeholder indexes
    5. Format specifiers vs. declared parameter types

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from resxlint.diagnostics import Diagnostic, DiagnosticSink, ErrorTemplate
from resxlint.enums import Policy, SpecifierCheck
from resxlint.model import (
    Enumeration,
    Parameter,
    Plain,
    ResourceItem,
    ResxEntry,
    Suppressed,
)
from resxlint.syntax import ScanResult, parse_comment, scan_placeholders
from resxlint.validation.specifiers import check_specifier

__all__ = [
    "check_format_specifiers",
    "parse_include_value",
    "report_by_policy",
    "validate_entry",
    "validate_include_entry",
    "validate_string_entry",
]


def report_by_policy(
    sink: DiagnosticSink,
    file: str | None,
    diagnostic: Diagnostic,
    policy: Policy,
) -> None:
    """Send a policy-gated diagnostic: error when strict, warning when lenient."""
    if policy is Policy.STRICT:
        sink.error(file, diagnostic)
    else:
        sink.warning(file, diagnostic)


def _report_scan_error(
    sink: DiagnosticSink, file: str | None, name: str, scan: ScanResult
) -> bool:
    """Report a scan failure. Returns True if the value was malformed."""
    if scan.error is None:
        return False
    sink.error(
        file, ErrorTemplate.invalid_format_item(name, scan.error.position, scan.error.message)
    )
    return True


def check_format_specifiers(
    name: str,
    value: str,
    uses: Iterable[tuple[int, str]],
    parameters: Sequence[Parameter],
    sink: DiagnosticSink,
    file: str | None = None,
) -> bool:
    """Check every specifier against the parameter bound to its index.

    Diagnostics follow the order of `uses`. Indexes without a declared
    parameter are skipped; the index checks report those.

    Args:
        name: Resource name
        value: Value the placeholders came from (quoted in text warnings)
        uses: Distinct (index, specifier) pairs in source order
        parameters: Declared parameters, position i binds index i
        sink: Diagnostic destination
        file: File the diagnostics are attributed to

    Returns:
        False if any specifier is invalid (warnings do not count)
    """
    valid = True
    for index, specifier in uses:
        if index >= len(parameters):
            continue
        parameter = parameters[index]
        match check_specifier(parameter.type, specifier):
            case SpecifierCheck.INVALID:
                sink.error(
                    file,
                    ErrorTemplate.invalid_format_specifier(
                        name, specifier, parameter.name, parameter.type
                    ),
                )
                valid = False
            case SpecifierCheck.VALID_WITH_WARNING:
                sink.warning(
                    file,
                    ErrorTemplate.specifier_on_text(name, specifier, parameter.name, value),
                )
            case SpecifierCheck.VALID:
                pass
    return valid


def _check_declared_indexes(
    name: str, scan: ScanResult, declared: int, sink: DiagnosticSink, file: str | None
) -> bool:
    """Placeholder indexes must be exactly 0..declared-1."""
    if scan.count == 0:
        sink.error(file, ErrorTemplate.format_items_missing(name))
        return False

    if scan.count != declared:
        index = scan.first_out_of_range(declared)
        if index is None:
            index = scan.first_missing(declared)
        assert index is not None  # Type narrowing: counts differ
        sink.error(file, ErrorTemplate.placeholder_count_mismatch(name, index, declared))
        return False

    missing = scan.first_missing(declared)
    if missing is not None:
        sink.error(file, ErrorTemplate.placeholder_not_used(name, missing))
        return False

    return True


def validate_string_entry(
    entry: ResxEntry,
    sink: DiagnosticSink,
    *,
    policy: Policy = Policy.STRICT,
    file: str | None = None,
) -> ResourceItem | None:
    """Validate a base-file string entry against its own comment.

    Args:
        entry: Entry from the neutral-language file
        sink: Diagnostic destination
        policy: STRICT reports placeholders without a declaration as an
            error; LENIENT as a warning and keeps the item
        file: File the diagnostics are attributed to

    Returns:
        The resolved ResourceItem, or None if the entry produced an error

    Example:
        >>> from resxlint.diagnostics import DiagnosticCollector
        >>> sink = DiagnosticCollector()
        >>> item = validate_string_entry(ResxEntry("a", "{0} of {1}", "{int i, int n}"), sink)
        >>> item.parameters_invocation()
        'i, n'
    """
    name, value = entry.name, entry.value
    mode = parse_comment(name, entry.comment)
    if isinstance(mode, Diagnostic):
        sink.error(file, mode)
        return None

    if Suppressed.guard(mode):
        return ResourceItem(name, value, mode=mode)

    if Enumeration.guard(mode):
        if not mode.allows(value):
            sink.error(file, ErrorTemplate.value_not_in_variants(name, value, mode.describe()))
            return None
        return ResourceItem(name, value, mode=mode)

    scan = scan_placeholders(value)
    if _report_scan_error(sink, file, name, scan):
        return None

    if Plain.guard(mode):
        if scan.count > 0:
            report_by_policy(
                sink, file, ErrorTemplate.parameters_declaration_missing(name), policy
            )
            if policy is Policy.STRICT:
                return None
        return ResourceItem(name, value, mode=mode, placeholder_indexes=scan.indexes)

    parameters = mode.parameters
    if not _check_declared_indexes(name, scan, len(parameters), sink, file):
        return None
    if not check_format_specifiers(name, value, scan.specifier_uses, parameters, sink, file):
        return None
    return ResourceItem(name, value, mode=mode, placeholder_indexes=scan.indexes)


def parse_include_value(value: str) -> tuple[str, str] | None:
    """Split an include value into (file, type).

    Include values look like "<file>;<type>, <assembly>[, ...]".

    Example:
        >>> parse_include_value(r"Resources\\logo.png;System.Drawing.Bitmap, System.Drawing")
        ('Resources\\\\logo.png', 'System.Drawing.Bitmap')
        >>> parse_include_value("logo.png") is None
        True
    """
    parts = value.split(";")
    if len(parts) < 2:
        return None
    type_parts = parts[1].split(",")
    if len(type_parts) < 2:
        return None
    return parts[0], type_parts[0].strip()


def validate_include_entry(
    entry: ResxEntry,
    sink: DiagnosticSink,
    *,
    file: str | None = None,
) -> ResourceItem | None:
    """Validate an entry that references an external file.

    The comment of an include entry is never interpreted.
    """
    parsed = parse_include_value(entry.value)
    if parsed is None:
        sink.error(file, ErrorTemplate.include_value_corrupted(entry.name))
        return None
    path, type_name = parsed
    return ResourceItem(entry.name, f'content of the file: "{path}"', type=type_name)


def validate_entry(
    entry: ResxEntry,
    sink: DiagnosticSink,
    *,
    policy: Policy = Policy.STRICT,
    file: str | None = None,
) -> ResourceItem | None:
    """Dispatch to the include or string validator."""
    if entry.is_include:
        return validate_include_entry(entry, sink, file=file)
    return validate_string_entry(entry, sink, policy=policy, file=file)
