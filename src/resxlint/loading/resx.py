"""Resx container reader.

Reads the <data> entries of a .resx document into ResxEntry records, in
source order. Structural problems of individual entries are diagnostics;
only a document that is not well-formed XML raises.

    <root>
      <data name="Greeting" xml:space="preserve">
        <value>Hello, {0}!</value>
        <comment>{string name}</comment>
      </data>
      <data name="Logo" type="System.Resources.ResXFileRef, System.Windows.Forms">
        <value>logo.png;System.Drawing.Bitmap, System.Drawing</value>
      </data>
    </root>

Python 3.13+.
"""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET
from dataclasses import dataclass
from pathlib import Path

from resxlint.diagnostics import (
    DiagnosticCollector,
    ErrorTemplate,
    ResxFormatError,
    ValidationResult,
)
from resxlint.model import ResxEntry

__all__ = [
    "ReadResult",
    "parse_resx",
    "read_resx",
]

logger = logging.getLogger(__name__)

_ROOT_TAG = "root"
_DATA_TAG = "data"


@dataclass(frozen=True, slots=True)
class ReadResult:
    """Entries of one file plus the structural diagnostics found reading it.

    Attributes:
        entries: Entries with a name and a value, in source order
        result: Structural errors and warnings, attributed to the file
    """

    entries: tuple[ResxEntry, ...]
    result: ValidationResult


def _text(element: ET.Element) -> str:
    return "".join(element.itertext())


def _read_data(
    element: ET.Element, sink: DiagnosticCollector, file: str
) -> ResxEntry | None:
    """Read one <data> element; None if it is unusable."""
    name = element.get("name")
    if name is None:
        sink.error(file, ErrorTemplate.resource_name_missing())
        return None
    name = name.strip()
    type_tag = element.get("type")

    value: str | None = None
    comment: str | None = None
    for child in element:
        match child.tag:
            case "value":
                if value is not None:
                    sink.error(file, ErrorTemplate.resource_value_duplicated(name, value))
                value = _text(child)
            case "comment":
                if comment is not None:
                    sink.error(file, ErrorTemplate.resource_comment_duplicated(name, comment))
                comment = _text(child)
            case _:
                sink.warning(file, ErrorTemplate.unexpected_node(name, str(child.tag)))

    if value is None:
        sink.error(file, ErrorTemplate.resource_value_missing(name))
        return None

    return ResxEntry(
        name=name,
        value=value,
        comment=comment,
        type=type_tag.strip() if type_tag is not None else None,
    )


def parse_resx(source: str | bytes, *, file: str = "<source>") -> ReadResult:
    """Read entries from .resx document text.

    Args:
        source: Document text, or raw bytes honouring the XML encoding
            declaration
        file: Name the diagnostics are attributed to

    Returns:
        ReadResult with the entries and structural diagnostics

    Raises:
        ResxFormatError: If the document is not well-formed XML

    Example:
        >>> result = parse_resx('<root><data name="a"><value>b</value></data></root>')
        >>> result.entries
        (ResxEntry(name='a', value='b', comment=None, type=None),)
    """
    try:
        root = ET.fromstring(source)
    except ET.ParseError as e:
        raise ResxFormatError(str(e), path=file) from e

    sink = DiagnosticCollector()
    if root.tag != _ROOT_TAG:
        sink.error(file, ErrorTemplate.root_element_invalid(str(root.tag)))
        return ReadResult((), sink.result())

    entries: list[ResxEntry] = []
    for element in root.iter(_DATA_TAG):
        entry = _read_data(element, sink, file)
        if entry is not None:
            entries.append(entry)

    logger.debug("Read %d entries from %s", len(entries), file)
    return ReadResult(tuple(entries), sink.result())


def read_resx(path: str | Path) -> ReadResult:
    """Read entries from a .resx file.

    Raises:
        ResxFormatError: If the file cannot be read or is not well-formed XML
    """
    file = str(path)
    try:
        data = Path(path).read_bytes()
    except OSError as e:
        raise ResxFormatError(e.strerror or str(e), path=file) from e
    return parse_resx(data, file=file)
