"""Parsing of maven-metadata.xml for SNAPSHOT sources jars."""

from __future__ import annotations

import re
import xml.etree.ElementTree as ET
from typing import Optional

from .coordinates import SNAPSHOT_SUFFIX


class MetadataError(RuntimeError):
    """Raised when snapshot metadata cannot yield a sources jar version."""


def parse_snapshot_version(xml: str, base_version: str) -> str:
    """Return the timestamped version of the `sources` jar described by `xml`.

    Falls back to `<base>-<timestamp>-<buildNumber>` from the `<snapshot>`
    element when no explicit `sources`/`jar` entry is listed.
    """
    try:
        root = ET.fromstring(xml)
    except ET.ParseError as exc:
        raise MetadataError(f"Invalid snapshot metadata: {exc}") from exc

    namespace = _detect_xml_namespace(root)

    def _tag(name: str) -> str:
        return f"{{{namespace}}}{name}" if namespace else name

    for entry in root.iter(_tag("snapshotVersion")):
        classifier = _text(entry.find(_tag("classifier")))
        extension = _text(entry.find(_tag("extension")))
        value = _text(entry.find(_tag("value")))
        if classifier == "sources" and extension == "jar" and value:
            return value

    snapshot = root.find(f".//{_tag('snapshot')}")
    if snapshot is not None:
        timestamp = _text(snapshot.find(_tag("timestamp")))
        build_number = _text(snapshot.find(_tag("buildNumber")))
        if timestamp and build_number:
            base = base_version
            if base.endswith(SNAPSHOT_SUFFIX):
                base = base[: -len(SNAPSHOT_SUFFIX)]
            return f"{base}-{timestamp}-{build_number}"

    raise MetadataError("No sources jar version found in metadata")


def _text(element: Optional[ET.Element]) -> Optional[str]:
    if element is None or element.text is None:
        return None
    value = element.text.strip()
    return value or None


def _detect_xml_namespace(element: ET.Element) -> str | None:
    match = re.match(r"\{(.+)}", element.tag)
    return match.group(1) if match else None


__all__ = ["MetadataError", "parse_snapshot_version"]
