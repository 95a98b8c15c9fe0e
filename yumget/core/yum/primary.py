# SPDX-License-Identifier: GPL-3.0-or-later
"""Parser for the primary catalog (repodata/*-primary.xml[.gz|.bz2|.xz])."""

import logging
from typing import Any, BinaryIO
from xml.etree import ElementTree
from xml.etree.ElementTree import Element

from pydantic import ValidationError

from yumget.core.errors import MalformedMetadata, UnsupportedEncoding
from yumget.core.yum.decompression import DECOMPRESSION_ERRORS
from yumget.core.yum.models import PackageCatalog, PackageRecord
from yumget.core.yum.xmlutils import XML_BASE_ATTR, child_text, find_child, local_name

log = logging.getLogger(__name__)


def _package_fields(element: Element) -> dict[str, Any]:
    fields: dict[str, Any] = {
        "name": child_text(element, "name"),
        "arch": child_text(element, "arch"),
        "summary": child_text(element, "summary", strip=False),
    }

    if (version := find_child(element, "version")) is not None:
        fields["version"] = {
            key: value
            for key in ("epoch", "ver", "rel")
            # a missing or empty epoch means 0
            if (value := version.get(key))
        }

    if (checksum := find_child(element, "checksum")) is not None:
        fields["checksum"] = {
            "type": checksum.get("type", ""),
            "value": (checksum.text or "").strip(),
        }

    if (location := find_child(element, "location")) is not None:
        fields["location"] = {
            "href": location.get("href", ""),
            "base": location.get(XML_BASE_ATTR),
        }

    return fields


def _parse_package(element: Element) -> PackageRecord:
    try:
        return PackageRecord.model_validate(_package_fields(element))
    except ValidationError as e:
        loc = e.errors()[0]["loc"]
        msg = e.errors()[0]["msg"]
        name = child_text(element, "name") or "<unnamed>"
        raise MalformedMetadata(
            f"Primary metadata entry for package {name!r} is not valid: '{loc}: {msg}'"
        ) from e


def parse_primary(stream: BinaryIO) -> PackageCatalog:
    """
    Parse the primary catalog incrementally.

    Only <package> elements directly under the root are considered, in document order.

    :param stream: the decompressed primary.xml
    :raises MalformedMetadata: if the document can't be parsed
    :raises UnsupportedEncoding: if the stream can't be decompressed
    """
    packages: list[PackageRecord] = []
    depth = 0
    try:
        for event, element in ElementTree.iterparse(stream, events=("start", "end")):
            if event == "start":
                depth += 1
                continue
            depth -= 1
            if depth == 1 and local_name(element.tag) == "package":
                packages.append(_parse_package(element))
                element.clear()
    except ElementTree.ParseError as e:
        raise MalformedMetadata(f"Failed to decode primary metadata as XML: {e}") from e
    except DECOMPRESSION_ERRORS as e:
        raise UnsupportedEncoding(f"Failed to decompress primary metadata: {e}") from e

    log.debug("Primary metadata lists %d packages", len(packages))
    return PackageCatalog(packages=tuple(packages))
