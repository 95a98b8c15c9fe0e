# SPDX-License-Identifier: GPL-3.0-or-later
"""Parser for the repository metadata index (repodata/repomd.xml)."""

import logging
from typing import Any
from xml.etree import ElementTree
from xml.etree.ElementTree import Element

from pydantic import ValidationError

from yumget.core.errors import MalformedMetadata
from yumget.core.yum.models import CatalogDescriptor, RepoMD
from yumget.core.yum.xmlutils import XML_BASE_ATTR, child_text, find_child, local_name

log = logging.getLogger(__name__)


def _checksum_fields(element: Element | None) -> dict[str, str]:
    if element is None:
        return {}
    return {"type": element.get("type", ""), "value": (element.text or "").strip()}


def _location_fields(element: Element | None) -> dict[str, Any]:
    if element is None:
        return {}
    return {"href": element.get("href", ""), "base": element.get(XML_BASE_ATTR)}


def _descriptor_fields(element: Element) -> dict[str, Any]:
    fields: dict[str, Any] = {
        "kind": element.get("type", ""),
        "checksum": _checksum_fields(find_child(element, "checksum")),
        "location": _location_fields(find_child(element, "location")),
    }
    for optional in ("timestamp", "size"):
        if value := child_text(element, optional):
            fields[optional] = value
    return fields


def parse_repomd(data: bytes) -> RepoMD:
    """
    Parse repomd.xml.

    :param data: raw content of repomd.xml
    :return: the metadata index, descriptors in document order
    :raises MalformedMetadata: if the document can't be parsed
    """
    try:
        root = ElementTree.fromstring(data)
    except ElementTree.ParseError as e:
        raise MalformedMetadata(f"Failed to decode repo metadata as XML: {e}") from e

    descriptors = [
        _descriptor_fields(child) for child in root if local_name(child.tag) == "data"
    ]
    try:
        repomd = RepoMD.model_validate(
            {"revision": child_text(root, "revision") or None, "data": descriptors}
        )
    except ValidationError as e:
        loc = e.errors()[0]["loc"]
        msg = e.errors()[0]["msg"]
        raise MalformedMetadata(f"Repo metadata format is not valid: '{loc}: {msg}'") from e

    log.debug(
        "Repo metadata revision %s lists: %s",
        repomd.revision,
        ", ".join(descriptor.kind for descriptor in repomd.data),
    )
    return repomd


def find_primary(repomd: RepoMD) -> CatalogDescriptor:
    """
    Find the primary catalog in the metadata index; the first one wins.

    :raises PrimaryNotFound: if there is no primary catalog
    """
    return repomd.find_primary()
