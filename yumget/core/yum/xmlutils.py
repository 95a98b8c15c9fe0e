# SPDX-License-Identifier: GPL-3.0-or-later
"""Namespace-agnostic helpers for ElementTree.

repomd.xml and primary.xml put everything in default namespaces that changed over
the years, so elements are matched by their local name only.
"""

from typing import Optional
from xml.etree.ElementTree import Element

XML_BASE_ATTR = "{http://www.w3.org/XML/1998/namespace}base"


def local_name(tag: str) -> str:
    """Strip the namespace from an ElementTree tag.

    Examples:
        >>> local_name("{http://linux.duke.edu/metadata/common}package")
        'package'
    """
    return tag.rpartition("}")[2]


def find_child(element: Element, name: str) -> Optional[Element]:
    """Return the first direct child with the given local name."""
    for child in element:
        if local_name(child.tag) == name:
            return child
    return None


def child_text(element: Element, name: str, *, strip: bool = True) -> str:
    child = find_child(element, name)
    if child is None or child.text is None:
        return ""
    return child.text.strip() if strip else child.text
