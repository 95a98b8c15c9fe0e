# SPDX-License-Identifier: GPL-3.0-or-later
"""Resolution of the relative references found in Yum metadata."""

import re
from pathlib import PurePosixPath
from urllib.parse import unquote, urljoin, urlsplit

from yumget.core.errors import InvalidReference
from yumget.core.yum.models import Location

_CONTROL_CHARS = re.compile(r"[\x00-\x1f\x7f]")
_BAD_PERCENT_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2})")


def _check_reference(reference: str) -> None:
    if _CONTROL_CHARS.search(reference):
        raise InvalidReference(reference, "contains control characters")
    if _BAD_PERCENT_ESCAPE.search(reference):
        raise InvalidReference(reference, "contains an invalid percent-escape")
    try:
        urlsplit(reference)
    except ValueError as e:
        raise InvalidReference(reference, str(e)) from e


def resolve_location(base: str, relative: str) -> str:
    """Resolve a reference against a base URL, as a browser would.

    :param base: absolute URL, e.g. the repository URL
    :param relative: relative (or absolute) reference, e.g. "repodata/repomd.xml"
    :return: the absolute URL
    :raises InvalidReference: if the reference is not syntactically valid
    """
    _check_reference(relative)
    return urljoin(base, relative)


def filename_from_location(url: str) -> str:
    """Get the name a file downloaded from this URL is saved under.

    Examples:
        >>> filename_from_location("https://example.org/repo/Packages/b/bash-5.1-1.x86_64.rpm")
        'bash-5.1-1.x86_64.rpm'
    """
    name = PurePosixPath(unquote(urlsplit(url).path)).name
    if name in ("", ".", ".."):
        raise InvalidReference(url, "does not end with a file name")
    return name


def location_url(repo_url: str, location: Location) -> str:
    """Get the absolute URL of a <location> element.

    A relative xml:base is resolved against the repository URL first, then the
    href is resolved against the resulting base.

    :raises InvalidReference: if the href or the base is not syntactically valid
    """
    base = resolve_location(repo_url, location.base) if location.base else repo_url
    return resolve_location(base, location.href)
