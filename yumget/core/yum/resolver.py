# SPDX-License-Identifier: GPL-3.0-or-later
"""Matching of user requests against the primary catalog."""

import logging
import re

from yumget.core.constants import MatchMode
from yumget.core.errors import InvalidIdentityFormat, PackageNotFound
from yumget.core.yum.models import PackageCatalog, PackageIdentity, PackageRecord

log = logging.getLogger(__name__)

# name may contain hyphens, version and release may not
PACKAGE_IDENTITY_PATTERN = re.compile(r"^(.+)-([^-]+)-([^-]+)$")


def parse_identity(query: str) -> PackageIdentity:
    """
    Split a name-ver-rel string into its parts.

    The last two hyphen-separated segments are the release and the version,
    everything before them is the name.

    :raises InvalidIdentityFormat: if the string doesn't have three non-empty parts
    """
    match = PACKAGE_IDENTITY_PATTERN.match(query)
    if not match:
        raise InvalidIdentityFormat(query)
    return PackageIdentity(*match.groups())


def select_package(catalog: PackageCatalog, identity: PackageIdentity) -> PackageRecord:
    """
    Pick the record for a name-ver-rel among all architectures and epochs.

    The record with the highest epoch wins. When several records share the
    highest epoch, the first one in document order is returned.

    :raises PackageNotFound: if no record matches
    """
    selected: PackageRecord | None = None
    candidates = 0
    for record in catalog.packages:
        if not identity.matches(record):
            continue
        candidates += 1
        if selected is None or record.epoch > selected.epoch:
            selected = record

    if selected is None:
        raise PackageNotFound(str(identity))

    log.debug(
        "Selected %s (epoch %d, %s) out of %d candidate(s)",
        selected.nvr,
        selected.epoch,
        selected.arch,
        candidates,
    )
    return selected


def find_by_name(catalog: PackageCatalog, name: str) -> list[PackageRecord]:
    """
    Get every record with the given name, regardless of version, in document order.

    :raises PackageNotFound: if no record has that name
    """
    records = [record for record in catalog.packages if record.name == name]
    if not records:
        raise PackageNotFound(name)
    return records


def resolve_packages(
    catalog: PackageCatalog, query: str, match: MatchMode = MatchMode.IDENTITY
) -> list[PackageRecord]:
    """
    Resolve a single user query to the records to download.

    :param catalog: the primary catalog
    :param query: name-ver-rel in identity mode, a bare package name in name mode
    :param match: how to interpret the query
    :return: one record in identity mode, all same-name records in name mode
    """
    if match == MatchMode.NAME:
        log.debug("Searching for all packages named %s", query)
        return find_by_name(catalog, query)

    identity = parse_identity(query)
    log.debug(
        "Searching for package name %s, ver %s, rel %s", identity.name, identity.ver, identity.rel
    )
    return [select_package(catalog, identity)]


def list_catalog(catalog: PackageCatalog) -> list[PackageRecord]:
    """Return every record of the catalog, unfiltered, in document order."""
    return list(catalog.packages)
