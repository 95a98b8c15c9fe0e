# SPDX-License-Identifier: GPL-3.0-or-later
"""Main logic for listing and downloading packages from a Yum repository."""

import io
import logging
from collections.abc import Iterator
from pathlib import Path

from yumget.core.checksum import ChecksumInfo, must_match_data_checksum
from yumget.core.config import Config
from yumget.core.constants import REPOMD_PATH
from yumget.core.models.input import Request
from yumget.core.yum.decompression import select_decoder
from yumget.core.yum.fetcher import fetch_bytes
from yumget.core.yum.location import filename_from_location, location_url, resolve_location
from yumget.core.yum.models import PackageCatalog
from yumget.core.yum.primary import parse_primary
from yumget.core.yum.repomd import find_primary, parse_repomd
from yumget.core.yum.resolver import list_catalog, resolve_packages
from yumget.core.yum.retriever import check_destination, package_url, retrieve, save_package

log = logging.getLogger(__name__)


def load_catalog(request: Request, config: Config) -> PackageCatalog:
    """
    Download and parse the primary catalog of the requested repository.

    :param request: the run request, provides the repository URL
    :param config: provides the request timeout
    :return: every package of the repository, in document order
    """
    repomd_url = resolve_location(request.repo_url, REPOMD_PATH)
    log.debug("Downloading repo metadata from %s", repomd_url)
    repomd = parse_repomd(fetch_bytes(repomd_url, timeout=config.requests_timeout))

    primary = find_primary(repomd)
    primary_url = location_url(request.repo_url, primary.location)
    log.debug("Downloading primary metadata from %s", primary_url)
    data = fetch_bytes(primary_url, timeout=config.requests_timeout)

    if request.verify_checksums:
        must_match_data_checksum(
            data,
            ChecksumInfo.from_yum(primary.checksum.type, primary.checksum.value),
            label=primary.location.href,
        )

    decode = select_decoder(primary_url)
    return parse_primary(decode(io.BytesIO(data)))


def list_packages(request: Request, config: Config) -> list[str]:
    """Get one line per package of the repository: name-ver-rel (arch): summary."""
    catalog = load_catalog(request, config)
    log.debug("Listing packages available in repo")
    return [record.listing_line() for record in list_catalog(catalog)]


def download_packages(request: Request, config: Config) -> Iterator[Path]:
    """
    Download the requested packages into the output directory.

    Queries are processed in the order given. Each saved path is yielded as soon as
    the package is written; the first error stops the whole run.
    """
    catalog = load_catalog(request, config)

    for query in request.packages:
        for record in resolve_packages(catalog, query, request.match):
            # fail before downloading anything if the file is in the way
            check_destination(
                request.output_dir,
                filename_from_location(package_url(request.repo_url, record)),
                force=request.force,
            )
            checksum = None
            if request.verify_checksums:
                checksum = ChecksumInfo.from_yum(record.checksum.type, record.checksum.value)

            filename, response = retrieve(
                request.repo_url, record, timeout=config.requests_timeout
            )

            yield save_package(
                filename,
                response,
                request.output_dir,
                force=request.force,
                chunk_size=config.chunk_size,
                checksum=checksum,
            )
