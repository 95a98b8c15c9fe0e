# SPDX-License-Identifier: GPL-3.0-or-later
import logging
import os
from pathlib import Path
from typing import Optional

import requests

from yumget.core.checksum import ChecksumInfo, must_match_checksum
from yumget.core.errors import FileConflict, IOFailure, NetworkError
from yumget.core.yum.fetcher import fetch
from yumget.core.yum.location import filename_from_location, location_url
from yumget.core.yum.models import PackageRecord

log = logging.getLogger(__name__)


def package_url(repo_url: str, record: PackageRecord) -> str:
    """Get the absolute download URL of a package.

    The location's xml:base, when present, takes precedence over the repository URL.
    """
    return location_url(repo_url, record.location)


def check_destination(output_dir: Path, filename: str, *, force: bool) -> Path:
    """
    Get the path a package will be saved to.

    :raises FileConflict: if the file exists and overwriting is not allowed
    """
    destination = output_dir / filename
    if not force and destination.exists():
        raise FileConflict(destination)
    return destination


def retrieve(
    repo_url: str, record: PackageRecord, *, timeout: float
) -> tuple[str, requests.Response]:
    """
    Start downloading a package.

    The payload is not decompressed, the caller reads it from the returned response.

    :return: the file name to save the package as, and the streamed response
    :raises InvalidReference: if the package location is not valid
    :raises NetworkError: if the download can't be started
    """
    url = package_url(repo_url, record)
    filename = filename_from_location(url)
    log.debug("Downloading package from %s", url)
    return filename, fetch(url, timeout=timeout, stream=True)


def save_package(
    filename: str,
    response: requests.Response,
    output_dir: Path,
    *,
    force: bool = False,
    chunk_size: int = 8192,
    checksum: Optional[ChecksumInfo] = None,
) -> Path:
    """
    Write a downloaded package to the output directory.

    The payload goes to a temporary file first and is only moved into place once
    it's complete (and verified, if a checksum is given).

    :param filename: name of the file to create in output_dir
    :param response: streamed response returned by retrieve()
    :param output_dir: directory to save the package to
    :param force: overwrite an existing file
    :param chunk_size: chunk size param for Response.iter_content()
    :param checksum: verify the package against this checksum before saving it
    :raises FileConflict: if the file exists and force is not set
    :raises IOFailure: if the file can't be written
    :raises NetworkError: if the transfer breaks off
    :raises IntegrityError: if the package doesn't match the checksum
    """
    with response:
        destination = check_destination(output_dir, filename, force=force)

        tmp_path = output_dir / f".{filename}.{os.getpid()}.part"
        size = 0
        try:
            with open(tmp_path, "wb") as f:
                try:
                    for chunk in response.iter_content(chunk_size=chunk_size):
                        f.write(chunk)
                        size += len(chunk)
                except requests.RequestException as e:
                    raise NetworkError(f"Download of {filename} failed: {e}") from e

            if checksum is not None:
                must_match_checksum(tmp_path, checksum, label=filename)

            # the file may have appeared while downloading
            check_destination(output_dir, filename, force=force)
            os.replace(tmp_path, destination)
        except OSError as e:
            raise IOFailure(f"Failed to copy package to output file {destination}: {e}") from e
        finally:
            tmp_path.unlink(missing_ok=True)

    log.debug("Downloaded %d bytes to %s", size, destination)
    return destination
