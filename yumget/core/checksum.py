# SPDX-License-Identifier: GPL-3.0-or-later
import hashlib
import logging
from pathlib import Path
from typing import NamedTuple

from yumget.core.errors import IntegrityError

log = logging.getLogger(__name__)

# createrepo writes "sha" for SHA-1 in older repositories
YUM_TO_PYTHON_CHECKSUM_ALGORITHMS = {
    "md5": "md5",
    "sha": "sha1",
    "sha1": "sha1",
    "sha224": "sha224",
    "sha256": "sha256",
    "sha384": "sha384",
    "sha512": "sha512",
}


class ChecksumInfo(NamedTuple):
    """A cryptographic algorithm and a hex-encoded checksum calculated by that algorithm."""

    algorithm: str
    hexdigest: str

    @classmethod
    def from_yum(cls, checksum_type: str, value: str) -> "ChecksumInfo":
        """Create a ChecksumInfo from the type/value pair found in Yum metadata."""
        algorithm = YUM_TO_PYTHON_CHECKSUM_ALGORITHMS.get(checksum_type.lower())
        if algorithm is None:
            raise IntegrityError(
                f"Unsupported checksum type: {checksum_type!r}",
                solution=(
                    f"Supported types: {', '.join(YUM_TO_PYTHON_CHECKSUM_ALGORITHMS)}.\n"
                    "Run without --verify-checksums to skip verification."
                ),
            )
        return cls(algorithm, value.strip().lower())

    def new_hash(self):  # noqa: ANN201 - hashlib has no public hash type
        """Return an empty hash object for this algorithm."""
        return hashlib.new(self.algorithm)


def _get_hexdigest(file_path: Path, algorithm: str, chunk_size: int = 10240) -> str:
    hasher = hashlib.new(algorithm)
    with file_path.open("rb") as f:
        for chunk in iter(lambda: f.read(chunk_size), b""):
            hasher.update(chunk)
    return hasher.hexdigest()


def must_match_checksum(file_path: Path, expected: ChecksumInfo, *, label: str | None = None) -> None:
    """Verify that the file matches the expected checksum.

    :param file_path: path to the file to verify
    :param expected: the checksum published by the repository
    :param label: name to use for the file in error messages
    :raises IntegrityError: if the file does not match
    """
    label = label or file_path.name
    actual = _get_hexdigest(file_path, expected.algorithm)
    if actual != expected.hexdigest:
        raise IntegrityError(
            f"{label}: {expected.algorithm} checksum does not match "
            f"(expected {expected.hexdigest}, got {actual})"
        )
    log.debug("%s: %s checksum matches", label, expected.algorithm)


def must_match_data_checksum(data: bytes, expected: ChecksumInfo, *, label: str) -> None:
    """Verify that in-memory data matches the expected checksum.

    :raises IntegrityError: if the data does not match
    """
    hasher = expected.new_hash()
    hasher.update(data)
    actual = hasher.hexdigest()
    if actual != expected.hexdigest:
        raise IntegrityError(
            f"{label}: {expected.algorithm} checksum does not match "
            f"(expected {expected.hexdigest}, got {actual})"
        )
    log.debug("%s: %s checksum matches", label, expected.algorithm)
