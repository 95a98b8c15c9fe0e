# SPDX-License-Identifier: GPL-3.0-or-later
"""Decompression of metadata files, chosen by the file name suffix."""

import bz2
import gzip
import logging
import lzma
import zlib
from typing import BinaryIO, Callable
from urllib.parse import urlsplit

from yumget.core.errors import UnsupportedEncoding

log = logging.getLogger(__name__)

Decoder = Callable[[BinaryIO], BinaryIO]

# Errors raised while reading a stream returned by one of the decoders
DECOMPRESSION_ERRORS: tuple[type[Exception], ...] = (OSError, EOFError, lzma.LZMAError, zlib.error)

GZIP_MAGIC = b"\x1f\x8b"
BZIP2_MAGIC = b"BZh"
XZ_MAGIC = b"\xfd7zXZ\x00"


def _check_magic(stream: BinaryIO, magic: bytes, format_name: str) -> None:
    position = stream.tell()
    header = stream.read(len(magic))
    stream.seek(position)
    if header != magic:
        raise UnsupportedEncoding(f"Metadata is not a valid {format_name} stream")


def identity(stream: BinaryIO) -> BinaryIO:
    return stream


def gunzip(stream: BinaryIO) -> BinaryIO:
    _check_magic(stream, GZIP_MAGIC, "gzip")
    return gzip.GzipFile(fileobj=stream, mode="rb")


def bunzip2(stream: BinaryIO) -> BinaryIO:
    _check_magic(stream, BZIP2_MAGIC, "bzip2")
    return bz2.BZ2File(stream, mode="rb")


def unxz(stream: BinaryIO) -> BinaryIO:
    _check_magic(stream, XZ_MAGIC, "xz")
    return lzma.LZMAFile(stream, mode="rb")


_DECODERS: dict[str, Decoder] = {
    ".gz": gunzip,
    ".bz2": bunzip2,
    ".xz": unxz,
}


def select_decoder(url: str) -> Decoder:
    """Choose how to decode a metadata file by the suffix of its URL path.

    Unknown suffixes are assumed to be uncompressed. The content is not inspected
    until the decoder is applied.
    """
    path = urlsplit(url).path
    for suffix, decoder in _DECODERS.items():
        if path.endswith(suffix):
            log.debug("Using %s to decompress %s", decoder.__name__, url)
            return decoder
    return identity
