# SPDX-License-Identifier: GPL-3.0-or-later
"""Builders for fake Yum repositories used across the unit tests."""

import hashlib
import io
from dataclasses import dataclass, field
from typing import Optional

import requests

from yumget.core.yum.models import Checksum, Location, PackageRecord, Version

REPO_URL = "https://repo.example.com/el9/x86_64/"

REPOMD_NS = "http://linux.duke.edu/metadata/repo"
COMMON_NS = "http://linux.duke.edu/metadata/common"
RPM_NS = "http://linux.duke.edu/metadata/rpm"


@dataclass
class FakePackage:
    name: str
    ver: str
    rel: str
    arch: str = "x86_64"
    epoch: Optional[str] = "0"
    summary: str = ""
    href: Optional[str] = None
    xml_base: Optional[str] = None
    checksum_type: str = "sha256"
    checksum: str = "0" * 64

    @property
    def location(self) -> str:
        return self.href or f"Packages/{self.name}-{self.ver}-{self.rel}.{self.arch}.rpm"

    def to_xml(self) -> str:
        epoch = f' epoch="{self.epoch}"' if self.epoch is not None else ""
        base = f' xml:base="{self.xml_base}"' if self.xml_base else ""
        return f"""
  <package type="rpm">
    <name>{self.name}</name>
    <arch>{self.arch}</arch>
    <version{epoch} ver="{self.ver}" rel="{self.rel}"/>
    <checksum type="{self.checksum_type}" pkgid="YES">{self.checksum}</checksum>
    <summary>{self.summary}</summary>
    <description>{self.summary}.</description>
    <location{base} href="{self.location}"/>
    <format>
      <rpm:license>MIT</rpm:license>
      <rpm:provides>
        <rpm:entry name="{self.name}" flags="EQ" epoch="{self.epoch or 0}" ver="{self.ver}" rel="{self.rel}"/>
      </rpm:provides>
    </format>
  </package>"""


def make_primary(*packages: FakePackage) -> bytes:
    body = "".join(package.to_xml() for package in packages)
    return (
        '<?xml version="1.0" encoding="UTF-8"?>\n'
        f'<metadata xmlns="{COMMON_NS}" xmlns:rpm="{RPM_NS}" packages="{len(packages)}">'
        f"{body}\n</metadata>\n"
    ).encode()


@dataclass
class FakeDescriptor:
    kind: str
    href: str
    checksum: str = "0" * 64
    checksum_type: str = "sha256"
    timestamp: Optional[int] = 1700000000
    xml_base: Optional[str] = None

    def to_xml(self) -> str:
        timestamp = f"<timestamp>{self.timestamp}</timestamp>" if self.timestamp else ""
        base = f' xml:base="{self.xml_base}"' if self.xml_base else ""
        return f"""
  <data type="{self.kind}">
    <checksum type="{self.checksum_type}">{self.checksum}</checksum>
    <location{base} href="{self.href}"/>
    {timestamp}
    <size>1234</size>
  </data>"""


def make_repomd(*descriptors: FakeDescriptor, revision: str = "1700000000") -> bytes:
    body = "".join(descriptor.to_xml() for descriptor in descriptors)
    return (
        '<?xml version="1.0" encoding="UTF-8"?>\n'
        f'<repomd xmlns="{REPOMD_NS}" xmlns:rpm="{RPM_NS}">\n'
        f"  <revision>{revision}</revision>{body}\n</repomd>\n"
    ).encode()


def sha256(data: bytes) -> str:
    return hashlib.sha256(data).hexdigest()


def make_response(content: bytes = b"", status_code: int = 200, url: str = "") -> requests.Response:
    """Create a real requests.Response that reads its body from memory."""
    response = requests.Response()
    response.status_code = status_code
    response.reason = "OK" if status_code == 200 else "Not Found"
    response.raw = io.BytesIO(content)
    response.url = url
    return response


@dataclass
class FakeRepository:
    """Stands in for the requests session, serving files by absolute URL."""

    files: dict[str, bytes] = field(default_factory=dict)
    requested: list[str] = field(default_factory=list)

    def add(self, relpath: str, content: bytes, base: str = REPO_URL) -> str:
        url = base + relpath
        self.files[url] = content
        return url

    def get(self, url: str, **kwargs: object) -> requests.Response:
        self.requested.append(url)
        if url not in self.files:
            return make_response(b"Not Found", status_code=404, url=url)
        return make_response(self.files[url], url=url)


def make_record(
    name: str,
    ver: str = "1.0",
    rel: str = "1",
    epoch: int = 0,
    arch: str = "x86_64",
    href: Optional[str] = None,
    summary: str = "",
) -> PackageRecord:
    return PackageRecord(
        name=name,
        arch=arch,
        version=Version(epoch=epoch, ver=ver, rel=rel),
        checksum=Checksum(type="sha256", value="0" * 64),
        location=Location(href=href or f"Packages/{name}-{ver}-{rel}.{arch}.rpm"),
        summary=summary,
    )
