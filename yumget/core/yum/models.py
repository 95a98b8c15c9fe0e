# SPDX-License-Identifier: GPL-3.0-or-later
# https://docs.pulpproject.org/pulp_rpm/workflows/metadata.html
# http://createrepo.baseurl.org/

from typing import NamedTuple, Optional

from pydantic import BaseModel, ConfigDict

from yumget.core.constants import PRIMARY_KIND
from yumget.core.errors import PrimaryNotFound


class Checksum(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: str = ""
    value: str = ""


class Location(BaseModel):
    model_config = ConfigDict(frozen=True)

    href: str = ""
    # xml:base, overrides the repository URL when resolving href
    base: Optional[str] = None


class Version(BaseModel):
    model_config = ConfigDict(frozen=True)

    epoch: int = 0
    ver: str = ""
    rel: str = ""


class CatalogDescriptor(BaseModel):
    """A <data> entry of repomd.xml, pointing to one of the metadata files."""

    model_config = ConfigDict(frozen=True)

    kind: str
    checksum: Checksum = Checksum()
    location: Location = Location()
    timestamp: Optional[int] = None
    size: Optional[int] = None


class RepoMD(BaseModel):
    """The repository metadata index (repodata/repomd.xml)."""

    model_config = ConfigDict(frozen=True)

    revision: Optional[str] = None
    data: tuple[CatalogDescriptor, ...] = ()

    def find_primary(self) -> CatalogDescriptor:
        """Return the first descriptor of the primary catalog.

        :raises PrimaryNotFound: if there is none, or it has no location
        """
        for descriptor in self.data:
            if descriptor.kind == PRIMARY_KIND:
                if not descriptor.location.href:
                    break
                return descriptor

        raise PrimaryNotFound("No primary in repo metadata")


class PackageRecord(BaseModel):
    """A <package> entry of the primary catalog."""

    model_config = ConfigDict(frozen=True)

    name: str
    arch: str = ""
    version: Version = Version()
    checksum: Checksum = Checksum()
    location: Location = Location()
    summary: str = ""

    @property
    def epoch(self) -> int:
        return self.version.epoch

    @property
    def nvr(self) -> str:
        """Get the name-ver-rel string users request packages by."""
        return f"{self.name}-{self.version.ver}-{self.version.rel}"

    def listing_line(self) -> str:
        return f"{self.nvr} ({self.arch}): {self.summary}"


class PackageCatalog(BaseModel):
    """The primary catalog: every package of the repository in document order."""

    model_config = ConfigDict(frozen=True)

    packages: tuple[PackageRecord, ...] = ()

    def __len__(self) -> int:
        return len(self.packages)


class PackageIdentity(NamedTuple):
    """A package requested by the user as name-ver-rel."""

    name: str
    ver: str
    rel: str

    def __str__(self) -> str:
        return f"{self.name}-{self.ver}-{self.rel}"

    def matches(self, record: PackageRecord) -> bool:
        """Check if the record has this name, version and release, in any arch."""
        return (record.name, record.version.ver, record.version.rel) == tuple(self)
