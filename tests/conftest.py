# SPDX-License-Identifier: GPL-3.0-or-later
import gzip
from collections.abc import Iterator
from unittest import mock

import pytest

from tests.utils import (
    FakeDescriptor,
    FakePackage,
    FakeRepository,
    make_primary,
    make_record,
    make_repomd,
)
from yumget.core.yum.models import PackageCatalog

PRIMARY_HREF = "repodata/0123abcd-primary.xml.gz"


@pytest.fixture
def fake_packages() -> list[FakePackage]:
    return [
        FakePackage("bash", "5.1.8", "9.el9", summary="The GNU Bourne Again shell"),
        FakePackage("foo-bar", "1.2.3", "4", arch="noarch", summary="Foo with a bar"),
        FakePackage(
            "foo-bar",
            "1.2.3",
            "4",
            arch="noarch",
            epoch="5",
            summary="Foo, epoch 5",
            href="Packages/e5/foo-bar-1.2.3-4.noarch.rpm",
        ),
        FakePackage("zlib", "1.2.11", "40.el9", epoch=None, summary=""),
    ]


@pytest.fixture
def fake_repo(fake_packages: list[FakePackage]) -> Iterator[FakeRepository]:
    """Serve a gzipped repository with the fake packages and patch it in as the HTTP session."""
    repo = FakeRepository()
    repo.add(
        "repodata/repomd.xml",
        make_repomd(
            FakeDescriptor("filelists", "repodata/0123abcd-filelists.xml.gz"),
            FakeDescriptor("primary", PRIMARY_HREF),
        ),
    )
    repo.add(PRIMARY_HREF, gzip.compress(make_primary(*fake_packages)))
    for package in fake_packages:
        repo.add(package.location, f"payload of {package.name}-{package.epoch}".encode())

    with mock.patch("yumget.core.yum.fetcher.http_session", repo):
        yield repo


@pytest.fixture
def catalog() -> PackageCatalog:
    return PackageCatalog(
        packages=(
            make_record("bash", "5.1.8", "9.el9", summary="The GNU Bourne Again shell"),
            make_record("foo-bar", "1.2.3", "4", epoch=0, arch="x86_64", href="a/foo0.rpm"),
            make_record("foo-bar", "1.2.3", "4", epoch=5, arch="x86_64", href="a/foo5.rpm"),
            make_record("foo-bar", "2.0", "1", href="a/foo2.rpm"),
            make_record("tie", "1", "1", epoch=3, arch="x86_64", href="a/tie-first.rpm"),
            make_record("tie", "1", "1", epoch=3, arch="aarch64", href="a/tie-second.rpm"),
            make_record("tie", "1", "1", epoch=1, arch="i686", href="a/tie-low.rpm"),
        )
    )
