# SPDX-License-Identifier: GPL-3.0-or-later
import enum


class MatchMode(str, enum.Enum):
    """How a requested package is matched against the repository catalog."""

    IDENTITY = "identity"
    NAME = "name"

    def __str__(self) -> str:
        return self.value


REPOMD_PATH = "repodata/repomd.xml"
PRIMARY_KIND = "primary"
