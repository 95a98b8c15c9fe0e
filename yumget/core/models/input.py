# SPDX-License-Identifier: GPL-3.0-or-later
from pathlib import Path
from urllib.parse import urlsplit

from pydantic import BaseModel, ConfigDict, field_validator, model_validator

from yumget.core.constants import MatchMode


class Request(BaseModel):
    """Everything the user asked for in a single run.

    Built once from the command line and passed to every step of the pipeline.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    repo_url: str
    packages: tuple[str, ...] = ()
    list_packages: bool = False
    force: bool = False
    match: MatchMode = MatchMode.IDENTITY
    verify_checksums: bool = False
    output_dir: Path = Path(".")

    @field_validator("repo_url")
    @classmethod
    def _check_repo_url(cls, url: str) -> str:
        try:
            parts = urlsplit(url)
        except ValueError as e:
            raise ValueError(f"invalid repository URL {url!r}: {e}") from e
        if not parts.scheme or not parts.netloc:
            raise ValueError(f"repository URL must be absolute, got {url!r}")
        # Relative references resolve beneath the last path segment only with a trailing slash
        if not parts.path.endswith("/"):
            parts = parts._replace(path=parts.path + "/")
        return parts.geturl()

    @model_validator(mode="after")
    def _check_mode(self) -> "Request":
        if self.list_packages == bool(self.packages):
            raise ValueError("must specify exactly one of --list or package names to download")
        return self
