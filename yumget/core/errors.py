# SPDX-License-Identifier: GPL-3.0-or-later
import textwrap
from pathlib import Path
from typing import ClassVar

from yumget import APP_NAME

_argument_not_specified = "__argument_not_specified__"


class BaseError(Exception):
    """Root of the error hierarchy. Don't raise this directly, use more specific error types."""

    # Every failure ends the run with the same status
    exit_code: ClassVar[int] = 1
    default_solution: ClassVar[str | None] = None

    def __init__(
        self,
        reason: str,
        *,
        solution: str | None = _argument_not_specified,
    ) -> None:
        """Initialize BaseError.

        :param reason: explain what went wrong
        :param solution: politely suggest a potential solution to the user
        """
        super().__init__(reason)
        if solution == _argument_not_specified:
            self.solution = self.default_solution
        else:
            self.solution = solution

    def friendly_msg(self) -> str:
        """Return the user-friendly representation of this error."""
        msg = str(self)
        if self.solution:
            msg += f"\n{textwrap.indent(self.solution, prefix='  ')}"
        return msg


class UsageError(BaseError):
    """Generic error for "yum-get was used incorrectly." Prefer more specific errors."""


class InvalidInput(UsageError):
    """User input was invalid."""


class InvalidReference(InvalidInput):
    """A URL or relative reference is not syntactically valid."""

    def __init__(
        self,
        reference: str,
        details: str | None = None,
        *,
        solution: str | None = _argument_not_specified,
    ) -> None:
        """Initialize InvalidReference.

        :param reference: the offending reference
        :param details: what exactly is wrong with it
        :param solution: politely suggest a potential solution to the user
        """
        reason = f"Invalid reference {reference!r}"
        if details:
            reason += f": {details}"
        super().__init__(reason, solution=solution)


class InvalidIdentityFormat(InvalidInput):
    """A requested package is not in the name-ver-rel format."""

    def __init__(
        self,
        identity: str,
        *,
        solution: str | None = _argument_not_specified,
    ) -> None:
        """Initialize InvalidIdentityFormat.

        :param identity: the identity string given by the user
        :param solution: politely suggest a potential solution to the user
        """
        super().__init__(f"Package not in name-ver-rel format: {identity}", solution=solution)

    default_solution = (
        "Specify each package as name-ver-rel, e.g. 'bash-5.1.8-9.el9'.\n"
        "Use --list to see the packages available in the repository."
    )


class NetworkError(BaseError):
    """Transport-level failure while talking to the repository."""

    default_solution = (
        "The error might be intermittent, please try again.\n"
        "Check that the repository URL is correct and reachable from this machine."
    )


class RemoteStatusError(NetworkError):
    """The repository answered with a non-success status."""

    def __init__(
        self,
        url: str,
        status_code: int,
        status_reason: str | None = None,
        *,
        solution: str | None = _argument_not_specified,
    ) -> None:
        """Initialize RemoteStatusError.

        :param url: the URL that was requested
        :param status_code: HTTP status code of the response
        :param status_reason: HTTP reason phrase, if any
        :param solution: politely suggest a potential solution to the user
        """
        self.url = url
        self.status_code = status_code
        status = f"{status_code} {status_reason}" if status_reason else str(status_code)
        super().__init__(f"Unexpected status {status} for {url}", solution=solution)


class MalformedMetadata(BaseError):
    """Repository metadata could not be decoded."""

    default_solution = (
        "Please check that the URL points to a Yum repository.\n"
        f"If it does, please let the maintainers know that {APP_NAME} doesn't handle it properly."
    )


class UnsupportedEncoding(MalformedMetadata):
    """A compressed metadata stream is corrupt or not in the expected format."""


class PrimaryNotFound(MalformedMetadata):
    """The repository metadata does not reference a primary catalog."""

    default_solution = "Make sure the repository metadata was generated correctly (createrepo)."


class PackageNotFound(BaseError):
    """A requested package is not in the repository catalog."""

    def __init__(
        self,
        query: str,
        *,
        solution: str | None = _argument_not_specified,
    ) -> None:
        """Initialize PackageNotFound.

        :param query: the package query that matched nothing
        :param solution: politely suggest a potential solution to the user
        """
        super().__init__(f"Failed to find package in repository: {query}", solution=solution)

    default_solution = "Use --list to see the packages available in the repository."


class FileConflict(UsageError):
    """The destination file already exists and overwriting was not permitted."""

    def __init__(
        self,
        path: Path | str,
        *,
        solution: str | None = _argument_not_specified,
    ) -> None:
        """Initialize FileConflict.

        :param path: the already existing file
        :param solution: politely suggest a potential solution to the user
        """
        super().__init__(f"File already exists: {path}", solution=solution)

    default_solution = "Remove the file or pass --force to overwrite it."


class IOFailure(BaseError):
    """The destination file could not be created or written."""


class IntegrityError(BaseError):
    """Downloaded data does not match the checksum published by the repository."""

    default_solution = (
        "Verify that the repository metadata is up to date and that the mirror is not corrupted."
    )
