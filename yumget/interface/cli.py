# SPDX-License-Identifier: GPL-3.0-or-later
import functools
import logging
from pathlib import Path
from typing import Any, Callable, Optional

import typer
from pydantic import ValidationError

from yumget import APP_NAME
from yumget.core.config import Config, load_config
from yumget.core.constants import MatchMode
from yumget.core.errors import BaseError, InvalidInput
from yumget.core.models.input import Request
from yumget.core.yum.main import download_packages, list_packages
from yumget.interface.logging import setup_logging

log = logging.getLogger(__name__)

app = typer.Typer(
    add_completion=False,
    context_settings={"help_option_names": ["-h", "--help"]},
)

HELP = (
    "Lists or downloads RPM packages from a Yum repository. "
    "Specify each PKG to download as name-ver-rel, or pass --list instead."
)


def handle_errors(cmd: Callable[..., None]) -> Callable[..., None]:
    """Decorate a CLI command function with an error handler.

    All errors are terminal: the message is logged once and the process exits.
    Expected errors are logged without a traceback.
    """

    @functools.wraps(cmd)
    def cmd_with_error_handling(*args: Any, **kwargs: Any) -> None:
        try:
            cmd(*args, **kwargs)
        except BaseError as e:
            log.error(e.friendly_msg())
            raise typer.Exit(e.exit_code)
        except Exception:
            log.exception("An unexpected error occurred")
            raise typer.Exit(1)

    return cmd_with_error_handling


def _get_request_or_fail(**kwargs: Any) -> Request:
    try:
        return Request(**kwargs)
    except ValidationError as e:
        reasons = "; ".join(_format_error(error) for error in e.errors())
        raise InvalidInput(reasons, solution=f"Run '{APP_NAME} --help' for usage.") from e


def _format_error(error: Any) -> str:
    msg = error["msg"].removeprefix("Value error, ")
    loc = ".".join(str(part) for part in error["loc"])
    return f"{loc}: {msg}" if loc else msg


@app.command(help=HELP)
@handle_errors
def main(
    packages: Optional[list[str]] = typer.Argument(
        None,
        metavar="PKG...",
        help="Packages to download, as name-ver-rel (or bare names with --match=name).",
        show_default=False,
    ),
    repo: str = typer.Option("", "--repo", help="URL of Yum repository to use."),
    list_packages_: bool = typer.Option(
        False, "--list", help="List packages in repository instead of downloading."
    ),
    force: bool = typer.Option(False, "--force", help="Overwrite existing files."),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Enable debugging info to stderr."
    ),
    match: MatchMode = typer.Option(
        MatchMode.IDENTITY,
        "--match",
        help=(
            "How to match PKG: 'identity' picks the single name-ver-rel with the highest epoch, "
            "'name' downloads every package with that name."
        ),
        case_sensitive=False,
    ),
    verify_checksums: bool = typer.Option(
        False,
        "--verify-checksums",
        help="Verify metadata and packages against the checksums published by the repository.",
    ),
    output_dir: Path = typer.Option(
        Path("."), "--output-dir", file_okay=False, help="Directory to save packages to."
    ),
    config_file: Optional[Path] = typer.Option(
        None, "--config-file", dir_okay=False, help="YAML file with tuning options."
    ),
) -> None:
    setup_logging(verbose)
    config: Config = load_config(config_file)
    request = _get_request_or_fail(
        repo_url=repo,
        packages=tuple(packages or ()),
        list_packages=list_packages_,
        force=force,
        match=match,
        verify_checksums=verify_checksums,
        output_dir=output_dir,
    )

    if request.list_packages:
        for line in list_packages(request, config):
            typer.echo(line)
        return

    for path in download_packages(request, config):
        typer.echo(path.name)
