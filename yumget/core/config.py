# SPDX-License-Identifier: GPL-3.0-or-later
import logging
from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel, ConfigDict, PositiveFloat, PositiveInt, ValidationError

from yumget.core.errors import InvalidInput

log = logging.getLogger(__name__)


class Config(BaseModel):
    """Tuning knobs shared by every network-facing step of a run."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    requests_timeout: PositiveFloat = 300
    chunk_size: PositiveInt = 8192


def load_config(config_path: Optional[Path] = None) -> Config:
    """Load the configuration from a YAML file, or return the defaults.

    :param config_path: path to a YAML file with Config keys
    :raises InvalidInput: if the file can't be read or is not valid
    """
    if config_path is None:
        return Config()

    log.debug("Loading configuration from %s", config_path)
    try:
        data = yaml.safe_load(config_path.read_text())
    except (OSError, yaml.YAMLError) as e:
        raise InvalidInput(
            f"Failed to read config file {config_path}: {e}",
            solution="Make sure the file exists and has correct YAML syntax.",
        ) from e

    try:
        return Config.model_validate(data or {})
    except ValidationError as e:
        loc = ".".join(str(part) for part in e.errors()[0]["loc"])
        msg = e.errors()[0]["msg"]
        raise InvalidInput(
            f"Config file {config_path} is not valid: '{loc}: {msg}'",
            solution=f"Supported keys: {', '.join(Config.model_fields)}",
        ) from e
