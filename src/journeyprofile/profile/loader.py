# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Loading profile documents from disk.

JSON and YAML documents share one layout::

    scheduled:
      if_early: sleep
      if_late: end
    scenarios:
      - at: "00:01:00"
        journey: calendar.FlingWeekPage
      - at: "00:04:00"
        journey: calendar.FlingDayPage
        extras:
          iterations: "3"

Quote timestamps in YAML. Loading only checks structure; consistency with the
available journeys is checked when the profile is applied.
"""

from pathlib import Path
from typing import Any

import orjson
from pydantic import ValidationError
from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from journeyprofile.common.exceptions import ConfigurationError
from journeyprofile.common.models import Configuration
from journeyprofile.common.profile_logger import ProfileLogger

_logger = ProfileLogger(__name__)
_yaml = YAML(typ="safe")

_JSON_SUFFIXES = {".json"}
_YAML_SUFFIXES = {".yaml", ".yml"}


def parse_configuration(data: Any, source: str = "<profile>") -> Configuration:
    """Build a Configuration from an already-decoded document.

    Raises:
        ConfigurationError: If the document does not match the profile layout.
    """
    if not isinstance(data, dict):
        raise ConfigurationError(
            f"Profile {source} must be a mapping at the top level, got {type(data).__name__}"
        )
    try:
        return Configuration.model_validate(data)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid profile {source}: {e}") from e


def load_configuration(path: str | Path) -> Configuration:
    """Read a JSON or YAML profile document, chosen by file suffix.

    Raises:
        ConfigurationError: If the file is missing, has an unsupported suffix, cannot
            be decoded, or does not match the profile layout.
    """
    path = Path(path)
    if not path.is_file():
        raise ConfigurationError(f"Profile file not found: {path}")

    suffix = path.suffix.lower()
    try:
        if suffix in _JSON_SUFFIXES:
            data = orjson.loads(path.read_bytes())
        elif suffix in _YAML_SUFFIXES:
            data = _yaml.load(path.read_text(encoding="utf-8"))
        else:
            raise ConfigurationError(
                f"Unsupported profile file type {suffix!r} for {path}; "
                f"expected one of {sorted(_JSON_SUFFIXES | _YAML_SUFFIXES)}"
            )
    except (orjson.JSONDecodeError, YAMLError) as e:
        raise ConfigurationError(f"Unable to decode profile {path}: {e}") from e

    configuration = parse_configuration(data, source=str(path))
    _logger.debug(
        lambda: f"Loaded profile {path} with {len(configuration.scenarios)} scenario(s)"
    )
    return configuration
