"""izone - the configuration file of the CLI utility (izone.toml)."""

from __future__ import annotations

import logging
import os
import tomllib
from pathlib import Path
from typing import Any, Final

import voluptuous as vol

from izone import IzoneConfig
from izone.exceptions import InputValidationError

CONFIG_FILE_NAME: Final = "izone.toml"
ENV_CONFIG_FILE: Final = "IZONE_CONFIG"

SZ_IZONE_IP: Final = "izone_ip"
SZ_SCHEDULE_QUERY_TYPE: Final = "schedule_query_type"
SZ_ZONE_QUERY_TYPE: Final = "zone_query_type"
SZ_ZONES: Final = "zones"

_QUERY_TYPE = vol.All(int, vol.Range(min=1, max=255))

SCH_CONFIG_FILE: Final = vol.Schema(
    {
        vol.Optional(SZ_IZONE_IP): vol.All(str, vol.Length(min=1)),
        vol.Optional(SZ_ZONE_QUERY_TYPE): _QUERY_TYPE,
        vol.Optional(SZ_SCHEDULE_QUERY_TYPE): _QUERY_TYPE,
        vol.Optional(SZ_ZONES): vol.All(
            {str: vol.All(int, vol.Range(min=0, max=255))}, vol.Length(min=1)
        ),
    },
    extra=vol.ALLOW_EXTRA,
)


_LOGGER: Final = logging.getLogger(__name__)


def config_search_paths() -> list[Path]:
    """Return the locations of the config file, in order of precedence."""

    paths = []
    if env_path := os.environ.get(ENV_CONFIG_FILE):
        paths.append(Path(env_path).expanduser())

    paths += [
        Path.cwd() / CONFIG_FILE_NAME,
        Path.home() / ".config" / "izone" / CONFIG_FILE_NAME,
        Path.home() / f".{CONFIG_FILE_NAME}",
        Path("/etc/izone") / CONFIG_FILE_NAME,
    ]
    return paths


def read_config_file(path: Path) -> dict[str, Any]:
    """Return the (validated) content of a config file.

    Raise an InputValidationError if the file can't be read, parsed or validated.
    """

    try:
        with path.open("rb") as fp:
            content = tomllib.load(fp)
    except (OSError, tomllib.TOMLDecodeError) as err:
        raise InputValidationError(f"Unable to read {path}: {err}") from err

    try:
        return SCH_CONFIG_FILE(content)  # type: ignore[no-any-return]
    except vol.Invalid as err:
        raise InputValidationError(f"Invalid config in {path}: {err}") from err


def load_config_file(paths: list[Path] | None = None) -> dict[str, Any]:
    """Return the content of the first readable config file (or {} if none).

    A file that exists but is not valid is skipped, with a warning.
    """

    for path in config_search_paths() if paths is None else paths:
        if not path.is_file():
            continue

        try:
            config = read_config_file(path)
        except InputValidationError as err:
            _LOGGER.warning(f"Skipping the config file: {err}")
            continue

        _LOGGER.debug(f"Using the config file: {path}")
        return config

    return {}


def build_config(
    *,
    host: str | None = None,
    config_file: Path | None = None,
    verbose: bool = False,
) -> IzoneConfig:
    """Return the client's config: --host, then the config file, then the defaults.

    An explicitly named config file must be valid.
    """

    if config_file is not None:
        content = read_config_file(config_file)
    else:
        content = load_config_file()

    return IzoneConfig.from_dict(content, base_url=host, verbose=verbose)
