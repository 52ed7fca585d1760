"""Tests for izone - the client config, and the CLI's config file."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from izone import IzoneConfig, exceptions as exc
from izone.config import normalise_base_url
from izone.const import DEFAULT_BASE_URL, DEFAULT_ZONES
from izone_cli.config import (
    ENV_CONFIG_FILE,
    build_config,
    config_search_paths,
    load_config_file,
    read_config_file,
)

if TYPE_CHECKING:
    from pathlib import Path


CONFIG_TOML = """
izone_ip = "10.0.0.42"
zone_query_type = 4

[zones]
Lounge = 0
Bed1 = 1
"""


@pytest.mark.parametrize(
    ("host", "url"),
    [
        ("192.168.1.50", "http://192.168.1.50"),
        ("http://izone.local/", "http://izone.local"),
        (" https://10.0.0.1:8080 ", "https://10.0.0.1:8080"),
    ],
)
def test_normalise_base_url(host: str, url: str) -> None:
    assert normalise_base_url(host) == url


def test_normalise_base_url_empty() -> None:
    with pytest.raises(exc.InputValidationError):
        normalise_base_url("  ")


def test_config_defaults() -> None:
    config = IzoneConfig()

    assert config.base_url == DEFAULT_BASE_URL
    assert config.verbose is False
    assert dict(config.zones) == dict(DEFAULT_ZONES)
    assert config.zone_index("KITCHEN") == 0


def test_config_from_dict() -> None:
    config = IzoneConfig.from_dict(
        {"izone_ip": "10.0.0.42", "zones": {"Lounge": 3}},
        base_url=None,  # i.e. no --host
        verbose=True,
    )

    assert config.base_url == "http://10.0.0.42"
    assert config.verbose is True
    assert config.zone_index("lounge") == 3

    with pytest.raises(exc.InputValidationError):
        config.zone_index("kitchen")


def test_config_host_overrides_file() -> None:
    config = IzoneConfig.from_dict({"izone_ip": "10.0.0.42"}, base_url="10.0.0.7")
    assert config.base_url == "http://10.0.0.7"


def test_read_config_file(tmp_path: Path) -> None:
    path = tmp_path / "izone.toml"
    path.write_text(CONFIG_TOML)

    content = read_config_file(path)

    assert content["izone_ip"] == "10.0.0.42"
    assert content["zone_query_type"] == 4
    assert content["zones"] == {"Lounge": 0, "Bed1": 1}


@pytest.mark.parametrize(
    "text",
    [
        "izone_ip = ",  # not TOML
        'izone_ip = ""',
        "zone_query_type = 0",
        'zones = { Lounge = "one" }',
    ],
)
def test_read_config_file_invalid(tmp_path: Path, text: str) -> None:
    path = tmp_path / "izone.toml"
    path.write_text(text)

    with pytest.raises(exc.InputValidationError):
        read_config_file(path)


def test_load_config_file(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    invalid = tmp_path / "invalid.toml"
    invalid.write_text("zone_query_type = -1")
    valid = tmp_path / "valid.toml"
    valid.write_text(CONFIG_TOML)

    content = load_config_file([tmp_path / "missing.toml", invalid, valid])

    assert content["izone_ip"] == "10.0.0.42"
    assert "Skipping the config file" in caplog.text

    assert load_config_file([tmp_path / "missing.toml"]) == {}


def test_config_search_paths(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setenv(ENV_CONFIG_FILE, str(tmp_path / "custom.toml"))

    paths = config_search_paths()

    assert paths[0] == tmp_path / "custom.toml"
    assert all(p.name.endswith("izone.toml") for p in paths[1:])


def test_build_config(tmp_path: Path) -> None:
    path = tmp_path / "izone.toml"
    path.write_text(CONFIG_TOML)

    config = build_config(host="10.0.0.9", config_file=path, verbose=True)

    assert config.base_url == "http://10.0.0.9"
    assert config.zone_query_type == 4
    assert config.zone_index("bed1") == 1
    assert config.verbose is True


def test_build_config_explicit_file_must_be_valid(tmp_path: Path) -> None:
    path = tmp_path / "izone.toml"
    path.write_text("schedule_query_type = 256")

    with pytest.raises(exc.InputValidationError):
        build_config(config_file=path)
