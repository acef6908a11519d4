"""Unit tests for configuration loading."""

import json
from pathlib import Path

import pytest
from pydantic import ValidationError

from sway_helper.core.config import HelperConfig, load_config
from sway_helper.errors import ConfigLoadError, ErrorCode
from sway_helper.models import Amount, Unit


class TestLoadConfig:

    def test_missing_file_gives_defaults(self, isolated_config):
        assert not isolated_config.exists()
        config = load_config()
        assert config == HelperConfig()

    def test_loads_values(self, tmp_path):
        config_file = tmp_path / "custom.json"
        config_file.write_text(json.dumps({
            "socket_path": "/tmp/sway.sock",
            "resize_amount": 10,
            "resize_unit": "ppt",
        }))

        config = load_config(config_file)

        assert config.socket_path == Path("/tmp/sway.sock")
        assert config.default_amount() == Amount.of(10, Unit.PPT)

    def test_default_location(self, isolated_config):
        isolated_config.write_text(json.dumps({"resize_amount": 30}))
        assert load_config().default_amount() == Amount.of(30)

    def test_invalid_json(self, tmp_path):
        config_file = tmp_path / "broken.json"
        config_file.write_text("{not json")

        with pytest.raises(ConfigLoadError) as exc_info:
            load_config(config_file)
        assert exc_info.value.code is ErrorCode.CONFIG_LOAD_FAILED
        assert exc_info.value.context["file_path"] == str(config_file)

    def test_unknown_key(self, tmp_path):
        config_file = tmp_path / "extra.json"
        config_file.write_text(json.dumps({"resize_ammount": 10}))

        with pytest.raises(ConfigLoadError):
            load_config(config_file)

    def test_not_an_object(self, tmp_path):
        config_file = tmp_path / "list.json"
        config_file.write_text("[1, 2]")

        with pytest.raises(ConfigLoadError):
            load_config(config_file)


class TestHelperConfig:

    def test_unit_requires_amount(self):
        with pytest.raises(ValidationError, match="resize_unit requires resize_amount"):
            HelperConfig(resize_unit="px")

    def test_default_amount_empty(self):
        assert HelperConfig().default_amount() == Amount.none()

    def test_socket_precedence(self, monkeypatch):
        monkeypatch.setenv("SWAYSOCK", "/run/env.sock")

        assert HelperConfig().resolve_socket() == Path("/run/env.sock")
        assert HelperConfig(socket_path="/run/config.sock").resolve_socket() == Path("/run/config.sock")
        assert HelperConfig(socket_path="/run/config.sock").resolve_socket(Path("/run/cli.sock")) == Path("/run/cli.sock")

    def test_no_socket_anywhere(self):
        assert HelperConfig().resolve_socket() is None
