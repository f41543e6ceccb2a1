from pathlib import Path

import pytest
from pydantic import ValidationError

from apngspec.config import AppConfig, PathSettings, create_config_from_env
from apngspec.core.types import Delay
from apngspec.reader import load_spec


def test_defaults():
    config = AppConfig()
    assert config.default_delay_values() == (100, 1000)
    assert config.paths.image_extension == ".png"
    assert config.reader.require_delays is False
    assert config.is_json_spec("a.JSON")
    assert not config.is_json_spec("a.xml")


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("APNGSPEC_DELAY__DEFAULT_DENOMINATOR", "60")
    monkeypatch.setenv("APNGSPEC_READER__REQUIRE_DELAYS", "true")

    config = create_config_from_env()

    assert config.delay.default_denominator == 60
    assert config.reader.require_delays is True


def test_extension_must_start_with_dot():
    with pytest.raises(ValidationError):
        PathSettings(image_extension="png")


def test_delay_defaults_are_range_checked(monkeypatch):
    monkeypatch.setenv("APNGSPEC_DELAY__DEFAULT_NUMERATOR", "-1")
    with pytest.raises(ValidationError):
        create_config_from_env()


def test_config_flows_into_load(tmp_path: Path, write_json_spec, monkeypatch):
    monkeypatch.setenv("APNGSPEC_DELAY__DEFAULT_DENOMINATOR", "25")
    monkeypatch.setenv("APNGSPEC_PATHS__IMAGE_EXTENSION", ".apng")
    spec_path = write_json_spec(tmp_path / "a.json", {"frames": ["one", {"two": "3"}]})

    spec = load_spec(spec_path, create_config_from_env())

    assert spec.frame_paths == (str(tmp_path / "one.apng"), str(tmp_path / "two.apng"))
    assert spec.frames[0].delay == Delay(numerator=100, denominator=25)
    assert spec.frames[1].delay == Delay(numerator=3, denominator=25)
