from pathlib import Path

import pytest
import yaml

from keycodec import config as config_module
from keycodec.config import AppConfig, CodecConfig, KeyGenConfig, dump_default_config, load_config


@pytest.fixture
def isolated(tmp_path: Path, monkeypatch) -> Path:
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(config_module, "runtime_config_dir", lambda: tmp_path / "user")
    return tmp_path


def test_defaults() -> None:
    cfg = AppConfig()
    assert cfg.codec.line_length == 64
    assert cfg.codec.strip_public_wrapper is True
    assert cfg.keys.algorithm == "rsa2048"
    assert cfg.keys.public_exponent == 65537
    assert cfg.logging.normalized_level() == "INFO"


@pytest.mark.parametrize("line_length", [0, 63, 80])
def test_rejects_bad_line_length(line_length: int) -> None:
    with pytest.raises(ValueError):
        CodecConfig(line_length=line_length)


def test_rejects_even_exponent() -> None:
    with pytest.raises(ValueError):
        KeyGenConfig(public_exponent=65536)


def test_load_falls_back_to_defaults(isolated: Path) -> None:
    assert load_config() == AppConfig()


def test_load_explicit_file(isolated: Path) -> None:
    path = isolated / "custom.yaml"
    path.write_text(yaml.safe_dump({"codec": {"line_length": 76}, "logging": {"level": "debug"}}), encoding="utf-8")
    cfg = load_config(path)
    assert cfg.codec.line_length == 76
    assert cfg.logging.normalized_level() == "DEBUG"


def test_load_local_file(isolated: Path) -> None:
    local = isolated / ".keycodec" / "config.yaml"
    local.parent.mkdir()
    local.write_text("codec:\n  strip_public_wrapper: false\n", encoding="utf-8")
    assert load_config().codec.strip_public_wrapper is False


def test_invalid_file_names_path(isolated: Path) -> None:
    path = isolated / "bad.yaml"
    path.write_text("codec:\n  line_length: 10\n", encoding="utf-8")
    with pytest.raises(ValueError, match="bad.yaml"):
        load_config(path)


def test_dump_default_config_round_trips(isolated: Path) -> None:
    target = isolated / "user" / "config.yaml"
    dump_default_config(target)
    assert load_config() == AppConfig()
    assert yaml.safe_load(target.read_text(encoding="utf-8"))["codec"]["line_length"] == 64
