"""
===============================================================================
Unit‑tests ▸ configuration loading (env + JSON‑Schema validated file)
===============================================================================
"""
from __future__ import annotations

import json
import signal
from pathlib import Path

import pytest
from jsonschema import ValidationError

from levellog import FileLogger, ProcessLogger, Severity
from levellog.config import LoggerConfig, build_logger, load_config, pretty_pointer, validate_config
from levellog.signals import uninstall_rotation_handler


def _write_json(p: Path, data: dict) -> Path:
    p.write_text(json.dumps(data), encoding="utf-8")
    return p


def test_defaults_without_env() -> None:
    cfg = load_config(env={})
    assert cfg == LoggerConfig(level=Severity.INFO, destination="stdout", variant="file", rotate_signal=None)


def test_environment_values(tmp_path: Path) -> None:
    env = {
        "LEVELLOG_LEVEL": "WARN",
        "LEVELLOG_FILE": str(tmp_path / "a.log"),
        "LEVELLOG_VARIANT": "process",
    }
    cfg = load_config(env=env)
    assert cfg.level is Severity.WARNING
    assert cfg.destination == str(tmp_path / "a.log")
    assert cfg.variant == "process"


def test_unknown_level_name_is_fatal() -> None:
    assert load_config(env={"LEVELLOG_LEVEL": "verbose"}).level is Severity.FATAL


def test_file_overrides_environment(tmp_path: Path) -> None:
    cfg_file = _write_json(tmp_path / "levellog.json", {"level": "DEBUG2", "rotate_signal": "SIGHUP"})
    env = {"LEVELLOG_LEVEL": "ERROR", "LEVELLOG_FILE": "stdout"}

    cfg = load_config(cfg_file, env=env)
    assert cfg.level is Severity.DEBUG2
    assert cfg.destination == "stdout"
    assert cfg.rotate_signal == "SIGHUP"


def test_config_path_from_environment(tmp_path: Path) -> None:
    cfg_file = _write_json(tmp_path / "levellog.json", {"level": "DEBUG"})
    cfg = load_config(env={"LEVELLOG_CONFIG": str(cfg_file)})
    assert cfg.level is Severity.DEBUG


@pytest.mark.parametrize(
    "data",
    [
        {"variant": "syslog"},
        {"level": ""},
        {"destination": 3},
        {"unexpected": True},
        {"rotate_signal": "hup now"},
    ],
)
def test_schema_rejects_bad_files(tmp_path: Path, data: dict) -> None:
    cfg_file = _write_json(tmp_path / "bad.json", data)
    with pytest.raises(ValidationError):
        load_config(cfg_file, env={})


def test_bad_variant_from_environment() -> None:
    with pytest.raises(ValidationError):
        load_config(env={"LEVELLOG_VARIANT": "syslog"})


def test_malformed_json(tmp_path: Path) -> None:
    p = tmp_path / "broken.json"
    p.write_text("{not json", encoding="utf-8")
    with pytest.raises(json.JSONDecodeError):
        load_config(p, env={})


def test_validate_config_accepts_bytes_and_mappings() -> None:
    assert validate_config(b'{"level": "INFO"}') == {"level": "INFO"}
    assert validate_config({"variant": "file"}) == {"variant": "file"}
    with pytest.raises(TypeError):
        validate_config(42)  # type: ignore[arg-type]


def test_pretty_pointer() -> None:
    with pytest.raises(ValidationError) as excinfo:
        validate_config({"variant": "nope"})
    assert pretty_pointer(excinfo.value) == "$.variant"


def test_build_file_logger(tmp_path: Path) -> None:
    target = tmp_path / "built.log"
    lg = build_logger(LoggerConfig(level=Severity.ERROR, destination=str(target)))
    assert isinstance(lg, FileLogger)
    lg.error("built")
    assert "ERROR built" in target.read_text(encoding="utf-8")


def test_build_process_logger() -> None:
    lg = build_logger(LoggerConfig(level=Severity.DEBUG, variant="process"))
    assert isinstance(lg, ProcessLogger)
    assert lg.log_level() is Severity.DEBUG


@pytest.mark.skipif(not hasattr(signal, "SIGHUP"), reason="SIGHUP not available")
def test_build_installs_rotation_signal(tmp_path: Path) -> None:
    previous = signal.getsignal(signal.SIGHUP)
    try:
        build_logger(LoggerConfig(destination=str(tmp_path / "s.log"), rotate_signal="SIGHUP"))
        assert callable(signal.getsignal(signal.SIGHUP))
        assert signal.getsignal(signal.SIGHUP) is not previous
    finally:
        uninstall_rotation_handler("SIGHUP", previous)


def test_unknown_rotate_signal_fails_before_opening(tmp_path: Path) -> None:
    target = tmp_path / "never.log"
    cfg = LoggerConfig(destination=str(target), rotate_signal="SIGNOPE")
    # The name passes the schema pattern but is not a real signal.
    validate_config({"rotate_signal": "SIGNOPE"})

    with pytest.raises(ValueError):
        build_logger(cfg)
    assert not target.exists()
