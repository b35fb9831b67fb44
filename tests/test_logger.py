import json
import logging
from keyset_core import get_logger, to_error_f, StatusCode, InvalidArgumentError


def test_logger_env_level_and_file(monkeypatch, tmp_path):
    log_file = tmp_path / "logs" / "keyset.log"
    monkeypatch.setenv("KEYSET_CORE_LOG_LEVEL", "debug")
    monkeypatch.setenv("KEYSET_CORE_LOG_FILE", str(log_file))

    log = get_logger("keyset_core.test_env")
    assert log.level == logging.DEBUG
    log.debug("hello")
    for h in log.handlers:
        h.flush()

    line = log_file.read_text().strip().splitlines()[-1]
    rec = json.loads(line)
    assert rec["level"] == "DEBUG"
    assert rec["name"] == "keyset_core.test_env"
    assert rec["msg"] == "hello"


def test_logger_handlers_not_duplicated():
    a = get_logger("keyset_core.test_dup", level=logging.INFO)
    b = get_logger("keyset_core.test_dup", level=logging.INFO)
    assert a is b
    assert len(b.handlers) == 1


def test_to_error_f_builds_without_raising():
    err = to_error_f(StatusCode.INVALID_ARGUMENT, "key %d has unknown prefix", 12)
    assert isinstance(err, InvalidArgumentError)
    assert err.code == StatusCode.INVALID_ARGUMENT
    assert str(err) == "key 12 has unknown prefix"


def test_to_error_f_without_args_keeps_percent():
    err = to_error_f(StatusCode.INVALID_ARGUMENT, "100% invalid")
    assert str(err) == "100% invalid"


def test_logger_unknown_env_level_falls_back_to_info(monkeypatch):
    monkeypatch.setenv("KEYSET_CORE_LOG_LEVEL", "verbose")
    log = get_logger("keyset_core.test_bad_level")
    assert log.level == logging.INFO
