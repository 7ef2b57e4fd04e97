import dataclasses

import pytest

from symbolic_core import (
    CoreConfig, InvariantViolation, LogLevel, Sin,
    configure, configure_logging, set_log_level, get_config, reset_config, pow, symbol, zero
)


@pytest.fixture
def restore_logging():
    yield
    configure_logging()


def test_defaults():
    config = get_config()
    assert config.validate_canonical
    assert config.intern_nodes


def test_configure_overrides():
    config = configure(intern_nodes=False)
    assert not config.intern_nodes
    assert get_config() is config
    assert reset_config().intern_nodes


def test_configure_rejects_unknown_keys():
    with pytest.raises(ValueError):
        configure(cache_size=10)


def test_config_is_frozen():
    with pytest.raises(dataclasses.FrozenInstanceError):
        get_config().intern_nodes = False
    assert CoreConfig() == get_config()


def test_invariant_violation_is_logged(capsys, restore_logging):
    configure_logging(LogLevel.MINIMAL)
    with pytest.raises(InvariantViolation):
        Sin(zero)
    assert "CRITICAL: Non-canonical Sin node" in capsys.readouterr().err


def test_silent_level(capsys, restore_logging):
    configure_logging(LogLevel.SILENT)
    with pytest.raises(InvariantViolation):
        Sin(zero)
    assert capsys.readouterr().err == ""


def test_debug_messages_need_verbose(capsys, restore_logging):
    x = symbol("x")
    configure_logging(LogLevel.MINIMAL)
    pow(2, x).diff(x)
    assert "DEBUG" not in capsys.readouterr().err

    configure_logging(LogLevel.VERBOSE)
    pow(2, x).diff(x)
    assert "Leaving derivative of 2^x" in capsys.readouterr().err


def test_log_to_file(tmp_path, restore_logging):
    log_file = tmp_path / "core.log"
    configure_logging(LogLevel.MINIMAL, log_to_file=True, log_file_path=str(log_file))
    with pytest.raises(InvariantViolation):
        Sin(zero)
    assert "Non-canonical Sin node" in log_file.read_text()


def test_raising_level_from_silent(capsys, restore_logging):
    configure_logging(LogLevel.SILENT)
    set_log_level(LogLevel.VERBOSE)
    x = symbol("x")
    pow(2, x).diff(x)
    assert "Leaving derivative of 2^x" in capsys.readouterr().err
