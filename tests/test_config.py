"""Tests for configuration and logging setup."""

import logging

import pytest

from fp_prelude import PreludeConfig, init, result
from fp_prelude._config import LOG_FORMAT_ENV, LOG_LEVEL_ENV
from fp_prelude._logging import configure_logging, get_logger


@pytest.fixture
def clean_env(monkeypatch):
    """Remove fp-prelude variables from the environment."""
    monkeypatch.delenv(LOG_LEVEL_ENV, raising=False)
    monkeypatch.delenv(LOG_FORMAT_ENV, raising=False)
    return monkeypatch


@pytest.fixture
def restore_root_logger():
    """Restore the root logger after configure_logging replaces its handlers."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)


class TestPreludeConfig:
    """Tests for PreludeConfig."""

    def test_defaults(self):
        """Defaults leave logging alone and render JSON."""
        config = PreludeConfig()
        assert config.log_level is None
        assert config.json_logs is True

    def test_frozen(self):
        """PreludeConfig is immutable."""
        config = PreludeConfig()
        with pytest.raises(AttributeError):
            config.log_level = 'DEBUG'  # type: ignore[misc]

    def test_from_env_empty(self, clean_env):
        """No variables means the defaults."""
        assert PreludeConfig.from_env() == PreludeConfig()

    def test_from_env_values(self, clean_env):
        """Level is upper-cased; console format disables JSON."""
        clean_env.setenv(LOG_LEVEL_ENV, ' debug ')
        clean_env.setenv(LOG_FORMAT_ENV, 'Console')
        assert PreludeConfig.from_env() == PreludeConfig(log_level='DEBUG', json_logs=False)

    def test_from_env_unknown_format(self, clean_env, caplog):
        """An unknown format warns and falls back to JSON."""
        clean_env.setenv(LOG_FORMAT_ENV, 'xml')
        with caplog.at_level(logging.WARNING):
            config = PreludeConfig.from_env()
        assert config.json_logs is True
        assert 'xml' in caplog.text


class TestInit:
    """Tests for init()."""

    def test_init_without_level_leaves_logging(self, clean_env, restore_root_logger):
        """No level means no logging changes."""
        handlers = restore_root_logger.handlers[:]
        config = init()
        assert config == PreludeConfig()
        assert restore_root_logger.handlers == handlers

    def test_init_arguments_override_env(self, clean_env, restore_root_logger):
        """Explicit arguments win over the environment."""
        clean_env.setenv(LOG_LEVEL_ENV, 'ERROR')
        clean_env.setenv(LOG_FORMAT_ENV, 'console')
        config = init('debug', json_logs=True)
        assert config == PreludeConfig(log_level='DEBUG', json_logs=True)
        assert restore_root_logger.level == logging.DEBUG

    def test_init_reads_env(self, clean_env, restore_root_logger):
        """The environment is used when no arguments are given."""
        clean_env.setenv(LOG_LEVEL_ENV, 'warning')
        config = init()
        assert config.log_level == 'WARNING'
        assert restore_root_logger.level == logging.WARNING


class TestLogging:
    """Tests for configure_logging and get_logger."""

    def test_configure_logging_installs_single_handler(self, restore_root_logger):
        """configure_logging replaces root handlers with one formatter handler."""
        configure_logging('INFO', json_output=False)
        assert len(restore_root_logger.handlers) == 1
        assert restore_root_logger.level == logging.INFO

    def test_get_logger_uses_stdlib_name(self, caplog):
        """Library events go through the named stdlib logger."""
        logger = get_logger('fp_prelude.tests')
        with caplog.at_level(logging.DEBUG, logger='fp_prelude.tests'):
            logger.debug('event happened', key='value')
        [record] = [r for r in caplog.records if r.name == 'fp_prelude.tests']
        assert record.getMessage() == 'event happened'
        assert record.key == 'value'

    def test_try_catch_logs_at_debug(self, caplog):
        """Captured exceptions are reported at DEBUG with their type."""
        with caplog.at_level(logging.DEBUG, logger='fp_prelude.result'):
            result.try_catch_error(lambda: 1 / 0)
        records = [r for r in caplog.records if r.name == 'fp_prelude.result']
        assert records
        assert records[-1].levelno == logging.DEBUG
        assert records[-1].exc_type == 'ZeroDivisionError'

    def test_silent_by_default(self, caplog):
        """Nothing below WARNING is recorded unless a level is set."""
        with caplog.at_level(logging.WARNING):
            result.try_catch_error(lambda: 1 / 0)
        assert not [r for r in caplog.records if r.name.startswith('fp_prelude')]
