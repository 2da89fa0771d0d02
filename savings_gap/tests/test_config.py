import logging

import pytest

from savings_gap.config import (
    DEFAULT_CORS_ORIGINS,
    DEFAULT_REPORT_FILENAME,
    load_settings,
)
from savings_gap.utils.logging import setup_logging

ENV_KEYS = ("APP_ENV", "LOG_LEVEL", "CORS_ORIGINS", "REPORT_FILENAME", "REPORT_TITLE")


@pytest.fixture()
def clean_env(monkeypatch, tmp_path):
    # keep a developer's .env out of the picture
    monkeypatch.chdir(tmp_path)
    for key in ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
    return monkeypatch


def test_defaults_without_environment(clean_env):
    settings = load_settings()

    assert settings.env == "dev"
    assert settings.log_level == "INFO"
    assert settings.cors_origins == DEFAULT_CORS_ORIGINS
    assert settings.report_filename == DEFAULT_REPORT_FILENAME


def test_environment_overrides(clean_env):
    clean_env.setenv("APP_ENV", "prod")
    clean_env.setenv("LOG_LEVEL", "debug")
    clean_env.setenv("CORS_ORIGINS", "https://a.example, https://b.example,")
    clean_env.setenv("REPORT_FILENAME", "plan.pdf")

    settings = load_settings()

    assert settings.env == "prod"
    assert settings.log_level == "DEBUG"
    assert settings.cors_origins == ("https://a.example", "https://b.example")
    assert settings.report_filename == "plan.pdf"


def test_blank_values_fall_back_to_defaults(clean_env):
    clean_env.setenv("LOG_LEVEL", "   ")
    clean_env.setenv("CORS_ORIGINS", " , ")

    settings = load_settings()

    assert settings.log_level == "INFO"
    assert settings.cors_origins == DEFAULT_CORS_ORIGINS


def test_dotenv_file_is_loaded(clean_env, tmp_path):
    # registered so teardown removes what load_dotenv writes into os.environ
    clean_env.setenv("REPORT_TITLE", "placeholder")
    clean_env.delenv("REPORT_TITLE")
    (tmp_path / ".env").write_text("REPORT_TITLE=Mein Plan\n", encoding="utf-8")

    assert load_settings().report_title == "Mein Plan"


@pytest.fixture()
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield root
    root.handlers = handlers
    root.setLevel(level)


def test_setup_logging_replaces_handlers(restore_root_logger, capsys):
    setup_logging("DEBUG")
    setup_logging("INFO")

    root = restore_root_logger
    assert len(root.handlers) == 1
    assert root.level == logging.INFO

    logging.getLogger("savings_gap.test").info("hello")
    out = capsys.readouterr().out
    assert "level=INFO logger=savings_gap.test msg=hello" in out
