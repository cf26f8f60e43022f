"""Unit tests for environment configuration."""

from pathlib import Path

import pytest

from application.settings import DEFAULT_OUTPUT_FILE, Settings, parse_flag
from domain.exceptions import ConfigurationError


def test_defaults_from_minimal_environment():
    settings = Settings.from_env({"LEETCODE_SESSION": "cookie"})

    assert settings.leetcode_session == "cookie"
    assert settings.output_file == Path(DEFAULT_OUTPUT_FILE)
    assert settings.enable_solution_links is False
    assert settings.solutions_dir is None
    assert settings.csrf_token is None
    assert settings.log_level == "INFO"


def test_missing_session_is_fatal():
    with pytest.raises(ConfigurationError, match="LEETCODE_SESSION"):
        Settings.from_env({})


def test_solution_links_require_solutions_dir():
    with pytest.raises(ConfigurationError, match="SOLUTIONS_DIR"):
        Settings.from_env({"LEETCODE_SESSION": "cookie", "ENABLE_SOLUTION_LINKS": "true"})


def test_solutions_dir_must_exist(tmp_path):
    env = {
        "LEETCODE_SESSION": "cookie",
        "ENABLE_SOLUTION_LINKS": "true",
        "SOLUTIONS_DIR": str(tmp_path / "missing"),
    }

    with pytest.raises(ConfigurationError):
        Settings.from_env(env)


def test_solutions_dir_ignored_when_links_disabled(tmp_path):
    settings = Settings.from_env(
        {"LEETCODE_SESSION": "cookie", "SOLUTIONS_DIR": str(tmp_path / "missing")}
    )

    assert settings.enable_solution_links is False


def test_full_environment(tmp_path):
    settings = Settings.from_env(
        {
            "LEETCODE_SESSION": "cookie",
            "LEETCODE_CSRF_TOKEN": "csrf",
            "OUTPUT_FILE": "SOLUTIONS.md",
            "ENABLE_SOLUTION_LINKS": "true",
            "SOLUTIONS_DIR": str(tmp_path),
            "LOG_LEVEL": "debug",
        }
    )

    assert settings.csrf_token == "csrf"
    assert settings.output_file == Path("SOLUTIONS.md")
    assert settings.enable_solution_links is True
    assert settings.solutions_dir == tmp_path
    assert settings.log_level == "DEBUG"


def test_overrides_win_and_none_is_ignored(tmp_path):
    settings = Settings.from_env(
        {"LEETCODE_SESSION": "cookie", "OUTPUT_FILE": "FROM_ENV.md"},
        output_file=str(tmp_path / "report.md"),
        enable_solution_links=True,
        solutions_dir=str(tmp_path),
        log_level=None,
    )

    assert settings.output_file == tmp_path / "report.md"
    assert settings.enable_solution_links is True
    assert settings.solutions_dir == tmp_path
    assert settings.log_level == "INFO"


def test_from_env_loads_dotenv_file(tmp_path, monkeypatch):
    for name in ("LEETCODE_SESSION", "OUTPUT_FILE", "ENABLE_SOLUTION_LINKS", "SOLUTIONS_DIR"):
        # setenv first so teardown also removes what load_dotenv writes
        monkeypatch.setenv(name, "unset")
        monkeypatch.delenv(name)
    (tmp_path / ".env").write_text("LEETCODE_SESSION=from-dotenv\nOUTPUT_FILE=DOTENV.md\n")
    monkeypatch.chdir(tmp_path)

    settings = Settings.from_env()

    assert settings.leetcode_session == "from-dotenv"
    assert settings.output_file == Path("DOTENV.md")


@pytest.mark.parametrize(
    "value, expected",
    [
        ("true", True),
        ("TRUE", True),
        (" True ", True),
        ("1", False),
        ("yes", False),
        ("false", False),
        ("", False),
        (None, False),
    ],
)
def test_parse_flag(value, expected):
    assert parse_flag(value) is expected


def test_unknown_log_level_is_configuration_error():
    with pytest.raises(ConfigurationError, match="LOG_LEVEL"):
        Settings.from_env({"LEETCODE_SESSION": "cookie", "LOG_LEVEL": "verbose"})


def test_log_level_override_is_validated():
    with pytest.raises(ConfigurationError):
        Settings.from_env({"LEETCODE_SESSION": "cookie"}, log_level="chatty")
