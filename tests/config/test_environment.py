import pytest

from pulumi_xyz.config.environment import Environment, load_dotenv_files


def test_defaults(monkeypatch):
    for key in ("XYZ_API_URL", "XYZ_API_TOKEN", "XYZ_REQUEST_TIMEOUT"):
        monkeypatch.delenv(key, raising=False)

    assert Environment.get_api_url() is None
    assert Environment.get_api_token() is None
    assert Environment.get_request_timeout() == 30.0


def test_overrides(monkeypatch):
    monkeypatch.setenv("XYZ_API_URL", "http://localhost:8080/")
    monkeypatch.setenv("XYZ_REQUEST_TIMEOUT", "2.5")

    assert Environment.get_api_url() == "http://localhost:8080"
    assert Environment.get_request_timeout() == 2.5


def test_invalid_timeout_falls_back(monkeypatch):
    monkeypatch.setenv("XYZ_REQUEST_TIMEOUT", "soon")

    assert Environment.get_request_timeout() == 30.0


def test_log_level(monkeypatch):
    monkeypatch.setenv("PULUMI_XYZ_LOG_LEVEL", "debug")
    assert Environment.get_log_level() == "DEBUG"

    monkeypatch.delenv("PULUMI_XYZ_LOG_LEVEL")
    monkeypatch.delenv("DEBUG", raising=False)
    assert Environment.get_log_level() == "INFO"


@pytest.mark.parametrize("value", ["0", "false", "False", "no", "off", ""])
def test_falsy_debug_keeps_default_level(monkeypatch, value):
    monkeypatch.delenv("PULUMI_XYZ_LOG_LEVEL", raising=False)
    monkeypatch.setenv("DEBUG", value)
    assert Environment.get_log_level() == "INFO"


@pytest.mark.parametrize("value", ["1", "true", "yes"])
def test_truthy_debug_selects_debug(monkeypatch, value):
    monkeypatch.delenv("PULUMI_XYZ_LOG_LEVEL", raising=False)
    monkeypatch.setenv("DEBUG", value)
    assert Environment.get_log_level() == "DEBUG"


def test_dotenv_files_do_not_override(tmp_path, monkeypatch):
    monkeypatch.setenv("XYZ_API_TOKEN", "from-shell")
    # set first so monkeypatch restores the variable after load_dotenv writes it
    monkeypatch.setenv("XYZ_API_URL", "placeholder")
    monkeypatch.delenv("XYZ_API_URL")
    monkeypatch.delenv("ENV", raising=False)
    (tmp_path / ".env").write_text("XYZ_API_TOKEN=from-file\nXYZ_API_URL=http://from-file\n")

    load_dotenv_files(tmp_path)

    assert Environment.get_api_token() == "from-shell"
    assert Environment.get_api_url() == "http://from-file"
