import pytest

from hmrc.config import settings
from hmrc.core.client import SANDBOX_BASE_URL


@pytest.fixture()
def secrets_dir(monkeypatch, tmp_path):
    """Point /run/secrets at an empty temp directory."""
    real_path = settings.Path

    def fake_path(target):
        if str(target) == "/run/secrets":
            return tmp_path
        return real_path(target)

    monkeypatch.setattr(settings, "Path", fake_path)
    monkeypatch.delenv("HMRC_SERVER_TOKEN", raising=False)
    return tmp_path


def test_defaults(secrets_dir):
    cfg = settings.load_settings()

    assert cfg.base_url == SANDBOX_BASE_URL
    assert cfg.api_version == "1.0"
    assert cfg.server_token == ""
    assert cfg.request_timeout == 10.0


def test_environment_overrides(secrets_dir, monkeypatch):
    monkeypatch.setenv("HMRC_BASE_URL", "https://api.service.hmrc.gov.uk/")
    monkeypatch.setenv("HMRC_API_VERSION", "2.0")
    monkeypatch.setenv("HMRC_SERVER_TOKEN", "env-token")
    monkeypatch.setenv("HMRC_REQUEST_TIMEOUT", "2.5")

    cfg = settings.load_settings()

    assert cfg.base_url == "https://api.service.hmrc.gov.uk"
    assert cfg.api_version == "2.0"
    assert cfg.server_token == "env-token"
    assert cfg.request_timeout == 2.5


def test_server_token_prefers_run_secrets(secrets_dir, monkeypatch):
    (secrets_dir / "hmrc_server_token").write_text("file-token\n")
    monkeypatch.setenv("HMRC_SERVER_TOKEN", "env-token")

    assert settings.load_settings().server_token == "file-token"


def test_empty_secret_file_falls_back_to_env(secrets_dir, monkeypatch):
    (secrets_dir / "hmrc_server_token").write_text("  ")
    monkeypatch.setenv("HMRC_SERVER_TOKEN", "env-token")

    assert settings.load_settings().server_token == "env-token"


@pytest.mark.parametrize("raw", ["soon", "0", "-1"])
def test_invalid_timeout_raises(secrets_dir, monkeypatch, raw):
    monkeypatch.setenv("HMRC_REQUEST_TIMEOUT", raw)

    with pytest.raises(RuntimeError):
        settings.load_settings()


def test_build_client():
    cfg = settings.AppConfig(base_url="https://sandbox.test", api_version="1.0", server_token="tok", request_timeout=4)
    client = cfg.build_client()

    assert client.base_url == "https://sandbox.test"
    assert client.auth.server_token == "tok"
    assert client.timeout == 4


def test_build_client_without_token_leaves_auth_empty():
    client = settings.AppConfig().build_client()

    assert client.auth.server_token is None


def test_repr_hides_server_token():
    assert "tok-secret" not in repr(settings.AppConfig(server_token="tok-secret"))
