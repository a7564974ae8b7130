"""Settings loader with environment variable and Docker secrets integration."""
from __future__ import annotations
import logging
import os
from dataclasses import dataclass
from pathlib import Path

from hmrc.core.auth import HmrcAuth
from hmrc.core.client import HmrcClient, SANDBOX_BASE_URL, DEFAULT_API_VERSION, REQUEST_TIMEOUT

logger = logging.getLogger(__name__)


def _load_secret_from_file(secret_name: str, env_var: str | None = None) -> str | None:
    """Read a credential such as the HMRC server token.

    A non-empty file mounted at /run/secrets/<secret_name> wins; an empty or
    unreadable file falls through to ``env_var``. Whitespace around the file
    content is stripped.

    Returns:
        The credential, or None when neither source holds one
    """
    secret_file = Path("/run/secrets") / secret_name

    if secret_file.exists() and secret_file.is_file():
        try:
            secret_value = secret_file.read_text().strip()
        except OSError as e:
            logger.warning("Failed to read /run/secrets/%s: %s", secret_name, e)
        else:
            if secret_value:
                logger.debug("Loaded %s from /run/secrets", secret_name)
                return secret_value

    if env_var:
        secret_value = os.getenv(env_var)
        if secret_value:
            logger.debug("Loaded %s from environment", env_var)
            return secret_value

    return None


@dataclass
class AppConfig:
    """Client configuration container."""
    base_url: str = SANDBOX_BASE_URL
    api_version: str = DEFAULT_API_VERSION
    server_token: str = ""
    request_timeout: float = REQUEST_TIMEOUT

    def __repr__(self) -> str:
        token = "set" if self.server_token else "unset"
        return (
            f"AppConfig(base_url={self.base_url!r}, api_version={self.api_version!r}, "
            f"server_token={token}, request_timeout={self.request_timeout!r})"
        )

    def build_client(self) -> HmrcClient:
        """Return an HmrcClient configured from these settings."""
        return HmrcClient(
            self.base_url,
            auth=HmrcAuth(server_token=self.server_token or None),
            api_version=self.api_version,
            timeout=self.request_timeout,
        )


def _parse_timeout(raw: str) -> float:
    try:
        timeout = float(raw)
    except ValueError:
        raise RuntimeError(f"HMRC_REQUEST_TIMEOUT must be a number of seconds (got {raw!r})") from None
    if timeout <= 0:
        raise RuntimeError(f"HMRC_REQUEST_TIMEOUT must be positive (got {raw!r})")
    return timeout


def load_settings() -> AppConfig:
    """Load client settings from environment and /run/secrets."""
    base_url = os.environ.get("HMRC_BASE_URL", "").strip() or SANDBOX_BASE_URL
    api_version = os.environ.get("HMRC_API_VERSION", "").strip() or DEFAULT_API_VERSION
    server_token = _load_secret_from_file("hmrc_server_token", "HMRC_SERVER_TOKEN") or ""

    timeout_raw = os.environ.get("HMRC_REQUEST_TIMEOUT", "").strip()
    request_timeout = _parse_timeout(timeout_raw) if timeout_raw else float(REQUEST_TIMEOUT)

    if not server_token:
        logger.info("No HMRC server token configured; application-restricted calls will fail")

    config = AppConfig(
        base_url=base_url.rstrip("/"),
        api_version=api_version,
        server_token=server_token,
        request_timeout=request_timeout,
    )
    logger.debug("Loaded settings: %r", config)
    return config
