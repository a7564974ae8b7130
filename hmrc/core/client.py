"""Low-level HTTP client for the HMRC Developer Hub APIs.

Handles base URL, versioned Accept header, bearer authorisation and JSON
encoding. Responses are returned as HmrcResponse without raising on HTTP
error statuses.
"""
from __future__ import annotations
import logging
import os
from typing import Optional, Dict, Any

import requests

from .auth import HmrcAuth
from .exceptions import HmrcTransportError, InvalidArgumentError
from .response import HmrcResponse

logger = logging.getLogger(__name__)

SANDBOX_BASE_URL = "https://test-api.service.hmrc.gov.uk"
DEFAULT_API_VERSION = "1.0"
REQUEST_TIMEOUT = 10


class HmrcClient:
    """HTTP client for HMRC APIs.

    Features:
    - Application (server token), user (access token) and open endpoints
    - Versioned ``Accept: application/vnd.hmrc.<version>+json`` header
    - Transport failures wrapped in HmrcTransportError

    Usage:
        client = HmrcClient(auth=HmrcAuth(server_token="MY-SERVER-TOKEN"))
        response = client.post_endpoint_json("/create-test-user/individuals", {})
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        auth: Optional[HmrcAuth] = None,
        api_version: str = DEFAULT_API_VERSION,
        timeout: float = REQUEST_TIMEOUT,
    ):
        """Initialize HMRC client.

        Args:
            base_url: API base URL (defaults to HMRC_BASE_URL env var, then the sandbox)
            auth: Credential holder (an empty one is created if omitted)
            api_version: API version requested through the Accept header
            timeout: Per-request timeout in seconds
        """
        self.base_url = (base_url or os.environ.get("HMRC_BASE_URL", SANDBOX_BASE_URL)).rstrip("/")
        self.auth = auth if auth is not None else HmrcAuth()
        self.api_version = api_version
        self.timeout = timeout

    def post_endpoint_json(
        self,
        endpoint: str,
        data: Optional[Dict[str, Any]] = None,
        auth_type: str = "application",
    ) -> HmrcResponse:
        """POST a JSON document to an endpoint.

        Args:
            endpoint: API path beginning with "/" (e.g. "/create-test-user/agents")
            data: JSON-serialisable mapping; an empty object is sent when None
            auth_type: "application", "user" or "open"

        Returns:
            HmrcResponse wrapping the HTTP response

        Raises:
            InvalidArgumentError: Bad endpoint, data or auth_type
            AuthenticationError: Credential for auth_type not set
            HmrcTransportError: No HTTP response received
        """
        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise InvalidArgumentError("data", "must be a dict")

        headers = self._headers(auth_type)
        headers["Content-Type"] = "application/json"
        return self._request("POST", endpoint, auth_type, headers=headers, json=data)

    def get_endpoint(
        self,
        endpoint: str,
        params: Optional[Dict[str, Any]] = None,
        auth_type: str = "application",
    ) -> HmrcResponse:
        """GET an endpoint.

        Args:
            endpoint: API path beginning with "/"
            params: Query parameters
            auth_type: "application", "user" or "open"

        Returns:
            HmrcResponse wrapping the HTTP response
        """
        headers = self._headers(auth_type)
        return self._request("GET", endpoint, auth_type, headers=headers, params=params)

    def endpoint_url(self, endpoint: str) -> str:
        """Join an endpoint path onto the base URL."""
        if not isinstance(endpoint, str) or not endpoint.startswith("/"):
            raise InvalidArgumentError("endpoint", f"must be a path starting with '/' (got {endpoint!r})")
        return f"{self.base_url}{endpoint}"

    def _headers(self, auth_type: str) -> Dict[str, str]:
        headers = {"Accept": f"application/vnd.hmrc.{self.api_version}+json"}
        token = self.auth.token_for(auth_type)
        if token:
            headers["Authorization"] = f"Bearer {token}"
        return headers

    def _request(self, method: str, endpoint: str, auth_type: str, **kwargs) -> HmrcResponse:
        url = self.endpoint_url(endpoint)
        logger.debug("HMRC %s %s (auth=%s)", method, url, auth_type)

        try:
            resp = requests.request(method, url, timeout=self.timeout, **kwargs)
        except requests.RequestException as exc:
            logger.error("HMRC %s %s failed: %s", method, url, exc)
            raise HmrcTransportError(url, exc) from exc

        if resp.status_code >= 400:
            logger.warning("HMRC %s %s returned %s", method, url, resp.status_code)
        return HmrcResponse(resp)


# ─────────────────────────────────────────────────────────────────────────────
# Standalone helpers
# ─────────────────────────────────────────────────────────────────────────────
def create_client_with_token(
    server_token: str,
    base_url: Optional[str] = None,
    timeout: float = REQUEST_TIMEOUT,
) -> HmrcClient:
    """Create an HmrcClient holding an application server token.

    Args:
        server_token: Server token issued when the application was registered
        base_url: API base URL (defaults as for HmrcClient)
        timeout: Per-request timeout in seconds

    Returns:
        HmrcClient ready for application-restricted endpoints
    """
    return HmrcClient(base_url, auth=HmrcAuth(server_token=server_token), timeout=timeout)
