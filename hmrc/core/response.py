"""Wrapper around HTTP responses returned by the HMRC API."""
from __future__ import annotations
from typing import Any, Optional

import requests

from .exceptions import HmrcAPIError


class HmrcResponse:
    """Decoded view of an HMRC API response.

    The JSON body is decoded lazily and cached. A body that cannot be decoded
    is replaced by an error document so callers can always read ``code`` and
    ``message`` from ``data``:

        {"code": "INVALID_JSON", "message": "..."}

    Usage:
        response = client.post_endpoint_json("/create-test-user/individuals", {})
        if response.is_success:
            print(response.data["userId"])
    """

    def __init__(self, http: requests.Response):
        self.http = http
        self._data: Optional[Any] = None
        self._decoded = False
        self._is_json = False

    def __repr__(self) -> str:
        return f"<HmrcResponse [{self.status_code}] {self.http.url}>"

    @property
    def status_code(self) -> int:
        return self.http.status_code

    @property
    def data(self) -> Any:
        """Decoded response body, or an INVALID_JSON error document."""
        if not self._decoded:
            self._decode()
        return self._data

    @property
    def is_json(self) -> bool:
        if not self._decoded:
            self._decode()
        return self._is_json

    @property
    def is_success(self) -> bool:
        """True for a 2xx status carrying a JSON body."""
        return 200 <= self.status_code < 300 and self.is_json

    def raise_for_error(self) -> "HmrcResponse":
        """Raise HmrcAPIError unless the response is successful.

        Returns:
            self, to allow chaining
        """
        if self.is_success:
            return self
        data = self.data if isinstance(self.data, dict) else {}
        raise HmrcAPIError(
            self.status_code,
            str(data.get("code", "UNKNOWN_ERROR")),
            str(data.get("message", self.http.reason or "")),
            self.http.url,
        )

    def _decode(self) -> None:
        try:
            self._data = self.http.json()
            self._is_json = True
        except ValueError as exc:
            self._data = {
                "code": "INVALID_JSON",
                "message": f"Response body is not valid JSON: {exc}",
            }
        self._decoded = True
