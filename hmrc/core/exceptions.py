"""HMRC-specific exceptions for error handling."""


class HmrcError(Exception):
    """Base exception for all HMRC API operations."""
    pass


class InvalidArgumentError(HmrcError, ValueError):
    """A caller-supplied parameter has the wrong type or value.
    
    Attributes:
        param: Name of the offending parameter
    """
    
    def __init__(self, param: str, message: str):
        self.param = param
        self.message = message
        super().__init__(f"{param}: {message}")


class AuthenticationError(HmrcError):
    """No credential is available for the requested authorisation mode."""
    pass


class HmrcAPIError(HmrcError):
    """Unsuccessful response from the HMRC API.
    
    Attributes:
        status_code: HTTP status code
        code: HMRC error code from the response body (e.g. INVALID_CREDENTIALS)
        message: Error message from the response body
        endpoint: URL that failed
    """
    
    def __init__(self, status_code: int, code: str, message: str, endpoint: str):
        self.status_code = status_code
        self.code = code
        self.message = message
        self.endpoint = endpoint
        super().__init__(f"[{status_code}] {endpoint}: {code} {message}")


class HmrcTransportError(HmrcError):
    """Request never produced an HTTP response (DNS, connection, timeout)."""
    
    def __init__(self, endpoint: str, original: Exception):
        self.endpoint = endpoint
        self.original = original
        super().__init__(f"{endpoint}: {original}")
