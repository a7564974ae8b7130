"""Credential holder for HMRC API authorisation modes."""
from __future__ import annotations
from dataclasses import dataclass
from typing import Optional

from .exceptions import AuthenticationError, InvalidArgumentError

AUTH_TYPES = ("application", "user", "open")


@dataclass
class HmrcAuth:
    """Mutable holder for the tokens issued by HMRC.
    
    - server_token: issued when the application is registered; used for
      application-restricted endpoints
    - access_token: OAuth token obtained on behalf of a user; used for
      user-restricted endpoints
    """
    server_token: Optional[str] = None
    access_token: Optional[str] = None
    
    def __repr__(self) -> str:
        server = "set" if self.server_token else "unset"
        access = "set" if self.access_token else "unset"
        return f"HmrcAuth(server_token={server}, access_token={access})"
    
    def token_for(self, auth_type: str) -> Optional[str]:
        """Return the bearer token for an authorisation mode.
        
        Args:
            auth_type: "application", "user" or "open"
            
        Returns:
            Token string, or None for open endpoints
            
        Raises:
            InvalidArgumentError: Unknown auth_type
            AuthenticationError: Required token not set
        """
        if auth_type not in AUTH_TYPES:
            raise InvalidArgumentError(
                "auth_type", f"must be one of {', '.join(AUTH_TYPES)} (got {auth_type!r})"
            )
        if auth_type == "open":
            return None
        if auth_type == "application":
            if not self.server_token:
                raise AuthenticationError("server_token is required for application-restricted endpoints")
            return self.server_token
        if not self.access_token:
            raise AuthenticationError("access_token is required for user-restricted endpoints")
        return self.access_token
