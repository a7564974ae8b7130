"""HMRC API client library.

Architecture:
- client.py: HTTP client with versioned Accept header and bearer authorisation
- auth.py: Credential holder (server token, user access token)
- response.py: Response wrapper (is_success, decoded data)
- create_test_user.py: Sandbox test user creation (individual, organisation, agent)
- exceptions.py: Typed exceptions for error handling

Usage:
    from hmrc.core import HmrcClient, HmrcAuth, CreateTestUserService

    client = HmrcClient(auth=HmrcAuth(server_token="MY-SERVER-TOKEN"))
    service = CreateTestUserService(client)
    agent = service.create_agent(services=["agent-services"])

    # Standalone function
    from hmrc.core import create_individual

    person = create_individual("MY-SERVER-TOKEN", services=["national-insurance"])
"""
from .auth import HmrcAuth, AUTH_TYPES
from .client import (
    HmrcClient,
    create_client_with_token,
    SANDBOX_BASE_URL,
    DEFAULT_API_VERSION,
    REQUEST_TIMEOUT,
)
from .response import HmrcResponse
from .exceptions import (
    HmrcError,
    InvalidArgumentError,
    AuthenticationError,
    HmrcAPIError,
    HmrcTransportError,
)
from .create_test_user import (
    CreateTestUserService,
    build_request_data,
    create_individual,
    create_organisation,
    create_agent,
    INDIVIDUALS_ENDPOINT,
    ORGANISATIONS_ENDPOINT,
    AGENTS_ENDPOINT,
    INDIVIDUAL_SERVICES,
    ORGANISATION_SERVICES,
    AGENT_SERVICES,
)

__all__ = [
    # Client
    "HmrcClient",
    "HmrcAuth",
    "HmrcResponse",
    "create_client_with_token",
    "AUTH_TYPES",
    "SANDBOX_BASE_URL",
    "DEFAULT_API_VERSION",
    "REQUEST_TIMEOUT",
    
    # Exceptions
    "HmrcError",
    "InvalidArgumentError",
    "AuthenticationError",
    "HmrcAPIError",
    "HmrcTransportError",
    
    # Create test user
    "CreateTestUserService",
    "build_request_data",
    "create_individual",
    "create_organisation",
    "create_agent",
    "INDIVIDUALS_ENDPOINT",
    "ORGANISATIONS_ENDPOINT",
    "AGENTS_ENDPOINT",
    "INDIVIDUAL_SERVICES",
    "ORGANISATION_SERVICES",
    "AGENT_SERVICES",
]
