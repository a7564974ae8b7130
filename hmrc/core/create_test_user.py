"""HMRC sandbox Create Test User API (api-platform-test-user 1.0).

Creates imaginary individuals, organisations and agents for use against the
HMRC sandbox endpoints. All three endpoints are application-restricted.

See https://developer.service.hmrc.gov.uk/api-documentation/docs/api/service/api-platform-test-user/1.0
"""
from __future__ import annotations
import logging
from typing import Optional, Sequence, Dict, Any

from .client import HmrcClient, create_client_with_token
from .exceptions import InvalidArgumentError
from .response import HmrcResponse

logger = logging.getLogger(__name__)

INDIVIDUALS_ENDPOINT = "/create-test-user/individuals"
ORGANISATIONS_ENDPOINT = "/create-test-user/organisations"
AGENTS_ENDPOINT = "/create-test-user/agents"

# Documented service names. Not enforced here: the API rejects unknown names.
INDIVIDUAL_SERVICES = (
    "national-insurance",
    "self-assessment",
    "mtd-income-tax",
    "customs-services",
)
ORGANISATION_SERVICES = (
    "corporation-tax",
    "paye-for-employers",
    "submit-vat-returns",
    "national-insurance",
    "self-assessment",
    "mtd-income-tax",
    "mtd-vat",
    "lisa",
    "secure-electronic-transfer",
    "relief-at-source",
    "customs-services",
)
AGENT_SERVICES = (
    "agent-services",
)


def build_request_data(services: Optional[Sequence[str]] = None) -> Dict[str, Any]:
    """Build the request body for a create-test-user call.

    Args:
        services: Optional list of service names to enrol the new user in

    Returns:
        {"serviceNames": [...]} or {} when no services are given

    Raises:
        InvalidArgumentError: services is not a list or tuple
    """
    if services is None:
        return {}
    if not isinstance(services, (list, tuple)):
        raise InvalidArgumentError(
            "services", f"must be a list of service names, not {type(services).__name__}"
        )
    return {"serviceNames": list(services)}


class CreateTestUserService:
    """Service for creating HMRC sandbox test users.

    Usage:
        client = HmrcClient(auth=HmrcAuth(server_token="MY-SERVER-TOKEN"))
        service = CreateTestUserService(client)

        person = service.create_individual(services=["self-assessment", "mtd-income-tax"])
        if person.is_success:
            print(person.data["userFullName"])
    """

    def __init__(self, client: HmrcClient):
        """Initialize create-test-user service.

        Args:
            client: HMRC client holding a server token. Any object with a
                compatible post_endpoint_json method is accepted.
        """
        self.client = client

    def create_individual(self, services: Optional[Sequence[str]] = None) -> HmrcResponse:
        """Create a test user which is an individual.

        Args:
            services: Optional enrolments, see INDIVIDUAL_SERVICES

        Returns:
            Response whose data holds userId, password, userFullName,
            emailAddress, individualDetails and identifiers such as nino,
            saUtr, mtdItId or eoriNumber depending on the services requested
        """
        return self._create(INDIVIDUALS_ENDPOINT, services)

    def create_organisation(self, services: Optional[Sequence[str]] = None) -> HmrcResponse:
        """Create a test user which is an organisation.

        Args:
            services: Optional enrolments, see ORGANISATION_SERVICES

        Returns:
            Response whose data holds userId, password, userFullName,
            emailAddress, organisationDetails and identifiers such as ctUtr,
            empRef, vrn, lisaManagerReferenceNumber or eoriNumber
        """
        return self._create(ORGANISATIONS_ENDPOINT, services)

    def create_agent(self, services: Optional[Sequence[str]] = None) -> HmrcResponse:
        """Create a test user which is an agent.

        Args:
            services: Optional enrolments, see AGENT_SERVICES

        Returns:
            Response whose data holds userId, password, userFullName,
            emailAddress and agentServicesAccountNumber
        """
        return self._create(AGENTS_ENDPOINT, services)

    def _create(self, endpoint: str, services: Optional[Sequence[str]]) -> HmrcResponse:
        data = build_request_data(services)
        logger.info("Creating test user via %s (services=%s)", endpoint, data.get("serviceNames", []))
        return self.client.post_endpoint_json(endpoint, data, auth_type="application")


# ─────────────────────────────────────────────────────────────────────────────
# Standalone functions
# ─────────────────────────────────────────────────────────────────────────────
def create_individual(
    server_token: str,
    services: Optional[Sequence[str]] = None,
    base_url: Optional[str] = None,
) -> HmrcResponse:
    """Create an individual test user with a one-off client."""
    client = create_client_with_token(server_token, base_url)
    return CreateTestUserService(client).create_individual(services)


def create_organisation(
    server_token: str,
    services: Optional[Sequence[str]] = None,
    base_url: Optional[str] = None,
) -> HmrcResponse:
    """Create an organisation test user with a one-off client."""
    client = create_client_with_token(server_token, base_url)
    return CreateTestUserService(client).create_organisation(services)


def create_agent(
    server_token: str,
    services: Optional[Sequence[str]] = None,
    base_url: Optional[str] = None,
) -> HmrcResponse:
    """Create an agent test user with a one-off client."""
    client = create_client_with_token(server_token, base_url)
    return CreateTestUserService(client).create_agent(services)
