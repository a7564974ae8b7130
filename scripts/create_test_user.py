"""Create HMRC sandbox test users from the command line.

This module serves as a CLI wrapper around hmrc.core.create_test_user.
"""
from __future__ import annotations
import argparse
import json
import logging
import sys
from pathlib import Path

SCRIPT_DIR = Path(__file__).parent
PROJECT_ROOT = SCRIPT_DIR.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from hmrc.config import load_settings
from hmrc.core import (
    CreateTestUserService,
    HmrcClient,
    HmrcAuth,
    INDIVIDUAL_SERVICES,
    ORGANISATION_SERVICES,
    AGENT_SERVICES,
)
from hmrc.core.exceptions import HmrcError

USER_TYPES = {
    "individual": ("create_individual", INDIVIDUAL_SERVICES),
    "organisation": ("create_organisation", ORGANISATION_SERVICES),
    "agent": ("create_agent", AGENT_SERVICES),
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Create HMRC sandbox test users")
    try:
        settings = load_settings()
    except RuntimeError as e:
        parser.error(str(e))

    parser.add_argument("--base-url", default=settings.base_url)
    parser.add_argument("--api-version", default=settings.api_version,
                        help="API version sent in the Accept header (default: HMRC_API_VERSION)")
    parser.add_argument("--server-token", default=settings.server_token,
                        help="Application server token (default: HMRC_SERVER_TOKEN)")
    parser.add_argument("--timeout", type=float, default=settings.request_timeout)
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")

    sub = parser.add_subparsers(dest="cmd")
    for user_type, (_, services) in USER_TYPES.items():
        sp = sub.add_parser(user_type, help=f"Create a test {user_type}")
        sp.add_argument("--service", dest="services", action="append", metavar="NAME",
                        help=f"Enrol in a service (repeatable). Known: {', '.join(services)}")
        sp.add_argument("--list-services", action="store_true",
                        help="Print the documented service names and exit")
    return parser


def main(argv: list[str] | None = None) -> None:
    """Command-line entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.cmd:
        parser.print_help()
        return

    method_name, known_services = USER_TYPES[args.cmd]
    if args.list_services:
        for name in known_services:
            print(name)
        return

    if not args.server_token:
        parser.error("Missing server token (set HMRC_SERVER_TOKEN or pass --server-token)")

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    client = HmrcClient(
        args.base_url,
        auth=HmrcAuth(server_token=args.server_token),
        api_version=args.api_version,
        timeout=args.timeout,
    )
    service = CreateTestUserService(client)

    try:
        response = getattr(service, method_name)(args.services)
    except HmrcError as e:
        print(f"[{args.cmd}] Error: {e}", file=sys.stderr)
        sys.exit(1)

    if not response.is_success:
        data = response.data if isinstance(response.data, dict) else {}
        print(
            f"[{args.cmd}] HMRC returned {response.status_code}: "
            f"{data.get('code', 'UNKNOWN_ERROR')} {data.get('message', '')}".rstrip(),
            file=sys.stderr,
        )
        sys.exit(1)

    print(json.dumps(response.data, indent=2, sort_keys=True))


if __name__ == "__main__":
    main()
