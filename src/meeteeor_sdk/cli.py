"""
Command-line interface for Meeteeor Python SDK
Provides transport diagnostics, request signing and signed API calls
"""

import argparse
import json
import os
import sys
from typing import Dict, List, Optional

from . import initialize_sdk, __version__
from .api_client import ApiClient
from .api_response import ResponseKind
from .config import ClientConfig, load_client_config_from_file
from .exceptions import ApiException, ConfigurationError, MeeteeorSDKError
from .http.factory import HttpClientFactory
from .signing.mac_signer import create_signer

ENV_USER_ID = 'MEETEEOR_USER_ID'
ENV_APPLICATION_KEY = 'MEETEEOR_APPLICATION_KEY'


def create_parser() -> argparse.ArgumentParser:
    """Create the main argument parser with subcommands."""
    parser = argparse.ArgumentParser(
        prog='meeteeor-cli',
        description='Meeteeor SDK command-line interface for signed API calls'
    )

    parser.add_argument(
        '--version',
        action='version',
        version=f'Meeteeor Python SDK {__version__}'
    )

    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    subparsers.add_parser('transports', help='Show which transports are available')

    sign_parser = subparsers.add_parser('sign', help='Print the authentication headers for a request')
    add_credential_arguments(sign_parser)
    sign_parser.add_argument('method', help='HTTP method')
    sign_parser.add_argument('path', help='Request path including the query string, e.g. /api/space/read?id=1')

    call_parser = subparsers.add_parser('call', help='Perform a signed API call')
    add_credential_arguments(call_parser)
    call_parser.add_argument('method', help='HTTP method')
    call_parser.add_argument('path', help='Resource path relative to the base path, e.g. /transaction/read')
    call_parser.add_argument(
        '--query',
        action='append',
        default=[],
        metavar='NAME=VALUE',
        help='Query parameter (repeatable)'
    )
    call_parser.add_argument('--data', help='JSON request body')
    call_parser.add_argument('--config', help='JSON client configuration file')
    call_parser.add_argument('--base-path', help='Override the API base path')
    call_parser.add_argument(
        '--transport',
        choices=HttpClientFactory.transport_types(),
        help='Transport to use (default: first available)'
    )
    call_parser.add_argument('--timeout', type=float, help='Timeout in seconds')
    call_parser.add_argument('--raw', action='store_true', help='Print the response body unparsed')
    call_parser.add_argument('--debug', action='store_true', help='Log requests and responses to stdout')

    return parser


def add_credential_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        '--user-id',
        type=int,
        default=os.environ.get(ENV_USER_ID),
        help=f'Application user id (default: ${ENV_USER_ID})'
    )
    parser.add_argument(
        '--application-key',
        default=os.environ.get(ENV_APPLICATION_KEY),
        help=f'Application user key (default: ${ENV_APPLICATION_KEY})'
    )


def parse_query(values: List[str]) -> Dict[str, str]:
    """Parse NAME=VALUE pairs, keeping their order."""
    query = {}
    for value in values:
        name, separator, item = value.partition('=')
        if not separator or not name:
            raise ConfigurationError(f"Invalid query parameter '{value}', expected NAME=VALUE")
        query[name] = item
    return query


def _user_id(args) -> int:
    if args.user_id is None:
        raise ConfigurationError(f"A user id is required (--user-id or ${ENV_USER_ID})")
    try:
        return int(args.user_id)
    except ValueError:
        raise ConfigurationError(f"The user id must be an integer, got '{args.user_id}'")


def handle_transports_command(args) -> int:
    """Handle transports command."""
    result = initialize_sdk()
    for transport_type, available in result['transports'].items():
        marker = '✓' if available else '✗'
        print(f"{marker} {transport_type}")

    if not result['compatible']:
        print("Error: no transport is available", file=sys.stderr)
        return 1

    selected = HttpClientFactory.get_client()
    print(f"Auto-selected transport: {selected.name}")
    return 0


def handle_sign_command(args) -> int:
    """Handle sign command."""
    signer = create_signer(_user_id(args), args.application_key)
    headers = signer.authentication_headers(args.method.upper(), args.path)
    print(json.dumps(headers.as_headers(), indent=2))
    return 0


def handle_call_command(args) -> int:
    """Handle call command."""
    config = load_client_config_from_file(args.config) if args.config else ClientConfig()
    if args.base_path:
        config = config.with_base_path(args.base_path)
    if args.transport:
        config = config.with_http_client_type(args.transport)
    if args.debug:
        config = config.with_debugging(True)

    body = None
    if args.data:
        try:
            body = json.loads(args.data)
        except json.JSONDecodeError as e:
            raise ConfigurationError(f"--data is not valid JSON: {e}")

    response_kind = ResponseKind.STRING if args.raw else ResponseKind.JSON

    with ApiClient(_user_id(args), args.application_key, config) as client:
        try:
            response = client.call_api(
                args.path,
                args.method.upper(),
                query_params=parse_query(args.query),
                body=body,
                response_kind=response_kind,
                timeout=args.timeout
            )
        except ApiException as e:
            print(f"Error: {e.message}", file=sys.stderr)
            if not isinstance(e.response_body, str):
                print(json.dumps(e.response_body, indent=2), file=sys.stderr)
            return 1

    if args.raw:
        print(response.data)
    else:
        print(json.dumps(response.data, indent=2))
    return 0


def main(argv: Optional[list] = None) -> int:
    """
    Main entry point for the CLI

    Args:
        argv: Command line arguments (None to use sys.argv)

    Returns:
        int: Exit code (0 for success, non-zero for failure)
    """
    if argv is None:
        argv = sys.argv[1:]

    parser = create_parser()
    args = parser.parse_args(argv)

    try:
        if args.command == 'transports':
            return handle_transports_command(args)
        elif args.command == 'sign':
            return handle_sign_command(args)
        elif args.command == 'call':
            return handle_call_command(args)
        else:
            parser.print_help()
            return 2

    except KeyboardInterrupt:
        print("\nOperation cancelled by user", file=sys.stderr)
        return 130
    except MeeteeorSDKError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == '__main__':
    sys.exit(main())
