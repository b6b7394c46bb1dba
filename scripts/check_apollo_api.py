#!/usr/bin/env python3
"""
Check Apollo configuration and API connectivity.

Prints which API keys are configured, then lists the team's account stages
as a cheap authenticated call.
"""

import os
import sys
import json
import logging
import argparse

# Ensure repository root is on path
ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from apollo import ApolloConfig, build_clients

logger = logging.getLogger(__name__)


def check_apollo_api(env_file=None, secrets_file=None) -> int:
    print("Apollo API Check")
    print("=" * 50)

    config = ApolloConfig.load(env_file=env_file, secrets_file=secrets_file)

    print("\nConfiguration Status:")
    for key, is_valid in config.validate().items():
        status = "✓" if is_valid else "✗"
        print(f"  {status} {key}")
    print(f"  Base URL override: {config.base_url or 'NOT SET (family defaults)'}")

    if not config.account_api_key:
        print("\n✗ No account API key found!")
        print("Set APOLLO_ACCOUNT_API_KEY or APOLLO_API_KEY, or add it to config/secrets/apollo-config.json")
        return 1

    with build_clients(config) as clients:
        print(f"\nTesting API endpoint: {clients.accounts.base_url}/account_stages")
        result = clients.accounts.list_account_stages()

    if not result.ok:
        print(f"✗ Request failed ({result.kind.value}): {result.message}")
        return 1

    stages = result.data.get('account_stages') if isinstance(result.data, dict) else None
    if stages is not None:
        print(f"✓ Connected. Found {len(stages)} account stages")
    else:
        print("✓ Connected. Response data:", json.dumps(result.data, indent=2)[:500])

    print("\n" + "=" * 50)
    print("✓ Apollo API check completed successfully!")
    return 0


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument('--env-file', default='.env', help='Path to a .env file (default: .env)')
    parser.add_argument('--secrets-file', default=None, help='Path to apollo-config.json')
    parser.add_argument('--verbose', action='store_true', help='Log each request at DEBUG level')
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='%(asctime)s - %(levelname)s - %(message)s',
    )
    return check_apollo_api(env_file=args.env_file, secrets_file=args.secrets_file)


if __name__ == "__main__":
    sys.exit(main())
