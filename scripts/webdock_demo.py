#!/usr/bin/env python3
"""
Webdock client demo

Pings the API, lists servers and, when asked, provisions a server.
Reads the token from --token or WEBDOCK_API_TOKEN.
"""
import asyncio
import argparse
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from api.client import get_api_client
from exceptions import WebdockException
from utils.logging import get_contextual_logger, set_request_context, setup_logging

logger = get_contextual_logger('webdock_demo')


async def main():
    """Main script execution."""
    parser = argparse.ArgumentParser(description='Exercise the Webdock API client')
    parser.add_argument('--token', help='API token (defaults to WEBDOCK_API_TOKEN)')
    parser.add_argument('--provision', metavar='SLUG', help='Provision a server with this slug')
    parser.add_argument('--location', default='eu', help='Location id for --provision')
    parser.add_argument('--profile', default='', help='Profile slug for --provision')
    parser.add_argument('--image', default='', help='Image slug for --provision')
    parser.add_argument('--json-log', help='Also write structured JSON logs to this file')
    args = parser.parse_args()

    setup_logging(json_log_path=args.json_log)

    async with get_api_client(api_token=args.token) as client:
        trace_id = logger.start_operation('demo')
        try:
            await client.ping()
            print("Ping successful!")

            servers = await client.servers()
            print(f"{len(servers)} servers on the account")
            for server in servers:
                print(f"  {server.get('slug')}: {server.get('status')}")

            if args.provision:
                set_request_context(resource='servers', method='POST', object_id=args.provision)
                result = await client.provision_server({
                    'name': args.provision,
                    'slug': args.provision,
                    'locationId': args.location,
                    'profileSlug': args.profile,
                    'imageSlug': args.image,
                })
                print(f"Server provisioned successfully: {result}")

        except WebdockException as e:
            logger.error("Demo failed", error=e)
            logger.end_operation(trace_id, 'failed')
            print(f"Error: {e}")
            return 1

        logger.end_operation(trace_id)
    return 0


if __name__ == '__main__':
    sys.exit(asyncio.run(main()))
