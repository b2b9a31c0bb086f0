"""
Follow a redirect chain and print every hop.

Usage:
    python examples/follow_redirects.py https://httpbin.org/redirect/3
"""

import asyncio
import logging
import sys

from redirectguard import RedirectClient, load_config


def print_hop(event):
    marker = " (cross-origin)" if event.cross_origin else ""
    print(f"  hop {event.hop}: {event.status} -> {event.method} {event.url}{marker}")


async def main(url: str) -> None:
    config = load_config()
    async with RedirectClient(config, on_redirect=print_hop) as client:
        response = await client.get(url)
        try:
            body = await response.read()
            print(f"final: {response.status} {response.url} ({len(body)} bytes)")
        finally:
            await response.dispose()


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    asyncio.run(main(sys.argv[1] if len(sys.argv) > 1 else "http://example.com/"))
