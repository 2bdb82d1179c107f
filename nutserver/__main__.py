import argparse
import asyncio
import logging

from .models import ServerConfig
from .server import NutServer


def main() -> None:
    defaults = ServerConfig()
    parser = argparse.ArgumentParser(description="Hold'em nut server")
    parser.add_argument("--host", default=defaults.host)
    parser.add_argument("--port", type=int, default=defaults.port)
    parser.add_argument(
        "--max-pool-size",
        type=int,
        default=defaults.max_pool_size,
        help="Largest card pool accepted by best_hand requests",
    )
    parser.add_argument("--verbose", action="store_true", help="Log rejected requests and search details")
    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)
    server = NutServer(ServerConfig(host=args.host, port=args.port, max_pool_size=args.max_pool_size))
    asyncio.run(server.start())


if __name__ == "__main__":
    main()
