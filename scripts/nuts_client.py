#!/usr/bin/env python3
"""Query a running nut server from the terminal.

Example:
    python scripts/nuts_client.py --board "Ah,Kd,2c"
    python scripts/nuts_client.py --deal turn
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
from typing import Any, Dict

from websockets.asyncio.client import connect

logging.basicConfig(level=logging.INFO)

LOGGER = logging.getLogger("nuts_client")


async def request(url: str, message: Dict[str, Any]) -> Dict[str, Any]:
    async with connect(url) as ws:
        await ws.send(json.dumps(message))
        return json.loads(await ws.recv())


def print_reply(reply: Dict[str, Any]) -> None:
    msg_type = reply.get("type")
    if msg_type == "error":
        LOGGER.error("%s: %s", reply.get("code"), reply.get("msg"))
        return
    if msg_type == "board":
        print(f"{reply['street']}: {' '.join(reply['board'])}")
        return
    if msg_type == "nuts":
        print(f"Board: {' '.join(reply['board'])}")
        print(f"Nut cards: {' '.join(reply['hole'])}")
    print(f"Hand: {reply['display']} ({reply['hand_type']})")


async def run(args: argparse.Namespace) -> None:
    if args.deal:
        dealt = await request(args.url, {"type": "deal", "street": args.deal.upper()})
        print_reply(dealt)
        if dealt.get("type") != "board":
            return
        board = dealt["board"]
    else:
        board = [label.strip() for label in args.board.split(",")]
    print_reply(await request(args.url, {"type": "find_nuts", "board": board}))


def main() -> None:
    parser = argparse.ArgumentParser(description="Nut server client")
    parser.add_argument("--url", default="ws://localhost:8765")
    group = parser.add_mutually_exclusive_group(required=True)
    group.add_argument("--board", help="Comma-separated board, e.g. 'Ah,Kd,2c'")
    group.add_argument("--deal", choices=["flop", "turn"], help="Ask the server to deal a board first")
    asyncio.run(run(parser.parse_args()))


if __name__ == "__main__":
    main()
