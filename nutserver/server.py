from __future__ import annotations

import asyncio
import json
import logging
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Tuple, Union

import websockets
from websockets.asyncio.server import ServerConnection, serve

from holdem.cards import Card, build_deck, cards_to_labels, deal, parse_cards
from holdem.evaluator import Hand, best_hand, hand_from_labels
from holdem.exceptions import CardParseError, HoldemError
from holdem.models import Street
from holdem.nuts import find_nuts

from .models import ServerConfig

LOGGER = logging.getLogger("nut_host")

# NutServer answers evaluation requests over WebSockets. The holdem package
# stays pure; sockets, JSON and error codes live here.


class RequestError(Exception):
    def __init__(self, code: str, msg: str) -> None:
        super().__init__(msg)
        self.code = code
        self.msg = msg


def hand_payload(hand: Hand) -> Dict[str, object]:
    return {
        "cards": cards_to_labels(hand.cards),
        "display": str(hand),
        "hand_type": hand.hand_type.describe(),
        "ranks": [rank.symbol for rank in hand.hand_type.ranks],
    }


class NutServer:
    def __init__(self, config: Optional[ServerConfig] = None) -> None:
        self.config = config or ServerConfig()
        self.requests_served = 0

    async def start(self) -> None:
        async with serve(self._handle_connection, self.config.host, self.config.port):
            LOGGER.info("Nut server listening on %s:%s", self.config.host, self.config.port)
            await asyncio.Future()

    async def _handle_connection(self, websocket: ServerConnection) -> None:
        LOGGER.info("Client connected")
        try:
            async for raw in websocket:
                message = self._decode(raw)
                if message is None:
                    await self._send_error(websocket, code="BAD_JSON", msg="Message is not valid JSON")
                    continue
                await self._dispatch(websocket, message)
        except websockets.ConnectionClosed:
            pass
        LOGGER.info("Client disconnected after %s requests", self.requests_served)

    async def _dispatch(self, websocket: ServerConnection, message: Dict[str, Any]) -> None:
        msg_type = message.get("type")
        handlers = {
            "deal": self._handle_deal,
            "classify": self._handle_classify,
            "best_hand": self._handle_best_hand,
            "find_nuts": self._handle_find_nuts,
        }
        handler = handlers.get(msg_type) if isinstance(msg_type, str) else None
        if handler is None:
            await self._send_error(websocket, code="UNKNOWN_TYPE", msg="Unsupported message type")
            return
        try:
            reply_type, payload = await handler(message)
        except RequestError as exc:
            LOGGER.debug("Rejected %s request: %s (%s)", msg_type, exc.code, exc.msg)
            await self._send_error(websocket, code=exc.code, msg=exc.msg)
            return
        self.requests_served += 1
        await self._send_json(websocket, reply_type, payload)

    async def _handle_deal(self, message: Dict[str, Any]) -> Tuple[str, Dict[str, object]]:
        street_raw = message.get("street", Street.FLOP.value)
        seed = message.get("seed")
        if not isinstance(street_raw, str) or street_raw.upper() not in Street.__members__:
            raise RequestError("BAD_SCHEMA", "street must be FLOP or TURN")
        if seed is not None and (not isinstance(seed, int) or isinstance(seed, bool)):
            raise RequestError("BAD_SCHEMA", "seed must be an integer")
        street = Street(street_raw.upper())
        deck = build_deck(seed)
        board = deal(deck, street.board_size)
        assert board is not None
        return "board", {"street": street.value, "board": cards_to_labels(board)}

    async def _handle_classify(self, message: Dict[str, Any]) -> Tuple[str, Dict[str, object]]:
        labels = self._labels(message, "cards")
        try:
            hand = hand_from_labels(labels)
        except CardParseError as exc:
            raise RequestError("BAD_CARD", str(exc)) from exc
        except HoldemError as exc:
            raise RequestError("BAD_HAND", str(exc)) from exc
        return "hand", hand_payload(hand)

    async def _handle_best_hand(self, message: Dict[str, Any]) -> Tuple[str, Dict[str, object]]:
        cards = self._cards(message, "cards")
        if len(cards) > self.config.max_pool_size:
            raise RequestError(
                "BAD_HAND", f"Pool has {len(cards)} cards; at most {self.config.max_pool_size} allowed"
            )
        try:
            hand = await asyncio.to_thread(best_hand, cards)
        except HoldemError as exc:
            raise RequestError("BAD_HAND", str(exc)) from exc
        return "hand", hand_payload(hand)

    async def _handle_find_nuts(self, message: Dict[str, Any]) -> Tuple[str, Dict[str, object]]:
        board = self._cards(message, "board")
        try:
            # A turn board costs a few thousand evaluations; keep the loop free.
            hand, hole = await asyncio.to_thread(find_nuts, board)
        except HoldemError as exc:
            raise RequestError("BAD_BOARD", str(exc)) from exc
        payload = hand_payload(hand)
        payload["board"] = cards_to_labels(board)
        payload["hole"] = cards_to_labels(hole)
        return "nuts", payload

    def _labels(self, message: Dict[str, Any], key: str) -> List[str]:
        labels = message.get(key)
        if not isinstance(labels, list) or not all(isinstance(label, str) for label in labels):
            raise RequestError("BAD_SCHEMA", f"{key} must be a list of card labels")
        return labels

    def _cards(self, message: Dict[str, Any], key: str) -> List[Card]:
        labels = self._labels(message, key)
        try:
            return parse_cards(labels)
        except CardParseError as exc:
            raise RequestError("BAD_CARD", str(exc)) from exc

    async def _send_json(self, websocket: ServerConnection, msg_type: str, payload: Dict[str, object]) -> None:
        try:
            await websocket.send(self._envelope(msg_type, payload))
        except websockets.ConnectionClosed:
            pass

    async def _send_error(self, websocket: ServerConnection, code: str, msg: str) -> None:
        await self._send_json(websocket, "error", {"code": code, "msg": msg})

    def _envelope(self, msg_type: str, payload: Dict[str, object]) -> str:
        body = {"type": msg_type, "v": 1, "ts": datetime.now(timezone.utc).isoformat()}
        body.update(payload)
        return json.dumps(body)

    def _decode(self, raw: Union[str, bytes]) -> Optional[Dict[str, Any]]:
        try:
            message = json.loads(raw)
        except (json.JSONDecodeError, UnicodeDecodeError):
            return None
        if not isinstance(message, dict):
            return {}
        return message
