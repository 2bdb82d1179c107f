from __future__ import annotations

from dataclasses import dataclass


@dataclass
class ServerConfig:
    host: str = "0.0.0.0"
    port: int = 8765
    # Hold'em never shows more than seven cards; larger pools grow as C(n, 5).
    max_pool_size: int = 7
