"""Socket tweaks for client scripts."""

from __future__ import annotations

import socket as _sock
from contextlib import suppress


def enable_tcp_nodelay(ws) -> None:
    """Best-effort enable TCP_NODELAY on a websockets connection transport."""
    transport = getattr(ws, "transport", None)
    if transport is not None:
        sock = transport.get_extra_info("socket")
        if sock is not None:
            with suppress(Exception):
                sock.setsockopt(_sock.IPPROTO_TCP, _sock.TCP_NODELAY, 1)


__all__ = ["enable_tcp_nodelay"]
