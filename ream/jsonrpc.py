"""JSON-RPC request and response helpers and engine API JWT claims."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


class JsonRpcError(RuntimeError):
    """Raised when a JSON-RPC response carries no result."""


def strip_prefix(string: str) -> str:
    """Remove a leading ``0x`` if present."""
    return string[2:] if string.startswith("0x") else string


@dataclass
class JsonRpcRequest:
    method: str
    params: list[Any] = field(default_factory=list)
    id: int = 1
    jsonrpc: str = "2.0"

    def to_json(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "jsonrpc": self.jsonrpc,
            "method": self.method,
            "params": list(self.params),
        }


@dataclass
class Claims:
    """Engine API JWT claims."""

    iat: int
    id: str | None = None
    clv: str | None = None

    def to_json(self) -> dict[str, Any]:
        return {"iat": self.iat, "id": self.id, "clv": self.clv}


def unwrap_response(response: Any) -> Any:
    """Return the ``result`` of a decoded JSON-RPC response, or raise JsonRpcError."""
    if isinstance(response, dict) and "result" in response:
        return response["result"]
    raise JsonRpcError(f"Failed to deserialize json {response!r}")