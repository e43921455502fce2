"""Supported networks and command-line network selection."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Network(Enum):
    MAINNET = "mainnet"
    HOLESKY = "holesky"
    SEPOLIA = "sepolia"


@dataclass(frozen=True)
class NetworkSpec:
    network: Network


MAINNET = NetworkSpec(Network.MAINNET)
HOLESKY = NetworkSpec(Network.HOLESKY)
SEPOLIA = NetworkSpec(Network.SEPOLIA)

_SPECS = {
    "mainnet": MAINNET,
    "holesky": HOLESKY,
    "sepolia": SEPOLIA,
}


def network_parser(network_string: str) -> NetworkSpec:
    """Return the spec for a network name, raising ValueError for unknown names."""
    try:
        return _SPECS[network_string]
    except KeyError:
        raise ValueError(
            f"Not a valid network: {network_string}, try mainnet, holesky, or sepolia"
        ) from None