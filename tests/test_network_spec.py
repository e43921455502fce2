import pytest

from ream.network_spec import (
    HOLESKY,
    MAINNET,
    SEPOLIA,
    Network,
    NetworkSpec,
    network_parser,
)


@pytest.mark.parametrize(
    "name, spec, network",
    [
        ("mainnet", MAINNET, Network.MAINNET),
        ("holesky", HOLESKY, Network.HOLESKY),
        ("sepolia", SEPOLIA, Network.SEPOLIA),
    ],
)
def test_known_networks(name, spec, network):
    parsed = network_parser(name)
    assert parsed is spec
    assert parsed.network is network
    assert parsed == NetworkSpec(network)


def test_unknown_network_rejected():
    with pytest.raises(ValueError) as info:
        network_parser("goerli")
    assert str(info.value) == "Not a valid network: goerli, try mainnet, holesky, or sepolia"


def test_names_are_case_sensitive():
    with pytest.raises(ValueError, match="Not a valid network: Mainnet"):
        network_parser("Mainnet")