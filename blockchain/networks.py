"""
Network Table
The three Theta networks reachable through the ETH RPC adaptor
"""

from dataclasses import dataclass, replace
from typing import Dict, Optional


@dataclass(frozen=True)
class Network:
    name: str
    chain_id: int
    rpc_url: str


TESTNET = Network("testnet", 365, "https://eth-rpc-api-testnet.thetatoken.org/rpc")
MAINNET = Network("mainnet", 361, "https://eth-rpc-api.thetatoken.org/rpc")
PRIVATENET = Network("privatenet", 366, "http://localhost:18888/rpc")

NETWORKS: Dict[str, Network] = {
    TESTNET.name: TESTNET,
    MAINNET.name: MAINNET,
    PRIVATENET.name: PRIVATENET,
}


def resolve_network(name: Optional[str], rpc_url: Optional[str] = None) -> Network:
    """
    Select a network by exact name

    Only "mainnet" and "privatenet" are recognised; anything else (unset,
    empty, different case) falls back to testnet.

    Args:
        name: Value of NETWORK
        rpc_url: Optional endpoint override for the selected network

    Returns:
        Network
    """
    network = TESTNET
    if name == "mainnet":
        network = MAINNET
    if name == "privatenet":
        network = PRIVATENET

    if rpc_url:
        network = replace(network, rpc_url=rpc_url)

    return network
