"""
Signer Configuration
Builds the deploying wallet from PRIVATE_KEY and NETWORK
"""

import os
from dataclasses import dataclass, field
from typing import Mapping, Optional

from web3 import Web3
from eth_account import Account
from eth_account.signers.local import LocalAccount
from loguru import logger
from dotenv import load_dotenv

from utils.errors import SignerConfigError
from .networks import Network, resolve_network


DEFAULT_RPC_REQUEST_TIMEOUT = 30
DEFAULT_RECEIPT_TIMEOUT = 300


@dataclass(frozen=True)
class SignerConfig:
    """
    Wallet bound to a network provider, built once per run

    private_key is excluded from repr.
    """
    private_key: str = field(repr=False)
    network: Network
    w3: Web3
    account: LocalAccount
    receipt_timeout: float = DEFAULT_RECEIPT_TIMEOUT

    @property
    def address(self) -> str:
        return self.account.address

    @property
    def chain_id(self) -> int:
        return self.network.chain_id


def _read_seconds(env: Mapping[str, str], name: str, default: float) -> float:
    raw = env.get(name)
    if raw is None or raw == "":
        return default
    try:
        value = float(raw)
    except ValueError as e:
        raise SignerConfigError(f"{name} must be a number of seconds, got {raw!r}") from e
    if value <= 0:
        raise SignerConfigError(f"{name} must be positive, got {raw!r}")
    return value


def load_signer(env: Optional[Mapping[str, str]] = None) -> SignerConfig:
    """
    Build the signer context from environment configuration

    Args:
        env: Mapping to read from (defaults to os.environ after loading .env)

    Returns:
        SignerConfig
    """
    if env is None:
        load_dotenv()
        env = os.environ

    private_key = env.get('PRIVATE_KEY')
    if not private_key:
        raise SignerConfigError("PRIVATE_KEY must be set in the environment or .env")

    network = resolve_network(env.get('NETWORK'), env.get('THETA_RPC_URL'))
    request_timeout = _read_seconds(env, 'RPC_REQUEST_TIMEOUT', DEFAULT_RPC_REQUEST_TIMEOUT)
    receipt_timeout = _read_seconds(env, 'DEPLOY_RECEIPT_TIMEOUT', DEFAULT_RECEIPT_TIMEOUT)

    try:
        account = Account.from_key(private_key)
    except Exception as e:
        # Do not echo the key itself
        raise SignerConfigError(f"PRIVATE_KEY is not a valid private key: {type(e).__name__}") from e

    w3 = Web3(Web3.HTTPProvider(
        network.rpc_url,
        request_kwargs={'timeout': request_timeout}
    ))

    logger.info(f"Network: {network.name} (chain id {network.chain_id}, {network.rpc_url})")
    logger.info(f"Wallet: {account.address}")

    return SignerConfig(
        private_key=private_key,
        network=network,
        w3=w3,
        account=account,
        receipt_timeout=receipt_timeout
    )
