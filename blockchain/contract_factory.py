"""
Contract Factory
Deploys (or dry-runs deployment of) a compiled contract
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence

import rlp
from web3 import Web3
from eth_utils import keccak, to_canonical_address, to_checksum_address
from loguru import logger

from utils.errors import DeploymentError
from .artifact import Artifact
from .signer import SignerConfig
from .transaction_builder import TransactionBuilder


@dataclass(frozen=True)
class DeploymentResult:
    contract_address: str
    gas_used: int
    simulated: bool = False
    tx_hash: Optional[str] = None
    receipt: Optional[Dict] = None


def compute_create_address(sender: str, nonce: int) -> str:
    """Address a CREATE from sender at nonce would produce"""
    encoded = rlp.encode([to_canonical_address(sender), nonce])
    return to_checksum_address(keccak(encoded)[12:])


class ContractFactory:
    """
    Wraps a web3 contract class built from abi + bytecode
    """

    def __init__(self, abi: List[Dict], bytecode: str, signer: SignerConfig):
        """
        Initialize Contract Factory

        Args:
            abi: Contract ABI
            bytecode: Hex creation bytecode
            signer: Wallet to deploy from
        """
        self.signer = signer
        self.w3 = signer.w3
        try:
            self.contract = self.w3.eth.contract(abi=abi, bytecode=bytecode)
        except Exception as e:
            raise DeploymentError(f"Invalid contract abi or bytecode: {e}") from e
        self.tx_builder = TransactionBuilder(signer)

    def simulate_deploy(self, *args) -> DeploymentResult:
        """
        Estimate gas and the would-be address without broadcasting

        Returns:
            DeploymentResult with simulated=True and no tx hash
        """
        logger.info("Simulating deployment...")
        try:
            constructor = self.contract.constructor(*args)
            gas_used = self.tx_builder.estimate_gas(constructor)
            nonce = self.w3.eth.get_transaction_count(self.signer.address, 'pending')
        except Exception as e:
            raise DeploymentError(f"Simulated deployment failed: {e}") from e

        contract_address = compute_create_address(self.signer.address, nonce)
        logger.success(f"Simulation OK: {contract_address} would use {gas_used} gas")

        return DeploymentResult(
            contract_address=contract_address,
            gas_used=gas_used,
            simulated=True
        )

    def deploy(self, *args) -> DeploymentResult:
        """
        Submit the deployment and wait for the receipt

        Returns:
            DeploymentResult taken from the receipt
        """
        logger.info("Building deployment transaction...")
        try:
            transaction = self.tx_builder.build(self.contract.constructor(*args))
            tx_hash, receipt = self.tx_builder.send(transaction)
        except Exception as e:
            raise DeploymentError(f"Deployment failed: {e}") from e

        if receipt['status'] != 1:
            raise DeploymentError(f"Deployment reverted in transaction {Web3.to_hex(tx_hash)}")

        contract_address = receipt['contractAddress']
        logger.success(f"Contract deployed successfully at {contract_address}")

        return DeploymentResult(
            contract_address=contract_address,
            gas_used=receipt['gasUsed'],
            tx_hash=Web3.to_hex(tx_hash),
            receipt=receipt
        )


def deploy_contract(
    artifact: Artifact,
    args: Sequence[Any],
    signer: SignerConfig,
    simulate: bool = False
) -> DeploymentResult:
    """
    Deploy an artifact with the given constructor arguments

    Args:
        artifact: Loaded contract artifact
        args: Constructor arguments
        signer: Wallet to deploy from
        simulate: Dry run only

    Returns:
        DeploymentResult
    """
    factory = ContractFactory(artifact.abi, artifact.bytecode, signer)
    if simulate:
        return factory.simulate_deploy(*args)
    return factory.deploy(*args)
