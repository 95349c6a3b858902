"""
Contract Manager
Calls into an already deployed contract
"""

from dataclasses import dataclass
from typing import Dict

from web3 import Web3
from loguru import logger

from utils.errors import MintError
from .artifact import Artifact
from .signer import SignerConfig
from .transaction_builder import TransactionBuilder


MINT_RECIPIENT = '0x2e833968e5bb786ae419c4d13189fb081cc43bab'
MINT_TOKEN_URI = 'ipfs://QmYwAPJzv5CZsnAzt8auVZRnG8Yc1bqF9XD2dKqGQxd7sZ/metadata.json'


@dataclass(frozen=True)
class MintResult:
    tx_hash: str
    status: int
    gas_used: int
    receipt: Dict

    def __str__(self) -> str:
        return f"{self.tx_hash} (status {self.status}, gas used {self.gas_used})"


class ContractManager:
    """
    Manages calls on a deployed contract
    """

    def __init__(self, signer: SignerConfig):
        """
        Initialize Contract Manager

        Args:
            signer: Wallet to sign calls with
        """
        self.signer = signer
        self.w3 = signer.w3
        self.tx_builder = TransactionBuilder(signer)

    def load_contract(self, contract_address: str, artifact: Artifact):
        """Bind the artifact ABI to a deployed address"""
        return self.w3.eth.contract(
            address=Web3.to_checksum_address(contract_address),
            abi=artifact.abi
        )

    def mint(self, contract_address: str, artifact: Artifact) -> MintResult:
        """
        Mint one token to the fixed recipient with the fixed metadata URI

        Args:
            contract_address: Deployed contract address
            artifact: Artifact the contract was deployed from

        Returns:
            MintResult
        """
        if not artifact.has_function('mint'):
            raise MintError(f"Artifact {artifact.path} has no mint function")

        logger.info(f"Minting to {MINT_RECIPIENT} with URI {MINT_TOKEN_URI}")
        try:
            contract = self.load_contract(contract_address, artifact)
            call = contract.functions.mint(
                Web3.to_checksum_address(MINT_RECIPIENT),
                MINT_TOKEN_URI
            )
            tx_hash, receipt = self.tx_builder.send(self.tx_builder.build(call))
        except Exception as e:
            raise MintError(f"Mint failed: {e}") from e

        if receipt['status'] != 1:
            raise MintError(f"Mint reverted in transaction {Web3.to_hex(tx_hash)}")

        logger.success(f"Minted: {Web3.to_hex(tx_hash)}")
        return MintResult(
            tx_hash=Web3.to_hex(tx_hash),
            status=receipt['status'],
            gas_used=receipt['gasUsed'],
            receipt=receipt
        )
