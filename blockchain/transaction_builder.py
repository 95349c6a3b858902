"""
Transaction Builder
Builds, signs and sends transactions for the configured wallet
"""

from typing import Dict, Tuple

from web3 import Web3
from loguru import logger

from .signer import SignerConfig


GAS_BUFFER = 1.2  # 20% over the node's estimate


class TransactionBuilder:
    """
    Shared send path for deployments and contract calls
    """

    def __init__(self, signer: SignerConfig):
        """
        Initialize Transaction Builder

        Args:
            signer: Wallet and provider to send with
        """
        self.signer = signer
        self.w3 = signer.w3

    def estimate_gas(self, call) -> int:
        """
        Estimate gas for a constructor or contract function call

        Args:
            call: web3 ContractConstructor or ContractFunction

        Returns:
            Raw gas estimate (reverts raise)
        """
        gas_estimate = call.estimate_gas({'from': self.signer.address})
        logger.debug(f"Gas estimate: {gas_estimate}")
        return gas_estimate

    def build(self, call) -> Dict:
        """
        Build a legacy-priced transaction for the call

        Returns:
            Unsigned transaction dict
        """
        gas_limit = int(self.estimate_gas(call) * GAS_BUFFER)
        gas_price = self.w3.eth.gas_price

        logger.info(f"Gas limit: {gas_limit}")
        logger.info(f"Gas price: {self.w3.from_wei(gas_price, 'gwei')} gwei")

        return call.build_transaction({
            'from': self.signer.address,
            'nonce': self.w3.eth.get_transaction_count(self.signer.address, 'pending'),
            'gas': gas_limit,
            'gasPrice': gas_price,
            'chainId': self.signer.chain_id
        })

    def send(self, transaction: Dict) -> Tuple[bytes, Dict]:
        """
        Sign, broadcast and wait for the receipt

        Args:
            transaction: Unsigned transaction dict

        Returns:
            (tx_hash, receipt)
        """
        signed_tx = self.signer.account.sign_transaction(transaction)
        tx_hash = self.w3.eth.send_raw_transaction(signed_tx.raw_transaction)

        logger.info(f"Transaction sent: {Web3.to_hex(tx_hash)}")
        logger.info("Waiting for confirmation...")

        receipt = self.w3.eth.wait_for_transaction_receipt(
            tx_hash,
            timeout=self.signer.receipt_timeout
        )
        return tx_hash, receipt
