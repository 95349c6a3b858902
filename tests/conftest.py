"""
Shared fixtures
Mocked web3 so no node is required
"""

import json
from unittest.mock import Mock

import pytest
from hexbytes import HexBytes
from loguru import logger

from blockchain.networks import TESTNET
from blockchain.signer import SignerConfig


# Hardhat's well-known dev account #0
TEST_PRIVATE_KEY = '0xac0974bec39a17e36ba4a6b4d238ff944bacb478cbed5efcae784d7bf4f2ff80'
TEST_ADDRESS = '0xf39Fd6e51aad88F6F4ce6aB8827279cffFb92266'

DEPLOYED_ADDRESS = '0x5FbDB2315678afecb367f032d93F642f64180aa3'
TX_HASH = HexBytes('0x' + 'ab' * 32)

MINTABLE_ABI = [
    {
        "inputs": [
            {"name": "to", "type": "address"},
            {"name": "uri", "type": "string"}
        ],
        "name": "mint",
        "outputs": [],
        "stateMutability": "nonpayable",
        "type": "function"
    }
]


@pytest.fixture(autouse=True)
def reset_logger():
    yield
    logger.remove()


@pytest.fixture
def w3():
    """Mock Web3 instance with a successful deployment receipt"""
    w3 = Mock()
    w3.eth.gas_price = 4000 * 10**9
    w3.eth.get_transaction_count.return_value = 7
    w3.eth.send_raw_transaction.return_value = TX_HASH
    w3.eth.wait_for_transaction_receipt.return_value = {
        'status': 1,
        'contractAddress': DEPLOYED_ADDRESS,
        'gasUsed': 123456,
        'transactionHash': TX_HASH
    }

    contract = w3.eth.contract.return_value
    contract.constructor.return_value.estimate_gas.return_value = 100000
    contract.constructor.return_value.build_transaction.return_value = {'data': '0x6080'}
    contract.functions.mint.return_value.estimate_gas.return_value = 50000
    contract.functions.mint.return_value.build_transaction.return_value = {'data': '0xd0def521'}
    return w3


@pytest.fixture
def account():
    """Mock signing account"""
    account = Mock(address=TEST_ADDRESS)
    account.sign_transaction.return_value = Mock(raw_transaction=b'signed')
    return account


@pytest.fixture
def signer(w3, account):
    return SignerConfig(
        private_key=TEST_PRIVATE_KEY,
        network=TESTNET,
        w3=w3,
        account=account,
        receipt_timeout=5
    )


@pytest.fixture
def artifact_file(tmp_path):
    """Write an artifact to disk and return its path"""
    def _write(abi=None, bytecode='0x6080604052', **extra):
        path = tmp_path / 'Token.json'
        body = {'abi': abi if abi is not None else [], 'bytecode': bytecode}
        body.update(extra)
        path.write_text(json.dumps(body))
        return str(path)
    return _write
