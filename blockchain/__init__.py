"""
Blockchain Interaction Package
Handles signer setup, artifact loading, deployment and contract calls
"""

from .artifact import Artifact, read_artifact
from .signer import SignerConfig, load_signer
from .contract_factory import ContractFactory, DeploymentResult, deploy_contract
from .contract_manager import ContractManager, MintResult

__all__ = [
    'Artifact',
    'read_artifact',
    'SignerConfig',
    'load_signer',
    'ContractFactory',
    'DeploymentResult',
    'deploy_contract',
    'ContractManager',
    'MintResult'
]
