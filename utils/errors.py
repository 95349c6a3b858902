"""
Error Types
Every failure surfaces to the CLI as one of these
"""


class DeployToolError(Exception):
    """Base class for all deploy/mint failures"""


class ConfigError(DeployToolError):
    """Bad or missing environment configuration"""


class SignerConfigError(ConfigError):
    """Private key or network settings could not produce a wallet"""


class ArtifactError(DeployToolError):
    """Contract artifact could not be loaded"""


class ArtifactNotFoundError(ArtifactError):
    """Artifact file missing or unreadable"""


class ArtifactParseError(ArtifactError):
    """Artifact is not valid JSON or lacks abi/bytecode"""


class ConstructorArgsError(DeployToolError):
    """--args value is not a JSON array"""


class ChainError(DeployToolError):
    """Failure reported by the node or web3"""


class DeploymentError(ChainError):
    """Contract deployment (real or simulated) failed"""


class MintError(ChainError):
    """Mint call on the deployed contract failed"""
