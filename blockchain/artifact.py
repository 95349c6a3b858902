"""
Artifact Reader
Loads compiled contract JSON (abi + bytecode)
"""

import json
from dataclasses import dataclass
from typing import Dict, List, Optional

from loguru import logger

from utils.errors import ArtifactNotFoundError, ArtifactParseError


@dataclass(frozen=True)
class Artifact:
    abi: List[Dict]
    bytecode: str
    path: str
    contract_name: Optional[str] = None

    def has_function(self, name: str) -> bool:
        return any(
            isinstance(entry, dict)
            and entry.get('type') == 'function'
            and entry.get('name') == name
            for entry in self.abi
        )


def _extract_bytecode(raw, path: str) -> str:
    # solc standard-json puts the hex under {"object": ...}
    if isinstance(raw, dict):
        raw = raw.get('object')

    if not isinstance(raw, str) or not raw:
        raise ArtifactParseError(f"Artifact {path} has no usable 'bytecode' field")

    return raw if raw.startswith('0x') else '0x' + raw


def read_artifact(path: str) -> Artifact:
    """
    Read and parse a contract artifact

    Args:
        path: Path to a Hardhat/Truffle/solc style JSON artifact

    Returns:
        Artifact
    """
    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = f.read()
    except OSError as e:
        raise ArtifactNotFoundError(f"Cannot read artifact {path}: {e}") from e

    try:
        contract_json = json.loads(data)
    except json.JSONDecodeError as e:
        raise ArtifactParseError(
            f"Artifact {path} is not valid JSON (line {e.lineno}, column {e.colno}): {e.msg}"
        ) from e

    if not isinstance(contract_json, dict):
        raise ArtifactParseError(f"Artifact {path} must be a JSON object")

    abi = contract_json.get('abi')
    if not isinstance(abi, list):
        raise ArtifactParseError(f"Artifact {path} has no 'abi' list")
    if not all(isinstance(entry, dict) for entry in abi):
        raise ArtifactParseError(f"Artifact {path} has non-object 'abi' entries")

    artifact = Artifact(
        abi=abi,
        bytecode=_extract_bytecode(contract_json.get('bytecode'), path),
        path=path,
        contract_name=contract_json.get('contractName')
    )

    logger.info(f"Loaded artifact {artifact.contract_name or path} ({len(abi)} ABI entries)")
    return artifact
