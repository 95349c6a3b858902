"""
Deploy CLI
Shared entry point for deploy.py and deploy_and_mint.py
"""

import argparse
import sys
from typing import List, Mapping, Optional

from loguru import logger

from blockchain.artifact import read_artifact
from blockchain.contract_factory import DeploymentResult, deploy_contract
from blockchain.contract_manager import ContractManager
from blockchain.signer import load_signer
from .args_parser import parse_constructor_args
from .logging_config import configure_logging


BANNER_RULE = "  " + "-" * 92


class DeployArgumentParser(argparse.ArgumentParser):
    """Usage errors exit 1 like every other failure"""

    def error(self, message):
        self.print_usage(sys.stderr)
        self.exit(1, f"{self.prog}: error: {message}\n")


def build_parser(mint: bool = False) -> argparse.ArgumentParser:
    parser = DeployArgumentParser(
        description=(
            "Deploy a compiled contract to Theta and mint one token"
            if mint else
            "Deploy a compiled contract to Theta"
        )
    )
    parser.add_argument('--artifact', required=True,
                        help='Path to a JSON artifact with abi and bytecode')
    parser.add_argument('--args', default='[]',
                        help='Constructor arguments as a JSON array (default: [])')
    parser.add_argument('-S', dest='simulate', action='store_true',
                        help='Simulate the deployment instead of sending it')
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='Debug logging')
    return parser


def format_banner(result: DeploymentResult) -> str:
    return "\n".join([
        "",
        BANNER_RULE,
        f"                Deployed contract to: {result.contract_address}",
        f"                Gas used:             {result.gas_used}",
        BANNER_RULE,
        "",
    ])


def run(
    argv: Optional[List[str]] = None,
    mint: bool = False,
    env: Optional[Mapping[str, str]] = None
) -> int:
    """
    Run the deploy (and optional mint) sequence

    Args:
        argv: Command line arguments without the program name
        mint: Mint a token after deploying
        env: Environment override (defaults to os.environ + .env)

    Returns:
        Process exit code: 0 on success, 1 on any error
    """
    options = build_parser(mint).parse_args(argv)
    configure_logging(options.verbose)

    try:
        artifact = read_artifact(options.artifact)
        signer = load_signer(env)
        constructor_args = parse_constructor_args(options.args)

        result = deploy_contract(artifact, constructor_args, signer, simulate=options.simulate)
        print(format_banner(result))

        if mint:
            if result.simulated:
                logger.warning("Simulated deployment, skipping mint")
            else:
                mint_result = ContractManager(signer).mint(result.contract_address, artifact)
                print(f"Mint result: {mint_result}")

    except Exception as e:
        logger.opt(exception=e).debug("Run failed")
        print(f"{type(e).__name__}: {e}", file=sys.stderr)
        return 1

    return 0


def main(argv: Optional[List[str]] = None) -> int:
    return run(argv)


def main_with_mint(argv: Optional[List[str]] = None) -> int:
    return run(argv, mint=True)
