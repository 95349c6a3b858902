"""
Contract Deployment + Mint
Deploys the artifact, then mints one token on the new contract
Usage: python deploy_and_mint.py --artifact build/NFT.json --args '["NFT", "NFT"]'
"""

import sys

from utils.cli import main_with_mint

if __name__ == "__main__":
    sys.exit(main_with_mint(sys.argv[1:]))
