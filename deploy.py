"""
Contract Deployment
Usage: python deploy.py --artifact build/Token.json --args '["Token", "TKN"]' [-S]
"""

import sys

from utils.cli import main

if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
