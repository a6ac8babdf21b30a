"""
Module execution entry point.

Allows running with: python -m gemserver_cli
"""

import sys
from gemserver_cli.main import main

if __name__ == "__main__":
    sys.exit(main())
