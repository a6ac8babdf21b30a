"""
Gemserver Admin CLI

Command-line interface for gemserver key management and stats.

Usage:
    python -m gemserver_cli create-key --permissions read
    python -m gemserver_cli delete-key <key>
    python -m gemserver_cli stats
    python -m gemserver_cli config --init
"""

__version__ = "0.1.0"
