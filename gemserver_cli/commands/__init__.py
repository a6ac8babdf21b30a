"""
CLI command modules.
"""

from gemserver_cli.commands import keys, stats

__all__ = ["keys", "stats"]
