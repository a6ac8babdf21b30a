"""
CLI Stats Command

Usage:
    gemserver-admin stats
"""

from __future__ import annotations

from argparse import Namespace

from gemserver_cli.commands.common import run_operation


def stats_cmd(args: Namespace) -> int:
    """Print stored private gem and cached dependency stats."""
    return run_operation(args, lambda backend: backend.stats())
