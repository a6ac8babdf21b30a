"""
CLI Key Commands

Create and delete gemserver keys.

Usage:
    gemserver-admin create-key [--permissions read|write|both]
    gemserver-admin delete-key <key>
"""

from __future__ import annotations

from argparse import Namespace

from gemserver_cli.commands.common import run_operation


def create_key_cmd(args: Namespace) -> int:
    """Create a key and print the server's response (the new key)."""
    return run_operation(args, lambda backend: backend.create_key(args.permissions))


def delete_key_cmd(args: Namespace) -> int:
    """Delete a key and print the server's response."""
    return run_operation(args, lambda backend: backend.delete_key(args.key))
