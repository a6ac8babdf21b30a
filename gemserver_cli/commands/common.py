"""
Shared helpers for CLI commands.
"""

from __future__ import annotations

import json
import logging
import sys
from argparse import Namespace
from typing import Callable

from gemserver.backend import Backend
from gemserver.config import GemserverConfig
from gemserver.schemas.errors import GemserverException


logger = logging.getLogger(__name__)


# Exit codes
EXIT_SUCCESS = 0
EXIT_RUNTIME_ERROR = 1


def build_backend(args: Namespace) -> Backend:
    """Create a Backend from the --host flag and the loaded config."""
    config: GemserverConfig = getattr(args, "cli_config", None) or GemserverConfig()
    return Backend(getattr(args, "host", None), config=config)


def run_operation(args: Namespace, operation: Callable[[Backend], str]) -> int:
    """
    Run one backend operation and print the response body.

    Client errors are reported on stderr, or as a JSON error object on
    stdout with --json.
    """
    try:
        with build_backend(args) as backend:
            body = operation(backend)
    except GemserverException as e:
        logger.debug("Operation failed", exc_info=True)
        if getattr(args, "json", False):
            print(e.to_error_model().model_dump_json(indent=2))
        else:
            print(f"Error: {e.message}", file=sys.stderr)
        return EXIT_RUNTIME_ERROR

    if getattr(args, "json", False):
        print(json.dumps({"body": body}, indent=2))
    else:
        print(body)
    return EXIT_SUCCESS
