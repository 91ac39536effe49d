"""
CLI package.

Key Components:
- parsers: argparse configuration for all sub-commands
- commands: command implementations
- helpers: configuration loading, logging setup and file helpers
"""

from .commands import (
    BaseCommand,
    CompareCommand,
    ConvertCommand,
    RoundTripCommand,
    ValidateCommand,
)
from .helpers import load_config, setup_logging
from .parsers import create_argument_parser

__all__ = [
    'BaseCommand',
    'CompareCommand',
    'ConvertCommand',
    'RoundTripCommand',
    'ValidateCommand',
    'create_argument_parser',
    'load_config',
    'setup_logging',
]
