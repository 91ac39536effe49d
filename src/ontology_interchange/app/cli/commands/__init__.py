"""
CLI command implementations.

- base.py: Base command class and exit-code mapping
- convert.py: ConvertCommand
- validate.py: ValidateCommand
- compare.py: CompareCommand, RoundTripCommand
"""

from .base import BaseCommand, exit_code_for
from .compare import CompareCommand, RoundTripCommand
from .convert import ConvertCommand
from .validate import ValidateCommand


__all__ = [
    'BaseCommand',
    'exit_code_for',
    'CompareCommand',
    'ConvertCommand',
    'RoundTripCommand',
    'ValidateCommand',
]
