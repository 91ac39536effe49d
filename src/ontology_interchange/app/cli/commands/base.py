"""
Base command class.

This module contains the base command class that all CLI commands inherit from,
plus the mapping from engine exceptions to process exit codes.
"""

import argparse
import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

from ....constants import ExitCode
from ....core.errors import OntologyParseError
from ....formats import Format, get_parser
from ....shared.models import Ontology
from ..helpers import (
    get_default_config_path,
    load_config,
    notice,
    read_document,
    setup_logging,
)


logger = logging.getLogger(__name__)


# ============================================================================
# Helper Utilities
# ============================================================================

def exit_code_for(exc: BaseException) -> ExitCode:
    """Map an exception raised while handling a document to an exit code."""
    if isinstance(exc, FileNotFoundError):
        return ExitCode.FILE_NOT_FOUND
    if isinstance(exc, PermissionError):
        return ExitCode.PERMISSION_DENIED
    if isinstance(exc, OntologyParseError):
        return ExitCode.VALIDATION_ERROR
    return ExitCode.ERROR


def print_entity_summary(ontology: Ontology, indent: str = "  ") -> None:
    print(f"{indent}Ontology:    {ontology.id}")
    print(f"{indent}Classes:     {len(ontology.classes)}")
    print(f"{indent}Properties:  {len(ontology.properties)}")
    print(f"{indent}Individuals: {len(ontology.individuals)}")


# ============================================================================
# Base Command Class
# ============================================================================

class BaseCommand(ABC):
    """
    Base class for CLI commands.

    Provides common functionality like configuration loading, logging setup
    and document loading. Subclasses should implement the execute() method.
    """

    # Errors a command reports to the user instead of propagating
    HANDLED_ERRORS: Tuple[type, ...] = (ValueError, OSError, MemoryError)

    def __init__(self, config_path: Optional[str] = None):
        """
        Initialize the command.

        Args:
            config_path: Path to configuration file. When omitted,
                ./config.json is used if it exists.
        """
        self._explicit_config = config_path is not None
        self.config_path = config_path or get_default_config_path()
        self._config: Optional[Dict[str, Any]] = None

    def setup_logging_from_config(self, allow_missing: bool = True, include_console: bool = True) -> None:
        """Setup logging configuration, falling back gracefully if config is absent."""
        log_config: Dict[str, Any] = {}

        if self._config is not None:
            log_config = self._config.get('logging', {})
        else:
            config_path = Path(self.config_path)
            if config_path.exists() or not allow_missing:
                try:
                    config_data = load_config(self.config_path)
                    self._config = config_data
                    log_config = config_data.get('logging', {})
                except FileNotFoundError:
                    if not allow_missing:
                        raise
                except (ValueError, OSError) as exc:
                    if not allow_missing:
                        raise
                    notice(f"Warning: Could not load logging configuration: {exc}")

        setup_logging(config=log_config, include_console=include_console)

    def prepare(self, include_console: bool = True) -> Optional[int]:
        """
        Load configuration and configure logging.

        Args:
            include_console: False when stdout carries the command's output.

        Returns:
            None on success, or the exit code to stop with.
        """
        try:
            self.setup_logging_from_config(
                allow_missing=not self._explicit_config,
                include_console=include_console,
            )
        except (ValueError, OSError) as exc:
            print(f"✗ Configuration error: {exc}")
            return ExitCode.CONFIG_ERROR
        return None

    def force_memory(self, args: argparse.Namespace) -> bool:
        """--force-memory, or ``memory.force`` in the configuration."""
        if getattr(args, 'force_memory', False):
            return True
        memory_cfg = (self._config or {}).get('memory', {})
        return bool(memory_cfg.get('force', False)) if isinstance(memory_cfg, dict) else False

    def load_document(self, path: str, fmt: Format, args: argparse.Namespace) -> Tuple[Path, Ontology]:
        """
        Read and parse an ontology document.

        Raises:
            OntologyParseError: If the document is blank or malformed.
            ValueError, FileNotFoundError, PermissionError: From path validation.
            MemoryError: If the document is too large to parse safely.
        """
        validated_path, content = read_document(
            path,
            allow_relative_up=getattr(args, 'allow_relative_up', False),
        )
        logger.info(f"Parsing {validated_path} as {fmt}")
        return validated_path, get_parser(fmt)(content, force_memory=self.force_memory(args))

    def report_error(self, exc: BaseException, action: str) -> int:
        """Print and log a handled error; returns its exit code."""
        code = exit_code_for(exc)
        logger.error(f"{action} failed: {exc}")
        print(f"✗ {exc}")
        return code

    @abstractmethod
    def execute(self, args: argparse.Namespace) -> int:
        """
        Execute the command.

        Args:
            args: Parsed command-line arguments.

        Returns:
            Exit code (0 for success, non-zero for error).
        """
        pass
