"""
Input validation utilities for the Ontology Interchange Engine.

This module provides centralized input validation with consistent error messages for:
- Document text handed to a codec
- Ontology, report and config file paths used by the command line

Security features:
- Path traversal detection (../ sequences)
- Symlink detection (reject or warn)
- Extension validation
- Directory boundary awareness

Usage:
    from ontology_interchange.core.validators.input import InputValidator

    validated_path = InputValidator.validate_file_path(
        path,
        allowed_extensions=['.ttl', '.owl'],
        check_exists=True
    )

    content = InputValidator.validate_content(content, "turtle")
"""

import os
import logging
from pathlib import Path
from typing import Any, Iterable, Optional

from ...constants import FileExtensions
from ..errors import OntologyParseError

logger = logging.getLogger(__name__)


class InputValidator:
    """
    Centralized input validation for the public parse routines and the CLI.

    All methods are class or static methods; the validator holds no state.
    """

    INPUT_EXTENSIONS = list(FileExtensions.INPUT_EXTENSIONS)
    REPORT_EXTENSIONS = list(FileExtensions.REPORT_EXTENSIONS)
    CONFIG_EXTENSIONS = list(FileExtensions.CONFIG_EXTENSIONS)

    @staticmethod
    def validate_content(content: Any, format: Optional[str] = None, allow_blank: bool = False) -> str:
        """
        Validate document text before parsing.

        Args:
            content: Content to validate (should be non-empty string)
            format: Format tag, attached to the raised error
            allow_blank: Accept empty or whitespace-only text

        Returns:
            Validated content string

        Raises:
            OntologyParseError: If content is None, or blank while allow_blank is False
            TypeError: If content is not a string
        """
        if content is None:
            raise OntologyParseError("Document content cannot be None", format=format)

        if not isinstance(content, str):
            raise TypeError(f"Document content must be string, got {type(content).__name__}")

        if not allow_blank and not content.strip():
            raise OntologyParseError(
                "Document content cannot be empty or whitespace-only", format=format
            )

        return content

    @staticmethod
    def _has_relative_up(path_str: str) -> bool:
        normalized = path_str.replace('\\', '/')
        if '../' in normalized or '/..' in normalized:
            return True
        return any(part == '..' for part in Path(path_str).parts)

    @classmethod
    def _check_path_traversal(cls, path_str: str) -> None:
        """
        Check for path traversal attempts.

        Raises:
            ValueError: If path traversal detected
        """
        if cls._has_relative_up(path_str):
            raise ValueError(
                f"Path traversal detected in path: {path_str}. "
                f"Paths containing '..' are not allowed for security reasons."
            )

    @staticmethod
    def _check_symlink(path_obj: Path, strict: bool = False) -> None:
        """
        Check if path is a symlink.

        Args:
            path_obj: Path object to check
            strict: If True, raise exception on symlink; if False, log warning

        Raises:
            ValueError: If symlink detected and strict mode enabled
        """
        try:
            is_link = path_obj.is_symlink()
        except OSError:
            if strict:
                raise ValueError(f"Cannot verify symlink status for: {path_obj}")
            logger.warning(f"Cannot verify symlink status for: {path_obj}")
            return

        if is_link:
            msg = (
                f"Security error: Symlink detected: {path_obj}. "
                f"Symlinks are not allowed for security reasons. "
                f"Please use the actual file path instead."
            )
            if strict:
                raise ValueError(msg)
            logger.warning(msg)

    @staticmethod
    def _check_extension(path_obj: Path, allowed_extensions: Optional[Iterable[str]]) -> None:
        if not allowed_extensions:
            return
        normalized_extensions = [
            ext.lower() if ext.startswith('.') else f'.{ext.lower()}'
            for ext in allowed_extensions
        ]
        if path_obj.suffix.lower() not in normalized_extensions:
            raise ValueError(
                f"Invalid file extension: '{path_obj.suffix}'. "
                f"Expected one of: {', '.join(normalized_extensions)}"
            )

    @classmethod
    def _prepare(cls, path: Any, allow_relative_up: bool) -> Path:
        if not isinstance(path, str):
            raise TypeError(f"File path must be string, got {type(path).__name__}")

        if not path.strip():
            raise ValueError("File path cannot be empty")

        path = path.strip()
        if not allow_relative_up:
            cls._check_path_traversal(path)

        # Symlink checks must see the unresolved path
        return Path(path).absolute()

    @classmethod
    def validate_file_path(
        cls,
        path: Any,
        allowed_extensions: Optional[Iterable[str]] = None,
        check_exists: bool = True,
        check_readable: bool = True,
        reject_symlinks: bool = True,
        allow_relative_up: bool = False,
    ) -> Path:
        """
        Validate a file path for security and correctness.

        Args:
            path: Path to validate (should be non-empty string)
            allowed_extensions: Allowed extensions (e.g., ['.ttl', '.owl'])
            check_exists: Whether to verify file exists
            check_readable: Whether to verify file is readable
            reject_symlinks: If True, raise exception on symlinks; if False, warn only
            allow_relative_up: If True, allow '..' components

        Returns:
            Validated absolute Path object

        Raises:
            TypeError: If path is not a string
            ValueError: If path is empty, has invalid extension, traversal detected,
                or symlink found (if reject_symlinks=True)
            FileNotFoundError: If file doesn't exist (when check_exists=True)
            PermissionError: If file is not readable (when check_readable=True)
        """
        path_obj = cls._prepare(path, allow_relative_up)

        cls._check_symlink(path_obj, strict=reject_symlinks)

        if check_exists:
            if not path_obj.exists():
                raise FileNotFoundError(f"File not found: {path_obj}")
            if not path_obj.is_file():
                raise ValueError(f"Path is not a file: {path_obj}")

        cls._check_extension(path_obj, allowed_extensions)

        if check_readable and check_exists and not os.access(path_obj, os.R_OK):
            raise PermissionError(f"File is not readable: {path_obj}")

        return path_obj.resolve()

    @classmethod
    def validate_input_ontology_path(
        cls,
        path: Any,
        reject_symlinks: bool = True,
        allow_relative_up: bool = False,
    ) -> Path:
        """Validate the path of an ontology document to import."""
        return cls.validate_file_path(
            path,
            allowed_extensions=cls.INPUT_EXTENSIONS,
            check_exists=True,
            check_readable=True,
            reject_symlinks=reject_symlinks,
            allow_relative_up=allow_relative_up,
        )

    @classmethod
    def validate_output_file_path(
        cls,
        path: Any,
        allowed_extensions: Optional[Iterable[str]] = None,
        reject_symlinks: bool = True,
        allow_relative_up: bool = False,
    ) -> Path:
        """
        Validate an output file path for writing.

        Unlike validate_file_path the file need not exist, but its parent
        directory must exist and be writable.

        Raises:
            TypeError: If path is not a string
            ValueError: If path is empty, has invalid extension, or traversal detected
            PermissionError: If the target or its directory is not writable
        """
        path_obj = cls._prepare(path, allow_relative_up)

        if path_obj.exists() or path_obj.is_symlink():
            cls._check_symlink(path_obj, strict=reject_symlinks)

        cls._check_extension(path_obj, allowed_extensions)

        parent_dir = path_obj.parent
        if not parent_dir.exists():
            raise ValueError(f"Parent directory does not exist: {parent_dir}")

        if not os.access(parent_dir, os.W_OK):
            raise PermissionError(f"Cannot write to directory: {parent_dir}")

        if path_obj.exists() and not os.access(path_obj, os.W_OK):
            raise PermissionError(f"File exists but is not writable: {path_obj}")

        return path_obj.resolve()

    @classmethod
    def validate_config_file_path(cls, path: Any) -> Path:
        """
        Validate configuration file path.

        Configuration files must be JSON, readable and not symlinks.
        """
        return cls.validate_file_path(
            path,
            allowed_extensions=cls.CONFIG_EXTENSIONS,
            check_exists=True,
            check_readable=True,
            reject_symlinks=True,
        )
