"""
Memory guard for document parsing.

Documents are parsed whole in memory. Before a codec parses a document it
asks the MemoryManager whether the text can be processed safely, so that an
oversized import fails with a helpful message instead of exhausting memory.
"""

import logging
from typing import Tuple

import psutil

from ..constants import MemoryLimits

logger = logging.getLogger(__name__)


class MemoryManager:
    """
    Pre-flight memory checks for in-memory parsing.

    Stateless; every call reads the current system memory figures.
    """

    MIN_AVAILABLE_MB = MemoryLimits.MIN_AVAILABLE_MEMORY_MB
    FLOOR_EXEMPT_MB = MemoryLimits.FLOOR_EXEMPT_CONTENT_MB
    MAX_SAFE_CONTENT_MB = MemoryLimits.MAX_SAFE_CONTENT_MB
    MEMORY_MULTIPLIER = MemoryLimits.MEMORY_MULTIPLIER
    LOAD_FACTOR = MemoryLimits.LOAD_FACTOR

    @staticmethod
    def get_available_memory_mb() -> float:
        """
        Get available system memory in MB.

        Returns:
            Available memory in MB, or infinity if detection fails.
        """
        try:
            return psutil.virtual_memory().available / (1024 * 1024)
        except (OSError, RuntimeError) as e:
            logger.warning(f"Could not determine available memory: {e}")
            return float('inf')

    @classmethod
    def check_memory_available(cls, size_mb: float, force: bool = False) -> Tuple[bool, str]:
        """
        Check if enough memory is available to parse a document.

        Args:
            size_mb: Size of the document text in MB.
            force: If True, skip the hard size limit and proceed with a warning.

        Returns:
            Tuple of (can_proceed: bool, message: str)
        """
        estimated_usage_mb = size_mb * cls.MEMORY_MULTIPLIER

        if not force and size_mb > cls.MAX_SAFE_CONTENT_MB:
            return False, (
                f"Document size ({size_mb:.1f}MB) exceeds safe limit ({cls.MAX_SAFE_CONTENT_MB}MB). "
                f"Estimated memory required: ~{estimated_usage_mb:.0f}MB. "
                f"To process anyway, use --force-memory or split the ontology."
            )

        available_mb = cls.get_available_memory_mb()
        if available_mb == float('inf'):
            return True, f"Memory check unavailable. Proceeding with {size_mb:.1f}MB document."

        # Small documents are bounded by the load-factor check alone
        needs_floor = size_mb >= cls.FLOOR_EXEMPT_MB
        if needs_floor and available_mb < cls.MIN_AVAILABLE_MB and not force:
            return False, (
                f"Insufficient free memory. "
                f"Available: {available_mb:.0f}MB, "
                f"Minimum required: {cls.MIN_AVAILABLE_MB}MB."
            )

        safe_threshold_mb = available_mb * cls.LOAD_FACTOR
        if estimated_usage_mb > safe_threshold_mb:
            if force:
                return True, (
                    f"WARNING: Document may exceed safe memory limits. "
                    f"Estimated usage: ~{estimated_usage_mb:.0f}MB, "
                    f"safe threshold: {safe_threshold_mb:.0f}MB. Proceeding due to force flag."
                )
            return False, (
                f"Ontology may be too large for available memory. "
                f"Document size: {size_mb:.1f}MB, "
                f"estimated parsing memory: ~{estimated_usage_mb:.0f}MB, "
                f"safe threshold: {safe_threshold_mb:.0f}MB."
            )

        return True, (
            f"Memory OK: document {size_mb:.2f}MB, "
            f"estimated usage ~{estimated_usage_mb:.0f}MB of {available_mb:.0f}MB available"
        )

    @classmethod
    def ensure_parseable(cls, content: str, force: bool = False) -> float:
        """
        Raise MemoryError when ``content`` is too large to parse safely.

        Returns:
            The content size in MB.
        """
        size_mb = len(content.encode('utf-8')) / (1024 * 1024)
        can_proceed, message = cls.check_memory_available(size_mb, force=force)
        if not can_proceed:
            logger.error(f"Memory check failed: {message}")
            raise MemoryError(message)
        logger.debug(message)
        return size_mb
