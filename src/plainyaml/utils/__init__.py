"""Utility modules for plainyaml."""

from plainyaml.utils.logger import get_logger

__all__ = ["get_logger"]
