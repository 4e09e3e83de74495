"""Logging helpers for functions producing results."""

from ._log_result import log_result

__all__ = ["log_result"]
