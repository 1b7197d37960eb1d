"""
Utility modules for Moodtunes.

Provides structured logging and other supporting functionality.
"""

from .logging import StructuredLogger, LogContext, configure_logging, redact_secrets

__all__ = ['StructuredLogger', 'LogContext', 'configure_logging', 'redact_secrets']
