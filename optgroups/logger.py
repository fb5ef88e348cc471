# Optgroups — (c) 2025 rtj.dev LLC — MIT Licensed
"""Global logger instance for optgroups."""
import logging

logger: logging.Logger = logging.getLogger("optgroups")
