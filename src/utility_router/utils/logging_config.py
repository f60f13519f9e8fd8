"""
Logging configuration for the utility router.

This module provides the logging setup used by the command-line tool, including a custom TRACE level.
The library itself only creates module loggers and never configures handlers on import.
"""

import logging
import os
import sys
from datetime import datetime
from typing import Optional

class RouterLogger:
    """
    Configures logging for the utility router.

    Supports:
    - Standard levels (CRITICAL, ERROR, WARNING, INFO, DEBUG)
    - Custom TRACE level for per-node search diagnostics
    - Optional file output alongside the console
    """

    # Define custom TRACE level (between DEBUG and NOTSET)
    TRACE_LEVEL = 5
    logging.addLevelName(TRACE_LEVEL, "TRACE")

    @staticmethod
    def configure(
        debug_mode: bool = False,
        log_dir: Optional[str] = None,
        trace_mode: bool = False
    ) -> Optional[str]:
        """
        Configure the logging system for a command-line run.

        Args:
            debug_mode: If True, sets DEBUG level for all loggers
            log_dir: Directory for a timestamped log file; console only when None
            trace_mode: If True, sets TRACE level (every search expansion is logged)

        Returns:
            Path to the created log file, or None when logging to console only
        """
        if trace_mode:
            level = RouterLogger.TRACE_LEVEL
        elif debug_mode:
            level = logging.DEBUG
        else:
            level = logging.INFO
        root_logger = logging.getLogger()
        root_logger.setLevel(level)

        # Clear any existing handlers
        if root_logger.handlers:
            root_logger.handlers.clear()

        log_file = None
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
            timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
            log_file = os.path.join(log_dir, f"utility_router_{timestamp}.log")

            file_handler = logging.FileHandler(log_file)
            file_handler.setFormatter(logging.Formatter(
                '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
            ))
            file_handler.setLevel(level)
            root_logger.addHandler(file_handler)

        # Console goes to stderr so JSON on stdout stays clean
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setFormatter(logging.Formatter('%(name)s - %(levelname)s: %(message)s'))
        console_handler.setLevel(level)
        root_logger.addHandler(console_handler)

        return log_file
