#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2026 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""CPTK logging utilities with colored console output support.

Only applications install handlers; the library modules just log into the
``cptk`` logger hierarchy.
"""

import logging
import logging.config
import logging.handlers
import os
import platform
import re
import sys
from datetime import datetime
from typing import Optional, TextIO

import colorama
import yaml

from cptk import CPTK_DEBUG_LOG_FILE, CPTK_DEBUG_LOGGING_DISABLED, CPTK_LOGGING_CONFIG, __version__

colorama.just_fix_windows_console()


class ColoredFormatter(logging.Formatter):
    """CPTK Colored Logging Formatter.

    :cvar COLORED_FORMATS: Color-coded format strings for each logging level.
    :cvar FORMATS: Plain text format strings for each logging level.
    """

    FORMAT = logging.BASIC_FORMAT
    FORMAT_DEBUG = FORMAT + " (%(relativeCreated)dms since start, %(filename)s:%(lineno)d)"

    COLORED_FORMATS = {
        logging.DEBUG: colorama.Fore.BLUE + FORMAT_DEBUG + colorama.Fore.RESET,
        logging.INFO: colorama.Fore.WHITE
        + colorama.Style.BRIGHT
        + FORMAT
        + colorama.Fore.RESET
        + colorama.Style.RESET_ALL,
        logging.WARNING: colorama.Fore.YELLOW + FORMAT_DEBUG + colorama.Fore.RESET,
        logging.ERROR: colorama.Fore.RED + FORMAT_DEBUG + colorama.Fore.RESET,
        logging.CRITICAL: colorama.Fore.RED
        + colorama.Style.BRIGHT
        + FORMAT_DEBUG
        + colorama.Fore.RESET
        + colorama.Style.RESET_ALL,
    }
    FORMATS = {
        logging.DEBUG: FORMAT_DEBUG,
        logging.INFO: FORMAT,
        logging.WARNING: FORMAT_DEBUG,
        logging.ERROR: FORMAT_DEBUG,
        logging.CRITICAL: FORMAT_DEBUG,
    }

    def __init__(self, colored: bool = True) -> None:
        """Overloaded init method to add colored parameter."""
        super().__init__()
        self.colored = colored
        self.formats = self.COLORED_FORMATS if colored else self.FORMATS

    def format(self, record: logging.LogRecord) -> str:
        """Modified format method.

        :param record: Input logging record to print.
        :return: Formatted logging string.
        """
        formatter = logging.Formatter(self.formats.get(record.levelno))
        if not self.colored and isinstance(record.msg, str):
            record.msg = re.sub(r"\x1b\[\d{1,3}m", "", record.msg)
        return formatter.format(record)


def load_logging_config(config_file: Optional[str] = CPTK_LOGGING_CONFIG) -> bool:
    """Apply YAML logging configuration in ``logging.config.dictConfig`` format.

    :param config_file: Path to the YAML file, nothing is done if not set.
    :return: True if the configuration was applied.
    """
    if not config_file:
        return False
    with open(config_file, encoding="utf-8") as f:
        config_data = yaml.safe_load(f)
    logging.config.dictConfig(config_data)
    return True


def install(
    level: Optional[int] = None,
    stream: TextIO = sys.stderr,
    colored: Optional[bool] = None,
    logger: Optional[logging.Logger] = None,
    create_debug_logger: bool = True,
) -> None:
    """Install CPTK log handler for colored output.

    A logging configuration file given by ``CPTK_LOGGING_CONFIG`` takes
    precedence; no handlers are installed then.

    :param level: logging level, defaults to logging.WARNING
    :param stream: stream to output logging, defaults to sys.stderr
    :param colored: colored output, always colored if true
    :param logger: defaults to the ``cptk`` logger
    :param create_debug_logger: create debug log file handler
    """
    if load_logging_config():
        return
    if not level:
        level = logging.WARNING

    target_logger = logger or logging.getLogger("cptk")
    target_logger.setLevel(logging.DEBUG)

    color = True
    if "NO_COLOR" in os.environ:
        # For details see https://no-color.org/
        color = False
    if not hasattr(stream, "isatty") or not stream.isatty():
        color = False
    if colored is not None:
        color = colored

    handler = logging.StreamHandler(stream)
    handler.setLevel(level)
    handler.setFormatter(ColoredFormatter(color))
    target_logger.addHandler(handler)
    target_logger.propagate = True

    if not create_debug_logger or CPTK_DEBUG_LOGGING_DISABLED:
        return
    try:
        for h in target_logger.handlers:
            if (
                isinstance(h, logging.handlers.RotatingFileHandler)
                and h.baseFilename == CPTK_DEBUG_LOG_FILE
            ):
                return
        os.makedirs(os.path.dirname(CPTK_DEBUG_LOG_FILE), exist_ok=True)
        debug_handler = logging.handlers.RotatingFileHandler(
            CPTK_DEBUG_LOG_FILE, mode="a", maxBytes=1_000_000, backupCount=5, encoding="utf-8"
        )
        debug_handler.setFormatter(ColoredFormatter(colored=False))
        debug_handler.setLevel(logging.DEBUG)
        target_logger.addHandler(debug_handler)

        starter = f"* CPTK DEBUG LOGGING STARTED {datetime.now().strftime('%Y-%m-%d %H:%M:%S')} *"
        padding = len(starter) - 2
        target_logger.debug("*" * len(starter))
        target_logger.debug(starter)
        target_logger.debug(f"* CPTK version: {__version__}".ljust(padding) + " *")
        target_logger.debug(f"* Python version: {sys.version.split()[0]}".ljust(padding) + " *")
        target_logger.debug(f"* OS version: {platform.platform()}".ljust(padding) + " *")
        target_logger.debug(f"* Last command: {sys.argv}".ljust(padding) + " *")
        target_logger.debug("*" * len(starter))
    except OSError as e:
        target_logger.warning(f"Failed to initialize debug logging: {str(e)}")
