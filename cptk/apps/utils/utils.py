#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2026 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""CPTK application utilities.

Error handling decorator and output formatting shared by CPTK command line
applications.
"""

import logging
import sys
from functools import wraps
from typing import Any, Callable, Optional

import click
import hexdump

from cptk import CPTK_DEBUG_LOG_FILE, CPTK_DEBUG_LOGGING_DISABLED
from cptk.exceptions import CPTKError

logger = logging.getLogger(__name__)


class CPTKAppError(CPTKError):
    """CPTK application error exception for CLI tools.

    :cvar fmt: Format string template for error message display.
    """

    fmt = "{description}"

    def __init__(self, desc: Optional[str] = None, error_code: int = 1) -> None:
        """Initialize the AppError.

        :param desc: Description to print out on command line, defaults to None
        :param error_code: Error code passed to OS, defaults to 1
        """
        super().__init__(desc)
        self.description = desc
        self.error_code = error_code


def _split_string(string: str, length: int) -> list:
    """Split the string into chunks of same length."""
    return [string[i : i + length] for i in range(0, len(string), length)]


def format_raw_data(data: bytes, use_hexdump: bool = False, line_length: int = 16) -> str:
    """Format bytes data into human-readable form.

    :param data: Data to format
    :param use_hexdump: Use hexdump with addresses and ASCII, defaults to False
    :param line_length: bytes per line, defaults to 16
    :return: formatted string (multilined if necessary)
    """
    if use_hexdump:
        return hexdump.hexdump(data, result="return")
    data_string = data.hex()
    parts = [_split_string(line, 2) for line in _split_string(data_string, line_length * 2)]
    return "\n".join(" ".join(line) for line in parts)


def catch_cptk_error(function: Callable) -> Callable:
    """Catch and handle CPTKError and other exceptions.

    ``CPTKAppError`` exits with its own error code, ``CPTKError`` and
    ``AssertionError`` exit with code 2, anything else with code 3.

    :param function: The function to be decorated.
    :return: The decorated function.
    """

    @wraps(function)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return function(*args, **kwargs)
        except CPTKAppError as app_exc:
            if app_exc.description:
                click.echo(f"{app_exc.__class__.__name__}: {app_exc}", err=True)
            if 0 < app_exc.error_code < 256:
                sys.exit(app_exc.error_code)
            sys.exit(1)
        except (AssertionError, CPTKError) as cptk_exc:
            click.echo(f"{cptk_exc.__class__.__name__}: {cptk_exc}", err=True)
            logger.debug(str(cptk_exc), exc_info=True)
            if not CPTK_DEBUG_LOGGING_DISABLED:
                click.secho(
                    f"See debug log file: {CPTK_DEBUG_LOG_FILE} for more info", fg="yellow"
                )
            sys.exit(2)
        except (Exception, KeyboardInterrupt) as base_exc:  # pylint: disable=broad-except
            click.echo(f"GENERAL ERROR: {type(base_exc).__name__}: {base_exc}", err=True)
            logger.debug(str(base_exc), exc_info=True)
            if not CPTK_DEBUG_LOGGING_DISABLED:
                click.secho(
                    f"See debug log file: {CPTK_DEBUG_LOG_FILE} for more info.", fg="yellow"
                )
            sys.exit(3)

    return wrapper
