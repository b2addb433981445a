#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2026 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""CPTK exception classes.

This module defines the hierarchy of exceptions raised by CPTK. Provider
resolution and hex parsing failures are reported through dedicated subclasses
so that test code can decide whether to fail or skip.
"""

from typing import Optional

#######################################################################
# # Crypto Provider Test Kit Exceptions
#######################################################################


class CPTKError(Exception):
    """Crypto Provider Test Kit Base Exception.

    Base exception class for all CPTK-related errors. It provides consistent
    error formatting across the package.

    :cvar fmt: Default error message format template.
    """

    fmt = "CPTK: {description}"

    def __init__(self, desc: Optional[str] = None) -> None:
        """Initialize the base CPTK Exception.

        :param desc: Optional description of the exception.
        """
        super().__init__()
        self.description = desc

    def __str__(self) -> str:
        """Return string representation of the exception.

        :return: Formatted exception message as string.
        """
        return self.fmt.format(description=self.description or "Unknown Error")


class CPTKKeyError(CPTKError, KeyError):
    """CPTK Key Error exception for missing or duplicated keys."""


class CPTKValueError(CPTKError, ValueError):
    """CPTK standard value error exception."""


class CPTKTypeError(CPTKError, TypeError):
    """CPTK standard type error exception."""


class CPTKInvalidArgumentError(CPTKValueError):
    """Invalid caller input.

    Raised for an empty provider name, a negative length or any other argument
    that can never lead to a valid result.
    """


class CPTKMalformedInputError(CPTKInvalidArgumentError):
    """Malformed textual input.

    Raised when a hexadecimal string has an odd number of digits or contains
    characters outside of ``[0-9a-fA-F]``.
    """


class CPTKProviderNotFoundError(CPTKError, LookupError):
    """Provider implementation could not be located or instantiated.

    The original import or construction error is chained as ``__cause__``.
    Provider loading is deterministic, so this error is never retried.
    """
