#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2026 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""CPTK miscellaneous utilities.

This module provides the byte/hex conversions used by test fixtures and
assertions, a deterministic test data generator and a singleton metaclass.
"""

import re
from typing import Any, Optional, Type, TypeVar, Union

from cptk.exceptions import CPTKInvalidArgumentError, CPTKMalformedInputError

NULL_HEX = "<NULL>"

_WHITESPACE = re.compile(r"\s+")
_HEX_DIGITS = re.compile(r"[0-9a-fA-F]*")


def bytes_to_hex(data: Optional[Union[bytes, bytearray, memoryview]]) -> str:
    """Format bytes as lower-case hexadecimal text.

    Each byte is printed as exactly two digits, without separators or prefix.
    Missing data is not an error, it is printed as ``<NULL>``.

    :param data: Data to format or None.
    :return: Hexadecimal string or ``<NULL>``.
    """
    if data is None:
        return NULL_HEX
    return bytes(data).hex()


def hex_to_bytes(text: str) -> bytes:
    """Parse hexadecimal text into bytes.

    All whitespace is removed first, so ``"00 01\\n02"`` is accepted. Both
    upper and lower case digits are allowed.

    :param text: Hexadecimal string.
    :raises CPTKInvalidArgumentError: The input is not a string.
    :raises CPTKMalformedInputError: Odd number of digits or non-hex character.
    :return: Decoded bytes.
    """
    if not isinstance(text, str):
        raise CPTKInvalidArgumentError(f"Hex input must be a string, got {type(text).__name__}")
    digits = _WHITESPACE.sub("", text)
    if len(digits) % 2:
        raise CPTKMalformedInputError(
            f"Hex string must contain even number of digits, got {len(digits)}"
        )
    if not _HEX_DIGITS.fullmatch(digits):
        raise CPTKMalformedInputError(f"Hex string contains invalid characters: '{text}'")
    return bytes.fromhex(digits)


def generate_bytes(length: int) -> bytes:
    """Generate deterministic test data.

    Byte ``i`` of the result is ``i % 256``, so the pattern wraps around every
    256 bytes.

    :param length: Number of bytes to generate.
    :raises CPTKInvalidArgumentError: Negative length.
    :return: Generated data.
    """
    if length < 0:
        raise CPTKInvalidArgumentError(f"Length must not be negative, got {length}")
    return bytes(i % 256 for i in range(length))


TS = TypeVar("TS", bound="SingletonMeta")  # pylint: disable=invalid-name


class SingletonMeta(type):
    """Singleton metaclass for ensuring single instance creation.

    :cvar _instance: Stores the single instance of the class.
    """

    _instance = None

    def __call__(cls: Type[TS], *args: Any, **kwargs: Any) -> TS:  # type: ignore
        """Create or return singleton instance of the class.

        :param cls: The class type to instantiate.
        :param args: Positional arguments to pass to the class constructor.
        :param kwargs: Keyword arguments to pass to the class constructor.
        :return: The singleton instance of the class.
        """
        if cls._instance is None:
            instance = super().__call__(*args, **kwargs)
            cls._instance = instance
        return cls._instance
