#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2026 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""CPTK - Crypto Provider Test Kit.

Support layer for cryptographic provider test suites:
    - resolve and register pluggable cryptographic providers by name
    - convert between bytes and hexadecimal text for fixtures and assertions
    - detect hosts where a FIPS certified cryptographic library is expected
"""

import os
from typing import Optional, Union

from packaging.version import Version, parse
from platformdirs import PlatformDirs


def get_cptk_version() -> Version:
    """Get CPTK version information.

    :return: Parsed version object containing CPTK version information.
    """
    from .__version__ import __version__ as cptk_version

    return parse(cptk_version)


def value_to_bool(value: Optional[Union[bool, int, str]]) -> bool:
    """Convert value to boolean from various input formats.

    Supports conversion from string representations like "True", "true", "T", "1"
    and standard Python truthy/falsy values for other types.

    :param value: Value to convert to boolean (string, int, bool, or None).
    :return: Boolean representation of the input value.
    """
    if isinstance(value, str):
        return value in ("True", "true", "T", "1")
    return bool(value)


version = get_cptk_version()

__author__ = "NXP"
__license__ = "BSD-3-Clause"
__version__ = str(version)
__release__ = "beta"


# The CPTK behavior settings
CPTK_VERSION_BASE = version.base_version
CPTK_PLATFORM_DIRS = PlatformDirs(appauthor="nxp", appname="cptk", version=CPTK_VERSION_BASE)

CPTK_DEBUG_LOGGING_DISABLED = value_to_bool(os.environ.get("CPTK_DEBUG_LOGGING_DISABLED"))
CPTK_DEBUG_LOG_FILE = os.environ.get(
    "CPTK_DEBUG_LOG_FILE", os.path.join(CPTK_PLATFORM_DIRS.user_log_dir, "debug.log")
)
CPTK_LOGGING_CONFIG = os.environ.get("CPTK_LOGGING_CONFIG")

# Host platform overrides, read on every detection call
CPTK_OS_NAME_ENV = "CPTK_OS_NAME"
CPTK_OS_ARCH_ENV = "CPTK_OS_ARCH"

# Per provider factory override: CPTK_PROVIDER_FACTORY_<NAME>=package.module:Attribute
CPTK_PROVIDER_FACTORY_ENV_PREFIX = "CPTK_PROVIDER_FACTORY_"
