#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2026 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""Host platform detection for FIPS certified library availability.

A FIPS certified build of the cryptographic library exists only for a fixed
set of operating systems and CPU architectures. This module reports whether
the current host belongs to that set, so test suites can skip FIPS only
paths elsewhere.

Host strings are matched by substring containment, not by equality. The
matching is intentionally loose: ``"Windows Server 2022"`` matches
``"Windows"`` and ``"ppc64le"`` matches ``"ppc64"``.
"""

import logging
import os
import platform
from dataclasses import dataclass
from typing import Optional, Sequence

from cptk import CPTK_OS_ARCH_ENV, CPTK_OS_NAME_ENV

logger = logging.getLogger(__name__)

# platform.machine() values mapped to the architecture naming used by the allow-list
_ARCH_ALIASES = {
    "x86_64": "amd64",
    "amd64": "amd64",
    "x64": "amd64",
    "i386": "x86",
    "i486": "x86",
    "i586": "x86",
    "i686": "x86",
    "x86": "x86",
    "aarch64": "aarch64",
    "arm64": "aarch64",
}


@dataclass(frozen=True)
class HostPlatform:
    """Operating system name and CPU architecture of a host."""

    os_name: str
    os_arch: str

    def __str__(self) -> str:
        return f"{self.os_name or '<unknown>'} ({self.os_arch or '<unknown>'})"


@dataclass(frozen=True)
class PlatformAllowList:
    """Ordered substrings classifying host OS names and architectures.

    :param os_names: Substrings accepted in the OS name.
    :param architectures: Substrings accepted in the CPU architecture.
    """

    os_names: tuple[str, ...]
    architectures: tuple[str, ...]

    def matches_os(self, os_name: Optional[str]) -> bool:
        """Check the OS name against the allow-list.

        :param os_name: Host OS name, may be empty or None.
        :return: True if any allow-list entry is contained in the OS name.
        """
        return _contains_any(os_name, self.os_names)

    def matches_arch(self, os_arch: Optional[str]) -> bool:
        """Check the CPU architecture against the allow-list.

        :param os_arch: Host architecture, may be empty or None.
        :return: True if any allow-list entry is contained in the architecture.
        """
        return _contains_any(os_arch, self.architectures)

    def matches(self, host: HostPlatform) -> bool:
        """Check that both the OS name and the architecture are allowed.

        :param host: Host platform description.
        :return: True if both dimensions match.
        """
        return self.matches_os(host.os_name) and self.matches_arch(host.os_arch)


# Platforms with a certified build, kept exactly as validated by the certification
FIPS_ALLOW_LIST = PlatformAllowList(
    os_names=("Linux", "AIX", "Windows"),
    architectures=("amd64", "ppc64", "s390x"),
)


def _contains_any(value: Optional[str], tokens: Sequence[str]) -> bool:
    if not value:
        return False
    for token in tokens:
        if token in value:
            return True
    return False


def normalize_arch(machine: str, os_name: str = "") -> str:
    """Convert a ``platform.machine()`` value to the allow-list naming.

    On AIX ``platform.machine()`` returns the machine serial number, the
    architecture is always 64-bit POWER there.

    :param machine: Raw machine string.
    :param os_name: Host OS name.
    :return: Normalized architecture string, empty if unknown.
    """
    if os_name == "AIX":
        return "ppc64"
    return _ARCH_ALIASES.get(machine.lower(), machine.lower())


def get_host_platform() -> HostPlatform:
    """Get OS name and architecture of the running host.

    The ``CPTK_OS_NAME`` and ``CPTK_OS_ARCH`` environment variables take
    precedence over detected values and are used verbatim. Detection failures
    result in empty strings.

    :return: Host platform description.
    """
    os_name = os.environ.get(CPTK_OS_NAME_ENV)
    if os_name is None:
        try:
            os_name = platform.system()
        except OSError as exc:
            logger.debug(f"Unable to detect OS name: {exc}")
            os_name = ""

    os_arch = os.environ.get(CPTK_OS_ARCH_ENV)
    if os_arch is None:
        try:
            os_arch = normalize_arch(platform.machine(), os_name)
        except OSError as exc:
            logger.debug(f"Unable to detect CPU architecture: {exc}")
            os_arch = ""

    return HostPlatform(os_name=os_name, os_arch=os_arch)


def is_fips_certified_platform(
    host: Optional[HostPlatform] = None, allow_list: PlatformAllowList = FIPS_ALLOW_LIST
) -> bool:
    """Determine if running on a host where a FIPS certified library is known to exist.

    Never raises, unknown hosts are reported as not certified.

    :param host: Host to check, the running host if not specified.
    :param allow_list: Allowed OS names and architectures.
    :return: True if both the OS name and the architecture are in the allow-list.
    """
    if host is None:
        host = get_host_platform()
    result = allow_list.matches(host)
    logger.debug(f"FIPS certified platform check for {host}: {result}")
    return result
