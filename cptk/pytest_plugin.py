#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2026 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""Pytest fixtures for cryptographic provider test suites.

Enable in a ``conftest.py``::

    pytest_plugins = ["cptk.pytest_plugin"]

Tests marked with ``@pytest.mark.fips_platform`` are skipped unless the host
is a FIPS certified platform.
"""

from typing import Any

import pytest

from cptk.providers.factory import FactoryRegistry
from cptk.providers.registry import ProviderRegistry
from cptk.utils.platform_info import get_host_platform, is_fips_certified_platform

FIPS_PLATFORM_MARKER = "fips_platform"


def pytest_configure(config: Any) -> None:
    """Register CPTK markers.

    :param config: Pytest configuration object.
    """
    config.addinivalue_line(
        "markers",
        f"{FIPS_PLATFORM_MARKER}: run only on hosts where a FIPS certified library exists",
    )


def pytest_runtest_setup(item: Any) -> None:
    """Skip FIPS platform tests on other hosts.

    :param item: Test item about to run.
    """
    if item.get_closest_marker(FIPS_PLATFORM_MARKER) is None:
        return
    host = get_host_platform()
    if not is_fips_certified_platform(host):
        pytest.skip(f"Not a FIPS certified platform: {host}")


@pytest.fixture
def provider_registry() -> ProviderRegistry:
    """Get an empty provider registry isolated from the process-wide one.

    :return: New provider registry.
    """
    return ProviderRegistry()


@pytest.fixture
def factory_registry() -> FactoryRegistry:
    """Get an empty factory registry isolated from the process-wide one.

    :return: New factory registry.
    """
    return FactoryRegistry()


@pytest.fixture
def fips_certified_platform() -> bool:
    """Get whether the host is a FIPS certified platform.

    :return: Detection result for the running host.
    """
    return is_fips_certified_platform()
