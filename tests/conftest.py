#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2026 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""CPTK pytest configuration and shared test fixtures."""

import logging
import os
from typing import Any, Iterator

import pytest

os.environ["CPTK_DEBUG_LOGGING_DISABLED"] = "True"

# pylint: disable=wrong-import-position
from cptk.providers.factory import get_factory_registry
from cptk.providers.registry import get_process_registry
from cptk.utils.plugins import PluginsManager
from tests.cli_runner import CliRunner

pytest_plugins = ["pytester", "cptk.pytest_plugin"]


@pytest.fixture
def cli_runner() -> CliRunner:
    """Get CLI runner instance for testing.

    :return: CliRunner instance for testing CLI commands.
    """
    return CliRunner()


@pytest.fixture(scope="module")
def data_dir(request: Any) -> str:
    """Get test data directory path for the current test module.

    :param request: Pytest request fixture containing test execution context.
    :return: Absolute path to the test data directory.
    """
    logging.debug(f"data_dir for module: {request.fspath}")
    data_path = os.path.join(os.path.dirname(request.fspath), "data")
    logging.debug(f"data_dir: {data_path}")
    return data_path


@pytest.fixture
def clean_process_state(monkeypatch: Any) -> Iterator[None]:
    """Run test with empty process-wide registries and no host overrides.

    :param monkeypatch: Pytest monkeypatch fixture.
    """
    for name in list(os.environ):
        if name.startswith(("CPTK_PROVIDER_FACTORY_", "CPTK_OS_")):
            monkeypatch.delenv(name)
    get_process_registry().clear()
    get_factory_registry().clear()
    PluginsManager().plugins = {}
    yield
    get_process_registry().clear()
    get_factory_registry().clear()
    PluginsManager().plugins = {}
