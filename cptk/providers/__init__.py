#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2026 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""Cryptographic provider resolution.

Providers are resolved by name into a process-wide registry. The first lookup
of a name creates the provider through its factory, subsequent lookups return
the same instance.
"""

from cptk.providers.factory import (
    FactoryRegistry,
    get_factory_registry,
    register_factory,
    resolve_factory,
)
from cptk.providers.loader import (
    load_provider,
    load_provider_bc,
    load_provider_openjceplus,
    load_provider_openjceplus_fips,
    resolve_provider,
)
from cptk.providers.names import KnownProvider
from cptk.providers.registry import ProviderRegistry, get_process_registry

__all__ = [
    "FactoryRegistry",
    "KnownProvider",
    "ProviderRegistry",
    "get_factory_registry",
    "get_process_registry",
    "load_provider",
    "load_provider_bc",
    "load_provider_openjceplus",
    "load_provider_openjceplus_fips",
    "register_factory",
    "resolve_factory",
    "resolve_provider",
]
