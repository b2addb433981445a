#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2026 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""Provider resolution.

Test code obtains a provider through :func:`resolve_provider` before running
algorithm tests. A provider already installed under the requested name is
returned as is; otherwise its factory is located, called, and the new
provider installed into the registry.
"""

import logging
from typing import Any, Optional

from cptk.exceptions import CPTKError, CPTKInvalidArgumentError, CPTKProviderNotFoundError
from cptk.providers.factory import (
    FactoryReference,
    FactoryRegistry,
    ProviderFactory,
    default_factory_reference,
    resolve_factory,
)
from cptk.providers.names import KnownProvider
from cptk.providers.registry import ProviderRegistry, get_process_registry

logger = logging.getLogger(__name__)


def _instantiate(name: str, provider_factory: ProviderFactory) -> Any:
    """Create a provider with already located factory.

    :raises CPTKProviderNotFoundError: Factory failed or returned no provider.
    """
    try:
        provider = provider_factory()
    except CPTKError:
        raise
    except Exception as exc:
        raise CPTKProviderNotFoundError(
            f"Provider '{name}' could not be instantiated: {type(exc).__name__}: {exc}"
        ) from exc
    if provider is None:
        raise CPTKProviderNotFoundError(f"Factory of provider '{name}' returned no provider")
    logger.info(f"Provider {name} has been instantiated: {type(provider).__name__}")
    return provider


def resolve_provider(
    name: str,
    factory: Optional[FactoryReference] = None,
    register_globally: bool = True,
    registry: Optional[ProviderRegistry] = None,
    factories: Optional[FactoryRegistry] = None,
) -> Any:
    """Get provider of given name, loading it on first use.

    If a provider is installed under ``name`` it is returned unchanged and the
    factory is not even looked up. Otherwise the factory is located outside
    the registry lock and then called under it; the new provider is installed
    under ``name`` only when ``register_globally`` is set.

    :param name: Provider name, must not be empty.
    :param factory: Callable, factory name or dotted reference. If not set, the
        factory is looked up by the provider name.
    :param register_globally: Install newly created provider into the registry.
    :param registry: Provider registry, the process-wide one by default.
    :param factories: Factory registry used to look up factory names.
    :raises CPTKInvalidArgumentError: Empty provider name.
    :raises CPTKProviderNotFoundError: Provider could not be located or instantiated.
    :return: Provider instance.
    """
    if not isinstance(name, str) or not name:
        raise CPTKInvalidArgumentError("Provider name must be a non-empty string")
    if registry is None:
        registry = get_process_registry()
    provider = registry.get(name)
    if provider is not None:
        logger.debug(f"Provider {name} found in registry.")
        return provider

    reference = factory if factory is not None else default_factory_reference(name)
    provider_factory = resolve_factory(reference, factories)
    return registry.get_or_create(
        name, lambda: _instantiate(name, provider_factory), publish=register_globally
    )


def load_provider(
    name: str,
    factory: Optional[FactoryReference] = None,
    registry: Optional[ProviderRegistry] = None,
    factories: Optional[FactoryRegistry] = None,
) -> Any:
    """Get provider of given name and install it if needed.

    :param name: Provider name, must not be empty.
    :param factory: Callable, factory name or dotted reference.
    :param registry: Provider registry, the process-wide one by default.
    :param factories: Factory registry used to look up factory names.
    :return: Provider instance.
    """
    return resolve_provider(
        name, factory, register_globally=True, registry=registry, factories=factories
    )


def load_provider_bc(
    registry: Optional[ProviderRegistry] = None, factories: Optional[FactoryRegistry] = None
) -> Any:
    """Get the BouncyCastle provider.

    :param registry: Provider registry, the process-wide one by default.
    :param factories: Factory registry used to look up factory names.
    :return: Provider instance.
    """
    return load_provider(KnownProvider.BC.label, registry=registry, factories=factories)


def load_provider_openjceplus(
    registry: Optional[ProviderRegistry] = None, factories: Optional[FactoryRegistry] = None
) -> Any:
    """Get the OpenJCEPlus provider.

    :param registry: Provider registry, the process-wide one by default.
    :param factories: Factory registry used to look up factory names.
    :return: Provider instance.
    """
    return load_provider(
        KnownProvider.OPEN_JCE_PLUS.label, registry=registry, factories=factories
    )


def load_provider_openjceplus_fips(
    registry: Optional[ProviderRegistry] = None, factories: Optional[FactoryRegistry] = None
) -> Any:
    """Get the OpenJCEPlusFIPS provider.

    :param registry: Provider registry, the process-wide one by default.
    :param factories: Factory registry used to look up factory names.
    :return: Provider instance.
    """
    return load_provider(
        KnownProvider.OPEN_JCE_PLUS_FIPS.label, registry=registry, factories=factories
    )
