#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2026 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""Provider factories and factory reference resolution.

A provider factory is a no-argument callable which creates a provider
instance. Factories are referenced either directly, by the name under which
they are kept in a :class:`FactoryRegistry`, by a dotted import reference
(``package.module:Attribute`` or ``package.module.Attribute``) or by the name
of an entry point in the ``cptk.provider`` group.
"""

import logging
import os
import re
import threading
from importlib import import_module
from typing import Any, Callable, Optional, TypeVar, Union

import importlib_metadata

from cptk import CPTK_PROVIDER_FACTORY_ENV_PREFIX
from cptk.exceptions import CPTKInvalidArgumentError, CPTKKeyError, CPTKProviderNotFoundError
from cptk.utils.plugins import PluginType

logger = logging.getLogger(__name__)

ProviderFactory = Callable[[], Any]
FactoryReference = Union[ProviderFactory, str]

F = TypeVar("F", bound=Callable[[], Any])


def _same_definition(first: ProviderFactory, second: ProviderFactory) -> bool:
    """Check whether two factories come from the same definition.

    A plugin module executed twice creates new function objects for the same
    source definition.
    """
    if first is second:
        return True
    return (
        getattr(first, "__module__", None) == getattr(second, "__module__", None)
        and getattr(first, "__qualname__", None) == getattr(second, "__qualname__", None)
        and getattr(first, "__qualname__", None) is not None
    )


class FactoryRegistry:
    """Thread-safe mapping of provider names to provider factories."""

    def __init__(self) -> None:
        """Initialize empty factory registry."""
        self._factories: dict[str, ProviderFactory] = {}
        self._lock = threading.Lock()

    def register(self, name: str, factory: ProviderFactory, overwrite: bool = False) -> None:
        """Register a provider factory.

        Registering the same factory definition again replaces the previous one
        silently, which makes re-imported plugin modules harmless.

        :param name: Provider name the factory creates.
        :param factory: No-argument callable creating the provider.
        :param overwrite: Replace a different factory registered under the same name.
        :raises CPTKInvalidArgumentError: Empty name or factory is not callable.
        :raises CPTKKeyError: A different factory is already registered under the name.
        """
        if not isinstance(name, str) or not name:
            raise CPTKInvalidArgumentError("Provider name must be a non-empty string")
        if not callable(factory):
            raise CPTKInvalidArgumentError(f"Factory for provider '{name}' is not callable")
        with self._lock:
            current = self._factories.get(name)
            if current is not None and not overwrite and not _same_definition(current, factory):
                raise CPTKKeyError(f"Factory for provider '{name}' is already registered")
            self._factories[name] = factory
        logger.debug(f"Factory for provider {name} has been registered.")

    def unregister(self, name: str) -> bool:
        """Remove a provider factory.

        :param name: Provider name.
        :return: True if a factory was removed.
        """
        with self._lock:
            return self._factories.pop(name, None) is not None

    def get(self, name: str) -> Optional[ProviderFactory]:
        """Get factory registered under given name.

        :param name: Provider name.
        :return: Factory or None if not registered.
        """
        with self._lock:
            return self._factories.get(name)

    def names(self) -> list[str]:
        """Get names of all registered factories in registration order.

        :return: List of provider names.
        """
        with self._lock:
            return list(self._factories)

    def clear(self) -> None:
        """Remove all factories."""
        with self._lock:
            self._factories.clear()

    def __contains__(self, name: object) -> bool:
        with self._lock:
            return name in self._factories

    def __len__(self) -> int:
        with self._lock:
            return len(self._factories)


_FACTORY_REGISTRY = FactoryRegistry()


def get_factory_registry() -> FactoryRegistry:
    """Get the process-wide factory registry.

    The registry is created on import and filled by plugins.

    :return: Process-wide factory registry.
    """
    return _FACTORY_REGISTRY


def register_factory(
    name: str, overwrite: bool = False, registry: Optional[FactoryRegistry] = None
) -> Callable[[F], F]:
    """Decorator registering a provider factory.

    .. code-block:: python

        @register_factory("MyProvider")
        class MyProvider:
            ...

    :param name: Provider name the factory creates.
    :param overwrite: Replace a different factory registered under the same name.
    :param registry: Target registry, the process-wide one by default.
    :return: Decorator returning the factory unchanged.
    """

    def decorator(factory: F) -> F:
        target = registry if registry is not None else get_factory_registry()
        target.register(name, factory, overwrite=overwrite)
        return factory

    return decorator


def import_reference(reference: str) -> Any:
    """Import object given by dotted reference.

    Both ``package.module:Attribute.inner`` and ``package.module.Attribute``
    forms are accepted.

    :param reference: Dotted reference.
    :raises CPTKProviderNotFoundError: Module or attribute could not be found.
    :return: Referenced object.
    """
    if ":" in reference:
        module_name, _, attr_path = reference.partition(":")
    else:
        module_name, _, attr_path = reference.rpartition(".")
    if not module_name or not attr_path:
        raise CPTKProviderNotFoundError(f"Invalid factory reference '{reference}'")
    try:
        obj: Any = import_module(module_name)
        for attr in attr_path.split("."):
            obj = getattr(obj, attr)
    except (ImportError, AttributeError) as exc:
        raise CPTKProviderNotFoundError(f"Cannot load factory '{reference}': {exc}") from exc
    return obj


def find_entry_point(name: str) -> Optional[importlib_metadata.EntryPoint]:
    """Find provider factory entry point of given name.

    :param name: Entry point name, the provider name.
    :return: First matching entry point or None.
    """
    eps = importlib_metadata.entry_points(group=PluginType.PROVIDER_FACTORY.label, name=name)
    for ep in eps:
        return ep
    return None


def get_entry_point_names() -> list[str]:
    """Get names of all provider factory entry points.

    :return: Sorted list of entry point names.
    """
    eps = importlib_metadata.entry_points(group=PluginType.PROVIDER_FACTORY.label)
    return sorted({ep.name for ep in eps})


def default_factory_reference(name: str) -> str:
    """Get factory reference used when a provider is resolved by name only.

    ``CPTK_PROVIDER_FACTORY_<NAME>`` environment variable, where ``<NAME>`` is
    the upper-cased provider name with non-alphanumeric characters replaced by
    underscores, overrides the default which is the provider name itself.

    :param name: Provider name.
    :return: Factory reference.
    """
    env_name = CPTK_PROVIDER_FACTORY_ENV_PREFIX + re.sub(r"[^0-9A-Za-z]", "_", name).upper()
    override = os.environ.get(env_name)
    if override:
        logger.debug(f"Factory of provider {name} overridden by {env_name}={override}")
        return override
    return name


def resolve_factory(
    reference: FactoryReference, factories: Optional[FactoryRegistry] = None
) -> ProviderFactory:
    """Resolve factory reference into a callable.

    Resolution order for string references: factory registry key, dotted
    import reference, ``cptk.provider`` entry point.

    :param reference: Callable, factory name or dotted reference.
    :param factories: Factory registry, the process-wide one by default.
    :raises CPTKInvalidArgumentError: Reference is neither callable nor non-empty string.
    :raises CPTKProviderNotFoundError: Factory could not be located.
    :return: Provider factory.
    """
    if callable(reference):
        return reference
    if not isinstance(reference, str) or not reference:
        raise CPTKInvalidArgumentError(f"Invalid factory reference: {reference!r}")

    if factories is None:
        factories = get_factory_registry()
    factory = factories.get(reference)
    if factory is not None:
        return factory

    if ":" in reference or "." in reference:
        obj = import_reference(reference)
    else:
        ep = find_entry_point(reference)
        if ep is None:
            raise CPTKProviderNotFoundError(f"No factory found for provider '{reference}'")
        try:
            obj = ep.load()
        except (ImportError, AttributeError) as exc:
            raise CPTKProviderNotFoundError(
                f"Cannot load factory entry point '{ep.value}': {exc}"
            ) from exc

    if not callable(obj):
        raise CPTKProviderNotFoundError(f"Factory reference '{reference}' is not callable")
    return obj
