#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2026 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""Process-wide registry of loaded cryptographic providers.

The registry maps a provider name to the single provider instance loaded for
that name. It is created when this module is imported and lives until the
process exits; nothing tears it down implicitly. Test suites which need
isolation pass their own :class:`ProviderRegistry` instead.
"""

import logging
import threading
from typing import Any, Callable, Iterator, Optional

from cptk.exceptions import CPTKInvalidArgumentError

logger = logging.getLogger(__name__)


class ProviderRegistry:
    """Ordered, thread-safe registry of provider instances keyed by name.

    At most one provider is held per name. Lookup-or-insert is serialized by a
    re-entrant lock, so a factory may itself resolve other providers.
    """

    def __init__(self) -> None:
        """Initialize empty provider registry."""
        self._providers: dict[str, Any] = {}
        self._lock = threading.RLock()

    def get(self, name: str) -> Optional[Any]:
        """Get provider installed under given name.

        :param name: Provider name.
        :return: Provider instance or None if not installed.
        """
        with self._lock:
            return self._providers.get(name)

    def add(self, name: str, provider: Any) -> int:
        """Install provider at the end of the registry.

        :param name: Provider name, must not be empty.
        :param provider: Provider instance, must not be None.
        :raises CPTKInvalidArgumentError: Empty name or missing provider.
        :return: 1-based position of the provider, -1 if the name was already installed.
        """
        if not isinstance(name, str) or not name:
            raise CPTKInvalidArgumentError("Provider name must be a non-empty string")
        if provider is None:
            raise CPTKInvalidArgumentError(f"Provider {name} must not be None")
        with self._lock:
            if name in self._providers:
                logger.debug(f"Provider {name} has been already installed.")
                return -1
            self._providers[name] = provider
            position = len(self._providers)
        logger.debug(f"Provider {name} has been installed at position {position}.")
        return position

    def remove(self, name: str) -> bool:
        """Uninstall provider.

        :param name: Provider name.
        :return: True if the provider was installed and got removed.
        """
        with self._lock:
            removed = self._providers.pop(name, None) is not None
        if removed:
            logger.debug(f"Provider {name} has been removed.")
        return removed

    def names(self) -> list[str]:
        """Get names of installed providers in installation order.

        :return: List of provider names.
        """
        with self._lock:
            return list(self._providers)

    def position(self, name: str) -> int:
        """Get 1-based position of installed provider.

        :param name: Provider name.
        :return: Position or -1 if not installed.
        """
        names = self.names()
        return names.index(name) + 1 if name in names else -1

    def clear(self) -> None:
        """Uninstall all providers."""
        with self._lock:
            self._providers.clear()

    def get_or_create(self, name: str, create: Callable[[], Any], publish: bool = True) -> Any:
        """Get installed provider or create it.

        The whole operation holds the registry lock, so concurrent first-time
        requests for one name call ``create`` exactly once and all observe the
        same instance.

        ``create`` runs while the lock is held. It should only construct the
        provider: importing modules or loading entry points from it can
        deadlock against a thread which holds the import lock and waits for
        this registry. Locate the factory before calling this method.

        :param name: Provider name.
        :param create: Callable creating the provider, called only if not installed.
        :param publish: Install the created provider.
        :return: Installed or newly created provider.
        """
        with self._lock:
            provider = self._providers.get(name)
            if provider is not None:
                logger.debug(f"Provider {name} found in registry.")
                return provider
            provider = create()
            if publish:
                self.add(name, provider)
            return provider

    def __contains__(self, name: object) -> bool:
        with self._lock:
            return name in self._providers

    def __len__(self) -> int:
        with self._lock:
            return len(self._providers)

    def __iter__(self) -> Iterator[str]:
        return iter(self.names())


_PROCESS_REGISTRY = ProviderRegistry()


def get_process_registry() -> ProviderRegistry:
    """Get the process-wide provider registry.

    :return: Registry shared by all callers which do not pass their own one.
    """
    return _PROCESS_REGISTRY
