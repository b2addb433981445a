#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2026 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""Provider resolution tests.

Covers idempotent registration, registry isolation between names, the
unpublished resolution mode, error reporting and the well-known provider
shortcuts.
"""

import threading
from typing import Any, Callable

import pytest

import cptk.providers.loader as loader_module
from cptk.exceptions import CPTKInvalidArgumentError, CPTKProviderNotFoundError
from cptk.providers import (
    KnownProvider,
    ProviderRegistry,
    get_factory_registry,
    get_process_registry,
    load_provider,
    load_provider_bc,
    load_provider_openjceplus,
    load_provider_openjceplus_fips,
    resolve_provider,
)
from cptk.providers.factory import FactoryRegistry, resolve_factory
from tests.providers.data.fake_providers import FakeProvider, SlowProvider

FAKE_REFERENCE = "tests.providers.data.fake_providers:FakeProvider"


def test_resolve_provider_idempotent(provider_registry: ProviderRegistry) -> None:
    """Two resolutions of one name return the very same provider."""
    first = resolve_provider("Fake", FakeProvider, True, registry=provider_registry)
    second = resolve_provider("Fake", FakeProvider, True, registry=provider_registry)
    assert first is second
    assert provider_registry.get("Fake") is first


def test_resolve_provider_existing_skips_factory(provider_registry: ProviderRegistry) -> None:
    """Installed provider is returned without resolving the factory at all."""
    installed = object()
    provider_registry.add("Fake", installed)
    assert resolve_provider("Fake", "cptk_nonexistent.module:X", registry=provider_registry) is (
        installed
    )


def test_resolve_provider_isolation(provider_registry: ProviderRegistry) -> None:
    """Resolving one name never creates or installs another one."""
    created: list[str] = []

    def factory(name: str) -> Callable[[], Any]:
        def create() -> Any:
            created.append(name)
            return object()

        return create

    resolve_provider("N1", factory("N1"), registry=provider_registry)
    assert created == ["N1"]
    assert provider_registry.names() == ["N1"]
    resolve_provider("N2", factory("N2"), registry=provider_registry)
    assert created == ["N1", "N2"]
    assert provider_registry.get("N1") is not provider_registry.get("N2")


def test_resolve_provider_not_registered(provider_registry: ProviderRegistry) -> None:
    """Provider resolved without global registration is not published."""
    first = resolve_provider("Fake", FakeProvider, False, registry=provider_registry)
    assert isinstance(first, FakeProvider)
    assert "Fake" not in provider_registry
    second = resolve_provider("Fake", FakeProvider, False, registry=provider_registry)
    assert first is not second


def test_resolve_provider_by_reference(provider_registry: ProviderRegistry) -> None:
    """Factory given as dotted reference is imported."""
    provider = resolve_provider("Fake", FAKE_REFERENCE, registry=provider_registry)
    assert isinstance(provider, FakeProvider)


def test_resolve_provider_by_factory_name(
    provider_registry: ProviderRegistry, factory_registry: FactoryRegistry
) -> None:
    """Without factory the provider name is looked up in the factory registry."""
    factory_registry.register("Fake", FakeProvider)
    provider = resolve_provider("Fake", registry=provider_registry, factories=factory_registry)
    assert isinstance(provider, FakeProvider)


def test_resolve_provider_env_override(
    provider_registry: ProviderRegistry, monkeypatch: Any
) -> None:
    """Environment variable provides the factory of a named provider."""
    monkeypatch.setenv("CPTK_PROVIDER_FACTORY_SOMEPROVIDER", FAKE_REFERENCE)
    provider = resolve_provider("SomeProvider", registry=provider_registry)
    assert isinstance(provider, FakeProvider)


@pytest.mark.parametrize("name", ["", None, 1])
def test_resolve_provider_invalid_name(provider_registry: ProviderRegistry, name: Any) -> None:
    """Provider name must be a non-empty string."""
    with pytest.raises(CPTKInvalidArgumentError):
        resolve_provider(name, FakeProvider, registry=provider_registry)
    assert len(provider_registry) == 0


@pytest.mark.parametrize(
    "factory",
    [
        "cptk_nonexistent_package.provider:Provider",
        "tests.providers.data.fake_providers:BrokenProvider",
        "tests.providers.data.fake_providers:MissingDependencyProvider",
        "tests.providers.data.fake_providers:create_null_provider",
        "UnknownFactoryName",
    ],
)
def test_resolve_provider_not_found(
    provider_registry: ProviderRegistry, factory_registry: FactoryRegistry, factory: str
) -> None:
    """Missing or failing implementation reports missing provider and installs nothing."""
    with pytest.raises(CPTKProviderNotFoundError):
        resolve_provider("Broken", factory, registry=provider_registry, factories=factory_registry)
    assert "Broken" not in provider_registry


def test_resolve_provider_error_cause(provider_registry: ProviderRegistry) -> None:
    """Constructor failure is chained to the reported error."""
    with pytest.raises(CPTKProviderNotFoundError) as exc_info:
        resolve_provider(
            "Broken",
            "tests.providers.data.fake_providers:BrokenProvider",
            registry=provider_registry,
        )
    assert isinstance(exc_info.value.__cause__, RuntimeError)


def test_resolve_provider_concurrent(provider_registry: ProviderRegistry) -> None:
    """Concurrent first-time resolution instantiates a single provider."""
    SlowProvider.instances = 0
    results: list[Any] = []
    barrier = threading.Barrier(6)

    def worker() -> None:
        barrier.wait()
        results.append(resolve_provider("Slow", SlowProvider, registry=provider_registry))

    threads = [threading.Thread(target=worker) for _ in range(6)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert SlowProvider.instances == 1
    assert len({id(result) for result in results}) == 1


def test_load_provider_uses_process_registry(clean_process_state: None) -> None:
    """Two argument form installs into the process-wide registry."""
    provider = load_provider("Fake", FAKE_REFERENCE)
    assert get_process_registry().get("Fake") is provider
    assert load_provider("Fake") is provider


@pytest.mark.parametrize(
    "loader,name",
    [
        (load_provider_bc, "BC"),
        (load_provider_openjceplus, "OpenJCEPlus"),
        (load_provider_openjceplus_fips, "OpenJCEPlusFIPS"),
    ],
)
def test_known_provider_loaders(
    provider_registry: ProviderRegistry,
    factory_registry: FactoryRegistry,
    loader: Callable[..., Any],
    name: str,
) -> None:
    """Well-known shortcuts resolve by their fixed name with global registration."""
    factory_registry.register(name, FakeProvider)
    provider = loader(provider_registry, factory_registry)
    assert isinstance(provider, FakeProvider)
    assert provider_registry.get(name) is provider
    assert loader(provider_registry, factory_registry) is provider
    assert get_process_registry().get(name) is None
    assert name not in get_factory_registry()


def test_load_provider_isolated_factories(
    provider_registry: ProviderRegistry, factory_registry: FactoryRegistry
) -> None:
    """Factory names are looked up in the given factory registry only."""
    factory_registry.register("Fake", FakeProvider)
    provider = load_provider("Fake", registry=provider_registry, factories=factory_registry)
    assert isinstance(provider, FakeProvider)
    with pytest.raises(CPTKProviderNotFoundError):
        load_provider("Fake", registry=ProviderRegistry(), factories=FactoryRegistry())


def test_resolve_provider_locates_factory_outside_lock(
    provider_registry: ProviderRegistry, monkeypatch: Any
) -> None:
    """Factory lookup, which may import modules, runs without the registry lock."""
    lock_free: list[bool] = []

    def locate(reference: Any, factories: Any = None) -> Any:
        def try_lock() -> None:
            # pylint: disable=protected-access
            acquired = provider_registry._lock.acquire(timeout=1)
            if acquired:
                provider_registry._lock.release()
            lock_free.append(acquired)

        thread = threading.Thread(target=try_lock)
        thread.start()
        thread.join()
        return resolve_factory(reference, factories)

    monkeypatch.setattr(loader_module, "resolve_factory", locate)
    provider = resolve_provider("Fake", FAKE_REFERENCE, registry=provider_registry)
    assert isinstance(provider, FakeProvider)
    assert lock_free == [True]


def test_known_provider_missing(clean_process_state: None, provider_registry: Any) -> None:
    """Well-known provider without an installed implementation is reported missing."""
    with pytest.raises(CPTKProviderNotFoundError):
        load_provider_bc(provider_registry)


def test_known_provider_names() -> None:
    """Well-known names are fixed."""
    assert KnownProvider.labels() == [
        "BC",
        "SUN",
        "SunJCE",
        "SunRsaSign",
        "SunEC",
        "OpenJCEPlus",
        "OpenJCEPlusFIPS",
    ]
    assert KnownProvider.BC == "BC"
    assert KnownProvider.from_label("sunjce") is KnownProvider.SUN_JCE
