#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2026 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""CPTK plugins manager.

External packages contribute provider factories as plugins. A plugin is a
plain Python module which registers its factories on import, typically with
the :func:`cptk.providers.factory.register_factory` decorator. Plugins are
loaded from setuptools entry points, Python source files or module names.
"""

import logging
import os
import sys
from importlib import import_module
from importlib.machinery import ModuleSpec
from importlib.util import find_spec, module_from_spec, spec_from_file_location
from types import ModuleType
from typing import Optional

import importlib_metadata

from cptk.exceptions import CPTKError, CPTKTypeError
from cptk.utils.cptk_enum import CptkEnum
from cptk.utils.misc import SingletonMeta

logger = logging.getLogger(__name__)


class PluginType(CptkEnum):
    """CPTK Plugin Type Enumeration.

    Each plugin type contains an identifier, entry point group name, and
    human-readable description.
    """

    PROVIDER_FACTORY = (0, "cptk.provider", "Cryptographic provider factory")


class PluginsManager(metaclass=SingletonMeta):
    """CPTK Plugin Manager for dynamic module loading and registration.

    This singleton keeps track of every plugin module loaded into the process,
    keyed by the module name.
    """

    def __init__(self) -> None:
        """Initialize the plugin manager with no plugins loaded."""
        self.plugins: dict[str, ModuleType] = {}

    def load_from_entrypoints(self, group_name: Optional[str] = None) -> int:
        """Load modules from given setuptools group.

        If no group name is provided, plugins of all plugin types are loaded.
        Failed module imports are logged as warnings and skipped.

        :param group_name: Entry point group to load plugins from. If None, loads from all groups.
        :raises CPTKTypeError: When group_name is not a string type.
        :return: The number of successfully loaded plugins.
        """
        if group_name is not None and not isinstance(group_name, str):
            raise CPTKTypeError("Group name must be of string type.")
        group_names = (
            [group_name]
            if group_name is not None
            else [PluginType.get_label(tag) for tag in PluginType.tags()]
        )

        entry_points: list[importlib_metadata.EntryPoint] = []
        for group in group_names:
            entry_points.extend(importlib_metadata.entry_points(group=group))

        count = 0
        for ep in entry_points:
            try:
                module = import_module(ep.module)
            except ImportError as exc:
                logger.warning(f"Module {ep.module} could not be loaded: {exc}")
                continue
            if self.register(module):
                logger.info(f"Plugin {ep.name}-{ep.group} has been loaded.")
                count += 1
        return count

    def load_from_source_file(self, source_file: str, module_name: Optional[str] = None) -> None:
        """Import Python source file directly and register it.

        :param source_file: Path to python source file: absolute or relative to cwd
        :param module_name: Name for the new module, default is basename of the source file
        :raises CPTKError: If importing of source file failed
        """
        if not os.path.isfile(source_file):
            raise CPTKError(
                f"Source '{source_file}' does not exist. Check if it is valid file path name"
            )
        name = module_name or os.path.splitext(os.path.basename(source_file))[0]
        spec = spec_from_file_location(name=name, location=source_file)
        if not spec:
            raise CPTKError(f"Source '{source_file}' is not a loadable python file")

        module = self._import_module_spec(spec)
        self.register(module)

    def load_from_module_name(self, module_name: str) -> None:
        """Import Python module directly by name and register it.

        :param module_name: Name of the Python module to be imported and registered.
        :raises CPTKError: If the module cannot be found or importing fails.
        """
        try:
            spec = find_spec(name=module_name)
        except ImportError as exc:
            raise CPTKError(f"Module '{module_name}' could not be searched: {exc}") from exc
        if not spec:
            raise CPTKError(
                f"Source '{module_name}' does not exist. Check if it is valid file module name"
            )
        module = self._import_module_spec(spec)
        self.register(module)

    def _import_module_spec(self, spec: ModuleSpec) -> ModuleType:
        """Import module from module specification.

        :param spec: Module specification containing loader and module metadata.
        :raises CPTKError: Failed to load or execute the module specification.
        :return: Successfully imported and executed module.
        """
        module = module_from_spec(spec)
        try:
            sys.modules[spec.name] = module
            spec.loader.exec_module(module)  # type: ignore
            logger.debug(f"A module spec {spec.name} has been loaded.")
        except Exception as e:
            sys.modules.pop(spec.name, None)
            raise CPTKError(f"Failed to load module spec {spec.name}: {e}") from e
        return module

    def register(self, plugin: ModuleType) -> bool:
        """Register a plugin module.

        :param plugin: Plugin as a module to be registered.
        :return: True if plugin was successfully registered, False if plugin is already registered.
        """
        plugin_name = self.get_plugin_name(plugin)
        if plugin_name in self.plugins:
            logger.debug(f"Plugin {plugin_name} has been already registered.")
            return False
        self.plugins[plugin_name] = plugin
        logger.debug(f"A plugin {plugin_name} has been registered.")
        return True

    def get_plugin(self, name: str) -> Optional[ModuleType]:
        """Get plugin by name from registered plugins.

        :param name: Name of the plugin to retrieve.
        :return: Plugin module if found, None if plugin with given name is not registered.
        """
        return self.plugins.get(name)

    def get_plugin_name(self, plugin: ModuleType) -> str:
        """Get canonical name of plugin.

        :param plugin: Plugin as a module
        :raises CPTKError: Plugin name could not be determined.
        :return: String with plugin name
        """
        name = getattr(plugin, "__name__", None)
        if name is None:
            raise CPTKError("Plugin name could not be determined.")
        return name
