#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2026 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""Command line front-end of the Crypto Provider Test Kit.

Inspects the host platform and the available cryptographic providers the same
way test suites do.
"""

import sys
from typing import Optional

import click

from cptk.apps.utils import cptk_logger
from cptk.apps.utils.common_cli_options import cptk_apps_common_options, cptk_plugin_option
from cptk.apps.utils.utils import CPTKAppError, catch_cptk_error, format_raw_data
from cptk.providers import KnownProvider, get_factory_registry, resolve_provider
from cptk.providers.factory import get_entry_point_names
from cptk.utils.misc import generate_bytes, hex_to_bytes
from cptk.utils.platform_info import get_host_platform, is_fips_certified_platform
from cptk.utils.plugins import PluginsManager


def _load_plugin(plugin: Optional[str]) -> None:
    if plugin:
        PluginsManager().load_from_source_file(plugin)


@click.group(name="cptk", no_args_is_help=True)
@cptk_apps_common_options
def main(log_level: int) -> int:
    """Crypto Provider Test Kit utilities."""
    cptk_logger.install(level=log_level)
    return 0


@main.command(name="platform", no_args_is_help=False)
@click.option(
    "-c",
    "--check",
    is_flag=True,
    default=False,
    help="Exit with code 1 if the host is not a FIPS certified platform.",
)
def platform_command(check: bool) -> None:
    """Show host platform and whether a FIPS certified library is expected."""
    host = get_host_platform()
    certified = is_fips_certified_platform(host)
    click.echo(f"OS name:      {host.os_name or '<unknown>'}")
    click.echo(f"Architecture: {host.os_arch or '<unknown>'}")
    click.echo(f"FIPS certified platform: {'yes' if certified else 'no'}")
    if check and not certified:
        raise CPTKAppError(f"Host {host} is not a FIPS certified platform", error_code=1)


@main.command(name="providers", no_args_is_help=False)
@cptk_plugin_option
def providers_command(plugin: Optional[str]) -> None:
    """List well-known providers and available provider factories."""
    _load_plugin(plugin)
    click.echo("Well-known providers:")
    for provider in KnownProvider:
        click.echo(f"  {provider.label:<16} {provider.description}")
    factories = get_factory_registry().names()
    click.echo("Registered factories:")
    for name in factories:
        click.echo(f"  {name}")
    if not factories:
        click.echo("  <none>")
    entry_points = get_entry_point_names()
    click.echo("Factory entry points:")
    for name in entry_points:
        click.echo(f"  {name}")
    if not entry_points:
        click.echo("  <none>")


@main.command(name="resolve", no_args_is_help=True)
@click.argument("name", type=str)
@click.option(
    "-f",
    "--factory",
    type=str,
    help="Factory name or dotted reference (package.module:Attribute). Defaults to NAME.",
)
@cptk_plugin_option
def resolve_command(name: str, factory: Optional[str], plugin: Optional[str]) -> None:
    """Resolve provider NAME and show its implementation."""
    _load_plugin(plugin)
    provider = resolve_provider(name, factory)
    provider_type = type(provider)
    click.echo(f"{name}: {provider_type.__module__}.{provider_type.__qualname__}")


@main.command(name="generate", no_args_is_help=True)
@click.argument("length", type=click.IntRange(min=0))
@click.option("-x", "--hexdump", "use_hexdump", is_flag=True, help="Print in hexdump format.")
def generate_command(length: int, use_hexdump: bool) -> None:
    """Print LENGTH bytes of deterministic test data."""
    click.echo(format_raw_data(generate_bytes(length), use_hexdump=use_hexdump))


@main.command(name="dump", no_args_is_help=True)
@click.argument("hex_data", type=str)
def dump_command(hex_data: str) -> None:
    """Print HEX_DATA in hexdump format, whitespace is ignored."""
    click.echo(format_raw_data(hex_to_bytes(hex_data), use_hexdump=True))


@catch_cptk_error
def safe_main() -> None:
    """Call the main function."""
    sys.exit(main())  # pylint: disable=no-value-for-parameter


if __name__ == "__main__":
    safe_main()
