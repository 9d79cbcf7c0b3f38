# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab


import sys
from typing import NoReturn

import click
from rich.console import Console

from qsd_lib.backend import BackendMeta
from qsd_lib.core.click_format import GNUHelpColorsCommand
from qsd_lib.core.config import CFG


@click.command(
    short_help="List the supported providers.",
    help="""
List the providers whose targets qsd can submit to.

A target is served by a provider if its ID starts with the provider name followed by a dot,
e.g. 'ionq.simulator' is served by 'ionq'.
""",
    cls=GNUHelpColorsCommand,
    help_options_color="bright_blue",
)
def targets() -> NoReturn:
    """
    List the providers whose targets qsd can submit to.
    """
    console = Console(highlight=False)
    console.print(f"{CFG.targets.nothing}  (no-op target, contacts no service)")
    for provider in BackendMeta.providers():
        console.print(f"{provider}.*")
    sys.exit(0)
