# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab


import asyncio
import sys
from pathlib import Path
from typing import NoReturn

import click
from click_option_group import optgroup

from qsd_lib.core.click_format import GNUHelpColorsCommand
from qsd_lib.core.config import CFG
from qsd_lib.core.error import QSDError
from qsd_lib.core.logger import get_logger
from qsd_lib.program import FileEntryPoint
from qsd_lib.properties import OutputFormat, SubmissionSettings

from .driver import SubmissionDriver

logger = get_logger(__name__)


@click.command(
    short_help="Submit a program to a target.",
    help=f"""
Submit a compiled program for execution on a remote target.

{click.style("PROGRAM", fg="green")}   Path to the compiled program to submit.

Use `--dry-run` to only validate the program and the options against the target.
Use the target '{CFG.targets.nothing}' to check the submission without contacting any service.
""",
    cls=GNUHelpColorsCommand,
    help_options_color="bright_blue",
)
@click.argument("program", type=str, metavar=click.style("PROGRAM", fg="green"))
@optgroup.group(f"{click.style('Target settings', fg='yellow')}")
@optgroup.option(
    "--target",
    "-t",
    type=str,
    default=None,
    envvar=CFG.env_vars.target,
    help=f"The target device ID, e.g. 'ionq.simulator'. Can also be set using the environment variable '{CFG.env_vars.target}'.",
)
@optgroup.option(
    "--storage",
    type=str,
    default=None,
    help="The storage account connection string.",
)
@optgroup.option(
    "--subscription",
    type=str,
    default=None,
    envvar=CFG.env_vars.subscription,
    help="The subscription ID.",
)
@optgroup.option(
    "--resource-group",
    type=str,
    default=None,
    envvar=CFG.env_vars.resource_group,
    help="The resource group name.",
)
@optgroup.option(
    "--workspace",
    type=str,
    default=None,
    envvar=CFG.env_vars.workspace,
    help="The workspace name.",
)
@optgroup.option(
    "--aad-token",
    type=str,
    default=None,
    help=f"The authentication token. If not specified, the token is read from the environment variable '{CFG.env_vars.access_token}'.",
)
@optgroup.option(
    "--base-uri",
    type=str,
    default=None,
    help=f"The base URI of the remote endpoint. Defaults to '{CFG.remote.default_base_uri}'.",
)
@optgroup.group(f"{click.style('Submission settings', fg='yellow')}")
@optgroup.option(
    "--shots",
    type=click.IntRange(min=0),
    default=CFG.targets.default_shots,
    show_default=True,
    help="The number of times the program is executed on the target machine.",
)
@optgroup.option(
    "--output",
    type=click.Choice(OutputFormat.choices(), case_sensitive=False),
    default=str(OutputFormat.FRIENDLY_URI),
    show_default=True,
    help="The information to show in the output after the job is submitted.",
)
@optgroup.option(
    "--dry-run",
    is_flag=True,
    default=False,
    help="Validate the program and options, but do not submit.",
)
@optgroup.group(f"{click.style('Program', fg='yellow')}")
@optgroup.option(
    "--arg",
    "arguments",
    type=str,
    multiple=True,
    help="Argument of the program in the format 'NAME=VALUE'. Can be used multiple times.",
)
def submit(
    program: str, arguments: tuple[str, ...], output: str, **kwargs
) -> NoReturn:
    """
    Submit a compiled program for execution on a remote target.
    """
    try:
        entry_point = FileEntryPoint.fromFile(Path(program))
        settings = SubmissionSettings(output=OutputFormat.fromStr(output), **kwargs)

        driver = SubmissionDriver()
        sys.exit(asyncio.run(driver.run(entry_point, arguments, settings)))
    except QSDError as e:
        logger.error(e)
        sys.exit(CFG.exit_codes.default)
    except Exception as e:
        logger.critical(e, exc_info=True, stack_info=True)
        sys.exit(CFG.exit_codes.unexpected_error)
