"""Create the main Typer CLI app."""

import logging
from typing import Annotated

import typer

from ..api.config.TmlConfig import TmlConfig
from ..api.link.cmd_create import cmd_create
from ..api.link.LinkError import error_chain
from ..logging_config import setup_logging
from ._handle_stage_result import _handle_stage_result
from .display import CLIDisplay


def _create_app() -> typer.Typer:
    """Create and configure the tml Typer app."""
    app = typer.Typer(
        name="tml",
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        context_settings={"help_option_names": ["-h", "--help"]},
        add_completion=False,
    )

    @app.command()
    def link(
        source: Annotated[str, typer.Argument(metavar="SOURCE", help="The target of the link")],
        destination: Annotated[
            str | None, typer.Argument(metavar="[DESTINATION]", help="The destination path to create")
        ] = None,
        no_verify: Annotated[bool, typer.Option("-n", "--no-verify", help="Do not verify that SOURCE exists")] = False,
        force: Annotated[
            bool, typer.Option("-f", "--force", help="Remove an existing DESTINATION unless it is SOURCE itself")
        ] = False,
        verbose: Annotated[bool, typer.Option("-v", "--verbose", help="Log each step to stderr")] = False,
    ) -> None:
        """Create a symbolic link to SOURCE at DESTINATION, creating parent directories as needed.

        DESTINATION defaults to the basename of SOURCE if omitted.
        The basename of SOURCE is appended to DESTINATION if DESTINATION ends with a '/'.
        A relative SOURCE is verified relative to the directory of DESTINATION.
        """
        try:
            config = TmlConfig.load()
        except ValueError as e:
            CLIDisplay().error_chain(error_chain(e))
            raise typer.Exit(1) from e

        setup_logging(logging.DEBUG if verbose else config.level, config.log_path)

        verify = config.verify and not no_verify
        force = config.force or force
        _handle_stage_result(cmd_create)(source, destination, verify=verify, force=force)

    return app
