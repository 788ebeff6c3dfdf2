from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Optional

import click

from pagewise.cmd_base import Base
from pagewise.command import Command

CONTEXT_SETTINGS = {
    "help_option_names": ["-h", "--help"],
    "max_content_width": 120,
}


def run_cmd(cmd_name: str, *args: str) -> None:
    argv: list[str] = ["pagewise", cmd_name, *args]

    cmd: Base = Command.execute(
        Path.cwd(),
        os.environ.copy(),
        argv,
        sys.stdin,
        sys.stdout,
        sys.stderr,
    )

    sys.exit(cmd.status)


@click.group(context_settings=CONTEXT_SETTINGS, invoke_without_command=True)
@click.pass_context
def cli(ctx: click.Context) -> None:
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


@cli.command()
@click.argument("file", type=click.Path(dir_okay=False, allow_dash=True), required=False)
@click.option(
    "-i",
    "--inspect/--raw",
    "inspect",
    default=False,
    help="Treat the text as one character stream instead of lines.",
)
@click.option(
    "-p",
    "--pager",
    "pager_command",
    type=str,
    help="Pager command to try before the configured one.",
)
@click.option("-W", "--width", type=click.IntRange(min=0), help="Screen width.")
@click.option("-H", "--height", type=click.IntRange(min=0), help="Screen height.")
@click.option(
    "--always",
    is_flag=True,
    help="Page even when standard output is not a terminal.",
)
def page(
    file: Optional[str],
    inspect: bool,
    pager_command: Optional[str],
    width: Optional[int],
    height: Optional[int],
    always: bool,
) -> None:
    """Show FILE (or standard input) one screen at a time."""
    cmd_args: list[str] = ["--inspect" if inspect else "--raw"]

    if pager_command is not None:
        cmd_args.append(f"--pager={pager_command}")
    if width is not None:
        cmd_args.append(f"--width={width}")
    if height is not None:
        cmd_args.append(f"--height={height}")
    if always:
        cmd_args.append("--always")
    if file is not None:
        cmd_args.append(file)

    run_cmd("page", *cmd_args)


@cli.command()
@click.argument("candidates", nargs=-1)
def which(candidates: tuple[str, ...]) -> None:
    """Print the pager command that would be used."""
    run_cmd("which", *candidates)


if __name__ == "__main__":
    cli()
