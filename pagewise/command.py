from __future__ import annotations

from pathlib import Path
from typing import (
    MutableMapping,
    TextIO,
    Type,
)

from pagewise.cmd_base import Base
from pagewise.cmd_page import Page
from pagewise.cmd_which import Which


class Command:
    class Unknown(Exception):
        pass

    COMMANDS: dict[str, Type[Base]] = {
        "page": Page,
        "which": Which,
    }

    @staticmethod
    def execute(
        _dir: Path,
        env: MutableMapping[str, str],
        argv: list[str],
        stdin: TextIO,
        stdout: TextIO,
        stderr: TextIO,
    ) -> Base:
        from pagewise.setup_logging import setup_logging

        setup_logging(
            level=env.get("PAGEWISE_LOG_LEVEL", "WARNING"),
            log_file=env.get("PAGEWISE_LOG"),
        )

        name = argv[1]
        args = argv[2:]

        if name not in Command.COMMANDS:
            raise Command.Unknown(f"{name} is not a pagewise command")

        cmd_class = Command.COMMANDS[name]
        cmd: Base = cmd_class(_dir, env, args, stdin, stdout, stderr)
        cmd.execute()

        return cmd
