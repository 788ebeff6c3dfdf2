from __future__ import annotations

import logging
from typing import TextIO

from pagewise.cmd_base import Base
from pagewise.pager import PagerError
from pagewise.paging import DisplayMode

log = logging.getLogger(__name__)


class Page(Base):
    TTY_PATH = "/dev/tty"

    def define_options(self) -> None:
        self.mode = DisplayMode.RAW
        self.override: str | None = None
        self.width: int | None = None
        self.height: int | None = None
        self.always = False

        positional = []
        args_iter = iter(self.args)
        for arg in args_iter:
            if arg in ("-i", "--inspect"):
                self.mode = DisplayMode.INSPECT
            elif arg == "--raw":
                self.mode = DisplayMode.RAW
            elif arg == "--always":
                self.always = True
            elif arg in ("-p", "--pager"):
                self.override = self.option_value(arg, next(args_iter, None))
            elif arg.startswith("--pager="):
                self.override = arg.split("=", 1)[1]
            elif arg in ("-W", "--width"):
                self.width = self.size_value(arg, next(args_iter, None))
            elif arg.startswith("--width="):
                self.width = self.size_value("--width", arg.split("=", 1)[1])
            elif arg in ("-H", "--height"):
                self.height = self.size_value(arg, next(args_iter, None))
            elif arg.startswith("--height="):
                self.height = self.size_value("--height", arg.split("=", 1)[1])
            else:
                positional.append(arg)

        self.args = positional

    def option_value(self, flag: str, value: str | None) -> str:
        if value is None:
            self.eprintln(f"error: flag {flag} needs a value")
            self.exit(129)
        assert value is not None
        return value

    def size_value(self, flag: str, value: str | None) -> int:
        value = self.option_value(flag, value)
        if not value.isdigit():
            self.eprintln(f"error: invalid value for {flag}: '{value}'")
            self.exit(129)
        return int(value)

    def run(self) -> None:
        self.define_options()

        text = self.read_text()
        if text.endswith("\n"):
            text = text[:-1]

        if not self.always and not self.isatty:
            self.println(text)
            self.exit(0)

        prompt_input = self.prompt_input()
        try:
            self.paging_engine(prompt_input).render(
                text, self.mode, self.override, self.width, self.height
            )
        except PagerError as e:
            self.eprintln(f"fatal: {e}")
            self.exit(128)
        finally:
            if prompt_input is not None:
                prompt_input.close()

        self.exit(0)

    def read_text(self) -> str:
        if not self.args or self.args[0] == "-":
            self.reading_stdin = True
            return self.stdin.read()

        self.reading_stdin = False
        path = self.expanded_path(self.args[0])
        try:
            return path.read_text(encoding="utf-8")
        except OSError as e:
            self.eprintln(f"fatal: could not open '{self.args[0]}': {e.strerror}")
            self.exit(128)
        except UnicodeDecodeError:
            self.eprintln(f"fatal: '{self.args[0]}' is not valid UTF-8 text")
            self.exit(128)
        return ""

    def prompt_input(self) -> TextIO | None:
        # stdin already holds the text being paged
        if not self.reading_stdin or self.stdin.isatty():
            return None

        try:
            return open(self.TTY_PATH, encoding="utf-8")
        except OSError:
            log.debug("no terminal to prompt on, reading answers from stdin")
            return None
