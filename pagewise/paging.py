from __future__ import annotations

import enum
import logging
import re
from contextlib import contextmanager
from typing import Callable, Generator, Mapping, Optional, TextIO

from pagewise.pager import Pager
from pagewise.pager_command import PagerSelector
from pagewise.terminal import detect_terminal_size, determine_terminal_size

log = logging.getLogger(__name__)

DetectSize = Callable[[Mapping[str, str], Optional[TextIO]], Optional[tuple[int, int]]]


class DisplayMode(enum.Enum):
    RAW = "raw"
    INSPECT = "inspect"

    @classmethod
    def of(cls, inspect_mode: bool | DisplayMode) -> DisplayMode:
        if isinstance(inspect_mode, DisplayMode):
            return inspect_mode
        return cls.INSPECT if inspect_mode else cls.RAW


class PagingSession:
    """
    One screen-sized view over text that has not been shown yet.

    Raw mode counts newline-delimited lines; inspect mode counts characters,
    without accounting for lines that wrap on screen.
    """

    PROMPT_LINES = 2

    def __init__(
        self,
        width: int | None,
        height: int | None,
        text: str = "",
        detected: tuple[int, int] | None = None,
    ) -> None:
        self.width, self.height = determine_terminal_size(width, height, detected)
        self.remaining_text: str = text

    @property
    def effective_height(self) -> int:
        return max(self.height - self.PROMPT_LINES, 1)

    @property
    def page_size(self) -> int:
        return max(self.width, 1) * self.effective_height

    def activated_by(self, text: str, inspect_mode: bool | DisplayMode = False) -> bool:
        if DisplayMode.of(inspect_mode) is DisplayMode.INSPECT:
            return len(text) > self.height * self.width
        return text.count("\n") > self.height

    def slice(self, inspect_mode: bool | DisplayMode = False) -> str:
        if DisplayMode.of(inspect_mode) is DisplayMode.INSPECT:
            page = self.remaining_text[: self.page_size]
            self.remaining_text = self.remaining_text[len(page) :]
            return page

        lines = self.remaining_text.split("\n")
        # a trailing newline terminates the last line rather than starting one
        if len(lines) - (lines[-1] == "") <= self.effective_height:
            page, self.remaining_text = self.remaining_text, ""
            return page

        page = "\n".join(lines[: self.effective_height])
        self.remaining_text = "\n".join(lines[self.effective_height :])
        return page


class PagingEngine:
    PROMPT = "=== Press enter/return to continue or q to quit: ==="
    FINISHED = "=== Pager finished. ==="

    def __init__(
        self,
        selector: PagerSelector,
        env: Mapping[str, str],
        stdin: TextIO,
        stdout: TextIO,
        stderr: TextIO,
        detect: DetectSize = detect_terminal_size,
        prompt_input: TextIO | None = None,
    ) -> None:
        self.selector = selector
        self.env = env
        self.stdin = stdin
        self.stdout = stdout
        self.stderr = stderr
        self.detect = detect
        self.prompt_input = prompt_input or stdin

    def session(self, width: int | None, height: int | None, text: str = "") -> PagingSession:
        return PagingSession(width, height, text, self.detect(self.env, self.stdout))

    def page(
        self,
        text: str,
        inspect_mode: bool | DisplayMode = False,
        override_pager_command: str | None = None,
        width: int | None = None,
        height: int | None = None,
    ) -> None:
        command = self.selector.resolve_effective(override_pager_command)
        if command:
            self.command_pager(text, command)
        else:
            self.default_pager(text, inspect_mode, width, height)

    def render(
        self,
        text: str,
        inspect_mode: bool | DisplayMode = False,
        override_pager_command: str | None = None,
        width: int | None = None,
        height: int | None = None,
    ) -> None:
        if self.session(width, height).activated_by(text, inspect_mode):
            self.page(text, inspect_mode, override_pager_command, width, height)
        else:
            self.println(text)

    def command_pager(self, text: str, command: str) -> None:
        log.debug("paging %d characters through %r", len(text), command)
        pager = Pager(command, self.env, self.stdout, self.stderr)
        try:
            with self.redirect_output(pager.input):
                self.println(text)
                self.stdout.flush()
        except BrokenPipeError:
            log.debug("pager %r stopped reading before the end of output", command)
        finally:
            pager.close()

    def default_pager(
        self,
        text: str,
        inspect_mode: bool | DisplayMode = False,
        width: int | None = None,
        height: int | None = None,
    ) -> None:
        session = self.session(width, height, text)
        log.debug("built-in pager at %dx%d", session.width, session.height)

        while session.activated_by(session.remaining_text, inspect_mode):
            self.println(session.slice(inspect_mode))
            if not self.continue_paging():
                return

        self.println(session.remaining_text)
        self.println(self.FINISHED)

    def continue_paging(self) -> bool:
        self.println(self.PROMPT)
        self.stdout.flush()
        answer = self.prompt_input.readline()
        return not re.search("q", answer.strip(), re.IGNORECASE)

    @contextmanager
    def redirect_output(self, stream: TextIO) -> Generator[TextIO]:
        saved = self.stdout
        self.stdout = stream
        try:
            yield stream
        finally:
            self.stdout = saved

    def println(self, string: str) -> None:
        self.stdout.write(string + "\n")
