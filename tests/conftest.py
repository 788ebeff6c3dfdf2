from io import StringIO
from pathlib import Path
from typing import (
    Callable,
    Generator,
    Iterable,
    Mapping,
    Protocol,
    TextIO,
    TypeAlias,
    cast,
)

import pytest

from pagewise.cmd_base import Base
from pagewise.command import Command
from pagewise.pager_command import CommandExists, PagerConfiguration, PagerSelector
from pagewise.paging import PagingEngine
from tests.cmd_helpers import CapturedOutput

PagewiseCmdResult: TypeAlias = tuple[Base, StringIO, StringIO, StringIO]

FakeCommand: TypeAlias = Callable[[str], Path]
ExistingCommands: TypeAlias = Callable[..., CommandExists]


class PagewiseCmd(Protocol):
    def __call__(
        self,
        *argv: str,
        env: Mapping[str, str] | None = None,
        stdin_data: str = "",
    ) -> PagewiseCmdResult: ...


class MakeSelector(Protocol):
    def __call__(
        self,
        existing: Iterable[str] = (),
        env: Mapping[str, str] | None = None,
        config: PagerConfiguration | None = None,
    ) -> PagerSelector: ...


class MakeEngine(Protocol):
    def __call__(
        self,
        stdin_data: str = "",
        existing: Iterable[str] = (),
        detected: tuple[int, int] | None = None,
    ) -> PagingEngine: ...


@pytest.fixture
def bin_path(tmp_path: Path) -> Path:
    path = tmp_path / "bin"
    path.mkdir()
    return path


@pytest.fixture
def fake_command(bin_path: Path) -> FakeCommand:
    def _fake_command(name: str) -> Path:
        path = bin_path / name
        path.write_text("#!/bin/sh\nexit 0\n")
        path.chmod(0o755)
        return path

    return _fake_command


@pytest.fixture
def existing_commands() -> ExistingCommands:
    def _existing_commands(*names: str) -> CommandExists:
        def command_exists(name: str, env: Mapping[str, str]) -> bool:
            return name in names

        return command_exists

    return _existing_commands


@pytest.fixture
def make_selector(existing_commands: ExistingCommands) -> MakeSelector:
    def _make_selector(
        existing: Iterable[str] = (),
        env: Mapping[str, str] | None = None,
        config: PagerConfiguration | None = None,
    ) -> PagerSelector:
        return PagerSelector(
            config or PagerConfiguration(),
            env or {},
            existing_commands(*existing),
        )

    return _make_selector


@pytest.fixture
def make_engine(make_selector: MakeSelector) -> MakeEngine:
    def _make_engine(
        stdin_data: str = "",
        existing: Iterable[str] = (),
        detected: tuple[int, int] | None = None,
    ) -> PagingEngine:
        return PagingEngine(
            make_selector(existing),
            {},
            StringIO(stdin_data),
            StringIO(),
            StringIO(),
            detect=lambda env, stream: detected,
        )

    return _make_engine


@pytest.fixture
def captured_stdout() -> Generator[CapturedOutput, None, None]:
    output = CapturedOutput()
    yield output
    output.close()


@pytest.fixture
def pagewise_cmd(tmp_path: Path, bin_path: Path) -> PagewiseCmd:
    def _pagewise_cmd(
        *argv: str,
        env: Mapping[str, str] | None = None,
        stdin_data: str = "",
    ) -> PagewiseCmdResult:
        cmd_env = {"PATH": str(bin_path)}
        cmd_env.update(env or {})
        stdin = StringIO(stdin_data)
        stdout = StringIO()
        stderr = StringIO()
        cmd = Command.execute(
            tmp_path,
            cast(dict[str, str], cmd_env),
            ["pagewise"] + list(argv),
            stdin,
            stdout,
            cast(TextIO, stderr),
        )
        return cmd, stdin, stdout, stderr

    return _pagewise_cmd
