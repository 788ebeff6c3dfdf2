from __future__ import annotations

import io
import logging
import os
import shlex
import subprocess
from typing import Mapping, TextIO

log = logging.getLogger(__name__)


class PagerError(Exception):
    pass


def _fileno_or_none(stream: TextIO | None) -> int | None:
    if stream is None:
        return None
    try:
        return stream.fileno()
    except (AttributeError, ValueError, OSError, io.UnsupportedOperation):
        return None


class Pager:
    PAGER_ENV = {"LESS": "FRX", "LV": "-c"}

    def __init__(
        self,
        command: str,
        env: Mapping[str, str] = {},
        stdout: TextIO | None = None,
        stderr: TextIO | None = None,
    ) -> None:
        self.command = command

        pager_env = os.environ.copy()
        pager_env.update(env)
        for key, value in self.PAGER_ENV.items():
            pager_env.setdefault(key, value)

        args = shlex.split(command)

        reader_fd, writer_fd = os.pipe()

        try:
            self._proc: subprocess.Popen[bytes] | None = subprocess.Popen(
                args,
                stdin=reader_fd,
                stdout=_fileno_or_none(stdout),
                stderr=_fileno_or_none(stderr),
                env=pager_env,
                close_fds=True,
            )
        except OSError as e:
            os.close(writer_fd)
            raise PagerError(f"cannot run pager '{command}': {e.strerror or e}") from e
        finally:
            os.close(reader_fd)

        self.input: TextIO = os.fdopen(writer_fd, "w", encoding="utf-8")
        log.debug("spawned pager %r (pid %s)", args, self._proc.pid)

    def close(self) -> None:
        try:
            self.input.close()
        except BrokenPipeError:
            log.debug("pager %r closed its input early", self.command)
        self.wait()

    def wait(self) -> None:
        if self._proc:
            status = self._proc.wait()
            log.debug("pager %r exited with status %s", self.command, status)
            self._proc = None
