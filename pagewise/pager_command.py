from __future__ import annotations

import logging
import shlex
import shutil
from typing import Callable, Iterable, Mapping

log = logging.getLogger(__name__)

CommandExists = Callable[[str, Mapping[str, str]], bool]


def command_exists(name: str, env: Mapping[str, str]) -> bool:
    return shutil.which(name, path=env.get("PATH")) is not None


class PagerConfiguration:
    def __init__(self, command: str | None = None) -> None:
        self.command: str | None = command

    def __repr__(self) -> str:
        return f"PagerConfiguration(command={self.command!r})"


class PagerSelector:
    FALLBACK_COMMANDS = ["less", "more", "pager", "cat"]

    def __init__(
        self,
        config: PagerConfiguration,
        env: Mapping[str, str],
        command_exists: CommandExists = command_exists,
    ) -> None:
        self.config = config
        self.env = env
        self._command_exists = command_exists

    def set_pager_command(self, *candidates: str | Iterable[str] | None) -> str | None:
        self.config.command = self._select(self._normalize(candidates))
        log.debug("configured pager command: %r", self.config.command)
        return self.config.command

    def get_pager_command(self) -> str | None:
        if self.is_valid(self.config.command):
            return self.config.command

        self.config.command = self._select(self.fallback_commands())
        log.debug("fallback pager command: %r", self.config.command)
        return self.config.command

    def resolve_effective(self, override: str | None) -> str | None:
        if self.is_valid(override):
            return override
        return self.get_pager_command()

    def fallback_commands(self) -> list[str]:
        candidates = list(self.FALLBACK_COMMANDS)
        preferred = self.env.get("PAGER")
        if preferred:
            candidates.insert(0, preferred)
        return candidates

    def is_valid(self, cmd: str | None) -> bool:
        if not cmd:
            return False

        try:
            args = shlex.split(cmd)
        except ValueError:
            return False

        if not args:
            return False

        return self._command_exists(args[0], self.env)

    def _select(self, candidates: Iterable[str]) -> str | None:
        for candidate in candidates:
            if self.is_valid(candidate):
                return candidate
        return None

    def _normalize(self, candidates: Iterable[str | Iterable[str] | None]) -> list[str]:
        result: list[str] = []
        for candidate in self._flatten(candidates):
            if candidate and candidate not in result:
                result.append(candidate)
        return result

    def _flatten(self, items: Iterable[str | Iterable[str] | None]) -> Iterable[str | None]:
        for item in items:
            if item is None or isinstance(item, str):
                yield item
            else:
                yield from self._flatten(item)
