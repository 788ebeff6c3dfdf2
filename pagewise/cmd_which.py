from __future__ import annotations

from pagewise.cmd_base import Base


class Which(Base):
    """
    Prints the pager command that would be used, choosing among the given
    candidates first and the fallback list otherwise.
    """

    def run(self) -> None:
        if self.args:
            self.selector.set_pager_command(self.args, self.env.get(self.CONFIG_PAGER_ENV))

        command = self.selector.get_pager_command()
        if command is None:
            self.eprintln("error: no pager command found")
            self.exit(1)

        self.println(command)
        self.exit(0)
