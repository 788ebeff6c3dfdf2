from pathlib import Path

from click.testing import CliRunner

from pagewise.cli import cli


class TestCli:
    def test_prints_help_without_a_command(self):
        result = CliRunner().invoke(cli, [])

        assert result.exit_code == 0
        assert "page" in result.output
        assert "which" in result.output

    def test_which_prints_the_selected_command(self, fake_command, bin_path: Path):
        fake_command("more")

        result = CliRunner().invoke(cli, ["which"], env={"PATH": str(bin_path), "PAGER": None})

        assert result.exit_code == 0
        assert result.output == "more\n"

    def test_page_prints_short_input(self, bin_path: Path):
        result = CliRunner().invoke(
            cli, ["page", "--height", "5"], input="hello\n", env={"PATH": str(bin_path)}
        )

        assert result.exit_code == 0
        assert result.output == "hello\n"

    def test_page_rejects_negative_sizes(self):
        result = CliRunner().invoke(cli, ["page", "--height", "-1"])

        assert result.exit_code == 2
