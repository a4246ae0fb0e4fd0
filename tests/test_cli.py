"""Tests for the click entry point."""

from click.testing import CliRunner

from simon.cli import main
from simon.storage import Storage


class TestCli:
    def setup_method(self):
        self.runner = CliRunner()

    def invoke(self, tmp_path, args, **kwargs):
        base = ["--config", str(tmp_path / "config.yaml"), "--data-file", str(tmp_path / "tasks.md")]
        return self.runner.invoke(main, base + args, **kwargs)

    def test_run_single_command(self, tmp_path):
        result = self.invoke(tmp_path, ["run", "todo", "read", "book"])

        assert result.exit_code == 0, result.output
        assert "Got it" in result.output
        tasks = Storage(tmp_path / "tasks.md").load()
        assert [task.get_name() for task in tasks] == ["read book"]

    def test_run_reports_errors(self, tmp_path):
        result = self.invoke(tmp_path, ["run", "mark", "3"])

        assert result.exit_code == 0, result.output
        assert "OOPS!" in result.output

    def test_interactive_session(self, tmp_path):
        result = self.invoke(tmp_path, [], input="todo read book\nlist\nbye\n")

        assert result.exit_code == 0, result.output
        assert "Hello! I'm Simon." in result.output
        assert "read book" in result.output
        assert "Bye." in result.output

    def test_session_ends_at_end_of_input(self, tmp_path):
        result = self.invoke(tmp_path, ["chat"], input="todo read book\n")

        assert result.exit_code == 0, result.output
        assert "Bye." in result.output

    def test_config_init(self, tmp_path):
        result = self.invoke(tmp_path, ["config", "--init"])

        assert result.exit_code == 0, result.output
        content = (tmp_path / "config.yaml").read_text(encoding="utf-8")
        assert str(tmp_path / "tasks.md") in content

    def test_config_show(self, tmp_path):
        result = self.invoke(tmp_path, ["config"])

        assert result.exit_code == 0, result.output
        assert "suggest_commands: true" in result.output
