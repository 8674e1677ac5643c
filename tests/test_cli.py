# tests/test_cli.py
"""
Tests for the patternkit command-line interface.
"""

import pytest
from patternkit import __version__
from patternkit.cli import main
from patternkit.demo import BANNER


class TestCli:
    """Test command-line behaviour."""

    def test_no_arguments_runs_everything(self, capsys):
        assert main([]) == 0

        out = capsys.readouterr().out
        assert out.startswith(BANNER + "\n")
        assert "1. SINGLETON:" in out
        assert "14. TEMPLATE METHOD:" in out

    def test_only(self, capsys):
        assert main(["--only", "decorator", "--only", "13"]) == 0

        out = capsys.readouterr().out
        assert "8. DECORATOR:" in out
        assert "13. STRATEGY:" in out
        assert "1. SINGLETON:" not in out
        assert out.index("8. DECORATOR:") < out.index("13. STRATEGY:")

    def test_unknown_only(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["--only", "observer"])

        assert exc_info.value.code == 2
        assert "unknown demonstration" in capsys.readouterr().err

    def test_list(self, capsys):
        assert main(["--list"]) == 0

        out = capsys.readouterr().out
        assert "1. SINGLETON (creational)" in out
        assert "9. FACADE (structural)" in out
        assert "12. CHAIN OF RESPONSIBILITY (behavioral)" in out
        assert BANNER not in out

    def test_version(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["--version"])

        assert exc_info.value.code == 0
        assert f"patternkit v{__version__}" in capsys.readouterr().out
