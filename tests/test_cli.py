"""Tests for the unified CLI."""

import argparse

import pytest

from signed_codegen.cli import build_parser, main
from signed_codegen.sections import manual_section
from signed_codegen.signature import Variant
from signed_codegen.signature.scheme import sign_full, sign_partial, signing_token


@pytest.fixture
def files(tmp_path):
    full = tmp_path / "full.py"
    full.write_text(sign_full(f"# {signing_token(Variant.FULL)}\nx = 1\n"))
    partial = tmp_path / "partial.py"
    partial.write_text(sign_partial(
        f"# {signing_token(Variant.PARTIAL)}\n"
        + manual_section("imports", "import os\n")
        + "\n"
        + manual_section("body")
        + "\n"
    ))
    plain = tmp_path / "plain.py"
    plain.write_text("x = 1\n")
    return {"full": full, "partial": partial, "plain": plain}


# ── Parser construction ──────────────────────────────────────────


class TestParser:
    def test_build_parser_returns_parser(self):
        assert isinstance(build_parser(), argparse.ArgumentParser)

    def test_no_args_shows_help(self, capsys):
        assert main([]) == 0
        assert "signed-codegen" in capsys.readouterr().out

    @pytest.mark.parametrize("cmd", [["--help"], ["verify", "--help"], ["status", "--help"], ["sections", "--help"]])
    def test_help_exits_zero(self, cmd):
        with pytest.raises(SystemExit) as exc_info:
            build_parser().parse_args(cmd)
        assert exc_info.value.code == 0


# ── Commands ─────────────────────────────────────────────────────


class TestCommands:
    def test_verify(self, files, capsys):
        assert main(["verify", str(files["full"]), str(files["plain"])]) == 0
        assert f"OK: {files['full']}" in capsys.readouterr().out

    def test_status(self, files, capsys):
        rc = main(["status", str(files["full"]), str(files["partial"]), str(files["plain"])])
        out = capsys.readouterr().out
        assert rc == 0
        assert "fully-signed" in out
        assert "partially-signed" in out
        assert "unsigned" in out

    def test_status_reports_modified(self, files, capsys):
        files["full"].write_text(files["full"].read_text().replace("x = 1", "x = 2"))
        assert main(["status", str(files["full"])]) == 1
        assert "MODIFIED" in capsys.readouterr().out

    def test_sections(self, files, capsys):
        assert main(["sections", str(files["partial"])]) == 0
        out = capsys.readouterr().out
        assert "imports" in out
        assert "body" in out

    def test_sections_none(self, files, capsys):
        assert main(["sections", str(files["plain"])]) == 0
        assert "No manual sections" in capsys.readouterr().out

    def test_sections_malformed(self, tmp_path, capsys):
        path = tmp_path / "broken.py"
        path.write_text("# BEGIN MANUAL SECTION a\n")
        assert main(["sections", str(path)]) == 1
        assert "ERROR" in capsys.readouterr().out
