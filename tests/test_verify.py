"""Tests for signature verification over files and directories."""

import pytest

from signed_codegen.cli.verify import verify_signed_main
from signed_codegen.signature import Variant
from signed_codegen.signature.scheme import sign_full, signing_token
from signed_codegen.verify.checker import CheckStatus, verify_file, verify_paths

SIGNED = sign_full(f"# {signing_token(Variant.FULL)}\nvalue = 1\n")


@pytest.fixture
def tree(tmp_path):
    (tmp_path / "good.py").write_text(SIGNED)
    (tmp_path / "sub").mkdir()
    (tmp_path / "sub" / "bad.py").write_text(SIGNED.replace("value = 1", "value = 2"))
    (tmp_path / "sub" / "plain.txt").write_text("nothing to check\n")
    return tmp_path


class TestVerifyFile:
    def test_valid(self, tree):
        assert verify_file(tree / "good.py").status is CheckStatus.OK

    def test_modified(self, tree):
        check = verify_file(tree / "sub" / "bad.py")
        assert check.status is CheckStatus.MODIFIED
        assert not check.passed

    def test_unsigned_passes(self, tree):
        check = verify_file(tree / "sub" / "plain.txt")
        assert check.status is CheckStatus.UNSIGNED
        assert check.passed

    def test_unreadable_file_fails(self, tree, monkeypatch):
        def deny(path):
            raise PermissionError(13, "Permission denied", str(path))

        monkeypatch.setattr("signed_codegen.verify.checker.read_text", deny)
        check = verify_file(tree / "good.py")
        assert check.status is CheckStatus.UNREADABLE
        assert "Permission denied" in check.reason
        assert not check.passed

    def test_non_utf8_signed_file_verifies(self, tmp_path):
        path = tmp_path / "latin.py"
        path.write_bytes(sign_full(f"# {signing_token(Variant.FULL)}\nname = \"caf\udce9\"\n").encode("utf-8", "surrogateescape"))
        assert verify_file(path).status is CheckStatus.OK

    def test_binary_file_is_unsigned(self, tmp_path):
        path = tmp_path / "blob.bin"
        path.write_bytes(b"\xff\xfe\x00\x01")
        assert verify_file(path).status is CheckStatus.UNSIGNED


class TestVerifyPaths:
    def test_directory_walk(self, tree):
        report = verify_paths([tree])
        assert len(report.checks) == 3
        assert [c.path.name for c in report.ok] == ["good.py"]
        assert [c.path.name for c in report.modified] == ["bad.py"]
        assert not report.passed

    def test_only_valid_files_pass(self, tree):
        assert verify_paths([tree / "good.py", tree / "sub" / "plain.txt"]).passed

    def test_unrecognized_path_fails(self, tree):
        report = verify_paths([tree / "missing.py"])
        assert report.unrecognized == [tree / "missing.py"]
        assert not report.passed


class TestVerifySignedScript:
    def test_one_ok_one_modified(self, tree, capsys):
        rc = verify_signed_main([str(tree / "good.py"), str(tree / "sub" / "bad.py")])
        captured = capsys.readouterr()
        assert rc == 1
        assert captured.out.splitlines() == [f"OK: {tree / 'good.py'}"]
        assert captured.err.splitlines() == [f"MODIFIED: {tree / 'sub' / 'bad.py'}"]

    def test_all_valid_exits_zero(self, tree, capsys):
        assert verify_signed_main([str(tree / "good.py")]) == 0

    def test_no_arguments_prints_usage(self, capsys):
        rc = verify_signed_main([])
        assert rc == 1
        assert "usage" in capsys.readouterr().err

    def test_missing_path(self, tmp_path, capsys):
        rc = verify_signed_main([str(tmp_path / "nope")])
        assert rc == 1
        assert "not a file or directory" in capsys.readouterr().err

    def test_unreadable_file_does_not_stop_walk(self, tree, capsys, monkeypatch):
        from signed_codegen.artifact.filesystem import read_text

        def flaky(path):
            if path.name == "plain.txt":
                raise PermissionError(13, "Permission denied", str(path))
            return read_text(path)

        monkeypatch.setattr("signed_codegen.verify.checker.read_text", flaky)
        rc = verify_signed_main([str(tree)])
        captured = capsys.readouterr()
        assert rc == 1
        assert f"OK: {tree / 'good.py'}" in captured.out
        assert f"UNREADABLE: {tree / 'sub' / 'plain.txt'}" in captured.err
        assert f"MODIFIED: {tree / 'sub' / 'bad.py'}" in captured.err
