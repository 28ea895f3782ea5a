"""Tests for the local diff_locks CLI script."""

from __future__ import annotations

from pathlib import Path

import diff_locks

from lock_changes.render import COMMENT_HEADER


def _write(path: Path, text: str) -> Path:
    path.write_text(text, encoding="utf-8")
    return path


class TestDiffLocksScript:
    def test_prints_comment(self, tmp_path, base_package_lock_text, package_lock_text, capsys):
        base = _write(tmp_path / "base-package-lock.json", base_package_lock_text)
        head = _write(tmp_path / "package-lock.json", package_lock_text)

        assert diff_locks.main(["--base", str(base), "--head", str(head)]) == 0

        out = capsys.readouterr().out
        assert out.startswith(COMMENT_HEADER)
        assert "`@babel/core`" in out

    def test_no_changes(self, tmp_path, package_lock_text, capsys):
        head = _write(tmp_path / "package-lock.json", package_lock_text)

        assert diff_locks.main(["--base", str(head), "--head", str(head)]) == 0
        assert capsys.readouterr().out == ""

    def test_missing_file(self, tmp_path, capsys):
        missing = tmp_path / "nope.json"
        assert diff_locks.main(["--base", str(missing), "--head", str(missing)]) == 1
        assert "ERROR" in capsys.readouterr().err
