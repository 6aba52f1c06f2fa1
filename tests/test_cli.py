import json
import os
import subprocess

import pytest

from plainify.cli import (
    compile_excludes,
    discover_files,
    format_finding,
    is_excluded,
    main,
    resolve_workspace_and_files,
)
from plainify.findings import Finding


def _git(directory, *args):
    subprocess.run(
        [
            "git",
            "-c", "user.email=test@example.com",
            "-c", "user.name=Test",
            "-c", "commit.gpgsign=false",
            *args,
        ],
        cwd=directory,
        check=True,
        capture_output=True,
    )


def _write(path, content):
    path.write_bytes(content.encode("utf-8"))


def _repo_with(tmp_path, name, content):
    _git(tmp_path, "init")
    _write(tmp_path / name, content)
    _git(tmp_path, "add", name)
    _git(tmp_path, "commit", "-m", "init")
    return tmp_path


def test_discover_files(tmp_path):
    _repo_with(tmp_path, "hello.txt", "hello\n")
    _write(tmp_path / "untracked.txt", "world\n")
    files = discover_files(str(tmp_path))
    assert sorted(os.path.basename(f) for f in files) == ["hello.txt", "untracked.txt"]
    assert all(os.path.isabs(f) for f in files)


def test_discover_files_outside_git_raises(tmp_path):
    with pytest.raises(RuntimeError, match="git ls-files"):
        discover_files(str(tmp_path))


def test_compile_excludes():
    patterns = compile_excludes([r"vendor", r"\.pb\.go$"])
    assert len(patterns) == 2


def test_compile_excludes_invalid():
    with pytest.raises(ValueError, match="invalid --exclude pattern"):
        compile_excludes(["[invalid"])


@pytest.mark.parametrize(
    "path, expected",
    [
        ("vendor/lib/foo.go", True),
        ("src/main.go", False),
        ("src/types.gen.go", True),
    ],
)
def test_is_excluded(path, expected):
    patterns = compile_excludes([r"vendor/", r"\.gen\.go$"])
    assert is_excluded(path, patterns) is expected


def test_resolve_workspace_and_files(tmp_path):
    file = tmp_path / "a.txt"
    _write(file, "x")
    workspace, files = resolve_workspace_and_files("", [str(tmp_path), str(file)])
    assert workspace == str(tmp_path)
    assert files == [str(file)]


def test_resolve_workspace_flag_wins(tmp_path):
    workspace, files = resolve_workspace_and_files("elsewhere", [str(tmp_path)])
    assert workspace == "elsewhere"
    assert files == []


def test_resolve_defaults_to_cwd(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    workspace, files = resolve_workspace_and_files("", ["missing.txt"])
    assert workspace == os.getcwd()
    assert files == ["missing.txt"]


def test_format_finding():
    assert format_finding(Finding("a.txt", 3, 5, "msg")) == "  a.txt:3:5 msg"
    assert format_finding(Finding("a.txt", 1, 0, "msg")) == "  a.txt:1 msg"
    assert format_finding(Finding("a.txt", 0, 0, "msg")) == "  a.txt msg"


def test_cli_nofix(tmp_path, capsys):
    _repo_with(tmp_path, "bad.txt", "line1\r\nline2\r\n")
    code = main(["--nofix", "-q", str(tmp_path)])
    result = json.loads(capsys.readouterr().out)
    assert code == 1
    assert result["status"] == "fail"
    assert result["findings_count"] == 1
    assert result["findings"] == [
        {"file": "bad.txt", "line": 1, "message": "CRLF line endings - convert to LF"}
    ]
    assert (tmp_path / "bad.txt").read_bytes() == b"line1\r\nline2\r\n"


def test_cli_fix(tmp_path, capsys):
    _repo_with(tmp_path, "doc.txt", "He said \u201Chello\u201D.\n")
    code = main(["-q", str(tmp_path)])
    result = json.loads(capsys.readouterr().out)
    assert code == 0
    assert result == {"status": "pass", "findings_count": 0, "findings": []}
    assert (tmp_path / "doc.txt").read_bytes() == b'He said "hello".\n'


def test_cli_explicit_files_and_progress(tmp_path, capsys):
    target = tmp_path / "notes.txt"
    _write(target, "caf\u00e9\n")
    code = main(["-nofix", str(tmp_path), str(target)])
    captured = capsys.readouterr()
    assert code == 1
    assert json.loads(captured.out)["findings"] == [
        {"file": "notes.txt", "line": 1, "col": 4, "message": "non-ASCII character U+00E9"}
    ]
    assert "[plainify] checking 1 file(s)..." in captured.err
    assert "  notes.txt:1:4 non-ASCII character U+00E9" in captured.err


def test_cli_exclude(tmp_path, capsys):
    target = tmp_path / "skip.txt"
    _write(target, "line\r\n")
    code = main(["--nofix", "-q", "--exclude", r"^skip", str(tmp_path), str(target)])
    assert code == 0
    assert json.loads(capsys.readouterr().out)["status"] == "pass"


def test_cli_invalid_exclude(tmp_path, capsys):
    target = tmp_path / "a.txt"
    _write(target, "ok\n")
    code = main(["--exclude", "[invalid", str(tmp_path), str(target)])
    assert code == 2
    assert "invalid --exclude pattern" in capsys.readouterr().err


def test_cli_missing_file_warns(tmp_path, capsys):
    code = main(["-q", str(tmp_path), str(tmp_path / "gone.txt")])
    captured = capsys.readouterr()
    assert code == 0
    assert "[plainify] warning: open gone.txt" in captured.err


def test_cli_version(capsys):
    assert main(["--version"]) == 0
    assert capsys.readouterr().out == "dev\n"