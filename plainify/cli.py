"""Command line: check or fix text files and report findings as JSON."""

from __future__ import annotations

import argparse
import json
import os
import re
import subprocess
import sys
from collections.abc import Iterable, Sequence

from plainify.findings import Config, Finding
from plainify.scanner import ScanError, scan_file

_VERSION = "dev"
_PREFIX = "[plainify]"


class _FatalError(Exception):
    """An error that ends the run with exit status 2."""


def resolve_workspace_and_files(workspace_flag: str, args: Iterable[str]) -> tuple[str, list[str]]:
    """Split arguments into the workspace directory and explicit file paths.

    The first directory argument becomes the workspace unless one was given;
    everything that is not a directory is a file.
    """
    workspace = workspace_flag
    files: list[str] = []
    for arg in args:
        if os.path.isdir(arg):
            if not workspace:
                workspace = arg
        else:
            files.append(arg)
    if not workspace:
        workspace = os.getcwd()
    return workspace, files


def discover_files(workspace: str) -> list[str]:
    """List tracked and untracked, non-ignored files in a git workspace."""
    try:
        result = subprocess.run(
            ["git", "ls-files", "--cached", "--others", "--exclude-standard"],
            cwd=workspace,
            capture_output=True,
            check=True,
        )
    except (OSError, subprocess.CalledProcessError) as exc:
        raise RuntimeError(f"git ls-files: {exc}") from exc

    output = result.stdout.decode("utf-8", "surrogateescape").rstrip("\n")
    files: list[str] = []
    seen: set[str] = set()
    for line in output.split("\n"):
        if not line or line in seen:
            continue
        seen.add(line)
        files.append(os.path.normpath(os.path.join(workspace, *line.split("/"))))
    return files


def compile_excludes(patterns: Iterable[str]) -> list[re.Pattern[str]]:
    """Compile exclude patterns, raising ValueError for an invalid one."""
    compiled: list[re.Pattern[str]] = []
    for pattern in patterns:
        try:
            compiled.append(re.compile(pattern))
        except re.error as exc:
            raise ValueError(f"invalid --exclude pattern {pattern!r}: {exc}") from exc
    return compiled


def is_excluded(rel_path: str, patterns: Iterable[re.Pattern[str]]) -> bool:
    """Return True if any pattern matches somewhere in ``rel_path``."""
    return any(pattern.search(rel_path) for pattern in patterns)


def format_finding(finding: Finding) -> str:
    """Render a finding as an indented ``file:line:col message`` line."""
    location = finding.file
    if finding.line > 0:
        location += f":{finding.line}"
        if finding.col > 0:
            location += f":{finding.col}"
    return f"  {location} {finding.message}"


def _relativize(workspace: str, path: str) -> str:
    try:
        return os.path.relpath(path, workspace)
    except ValueError:
        return path


def _to_slash(path: str) -> str:
    return path.replace(os.sep, "/")


def _encode_output(findings: Sequence[Finding]) -> str:
    payload = {
        "status": "fail" if findings else "pass",
        "findings_count": len(findings),
        "findings": [finding.to_dict() for finding in findings],
    }
    text = json.dumps(payload, ensure_ascii=False, separators=(",", ":"))
    # Escape HTML-sensitive characters as the established output format does.
    for raw, escaped in (("&", "\\u0026"), ("<", "\\u003c"), (">", "\\u003e")):
        text = text.replace(raw, escaped)
    return text


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="plainify",
        allow_abbrev=False,
        description=(
            "Detect and fix encoding issues, CRLF line endings, non-ASCII "
            "typographic characters and emoji in text files."
        ),
    )
    parser.add_argument(
        "-nofix", "--nofix", "-n", dest="nofix", action="store_true",
        help="report issues without modifying files",
    )
    parser.add_argument(
        "-workspace", "--workspace", dest="workspace", default="",
        help="repository root for git discovery and relative paths "
        "(default: first directory arg or cwd)",
    )
    parser.add_argument(
        "-allow-utf8-bom", "--allow-utf8-bom", dest="allow_utf8_bom", action="store_true",
        help="do not flag UTF-8 BOM",
    )
    parser.add_argument(
        "-q", "--q", dest="quiet", action="store_true",
        help="suppress human-readable progress output",
    )
    parser.add_argument(
        "-version", "--version", dest="version", action="store_true",
        help="print version and exit",
    )
    parser.add_argument(
        "-exclude", "--exclude", dest="exclude", action="append", default=[], metavar="regex",
        help="exclude files matching regex (repeatable)",
    )
    parser.add_argument("paths", nargs="*", help="files or a workspace directory")
    return parser


def _run(options: argparse.Namespace) -> int:
    workspace, files = resolve_workspace_and_files(options.workspace, options.paths)
    abs_workspace = os.path.abspath(workspace)

    if not files:
        try:
            files = discover_files(abs_workspace)
        except RuntimeError as exc:
            raise _FatalError(f"file discovery: {exc}") from exc

    try:
        excludes = compile_excludes(options.exclude)
    except ValueError as exc:
        raise _FatalError(str(exc)) from exc

    config = Config(fix=not options.nofix, allow_utf8_bom=options.allow_utf8_bom)

    if not options.quiet:
        print(f"{_PREFIX} checking {len(files)} file(s)...", file=sys.stderr)

    all_findings: list[Finding] = []
    for name in files:
        abs_path = name if os.path.isabs(name) else os.path.join(abs_workspace, name)
        rel_path = _to_slash(_relativize(abs_workspace, abs_path))
        if is_excluded(rel_path, excludes):
            continue
        try:
            all_findings.extend(scan_file(abs_path, rel_path, config))
        except ScanError as exc:
            print(f"{_PREFIX} warning: {exc}", file=sys.stderr)

    if not options.quiet:
        if all_findings:
            print(f"{_PREFIX} {len(all_findings)} finding(s)", file=sys.stderr)
            for finding in all_findings:
                print(format_finding(finding), file=sys.stderr)
        else:
            print(f"{_PREFIX} pass", file=sys.stderr)

    sys.stdout.write(_encode_output(all_findings) + "\n")
    sys.stdout.flush()
    return 1 if all_findings else 0


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command; return 0 when clean, 1 with findings, 2 on error."""
    options = _build_parser().parse_args(argv)
    if options.version:
        print(_VERSION)
        return 0
    try:
        return _run(options)
    except _FatalError as exc:
        print(f"{_PREFIX} error: {exc}", file=sys.stderr)
        return 2