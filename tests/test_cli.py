"""CLI parser and entrypoint tests."""

from __future__ import annotations

import pytest

from docmake import cli
from docmake.cli import _build_parser
from docmake.logging import configure_logging, get_logger
from docmake.process import ExternalProcessError


def test_cli_parses_clone_with_credentials() -> None:
    parser = _build_parser()
    args = parser.parse_args(
        ["clone", "https://github.com/acme/shop.git", "--hub-user", "alice", "--hub-pass", "s3cret"]
    )
    assert args.command == "clone"
    assert args.repo_url == "https://github.com/acme/shop.git"
    assert args.hub_user == "alice"
    assert args.hub_pass == "s3cret"
    assert args.verbose is False


def test_cli_accepts_verbose_after_command() -> None:
    parser = _build_parser()
    args = parser.parse_args(["clone", "https://example.com/repo", "--verbose"])
    assert args.verbose is True
    assert args.hub_user is None


def test_cli_requires_repository_url() -> None:
    parser = _build_parser()
    with pytest.raises(SystemExit):
        parser.parse_args(["clone"])


def test_cli_reports_failed_stage(monkeypatch, capsys) -> None:
    class FailingPipeline:
        def run(self, repo_url, *, username=None, password=None):
            raise ExternalProcessError("push", ["docker", "push", "alice/shop:latest"], returncode=1)

    monkeypatch.setattr(cli, "Pipeline", FailingPipeline)

    with pytest.raises(SystemExit) as excinfo:
        cli.main(["clone", "https://github.com/acme/shop.git"])

    assert excinfo.value.code == 1
    err = capsys.readouterr().err
    assert "docmake clone failed" in err
    assert "push failed" in err


def test_cli_accepts_log_file_before_or_after_command(tmp_path) -> None:
    parser = _build_parser()
    target = tmp_path / "docmake.log"

    before = parser.parse_args(["--log-file", str(target), "clone", "https://example.com/repo"])
    after = parser.parse_args(["clone", "https://example.com/repo", "--log-file", str(target)])
    neither = parser.parse_args(["clone", "https://example.com/repo"])

    assert before.log_file == target
    assert after.log_file == target
    assert neither.log_file is None


def test_cli_writes_log_file(monkeypatch, tmp_path, capsys) -> None:
    class FailingPipeline:
        def run(self, repo_url, *, username=None, password=None):
            cli_logger.info("cloning %s", repo_url)
            raise ExternalProcessError("clone", ["git", "clone", repo_url], returncode=128)

    cli_logger = get_logger("pipeline")
    monkeypatch.setattr(cli, "Pipeline", FailingPipeline)
    log_file = tmp_path / "logs" / "docmake.log"

    with pytest.raises(SystemExit):
        cli.main(["clone", "https://github.com/acme/shop.git", "--log-file", str(log_file)])
    configure_logging()

    assert "docmake.pipeline: cloning https://github.com/acme/shop.git" in log_file.read_text(encoding="utf-8")
