"""CLI parser and entrypoint behaviour tests."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from mvn2llm.cli import _build_parser, _effective_config, main
from mvn2llm.config import Mvn2LlmConfig


def test_cli_accepts_verbose_before_and_after_command() -> None:
    parser = _build_parser()

    before = parser.parse_args(["--verbose", "extract", "g:a:1"])
    after = parser.parse_args(["extract", "g:a:1", "-v"])

    assert before.verbose is True and after.verbose is True
    assert before.command == after.command == "extract"
    assert after.coordinate == "g:a:1"


def test_cli_extract_options() -> None:
    args = _build_parser().parse_args(
        [
            "-l",
            "FINE",
            "extract",
            "tech.kwik:kwik:0.9.1",
            "-r",
            "https://nexus.local/maven2",
            "--http-proxy",
            "http://proxy:3128",
            "--no-cache",
            "--format",
            "json",
            "--workers",
            "3",
        ]
    )

    assert args.log_level == "FINE"
    assert args.repo == "https://nexus.local/maven2"
    assert args.http_proxy == "http://proxy:3128"
    assert args.https_proxy is None
    assert args.no_cache is True
    assert args.format == "json"
    assert args.workers == 3


def test_effective_config_applies_overrides(tmp_path: Path) -> None:
    args = _build_parser().parse_args(
        [
            "extract",
            "g:a:1",
            "--https-proxy",
            "http://secure:3129",
            "--cache-dir",
            str(tmp_path),
            "--workers",
            "0",
            "--timeout",
            "5",
        ]
    )

    config = _effective_config(args, Mvn2LlmConfig())

    assert config.proxy.https == "http://secure:3129"
    assert config.proxy.http is None
    assert config.cache.dir == tmp_path
    assert config.cache.enabled is True
    assert config.workers == 1
    assert config.timeout == 5.0


def test_cli_requires_a_command() -> None:
    with pytest.raises(SystemExit):
        _build_parser().parse_args([])


def test_main_scan_prints_records(tmp_path: Path, jar_builder, capsys, monkeypatch) -> None:
    monkeypatch.chdir(tmp_path)
    jar = jar_builder.build({"com/example/Foo.java": "/** A foo. */\npublic class Foo {}\n"})

    main(["scan", str(jar)])

    out = capsys.readouterr().out
    assert out == "File: com.example.Foo\n/** A foo. */\npublic class Foo {}\n"


def test_main_scan_writes_json_file(tmp_path: Path, jar_builder, monkeypatch) -> None:
    monkeypatch.chdir(tmp_path)
    jar = jar_builder.build({"com/example/Foo.java": "/// A foo.\nint foo;\n"})
    output = tmp_path / "docs.jsonl"

    main(["scan", str(jar), "--format", "json", "-o", str(output)])

    payload = json.loads(output.read_text(encoding="utf-8"))
    assert payload == {"origin": "com.example.Foo", "documentation": "/// A foo.", "signature": "int foo;"}


def test_main_reports_failures_with_exit_status(tmp_path: Path, capsys, monkeypatch) -> None:
    monkeypatch.chdir(tmp_path)

    with pytest.raises(SystemExit) as excinfo:
        main(["scan", str(tmp_path / "missing.jar")])

    assert excinfo.value.code == 1
    assert "mvn2llm scan failed: Path not found" in capsys.readouterr().err


def test_main_rejects_bad_coordinate(tmp_path: Path, capsys, monkeypatch) -> None:
    monkeypatch.chdir(tmp_path)

    with pytest.raises(SystemExit) as excinfo:
        main(["extract", "not-a-coordinate", "--no-cache"])

    assert excinfo.value.code == 1
    err = capsys.readouterr().err
    assert "groupId:artifactId:version" in err
    assert err.endswith("Run with --verbose for more details.\n")


def test_main_rejects_unknown_log_level(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.chdir(tmp_path)

    with pytest.raises(SystemExit) as excinfo:
        main(["-l", "LOUD", "scan", "."])

    assert excinfo.value.code == 2
