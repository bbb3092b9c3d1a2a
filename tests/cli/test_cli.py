from __future__ import annotations

import pytest

from jobradar import cli
from jobradar.errors import JobRadarError


def test_cli_help(capsys: pytest.CaptureFixture[str]) -> None:
    cli.main([])
    captured = capsys.readouterr()
    assert "jobradar command-line interface" in captured.out


def test_cli_version(capsys: pytest.CaptureFixture[str], monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(cli, "__version__", "0.2.0")
    with pytest.raises(SystemExit) as excinfo:
        cli.main(["--version"])
    assert excinfo.value.code == 0
    captured = capsys.readouterr()
    assert captured.out.strip() == "0.2.0"


def test_cli_dispatch_parse(monkeypatch: pytest.MonkeyPatch) -> None:
    called = {}

    def fake_run_parse(options):
        called["options"] = options
        return 0

    monkeypatch.setattr(cli.pipelines, "run_parse", fake_run_parse)
    cli.main(["parse", "doc.md", "--strict"])
    assert called["options"] == {"input_path": "doc.md", "strict": True}


def test_cli_dispatch_parse_defaults_to_stdin(monkeypatch: pytest.MonkeyPatch) -> None:
    called = {}

    def fake_run_parse(options):
        called["options"] = options
        return 0

    monkeypatch.setattr(cli.pipelines, "run_parse", fake_run_parse)
    cli.main(["parse", "--verbose"])
    assert called["options"]["input_path"] == "-"
    assert called["options"]["verbose"] is True
    assert called["options"]["strict"] is False


def test_cli_dispatch_batch(monkeypatch: pytest.MonkeyPatch) -> None:
    called = {}

    def fake_run_batch(options):
        called["options"] = options
        return 0

    monkeypatch.setattr(cli.pipelines, "run_batch", fake_run_batch)
    cli.main(["batch", "jobs.json", "--config-path", "/tmp/config.toml"])
    assert called["options"] == {
        "input_path": "jobs.json",
        "config_path": "/tmp/config.toml",
    }


def test_cli_dispatch_import_list(monkeypatch: pytest.MonkeyPatch) -> None:
    called = {}

    def fake_run_import_list(options):
        called["options"] = options
        return 0

    monkeypatch.setattr(cli.pipelines, "run_import_list", fake_run_import_list)
    cli.main(
        [
            "import-list",
            "https://jobs.example/list",
            "--container-selector",
            "ul.jobs",
            "--source-language",
            "de",
            "--use-cache",
        ]
    )
    assert called["options"] == {
        "url": "https://jobs.example/list",
        "container_selector": "ul.jobs",
        "source_language": "de",
        "use_cache": True,
    }


def test_cli_dispatch_import_job(monkeypatch: pytest.MonkeyPatch) -> None:
    called = {}

    def fake_run_import_job(options):
        called["options"] = options
        return 0

    monkeypatch.setattr(cli.pipelines, "run_import_job", fake_run_import_job)
    cli.main(["import-job", "https://jobs.example/1", "--template-dir", "/tmp/tpl"])
    assert called["options"] == {
        "url": "https://jobs.example/1",
        "template_dir": "/tmp/tpl",
    }


def test_cli_dispatch_config_show(monkeypatch: pytest.MonkeyPatch) -> None:
    called = {}

    def fake_run_config_show(options):
        called["options"] = options
        return 0

    monkeypatch.setattr(cli.pipelines, "run_config_show", fake_run_config_show)
    cli.main(["config", "show"])
    assert called["options"] == {}


def test_cli_dispatch_config_default_show(monkeypatch: pytest.MonkeyPatch) -> None:
    called = {}

    def fake_run_config_show(options):
        called["options"] = options
        return 0

    monkeypatch.setattr(cli.pipelines, "run_config_show", fake_run_config_show)
    cli.main(["config"])
    assert called["options"] == {}


def test_cli_reports_errors_with_hint(
    capsys: pytest.CaptureFixture[str], monkeypatch: pytest.MonkeyPatch
) -> None:
    def fake_run_batch(options):
        raise JobRadarError("No valid job list found.", hint="Wrap the list in items.")

    monkeypatch.setattr(cli.pipelines, "run_batch", fake_run_batch)
    with pytest.raises(SystemExit) as excinfo:
        cli.main(["batch", "jobs.json"])
    assert excinfo.value.code == 1
    captured = capsys.readouterr()
    assert "jobradar: error: No valid job list found." in captured.err
    assert "jobradar: hint: Wrap the list in items." in captured.err


def test_cli_propagates_nonzero_exit_code(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(cli.pipelines, "run_parse", lambda options: 1)
    with pytest.raises(SystemExit) as excinfo:
        cli.main(["parse", "doc.md", "--strict"])
    assert excinfo.value.code == 1


def test_cli_parse_end_to_end(tmp_path, capsys: pytest.CaptureFixture[str]) -> None:
    source = tmp_path / "doc.md"
    source.write_text('---\ntitle: Koch\nslides: [{"page": 1}]\n---\n', encoding="utf-8")

    cli.main(["parse", str(source), "--config-path", str(tmp_path / "config.toml")])

    captured = capsys.readouterr()
    assert '"title": "Koch"' in captured.out
    assert '"page": 1' in captured.out
