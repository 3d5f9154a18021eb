import httpx
import pytest
from typer.testing import CliRunner

import cli.main as cli_main
from adapters.http_client import build_async_client
from cli import __version__
from conftest import MIT_DETAILS_URL, MIT_TEXT, NOTEXT_DETAILS_URL, StubRegistry
from core.config import SPDX_LICENSES_URL

runner = CliRunner()


class FakePicker:
    def __init__(self, choose_id=None):
        self.choose_id = choose_id
        self.calls = 0

    async def __call__(self, summaries):
        self.calls += 1
        for summary in summaries:
            if summary.license_id == self.choose_id:
                return summary
        return None


@pytest.fixture
def wired(monkeypatch, stub_registry):
    """Route the CLI through the stub registry and a scripted picker."""

    monkeypatch.setenv("SPDX_LICENSE_CACHE_ENABLED", "false")
    picker = FakePicker()

    def fake_client(settings):
        return httpx.AsyncClient(transport=stub_registry.transport())

    monkeypatch.setattr(cli_main, "build_async_client", fake_client)
    monkeypatch.setattr(cli_main, "FuzzyPicker", lambda **kwargs: picker)
    return stub_registry, picker


def test_lookup_by_identifier(wired):
    stub, picker = wired

    result = runner.invoke(cli_main.app, ["MIT"])

    assert result.exit_code == 0, result.output
    assert "Fetching license details..." in result.output
    assert "License Preview:" in result.output
    assert "SPDX ID: MIT" in result.output
    assert "License Text Preview (first 200 chars)" in result.output
    assert "sublicense" not in result.output
    assert picker.calls == 0
    assert stub.requested == [SPDX_LICENSES_URL, MIT_DETAILS_URL]


def test_full_text_flag(wired):
    result = runner.invoke(cli_main.app, ["MIT", "--full-text"])

    assert result.exit_code == 0, result.output
    assert "Full License Text" in result.output
    assert "sublicense" in result.output
    assert MIT_TEXT in result.output


def test_unknown_identifier_exits_nonzero_without_detail_fetch(wired):
    stub, _ = wired

    result = runner.invoke(cli_main.app, ["NOPE"])

    assert result.exit_code == 1
    assert "License not found for SPDX identifier: NOPE" in result.output
    assert stub.requested == [SPDX_LICENSES_URL]


def test_output_file_written(wired, tmp_path):
    out = tmp_path / "LICENSE"

    result = runner.invoke(cli_main.app, ["MIT", "-o", str(out)])

    assert result.exit_code == 0, result.output
    assert out.read_bytes() == MIT_TEXT.encode("utf-8")
    assert "License text written to:" in result.output


def test_output_without_text_is_not_fatal(wired, tmp_path):
    stub, _ = wired
    out = tmp_path / "LICENSE"

    result = runner.invoke(cli_main.app, ["NoText", "--output", str(out)])

    assert result.exit_code == 0, result.output
    assert "License text not available for writing to file" in result.output
    assert not out.exists()
    assert stub.requested[-1] == NOTEXT_DETAILS_URL


def test_output_write_failure(wired, tmp_path):
    out = tmp_path / "no-such-dir" / "LICENSE"

    result = runner.invoke(cli_main.app, ["MIT", "-o", str(out)])

    assert result.exit_code == 1
    assert "Failed to write to file" in result.output


def test_interactive_selection(wired):
    _, picker = wired
    picker.choose_id = "MIT"

    result = runner.invoke(cli_main.app, [])

    assert result.exit_code == 0, result.output
    assert picker.calls == 1
    assert "SPDX ID: MIT" in result.output


def test_interactive_cancel(wired):
    stub, picker = wired

    result = runner.invoke(cli_main.app, [])

    assert result.exit_code == 1
    assert picker.calls == 1
    assert "No license selected." in result.output
    assert stub.requested == [SPDX_LICENSES_URL]


def test_malformed_registry(wired):
    stub, _ = wired
    stub.routes[SPDX_LICENSES_URL] = {"licenseListVersion": "3.24"}

    result = runner.invoke(cli_main.app, ["MIT"])

    assert result.exit_code == 1
    assert "License data is missing or malformed" in result.output
    assert stub.requested == [SPDX_LICENSES_URL]


def test_registry_unavailable(wired):
    stub, _ = wired
    stub.routes[SPDX_LICENSES_URL] = httpx.Response(500, text="boom")

    result = runner.invoke(cli_main.app, ["MIT"])

    assert result.exit_code == 1
    assert "HTTP request failed" in result.output


def test_list_flag(wired):
    stub, picker = wired

    result = runner.invoke(cli_main.app, ["--list"])

    assert result.exit_code == 0, result.output
    assert "Apache-2.0" in result.output
    assert "NoText" in result.output
    assert picker.calls == 0
    assert stub.requested == [SPDX_LICENSES_URL]


def test_version_flag():
    result = runner.invoke(cli_main.app, ["--version"])

    assert result.exit_code == 0
    assert __version__ in result.output


def test_no_cache_flag_disables_cache(monkeypatch, stub_registry):
    seen = []

    def fake_client(settings):
        seen.append(settings.cache_enabled)
        return httpx.AsyncClient(transport=stub_registry.transport())

    monkeypatch.setenv("SPDX_LICENSE_CACHE_ENABLED", "true")
    monkeypatch.setattr(cli_main, "build_async_client", fake_client)

    result = runner.invoke(cli_main.app, ["MIT", "--no-cache"])

    assert result.exit_code == 0, result.output
    assert seen == [False]


def test_invalid_setting_reports_config_error(wired):
    stub, _ = wired

    result = runner.invoke(cli_main.app, ["MIT"], env={"SPDX_LICENSE_HTTP_TIMEOUT_SECONDS": "-1"})

    assert result.exit_code == 1
    assert "Invalid configuration: http_timeout_seconds" in result.output
    assert stub.requested == []


def test_unusable_cache_dir_runs_without_cache(monkeypatch, stub_registry, tmp_path):
    blocker = tmp_path / "not-a-dir"
    blocker.write_text("x")
    monkeypatch.setenv("SPDX_LICENSE_CACHE_ENABLED", "true")
    monkeypatch.setenv("SPDX_LICENSE_CACHE_DIR", str(blocker / "cache"))
    monkeypatch.setattr(
        cli_main,
        "build_async_client",
        lambda settings: build_async_client(settings, transport=stub_registry.transport()),
    )

    result = runner.invoke(cli_main.app, ["MIT"])

    assert result.exit_code == 0, result.output
    assert "SPDX ID: MIT" in result.output
