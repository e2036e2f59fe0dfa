"""Tests for settings loading and the doctor command."""

import pytest
from typer.testing import CliRunner

import cli.doctor as doctor
from cli.main import app
from core.config import AppSettings

runner = CliRunner()


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    for var in ("GITHUB_TOKEN", "GDE_GITHUB_TOKEN", "GDE_MAX_CONCURRENCY"):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.chdir(tmp_path)


class TestAppSettings:
    def test_defaults(self):
        settings = AppSettings(_env_file=None)
        assert settings.github_token is None
        assert settings.github_api_url == "https://api.github.com"
        assert settings.doc_extensions == (".md", ".mdx")
        assert settings.default_docs_path == "docs"
        assert settings.default_output_dir == "./output"

    @pytest.mark.parametrize("var", ["GITHUB_TOKEN", "GDE_GITHUB_TOKEN"])
    def test_token_from_env(self, monkeypatch, var):
        monkeypatch.setenv(var, "abc123")
        assert AppSettings(_env_file=None).github_token == "abc123"

    def test_prefixed_env_vars(self, monkeypatch):
        monkeypatch.setenv("GDE_MAX_CONCURRENCY", "3")
        assert AppSettings(_env_file=None).max_concurrency == 3

    def test_dotenv_in_working_directory(self, tmp_path):
        (tmp_path / ".env").write_text("GITHUB_TOKEN=from-dotenv\n", encoding="utf-8")
        assert AppSettings(_env_file=".env").github_token == "from-dotenv"


class TestDoctor:
    def test_reports_rate_limit(self, monkeypatch):
        async def fake_rate_limit(settings):
            return {"limit": 60, "remaining": 42, "reset": 1700000000}

        monkeypatch.setattr(doctor, "fetch_rate_limit", fake_rate_limit)

        result = runner.invoke(app, ["doctor", "run"])

        assert result.exit_code == 0, result.output
        assert "GDE Doctor" in result.output
        assert "42/60" in result.output

    def test_api_failure_suggests_token(self, monkeypatch):
        async def failing(settings):
            raise RuntimeError("boom")

        monkeypatch.setattr(doctor, "fetch_rate_limit", failing)

        result = runner.invoke(app, ["doctor", "run"])

        assert result.exit_code == 0, result.output
        assert "FAIL" in result.output
        assert "GITHUB_TOKEN" in result.output

    def test_output_dir_check(self, tmp_path):
        ok, detail = doctor._check_output_dir(tmp_path / "not-yet" / "output")
        assert ok
        assert detail.endswith("output")

    def test_invalid_settings_exit_with_1(self, monkeypatch):
        monkeypatch.setenv("GDE_MAX_CONCURRENCY", "0")

        result = runner.invoke(app, ["doctor", "run"])

        assert result.exit_code == 1
        assert "Invalid configuration" in result.output
