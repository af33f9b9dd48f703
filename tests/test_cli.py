# File: tests/test_cli.py
"""Тесты для CLI (`spiderseek.cli`) с использованием click.testing.CliRunner.
Проверяют команды `inject`, `config`, `--version`, а также обработку ошибок.
"""
import json

import pytest
from click.testing import CliRunner

from conftest import PAGE
from spiderseek.cli import cli


@pytest.fixture(autouse=True)
def isolated_env(tmp_path, monkeypatch):
    """Чистое окружение: без SPIDERSEEK_* и без spiderseek.yaml в cwd."""
    monkeypatch.delenv("SPIDERSEEK_SITE_ID", raising=False)
    monkeypatch.delenv("SPIDERSEEK_CONFIG", raising=False)
    workdir = tmp_path / "work"
    workdir.mkdir()
    monkeypatch.chdir(workdir)
    return workdir


def test_version_option():
    runner = CliRunner()
    result = runner.invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert "spiderseek" in result.output


def test_inject_with_options(site_dir):
    runner = CliRunner()
    result = runner.invoke(cli, ["inject", str(site_dir), "--site-id", "ABC", "--exclude", "/admin"])
    assert result.exit_code == 0, result.output
    assert "Injected <script> into 5 page(s). Excluded: /admin" in result.output
    assert (site_dir / "admin" / "index.html").read_text(encoding="utf-8") == PAGE
    assert "?id=ABC" in (site_dir / "index.html").read_text(encoding="utf-8")


def test_inject_exclude_regex(site_dir):
    runner = CliRunner()
    result = runner.invoke(
        cli, ["inject", str(site_dir), "--site-id", "ABC", "--exclude-regex", "^/blog/"]
    )
    assert result.exit_code == 0, result.output
    assert "Excluded: /^/blog//" in result.output
    assert "spiderseek-sdk" not in (site_dir / "blog" / "post" / "index.html").read_text(encoding="utf-8")


def test_inject_site_id_from_env(site_dir, monkeypatch):
    monkeypatch.setenv("SPIDERSEEK_SITE_ID", "ENV-ID")
    runner = CliRunner()
    result = runner.invoke(cli, ["inject", str(site_dir)])
    assert result.exit_code == 0, result.output
    assert "?id=ENV-ID" in (site_dir / "sitemap.html").read_text(encoding="utf-8")


def test_inject_config_file_merged_with_cli(site_dir, tmp_path):
    cfg_file = tmp_path / "spiderseek.yaml"
    cfg_file.write_text(
        "siteId: FROM-FILE\ntagId: file-tag\nexclude:\n  - /admin\n", encoding="utf-8"
    )
    runner = CliRunner()
    result = runner.invoke(
        cli, ["--config", str(cfg_file), "inject", str(site_dir), "--site-id", "CLI", "--exclude", "/about"]
    )
    assert result.exit_code == 0, result.output
    assert "Excluded: /admin, /about" in result.output
    home = (site_dir / "index.html").read_text(encoding="utf-8")
    assert 'id="file-tag"' in home
    assert "?id=CLI" in home


def test_inject_reads_default_config(site_dir, isolated_env):
    (isolated_env / "spiderseek.yaml").write_text("site_id: DEFAULT\n", encoding="utf-8")
    runner = CliRunner()
    result = runner.invoke(cli, ["inject", str(site_dir)])
    assert result.exit_code == 0, result.output
    assert "?id=DEFAULT" in (site_dir / "index.html").read_text(encoding="utf-8")


def test_inject_missing_site_id(site_dir):
    runner = CliRunner()
    result = runner.invoke(cli, ["inject", str(site_dir)])
    assert result.exit_code == 1
    assert "Ошибка конфигурации" in result.output
    assert "spiderseek-sdk" not in (site_dir / "index.html").read_text(encoding="utf-8")


def test_inject_missing_root(tmp_path):
    runner = CliRunner()
    result = runner.invoke(cli, ["inject", str(tmp_path / "nope"), "--site-id", "X"])
    assert result.exit_code == 1
    assert "Каталог сборки не найден" in result.output


def test_inject_bad_config_file(site_dir, tmp_path):
    cfg_file = tmp_path / "bad.yaml"
    cfg_file.write_text("not: a: mapping", encoding="utf-8")
    runner = CliRunner()
    result = runner.invoke(cli, ["--config", str(cfg_file), "inject", str(site_dir)])
    assert result.exit_code == 1
    assert "Ошибка загрузки конфигурации" in result.output


def test_inject_writes_reports(site_dir, tmp_path):
    json_path = tmp_path / "out" / "inject.json"
    html_path = tmp_path / "out" / "inject.html"
    runner = CliRunner()
    result = runner.invoke(
        cli,
        ["inject", str(site_dir), "--site-id", "X", "--json", str(json_path), "--html", str(html_path), "--pretty"],
    )
    assert result.exit_code == 0, result.output
    assert f"JSON report: {json_path}" in result.output
    assert f"HTML report: {html_path}" in result.output
    assert json.loads(json_path.read_text(encoding="utf-8"))["modified"] == 6
    assert "spiderseek injection report" in html_path.read_text(encoding="utf-8")


def test_inject_failed_file_keeps_exit_code(write_page, tmp_path):
    write_page("index.html").write_bytes(b"<head>\xff</head>")
    runner = CliRunner()
    result = runner.invoke(cli, ["inject", str(tmp_path / "site"), "--site-id", "X"])
    assert result.exit_code == 0
    assert "Failed: 1 file(s)." in result.output


def test_show_config(tmp_path):
    cfg_file = tmp_path / "config.json"
    cfg_file.write_text(json.dumps({"siteId": "ABC", "exclude": ["/admin"]}), encoding="utf-8")
    runner = CliRunner()
    result = runner.invoke(
        cli, ["--config", str(cfg_file), "config", "--exclude-regex", "^/preview"]
    )
    assert result.exit_code == 0, result.output
    data = json.loads(result.output)
    assert data == {"site_id": "ABC", "exclude": ["/admin", "/^/preview/"], "tag_id": "spiderseek-sdk"}


def test_inject_accepts_file_url_root(site_dir):
    runner = CliRunner()
    result = runner.invoke(cli, ["inject", site_dir.as_uri(), "--site-id", "URL"])
    assert result.exit_code == 0, result.output
    assert "Injected <script> into 6 page(s)." in result.output
    assert "?id=URL" in (site_dir / "index.html").read_text(encoding="utf-8")
