"""Tests for core.config."""

from __future__ import annotations

import sys

import pytest
from pydantic import ValidationError

from core.config import AppSettings, get_user_config_dir, write_user_env_vars
from core.domain.catalog import ComponentLayout, DiscoveryStrategy


def test_defaults_point_at_theme_repository(settings):
    assert settings.raw_themes_url == (
        "https://raw.githubusercontent.com/honu-ai/honu-saas-themes/main/components"
    )
    assert settings.contents_api_url == "https://api.github.com/repos/honu-ai/honu-saas-themes/contents"
    assert settings.github_token is None
    assert settings.default_strategy is DiscoveryStrategy.FIXED_NAME
    assert settings.default_layout is ComponentLayout.NESTED


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("HONU_SAAS_GITHUB_REF", "next")
    monkeypatch.setenv("HONU_SAAS_DEFAULT_STRATEGY", "listing")
    monkeypatch.setenv("HONU_SAAS_HTTP_TIMEOUT_SECONDS", "5")

    settings = AppSettings(_env_file=None)

    assert settings.github_ref == "next"
    assert settings.default_strategy is DiscoveryStrategy.LISTING
    assert settings.http_timeout_seconds == 5.0
    assert settings.raw_themes_url.endswith("/honu-saas-themes/next/components")


def test_timeout_must_be_positive():
    with pytest.raises(ValidationError):
        AppSettings(_env_file=None, http_timeout_seconds=0)


def test_write_user_env_vars_merges(tmp_path):
    env_path = tmp_path / "cfg" / ".env"
    write_user_env_vars({"HONU_SAAS_GITHUB_REF": "dev"}, env_path=env_path)
    write_user_env_vars({"HONU_SAAS_GITHUB_TOKEN": "abc", "IGNORED": None}, env_path=env_path)

    lines = env_path.read_text(encoding="utf-8").splitlines()
    assert lines[0].startswith("#")
    assert lines[1:] == ["HONU_SAAS_GITHUB_REF=dev", "HONU_SAAS_GITHUB_TOKEN=abc"]


@pytest.mark.skipif(not sys.platform.startswith("linux"), reason="XDG layout is linux-only")
def test_user_config_dir_honours_xdg(monkeypatch, tmp_path):
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))
    assert get_user_config_dir() == tmp_path / "honu-saas-cli"
