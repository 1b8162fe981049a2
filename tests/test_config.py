from __future__ import annotations

import pytest

from suffix_splitter.config import Settings
from suffix_splitter.yaml_config import get_defaults, get_output_strings


class TestSettings:
    def test_defaults_from_bundled_config(self, monkeypatch: pytest.MonkeyPatch) -> None:
        for name in ("RULES_PATH", "INCLUDE_PRIVATE_DOMAINS", "LOG_LEVEL", "OUTPUT_FORMAT"):
            monkeypatch.delenv(f"SUFFIX_SPLITTER_{name}", raising=False)
        s = Settings()
        assert s.rules_path is None
        assert s.include_private_domains is True
        assert s.log_level == "warning"
        assert s.output_format == "json"

    def test_env_overrides(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SUFFIX_SPLITTER_RULES_PATH", "/tmp/psl.dat")
        monkeypatch.setenv("SUFFIX_SPLITTER_INCLUDE_PRIVATE_DOMAINS", "false")
        s = Settings()
        assert s.rules_path == "/tmp/psl.dat"
        assert s.include_private_domains is False


class TestYamlConfig:
    def test_defaults_section(self) -> None:
        assert get_defaults()["log_level"] == "warning"

    def test_output_strings(self) -> None:
        strings = get_output_strings()
        assert "invalid_domain" in strings
        assert "{suffix}" in strings["text_template"]
