"""Tests for relsign.core.config module."""

from __future__ import annotations

from pathlib import Path

from relsign.core.config import (
    AndroidConfig,
    Config,
    SigningPolicyConfig,
    load_config,
)
from relsign.core.result import Err, Ok


class TestConfig:
    def test_defaults(self) -> None:
        config = Config()
        assert config.signing == SigningPolicyConfig(strict=False)
        assert config.android == AndroidConfig()

    def test_from_dict_empty(self) -> None:
        assert Config.from_dict({}) == Config()

    def test_from_dict_full(self) -> None:
        config = Config.from_dict(
            {
                "signing": {"strict": True},
                "android": {
                    "namespace": "com.app.viperwallet",
                    "application_id": "com.app.viperwallet.prod",
                },
            }
        )
        assert config.signing.strict is True
        assert config.android.namespace == "com.app.viperwallet"
        assert config.android.application_id == "com.app.viperwallet.prod"

    def test_application_id_defaults_to_namespace(self) -> None:
        config = Config.from_dict({"android": {"namespace": "com.example"}})
        assert config.android.application_id == "com.example"

    def test_wrong_types_use_defaults(self) -> None:
        config = Config.from_dict({"signing": {"strict": "yes"}, "android": "nope"})
        assert config == Config()


class TestLoadConfig:
    def test_load_valid(self, tmp_path: Path) -> None:
        path = tmp_path / "relsign.toml"
        path.write_text("[signing]\nstrict = true\n", encoding="utf-8")

        result = load_config(path)

        assert isinstance(result, Ok)
        assert result.value.signing.strict is True

    def test_missing_file(self, tmp_path: Path) -> None:
        result = load_config(tmp_path / "relsign.toml")

        assert isinstance(result, Err)
        assert "not found" in result.error.message

    def test_invalid_toml(self, tmp_path: Path) -> None:
        path = tmp_path / "relsign.toml"
        path.write_text("[signing\n", encoding="utf-8")

        result = load_config(path)

        assert isinstance(result, Err)
        assert "Invalid TOML" in result.error.message
        assert result.error.path == path

