"""Tests for build variant configuration."""

from __future__ import annotations

from pathlib import Path

from relsign.core.project import Project
from relsign.core.result import Err, Ok
from relsign.core.signing import SigningConfig
from relsign.output.console import ConsoleProtocol, MockConsole
from relsign.services.signing_errors import KeystoreMissing, SigningUnavailable
from relsign.services.variants import (
    BuildVariant,
    configure_variants,
    require_release_signing,
)

_CONFIG = SigningConfig(
    store_file="my.jks",
    store_password="pw1",
    key_alias="alias1",
    key_password="pw2",
)


def _project(tmp_path: Path) -> Project:
    (tmp_path / "android" / "app").mkdir(parents=True)
    (tmp_path / "pubspec.yaml").write_text("name: app\n", encoding="utf-8")
    return Project(root=tmp_path)


class TestConfigureVariants:
    def test_release_queries_resolver_once(self, tmp_path: Path) -> None:
        project = _project(tmp_path)
        calls: list[Path] = []

        def fake_resolve(path: Path, console: ConsoleProtocol) -> SigningConfig | None:
            calls.append(path)
            return _CONFIG

        variants = configure_variants(project, MockConsole(), resolve=fake_resolve)

        assert calls == [project.key_properties_path]
        assert variants.release.signing == _CONFIG
        assert variants.release.debuggable is False
        assert variants.release.signing_source == project.key_properties_path

    def test_debug_uses_debug_identity(self, tmp_path: Path) -> None:
        variants = configure_variants(
            _project(tmp_path), MockConsole(), resolve=lambda path, console: None
        )

        assert variants.debug.debuggable is True
        assert variants.debug.uses_debug_identity is True
        assert variants.debug.signing is None
        assert variants.debug.is_signable

    def test_missing_properties_leaves_release_unsigned(self, tmp_path: Path) -> None:
        console = MockConsole()

        variants = configure_variants(_project(tmp_path), console)

        assert variants.release.signing is None
        assert not variants.release.is_signable
        assert console.has_warning()

    def test_iteration_order(self, tmp_path: Path) -> None:
        variants = configure_variants(
            _project(tmp_path), MockConsole(), resolve=lambda path, console: None
        )
        assert [v.name for v in variants] == ["debug", "release"]


class TestRequireReleaseSigning:
    def test_no_config(self, tmp_path: Path) -> None:
        variant = BuildVariant(
            name="release", debuggable=False, signing_source=tmp_path / "key.properties"
        )

        result = require_release_signing(variant, tmp_path)

        assert result == Err(
            SigningUnavailable(variant="release", properties_path=tmp_path / "key.properties")
        )

    def test_keystore_missing(self, tmp_path: Path) -> None:
        variant = BuildVariant(name="release", debuggable=False, signing=_CONFIG)

        result = require_release_signing(variant, tmp_path)

        assert result == Err(KeystoreMissing(path=(tmp_path / "my.jks").resolve()))

    def test_ready(self, tmp_path: Path) -> None:
        (tmp_path / "my.jks").write_bytes(b"\xfe\xed\xfe\xed")
        variant = BuildVariant(name="release", debuggable=False, signing=_CONFIG)

        assert require_release_signing(variant, tmp_path) == Ok(_CONFIG)
