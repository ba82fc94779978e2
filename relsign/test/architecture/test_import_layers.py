from __future__ import annotations

import pytest

from ._utils import iter_python_files, matches_prefix, package_root, parse_imports


@pytest.mark.parametrize(
    ("layer", "forbidden"),
    [
        ("core", "relsign.services"),
        ("core", "relsign.output"),
        ("core", "relsign.cli"),
        ("services", "relsign.cli"),
        ("services", "typer"),
    ],
)
def test_layer_does_not_import(layer: str, forbidden: str) -> None:
    root = package_root()
    offenders: list[str] = []

    for file_path in iter_python_files(root / layer):
        rel = file_path.relative_to(root)
        for item in parse_imports(file_path):
            if matches_prefix(item.module, forbidden):
                offenders.append(f"{rel}:{item.line}: forbidden import '{item.module}'")

    assert not offenders, f"{layer} -> {forbidden} violations:\n" + "\n".join(offenders)


def test_rich_only_used_by_output() -> None:
    root = package_root()
    offenders: list[str] = []

    for file_path in iter_python_files(root):
        rel = file_path.relative_to(root)
        if rel.parts[0] in ("output", "test"):
            continue
        for item in parse_imports(file_path):
            if matches_prefix(item.module, "rich"):
                offenders.append(f"{rel}:{item.line}")

    assert not offenders, "rich imported outside relsign.output:\n" + "\n".join(offenders)
