"""Validate layer import boundaries for mystery_forge."""

from __future__ import annotations

import ast
from pathlib import Path

PACKAGE = "mystery_forge"
PROJECT_ROOT = Path(__file__).resolve().parents[1]
DEFAULT_SOURCE_ROOT = PROJECT_ROOT / "src" / PACKAGE
KNOWN_LAYERS = {
    "adapters",
    "api",
    "application",
    "cli",
    "core",
    "data",
    "diagrams",
    "domain",
}
_OUTER_LAYERS = {"adapters", "api", "application", "cli"}
RULES: dict[str, set[str]] = {
    "core": _OUTER_LAYERS | {"data", "diagrams"},
    "diagrams": _OUTER_LAYERS | {"data", "domain"},
    "domain": KNOWN_LAYERS - {"domain"},
    "data": _OUTER_LAYERS | {"core", "diagrams"},
}


def _layer_for_path(path: Path, source_root: Path) -> str | None:
    try:
        relative = path.relative_to(source_root)
    except ValueError:
        return None
    if len(relative.parts) < 2:
        return None
    return relative.parts[0]


def _layer_from_module(module_name: str) -> str | None:
    parts = module_name.split(".")
    if len(parts) < 2 or parts[0] != PACKAGE:
        return None
    return parts[1] if parts[1] in KNOWN_LAYERS else None


def _absolute_module(node: ast.ImportFrom, path: Path, source_root: Path) -> str:
    if node.level == 0:
        return node.module or ""
    package_parts = [PACKAGE, *path.relative_to(source_root).with_suffix("").parts][:-1]
    if node.level - 1 > len(package_parts):
        return ""
    base = package_parts[: len(package_parts) - (node.level - 1)]
    return ".".join([*base, *(node.module.split(".") if node.module else [])])


def _imported_layers(node: ast.Import | ast.ImportFrom, path: Path, source_root: Path) -> set[str]:
    if isinstance(node, ast.Import):
        names = [alias.name for alias in node.names]
    else:
        module = _absolute_module(node, path, source_root)
        if module == PACKAGE:
            names = [f"{PACKAGE}.{alias.name}" for alias in node.names]
        else:
            names = [module]
    layers = {_layer_from_module(name) for name in names}
    return {layer for layer in layers if layer is not None}


def check_file(path: Path, source_root: Path = DEFAULT_SOURCE_ROOT) -> list[str]:
    layer = _layer_for_path(path, source_root)
    banned_layers = RULES.get(layer or "", set())
    if not banned_layers:
        return []

    tree = ast.parse(path.read_text(encoding="utf-8"), filename=str(path))
    violations: list[str] = []
    for node in ast.walk(tree):
        if not isinstance(node, (ast.Import, ast.ImportFrom)):
            continue
        for imported_layer in sorted(_imported_layers(node, path, source_root)):
            if imported_layer in banned_layers:
                violations.append(f"{path}: {layer} must not import {PACKAGE}.{imported_layer}")
    return violations


def check_import_boundaries(source_root: Path = DEFAULT_SOURCE_ROOT) -> list[str]:
    violations: list[str] = []
    for path in sorted(source_root.rglob("*.py")):
        violations.extend(check_file(path, source_root))
    return violations


def main() -> None:
    violations = check_import_boundaries()
    if violations:
        raise SystemExit("\n".join(violations))
    print("import boundary checks passed")


if __name__ == "__main__":
    main()
