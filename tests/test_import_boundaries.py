from __future__ import annotations

import importlib.util
from pathlib import Path
from types import ModuleType

ROOT = Path(__file__).resolve().parents[1]


def _load_checker_module() -> ModuleType:
    module_path = ROOT / "tools" / "check_imports.py"
    spec = importlib.util.spec_from_file_location("check_imports_tool", module_path)
    assert spec is not None
    loader = spec.loader
    assert loader is not None
    module = importlib.util.module_from_spec(spec)
    loader.exec_module(module)
    return module


def _write(path: Path, content: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")


def test_check_file_allows_core_importing_domain(tmp_path: Path) -> None:
    checker = _load_checker_module()
    source_root = tmp_path / "src" / "mystery_forge"
    core_file = source_root / "core" / "cast.py"
    _write(core_file, "from mystery_forge.domain.models import CharacterProfile\n")
    assert checker.check_file(core_file, source_root) == []


def test_check_file_rejects_core_importing_api(tmp_path: Path) -> None:
    checker = _load_checker_module()
    source_root = tmp_path / "src" / "mystery_forge"
    core_file = source_root / "core" / "cast.py"
    _write(core_file, "from mystery_forge.api import app\n")
    violations = checker.check_file(core_file, source_root)
    assert len(violations) == 1
    assert "core must not import mystery_forge.api" in violations[0]


def test_check_file_resolves_relative_imports(tmp_path: Path) -> None:
    checker = _load_checker_module()
    source_root = tmp_path / "src" / "mystery_forge"
    diagram_file = source_root / "diagrams" / "flowchart.py"
    _write(diagram_file, "from ..application import story_diagrams\nfrom .common import INDENT\n")
    violations = checker.check_file(diagram_file, source_root)
    assert len(violations) == 1
    assert "diagrams must not import mystery_forge.application" in violations[0]


def test_check_file_rejects_domain_importing_package_layer(tmp_path: Path) -> None:
    checker = _load_checker_module()
    source_root = tmp_path / "src" / "mystery_forge"
    domain_file = source_root / "domain" / "models.py"
    _write(domain_file, "from mystery_forge import core\n")
    violations = checker.check_file(domain_file, source_root)
    assert violations == [f"{domain_file}: domain must not import mystery_forge.core"]


def test_project_source_tree_respects_boundaries() -> None:
    checker = _load_checker_module()
    assert checker.check_import_boundaries() == []
