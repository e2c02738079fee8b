from __future__ import annotations

import ast
from pathlib import Path

_SRC = Path(__file__).resolve().parents[1] / "src" / "leafsync"


def _collect_python_files(directory: Path) -> list[Path]:
    return sorted(path for path in directory.rglob("*.py") if path.is_file())


def _find_forbidden_imports(files: list[Path], forbidden_prefixes: tuple[str, ...]) -> list[str]:
    violations: list[str] = []
    for path in files:
        module = ast.parse(path.read_text(encoding="utf-8"))
        for node in ast.walk(module):
            if isinstance(node, ast.Import):
                for alias in node.names:
                    if alias.name.startswith(forbidden_prefixes):
                        violations.append(f"{path}: import {alias.name}")
            elif isinstance(node, ast.ImportFrom):
                if node.module is None:
                    continue
                if node.module.startswith(forbidden_prefixes):
                    violations.append(f"{path}: from {node.module} import ...")
    return violations


def test_planning_layers_do_not_import_rendering_or_cli() -> None:
    files = []
    for package in ("panels", "layout", "linking"):
        files.extend(_collect_python_files(_SRC / package))
    violations = _find_forbidden_imports(
        files, ("leafsync.renderers", "leafsync.bootstrap", "leafsync.view", "leafsync.cli", "jinja2", "markupsafe")
    )
    assert not violations, f"planning layers import output concerns: {violations}"


def test_view_does_not_import_cli_layer() -> None:
    violations = _find_forbidden_imports([_SRC / "view.py"], ("leafsync.cli", "rich"))
    assert not violations, f"view imports forbidden cli layer modules: {violations}"
