"""Docstring coverage tests for source code."""

from __future__ import annotations

import ast
from pathlib import Path

SRC = Path(__file__).resolve().parents[1] / "src"


def _missing_docstrings() -> list[tuple[Path, int, str]]:
    missing: list[tuple[Path, int, str]] = []
    for path in sorted(SRC.rglob("*.py")):
        module = ast.parse(path.read_text(encoding="utf-8"))
        if not ast.get_docstring(module):
            missing.append((path, 1, "<module>"))
        for node in ast.walk(module):
            if isinstance(node, (ast.FunctionDef, ast.AsyncFunctionDef, ast.ClassDef)):
                if not ast.get_docstring(node):
                    missing.append((path, node.lineno, node.name))
    return missing


def test_docstring_coverage() -> None:
    missing = _missing_docstrings()
    details = "\n".join(f"{path}:{lineno} {name}" for path, lineno, name in missing)
    assert not missing, f"Missing docstrings:\n{details}"
