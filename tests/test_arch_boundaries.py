from __future__ import annotations

import ast
import sys
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

# Orchestrator modules (CLI layer).
# The codec (core/*) and errors must NEVER import these.
ORCH_PREFIXES: tuple[str, ...] = (
    "bubblebabble.cli",
    "bubblebabble.__main__",
)

PACKAGE_ROOT = "bubblebabble"


@dataclass(frozen=True)
class ImportEdge:
    src: str
    dst: str
    file: Path
    lineno: int


def _src_dir() -> Path:
    repo_root = Path(__file__).resolve().parents[1]
    src_dir = repo_root / "src"
    if not src_dir.is_dir():
        raise AssertionError(f"Expected src/ directory at: {src_dir}")
    return src_dir


def _is_orch(mod: str) -> bool:
    return any(mod == p or mod.startswith(p + ".") for p in ORCH_PREFIXES)


def _module_name_from_path(src_dir: Path, py_file: Path) -> str | None:
    try:
        rel = py_file.relative_to(src_dir)
    except ValueError:
        return None

    parts = list(rel.parts)
    if not parts or parts[0] != PACKAGE_ROOT:
        return None

    if py_file.name == "__init__.py":
        parts = parts[:-1]
    else:
        parts[-1] = py_file.stem

    if not parts:
        return None
    return ".".join(parts)


def _iter_imports(src_dir: Path) -> Iterable[ImportEdge]:
    """Yield every absolute import (in-package or not) made by the package."""
    for py in src_dir.rglob("*.py"):
        mod = _module_name_from_path(src_dir, py)
        if not mod:
            continue

        tree = ast.parse(py.read_text(encoding="utf-8"), filename=str(py))

        for node in ast.walk(tree):
            if isinstance(node, ast.Import):
                for alias in node.names:
                    yield ImportEdge(
                        src=mod, dst=alias.name, file=py, lineno=getattr(node, "lineno", 0)
                    )
            elif isinstance(node, ast.ImportFrom):
                # the package only uses absolute imports
                if node.level or node.module is None:
                    raise AssertionError(f"{py}:{node.lineno}: relative import")
                yield ImportEdge(
                    src=mod, dst=node.module, file=py, lineno=getattr(node, "lineno", 0)
                )


def _fail(title: str, violations: list[ImportEdge], fix: str) -> None:
    lines = [title]
    for v in sorted(violations, key=lambda e: (str(e.file), e.lineno, e.src, e.dst)):
        lines.append(f"  {v.file}:{v.lineno}  {v.src}  ->  {v.dst}")
    lines.append("")
    lines.append(fix)
    raise AssertionError("\n".join(lines))


def test_core_does_not_import_cli() -> None:
    """
    Hard dependency direction:
      CLI        -> may depend on core/errors
      core/errors -> must NOT depend on CLI
    """
    violations = [
        e
        for e in _iter_imports(_src_dir())
        if e.src != e.dst and not _is_orch(e.src) and _is_orch(e.dst)
    ]
    if violations:
        _fail(
            "Forbidden imports detected (core -> CLI):",
            violations,
            "Fix: move CLI logic out of the codec, or invert the dependency.",
        )


def test_core_has_no_third_party_imports() -> None:
    allowed = set(sys.stdlib_module_names) | {PACKAGE_ROOT}
    violations = [
        e
        for e in _iter_imports(_src_dir())
        if e.dst.split(".")[0] not in allowed
    ]
    if violations:
        _fail(
            "Third-party imports detected in the package:",
            violations,
            "Fix: the codec runs on the standard library only; keep extras in tools/.",
        )
