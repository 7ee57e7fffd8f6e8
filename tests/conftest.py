# ruff: noqa: E402

import builtins
import sys
from pathlib import Path

import pytest
from _pytest.doctest import DoctestModule

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

import seedling.io as io
import seedling.log as seedling_log

DOCTEST_MODULES = {
    ROOT / "src" / "seedling" / "__init__.py",
    ROOT / "src" / "seedling" / "conflicts.py",
    ROOT / "src" / "seedling" / "models.py",
    ROOT / "src" / "seedling" / "naming.py",
    ROOT / "src" / "seedling" / "templates.py",
    ROOT / "src" / "seedling" / "services" / "errors.py",
}


@pytest.fixture(autouse=True)
def _default_io_patches(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(io, "_use_questionary", lambda: False)
    monkeypatch.delenv("SEEDLING_TEMPLATES_DIR", raising=False)
    monkeypatch.setenv("NO_COLOR", "1")
    seedling_log.set_level("info")

    def fail_input(prompt: str = "") -> str:
        raise AssertionError("prompted unexpectedly")

    monkeypatch.setattr(builtins, "input", fail_input)


def pytest_collect_file(
    parent: pytest.Collector, file_path: Path
) -> DoctestModule | None:
    path = file_path if isinstance(file_path, Path) else Path(str(file_path))
    if path in DOCTEST_MODULES:
        return DoctestModule.from_parent(parent, path=path)
    return None
