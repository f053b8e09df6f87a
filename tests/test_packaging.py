from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]


def test_subpackages_are_shipped():
    tomllib = pytest.importorskip("tomllib")
    config = tomllib.loads((ROOT / "pyproject.toml").read_text(encoding="utf-8"))
    find = config["tool"]["setuptools"]["packages"]["find"]
    assert find["where"] == ["src"]
    # core/ and system/ have no __init__.py
    assert find["namespaces"] is True
    for sub in ("core", "system"):
        assert (ROOT / "src" / "raylog" / sub).is_dir()
