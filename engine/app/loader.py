from __future__ import annotations
import importlib.util
import sys
from pathlib import Path
import yaml
from typing import Dict, Any


def games_dir() -> Path:
    return Path(__file__).resolve().parents[2] / "games"


def load_game_manifest(game_root: Path) -> Dict[str, Any]:
    manifest = game_root / "manifest.yaml"
    if not manifest.exists():
        raise FileNotFoundError(f"Missing manifest.yaml in {game_root}")
    with open(manifest, "r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def _ensure_game_package(game_root: Path) -> str:
    """
    Registers games/<id>/ as the package games.<id> so the game's main.py
    can use relative imports for its sibling modules.
    """
    name = f"games.{game_root.name.replace('-', '_')}"
    if name in sys.modules:
        return name
    init_py = game_root / "__init__.py"
    spec = importlib.util.spec_from_file_location(
        name, init_py, submodule_search_locations=[str(game_root)])
    assert spec and spec.loader
    package = importlib.util.module_from_spec(spec)
    sys.modules[name] = package
    if init_py.exists():
        spec.loader.exec_module(package)  # type: ignore[attr-defined]
    return name


def load_game_module(game_root: Path):
    """
    Loads games/<id>/main.py module and returns the module object.
    The file must define a get_game() -> Game factory.
    """
    main_py = game_root / "main.py"
    if not main_py.exists():
        raise FileNotFoundError(f"Missing main.py in {game_root}")
    package = _ensure_game_package(game_root)
    spec = importlib.util.spec_from_file_location(f"{package}.main", main_py)
    assert spec and spec.loader
    module = importlib.util.module_from_spec(spec)
    sys.modules[spec.name] = module
    spec.loader.exec_module(module)  # type: ignore[attr-defined]
    if not hasattr(module, "get_game"):
        raise AttributeError("Game module must define get_game()")
    return module
