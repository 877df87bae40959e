from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

logger = logging.getLogger(__name__)


def default_data_dir() -> Path:
    return Path(__file__).resolve().parents[2] / "runtime" / "data"


class KeyValueStore:
    """
    Tiny persistent key-value file (YAML mapping), one per game.

    Read and write failures are never fatal: reads fall back to the caller's
    default, writes log a warning and leave the previous file in place.
    """

    def __init__(self, name: str, root: Optional[Path] = None):
        root = Path(root) if root is not None else default_data_dir()
        self.path = root / f"{name}.yaml"

    def _read(self) -> Dict[str, Any]:
        if not self.path.exists():
            return {}
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as exc:
            logger.warning("could not read %s: %s", self.path, exc)
            return {}
        if not isinstance(data, dict):
            logger.warning("ignoring %s: expected a mapping, got %s",
                           self.path, type(data).__name__)
            return {}
        return data

    def get_int(self, key: str, default: int = 0) -> int:
        value = self._read().get(key, default)
        try:
            return int(value)
        except (TypeError, ValueError):
            logger.warning("value for %r in %s is not an integer: %r",
                           key, self.path, value)
            return default

    def set_int(self, key: str, value: int) -> bool:
        data = self._read()
        data[key] = int(value)
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            tmp = self.path.with_suffix(".tmp")
            with open(tmp, "w", encoding="utf-8") as f:
                yaml.safe_dump(data, f, default_flow_style=False)
            tmp.replace(self.path)
        except OSError as exc:
            logger.warning("could not write %s: %s", self.path, exc)
            return False
        return True
