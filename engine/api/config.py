from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Tuple


@dataclass
class EngineConfig:
    screen_size: Tuple[int, int]
    fps: int = 60
    mirror: bool = False
    muted: bool = False
    volume: float = 0.8
    # where games persist their key-value data; None -> runtime/data in the repo
    data_dir: Optional[Path] = None
