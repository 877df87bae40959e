from __future__ import annotations
from dataclasses import dataclass
import pygame
from typing import Any, Tuple
from engine.api.config import EngineConfig
from engine.audio.sfx import SoundEffects
from engine.storage.kv_store import KeyValueStore


@dataclass
class Context:
    screen: pygame.Surface
    clock: pygame.time.Clock
    cfg: EngineConfig
    sfx: SoundEffects
    store: KeyValueStore
    # engine internals exposed read-only for games if needed:
    resources: dict[str, Any]
    screen_size: Tuple[int, int]
