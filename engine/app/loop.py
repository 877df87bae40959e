from __future__ import annotations
import logging
import time
import pygame

from engine.api.config import EngineConfig
from engine.api.frame_data import FrameData
from engine.app.context import Context
from engine.app.loader import games_dir, load_game_manifest, load_game_module
from engine.audio.sfx import SoundEffects
from engine.input.pointer_input import PointerInput
from engine.storage.kv_store import KeyValueStore

logger = logging.getLogger(__name__)


def run_game(
    game_id: str,
    screen_size: tuple[int, int],
    fps: int = 60,
    mirror: bool = False,
    muted: bool = False,
    volume: float = 0.8,
    data_dir=None,
):
    cfg = EngineConfig(
        screen_size=screen_size,
        fps=fps,
        mirror=mirror,
        muted=muted,
        volume=volume,
        data_dir=data_dir,
    )

    # load game before opening a window so a bad id fails fast
    game_root = games_dir() / game_id
    manifest = load_game_manifest(game_root)
    module = load_game_module(game_root)
    game = module.get_game()

    pygame.init()
    pygame.display.set_caption(manifest.get("name", game_id))
    screen = pygame.display.set_mode(screen_size)
    clock = pygame.time.Clock()

    sfx = SoundEffects(enabled=not muted, volume=volume)
    for name, rel_path in (manifest.get("sounds") or {}).items():
        sfx.load(name, game_root / rel_path)

    store = KeyValueStore(game_root.name, root=data_dir)
    input_layer = PointerInput(cfg)

    # Render target: draw to off-screen if mirroring, otherwise draw directly to screen
    render_surface = screen if not mirror else pygame.Surface(
        screen_size).convert()

    ctx = Context(
        screen=render_surface,
        clock=clock,
        cfg=cfg,
        sfx=sfx,
        store=store,
        resources={"game_root": game_root},
        screen_size=screen_size,
    )

    game.on_load(ctx, manifest)
    logger.info("loaded game %s (%dx%d @ %d fps)", game_id, *screen_size, fps)

    running = True
    try:
        while running:
            dt = clock.tick(fps)
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                    running = False
                input_layer.handle_pygame_event(event, screen_size)
                game.on_event(event)

            frame_data = FrameData(timestamp=time.time(),
                                   taps=input_layer.emit_taps())

            # ---- draw to render_surface ----
            render_surface.fill((12, 14, 18))
            game.on_update(dt, frame_data)
            game.on_draw(render_surface)

            # ---- present to window ----
            if mirror:
                flipped = pygame.transform.flip(render_surface, True, False)
                screen.blit(flipped, (0, 0))

            pygame.display.flip()

    finally:
        game.on_unload()
        sfx.close()
        pygame.quit()
        logger.info("game %s closed", game_id)
