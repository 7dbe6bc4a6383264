"""Core engine loop & orchestration.

Separates concerns:
- Engine: sets up the window and GL context, pumps events, runs the loop.
- Scene: holds game state & update/render logic.

One update followed by one render per frame; the scene receives the
millisecond clock so gameplay timing never reads the wall clock itself.
"""

from __future__ import annotations

import pygame

from config import WIDTH, HEIGHT, FPS, VSYNC, AUDIO_SAMPLE_RATE
from core.scene import Scene


# ---------------------------------------------------------------------------
# Engine
# ---------------------------------------------------------------------------
class Engine:
    def __init__(self, scene_factory=None, *, caption: str = "Railyard"):
        # Tones are synthesized as signed 16-bit samples
        pygame.mixer.pre_init(AUDIO_SAMPLE_RATE, -16, 2, 512)
        pygame.init()
        pygame.display.set_caption(caption)
        flags = pygame.DOUBLEBUF | pygame.OPENGL
        try:
            # vsync: 1 to enable, 0 to disable
            pygame.display.set_mode((WIDTH, HEIGHT), flags, vsync=(1 if VSYNC else 0))
        except (TypeError, pygame.error):
            # Older pygame versions won't accept the vsync kwarg, or vsync
            # was requested but unavailable on this system/driver.
            pygame.display.set_mode((WIDTH, HEIGHT), flags)
        self.clock = pygame.time.Clock()

        # The scene needs a live GL context, so build it after set_mode
        if scene_factory is None:
            from railway.railscene import RailScene

            scene_factory = RailScene
        self.scene: Scene = scene_factory()

    # ------------------------------------------------------------------
    def handle_events(self) -> bool:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return False
            if event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                return False
            self.scene.handle_event(event)
        return True

    # ------------------------------------------------------------------
    def update(self, now_ms: int):
        self.scene.update(now_ms)

    # ------------------------------------------------------------------
    def render(self, now_ms: int):  # pragma: no cover - visual
        self.scene.render(now_ms)
        pygame.display.flip()

    # ------------------------------------------------------------------
    def run(self):  # pragma: no cover - visual
        running = True
        while running:
            self.clock.tick(FPS)
            running = self.handle_events()
            if not running:
                break
            now_ms = pygame.time.get_ticks()
            self.update(now_ms)
            self.render(now_ms)
        pygame.quit()
