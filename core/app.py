"""
core/app.py — Pygame application shell

Handles the window, main loop, and scene stack.
You don't edit this file to change the habitat.
You write Scenes and push/pop them.

    app = App(title="Marimo Habitat", width=480, height=640)
    app.push_scene(AquariumScene(save_path))
    app.run()

When the window closes every scene on the stack gets ``on_quit``
before pygame shuts down, top to bottom.
"""

from __future__ import annotations
import pygame
from core.scene import Scene


class App:
    def __init__(self, title: str = "Marimo Habitat", width: int = 480,
                 height: int = 640, fps: int = 30):
        pygame.init()
        self._windowed_size = (width, height)
        self.screen = pygame.display.set_mode((width, height), pygame.RESIZABLE)
        pygame.display.set_caption(title)
        self.clock = pygame.time.Clock()
        self.running = True
        self.fullscreen = False
        self.fps = fps
        self.dt = 0.0

        # Scene stack; only the top scene is active
        self._scenes: list[Scene] = []

        self.font = pygame.font.SysFont("monospace", 14)
        self.font_sm = pygame.font.SysFont("monospace", 11)

    # -- Scene management --

    @property
    def scene(self) -> Scene | None:
        return self._scenes[-1] if self._scenes else None

    def push_scene(self, scene: Scene):
        if self._scenes:
            self._scenes[-1].on_exit(self)
        self._scenes.append(scene)
        scene.on_enter(self)

    def pop_scene(self):
        if self._scenes:
            self._scenes[-1].on_exit(self)
            self._scenes.pop()
        if self._scenes:
            self._scenes[-1].on_enter(self)

    @property
    def size(self) -> tuple[int, int]:
        return self.screen.get_size()

    # -- Main loop --

    def run(self):
        try:
            while self.running:
                self.dt = self.clock.tick(self.fps) / 1000.0

                for event in pygame.event.get():
                    if event.type == pygame.QUIT:
                        self.running = False
                    elif event.type == pygame.KEYDOWN and event.key == pygame.K_F11:
                        self.toggle_fullscreen()
                    elif event.type == pygame.VIDEORESIZE and not self.fullscreen:
                        self._windowed_size = (event.w, event.h)
                        self.screen = pygame.display.set_mode(
                            (event.w, event.h), pygame.RESIZABLE)
                    elif self.scene:
                        self.scene.handle_event(event, self)

                if self.scene:
                    self.scene.update(self.dt, self)
                    self.scene.draw(self.screen, self)

                pygame.display.flip()
        finally:
            self._quit_scenes()
            pygame.quit()

    def _quit_scenes(self):
        for scene in reversed(self._scenes):
            scene.on_quit(self)

    def toggle_fullscreen(self):
        """Switch between windowed and fullscreen (F11)."""
        self.fullscreen = not self.fullscreen
        if self.fullscreen:
            self.screen = pygame.display.set_mode((0, 0), pygame.FULLSCREEN)
        else:
            self.screen = pygame.display.set_mode(
                self._windowed_size, pygame.RESIZABLE)

    # -- Convenience --

    def draw_text(self, surface: pygame.Surface, text: str, x: int, y: int,
                  color=(255, 255, 255), font=None):
        """Quick text draw. Returns the rect for layout chaining."""
        f = font or self.font
        img = f.render(text, True, color)
        return surface.blit(img, (x, y))
