"""scenes/aquarium_scene.py — The habitat window.

Draws the water and the marimo from ``MarimoGame.snapshot()``, shows the
status panel, and turns clicks/keys into game actions:

    C / "Change water"     clean the water
    U / "Bigger habitat"   upgrade to the next tier
    T / "Share"            open a share link in the browser
    N / click the name     rename (Enter to keep, Escape to cancel)

The marimo drifts toward the mouse pointer.
"""

from __future__ import annotations
from pathlib import Path

import pygame

from core.app import App
from core.constants import (
    BACKGROUND, MARIMO_COLOR, WATER_CLEAN, WATER_DIRTY,
)
from core.scene import Scene
from logic.input_manager import InputContext, InputManager
from simulation.game import MarimoGame, RenderSnapshot
from ui.format import duration_string, percent_string, size_string
from ui.helpers import Button, TextField, draw_label_row, draw_panel, lerp_color
from ui.share import open_share, share_text, share_url

_PANEL_H = 130
_BUTTON_H = 32
_MARGIN = 10


class AquariumScene(Scene):
    def __init__(self, save_path: str | Path):
        self.game = MarimoGame(save_path)
        self.input = InputManager()
        self.name_field = TextField(pygame.Rect(0, 0, 0, 0))
        self.buttons: dict[str, Button] = {
            "clean_water": Button("Change water", pygame.Rect(0, 0, 0, 0)),
            "upgrade":     Button("Bigger habitat", pygame.Rect(0, 0, 0, 0)),
            "share":       Button("Share", pygame.Rect(0, 0, 0, 0)),
        }
        self._started = False

    # ── Lifecycle ────────────────────────────────────────────────────

    def on_enter(self, app: App):
        self._layout(*app.size)
        if self._started:
            return
        self.game.set_rect_size(*app.size)
        self.game.start()
        self._started = True
        print(f"[GAME] {self.game.name}: {size_string(self.game.size_exponent)} "
              f"in {self.game.habitat_name}, water {percent_string(self.game.water)}")

    def on_quit(self, app: App):
        self.game.shutdown()

    # ── Input ────────────────────────────────────────────────────────

    def handle_event(self, event: pygame.event.Event, app: App):
        self.input.feed(event)

    def _layout(self, w: int, h: int):
        self.name_field.rect = pygame.Rect(_MARGIN + 120, _MARGIN + 4,
                                           w - 2 * _MARGIN - 130, 24)
        y = h - _BUTTON_H - _MARGIN
        share_w = 80
        wide = (w - 4 * _MARGIN - share_w) // 2
        self.buttons["clean_water"].rect = pygame.Rect(_MARGIN, y, wide, _BUTTON_H)
        self.buttons["upgrade"].rect = pygame.Rect(2 * _MARGIN + wide, y, wide, _BUTTON_H)
        self.buttons["share"].rect = pygame.Rect(w - _MARGIN - share_w, y,
                                                 share_w, _BUTTON_H)

    def _begin_rename(self):
        self.name_field.begin(self.game.name)
        self.input.context = InputContext.TEXT
        pygame.key.start_text_input()

    def _end_rename(self, keep: bool):
        text = self.name_field.end()
        self.input.context = InputContext.GAMEPLAY
        pygame.key.stop_text_input()
        if keep and text:
            self.game.name = text

    def _share(self):
        text = share_text(self.game.name, size_string(self.game.size_exponent))
        open_share(share_url(text))

    def _process_input(self):
        inp = self.input

        if inp.pointer_moved:
            self.game.set_target(*inp.pointer)

        if inp.context == InputContext.TEXT:
            for event in inp.text_events:
                self.name_field.feed(event)
            if inp.just("text_commit"):
                self._end_rename(keep=True)
            elif inp.just("text_cancel"):
                self._end_rename(keep=False)
            elif inp.just("click_primary") and not self.name_field.rect.collidepoint(inp.pointer):
                self._end_rename(keep=True)
            return

        clicked = None
        if inp.just("click_primary"):
            if self.name_field.rect.collidepoint(inp.pointer):
                clicked = "rename"
            for intent, button in self.buttons.items():
                if button.hit(inp.pointer):
                    clicked = intent

        if inp.just("clean_water") or clicked == "clean_water":
            self.game.clean_water()
        if inp.just("upgrade") or clicked == "upgrade":
            self.game.upgrade_habitat()
        if inp.just("share") or clicked == "share":
            self._share()
        if inp.just("rename") or clicked == "rename":
            self._begin_rename()
        if inp.just("reload_tuning"):
            self.game.reload_tuning()

    # ── Frame ────────────────────────────────────────────────────────

    def update(self, dt: float, app: App):
        w, h = app.size
        self._layout(w, h)
        self.game.set_rect_size(w, h)
        self._process_input()
        # the game keeps its own wall clock; dt here is only the frame pacing
        self.game.update()
        self.buttons["clean_water"].enabled = self.game.can_clean
        self.buttons["upgrade"].enabled = self.game.can_upgrade
        # clear for the next frame's events
        self.input.begin_frame()

    def draw(self, surface: pygame.Surface, app: App):
        snap = self.game.snapshot()
        surface.fill(BACKGROUND)
        self._draw_marimo(surface, snap)
        self._draw_water(surface, snap)
        self._draw_panel(surface, app, snap)
        pointer = pygame.mouse.get_pos()
        for button in self.buttons.values():
            button.draw(surface, app, hovered=button.hit(pointer))

    def _draw_water(self, surface: pygame.Surface, snap: RenderSnapshot):
        w, h = surface.get_size()
        height = int(h * snap.water_amount)
        if height <= 0:
            return
        layer = pygame.Surface((w, height), pygame.SRCALPHA)
        layer.fill(lerp_color(WATER_DIRTY, WATER_CLEAN, snap.water_display))
        surface.blit(layer, (0, h - height))

    def _draw_marimo(self, surface: pygame.Surface, snap: RenderSnapshot):
        radius = max(int(snap.draw_size), 1)
        x, y = snap.position
        pygame.draw.circle(surface, MARIMO_COLOR, (int(x), int(y)), radius)

    def _draw_panel(self, surface: pygame.Surface, app: App, snap: RenderSnapshot):
        w, _ = surface.get_size()
        draw_panel(surface, pygame.Rect(0, 0, w, _PANEL_H))
        x, y = _MARGIN, _MARGIN + 8
        app.draw_text(surface, "Name", x, y, (160, 170, 180), font=app.font_sm)
        self.name_field.draw(surface, app, snap.name)
        y += 30
        y = draw_label_row(surface, app, x, y, "Size", size_string(snap.size_exponent))
        y = draw_label_row(surface, app, x, y, "Water", percent_string(snap.water))
        y = draw_label_row(surface, app, x, y, "Habitat", snap.habitat_name)
        draw_label_row(surface, app, x, y, "Growing for",
                       duration_string(snap.elapsed_session))
