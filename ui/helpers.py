"""ui.helpers — Shared drawing utilities for the habitat window."""

from __future__ import annotations
import pygame

from simulation.easing import lerp


def lerp_color(a: tuple, b: tuple, t: float) -> tuple:
    """Blend two colours of the same length; *t* is clamped to [0, 1]."""
    return tuple(int(round(lerp(x, y, t))) for x, y in zip(a, b))


def draw_panel(surface: pygame.Surface, rect: pygame.Rect,
               alpha: int = 140) -> None:
    """Semi-transparent dark box behind text."""
    panel = pygame.Surface(rect.size, pygame.SRCALPHA)
    panel.fill((0, 0, 0, alpha))
    surface.blit(panel, rect.topleft)


def draw_label_row(surface: pygame.Surface, app, x: int, y: int,
                   label: str, value: str, label_w: int = 120) -> int:
    """Draw ``label   value`` and return the y of the next row."""
    app.draw_text(surface, label, x, y, (160, 170, 180), font=app.font_sm)
    app.draw_text(surface, value, x + label_w, y, (230, 230, 230))
    return y + 20


# ── buttons ─────────────────────────────────────────────────────────

class Button:
    """A clickable rectangle with a label that can be disabled."""

    __slots__ = ("rect", "label", "enabled")

    def __init__(self, label: str, rect: pygame.Rect):
        self.label = label
        self.rect = rect
        self.enabled = True

    def hit(self, pos: tuple[int, int]) -> bool:
        return self.enabled and self.rect.collidepoint(pos)

    def draw(self, surface: pygame.Surface, app, hovered: bool = False) -> None:
        if not self.enabled:
            bg, fg = (45, 45, 50), (110, 110, 110)
        elif hovered:
            bg, fg = (70, 90, 110), (255, 255, 255)
        else:
            bg, fg = (55, 65, 80), (220, 220, 220)
        pygame.draw.rect(surface, bg, self.rect, border_radius=4)
        pygame.draw.rect(surface, (90, 100, 115), self.rect, 1, border_radius=4)
        img = app.font.render(self.label, True, fg)
        surface.blit(img, img.get_rect(center=self.rect.center))


# ── text field ──────────────────────────────────────────────────────

class TextField:
    """Single-line text input; fed raw KEYDOWN / TEXTINPUT events."""

    def __init__(self, rect: pygame.Rect, max_len: int = 32):
        self.rect = rect
        self.max_len = max_len
        self.text = ""
        self.active = False

    def begin(self, text: str) -> None:
        self.text = text
        self.active = True

    def end(self) -> str:
        self.active = False
        return self.text.strip()

    def feed(self, event: pygame.event.Event) -> None:
        if event.type == pygame.TEXTINPUT:
            if len(self.text) + len(event.text) <= self.max_len:
                self.text += event.text
        elif event.type == pygame.KEYDOWN and event.key == pygame.K_BACKSPACE:
            self.text = self.text[:-1]

    def draw(self, surface: pygame.Surface, app, value: str) -> None:
        border = (120, 200, 255) if self.active else (70, 80, 90)
        pygame.draw.rect(surface, (20, 24, 28), self.rect)
        pygame.draw.rect(surface, border, self.rect, 1)
        shown = self.text + "_" if self.active else value
        app.draw_text(surface, shown, self.rect.x + 6, self.rect.y + 4)
