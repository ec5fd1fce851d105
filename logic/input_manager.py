"""logic/input_manager.py — Intent-based input layer.

Sits between raw pygame events and game actions.  The scene feeds in
raw events; the manager maps them to *intents* based on the current
**input context** (gameplay or text entry).

Other systems read the intents — they never touch raw keycodes.

Usage (in aquarium_scene):

    self.input = InputManager()
    # each frame:
    self.input.begin_frame()
    for event in events:
        self.input.feed(event)

    if self.input.just("clean_water"):
        ...
    x, y = self.input.pointer        # last mouse position
"""

from __future__ import annotations
from enum import Enum, auto
import pygame


# ── Input contexts ──────────────────────────────────────────────────

class InputContext(Enum):
    """Determines which key-bindings are active."""
    GAMEPLAY = auto()   # watching the habitat
    TEXT     = auto()   # typing a new name


# ── Intent names ────────────────────────────────────────────────────
# Gameplay:  clean_water  upgrade  share  rename  reload_tuning
# Mouse:     click_primary
# Text:      text_commit  text_cancel  (anything else arrives as text_event)


# ── Default key bindings ────────────────────────────────────────────

# Each binding is  (pygame key constant, modifier mask or 0)
# For mouse buttons we use negative constants: -1 = LMB, -3 = RMB

_GAMEPLAY_BINDS: dict[str, list[tuple[int, int]]] = {
    "clean_water":   [(pygame.K_c, 0)],
    "upgrade":       [(pygame.K_u, 0)],
    "share":         [(pygame.K_t, 0)],
    "rename":        [(pygame.K_n, 0), (pygame.K_F2, 0)],
    "reload_tuning": [(pygame.K_F5, 0)],
    "click_primary": [(-1, 0)],
}

_TEXT_BINDS: dict[str, list[tuple[int, int]]] = {
    "text_commit":   [(pygame.K_RETURN, 0), (pygame.K_KP_ENTER, 0)],
    "text_cancel":   [(pygame.K_ESCAPE, 0)],
    "click_primary": [(-1, 0)],
}


# ── InputManager ────────────────────────────────────────────────────

class InputManager:
    """Context-aware input mapper.

    Call ``begin_frame()`` before processing events and ``feed(event)``
    for each pygame event.  Then use ``just(intent)`` for presses.
    """

    def __init__(self):
        self.context: InputContext = InputContext.GAMEPLAY
        # Intents pressed *this frame* (rising edge)
        self._pressed: set[str] = set()
        # Raw key events for the TEXT context (editing keys + typed chars)
        self.text_events: list[pygame.event.Event] = []
        # Last known pointer position and whether it moved this frame
        self.pointer: tuple[int, int] = (0, 0)
        self.pointer_moved = False

    # ── frame lifecycle ─────────────────────────────────────────

    def begin_frame(self):
        """Call at the start of each frame before feeding events."""
        self._pressed.clear()
        self.text_events.clear()
        self.pointer_moved = False

    def feed(self, event: pygame.event.Event):
        """Feed a raw pygame event.  Maps it to intents based on context."""
        if event.type == pygame.MOUSEMOTION:
            self.pointer = event.pos
            self.pointer_moved = True
            return

        binds = self._active_binds()

        if event.type == pygame.KEYDOWN:
            mods = pygame.key.get_mods()
            matched = False
            for intent, key_list in binds.items():
                for key, req_mod in key_list:
                    if key < 0:
                        continue  # mouse binding, handled below
                    if event.key == key and (req_mod == 0 or mods & req_mod):
                        self._pressed.add(intent)
                        matched = True
                        break
            if not matched and self.context == InputContext.TEXT:
                self.text_events.append(event)

        elif event.type == pygame.TEXTINPUT and self.context == InputContext.TEXT:
            self.text_events.append(event)

        elif event.type == pygame.MOUSEBUTTONDOWN:
            self.pointer = event.pos
            neg_button = -event.button  # -1 for LMB, -3 for RMB
            for intent, key_list in binds.items():
                for key, _mod in key_list:
                    if key == neg_button:
                        self._pressed.add(intent)
                        break

    # ── queries ─────────────────────────────────────────────────

    def just(self, intent: str) -> bool:
        """True if *intent* was pressed this frame."""
        return intent in self._pressed

    def _active_binds(self) -> dict[str, list[tuple[int, int]]]:
        if self.context == InputContext.TEXT:
            return _TEXT_BINDS
        return _GAMEPLAY_BINDS
