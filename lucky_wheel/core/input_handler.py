"""
Input handling for keyboard, mouse and typed text
"""

import pygame
from typing import Dict, List, Set, Tuple
from dataclasses import dataclass, field


@dataclass
class InputState:
    """Current state of all inputs"""
    # Keyboard
    keys_pressed: Set[int] = field(default_factory=set)
    keys_just_pressed: Set[int] = field(default_factory=set)

    # Text typed this frame (TEXTINPUT events)
    typed: List[str] = field(default_factory=list)

    # Mouse
    mouse_pos: Tuple[int, int] = (0, 0)
    mouse_just_clicked: bool = False

    # Special
    quit_requested: bool = False


class InputHandler:
    """
    Centralized input handling.
    Tracks just-pressed keys, typed text and left clicks per frame.
    """

    def __init__(self):
        self.state = InputState()
        self._prev_keys: Set[int] = set()

        # Key bindings (action -> key)
        self.bindings: Dict[str, int] = {
            'spin': pygame.K_TAB,
            'confirm': pygame.K_RETURN,
            'cancel': pygame.K_ESCAPE,
            'backspace': pygame.K_BACKSPACE,
            'remove_last': pygame.K_DELETE,
            'mute': pygame.K_F2,
            'suggest': pygame.K_F3,
        }

    def update(self):
        """
        Update input state. Call once per frame before processing events.
        """
        self._prev_keys = self.state.keys_pressed.copy()

        self.state.keys_just_pressed.clear()
        self.state.typed.clear()
        self.state.mouse_just_clicked = False
        self.state.quit_requested = False

    def process_event(self, event: pygame.event.Event):
        """Process a single pygame event"""
        if event.type == pygame.QUIT:
            self.state.quit_requested = True

        elif event.type == pygame.KEYDOWN:
            self.state.keys_pressed.add(event.key)
            if event.key not in self._prev_keys:
                self.state.keys_just_pressed.add(event.key)

        elif event.type == pygame.KEYUP:
            self.state.keys_pressed.discard(event.key)

        elif event.type == pygame.TEXTINPUT:
            self.state.typed.append(event.text)

        elif event.type == pygame.MOUSEMOTION:
            self.state.mouse_pos = event.pos

        elif event.type == pygame.MOUSEBUTTONDOWN:
            if event.button == 1:
                self.state.mouse_pos = event.pos
                self.state.mouse_just_clicked = True

    def is_action_just_pressed(self, action: str) -> bool:
        """Check if bound action key was just pressed"""
        if action in self.bindings:
            return self.bindings[action] in self.state.keys_just_pressed
        return False

    def typed_text(self) -> str:
        return "".join(self.state.typed)

    def is_mouse_clicked(self) -> bool:
        return self.state.mouse_just_clicked

    def get_mouse_pos(self) -> Tuple[int, int]:
        return self.state.mouse_pos

    def should_quit(self) -> bool:
        """Check if quit was requested"""
        return self.state.quit_requested
