"""Menu widgets: animated buttons and text input boxes."""

from __future__ import annotations

import string
from collections.abc import Iterable
from dataclasses import dataclass

from georays.objects import BLACK, GRAY, WHITE, Color, Rect

KEY_BACKSPACE = "backspace"
KEY_SPACE = "space"

_DIGIT_ORDER = "1234567890"


@dataclass
class Button:
    """A clickable button that grows on hover and sinks when pressed."""

    rect: Rect
    text: str
    font_size: int
    is_disabled: bool = False
    base_color: Color = WHITE
    hover_scale: float = 1.0
    press_offset: float = 0.0
    is_pressed: bool = False
    animation_timer: float = 0.0

    def update(self, mouse_x: float, mouse_y: float, mouse_down: bool, delta_time: float) -> None:
        """Advance the hover, press and colour animations by one frame."""
        hovered = self.is_hovered(mouse_x, mouse_y)
        pressed = hovered and mouse_down

        target_scale = 1.1 if hovered else 1.0
        self.hover_scale += (target_scale - self.hover_scale) * (delta_time * 12.0)

        target_offset = 4.0 if pressed else 0.0
        self.press_offset += (target_offset - self.press_offset) * (delta_time * 15.0)

        if hovered:
            self.animation_timer = min(self.animation_timer + delta_time * 8.0, 1.0)
        else:
            self.animation_timer = max(self.animation_timer - delta_time * 8.0, 0.0)

        self.is_pressed = pressed

    def is_hovered(self, mouse_x: float, mouse_y: float) -> bool:
        return self.rect.contains(mouse_x, mouse_y)

    def is_clicked(self, mouse_x: float, mouse_y: float, mouse_released: bool) -> bool:
        """True when the mouse button is released over the button."""
        return self.is_hovered(mouse_x, mouse_y) and mouse_released

    def scaled_rect(self) -> Rect:
        """The rectangle the button occupies on screen after animation."""
        grow = self.hover_scale - 1.0
        return Rect(
            self.rect.x - self.rect.width * grow * 0.5,
            self.rect.y - self.rect.height * grow * 0.5 + self.press_offset,
            self.rect.width * self.hover_scale,
            self.rect.height * self.hover_scale,
        )

    def fill_color(self, gray: bool = False) -> Color:
        if self.is_disabled:
            return BLACK
        if gray:
            return GRAY
        return self.base_color


@dataclass
class TextBox:
    """A single-line text field that collects typed letters and digits."""

    rect: Rect
    placeholder: str
    text_size: int
    max_length: int
    spaces_allowed: bool = True
    active: bool = False

    def is_clicked(self, mouse_x: float, mouse_y: float, mouse_pressed: bool) -> bool:
        return self.rect.contains(mouse_x, mouse_y) and mouse_pressed

    def is_not_clicked(self, mouse_x: float, mouse_y: float, mouse_pressed: bool) -> bool:
        """True when the mouse is pressed somewhere outside the box."""
        return not self.rect.contains(mouse_x, mouse_y) and mouse_pressed

    def input(self, text: str, pressed_keys: Iterable[str], shift_down: bool = False) -> str:
        """Apply this frame's key presses to ``text`` and return the result.

        Keys are named "a".."z", "0".."9", "space" and "backspace". At most
        one character is added per frame.
        """
        pressed = set(pressed_keys)
        if self.active and text and KEY_BACKSPACE in pressed:
            text = text[:-1]

        if self.active and len(text) < self.max_length:
            typed = self._typed_char(pressed, shift_down)
            if typed:
                text += typed
        return text

    def _typed_char(self, pressed: set[str], shift_down: bool) -> str:
        for letter in string.ascii_lowercase:
            if letter in pressed:
                return letter.upper() if shift_down else letter
        if KEY_SPACE in pressed and self.spaces_allowed:
            return " "
        return next((digit for digit in _DIGIT_ORDER if digit in pressed), "")

    def display_text(self, text: str) -> tuple[str, Color]:
        """The string to show and its colour: the placeholder in gray when empty."""
        if text:
            return text, WHITE
        return self.placeholder, GRAY