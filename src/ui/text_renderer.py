"""Text rendering for the 2D GL canvas with pygame fonts.

Each label is rendered with pygame.font, uploaded once as a texture and
drawn as a quad. Dynamic labels (score, debug lines) pass a `key` so their
texture slot is reused and only re-uploaded when the text changes.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Tuple, Optional

import pygame
from OpenGL.GL import (
    glGenTextures,
    glBindTexture,
    glTexImage2D,
    glTexParameteri,
    glBegin,
    glEnd,
    glTexCoord2f,
    glVertex2f,
    glColor4f,
    glEnable,
    glDisable,
    GL_TEXTURE_2D,
    GL_TEXTURE_MIN_FILTER,
    GL_TEXTURE_MAG_FILTER,
    GL_LINEAR,
    GL_RGBA,
    GL_UNSIGNED_BYTE,
    GL_QUADS,
)

RGBA = Tuple[int, int, int, int]


@dataclass
class _TexSlot:
    id: int
    size: Tuple[int, int]
    last_text: str | None = None


class TextRenderer:
    """2D text renderer for OpenGL using pygame.font.

    - Call begin() once before drawing labels; call end() after.
    - Expects the canvas ortho projection (see render.primitives.begin_2d).
    """

    def __init__(self, default_size: int = 24) -> None:
        self.default_size = default_size
        self._fonts: Dict[int, pygame.font.Font] = {}
        self._cache: Dict[Tuple[str, RGBA, int], _TexSlot] = {}
        self._slots: Dict[str, _TexSlot] = {}

    def font(self, size: int) -> pygame.font.Font:
        f = self._fonts.get(size)
        if f is None:
            f = pygame.font.Font(None, size)
            self._fonts[size] = f
        return f

    def begin(self) -> None:  # pragma: no cover - visual
        glEnable(GL_TEXTURE_2D)

    def end(self) -> None:  # pragma: no cover - visual
        glDisable(GL_TEXTURE_2D)

    # --------------------------- rendering ------------------------------
    def _upload_surface(self, slot: _TexSlot, surf: pygame.Surface) -> None:
        data = pygame.image.tostring(surf, "RGBA", True)
        w, h = surf.get_width(), surf.get_height()
        glBindTexture(GL_TEXTURE_2D, slot.id)
        glTexImage2D(GL_TEXTURE_2D, 0, GL_RGBA, w, h, 0, GL_RGBA, GL_UNSIGNED_BYTE, data)
        glTexParameteri(GL_TEXTURE_2D, GL_TEXTURE_MIN_FILTER, GL_LINEAR)
        glTexParameteri(GL_TEXTURE_2D, GL_TEXTURE_MAG_FILTER, GL_LINEAR)
        slot.size = (w, h)

    def _slot_for(self, text: str, color: RGBA, size: int, key: Optional[str]) -> _TexSlot:
        if key is not None:
            slot = self._slots.get(key)
            if slot is None:
                slot = _TexSlot(id=glGenTextures(1), size=(0, 0))
                self._slots[key] = slot
            if slot.last_text != text:
                self._upload_surface(slot, self.font(size).render(text, True, color))
                slot.last_text = text
            return slot

        cache_key = (text, tuple(color), size)
        slot = self._cache.get(cache_key)
        if slot is None:
            slot = _TexSlot(id=glGenTextures(1), size=(0, 0), last_text=text)
            self._upload_surface(slot, self.font(size).render(text, True, color))
            self._cache[cache_key] = slot
        return slot

    def draw_text(
        self,
        text: str,
        x: float,
        y: float,
        color: RGBA = (0, 0, 0, 255),
        *,
        size: Optional[int] = None,
        key: Optional[str] = None,
        align: str = "topleft",
    ) -> Tuple[int, int]:  # returns (w, h)
        """Draw a single line of text at canvas coords.

        align: 'topleft' | 'topright' | 'center'
        """
        slot = self._slot_for(text, color, size or self.default_size, key)
        w, h = slot.size
        if align == "topright":
            draw_x, draw_y = x - w, y
        elif align == "center":
            draw_x, draw_y = x - w / 2, y - h / 2
        else:  # topleft
            draw_x, draw_y = x, y

        glBindTexture(GL_TEXTURE_2D, slot.id)
        glColor4f(1.0, 1.0, 1.0, 1.0)
        glBegin(GL_QUADS)
        # tostring(..., True) flips rows, so v runs bottom-up
        glTexCoord2f(0.0, 1.0)
        glVertex2f(draw_x, draw_y)
        glTexCoord2f(1.0, 1.0)
        glVertex2f(draw_x + w, draw_y)
        glTexCoord2f(1.0, 0.0)
        glVertex2f(draw_x + w, draw_y + h)
        glTexCoord2f(0.0, 0.0)
        glVertex2f(draw_x, draw_y + h)
        glEnd()
        return w, h
