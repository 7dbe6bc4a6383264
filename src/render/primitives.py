"""Immediate-mode 2D drawing helpers in canvas pixel space.

`begin_2d()` sets an orthographic projection with the origin at the top-left
so every caller works in the same coordinates as the game logic.
"""

from __future__ import annotations

from typing import Sequence, Tuple

from OpenGL.GL import (
    glBegin,
    glEnd,
    glOrtho,
    glLoadIdentity,
    glMatrixMode,
    glDisable,
    glEnable,
    glBlendFunc,
    glColor4f,
    glVertex2f,
    glLineWidth,
    GL_PROJECTION,
    GL_MODELVIEW,
    GL_BLEND,
    GL_SRC_ALPHA,
    GL_ONE_MINUS_SRC_ALPHA,
    GL_DEPTH_TEST,
    GL_QUADS,
    GL_LINE_STRIP,
    GL_TEXTURE_2D,
)

Color = Sequence[float]


def begin_2d(width: int, height: int) -> None:  # pragma: no cover - visual
    glMatrixMode(GL_PROJECTION)
    glLoadIdentity()
    glOrtho(0, width, height, 0, -1, 1)
    glMatrixMode(GL_MODELVIEW)
    glLoadIdentity()

    glDisable(GL_DEPTH_TEST)
    glDisable(GL_TEXTURE_2D)
    glEnable(GL_BLEND)
    glBlendFunc(GL_SRC_ALPHA, GL_ONE_MINUS_SRC_ALPHA)


def _set_color(color: Color) -> None:
    if len(color) == 4:
        glColor4f(*color)
    else:
        r, g, b = color
        glColor4f(r, g, b, 1.0)


def fill_rect(x: float, y: float, w: float, h: float, color: Color) -> None:  # pragma: no cover - visual
    _set_color(color)
    glBegin(GL_QUADS)
    glVertex2f(x, y)
    glVertex2f(x + w, y)
    glVertex2f(x + w, y + h)
    glVertex2f(x, y + h)
    glEnd()


def polyline(
    points: Sequence[Tuple[float, float]], color: Color, width: float = 1.0
) -> None:  # pragma: no cover - visual
    if len(points) < 2:
        return
    glLineWidth(width)
    _set_color(color)
    glBegin(GL_LINE_STRIP)
    for px, py in points:
        glVertex2f(px, py)
    glEnd()
    glLineWidth(1.0)


def quadratic_curve(
    p0: Tuple[float, float],
    ctrl: Tuple[float, float],
    p1: Tuple[float, float],
    segments: int = 16,
) -> list[Tuple[float, float]]:
    """Sample a quadratic Bezier from p0 to p1 into `segments + 1` points."""
    pts = []
    for i in range(segments + 1):
        t = i / segments
        a = (1 - t) * (1 - t)
        b = 2 * (1 - t) * t
        c = t * t
        pts.append(
            (
                a * p0[0] + b * ctrl[0] + c * p1[0],
                a * p0[1] + b * ctrl[1] + c * p1[1],
            )
        )
    return pts


__all__ = ["begin_2d", "fill_rect", "polyline", "quadratic_curve"]
