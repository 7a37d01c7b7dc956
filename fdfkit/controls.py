"""Keyboard actions that move, scale, rotate and reproject the camera."""

from __future__ import annotations

import math
from collections.abc import Collection
from enum import Enum, auto

from .camera import Camera, Projection

__all__ = ["Key", "translate", "scale", "rotate", "project"]

MOVE_STEP = 3
ROTATION_STEP = 2 * math.radians(1)
SCALE_Z_STEP = 0.1


class Key(Enum):
    """Keys the viewer responds to."""

    RIGHT = auto()
    LEFT = auto()
    DOWN = auto()
    UP = auto()
    PLUS = auto()
    MINUS = auto()
    Z = auto()
    X = auto()
    W = auto()
    A = auto()
    S = auto()
    D = auto()
    Q = auto()
    E = auto()
    P = auto()
    I = auto()  # noqa: E741
    O = auto()  # noqa: E741


def _active(candidate: Key, key: Key | None, pressed: Collection[Key]) -> bool:
    """True for the key just pressed, or, when ``key`` is None, for a held key."""
    return key is candidate or (key is None and candidate in pressed)


def translate(key: Key | None, camera: Camera, pressed: Collection[Key] = ()) -> bool:
    """Move the camera with the arrow keys. Returns True if it moved.

    With ``key`` None the held keys in ``pressed`` are used; only the first
    matching action is applied.
    """
    if _active(Key.RIGHT, key, pressed):
        camera.move_x += MOVE_STEP
    elif _active(Key.LEFT, key, pressed):
        camera.move_x -= MOVE_STEP
    elif _active(Key.DOWN, key, pressed):
        camera.move_y += MOVE_STEP
    elif _active(Key.UP, key, pressed):
        camera.move_y -= MOVE_STEP
    else:
        return False
    return True


def scale(key: Key | None, camera: Camera, pressed: Collection[Key] = ()) -> bool:
    """Zoom with plus and minus, flatten or raise heights with Z and X."""
    if _active(Key.PLUS, key, pressed):
        camera.scale_factor += 1
    elif _active(Key.MINUS, key, pressed):
        camera.scale_factor -= 1
    elif _active(Key.Z, key, pressed) and camera.scale_z > -1:
        camera.scale_z -= SCALE_Z_STEP
    elif _active(Key.X, key, pressed) and camera.scale_z < 1:
        camera.scale_z += SCALE_Z_STEP
    else:
        return False
    return True


def rotate(key: Key | None, camera: Camera, pressed: Collection[Key] = ()) -> bool:
    """Rotate with W/S (alpha), A/D (gamma) and Q/E (beta)."""
    if _active(Key.S, key, pressed):
        camera.alpha -= ROTATION_STEP
    elif _active(Key.W, key, pressed):
        camera.alpha += ROTATION_STEP
    elif _active(Key.A, key, pressed):
        camera.gamma -= ROTATION_STEP
    elif _active(Key.D, key, pressed):
        camera.gamma += ROTATION_STEP
    elif _active(Key.Q, key, pressed):
        camera.beta -= ROTATION_STEP
    elif _active(Key.E, key, pressed):
        camera.beta += ROTATION_STEP
    else:
        return False
    return True


def project(key: Key | None, camera: Camera, pressed: Collection[Key] = ()) -> bool:
    """Switch projection: P side parallel, I isometric, O top."""
    if _active(Key.P, key, pressed):
        camera.projection = Projection.SIDE_PARALLEL
    elif _active(Key.I, key, pressed):
        camera.projection = Projection.ISOMETRIC
    elif _active(Key.O, key, pressed):
        camera.projection = Projection.TOP
    else:
        return False
    return True