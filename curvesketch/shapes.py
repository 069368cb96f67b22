"""Animated 2D shapes: coloured triangles and batches of circles."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Sequence

import numpy as np


def rotate2d(model: np.ndarray, angle: float) -> np.ndarray:
    """Return the homogeneous 3x3 ``model`` post-multiplied by a rotation."""
    m = np.asarray(model, dtype=float)
    if m.shape != (3, 3):
        raise ValueError(f"model must be 3x3, got shape {m.shape}")
    c, s = math.cos(angle), math.sin(angle)
    rotation = np.array([[c, -s, 0.0], [s, c, 0.0], [0.0, 0.0, 1.0]])
    return m @ rotation


def _identity() -> np.ndarray:
    return np.eye(3)


@dataclass(frozen=True)
class ColoredVertex:
    """A 2D vertex with an RGB colour."""

    position: tuple[float, float]
    color: tuple[float, float, float]


@dataclass(eq=False)
class Triangle:
    """Triangles given by consecutive vertex triples, with a model transform."""

    vertices: list[ColoredVertex]
    model: np.ndarray = field(default_factory=_identity)

    def __post_init__(self) -> None:
        self.vertices = list(self.vertices)
        self.model = np.asarray(self.model, dtype=float)
        if self.model.shape != (3, 3):
            raise ValueError("model must be 3x3")

    def advance(self, dt: float, animate: bool) -> np.ndarray:
        """Rotate the model by ``dt`` radians when animating; return the model."""
        if animate:
            self.model = rotate2d(self.model, dt)
        return self.model


@dataclass(eq=False)
class Circle:
    """A batch of circles, each described by a 3-component parameter vector."""

    parameters: Sequence[Sequence[float]]
    model: np.ndarray = field(default_factory=_identity)

    def __post_init__(self) -> None:
        params = np.asarray(self.parameters, dtype=float)
        if params.size == 0:
            params = params.reshape(0, 3)
        if params.ndim != 2 or params.shape[1] != 3:
            raise ValueError("each circle needs exactly three parameters")
        self.parameters = params
        self.model = np.asarray(self.model, dtype=float)
        if self.model.shape != (3, 3):
            raise ValueError("model must be 3x3")

    def advance(self, dt: float, animate: bool) -> np.ndarray:
        """Rotate the model by ``dt`` radians when animating; return the model."""
        if animate:
            self.model = rotate2d(self.model, dt)
        return self.model