"""Base class for everything that has a name, a position and a velocity."""

from __future__ import annotations

from abc import ABC, abstractmethod

from junglerun.vector2f import Vector2f


class DrawableError(Exception):
    """Raised when an object is asked for behaviour it does not have."""


class Drawable(ABC):
    """A named object with position and velocity that can draw and update itself."""

    def __init__(self, name: str, position: Vector2f, velocity: Vector2f) -> None:
        self.name = name
        self.position = Vector2f(position[0], position[1])
        self.velocity = Vector2f(velocity[0], velocity[1])

    @property
    @abstractmethod
    def frame(self):
        """The frame currently shown for this object."""

    @abstractmethod
    def draw(self) -> None:
        """Put the object on the screen."""

    @abstractmethod
    def update(self, ticks: int) -> None:
        """Advance the object by ``ticks`` milliseconds."""

    @property
    def x(self) -> float:
        return self.position.x

    @x.setter
    def x(self, value: float) -> None:
        self.position.x = float(value)

    @property
    def y(self) -> float:
        return self.position.y

    @y.setter
    def y(self, value: float) -> None:
        self.position.y = float(value)

    @property
    def velocity_x(self) -> float:
        return self.velocity.x

    @velocity_x.setter
    def velocity_x(self, value: float) -> None:
        self.velocity.x = float(value)

    @property
    def velocity_y(self) -> float:
        return self.velocity.y

    @velocity_y.setter
    def velocity_y(self, value: float) -> None:
        self.velocity.y = float(value)

    def collided_with(self, other: Drawable) -> bool:
        """Whether this object touches ``other``; unsupported by default."""
        raise DrawableError("No collidedWith")

    def explode(self) -> None:
        """Break the object apart; unsupported by default."""
        raise DrawableError(self.name + "Can't explode!")

    def shoot(self) -> None:
        """Fire a bullet; unsupported by default."""
        raise DrawableError(self.name + "No bullets")

    def reset(self) -> None:
        """Return to the starting state; unsupported by default."""
        raise DrawableError(self.name + "Nothing to reset")

    def is_exploding(self) -> bool:
        """Whether an explosion is in progress."""
        return False