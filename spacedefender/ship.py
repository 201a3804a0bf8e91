"""The player's ship."""

from dataclasses import dataclass

from .config import FLOOR_H, SCREEN_H, SCREEN_W, SHIP_BASE_SPEED, SHIP_H, SHIP_W


@dataclass
class Ship:
    """Player ship moving along the bottom of the screen; x is its centre."""

    life: int = 3
    x: float = SCREEN_W / 2
    vel: float = 1.0
    right: bool = False
    left: bool = False

    def update(self) -> None:
        """Move one frame in the held direction, staying inside the screen."""
        half = SHIP_W // 2
        if self.right and (self.x + half) + self.vel <= SCREEN_W:
            self.x += self.vel * SHIP_BASE_SPEED
        if self.left and (self.x - half) - self.vel >= 0:
            self.x -= self.vel * SHIP_BASE_SPEED

    def hitbox(self) -> tuple[float, float, float, float]:
        """Collision rectangle as (x, y, width, height)."""
        return (
            self.x - SHIP_W // 2,
            SCREEN_H - FLOOR_H // 2 - SHIP_H,
            SHIP_W,
            SHIP_H,
        )