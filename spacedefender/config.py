"""Screen geometry, entity sizes, limits and shared enumerations."""

from enum import Enum

SCREEN_W = 1280
SCREEN_H = 720
FLOOR_H = 60

FPS = 100.0
FRAME_DT = 1.0 / FPS
MAX_FRAMES_PER_ANIMATION = 10

MAX_ENEMIES = 20
MAX_ENEMIES_SHOTS = 50
MAX_EXPLOSIONS = 20
ENEMIES_BASE_SPEED = 1.0
ENEMIES_SPEED_INCREASE = 0.30

MAX_SHOTS = 1
SHIP_BASE_SPEED = 2
MAX_POWERUPS = 3

UI_W = 40
UI_H = 40

SHIP_W = 80
SHIP_H = 50

SHOT_W = 20
SHOT_H = 45

ENEMY_W = 40
ENEMY_H = 30

OBJECTS_NUMB = 3
OBJECT_W = 100
OBJECT_H = 100

POWERUP_W = 40
POWERUP_H = 40


class GameState(Enum):
    """Top-level screen the game is showing."""

    MENU = "menu"
    PLAYING = "playing"
    HELP = "help"
    SETTINGS = "settings"
    QUIT = "quit"


class BuffType(Enum):
    """Kind of bonus a power-up grants."""

    LIFE = "life"
    SHOTS = "shots"
    SPEED = "speed"


class EnemyType(Enum):
    """Rarity tier of an enemy."""

    NORMAL = "normal"
    RARE = "rare"
    LEGENDARY = "legendary"