"""Scene layout: which sprite goes where on the game window."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum

from .mapcheck import COIN, ENEMY, EXIT, FLOOR, WALL, GameMap

STANDARD_TILE_SIZE = 32
STANDARD_TITLE = "If you can read me, your map is big :)"
BONUS_TITLE = "The sprites of this game adapt to the window size"

MOVES_PREFIX = "MOVES "
TEXT_COLOR = 0x003964AD
TEXT_X = 7
TEXT_Y = 10
COUNTER_X = TEXT_X * 6

# (width below, height test, tile size); the first matching rule wins.
_SIZE_RULES: tuple[tuple[int, int, bool, int], ...] = (
    (6, 4, True, 256),
    (11, 9, False, 128),
    (21, 17, False, 64),
    (41, 33, False, 32),
    (81, 65, False, 16),
)
_SMALLEST_TILE = 8


class Sprite(Enum):
    """Images the game draws."""

    WALL = "wall"
    FLOOR = "floor"
    COIN = "coin"
    EXIT_CLOSED = "exit_closed"
    EXIT_OPEN = "exit_open"
    PLAYER_RIGHT = "player_right"
    PLAYER_LEFT = "player_left"
    PLAYER_UP = "player_up"
    PLAYER_DOWN = "player_down"
    ENEMY = "enemy"


class Facing(IntEnum):
    """Direction the player sprite looks in."""

    DOWN = 0
    LEFT = 1
    UP = 2
    RIGHT = 3


_PLAYER_SPRITES = {
    Facing.LEFT: Sprite.PLAYER_LEFT,
    Facing.UP: Sprite.PLAYER_UP,
    Facing.RIGHT: Sprite.PLAYER_RIGHT,
    Facing.DOWN: Sprite.PLAYER_DOWN,
}


@dataclass(frozen=True)
class DrawCommand:
    """One drawing step: a sprite or a coloured text at pixel (x, y)."""

    x: int
    y: int
    sprite: Sprite | None = None
    text: str | None = None
    color: int | None = None


def tile_size_for(width: int, height: int) -> int:
    """Return the sprite size that fits a map of the given size in tiles."""
    for max_width, height_limit, exact, size in _SIZE_RULES:
        fits_height = height == height_limit if exact else height < height_limit
        if width < max_width and fits_height:
            return size
    return _SMALLEST_TILE


def window_size(game_map: GameMap, tile_size: int) -> tuple[int, int]:
    """Return the window size in pixels as (width, height)."""
    return game_map.width * tile_size, game_map.height * tile_size


def _exit_sprite(game_map: GameMap) -> Sprite:
    return Sprite.EXIT_CLOSED if game_map.coins != 0 else Sprite.EXIT_OPEN


def _tiles(game_map: GameMap):
    for y, row in enumerate(game_map.grid):
        for x, tile in enumerate(row):
            yield x, y, tile


def _player_command(game_map: GameMap, sprite: Sprite, size: int) -> DrawCommand:
    row, col = game_map.player
    return DrawCommand(col * size, row * size, sprite=sprite)


def layout(game_map: GameMap) -> list[DrawCommand]:
    """Return the drawing steps of the standard game at 32-pixel tiles."""
    size = STANDARD_TILE_SIZE
    exit_sprite = _exit_sprite(game_map)
    commands = []
    for x, y, tile in _tiles(game_map):
        if tile == WALL:
            sprite = Sprite.WALL
        elif tile == COIN:
            sprite = Sprite.COIN
        elif tile == EXIT:
            sprite = exit_sprite
        else:
            sprite = Sprite.FLOOR
        commands.append(DrawCommand(x * size, y * size, sprite=sprite))
    commands.append(_player_command(game_map, Sprite.PLAYER_RIGHT, size))
    return commands


def moves_label(moves: int) -> str:
    """Return the move counter as shown on screen."""
    return str(moves)


def bonus_layout(
    game_map: GameMap, facing: Facing = Facing.DOWN, moves: int = 0
) -> list[DrawCommand]:
    """Return the drawing steps of the bonus game, move counter included.

    Walls and floors come first, then coins and the exit, then enemies,
    then the player facing ``facing``, and last the move counter.
    """
    size = tile_size_for(game_map.width, game_map.height)
    exit_sprite = _exit_sprite(game_map)
    tiles = list(_tiles(game_map))

    def place(x: int, y: int, sprite: Sprite) -> DrawCommand:
        return DrawCommand(x * size, y * size, sprite=sprite)

    commands = [
        place(x, y, Sprite.WALL if tile == WALL else Sprite.FLOOR)
        for x, y, tile in tiles
        if tile in (WALL, FLOOR)
    ]
    commands += [
        place(x, y, Sprite.COIN if tile == COIN else exit_sprite)
        for x, y, tile in tiles
        if tile in (COIN, EXIT)
    ]
    commands += [place(x, y, Sprite.ENEMY) for x, y, tile in tiles if tile == ENEMY]
    sprite = _PLAYER_SPRITES.get(facing, Sprite.PLAYER_DOWN)
    commands.append(_player_command(game_map, sprite, size))
    commands.append(DrawCommand(TEXT_X, TEXT_Y, text=MOVES_PREFIX, color=TEXT_COLOR))
    commands.append(
        DrawCommand(COUNTER_X, TEXT_Y, text=moves_label(moves), color=TEXT_COLOR)
    )
    return commands