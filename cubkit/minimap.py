"""Top-down minimap: grid cells, the player marker and a fan of view rays."""

from __future__ import annotations

import math
from array import array
from dataclasses import dataclass, field

__all__ = [
    "IMAGE_HEIGHT",
    "IMAGE_LENGTH",
    "WINDOW_HEIGHT",
    "WINDOW_LENGTH",
    "GRAY",
    "RED",
    "DARK_RED",
    "BLUE",
    "DARK_BLUE",
    "GREEN",
    "DARK_GREEN",
    "BROWN",
    "SKY",
    "WHITE",
    "PI",
    "Canvas",
    "Player",
    "Scene",
    "direction_signs",
    "corner_blocked",
    "ray_can_pass",
    "draw_grid",
    "draw_player",
    "draw_long_line",
    "draw_rays",
    "render",
]

IMAGE_HEIGHT = 500
IMAGE_LENGTH = 500
WINDOW_HEIGHT = 1200
WINDOW_LENGTH = 2000
GRAY = 0x808080
RED = 0xFF0000
DARK_RED = 0x8B0000
BLUE = 0x444FF
DARK_BLUE = 0x0000B9
GREEN = 0x00FF00
DARK_GREEN = 0x00CA00
BROWN = 0x483C32
SKY = 0x90D5FF
WHITE = 0xFFFFFF
PI = 3.14159265

WALL = "1"
OPEN_CELLS = frozenset("0NSEW")

RAY_COUNT = 400
RAY_START_ANGLE = -0.185 * PI
RAY_STEP_ANGLE = 0.000925 * PI


class Canvas:
    """A width x height grid of 32-bit colours; writes outside it are ignored."""

    def __init__(self, width: int = WINDOW_LENGTH, height: int = WINDOW_HEIGHT) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("canvas dimensions must be positive")
        self.width = width
        self.height = height
        self._pixels = array("L", [0]) * (width * height)

    def _inside(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def put_pixel(self, x: int, y: int, color: int) -> None:
        """Set one pixel; coordinates outside the canvas are ignored."""
        if self._inside(x, y):
            self._pixels[y * self.width + x] = color & 0xFFFFFFFF

    def get_pixel(self, x: int, y: int) -> int:
        """Colour of one pixel; raises IndexError outside the canvas."""
        if not self._inside(x, y):
            raise IndexError(f"pixel ({x}, {y}) is outside the canvas")
        return self._pixels[y * self.width + x]

    def clear(self, color: int = 0) -> None:
        """Fill the whole canvas with ``color``."""
        self._pixels = array("L", [color & 0xFFFFFFFF]) * (self.width * self.height)


@dataclass
class Player:
    """Position and facing of the player, in map cells."""

    x_pos: float
    y_pos: float
    dir_x: float
    dir_y: float
    plane_x: float = 0.0
    plane_y: float = 0.0


@dataclass
class Scene:
    """A map, one string per row, and the player on it."""

    map: list[str]
    player: Player = field(default_factory=lambda: Player(0.0, 0.0, 0.0, -1.0))

    @property
    def num_rows(self) -> int:
        return len(self.map)

    @property
    def longest_row(self) -> int:
        return max((len(row) for row in self.map), default=0)

    def cell_size(self) -> int:
        """Side in pixels of one minimap cell, so the map fits the minimap image."""
        biggest_line = max(self.longest_row, self.num_rows)
        if biggest_line == 0:
            raise ValueError("the map is empty")
        size = IMAGE_HEIGHT // biggest_line
        if size == 0:
            raise ValueError("the map is too large for the minimap")
        return size

    def cell(self, x: int, y: int) -> str | None:
        """Map character at column ``x``, row ``y``, or None outside the map."""
        if 0 <= y < self.num_rows and 0 <= x < len(self.map[y]):
            return self.map[y][x]
        return None


def _sign(value: float) -> int:
    return (value > 0) - (value < 0)


def direction_signs(player: Player) -> tuple[int, int]:
    """Signs (-1, 0 or 1) of the player's facing direction on each axis."""
    return _sign(player.dir_x), _sign(player.dir_y)


def corner_blocked(scene: Scene, dx: int, dy: int, x: int, y: int) -> bool:
    """True when a diagonal step into cell (x, y) squeezes between two walls."""

    def wall(cx: int, cy: int) -> bool:
        return scene.cell(cx, cy) == WALL

    if dx == 1 and dy == 1:
        return y > 0 and x > 0 and wall(x, y - 1) and wall(x - 1, y)
    if dx == 1 and dy == -1:
        return y + 1 < scene.num_rows and x > 0 and wall(x, y + 1) and wall(x - 1, y)
    if dx == -1 and dy == 1:
        return y > 0 and x + 1 < scene.longest_row and wall(x, y - 1) and wall(x + 1, y)
    if dx == -1 and dy == -1:
        return (
            y + 1 < scene.num_rows
            and x + 1 < scene.longest_row
            and wall(x, y + 1)
            and wall(x + 1, y)
        )
    return False


def ray_can_pass(scene: Scene, x: int, y: int) -> bool:
    """True when a ray may continue through cell (x, y)."""
    if x < 0 or y < 0 or x >= scene.longest_row or y >= scene.num_rows:
        return False
    if scene.cell(x, y) == WALL:
        return False
    player = scene.player
    old_x, old_y = int(player.x_pos), int(player.y_pos)
    if old_x != x and old_y != y:
        dx, dy = direction_signs(player)
        if corner_blocked(scene, dx, dy, x, y):
            return False
    return True


def _map_top(canvas: Canvas, scene: Scene, cell: int) -> int:
    """Pixel row where the minimap starts; it sits at the bottom of the canvas."""
    return canvas.height - scene.num_rows * cell


def _draw_square(canvas: Canvas, x_start: int, y_start: int, size: int, color: int) -> None:
    last = size - 1
    for i in range(size):
        for j in range(size):
            edge = i in (0, last) or j in (0, last)
            canvas.put_pixel(x_start + j, y_start + i, GRAY if edge else color)


def draw_grid(canvas: Canvas, scene: Scene) -> None:
    """Draw walls as dark red squares and open cells as white squares."""
    cell = scene.cell_size()
    top = _map_top(canvas, scene, cell)
    longest = scene.longest_row
    for row_index, row in enumerate(scene.map):
        y = top + row_index * cell
        for col in range(longest):
            if col >= len(row):
                break
            ch = row[col]
            if ch == WALL:
                _draw_square(canvas, col * cell, y, cell, DARK_RED)
            elif ch in OPEN_CELLS:
                _draw_square(canvas, col * cell, y, cell, WHITE)


def draw_player(canvas: Canvas, scene: Scene) -> None:
    """Draw the player as a small dark blue square."""
    cell = scene.cell_size()
    player = scene.player
    i_start = int(player.y_pos * cell + _map_top(canvas, scene, cell)) - 2
    j_start = int(player.x_pos * cell) - 2
    for i in range(i_start, i_start + 4):
        for j in range(j_start, j_start + 4):
            canvas.put_pixel(j, i, DARK_BLUE)


def draw_long_line(
    canvas: Canvas, scene: Scene, x: float, y: float, dir_x: float, dir_y: float
) -> None:
    """Draw a dotted ray from map position (x, y) along (dir_x, dir_y) until it is stopped."""
    if dir_x == 0 and dir_y == 0:
        raise ValueError("ray direction must not be zero")
    cell = scene.cell_size()
    top = _map_top(canvas, scene, cell)
    img_x = x * cell + 4 * dir_x
    img_y = y * cell + top + 4 * dir_y
    step = 0
    while ray_can_pass(scene, int(img_x / cell), int((img_y - top) / cell)):
        if step % cell == 0:
            canvas.put_pixel(int(img_x), int(img_y), BLUE)
        step += 1
        img_x += dir_x
        img_y += dir_y


def draw_rays(canvas: Canvas, scene: Scene) -> None:
    """Draw a fan of rays spread around the player's facing direction."""
    player = scene.player
    cos_start, sin_start = math.cos(RAY_START_ANGLE), math.sin(RAY_START_ANGLE)
    ray_x = player.dir_x * cos_start - player.dir_y * sin_start
    ray_y = player.dir_x * sin_start + player.dir_y * cos_start
    cos_step, sin_step = math.cos(RAY_STEP_ANGLE), math.sin(RAY_STEP_ANGLE)
    for _ in range(RAY_COUNT):
        draw_long_line(canvas, scene, player.x_pos, player.y_pos, ray_x, ray_y)
        ray_x, ray_y = ray_x * cos_step - ray_y * sin_step, ray_x * sin_step + ray_y * cos_step


def render(canvas: Canvas, scene: Scene) -> Canvas:
    """Draw the grid, the player and the rays; returns the canvas."""
    draw_grid(canvas, scene)
    draw_player(canvas, scene)
    draw_rays(canvas, scene)
    return canvas