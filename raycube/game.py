"""The game loop: state, input handling and drawing of each frame."""

from __future__ import annotations

from pathlib import Path
from typing import Mapping

import pygame

from raycube.animation import FRAME_COUNT, TORCH_POSITION, TorchAnimation
from raycube.gridmap import find_player, start_angle, validate_map
from raycube.player import Key, spawn_player
from raycube.raycast import (
    SCREEN_HEIGHT,
    SCREEN_WIDTH,
    Hit,
    Side,
    cast_view,
    texture_column,
)
from raycube.scene import Scene, SceneError
from raycube.shading import Texture, wall_strip

DOOR_TEXTURE = "tex/Door.png"
TORCH_DIRECTORY = "tex/torch_frames"
TITLE = "cub3D"
MOUSE_SENSITIVITY = 0.4
FRAME_RATE = 60

_TEXTURE_NAMES = ("north", "south", "west", "east", "door")
_SIDE_NAMES = {
    Side.NORTH: "north",
    Side.SOUTH: "south",
    Side.WEST: "west",
    Side.EAST: "east",
}
_KEYS = {
    pygame.K_w: Key.W,
    pygame.K_a: Key.A,
    pygame.K_s: Key.S,
    pygame.K_d: Key.D,
    pygame.K_LEFT: Key.LEFT,
    pygame.K_RIGHT: Key.RIGHT,
    pygame.K_ESCAPE: Key.ESCAPE,
}


def _rgba(color: int) -> tuple[int, int, int, int]:
    return (color >> 24) & 0xFF, (color >> 16) & 0xFF, (color >> 8) & 0xFF, color & 0xFF


def _load_texture(path: str) -> Texture:
    surface = pygame.image.load(path)
    width, height = surface.get_size()
    return Texture.from_rgba(width, height, pygame.image.tobytes(surface, "RGBA"))


def _load_textures(scene: Scene) -> dict[str, Texture]:
    paths = {
        "north": scene.north,
        "south": scene.south,
        "west": scene.west,
        "east": scene.east,
        "door": DOOR_TEXTURE,
    }
    try:
        return {name: _load_texture(path) for name, path in paths.items()}
    except (OSError, pygame.error, ValueError) as exc:
        raise SceneError("ERROR! LOADING TEXTURES FAIL...") from exc


def _load_torch() -> TorchAnimation:
    directory = Path(TORCH_DIRECTORY)
    try:
        frames = [
            pygame.image.load(str(directory / f"frame{index:02d}.png"))
            for index in range(FRAME_COUNT)
        ]
    except (OSError, pygame.error) as exc:
        raise SceneError("ERROR al convertir PNG en texturas!") from exc
    return TorchAnimation(frames)


class Game:
    """A running scene: the validated map, the player and the wall textures.

    With ``bonus`` the map may hold doors, the player collides with walls,
    the mouse turns the view and a torch is drawn over the walls.
    """

    def __init__(
        self,
        scene: Scene,
        bonus: bool = False,
        textures: Mapping[str, Texture] | None = None,
        torch: TorchAnimation | None = None,
    ) -> None:
        self.scene = scene
        self.bonus = bonus
        tile_x, tile_y, orientation, rows = find_player(scene.rows)
        validate_map(rows, scene.columns, allow_doors=bonus)
        self.rows = rows
        self.columns = scene.columns
        if textures is None:
            textures = _load_textures(scene)
        missing = [name for name in _TEXTURE_NAMES if name not in textures]
        if missing:
            raise SceneError("ERROR! LOADING TEXTURES FAIL...")
        self.textures = dict(textures)
        self.player = spawn_player(tile_x, tile_y, start_angle(orientation))
        self.ceiling_color = scene.ceiling_color
        self.floor_color = scene.floor_color
        self.torch = torch
        self.running = True

    def handle_key(self, key: Key, pressed: bool) -> bool:
        """Apply a key press or release; return True when the game should stop."""
        if pressed:
            if self.player.press(key):
                self.running = False
                return True
        else:
            self.player.release(key)
        return False

    def mouse_look(self, offset_x: int) -> None:
        """Turn the view by a horizontal mouse offset from the window centre."""
        self.player.angle += offset_x / (SCREEN_HEIGHT // 2) * MOUSE_SENSITIVITY

    def update(self) -> None:
        """Advance the player by one frame."""
        self.player.step(self.rows, self.columns, collide=self.bonus)

    def _texture_for(self, hit: Hit) -> Texture:
        if hit.door:
            return self.textures["door"]
        return self.textures[_SIDE_NAMES[hit.side]]

    def render_frame(self, surface: pygame.Surface) -> None:
        """Draw ceiling, floor, walls and, if present, the torch onto ``surface``."""
        half = SCREEN_HEIGHT // 2
        surface.fill(_rgba(self.ceiling_color), (0, 0, SCREEN_WIDTH, half))
        surface.fill(_rgba(self.floor_color), (0, half, SCREEN_WIDTH, SCREEN_HEIGHT - half))
        player = self.player
        hits = cast_view(self.rows, self.columns, player.x, player.y, player.angle)
        for screen_x, hit in enumerate(hits):
            texture = self._texture_for(hit)
            column = texture_column(hit, texture.width)
            for screen_y, color in wall_strip(texture, hit.distance, column):
                if 0 <= screen_y < SCREEN_HEIGHT:
                    surface.set_at((screen_x, screen_y), _rgba(color))
        if self.torch is not None:
            surface.blit(self.torch.tick(), TORCH_POSITION)

    def run(self) -> None:
        """Open the window and play until it is closed or escape is pressed."""
        center = (SCREEN_WIDTH // 2, SCREEN_HEIGHT // 2)
        pygame.init()
        try:
            screen = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT))
            pygame.display.set_caption(TITLE)
            if self.bonus:
                if self.torch is None:
                    self.torch = _load_torch()
                pygame.mouse.set_visible(False)
                pygame.event.set_grab(True)
                pygame.mouse.set_pos(center)
            clock = pygame.time.Clock()
            self.running = True
            while self.running:
                for event in pygame.event.get():
                    if event.type == pygame.QUIT:
                        self.running = False
                    elif event.type in (pygame.KEYDOWN, pygame.KEYUP):
                        key = _KEYS.get(event.key)
                        if key is not None:
                            self.handle_key(key, event.type == pygame.KEYDOWN)
                    elif event.type == pygame.MOUSEMOTION and self.bonus:
                        offset = event.pos[0] - center[0]
                        if offset:
                            self.mouse_look(offset)
                            pygame.mouse.set_pos(center)
                if not self.running:
                    break
                self.update()
                self.render_frame(screen)
                pygame.display.flip()
                clock.tick(FRAME_RATE)
        finally:
            pygame.quit()