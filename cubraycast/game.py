"""Running a scene: the game state, the window loop, screenshots and the command."""

from __future__ import annotations

import sys
from typing import List, Optional, Sequence

from .args import check_arguments
from .errors import CubError, DisplayError
from .image import Image, Textures, write_bmp
from .maths import clamp_resolution
from .minimap import draw_minimap
from .player import Key, key_press, key_release, update_player
from .raycast import cast_all_rays
from .scene import Scene, parse_scene
from .sprites import find_sprites
from .state import Player

SAVE_PATH = "save.bmp"


class Game:
    """A scene being played: frame buffer, player, sprites and textures."""

    def __init__(self, scene: Scene, textures: Textures) -> None:
        self.scene = scene
        self.textures = textures
        config = scene.config
        self.frame = Image(config.width, config.height)
        self.player = Player.spawn(config)
        self.sprites = find_sprites(scene.grid)
        config.sprite_count = len(self.sprites)
        self.rays: List[float] = []

    def render(self) -> List[float]:
        """Draw walls, floor, ceiling and sprites; return each column's wall distance."""
        self.rays = cast_all_rays(
            self.frame, self.scene, self.player, self.sprites, self.textures
        )
        return self.rays

    def step(self) -> Image:
        """Advance the player one tick and draw a full frame with the minimap."""
        update_player(self.player, self.scene.grid)
        self.render()
        draw_minimap(self.frame, self.scene.config, self.scene.grid, self.player)
        return self.frame

    def save_bmp(self, path: str = SAVE_PATH) -> Image:
        """Render the first view and write it as a BMP file."""
        update_player(self.player, self.scene.grid)
        self.render()
        write_bmp(self.frame, path)
        return self.frame


def _pygame_keys(pygame) -> dict:
    return {
        pygame.K_w: Key.W,
        pygame.K_s: Key.S,
        pygame.K_a: Key.A,
        pygame.K_d: Key.D,
        pygame.K_LEFT: Key.LEFT,
        pygame.K_RIGHT: Key.RIGHT,
        pygame.K_ESCAPE: Key.ESCAPE,
    }


def _screen_size() -> tuple[int, int]:
    import pygame

    try:
        pygame.display.init()
        info = pygame.display.Info()
    except pygame.error:
        raise DisplayError(1) from None
    return info.current_w, info.current_h


def run_window(game: Game) -> None:
    """Show the game in a window until it is closed or Escape is pressed."""
    import pygame

    config = game.scene.config
    size = (config.width, config.height)
    try:
        pygame.display.init()
        screen = pygame.display.set_mode(size)
    except pygame.error:
        pygame.quit()
        raise DisplayError(3) from None
    pygame.display.set_caption("cub3D")
    keys = _pygame_keys(pygame)
    clock = pygame.time.Clock()
    running = True
    try:
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    key = keys.get(event.key)
                    if key is not None and not key_press(game.player, key):
                        running = False
                elif event.type == pygame.KEYUP:
                    key = keys.get(event.key)
                    if key is not None:
                        key_release(game.player, key)
            if not running:
                break
            frame = game.step()
            surface = pygame.image.frombuffer(frame.to_rgb_bytes(), size, "RGB")
            screen.blit(surface, (0, 0))
            pygame.display.flip()
            clock.tick(60)
    finally:
        pygame.quit()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Play a scene, or save its first view to save.bmp when given --save."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        path, save = check_arguments(args)
        scene = parse_scene(path)
        config = scene.config
        if not save:
            config.width, config.height = clamp_resolution(
                config.width, config.height, *_screen_size()
            )
        textures = Textures.load(config)
        game = Game(scene, textures)
        if save:
            game.save_bmp(SAVE_PATH)
        else:
            run_window(game)
    except CubError as error:
        print(error.report())
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())