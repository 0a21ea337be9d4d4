"""Command-line entry point: load a map and play it in a window."""

from __future__ import annotations

import sys
from typing import Optional, Sequence

from pixelfall.game import Game, Key
from pixelfall.mapfile import MapError, load_map

DEFAULT_TEXTURE_DIR = "texture"
EXIT_FAILURE = 255
TICKS_PER_FRAME = 1000
FRAMES_PER_SECOND = 60
WINDOW_TITLE = "pixelfall"


def _fail(message: str) -> int:
    print(f"Error\n{message}", end="")
    return EXIT_FAILURE


def _run(game: Game, textures) -> int:
    import pygame

    from pixelfall.render import Renderer

    key_map = {
        pygame.K_ESCAPE: Key.ESCAPE,
        pygame.K_UP: Key.UP,
        pygame.K_DOWN: Key.DOWN,
        pygame.K_RIGHT: Key.RIGHT,
        pygame.K_LEFT: Key.LEFT,
    }
    renderer = Renderer(game, textures)
    pygame.init()
    try:
        try:
            screen = pygame.display.set_mode(renderer.window_size(), pygame.RESIZABLE)
        except pygame.error:
            return _fail("Can't open the window")
        pygame.display.set_caption(WINDOW_TITLE)
        clock = pygame.time.Clock()
        while game.running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    game.running = False
                elif event.type == pygame.KEYDOWN:
                    game.handle_key(key_map.get(event.key, event.key))
                elif event.type == pygame.VIDEORESIZE:
                    game.resize(event.h, event.w)
            for _ in range(TICKS_PER_FRAME):
                if not game.running:
                    break
                game.tick()
            renderer.draw(screen)
            pygame.display.flip()
            clock.tick(FRAMES_PER_SECOND)
    finally:
        pygame.quit()
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the game on the map file named by the single argument."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) > 1:
        return _fail("Too much arguments !")
    if len(args) < 1:
        return _fail("Too few arguments !")
    try:
        game_map = load_map(args[0])
    except MapError as exc:
        return _fail(str(exc))
    game = Game.from_map(game_map)

    import pygame

    from pixelfall.render import load_textures

    try:
        textures = load_textures(DEFAULT_TEXTURE_DIR)
    except (OSError, pygame.error) as exc:
        return _fail(f"Can't load textures: {exc}")
    return _run(game, textures)


if __name__ == "__main__":
    sys.exit(main())