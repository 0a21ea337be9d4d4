import pygame
import pytest

from pixelfall.game import TEXTURE_SIZE, Game, Key
from pixelfall.mapfile import parse_map
from pixelfall.render import TEXTURE_FILES, Renderer, load_textures

CORRIDOR = "1111111\n1P0C0E1\n1111111\n"

COLORS = {
    "wall": pygame.Color(10, 10, 10),
    "player_right": pygame.Color(200, 0, 0),
    "player_left": pygame.Color(0, 200, 0),
    "coin": pygame.Color(200, 200, 0),
    "coin_2": pygame.Color(190, 190, 0),
    "exit": pygame.Color(0, 0, 200),
    "fall_right": pygame.Color(100, 0, 0),
    "fall_left": pygame.Color(0, 100, 0),
    "exit_open": pygame.Color(0, 200, 200),
    "background": pygame.Color(50, 50, 50),
}


def _textures():
    result = {}
    for name, color in COLORS.items():
        surface = pygame.Surface((TEXTURE_SIZE, TEXTURE_SIZE))
        surface.fill(color)
        result[name] = surface
    return result


def _pixel(surface, tx, ty):
    return surface.get_at((tx * TEXTURE_SIZE + 1, ty * TEXTURE_SIZE + 1))


@pytest.fixture
def scene():
    game = Game.from_map(parse_map(CORRIDOR))
    renderer = Renderer(game, _textures())
    surface = pygame.Surface(renderer.window_size())
    return game, renderer, surface


def test_window_size_matches_game(scene):
    game, renderer, _ = scene
    assert renderer.window_size() == (game.window_width, game.window_height)


def test_draw_tiles_and_player(scene):
    game, renderer, surface = scene
    renderer.draw(surface)
    assert _pixel(surface, 0, 0) == COLORS["wall"]
    assert _pixel(surface, 1, 1) == COLORS["player_right"]
    assert _pixel(surface, 2, 1) == COLORS["background"]
    assert _pixel(surface, 3, 1) == COLORS["coin"]
    assert _pixel(surface, game.exit_x, game.exit_y) == COLORS["exit"]


def test_exit_opens_after_collecting(scene):
    game, renderer, surface = scene
    game.handle_key(Key.RIGHT)
    game.handle_key(Key.RIGHT)
    game.tick()
    renderer.draw(surface)
    assert _pixel(surface, game.exit_x, game.exit_y) == COLORS["exit_open"]


def test_player_texture_follows_direction_and_jump(scene):
    game, renderer, surface = scene
    game.handle_key(Key.LEFT)
    renderer.draw(surface)
    assert _pixel(surface, 1, 1) == COLORS["player_left"]
    game.jumping = True
    renderer.draw(surface)
    assert _pixel(surface, 1, 1) == COLORS["fall_left"]
    game.handle_key(Key.RIGHT)
    renderer.draw(surface)
    assert _pixel(surface, 2, 1) == COLORS["fall_right"]
    assert _pixel(surface, 1, 1) == COLORS["background"]


def test_renderer_requires_all_textures():
    game = Game.from_map(parse_map(CORRIDOR))
    textures = _textures()
    del textures["wall"]
    with pytest.raises(ValueError):
        Renderer(game, textures)


XPM = """/* XPM */
static char *tile[] = {
"2 2 1 1",
". c #FF0000",
"..",
".."
};
"""


def test_load_textures(tmp_path):
    for relative in TEXTURE_FILES.values():
        path = tmp_path / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(XPM)
    textures = load_textures(tmp_path)
    assert set(textures) == set(TEXTURE_FILES)
    wall = textures["wall"]
    assert wall.get_size() == (2, 2)
    color = wall.get_at((0, 0))
    assert (color.r, color.g, color.b) == (255, 0, 0)


def test_load_textures_missing_dir(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_textures(tmp_path / "nowhere")