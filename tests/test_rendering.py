import pygame
import pytest

from refboard.config import AssetConfig
from refboard.resources import ResourceManager
from refboard.sprites import CardSprite


@pytest.fixture
def resources(tmp_path):
    return ResourceManager(AssetConfig(root=tmp_path))


def test_missing_image_loads_as_none(resources, caplog):
    with caplog.at_level("WARNING"):
        assert resources.load_image("nope.png") is None
    assert "nope.png" in caplog.text


def test_require_raises_for_missing_asset(resources):
    with pytest.raises(FileNotFoundError):
        resources.require("missing.png")


def test_load_image_from_disk_is_cached(resources, tmp_path):
    image_path = tmp_path / "images" / "red.png"
    resources.ensure_directories()
    source = pygame.Surface((4, 4))
    source.fill((255, 0, 0))
    pygame.image.save(source, str(image_path))

    first = resources.load_image("red.png")
    second = resources.load_image(image_path)

    assert first is not None
    assert first.get_size() == (4, 4)
    assert second is first


def test_render_face_uses_card_size(resources, store):
    card = store.get(store.create("", (0, 0), size=(40, 30)))
    sprite = CardSprite(resources)

    face = sprite.render_face(card)

    assert face.get_size() == (40, 30)
    assert face.get_at((20, 15))[:3] == CardSprite.PLACEHOLDER_COLOR


def test_draw_rotated_card(resources, store):
    card = store.get(store.create("", (10, 10), size=(40, 40)))
    card.rotation = 0.5
    surface = pygame.Surface((100, 100))
    surface.fill((0, 0, 0))

    CardSprite(resources).draw(surface, card)

    assert surface.get_at(card.center)[:3] == CardSprite.PLACEHOLDER_COLOR


def test_faces_of_same_image_at_different_sizes_stay_cached(resources, store):
    small = store.get(store.create("", (0, 0), size=(40, 30)))
    large = store.get(store.create("", (0, 0), size=(80, 60)))
    sprite = CardSprite(resources)

    small_face = sprite.render_face(small)
    large_face = sprite.render_face(large)

    assert sprite.render_face(small) is small_face
    assert sprite.render_face(large) is large_face


def test_resized_card_gets_a_new_face(resources, store):
    card = store.get(store.create("", (0, 0), size=(40, 30)))
    sprite = CardSprite(resources)
    first = sprite.render_face(card)

    card.size = (50, 30)

    assert sprite.render_face(card).get_size() == (50, 30)
    assert sprite.render_face(card) is not first
