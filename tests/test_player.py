import math

import pytest

from cardquest.collision import short_form_from_bounds
from cardquest.gamepad import SHRT_MAX, Button, GamepadState, Input
from cardquest.model import create_model_from_obj
from cardquest.player import Behavior, Player
from cardquest.textures import TextureManager
from cardquest.transform import ViewProjection
from cardquest.vecmath import Vector3


@pytest.fixture
def setup():
    hub = Input()
    textures = TextureManager()
    player = Player(hub, textures)
    models = [create_model_from_obj(name) for name in ("body", "head", "left", "right")]
    player.initialize(models)
    view = ViewProjection()
    view.initialize()
    player.set_view_projection(view)
    return player, hub, textures, view, models


def press(hub, **kwargs):
    hub.set_state(0, GamepadState(**kwargs))
    hub.update()


def test_initialize_builds_hierarchy(setup):
    player, *_ = setup
    assert player.parts[0].scale == Vector3(3.0, 3.0, 3.0)
    assert all(part.parent is player.parts[0] for part in player.parts[1:])
    assert player.parts[1].translation == Vector3(0.0, 1.57, 0.0)
    assert player.behavior is Behavior.ROOT


def test_reset_moves_player_to_start(setup):
    player, *_ = setup
    player.parts[0].translation = Vector3(7.0, 2.0, 3.0)
    player.reset()
    assert player.parts[0].translation == Vector3(-40.0, 0.0, 0.0)


def test_on_collision_zeroes_x(setup):
    player, *_ = setup
    player.parts[0].translation = Vector3(12.0, 1.0, 2.0)
    player.on_collision()
    assert player.parts[0].translation == Vector3(0.0, 1.0, 2.0)


def test_jump_initialize_sets_upward_speed(setup):
    player, *_ = setup
    player.behavior_jump_initialize()
    assert player.velocity.y == pytest.approx(1.1)


def test_attack_update_advances_and_wraps(setup):
    player, *_ = setup
    player.behavior_attack_update()
    assert player.attack_timer == pytest.approx(0.05)
    for _ in range(60):
        player.behavior_attack_update()
        assert 0.0 <= player.attack_timer < 2.6


def test_gravity_keeps_player_on_ground(setup):
    player, *_ = setup
    for _ in range(10):
        player.update()
        assert player.parts[0].translation.y == 0.0


def test_stick_forward_moves_along_z(setup):
    player, hub, *_ = setup
    press(hub, thumb_ly=SHRT_MAX)
    player.update()
    assert player.parts[0].translation.z > 0.0
    assert player.parts[0].rotation.y == pytest.approx(0.0)


def test_stick_right_faces_right(setup):
    player, hub, *_ = setup
    press(hub, thumb_lx=SHRT_MAX)
    player.update()
    assert player.parts[0].rotation.y == pytest.approx(math.pi / 2)
    assert player.parts[0].translation.x > 0.0


def test_moving_without_camera_raises():
    hub = Input()
    player = Player(hub, TextureManager())
    player.initialize([create_model_from_obj("m")] * 4)
    press(hub, thumb_lx=SHRT_MAX)
    with pytest.raises(RuntimeError):
        player.update()


def test_jump_button_lifts_player(setup):
    player, hub, *_ = setup
    press(hub, buttons=Button.A)
    player.update()
    assert player.parts[0].translation.y == 0.0
    press(hub, buttons=Button.A)
    player.update()
    assert player.behavior is Behavior.JUMP
    assert player.parts[0].translation.y == pytest.approx(1.1)


def test_right_shoulder_throws_one_card(setup):
    player, hub, textures, *_ = setup
    press(hub, buttons=Button.RIGHT_SHOULDER)
    player.update()
    assert len(player.cards) == 1
    assert player.card_thrown is True
    assert textures.name_of(player.cards[0].texture_handle) == "debugfont.png"
    press(hub, buttons=Button.RIGHT_SHOULDER)
    player.update()
    assert len(player.cards) == 1


def test_cards_expire(setup):
    player, hub, *_ = setup
    press(hub, buttons=Button.RIGHT_SHOULDER)
    player.update()
    for _ in range(Player.PART_COUNT + 20):
        hub.update()
        player.update()
    assert player.cards == ()


def test_card_position_sits_above_body(setup):
    player, hub, *_ = setup
    press(hub, thumb_ly=SHRT_MAX)
    player.update()
    body = player.world_position()
    card = player.card_world_position()
    assert card.x == body.x
    assert card.z == body.z
    assert card.y == pytest.approx(body.y + 5.0)


def test_short_form_is_fixed_at_creation(setup):
    player, hub, *_ = setup
    expected = short_form_from_bounds(Vector3(-1.0, 0.0, -1.0), Vector3(1.0, 3.0, 1.0))
    press(hub, thumb_ly=SHRT_MAX)
    player.update()
    assert player.short_form == expected
    assert player.player_from_min.z == pytest.approx(player.parts[0].translation.z - 1.0)


def test_draw_uses_one_model_per_part(setup):
    player, _, _, view, models = setup
    player.draw(view)
    assert [len(model.draw_calls) for model in models] == [1, 1, 1, 1]


def test_draw_with_too_few_models_raises():
    player = Player(Input(), TextureManager())
    player.initialize([create_model_from_obj("only")])
    with pytest.raises(RuntimeError):
        player.draw(ViewProjection())