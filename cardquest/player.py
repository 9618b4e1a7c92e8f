"""The player character: movement, jumping and card throwing."""

from __future__ import annotations

import math
from collections.abc import Sequence
from enum import Enum, auto

from cardquest.characters import BaseCharacter, Card
from cardquest.collision import ShortForm, check_hit_side, short_form_from_bounds
from cardquest.gamepad import Button, Input
from cardquest.model import Model
from cardquest.textures import TextureManager
from cardquest.transform import ViewProjection, WorldTransform
from cardquest.vecmath import (
    Vector3,
    add,
    make_rotate_matrix,
    normalize,
    scale,
    transform_normal,
)

__all__ = ["Behavior", "Player"]

GRAVITY_ACCELERATION = 0.06
CHARACTER_SPEED = 0.2
JUMP_FIRST_SPEED = 1.1
CARD_SPEED = 1.0
CARD_HEIGHT_OFFSET = 5.0
ATTACK_STEP = 0.05
ATTACK_DURATION = 2.6
MOVE_LIMIT_X = -50.0
MOVE_LIMIT_Z = 10.0


class Behavior(Enum):
    """What the player is currently doing."""

    ROOT = auto()
    ATTACK = auto()
    JUMP = auto()


def _bounds_around(translation: Vector3) -> tuple[Vector3, Vector3]:
    lower = Vector3(translation.x - 1.0, translation.y, translation.z - 1.0)
    upper = Vector3(translation.x + 1.0, translation.y + 3.0, translation.z + 1.0)
    return lower, upper


def _stage1_blocks() -> tuple[ShortForm, ...]:
    return (
        ShortForm(
            min_left_bottom=Vector3(-22.0, 0.0, -5.0),
            min_right_bottom=Vector3(-27.0, 0.0, -5.0),
            min_left_top=Vector3(-22.0, 10.0, -5.0),
            min_right_top=Vector3(-27.0, 10.0, -5.0),
            max_left_bottom=Vector3(-22.0, 0.0, 5.0),
            max_right_bottom=Vector3(-27.0, 0.0, 5.0),
            max_left_top=Vector3(-22.0, 10.0, 5.0),
            max_right_top=Vector3(-27.0, 10.0, 5.0),
        ),
    )


class Player(BaseCharacter):
    """A four-part character (body, head, two arms) driven by gamepad 0.

    The collision box is taken from the body's position when the player is
    created; ``player_from_min``/``player_from_max`` follow the body each frame.
    """

    PART_COUNT = 4

    def __init__(
        self,
        input_hub: Input | None = None,
        textures: TextureManager | None = None,
    ) -> None:
        super().__init__()
        self._input = input_hub or Input.instance()
        self._textures = textures
        self.parts = [WorldTransform() for _ in range(self.PART_COUNT)]
        self.player_from_min, self.player_from_max = _bounds_around(self.parts[0].translation)
        self.short_form = short_form_from_bounds(self.player_from_min, self.player_from_max)
        self.checked = False
        self.card_thrown = False
        self.attack_timer = 0.0
        self.velocity = Vector3()
        self.behavior = Behavior.ROOT
        self._behavior_request: Behavior | None = None
        self._view_projection: ViewProjection | None = None
        self._cards: list[Card] = []
        self._initializers = {
            Behavior.ROOT: self.behavior_root_initialize,
            Behavior.ATTACK: self.behavior_attack_initialize,
            Behavior.JUMP: self.behavior_jump_initialize,
        }
        self._updaters = {
            Behavior.ROOT: self.behavior_root_update,
            Behavior.ATTACK: self.behavior_attack_update,
            Behavior.JUMP: self.behavior_jump_update,
        }

    @property
    def body(self) -> WorldTransform:
        """The body transform that the other parts hang from."""
        return self.parts[0]

    @property
    def cards(self) -> tuple[Card, ...]:
        """Cards currently in flight."""
        return tuple(self._cards)

    def set_view_projection(self, view_projection: ViewProjection | None) -> None:
        """The camera whose rotation turns stick input into world movement."""
        self._view_projection = view_projection

    def initialize(self, models: Sequence[Model]) -> None:
        super().initialize(models)
        body, head, left_arm, right_arm = self.parts
        for part in (head, left_arm, right_arm):
            part.parent = body

        body.scale = Vector3(3.0, 3.0, 3.0)
        body.rotation = Vector3()
        body.translation = Vector3()

        head.scale = Vector3(1.0, 1.0, 1.0)
        head.rotation = Vector3()
        head.translation = Vector3(0.0, 1.57, 0.0)

        self._reset_arms(Vector3())

        for part in self.parts:
            part.initialize()

    def _reset_arms(self, rotation: Vector3) -> None:
        left_arm, right_arm = self.parts[2], self.parts[3]
        left_arm.scale = Vector3(1.0, 1.0, 1.0)
        left_arm.rotation = rotation.copy()
        left_arm.translation = Vector3(-0.51, 1.26, 0.0)
        right_arm.scale = Vector3(1.0, 1.0, 1.0)
        right_arm.rotation = rotation.copy()
        right_arm.translation = Vector3(0.51, 1.26, 0.0)

    def update(self) -> None:
        self._cards = [card for card in self._cards if not card.is_dead]

        if self._behavior_request is not None:
            self.behavior = self._behavior_request
            self._initializers[self.behavior]()
            self._behavior_request = None

        self._updaters[self.behavior]()

        self.velocity = add(self.velocity, Vector3(0.0, -GRAVITY_ACCELERATION, 0.0))

        body = self.parts[0]
        if body.translation.y < 0.0:
            body.translation.y = 0.0
            self._behavior_request = Behavior.ROOT

        self.player_from_min, self.player_from_max = _bounds_around(body.translation)

        self.hit_judgment_stage1()

        for part in self.parts:
            part.update_matrix()

        for card in self._cards:
            card.update()

    def draw(self, view_projection: ViewProjection) -> None:
        if len(self.models) < self.PART_COUNT:
            raise RuntimeError(f"player needs {self.PART_COUNT} models to draw")
        for model, part in zip(self.models, self.parts):
            model.draw(part, view_projection)
        for card in self._cards:
            card.draw(view_projection)

    def behavior_root_update(self) -> None:
        """Walk with the left stick, jump with A, throw cards with the right shoulder."""
        super().update()
        self.attack()

        body = self.parts[0]
        state = self._input.joystick_state(0)
        if state is not None:
            if self._view_projection is None:
                raise RuntimeError("player has no view projection to move relative to")
            stick = state.left_stick()
            velocity = Vector3(stick.x, 0.0, stick.y)

            if state.buttons == Button.B:
                self.checked = True
            if state.buttons == Button.A:
                self._behavior_request = Behavior.JUMP

            velocity = scale(CHARACTER_SPEED, normalize(velocity))
            rotation = make_rotate_matrix(self._view_projection.rotation)
            self.velocity = transform_normal(velocity, rotation)

            if body.translation.x <= MOVE_LIMIT_X:
                body.translation.x = MOVE_LIMIT_X
            if body.translation.z >= MOVE_LIMIT_Z:
                body.translation.z = MOVE_LIMIT_Z
            if body.translation.z <= -MOVE_LIMIT_Z:
                body.translation.z = -MOVE_LIMIT_Z

            if self.velocity.x != 0 or self.velocity.z != 0:
                body.rotation.y = math.atan2(self.velocity.x, self.velocity.z)

        for part in self.parts:
            body.translation = add(body.translation, self.velocity)
            part.update_matrix()

    def behavior_attack_update(self) -> None:
        self.attack_timer += ATTACK_STEP
        if self.attack_timer >= ATTACK_DURATION:
            self.attack_timer = 0.0
            self._behavior_request = Behavior.ROOT

    def behavior_root_initialize(self) -> None:
        self._reset_arms(Vector3())

    def behavior_attack_initialize(self) -> None:
        self.parts[0].translation.y = 0.0
        self._reset_arms(Vector3(3.0, 0.0, 0.0))
        self.attack_timer = 0.0

    def behavior_jump_initialize(self) -> None:
        self.parts[0].translation.y = 0.0
        self.parts[2].rotation.x = 0.0
        self.parts[3].rotation.x = 0.0
        self.velocity.y = JUMP_FIRST_SPEED

    def behavior_jump_update(self) -> None:
        body = self.parts[0]
        body.translation = add(body.translation, self.velocity)

    def world_position(self) -> Vector3:
        return self.parts[0].world_position()

    def card_world_position(self) -> Vector3:
        """Where a thrown card starts: above the body."""
        position = self.parts[0].world_position()
        position.y += CARD_HEIGHT_OFFSET
        return position

    def attack(self) -> None:
        """Throw a card on the frame the right shoulder button is pressed."""
        if self._input.joystick_state(0) is None:
            return
        if not self._input.is_triggered(0, Button.RIGHT_SHOULDER):
            return

        direction = -CARD_SPEED if self.velocity.z <= -1 else CARD_SPEED
        velocity = scale(CARD_SPEED, normalize(Vector3(0.0, 0.0, direction)))
        velocity = transform_normal(velocity, self.parts[0].mat_world)

        card = Card(self._textures)
        card.initialize(self.card_world_position(), velocity)
        self._cards.append(card)
        self.card_thrown = True

    def hit_judgment_stage1(self) -> None:
        """Stop the player against the first stage's blocks."""
        for block in _stage1_blocks():
            if check_hit_side(self.short_form, block):
                self.velocity = Vector3()
                self.checked = True

    def reset(self) -> None:
        body = self.parts[0]
        body.scale = Vector3(3.0, 3.0, 3.0)
        body.rotation = Vector3()
        body.translation = Vector3(-40.0, 0.0, 0.0)

    def on_collision(self) -> None:
        self.parts[0].translation.x = 0.0