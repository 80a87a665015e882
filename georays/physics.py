"""Player physics and object collision handling while a level is played."""

from __future__ import annotations

import enum
import re
from dataclasses import dataclass, field

from georays.objects import COLOR_TRIGGER_ID, CYAN, LIME, MAGENTA, RED, Color, LevelObject, Rect

GROUND_Y = 500.0
CAMERA_LOW_Y = 501.0
CAMERA_LOW_RESET = 502.0
CAMERA_HIGH_Y = 50.0
CAMERA_HIGH_RESET = 49.0
MAX_FALL_SPEED = 20.0
SHIP_MAX_SPEED = 10.0
ROTATION_STEP = 5.0
BALL_GRAVITY_DAMPING = 0.2

_BLOCK_IDS = frozenset({2, 10, 11, 12, 13, 14})
_PAD_IDS = frozenset({3, 21})
_ORB_IDS = frozenset({4, 22, 26})
_GRAVITY_PORTAL_IDS = frozenset({5, 6})
_MODE_PORTAL_IDS = frozenset({8, 9, 24, 25})
_SPEED_PORTAL_IDS = frozenset({17, 18, 19, 20})
_END_ID = 15

_UINT_RE = re.compile(r"\+?[0-9]+")


class GameMode(enum.Enum):
    """The form the player currently takes."""

    CUBE = "cube"
    SHIP = "ship"
    BALL = "ball"
    WAVE = "wave"


class GameState(enum.Enum):
    """The state of the game as far as level play is concerned."""

    PLAYING = "playing"
    LEVEL_COMPLETE = "level_complete"


@dataclass(frozen=True)
class PhysicsSettings:
    """Fixed tuning values for the player physics."""

    default_jump_force: float
    default_gravity: float
    default_movement_speed: float
    ship_power: float
    ship_falling_speed: float
    wave_velocity: float


@dataclass
class PlayerState:
    """Everything about the player that changes from frame to frame."""

    player: Rect
    gravity: float
    jump_force: float
    movement_speed: float
    velocity_y: float = 0.0
    gamemode: GameMode = GameMode.CUBE
    is_on_ground: bool = False
    on_orb: bool = False
    touching_block_ceiling: bool = False
    touching_color_trigger: bool = False
    kill_player: bool = False
    world_offset: float = 0.0
    rotation: float = 0.0
    player_cam_y: int = 0
    moving_direction: int = 0
    icon_color: Color = LIME
    game_state: GameState = GameState.PLAYING


@dataclass
class LevelColors:
    """Background and ground colours, changed by colour triggers."""

    bg: tuple[int, int, int]
    ground: tuple[int, int, int]


@dataclass
class Progress:
    """The player's saved progress: stars and beaten levels."""

    stars: int = 0
    levels_completed: list[bool] = field(default_factory=list)
    online_levels_beaten: list[int] = field(default_factory=list)


@dataclass(frozen=True)
class LevelContext:
    """Facts about the level being played."""

    current_mode: str = "1"
    in_custom_level: bool = False
    main_level_difficulties: tuple[int, ...] = ()
    current_level: int = 0
    level_id: str = ""
    online_level_rated: bool = False
    online_level_diff: int = 0


def _parse_uint(text: str, high: int) -> int:
    if not _UINT_RE.fullmatch(text):
        raise ValueError(f"invalid integer: {text!r}")
    value = int(text)
    if value > high:
        raise ValueError(f"integer out of range: {text!r}")
    return value


def physics_handle(
    state: PlayerState,
    settings: PhysicsSettings,
    space_down: bool,
    mouse_down: bool,
    current_mode: str,
    right_down: bool = False,
    left_down: bool = False,
) -> None:
    """Advance the player by one frame: input, movement, gravity, ground and camera.

    ``current_mode`` "1" scrolls automatically; "2" is platformer mode, moved
    with the right and left keys.
    """
    held = space_down or mouse_down
    mode = state.gamemode

    if mode is GameMode.CUBE:
        if state.is_on_ground and held:
            state.velocity_y = state.jump_force
            state.is_on_ground = False
    elif mode is GameMode.SHIP:
        if state.touching_block_ceiling:
            state.velocity_y = 0.0
        elif held:
            if state.gravity > 0.0:
                if state.velocity_y > -SHIP_MAX_SPEED:
                    state.velocity_y -= settings.ship_power
            elif state.velocity_y < SHIP_MAX_SPEED:
                state.velocity_y += settings.ship_power
        else:
            if state.gravity > 0.0:
                if state.velocity_y < SHIP_MAX_SPEED:
                    state.velocity_y += settings.ship_falling_speed
            elif state.velocity_y > -SHIP_MAX_SPEED:
                state.velocity_y -= settings.ship_falling_speed
    elif mode is GameMode.BALL:
        if state.is_on_ground and held:
            state.gravity = -state.gravity
            state.is_on_ground = False
    elif mode is GameMode.WAVE:
        speed = settings.wave_velocity * state.movement_speed
        going_up = held if state.gravity > 0.0 else not held
        state.velocity_y = -speed if going_up else speed

    if current_mode == "1":
        state.world_offset -= state.movement_speed
    elif current_mode == "2":
        if right_down:
            state.world_offset -= state.movement_speed
            state.moving_direction = 1
        elif left_down:
            state.world_offset += state.movement_speed
            state.moving_direction = 2
        else:
            state.moving_direction = 0

    if mode in (GameMode.CUBE, GameMode.BALL) and -MAX_FALL_SPEED < state.velocity_y < MAX_FALL_SPEED:
        if mode is GameMode.CUBE:
            state.velocity_y += state.gravity
        else:
            damping = BALL_GRAVITY_DAMPING if state.gravity > 0.0 else -BALL_GRAVITY_DAMPING
            state.velocity_y += state.gravity - damping

    player = state.player
    player.y += state.velocity_y

    ground = GROUND_Y - state.player_cam_y
    if player.y >= ground:
        player.y = ground
        state.velocity_y = 0.0
        state.is_on_ground = True
        state.rotation = 0.0
    else:
        step = ROTATION_STEP if state.gravity > 0.0 else -ROTATION_STEP
        if state.moving_direction == 1 or current_mode == "1":
            state.rotation += step
        elif state.moving_direction == 2:
            state.rotation -= step
        else:
            state.rotation = 0.0

    if player.y >= CAMERA_LOW_Y:
        state.player_cam_y += int(state.velocity_y)
        player.y = CAMERA_LOW_RESET

    if player.y <= CAMERA_HIGH_Y:
        state.player_cam_y += int(state.velocity_y)
        player.y = CAMERA_HIGH_RESET


def _portal_rect(obj: LevelObject, world_offset: float, cam_y: int) -> Rect:
    upright = obj.rotation in (0, 180, -180)
    return Rect(
        x=obj.x + world_offset + (10.0 if upright else -20.0),
        y=obj.y - (11.0 if upright else -11.0) - cam_y,
        width=20.0 if upright else 80.0,
        height=80.0 if upright else 20.0,
    )


def _flip_gravity(state: PlayerState, settings: PhysicsSettings, launch: float) -> None:
    if state.gravity > 0.0:
        state.velocity_y = -launch
        state.gravity = -settings.default_gravity
        state.jump_force = -settings.default_jump_force
    else:
        state.velocity_y = launch
        state.gravity = settings.default_gravity
        state.jump_force = settings.default_jump_force


def _block_collision(
    obj: LevelObject,
    state: PlayerState,
    centered: Rect,
    small: Rect,
    current_mode: str,
    mouse_down: bool,
) -> None:
    cam = state.player_cam_y
    player = state.player

    if current_mode == "1":
        side = Rect(obj.x + state.world_offset, obj.y + 10.0 - cam, 3.0, 20.0)
        state.kill_player |= small.collides(side)
    elif centered.collides(Rect(obj.x + state.world_offset, obj.y + 20.0 - cam, 3.0, 3.0)):
        state.world_offset = -(obj.x - 220.0)
    elif centered.collides(Rect(obj.x + 40.0 + state.world_offset, obj.y + 20.0 - cam, 3.0, 3.0)):
        state.world_offset = -(obj.x - 140.0)

    top = Rect(obj.x + state.world_offset + 3.0, obj.y + 1.0 - cam, 37.0, 3.0)
    if centered.collides(top):
        state.is_on_ground = True
        state.rotation = 0.0
        if not mouse_down:
            player.y = obj.y - 19.0 - cam
            state.velocity_y = 0.0
        elif state.gravity < 0.0:
            state.touching_block_ceiling = True
            player.y = obj.y - 21.0 - cam
    else:
        state.touching_block_ceiling = False

    bottom = Rect(obj.x + state.world_offset + 3.0, obj.y + 38.0 - cam, 37.0, 3.0)
    if centered.collides(bottom):
        state.is_on_ground = True
        state.rotation = 0.0
        if not mouse_down:
            player.y = obj.y + 61.0 - cam
            state.velocity_y = 0.0
        elif state.gravity > 0.0:
            state.touching_block_ceiling = True
            player.y = obj.y + 61.0 - cam
    else:
        state.touching_block_ceiling = False

    if centered.collides(Rect(obj.x + state.world_offset + 80.0, obj.y - cam + 10.0, 3.0, 20.0)):
        state.is_on_ground = False


def _finish_level(state: PlayerState, progress: Progress, context: LevelContext) -> None:
    level = context.current_level
    if not context.in_custom_level and not progress.levels_completed[level]:
        progress.stars += context.main_level_difficulties[level]
        progress.levels_completed[level] = True
    elif context.online_level_rated and context.in_custom_level:
        level_id = _parse_uint(context.level_id, 2**16 - 1)
        if level_id not in progress.online_levels_beaten:
            progress.stars += context.online_level_diff
            progress.online_levels_beaten.append(level_id)
    state.game_state = GameState.LEVEL_COMPLETE


def _apply_color_trigger(obj: LevelObject, state: PlayerState, colors: LevelColors) -> None:
    props = obj.properties
    if props is None or len(props) < 4:
        raise ValueError("colour trigger needs four properties")
    red, green, blue, kind = (_parse_uint(p, 255) for p in props[:4])
    if state.touching_color_trigger:
        return
    if kind == 1:
        colors.bg = (red, green, blue)
    elif kind == 2:
        colors.ground = (red, green, blue)


def hitbox_collision(
    obj: LevelObject,
    state: PlayerState,
    centered_player: Rect,
    small_player: Rect,
    settings: PhysicsSettings,
    colors: LevelColors,
    progress: Progress,
    context: LevelContext,
    mouse_down: bool,
    space_down: bool,
) -> None:
    """Apply the effect of touching ``obj`` to the player, colours and progress."""
    cam = state.player_cam_y
    centered = centered_player

    if obj.id == 1:
        spike = Rect(obj.x + state.world_offset + 20.0, obj.y + 20.0 - cam, 10.0, 20.0)
        state.kill_player |= centered.collides(spike)

    if obj.id in _BLOCK_IDS:
        _block_collision(obj, state, centered, small_player, context.current_mode, mouse_down)

    if obj.id in _PAD_IDS:
        pad = Rect(obj.x + state.world_offset, obj.y + 35.0 - cam, 40.0, 5.0)
        if centered.collides(pad):
            if obj.id == 3:
                state.velocity_y = -15.0 if state.gravity > 0.0 else 15.0
            else:
                _flip_gravity(state, settings, 7.0)
            state.is_on_ground = False

    if obj.id in _ORB_IDS:
        orb = Rect(obj.x - 10.0 + state.world_offset, obj.y - 10.0 - cam, 60.0, 60.0)
        if centered.collides(orb):
            if state.on_orb and (mouse_down or space_down):
                if obj.id == 4:
                    state.velocity_y = -13.0 if state.gravity > 0.0 else 13.0
                elif obj.id == 22:
                    _flip_gravity(state, settings, 7.0)
                else:
                    state.kill_player = True
                state.on_orb = False
            state.is_on_ground = False

    if obj.id in _GRAVITY_PORTAL_IDS:
        if centered.collides(_portal_rect(obj, state.world_offset, cam)):
            sign = -1.0 if obj.id == 5 else 1.0
            state.jump_force = sign * settings.default_jump_force
            state.gravity = sign * settings.default_gravity
            state.is_on_ground = False

    if obj.id == 7:
        low = obj.rotation > 145 or obj.rotation < -145
        saw = Rect(obj.x + state.world_offset + 20.0, obj.y + (5.0 if low else 25.0) - cam, 10.0, 10.0)
        state.kill_player |= centered.collides(saw)

    if obj.id in _MODE_PORTAL_IDS:
        if centered.collides(_portal_rect(obj, state.world_offset, cam)):
            change = {
                8: (GameMode.CUBE, LIME),
                9: (GameMode.SHIP, MAGENTA),
                24: (GameMode.BALL, RED),
            }.get(obj.id)
            if change is None and context.current_mode == "1":
                change = (GameMode.WAVE, CYAN)
            if change is not None:
                state.gamemode, state.icon_color = change
                state.is_on_ground = False

    if obj.id == _END_ID:
        if centered.collides(Rect(obj.x + state.world_offset, obj.y - cam, 40.0, 40.0)):
            _finish_level(state, progress, context)

    if obj.id in _SPEED_PORTAL_IDS:
        if centered.collides(_portal_rect(obj, state.world_offset, cam)):
            factor = {17: 1.0, 18: 1.4, 19: 1.8}.get(obj.id, 0.8)
            state.movement_speed = settings.default_movement_speed * factor

    if obj.id == COLOR_TRIGGER_ID:
        if centered.collides(Rect(obj.x + state.world_offset, obj.y - cam, 40.0, 40.0)):
            _apply_color_trigger(obj, state, colors)
    else:
        state.touching_color_trigger = False