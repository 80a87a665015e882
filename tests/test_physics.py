import pytest

from georays.objects import CYAN, MAGENTA, LevelObject, Rect
from georays.physics import (
    GameMode,
    GameState,
    LevelColors,
    LevelContext,
    PhysicsSettings,
    PlayerState,
    Progress,
    hitbox_collision,
    physics_handle,
)

SETTINGS = PhysicsSettings(
    default_jump_force=-10.0,
    default_gravity=1.0,
    default_movement_speed=5.0,
    ship_power=0.5,
    ship_falling_speed=0.4,
    wave_velocity=1.0,
)

FAR = Rect(-1000.0, -1000.0, 1.0, 1.0)


def make_state(y=300.0, **kwargs):
    return PlayerState(
        player=Rect(200.0, y, 40.0, 40.0),
        gravity=SETTINGS.default_gravity,
        jump_force=SETTINGS.default_jump_force,
        movement_speed=SETTINGS.default_movement_speed,
        **kwargs,
    )


def collide(obj, state, centered, small=FAR, colors=None, progress=None,
            context=None, mouse_down=False, space_down=False):
    colors = colors or LevelColors(bg=(0, 0, 0), ground=(0, 0, 0))
    progress = progress or Progress(levels_completed=[False])
    context = context or LevelContext(main_level_difficulties=(3,))
    hitbox_collision(obj, state, centered, small, SETTINGS, colors, progress,
                     context, mouse_down, space_down)
    return colors, progress


# physics_handle


def test_cube_jump_leaves_ground():
    state = make_state(is_on_ground=True)
    physics_handle(state, SETTINGS, True, False, "1")
    assert not state.is_on_ground
    assert state.velocity_y == pytest.approx(SETTINGS.default_jump_force + SETTINGS.default_gravity)
    assert state.player.y == pytest.approx(300.0 + state.velocity_y)


def test_cube_lands_on_ground():
    state = make_state(y=499.0, velocity_y=5.0)
    physics_handle(state, SETTINGS, False, False, "1")
    assert state.player.y == 500.0
    assert state.velocity_y == 0.0
    assert state.is_on_ground
    assert state.rotation == 0.0


def test_auto_scroll_moves_world():
    state = make_state()
    physics_handle(state, SETTINGS, False, False, "1")
    assert state.world_offset == -SETTINGS.default_movement_speed


@pytest.mark.parametrize(
    "right, left, direction, offset",
    [(True, False, 1, -5.0), (False, True, 2, 5.0), (False, False, 0, 0.0), (True, True, 1, -5.0)],
)
def test_platformer_movement(right, left, direction, offset):
    state = make_state()
    physics_handle(state, SETTINGS, False, False, "2", right, left)
    assert state.moving_direction == direction
    assert state.world_offset == offset


def test_rotation_in_air():
    state = make_state(y=200.0)
    physics_handle(state, SETTINGS, False, False, "1")
    assert state.rotation == 5.0
    state.gravity = -1.0
    physics_handle(state, SETTINGS, False, False, "1")
    assert state.rotation == 0.0


def test_platformer_idle_resets_rotation():
    state = make_state(y=200.0, rotation=30.0)
    physics_handle(state, SETTINGS, False, False, "2")
    assert state.rotation == 0.0


def test_ball_flips_gravity():
    state = make_state(gamemode=GameMode.BALL, is_on_ground=True)
    physics_handle(state, SETTINGS, False, True, "1")
    assert state.gravity == -SETTINGS.default_gravity
    assert not state.is_on_ground


def test_ship_touching_ceiling_stops():
    state = make_state(gamemode=GameMode.SHIP, velocity_y=4.0, touching_block_ceiling=True)
    physics_handle(state, SETTINGS, True, False, "1")
    assert state.velocity_y == 0.0


def test_ship_hold_rises_and_release_falls():
    state = make_state(gamemode=GameMode.SHIP)
    physics_handle(state, SETTINGS, True, False, "1")
    assert state.velocity_y == -SETTINGS.ship_power
    physics_handle(state, SETTINGS, False, False, "1")
    assert state.velocity_y == pytest.approx(-SETTINGS.ship_power + SETTINGS.ship_falling_speed)


def test_ship_speed_is_capped():
    state = make_state(gamemode=GameMode.SHIP, velocity_y=-10.0)
    physics_handle(state, SETTINGS, True, False, "1")
    assert state.velocity_y == -10.0


def test_wave_direction_follows_input():
    state = make_state(gamemode=GameMode.WAVE)
    physics_handle(state, SETTINGS, True, False, "1")
    assert state.velocity_y == -(SETTINGS.wave_velocity * SETTINGS.default_movement_speed)
    physics_handle(state, SETTINGS, False, False, "1")
    assert state.velocity_y == SETTINGS.wave_velocity * SETTINGS.default_movement_speed


def test_camera_follows_upwards():
    state = make_state(y=60.0, gamemode=GameMode.SHIP, velocity_y=-10.0)
    physics_handle(state, SETTINGS, True, False, "1")
    assert state.player.y == 49.0
    assert state.player_cam_y == int(state.velocity_y)


# hitbox_collision


def test_spike_kills_on_contact():
    state = make_state()
    collide(LevelObject(x=100, y=300, id=1), state, Rect(115.0, 315.0, 20.0, 20.0))
    assert state.kill_player


def test_spike_misses():
    state = make_state()
    collide(LevelObject(x=100, y=300, id=1), state, Rect(400.0, 400.0, 20.0, 20.0))
    assert not state.kill_player


def test_block_landing():
    state = make_state(velocity_y=3.0)
    obj = LevelObject(x=100, y=300, id=2)
    collide(obj, state, Rect(110.0, 290.0, 20.0, 20.0))
    assert state.is_on_ground
    assert state.player.y == obj.y - 19
    assert state.velocity_y == 0.0
    assert not state.kill_player


def test_block_side_kills_in_auto_mode():
    state = make_state()
    collide(LevelObject(x=100, y=300, id=2), state, FAR, small=Rect(95.0, 315.0, 10.0, 10.0))
    assert state.kill_player


def test_block_side_pushes_in_platformer():
    state = make_state()
    obj = LevelObject(x=100, y=300, id=2)
    collide(obj, state, Rect(99.0, 319.0, 3.0, 3.0), context=LevelContext(current_mode="2"))
    assert state.world_offset == 220.0 - obj.x
    assert not state.kill_player


@pytest.mark.parametrize("gravity, expected", [(1.0, -15.0), (-1.0, 15.0)])
def test_jump_pad(gravity, expected):
    state = make_state(is_on_ground=True)
    state.gravity = gravity
    collide(LevelObject(x=100, y=300, id=3), state, Rect(110.0, 330.0, 20.0, 20.0))
    assert state.velocity_y == expected
    assert not state.is_on_ground


def test_gravity_pad_flips():
    state = make_state()
    collide(LevelObject(x=100, y=300, id=21), state, Rect(110.0, 330.0, 20.0, 20.0))
    assert state.velocity_y == -7.0
    assert state.gravity == -SETTINGS.default_gravity
    assert state.jump_force == -SETTINGS.default_jump_force


def test_yellow_orb_with_click():
    state = make_state(on_orb=True)
    collide(LevelObject(x=100, y=300, id=4), state, Rect(110.0, 310.0, 20.0, 20.0), space_down=True)
    assert state.velocity_y == -13.0
    assert not state.on_orb


def test_orb_without_click_does_nothing():
    state = make_state(on_orb=True, velocity_y=2.0, is_on_ground=True)
    collide(LevelObject(x=100, y=300, id=4), state, Rect(110.0, 310.0, 20.0, 20.0))
    assert state.velocity_y == 2.0
    assert state.on_orb
    assert not state.is_on_ground


def test_death_orb_kills():
    state = make_state(on_orb=True)
    collide(LevelObject(x=100, y=300, id=26), state, Rect(110.0, 310.0, 20.0, 20.0), mouse_down=True)
    assert state.kill_player


def test_gravity_portal():
    state = make_state()
    collide(LevelObject(x=100, y=300, id=5), state, Rect(110.0, 300.0, 20.0, 20.0))
    assert state.gravity == -SETTINGS.default_gravity
    assert state.jump_force == -SETTINGS.default_jump_force
    collide(LevelObject(x=100, y=300, id=6), state, Rect(110.0, 300.0, 20.0, 20.0))
    assert state.gravity == SETTINGS.default_gravity


def test_ship_portal():
    state = make_state()
    collide(LevelObject(x=100, y=300, id=9), state, Rect(110.0, 300.0, 20.0, 20.0))
    assert state.gamemode is GameMode.SHIP
    assert state.icon_color == MAGENTA


def test_wave_portal_only_in_auto_mode():
    state = make_state()
    obj = LevelObject(x=100, y=300, id=25)
    collide(obj, state, Rect(110.0, 300.0, 20.0, 20.0), context=LevelContext(current_mode="2"))
    assert state.gamemode is GameMode.CUBE
    collide(obj, state, Rect(110.0, 300.0, 20.0, 20.0))
    assert state.gamemode is GameMode.WAVE
    assert state.icon_color == CYAN


def test_speed_portal():
    state = make_state()
    collide(LevelObject(x=100, y=300, id=18), state, Rect(110.0, 300.0, 20.0, 20.0))
    assert state.movement_speed == pytest.approx(SETTINGS.default_movement_speed * 1.4)


def test_end_of_main_level_awards_once():
    state = make_state()
    progress = Progress(levels_completed=[False])
    context = LevelContext(main_level_difficulties=(3,))
    end = LevelObject(x=100, y=300, id=15)
    collide(end, state, Rect(110.0, 310.0, 20.0, 20.0), progress=progress, context=context)
    assert progress.stars == 3
    assert progress.levels_completed == [True]
    assert state.game_state is GameState.LEVEL_COMPLETE
    collide(end, state, Rect(110.0, 310.0, 20.0, 20.0), progress=progress, context=context)
    assert progress.stars == 3


def test_end_of_rated_online_level():
    state = make_state()
    progress = Progress()
    context = LevelContext(in_custom_level=True, level_id="42", online_level_rated=True, online_level_diff=4)
    end = LevelObject(x=100, y=300, id=15)
    collide(end, state, Rect(110.0, 310.0, 20.0, 20.0), progress=progress, context=context)
    collide(end, state, Rect(110.0, 310.0, 20.0, 20.0), progress=progress, context=context)
    assert progress.stars == 4
    assert progress.online_levels_beaten == [42]


def test_color_trigger_sets_background_and_ground():
    state = make_state()
    bg_trigger = LevelObject(x=100, y=300, id=23, properties=["10", "20", "30", "1"])
    colors, _ = collide(bg_trigger, state, Rect(110.0, 310.0, 20.0, 20.0))
    assert colors.bg == (10, 20, 30)
    ground_trigger = LevelObject(x=100, y=300, id=23, properties=["40", "50", "60", "2"])
    colors, _ = collide(ground_trigger, state, Rect(110.0, 310.0, 20.0, 20.0), colors=colors)
    assert colors.ground == (40, 50, 60)
    assert colors.bg == (10, 20, 30)


def test_color_trigger_bad_property_raises():
    state = make_state()
    obj = LevelObject(x=100, y=300, id=23, properties=["300", "0", "0", "1"])
    with pytest.raises(ValueError):
        collide(obj, state, Rect(110.0, 310.0, 20.0, 20.0))


def test_other_object_clears_color_trigger_flag():
    state = make_state(touching_color_trigger=True)
    collide(LevelObject(x=100, y=300, id=1), state, FAR)
    assert state.touching_color_trigger is False