"""Level editor actions: placing, editing and deleting objects, and keybinds."""

from __future__ import annotations

import enum
from collections.abc import Iterable, MutableSequence
from dataclasses import dataclass

from georays.objects import COLOR_TRIGGER_ID, LevelObject

GRID_SIZE = 40
FINE_STEP = 1
ROTATION_STEP = 90
START_POS_STEP = 5
START_POS_FAST_STEP = 25
_START_POS_MAX = 2**16 - 1

DEFAULT_TRIGGER_PROPERTIES = ("50", "50", "50", "1")


class EditorTab(enum.Enum):
    """The editor tool in use."""

    BUILD = "build"
    EDIT = "edit"
    DELETE = "delete"


@dataclass(frozen=True)
class EditorSelection:
    """What the edit tool picked, and which object toggles should be disabled."""

    selected_object: int
    no_touch_disabled: bool
    hide_disabled: bool
    settings_disabled: bool


def _grid_coord(snapped: int) -> int:
    # Negative coordinates snap one cell further out.
    return snapped - GRID_SIZE if snapped < 0 else snapped


def object_ped(
    objects: MutableSequence[LevelObject],
    tab: EditorTab,
    snapped_x: int,
    snapped_y: int,
    current_object: int,
    shift_down: bool = False,
) -> EditorSelection | None:
    """Place, edit or delete an object at the snapped cursor position.

    ``objects`` is changed in place. With the edit tool the first unselected
    object at the position is selected (clearing other selections unless
    shift is held) and an EditorSelection describing it is returned;
    otherwise None is returned.
    """
    x = _grid_coord(snapped_x)
    y = _grid_coord(snapped_y)

    if tab is EditorTab.BUILD:
        objects.append(
            LevelObject(
                x=x,
                y=y,
                id=current_object,
                properties=(
                    list(DEFAULT_TRIGGER_PROPERTIES)
                    if current_object == COLOR_TRIGGER_ID
                    else None
                ),
            )
        )
        return None

    if tab is EditorTab.DELETE:
        for index, obj in enumerate(objects):
            if obj.x == x and obj.y == y:
                del objects[index]
                break
        return None

    if tab is EditorTab.EDIT:
        target = next(
            (obj for obj in objects if obj.x == x and obj.y == y and not obj.selected),
            None,
        )
        if target is None:
            return None
        if not shift_down:
            for obj in objects:
                obj.selected = False
        target.selected = True
        return EditorSelection(
            selected_object=target.id,
            no_touch_disabled=target.no_touch != 1,
            hide_disabled=target.hide != 1,
            settings_disabled=target.id != COLOR_TRIGGER_ID,
        )

    return None


def _rotate(rotation: int, step: int) -> int:
    limit = 3 * step
    return 0 if rotation == limit else rotation + step


def keybinds_manager(
    objects: MutableSequence[LevelObject],
    pressed_keys: Iterable[str],
    held_keys: Iterable[str],
    start_pos: int,
) -> int:
    """Apply editor keybinds to the selected objects and return the new start position.

    Pressed keys: "delete" removes the selection; "w", "a", "s", "d" move it a
    grid cell; "i", "j", "k", "l" move it one unit; "q" and "e" rotate it.
    Held keys: "period" and "comma" move the start position, faster with
    "left_control". Raises OverflowError if the start position leaves 0..65535.
    """
    pressed = set(pressed_keys)
    held = set(held_keys)

    if "delete" in pressed:
        objects[:] = [obj for obj in objects if not obj.selected]

    moves = {
        "a": (-GRID_SIZE, 0),
        "d": (GRID_SIZE, 0),
        "w": (0, -GRID_SIZE),
        "s": (0, GRID_SIZE),
        "j": (-FINE_STEP, 0),
        "l": (FINE_STEP, 0),
        "i": (0, -FINE_STEP),
        "k": (0, FINE_STEP),
    }
    selected = [obj for obj in objects if obj.selected]
    for key, (dx, dy) in moves.items():
        if key in pressed:
            for obj in selected:
                obj.x += dx
                obj.y += dy

    if "q" in pressed:
        for obj in selected:
            obj.rotation = _rotate(obj.rotation, -ROTATION_STEP)
    if "e" in pressed:
        for obj in selected:
            obj.rotation = _rotate(obj.rotation, ROTATION_STEP)

    step = START_POS_FAST_STEP if "left_control" in held else START_POS_STEP
    if "period" in held:
        start_pos += step
    if "comma" in held and start_pos > 0:
        start_pos -= step
    if not 0 <= start_pos <= _START_POS_MAX:
        raise OverflowError(f"start position out of range: {start_pos}")
    return start_pos