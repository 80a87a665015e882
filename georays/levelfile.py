"""Reading and writing the textual level format."""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable
from dataclasses import dataclass, field

from georays.objects import COLOR_TRIGGER_ID, LevelObject

log = logging.getLogger(__name__)

_SUPPORTED_VERSIONS = frozenset({"BETA", "1.3", "1.4", "1.5", "1.6"})
_INT_RE = re.compile(r"[+-]?[0-9]+")

_U8 = (0, 255)
_I16 = (-(2**15), 2**15 - 1)
_I32 = (-(2**31), 2**31 - 1)
_U32 = (0, 2**32 - 1)


class LevelVersionError(ValueError):
    """The level declares a version this game does not recognise."""


@dataclass
class LoadedLevel:
    """The result of loading a level; colours are None when not given."""

    objects: list[LevelObject] = field(default_factory=list)
    current_mode: str = "1"
    current_song: int = 0
    bg: tuple[int, int, int] | None = None
    ground: tuple[int, int, int] | None = None
    version: str = ""


@dataclass
class OnlineLevel:
    """A level as downloaded from the level server."""

    name: str
    description: str
    difficulty: int
    rated: bool
    creator: str
    data: str


def _parse_int(text: str, bounds: tuple[int, int]) -> int:
    if not _INT_RE.fullmatch(text):
        raise ValueError(f"invalid integer: {text!r}")
    value = int(text)
    low, high = bounds
    if not low <= value <= high:
        raise ValueError(f"integer out of range: {text!r}")
    return value


def _parse_rgb(value: str, bounds: tuple[int, int]) -> tuple[int, int, int]:
    channels = value.split(",")
    if len(channels) < 3:
        raise ValueError(f"expected three colour channels: {value!r}")
    r, g, b = (_parse_int(channel, bounds) for channel in channels[:3])
    return r, g, b


def get_level_text(
    current_mode: str,
    current_song: int,
    bg: tuple[int, int, int],
    ground: tuple[int, int, int],
    objects: Iterable[LevelObject],
) -> str:
    """Serialise a level into its text form."""
    bg_r, bg_g, bg_b = bg
    gr_r, gr_g, gr_b = ground
    header = (
        f"version:1.6;mode:{current_mode};song:{current_song};"
        f"c1001:{bg_r},{bg_g},{bg_b};c1002:{gr_r},{gr_g},{gr_b};"
        "c1004:255,255,255;bg:1;grnd:1;;;"
    )

    entries = []
    for obj in objects:
        fields = [obj.y, obj.x, obj.rotation, obj.no_touch, obj.hide, obj.id]
        if obj.id == COLOR_TRIGGER_ID:
            if obj.properties is None or len(obj.properties) < 4:
                raise ValueError("colour trigger needs four properties")
            fields.extend(obj.properties[:4])
        entries.append(":".join(str(f) for f in fields))
    return header + ";".join(entries)


def _parse_object(entry: str, beta: bool) -> LevelObject:
    fields = entry.split(":")
    try:
        obj_id = _parse_int(fields[3] if beta else fields[5], _U32)
        return LevelObject(
            y=_parse_int(fields[0], _I32),
            x=_parse_int(fields[1], _I32),
            rotation=_parse_int(fields[2], _I16),
            no_touch=0 if beta else _parse_int(fields[3], _U8),
            hide=0 if beta else _parse_int(fields[4], _U8),
            id=obj_id,
            properties=(
                fields[6:10] if obj_id == COLOR_TRIGGER_ID and not beta else None
            ),
        )
    except IndexError as exc:
        raise ValueError(f"malformed object entry: {entry!r}") from exc


def load_level(
    metadata: str,
    object_string: str,
    current_song: int = 0,
    song_selected: bool = False,
    load_song: bool = True,
    song_if_song_not_selected: bool = False,
) -> LoadedLevel:
    """Parse level metadata and objects.

    The song from the level replaces ``current_song`` only when ``load_song``
    is set and, with ``song_if_song_not_selected``, no song was selected.
    Raises LevelVersionError for unknown versions and ValueError for bad data.
    """
    level = LoadedLevel(current_song=current_song)

    for pair in metadata.split(";"):
        parts = pair.split(":")
        if len(parts) < 2:
            raise ValueError(f"malformed metadata entry: {pair!r}")
        key, value = parts[0], parts[1]

        if key == "version":
            if value == "ALPHA":
                log.warning(
                    "Old level version detected; pick a level made in a newer version."
                )
                break
            if value not in _SUPPORTED_VERSIONS:
                raise LevelVersionError(f"level version not recognized: {value!r}")
            log.info("Loading level...")
            level.version = value
        elif key == "c1001":
            level.bg = _parse_rgb(value, _U8)
        elif key == "c1002":
            level.ground = _parse_rgb(value, _I32)
        elif key == "song":
            wanted = load_song and not (song_if_song_not_selected and song_selected)
            if wanted:
                level.current_song = _parse_int(value, _U8)
        elif key == "mode":
            level.current_mode = value

    if object_string:
        beta = level.version == "BETA"
        level.objects = [_parse_object(entry, beta) for entry in object_string.split(";")]

    return level


def parse_level_download_response(response: str) -> OnlineLevel:
    """Split a server download response into level details and level data."""
    parts = response.split(";;;;;")
    parts_empty_user = response.split(";;;;;;")
    name_desc = parts[0].split(";")

    try:
        has_creator = len(name_desc) > 4
        return OnlineLevel(
            name=name_desc[0],
            description=name_desc[1],
            difficulty=_parse_int(name_desc[2], _U8),
            rated=name_desc[3] != "0",
            creator=name_desc[4] if has_creator else "",
            data=parts[1] if has_creator else parts_empty_user[1],
        )
    except IndexError as exc:
        raise ValueError("malformed level download response") from exc