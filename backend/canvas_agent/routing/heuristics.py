"""Fast-path detection for instructions that never need the planner."""

from __future__ import annotations

import re

DIRECT_CLEAR = "direct_clear"
DIRECT_MOVE_ALL = "direct_move_all"
DIRECT_ROTATE_ALL = "direct_rotate_all"
DIRECT_SCALE_ALL = "direct_scale_all"
DIRECT_CREATE_SHAPE = "direct_create_shape"

_TRIVIAL = {
    "clear": DIRECT_CLEAR,
    "clear canvas": DIRECT_CLEAR,
    "clear the canvas": DIRECT_CLEAR,
    "clear all shapes": DIRECT_CLEAR,
    "reset": DIRECT_CLEAR,
    "reset canvas": DIRECT_CLEAR,
    "reset the canvas": DIRECT_CLEAR,
}

_ALL = r"(?:(?:everything|all shapes|all)\s+)?"

MOVE_ALL = re.compile(rf"^(move|shift)\s+{_ALL}(?P<direction>up|down|left|right)(?:\s+by)?(?:\s+(?P<distance>\d+))?$")
ROTATE_ALL = re.compile(rf"^(rotate|turn|spin)\s+{_ALL}(?:by\s+)?(?P<angle>\d+)\s*(?:degrees?|°)?$")
SCALE_ALL_SHORT = re.compile(r"^(double|triple|halve|half)(\s+(everything|all shapes|all))?$")
SCALE_ALL_LONG = re.compile(
    r"^(make|scale)\s+(everything|all shapes|all)\s+"
    r"(?P<factor>bigger|smaller|larger|double|twice(?:\s+as\s+big)?|triple|half|halve|(?P<times>\d+(?:\.\d+)?)\s*(?:times|x))$"
)
CREATE_SHAPE = re.compile(
    r"^(create|draw|make|add)\s+((a|an)\s+)?(?:(?P<color>red|green|blue|yellow|orange|purple|pink|black|white)\s+)?"
    r"(?P<shape>circle|rectangle|square|text|line)$"
)

# Splits "clear and add a circle" / "move up, then rotate 45"
COMMAND_SEPARATORS = re.compile(r"\s+(?:and|then)\s+|,\s*(?:then\s+)?", re.IGNORECASE)


def normalize(command: str) -> str:
    return re.sub(r"\s+", " ", command.strip().lower()).rstrip(".!")


def check_heuristic(command: str) -> str | None:
    """Direct-execution kind for ``command``, or None when it needs planning."""
    cmd = normalize(command)
    if cmd in _TRIVIAL:
        return _TRIVIAL[cmd]
    if MOVE_ALL.match(cmd):
        return DIRECT_MOVE_ALL
    if ROTATE_ALL.match(cmd):
        return DIRECT_ROTATE_ALL
    if SCALE_ALL_SHORT.match(cmd) or SCALE_ALL_LONG.match(cmd):
        return DIRECT_SCALE_ALL
    if CREATE_SHAPE.match(cmd):
        return DIRECT_CREATE_SHAPE
    return None


def split_compound(message: str) -> list[str]:
    """Sub-commands of a compound instruction (a single item when there is none)."""
    return [part.strip() for part in COMMAND_SEPARATORS.split(message) if part and part.strip()]


def compound_heuristics(message: str) -> list[tuple[str, str]] | None:
    """(sub-command, kind) pairs when every part of a compound instruction is direct.

    Returns None for single commands and for compounds with any part that
    needs the planner.
    """
    parts = split_compound(message)
    if len(parts) < 2:
        return None
    kinds = []
    for part in parts:
        kind = check_heuristic(part)
        if kind is None:
            return None
        kinds.append((part, kind))
    return kinds
