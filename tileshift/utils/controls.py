"""Keyboard controls: map key names to shift directions or quit."""

from tileshift.core.gamemove import Direction

# ##: Sentinel returned for the quit keys.
QUIT = "quit"

# ##>: Screen keys map to the opposite engine directions because the engine's axes are transposed.
KEY_DIRECTIONS: dict[str, Direction] = {
    "KEY_UP": Direction.RIGHT,
    "k": Direction.RIGHT,
    "KEY_DOWN": Direction.LEFT,
    "j": Direction.LEFT,
    "KEY_LEFT": Direction.DOWN,
    "h": Direction.DOWN,
    "KEY_RIGHT": Direction.UP,
    "l": Direction.UP,
}

# ##: Ctrl-C arrives as a plain character in raw mode.
QUIT_KEYS = frozenset({"q", "\x03"})


def resolve_key(name: str) -> Direction | str | None:
    """
    Translate a key name into an action.

    Parameters
    ----------
    name : str
        Sequence name for special keys (e.g. ``KEY_UP``), the character itself otherwise.

    Returns
    -------
    Direction | str | None
        The direction to play, ``QUIT``, or None when the key is ignored.
    """
    if name in QUIT_KEYS:
        return QUIT
    return KEY_DIRECTIONS.get(name)
