"""Key bindings for each controller mode."""

from proctop.controller import Action, Mode

# k moves down and j moves up
BROWSING_KEYS: dict[str, Action] = {
    "q": Action.QUIT,
    "ctrl+c": Action.QUIT,
    "r": Action.REFRESH,
    "k": Action.SELECT_NEXT,
    "down": Action.SELECT_NEXT,
    "j": Action.SELECT_PREVIOUS,
    "up": Action.SELECT_PREVIOUS,
    "d": Action.KILL_SELECTED,
    "delete": Action.KILL_SELECTED,
    "slash": Action.TOGGLE_SEARCH,
    "p": Action.CYCLE_PALETTE,
}

SEARCHING_KEYS: dict[str, Action] = {
    "ctrl+c": Action.QUIT,
    "escape": Action.TOGGLE_SEARCH,
    "enter": Action.SUBMIT_SEARCH,
    "backspace": Action.TEXT_DELETE_BACKWARD,
    "left": Action.CARET_LEFT,
    "right": Action.CARET_RIGHT,
}


def resolve_key(
    mode: Mode, key: str, character: str | None
) -> tuple[Action, str | None] | None:
    """
    Map a key press to an action for the given mode.

    Args:
        mode: The controller's current mode.
        key: Textual key name, e.g. ``"ctrl+c"`` or ``"slash"``.
        character: The printable character for the key, if any.

    Returns:
        ``(action, character)`` or None if the key is unbound in this mode.
    """
    match mode:
        case Mode.BROWSING:
            action = BROWSING_KEYS.get(key)
            return (action, None) if action is not None else None
        case Mode.SEARCHING:
            action = SEARCHING_KEYS.get(key)
            if action is not None:
                return action, None
            if character is not None and len(character) == 1 and character.isprintable():
                return Action.TEXT_INSERT, character
            return None
