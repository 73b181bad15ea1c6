# keys.py - Recognized Input Keys
"""
Closed set of keys the game reacts to, plus translation from tkinter keysyms.
"""

from enum import Enum
from typing import Optional


class KeyCode(Enum):
    """Keys understood by the game. Anything else never reaches the core."""

    SPACE = "space"  # Flap
    P = "p"  # Start / restart
    Q = "q"  # Quit


_KEYSYMS = {
    "space": KeyCode.SPACE,
    "p": KeyCode.P,
    "q": KeyCode.Q,
}


def key_from_keysym(keysym: str) -> Optional[KeyCode]:
    """Map a tkinter keysym ("space", "P", "q"...) to a KeyCode, or None."""
    return _KEYSYMS.get(keysym.lower())
