import pytest

from keys import KeyCode, key_from_keysym


@pytest.mark.parametrize("keysym, expected", [
    ("space", KeyCode.SPACE),
    ("p", KeyCode.P),
    ("P", KeyCode.P),
    ("q", KeyCode.Q),
    ("Q", KeyCode.Q),
])
def test_known_keys(keysym, expected):
    assert key_from_keysym(keysym) is expected


@pytest.mark.parametrize("keysym", ["Return", "Escape", "a", "Left"])
def test_other_keys_ignored(keysym):
    assert key_from_keysym(keysym) is None
