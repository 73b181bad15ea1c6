import pytest

from game import GameState


class RecordingSurface:
    """Stands in for the canvas: remembers every draw call."""

    def __init__(self):
        self.calls = []

    def clear(self, bg="#000000"):
        self.calls.append(("clear", bg))

    def set_cell(self, x, y, glyph, fg, bg):
        self.calls.append(("set_cell", x, y, glyph, fg, bg))

    def draw_text(self, x, y, text, fg="#ffffff", bg="#000000"):
        self.calls.append(("draw_text", x, y, text, fg, bg))

    def draw_sprite(self, position, frame_index, scale, colors):
        self.calls.append(("draw_sprite", position, frame_index, scale, colors))

    def texts(self):
        return [call[3] for call in self.calls if call[0] == "draw_text"]

    def cells(self):
        return [call for call in self.calls if call[0] == "set_cell"]


@pytest.fixture
def surface():
    return RecordingSurface()


@pytest.fixture
def state():
    return GameState(seed=1234)
