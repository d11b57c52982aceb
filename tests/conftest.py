import pytest
import abitbol


@pytest.fixture
def recorder():
    """Class whose methods append (method_name, args) to self.calls."""
    def __init__(self):
        self.calls = []

    def record(self, *args):
        self.calls.append((self.method_name, args))

    return abitbol.Object.extend({
        "__name__": "Recorder",
        "__init__": __init__,
        "record": record,
    })


@pytest.fixture
def point():
    """Two dimensional point class with a class variable."""
    def __init__(self, x=0, y=0):
        self.x = x
        self.y = y

    return abitbol.Object.extend({
        "__name__": "Point",
        "__init__": __init__,
        "__classvars__": {"dimensions": 2},
        "coords": lambda self: (self.x, self.y),
    })
