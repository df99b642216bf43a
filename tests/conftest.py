import pytest


class RecordingField:
    """Wraps a field and remembers every point it was asked about."""

    def __init__(self, field):
        self.field = field
        self.calls = []

    def __call__(self, x, y, z):
        self.calls.append((x, y, z))
        return self.field(x, y, z)


@pytest.fixture
def recording():
    return RecordingField
