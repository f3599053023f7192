import pytest

from paganini.component import Component


class _Counter(Component):
    def __init__(self):
        self.elapsed = 0.0
        self.running = False

    def start(self):
        self.running = True

    def update(self, dt):
        self.elapsed += dt

    def stop(self):
        self.running = False


def test_component_is_abstract():
    with pytest.raises(TypeError):
        Component()


def test_incomplete_subclass_cannot_be_built():
    class Partial(Component):
        def start(self):
            pass

        def update(self, dt):
            pass

    with pytest.raises(TypeError):
        Component()
    with pytest.raises(TypeError):
        Partial()
    assert _Counter().parent is None