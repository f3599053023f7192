import pytest

from paganini.component import Component
from paganini.entity import Entity


class _Recorder(Component):
    def __init__(self):
        self.updates = []
        self.stopped = False

    def start(self):
        pass

    def update(self, dt):
        self.updates.append(dt)

    def stop(self):
        self.stopped = True


class _Special(_Recorder):
    pass


class _Thing(Entity):
    def start(self):
        self.components.append(_Recorder())
        self.components.append(_Special())


def test_entity_is_abstract():
    with pytest.raises(TypeError):
        Entity()


def test_get_returns_first_matching_component():
    e = _Thing()
    e.start()
    assert Entity.get(e, _Recorder) is e.components[0]
    assert Entity.get(e, _Special) is e.components[1]


def test_get_returns_none_when_absent():
    e = _Thing()
    assert Entity.get(e, _Recorder) is None


def test_update_reaches_every_component():
    e = _Thing()
    e.start()
    Entity.update(e, 0.5)
    assert [c.updates for c in e.components] == [[0.5], [0.5]]


def test_stop_stops_and_clears_components():
    e = _Thing()
    e.start()
    held = list(e.components)
    Entity.stop(e)
    assert all(c.stopped for c in held)
    assert e.components == []