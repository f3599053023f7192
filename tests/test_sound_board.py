import pytest

from paganini.log import EngineError
from paganini.sound_board import SoundBoard


class FakeDriver:
    pass


def test_start_without_device_is_fatal():
    board = SoundBoard(open_driver=lambda: None, enumerate_devices=lambda: [])
    with pytest.raises(EngineError, match="Could not open audio device"):
        board.start()


def test_start_lists_devices(capsys):
    driver = FakeDriver()
    board = SoundBoard(open_driver=lambda: driver, enumerate_devices=lambda: ["Speakers", "Headset"])
    board.start()
    out = capsys.readouterr().out
    assert board.driver is driver
    assert "Audio Devices:" in out
    assert "Speakers\nHeadset\n" in out


def test_start_warns_without_enumeration(capsys):
    board = SoundBoard(open_driver=FakeDriver, enumerate_devices=lambda: None)
    board.start()
    assert "device enumeration not enabled" in capsys.readouterr().out


def test_clean_releases_driver():
    board = SoundBoard(open_driver=FakeDriver, enumerate_devices=lambda: [])
    board.start()
    board.clean()
    assert board.driver is None