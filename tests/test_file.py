import os

import pytest

from paganini.file import File, SeekFrom

DATA = b"hello world\nsecond line"


@pytest.fixture
def sample(tmp_path):
    path = tmp_path / "sample.bin"
    path.write_bytes(DATA)
    return str(path)


def test_seek_from_matches_os_constants(sample):
    assert list(SeekFrom) == [
        SeekFrom(os.SEEK_SET),
        SeekFrom(os.SEEK_CUR),
        SeekFrom(os.SEEK_END),
    ]
    with File(sample) as f:
        assert f.seek(0, SeekFrom(os.SEEK_END)) == len(DATA)
        assert f.seek(2, SeekFrom(os.SEEK_SET)) == 2


def test_read_and_tell(sample):
    with File(sample) as f:
        assert f.read(5) == DATA[:5]
        assert f.tell() == 5


def test_seek_returns_new_position(sample):
    with File(sample) as f:
        assert f.seek(0, SeekFrom.END) == len(DATA)
        assert f.seek(-4, SeekFrom.CURRENT) == len(DATA) - 4
        assert f.read(4) == DATA[-4:]


def test_dump_returns_everything_and_keeps_position(sample):
    with File(sample) as f:
        f.read(3)
        assert f.dump() == DATA
        assert f.tell() == 3


def test_get_line_in_binary_mode_warns(sample, capsys):
    with File(sample, binary=True, name="sample") as f:
        assert f.get_line() == ""
    assert "Cannot get line from binary file 'sample'." in capsys.readouterr().out


def test_get_line_reads_words_in_text_mode(sample):
    with File(sample, binary=False) as f:
        words = [f.get_line() for _ in range(5)]
    assert words == DATA.decode().split() + [""]


def test_context_manager_closes(sample):
    with File(sample) as f:
        assert f.closed is False
    assert f.closed is True


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        File(str(tmp_path / "absent.bin"))