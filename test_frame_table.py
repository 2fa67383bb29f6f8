import pytest

from frame_table import FrameTable, frame_count


def test_new_table_is_empty():
    table = FrameTable(4)
    assert len(table) == 4
    assert all(frame.is_empty() for frame in table.frames)
    assert table.find(0) is None
    assert table.resident_pages() == []


def test_load_and_find():
    table = FrameTable(3)
    table.load(1, 0, 'R', 1)
    assert table.find(0) == 1
    frame = table[1]
    assert frame.resident_page == 0
    assert frame.referenced
    assert not frame.dirty
    assert frame.last_access == 1


def test_touch_dirty_is_sticky():
    table = FrameTable(2)
    table.load(0, 7, 'W', 1)
    table.touch(0, 'R', 2)
    assert table[0].dirty
    assert table[0].last_access == 2
    table.load(0, 8, 'R', 3)
    assert not table[0].dirty


def test_zero_frames_rejected():
    with pytest.raises(ValueError):
        FrameTable(0)


def test_frame_count():
    assert frame_count(128, 4) == 32
    with pytest.raises(ValueError):
        frame_count(130, 4)
    with pytest.raises(ValueError):
        frame_count(0, 4)
