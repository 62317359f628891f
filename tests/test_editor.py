import pytest

from dice_keypad.editor import EditBuffer
from dice_keypad.models import EditState


def test_insert_in_middle():
    buf = EditBuffer("3d6")
    assert buf.state == EditState(text="3d6", caret=3)

    buf.move_left()
    buf.move_left()
    buf.insert("0")

    assert buf.state == EditState(text="30d6", caret=2)


def test_insert_multichar_advances_caret():
    buf = EditBuffer()
    buf.insert("3d6")
    buf.move_home()
    buf.insert("2d8 ")

    assert buf.get_text() == "2d8 3d6"
    assert buf.get_caret() == 4


def test_delete_before():
    buf = EditBuffer("3d66")
    buf.delete_before()
    assert buf.state == EditState(text="3d6", caret=3)

    buf.move_left()
    buf.delete_before()
    assert buf.state == EditState(text="36", caret=1)


@pytest.mark.parametrize(
    ("setup", "op"),
    [
        (lambda b: b.move_home(), "delete_before"),
        (lambda b: b.move_home(), "move_left"),
        (lambda b: b.move_end(), "move_right"),
        (lambda b: None, "move_right"),
    ],
)
def test_noop_at_bounds(setup, op):
    buf = EditBuffer("3d6")
    setup(buf)
    before = buf.state

    getattr(buf, op)()

    assert buf.state == before


def test_noops_on_empty_buffer():
    buf = EditBuffer()
    for op in ("delete_before", "move_left", "move_right", "move_home", "move_end"):
        getattr(buf, op)()
        assert buf.state == EditState()
    assert buf.is_empty()


def test_home_end_and_right():
    buf = EditBuffer("2d10")
    buf.move_home()
    assert buf.get_caret() == 0
    buf.move_right()
    assert buf.get_caret() == 1
    buf.move_end()
    assert buf.get_caret() == 4


def test_clear_and_set_text():
    buf = EditBuffer("3d6 2d8")
    buf.move_home()
    buf.clear()
    assert buf.state == EditState(text="", caret=0)
    assert buf.is_empty()

    buf.set_text("2d10")
    assert buf.state == EditState(text="2d10", caret=4)
    assert not buf.is_empty()


def test_state_is_a_snapshot():
    buf = EditBuffer("3d6")
    snap = buf.state
    buf.insert(" 1d20")
    assert snap == EditState(text="3d6", caret=3)
