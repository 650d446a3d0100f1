import pytest

from chipemu.scancodes import NUM_SCANCODES, Scancode


@pytest.mark.parametrize(
    "member, value",
    [
        (Scancode.UNKNOWN, 0),
        (Scancode.A, 4),
        (Scancode.Z, 29),
        (Scancode.KEY_1, 30),
        (Scancode.KEY_0, 39),
        (Scancode.RETURN, 40),
        (Scancode.F12, 69),
        (Scancode.KP_HEXADECIMAL, 221),
        (Scancode.LCTRL, 224),
        (Scancode.MODE, 257),
        (Scancode.ENDCALL, 290),
    ],
)
def test_documented_values(member, value):
    assert int(member) == value


def test_num_scancodes_bound():
    assert NUM_SCANCODES == 512
    assert all(int(Scancode(int(code))) < NUM_SCANCODES for code in Scancode)
    with pytest.raises(ValueError):
        Scancode(NUM_SCANCODES - 1)


def test_values_are_unique():
    looked_up = {Scancode(int(code)) for code in Scancode}
    assert len(looked_up) == len(Scancode.__members__)


def test_lookup_by_value_round_trip():
    for code in Scancode:
        assert Scancode(int(code)) is code


def test_letters_are_contiguous():
    names = [Scancode(value).name for value in range(4, 30)]
    assert names == list("ABCDEFGHIJKLMNOPQRSTUVWXYZ")


def test_unassigned_value_rejected():
    with pytest.raises(ValueError):
        Scancode(130)