import pytest

from lsview.options import Flags, SizeFlag
from lsview.size import GB, KB, MB, TB, Size
from lsview.style import Colors, ThemeOption


def test_render_byte():
    size = Size(42)
    flags = Flags()
    assert size.value_string(flags) == "42"
    assert size.unit_string(flags) == "B"
    flags.size = SizeFlag.SHORT
    assert size.unit_string(flags) == "B"
    flags.size = SizeFlag.BYTES
    assert size.unit_string(flags) == ""


@pytest.mark.parametrize(
    "nbytes, value, long_unit, short_unit",
    [
        (4 * KB, "4.0", "KB", "K"),
        (42 * KB, "42", "KB", "K"),
        (420 * KB + 420, "420", "KB", "K"),
        (4 * MB, "4.0", "MB", "M"),
        (42 * MB, "42", "MB", "M"),
        (420 * MB + 420 * KB, "420", "MB", "M"),
        (4 * GB, "4.0", "GB", "G"),
        (42 * GB, "42", "GB", "G"),
        (420 * GB + 420 * MB, "420", "GB", "G"),
        (4 * TB, "4.0", "TB", "T"),
        (42 * TB, "42", "TB", "T"),
        (420 * TB + 420 * GB, "420", "TB", "T"),
    ],
)
def test_render_units(nbytes, value, long_unit, short_unit):
    size = Size(nbytes)
    flags = Flags()
    assert size.value_string(flags) == value
    assert size.unit_string(flags) == long_unit
    flags.size = SizeFlag.SHORT
    assert size.unit_string(flags) == short_unit


def test_render_with_a_fraction():
    size = Size(42 * KB + 103)
    flags = Flags()
    assert size.value_string(flags) == "42"
    assert size.unit_string(flags) == "KB"


def test_render_with_a_truncated_fraction():
    size = Size(42 * KB + 1)
    flags = Flags()
    assert size.value_string(flags) == "42"
    assert size.unit_string(flags) == "KB"


def test_render_short_nospaces():
    size = Size(42 * KB)
    flags = Flags(size=SizeFlag.SHORT)
    colors = Colors(ThemeOption.NO_COLOR)
    assert size.render(colors, flags, 2) == "42K"
    assert size.render(colors, flags, 3) == " 42K"


def test_render_default_has_space():
    colors = Colors(ThemeOption.NO_COLOR)
    assert Size(42 * KB).render(colors, Flags(), None) == "42 KB"


def test_bytes_flag_keeps_raw_value():
    flags = Flags(size=SizeFlag.BYTES)
    size = Size(42 * MB)
    assert size.value_string(flags) == str(42 * MB)
    assert size.unit_string(flags) == ""


def test_small_fraction_keeps_one_decimal():
    flags = Flags()
    assert Size(KB + KB // 2).value_string(flags) == "1.5"


@pytest.mark.parametrize(
    "nbytes, code",
    [(42, 229), (2 * MB, 216), (2 * GB, 172)],
)
def test_render_value_colors_by_magnitude(nbytes, code):
    colors = Colors(ThemeOption.NO_LSCOLORS)
    rendered = Size(nbytes).render_value(colors, Flags())
    assert rendered.startswith(f"\x1b[38;5;{code}m")
    assert rendered.endswith("\x1b[39m")


def test_render_colored_pieces():
    colors = Colors(ThemeOption.NO_LSCOLORS)
    assert Size(42).render(colors, Flags(), None) == "\x1b[38;5;229m42\x1b[39m \x1b[38;5;229mB\x1b[39m"
    assert Size(42).render_unit(colors, Flags()) == "\x1b[38;5;229mB\x1b[39m"


def test_sizes_order_by_bytes():
    assert sorted([Size(10), Size(2), Size(5)]) == [Size(2), Size(5), Size(10)]