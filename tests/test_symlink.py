import os

from lsview.options import Flags
from lsview.style import Colors, ThemeOption
from lsview.symlink import SymLink, symlink_for_path


def test_symlink_render_default_valid_target_nocolor():
    link = SymLink(target="/target", valid=True)
    assert link.render(Colors(ThemeOption.NO_COLOR), Flags()) == " ⇒ /target"


def test_symlink_render_default_invalid_target_nocolor():
    link = SymLink(target="/target", valid=False)
    assert link.render(Colors(ThemeOption.NO_COLOR), Flags()) == " ⇒ /target"


def test_symlink_render_default_invalid_target_withcolor():
    link = SymLink(target="/target", valid=False)
    assert (
        link.render(Colors(ThemeOption.NO_LSCOLORS), Flags())
        == " ⇒ \x1b[38;5;124m/target\x1b[39m"
    )


def test_render_without_target_is_empty():
    assert SymLink().render(Colors(ThemeOption.NO_COLOR), Flags()) == ""


def test_render_uses_arrow_flag():
    link = SymLink(target="t", valid=True)
    flags = Flags(symlink_arrow="->")
    assert link.render(Colors(ThemeOption.NO_COLOR), flags) == " -> t"


def test_relative_valid_link(tmp_path):
    (tmp_path / "file").touch()
    os.symlink("file", tmp_path / "link")
    link = symlink_for_path(tmp_path / "link")
    assert link == SymLink(target="file", valid=True)


def test_absolute_broken_link(tmp_path):
    missing = tmp_path / "missing"
    os.symlink(missing, tmp_path / "link")
    link = symlink_for_path(tmp_path / "link")
    assert link == SymLink(target=str(missing), valid=False)


def test_regular_file_is_not_link(tmp_path):
    (tmp_path / "plain").touch()
    assert symlink_for_path(tmp_path / "plain") == SymLink(target=None, valid=False)