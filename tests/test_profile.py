"""Unit tests for YAML profiles."""
from __future__ import annotations

import pytest

from sleepbar.profile import Profile, load_profile
from ticker.models import UsageError


def test_from_dict_reads_known_keys():
    profile = Profile.from_dict({"multiline": True, "bar_width": 30})
    assert profile.multiline is True
    assert profile.bar_width == 30
    assert profile.quiet is None


def test_from_dict_rejects_unknown_key():
    with pytest.raises(UsageError, match="Unknown profile option"):
        Profile.from_dict({"colour": True})


@pytest.mark.parametrize("data", [
    {"quiet": "yes"},
    {"bar_width": 0},
    {"bar_width": -3},
    {"bar_width": True},
    {"bar_width": "20"},
])
def test_from_dict_rejects_bad_values(data):
    with pytest.raises(UsageError):
        Profile.from_dict(data)


def test_from_dict_rejects_non_mapping():
    with pytest.raises(UsageError):
        Profile.from_dict(["multiline"])


def test_from_file(tmp_path):
    path = tmp_path / "sleepbar.yaml"
    path.write_text("multiline: true\ncolor: false\nshow_clock: false\n")
    profile = Profile.from_file(path)
    assert profile.multiline is True
    assert profile.color is False
    assert profile.show_clock is False


def test_from_file_empty_is_blank_profile(tmp_path):
    path = tmp_path / "empty.yaml"
    path.write_text("")
    assert Profile.from_file(path) == Profile()


def test_from_file_missing(tmp_path):
    with pytest.raises(UsageError, match="Profile not found"):
        Profile.from_file(tmp_path / "nope.yaml")


def test_from_file_invalid_yaml(tmp_path):
    path = tmp_path / "bad.yaml"
    path.write_text("multiline: [true\n")
    with pytest.raises(UsageError, match="Invalid YAML"):
        Profile.from_file(path)


def test_from_file_directory(tmp_path):
    with pytest.raises(UsageError, match="Cannot read profile"):
        Profile.from_file(tmp_path)


def test_from_file_not_utf8(tmp_path):
    path = tmp_path / "latin1.yaml"
    path.write_bytes(b"multiline: true\n# caf\xe9\xff\xfe\n")
    with pytest.raises(UsageError, match="Cannot read profile"):
        Profile.from_file(path)


def test_load_profile_without_path():
    assert load_profile(None) == Profile()
    assert load_profile("") == Profile()


def test_merge_flags_win():
    """Command-line values override the profile; unset ones fall through."""
    profile = Profile(multiline=True, quiet=True, bar_width=10)
    merged = profile.merge(quiet=False, bar=None, color=True)
    assert merged == {"multiline": True, "quiet": False, "bar_width": 10, "color": True}
