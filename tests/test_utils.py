"""Utility helper tests."""

from __future__ import annotations

import os
import sys
from datetime import datetime
from pathlib import Path

import pytest

from rya.utils import (
    command_path,
    date_and_time,
    longest_common_substring,
    scale,
    scale_fixed,
    scale_values,
)


class TestScale:
    def test_scales_the_value(self):
        assert scale(15, 10, 20, 100, 200) == 150

    def test_reverse_scale(self):
        assert scale(18, 10, 20, 200, 100) == 120

    def test_empty_old_range_gives_midpoint(self):
        assert scale(1, 1, 1, 10, 20) == 15

    def test_scale_values(self):
        assert scale_values([0, 75, 50, 25, 100], 100, 200) == [100, 175, 150, 125, 200]

    def test_scale_values_high_to_low(self):
        assert scale_values([0, 75, 50, 25, 100], 200, 100) == [200, 125, 150, 175, 100]

    def test_scale_values_empty(self):
        assert scale_values([], 0, 1) == []

    def test_scale_fixed(self):
        assert scale_fixed([0, 5, 10], 0, 20, 0, 100) == [0, 25, 50]


class TestLongestCommonSubstring:
    @pytest.mark.parametrize(
        ("a", "b", "expected"),
        [
            ("apple", "ppie", 2),
            ("apple", "aaaaaaaple", 3),
            ("apple", "zzzplezzzpleezzz", 3),
            ("apple", "foo", 0),
            ("", "ryan", 0),
            ("apple", "", 0),
            ("", "", 0),
            ("same", "same", 4),
        ],
    )
    def test_lengths(self, a: str, b: str, expected: int):
        assert longest_common_substring(a, b) == expected

    def test_symmetric(self):
        assert longest_common_substring("ppie", "apple") == longest_common_substring("apple", "ppie")


@pytest.mark.skipif(sys.platform == "win32", reason="POSIX executable bits")
class TestCommandPath:
    def test_not_a_command(self):
        assert command_path("asrotienaorsitenaoi") is None

    def test_command_on_path(self):
        path = command_path("ls")
        assert path is not None
        assert path.endswith("ls")

    def test_executable_path_returned_as_is(self, tmp_path: Path):
        script = tmp_path / "tool"
        script.write_text("#!/bin/sh\n")
        script.chmod(0o755)

        assert command_path(str(script)) == str(script)

    def test_skips_directories_and_non_executables(self, tmp_path: Path, monkeypatch):
        first = tmp_path / "first"
        second = tmp_path / "second"
        first.mkdir()
        second.mkdir()
        (first / "tool").mkdir()
        (second / "tool").write_text("#!/bin/sh\n")
        (second / "tool").chmod(0o644)
        monkeypatch.setenv("PATH", os.pathsep.join([str(first), str(second)]))

        assert command_path("tool") is None

        (second / "tool").chmod(0o755)
        assert command_path("tool") == str(second / "tool")

    def test_pathext(self, tmp_path: Path, monkeypatch):
        (tmp_path / "tool.sh").write_text("#!/bin/sh\n")
        (tmp_path / "tool.sh").chmod(0o755)
        monkeypatch.setenv("PATH", str(tmp_path))
        monkeypatch.setenv("PATHEXT", ".exe;.sh")

        assert command_path("tool") == str(tmp_path / "tool.sh")

    def test_empty_name(self):
        assert command_path("") is None


class TestDateAndTime:
    def test_default_format_has_milliseconds(self):
        now = datetime(2024, 3, 1, 14, 5, 9, 123456)
        assert date_and_time(now=now) == "2024-03-01 14:05:09.123"

    def test_custom_format(self):
        now = datetime(2024, 3, 1, 14, 5, 9)
        assert date_and_time("%Y/%m/%d", now=now) == "2024/03/01"

    def test_current_time(self):
        assert len(date_and_time()) == len("2024-03-01 14:05:09.123")
