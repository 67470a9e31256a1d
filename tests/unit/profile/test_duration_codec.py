# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
import pytest

from journeyprofile.common.exceptions import FormatError
from journeyprofile.profile.duration_codec import format_timestamp, parse_timestamp


class TestParseTimestamp:
    @pytest.mark.parametrize(
        "text,expected",
        [
            ("00:00:00", 0),
            ("00:01:00", 60),
            ("00:04:00", 240),
            ("01:02:03", 3723),
            ("23:59:59", 86399),
            ("125:00:00", 450000),
            ("0:00:05", 5),
        ],
    )
    def test_valid(self, text, expected):
        assert parse_timestamp(text) == expected

    @pytest.mark.parametrize(
        "text,match",
        [
            ("", "3 segments"),
            ("00:00", "3 segments"),
            ("00:00:00:00", "3 segments"),
            ("aa:00:00", "non-numeric hours"),
            ("00:bb:00", "non-numeric minutes"),
            ("00:00:1.5", "non-numeric seconds"),
            ("00::00", "non-numeric minutes"),
            ("-01:00:00", "negative hours"),
            ("00:60:00", "two-digit minutes"),
            ("00:00:60", "two-digit seconds"),
            ("00:1:00", "two-digit minutes"),
            ("00:00:001", "two-digit seconds"),
            ("00:00:²²", "non-numeric seconds"),
            (" 00:00:10 ", "non-numeric hours"),
            ("00:00:10\n", "non-numeric seconds"),
        ],
    )
    def test_invalid(self, text, match):
        with pytest.raises(FormatError, match=match):
            parse_timestamp(text)

    @pytest.mark.parametrize("value", [None, 60, 1.5])
    def test_non_string(self, value):
        with pytest.raises(FormatError, match="must be a string"):
            parse_timestamp(value)

    def test_format_error_is_value_error(self):
        with pytest.raises(ValueError):
            parse_timestamp("nope")


class TestFormatTimestamp:
    @pytest.mark.parametrize(
        "offset,expected",
        [
            (0, "00:00:00"),
            (59, "00:00:59"),
            (60, "00:01:00"),
            (3723, "01:02:03"),
            (120.0, "00:02:00"),
            (450000, "125:00:00"),
        ],
    )
    def test_valid(self, offset, expected):
        assert format_timestamp(offset) == expected

    @pytest.mark.parametrize(
        "offset,match",
        [
            (-1, "negative"),
            (1.5, "whole number"),
            (float("inf"), "not finite"),
            (float("nan"), "not finite"),
            (True, "number of seconds"),
            ("60", "number of seconds"),
        ],
    )
    def test_invalid(self, offset, match):
        with pytest.raises(FormatError, match=match):
            format_timestamp(offset)

    @pytest.mark.parametrize("offset", [0, 1, 59, 60, 3599, 3600, 86399, 86400, 360_000])
    def test_round_trip(self, offset):
        assert parse_timestamp(format_timestamp(offset)) == offset
