# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Conversion between scenario timestamps and offsets from run start.

Timestamps have the form ``HH:MM:SS``. Minutes and seconds are two digits in
[00, 59]; hours are unbounded, so ``125:00:00`` is a valid offset. Offsets are
whole seconds since the (implicit) run start at zero.
"""

import math

from journeyprofile.common.constants import (
    SECONDS_PER_HOUR,
    SECONDS_PER_MINUTE,
    TIMESTAMP_SEPARATOR,
)
from journeyprofile.common.exceptions import FormatError

_NUM_SEGMENTS = 3
_SEGMENT_NAMES = ("hours", "minutes", "seconds")


def _parse_segment(text: str, name: str, segment: str) -> int:
    if segment.startswith("-"):
        raise FormatError(f"Timestamp {text!r} has a negative {name} value")
    # str.isdigit() also accepts non-ASCII digits such as superscripts
    if not segment or not (segment.isascii() and segment.isdigit()):
        raise FormatError(f"Timestamp {text!r} has a non-numeric {name} value")
    return int(segment)


def parse_timestamp(text: str) -> int:
    """Decode an ``HH:MM:SS`` timestamp into seconds since run start.

    Raises:
        FormatError: If the text does not have three segments, a segment is not a
            non-negative integer (whitespace is not stripped), or
            minutes/seconds are not two digits below 60.
    """
    if not isinstance(text, str):
        raise FormatError(f"Timestamp must be a string, got {type(text).__name__}")

    segments = text.split(TIMESTAMP_SEPARATOR)
    if len(segments) != _NUM_SEGMENTS:
        raise FormatError(
            f"Timestamp {text!r} must have {_NUM_SEGMENTS} segments (HH:MM:SS), "
            f"got {len(segments)}"
        )

    hours, minutes, seconds = (
        _parse_segment(text, name, segment)
        for name, segment in zip(_SEGMENT_NAMES, segments, strict=True)
    )

    for name, segment, value in (
        ("minutes", segments[1], minutes),
        ("seconds", segments[2], seconds),
    ):
        if len(segment) != 2 or value >= SECONDS_PER_MINUTE:
            raise FormatError(
                f"Timestamp {text!r} must have two-digit {name} between 00 and 59"
            )

    return hours * SECONDS_PER_HOUR + minutes * SECONDS_PER_MINUTE + seconds


def format_timestamp(offset_sec: int | float) -> str:
    """Encode seconds since run start as a zero-padded ``HH:MM:SS`` timestamp.

    Raises:
        FormatError: If the offset is negative or not a whole number of seconds.
    """
    if isinstance(offset_sec, bool) or not isinstance(offset_sec, int | float):
        raise FormatError(
            f"Offset must be a number of seconds, got {type(offset_sec).__name__}"
        )
    if not math.isfinite(offset_sec):
        raise FormatError(f"Offset {offset_sec} is not finite")
    if offset_sec < 0:
        raise FormatError(f"Offset {offset_sec} is negative")
    if offset_sec != int(offset_sec):
        raise FormatError(f"Offset {offset_sec} is not a whole number of seconds")

    total = int(offset_sec)
    hours, remainder = divmod(total, SECONDS_PER_HOUR)
    minutes, seconds = divmod(remainder, SECONDS_PER_MINUTE)
    return f"{hours:02d}:{minutes:02d}:{seconds:02d}"
