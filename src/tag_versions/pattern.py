# *******************************************************************************
# Copyright (c) 2025 Contributors to the Eclipse Foundation
#
# See the NOTICE file(s) distributed with this work for additional
# information regarding copyright ownership.
#
# This program and the accompanying materials are made available under the
# terms of the Apache License Version 2.0 which is available at
# https://www.apache.org/licenses/LICENSE-2.0
#
# SPDX-License-Identifier: Apache-2.0
# *******************************************************************************

"""Locate a version-like substring inside a noisy label.

Labels such as ``resin-1.2.3`` or ``nginx:1.25-alpine`` carry a version
somewhere in the middle. ``VERSION_PATTERN`` describes what a version looks
like; ``extract`` returns where the first one starts and ends.

The same pattern is used by ``version.parse`` to split the extracted text
into its parts, so whatever is extracted can always be structured.
"""

import re
from typing import NamedTuple

_NUMBER = r"0|[1-9]\d*"
# A numeric identifier must end where the identifier ends ("1a" is one
# alphanumeric identifier); a hyphen right before "+" belongs to the "-+"
# build marker, not to the identifier.
_NUMERIC_ID = rf"(?:{_NUMBER})(?![0-9a-zA-Z]|-(?!\+))"
_ALNUM_ID = r"\d*[a-zA-Z-][0-9a-zA-Z-]*(?!(?<=-)\+)"
_IDENTIFIER = rf"(?:{_NUMERIC_ID}|{_ALNUM_ID})"

# minor, patch, prerelease and build are only recognised after a minor
# component, so a bare number like "20220202-alpha" stops at "20220202".
VERSION_PATTERN = re.compile(
    rf"""
    (?P<major>{_NUMBER})
    (?:
        \.(?P<minor>{_NUMBER})
        (?:\.(?P<patch>{_NUMBER}))?
        (?:
            (?P<sep>[-.])
            (?P<prerelease>{_IDENTIFIER}(?:\.{_IDENTIFIER})*)
        )?
        (?:-?\+(?P<build>[0-9a-zA-Z-]+(?:\.[0-9a-zA-Z-]+)*))?
    )?
    """,
    re.VERBOSE | re.ASCII,
)


class Span(NamedTuple):
    """Character (code point) offsets of a match, usable as ``label[span.start : span.end]``.

    Use ``in_bytes`` for offsets into the UTF-8 encoding of the label.
    """

    start: int
    end: int

    def in_bytes(self, label: str) -> "Span":
        start = len(label[: self.start].encode("utf-8"))
        return Span(start, start + len(label[self.start : self.end].encode("utf-8")))


def extract(label: str) -> Span | None:
    """Return the span of the leftmost version in ``label``, or None."""
    if not isinstance(label, str):
        raise TypeError("Label must be a string")

    m = VERSION_PATTERN.search(label)
    if not m:
        return None
    return Span(m.start(), m.end())


def match_span(label: str) -> str | None:
    """Like ``extract``, but return the matched text itself."""
    span = extract(label)
    if span is None:
        return None
    return label[span.start : span.end]
