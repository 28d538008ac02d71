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

from dataclasses import dataclass
from enum import Enum
from functools import total_ordering

import semver

from .pattern import VERSION_PATTERN, match_span

PrereleaseId = int | str


class Shape(Enum):
    IDEAL = "ideal"
    GENERAL = "general"
    COMPLEX = "complex"


@dataclass(frozen=True)
class Ideal:
    """Plain ``major.minor.patch``."""

    semver: semver.Version


@dataclass(frozen=True)
class General:
    """Only numbers separated by dots, but not exactly three of them."""

    chunks: tuple[int, ...]


@dataclass(frozen=True)
class Complex:
    """Anything carrying a prerelease or build metadata."""

    chunks: tuple[int, ...]
    prerelease: tuple[PrereleaseId, ...] = ()
    sep: str = "-"
    build: tuple[str, ...] = ()


Variant = Ideal | General | Complex


def _chunks_of(inner: Variant) -> tuple[int, ...]:
    match inner:
        case Ideal(semver=sv):
            return (sv.major, sv.minor, sv.patch)
        case General(chunks=chunks) | Complex(chunks=chunks):
            return chunks
    raise TypeError(f"Unknown version variant {inner!r}")


def _strip_zeros(chunks: tuple[int, ...]) -> tuple[int, ...]:
    # "1.2" and "1.2.0" sort and hash the same
    end = len(chunks)
    while end > 1 and chunks[end - 1] == 0:
        end -= 1
    return chunks[:end]


def _prerelease_key(ids: tuple[PrereleaseId, ...]) -> tuple[tuple[int, PrereleaseId], ...]:
    # Numbers sort below words; a shorter list sorts below its extensions.
    return tuple((0, i) if isinstance(i, int) else (1, i) for i in ids)


@total_ordering
class Version:
    """A version found in a label.

    Instances come from ``parse`` or ``parse_version``. The wrapped variant
    decides the shape; it is fixed at parse time and never changes.

    Ordering compares numeric chunks first (missing trailing chunks count as
    zero), then puts a release above any of its prereleases, then compares
    prerelease identifiers. Build metadata never takes part.
    """

    __slots__ = ("_inner",)

    def __init__(self) -> None:
        raise TypeError("Versions are created with parse() or parse_version()")

    @classmethod
    def _from_variant(cls, inner: Variant) -> "Version":
        version = cls.__new__(cls)
        version._inner = inner
        return version

    @property
    def inner(self) -> Variant:
        return self._inner

    @property
    def shape(self) -> Shape:
        match self._inner:
            case Ideal():
                return Shape.IDEAL
            case General():
                return Shape.GENERAL
            case _:
                return Shape.COMPLEX

    def is_ideal(self) -> bool:
        return isinstance(self._inner, Ideal)

    def is_general(self) -> bool:
        return isinstance(self._inner, General)

    def is_complex(self) -> bool:
        return isinstance(self._inner, Complex)

    @property
    def chunks(self) -> tuple[int, ...]:
        return _chunks_of(self._inner)

    @property
    def major(self) -> int:
        return self.chunks[0]

    @property
    def prerelease(self) -> tuple[PrereleaseId, ...]:
        if isinstance(self._inner, Complex):
            return self._inner.prerelease
        return ()

    @property
    def build(self) -> tuple[str, ...]:
        if isinstance(self._inner, Complex):
            return self._inner.build
        return ()

    @property
    def is_prerelease(self) -> bool:
        return bool(self.prerelease)

    def nth(self, n: int) -> int | None:
        """Return the n-th numeric chunk (0 is major), or None if there is none."""
        if n < 0:
            raise ValueError(f"Chunk index must not be negative, got {n}")
        chunks = self.chunks
        return chunks[n] if n < len(chunks) else None

    def to_semver(self) -> semver.Version | None:
        """Convert to a ``semver.Version`` where that loses nothing but padding.

        Returns None for versions with more than three numeric chunks or a
        prerelease introduced with a dot.
        """
        match self._inner:
            case Ideal(semver=sv):
                return sv
            case General(chunks=chunks) if len(chunks) <= 3:
                return semver.Version(*chunks)
            case Complex(chunks=chunks, prerelease=pre, sep=sep, build=build) if (
                len(chunks) <= 3 and (sep == "-" or not pre)
            ):
                return semver.Version(
                    *chunks,
                    prerelease=".".join(str(i) for i in pre) or None,
                    build=".".join(build) or None,
                )
        return None

    def _key(self) -> tuple:
        pre = self.prerelease
        return (_strip_zeros(self.chunks), 0 if pre else 1, _prerelease_key(pre))

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self._key() < other._key()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __str__(self) -> str:
        match self._inner:
            case Ideal(semver=sv):
                return str(sv)
            case General(chunks=chunks):
                return ".".join(str(c) for c in chunks)
            case Complex(chunks=chunks, prerelease=pre, sep=sep, build=build):
                s = ".".join(str(c) for c in chunks)
                if pre:
                    s += sep + ".".join(str(i) for i in pre)
                if build:
                    # a prerelease ending in "-" keeps its hyphen only before "-+"
                    marker = "-+" if s.endswith("-") else "+"
                    s += marker + ".".join(build)
                return s
        raise TypeError(f"Unknown version variant {self._inner!r}")

    def __repr__(self) -> str:
        return f"Version({self._inner!r})"


def _identifier(token: str) -> PrereleaseId:
    return int(token) if token.isdigit() else token


def parse(substring: str) -> Version | None:
    """Structure an already extracted version string.

    Returns None if ``substring`` is not exactly one version, e.g. when it
    still carries text around the version.
    """
    if not isinstance(substring, str):
        raise TypeError("Version must be a string")

    m = VERSION_PATTERN.fullmatch(substring)
    if not m:
        return None

    chunks = [int(m["major"])]
    if m["minor"] is not None:
        chunks.append(int(m["minor"]))
    if m["patch"] is not None:
        chunks.append(int(m["patch"]))

    sep = m["sep"] or "-"
    ids = [_identifier(t) for t in m["prerelease"].split(".")] if m["prerelease"] else []
    if sep == ".":
        # "1.2.3.4" is four numeric chunks rather than a prerelease
        while ids and isinstance(ids[0], int):
            chunks.append(ids.pop(0))
    build = tuple(m["build"].split(".")) if m["build"] else ()

    if ids or build:
        return Version._from_variant(
            Complex(chunks=tuple(chunks), prerelease=tuple(ids), sep=sep, build=build)
        )
    if len(chunks) == 3:
        return Version._from_variant(Ideal(semver.Version(*chunks)))
    return Version._from_variant(General(tuple(chunks)))


def parse_version(label: str) -> Version | None:
    """Find the first version in ``label`` and parse it.

    >>> str(parse_version("resin-1.2.3"))
    '1.2.3'
    >>> parse_version("not-a-version") is None
    True
    """
    found = match_span(label)
    if found is None:
        return None
    return parse(found)
