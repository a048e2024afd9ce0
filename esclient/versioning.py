"""
Parsed server versions with a total ordering.

Server version strings come in a few shapes: plain releases ("7.10.2"),
pre-releases ("8.0.0-rc1", "7.14-SNAPSHOT", "8.3.0.pre"), wildcard
snapshots ("7.x-SNAPSHOT"), extra release segments ("7.0.0.1") and build
metadata ("7.0.0+build1"). Comparing them as strings gives wrong answers
("10.0.0" < "6.0.0"), so the verification rules compare VersionSpec values.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from functools import total_ordering
from typing import Optional, Tuple

# major[.minor[.patch[.N...]]] then an optional pre-release tag (after "-",
# after "." when it starts with a letter, or directly attached), then
# optional "+build" metadata.
_VERSION_RE = re.compile(
    r"^(\d+)(?:\.(\d+|x))?(?:\.(\d+|x))?((?:\.\d+)*)"
    r"(?:(?:-|\.(?=[A-Za-z])|(?=[A-Za-z]))([0-9A-Za-z][0-9A-Za-z.-]*))?"
    r"(?:\+([0-9A-Za-z][0-9A-Za-z.-]*))?$"
)
_WILDCARD = "x"


def _component_key(value: Optional[int]) -> Tuple[int, int]:
    # None is a wildcard component; it sorts above every number.
    return (1, 0) if value is None else (0, value)


def _prerelease_key(tag: Optional[str]) -> Tuple:
    if tag is None:
        return (1,)
    parts = []
    for ident in tag.split("."):
        if ident.isdigit():
            parts.append((0, int(ident), ""))
        else:
            parts.append((1, 0, ident))
    return (0, tuple(parts))


@total_ordering
@dataclass(frozen=True)
class VersionSpec:
    """
    major.minor.patch plus optional extra release segments, an optional
    pre-release tag and optional build metadata.

    A pre-release sorts below its release (8.0.0-rc1 < 8.0.0). A wildcard
    component ("x") is stored as None and sorts above every numeric value in
    the same position, so 7.x-SNAPSHOT > 7.99.0. Missing minor/patch
    components are 0 ("7.14-SNAPSHOT" == "7.14.0-SNAPSHOT"). Segments past
    patch are release components (7.0.0 < 7.0.0.1 < 7.0.1) with trailing
    zeros dropped. Build metadata ("+build1") is kept but never compared.
    """

    major: int
    minor: Optional[int] = 0
    patch: Optional[int] = 0
    extra: Tuple[int, ...] = ()
    prerelease: Optional[str] = None
    build: Optional[str] = field(default=None, compare=False)
    raw: str = field(default="", compare=False)

    @classmethod
    def parse(cls, value: str) -> "VersionSpec":
        if not isinstance(value, str):
            raise ValueError(f"Version must be a string, got {type(value).__name__}")
        text = value.strip()
        match = _VERSION_RE.match(text)
        if not match:
            raise ValueError(f"Unparseable version: {value!r}")

        major_s, minor_s, patch_s, extra_s, prerelease, build = match.groups()
        minor = cls._parse_component(minor_s, wildcard_above=False)
        patch = cls._parse_component(patch_s, wildcard_above=minor is None)
        return cls(
            major=int(major_s),
            minor=minor,
            patch=patch,
            extra=cls._parse_extra(extra_s),
            prerelease=prerelease,
            build=build,
            raw=text,
        )

    @staticmethod
    def _parse_component(value: Optional[str], wildcard_above: bool) -> Optional[int]:
        if value is None:
            return None if wildcard_above else 0
        if value == _WILDCARD:
            return None
        return int(value)

    @staticmethod
    def _parse_extra(value: str) -> Tuple[int, ...]:
        segments = [int(part) for part in value.split(".") if part]
        while segments and segments[-1] == 0:
            segments.pop()
        return tuple(segments)

    @property
    def is_prerelease(self) -> bool:
        return self.prerelease is not None

    def sort_key(self) -> Tuple:
        return (
            self.major,
            _component_key(self.minor),
            _component_key(self.patch),
            self.extra,
            _prerelease_key(self.prerelease),
        )

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, VersionSpec):
            return NotImplemented
        return self.sort_key() < other.sort_key()

    def __str__(self) -> str:
        if self.raw:
            return self.raw
        minor = _WILDCARD if self.minor is None else self.minor
        patch = _WILDCARD if self.patch is None else self.patch
        text = ".".join(str(part) for part in (self.major, minor, patch, *self.extra))
        if self.prerelease:
            text = f"{text}-{self.prerelease}"
        return f"{text}+{self.build}" if self.build else text
