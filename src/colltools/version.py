"""Version of the colltools package"""

from __future__ import annotations

import re
from typing import NamedTuple

__all__ = ["version", "version_info", "VersionInfo"]


version = "1.0.2"


_re_version = re.compile(r"(\d+)\.(\d+)\.(\d+)(\D*)(\d*)")

_release_levels = {"a": "alpha", "b": "beta", "c": "candidate", "r": "candidate"}


class VersionInfo(NamedTuple):
    """Version number split into its components, like ``sys.version_info``"""

    major: int
    minor: int
    micro: int
    releaselevel: str = "final"
    serial: int = 0

    @classmethod
    def from_str(cls, v: str) -> VersionInfo:
        match = _re_version.match(v)
        if not match:
            msg = f"Invalid version string: {v!r}."
            raise ValueError(msg)
        major, minor, micro, level, serial = match.groups()
        return cls(
            int(major),
            int(minor),
            int(micro),
            _release_levels.get(level[:1], "final"),
            int(serial) if serial else 0,
        )

    def __str__(self) -> str:
        v = ".".join(map(str, self[:3]))
        if self.releaselevel != "final":
            v += f"{self.releaselevel[:1]}{self.serial}"
        return v


version_info = VersionInfo.from_str(version)
