from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


class PathFormat(str, Enum):
    UNKNOWN = "unknown"
    # foo\bar
    CURRENT_DIRECTORY_RELATIVE = "current_directory_relative"
    # C:foo
    DRIVE_RELATIVE = "drive_relative"
    # C:\foo
    DRIVE_ABSOLUTE = "drive_absolute"
    # \foo
    CURRENT_VOLUME_RELATIVE = "current_volume_relative"
    # \\Server\Share\foo
    UNIFORM_NAMING_CONVENTION = "uniform_naming_convention"
    # \\?\UNC\Server\Share\foo
    UNIFORM_NAMING_CONVENTION_EXTENDED = "uniform_naming_convention_extended"
    # \\?\C:\foo, \\?\Volume{guid}\foo
    VOLUME_ABSOLUTE_EXTENDED = "volume_absolute_extended"
    # \\.\PhysicalDrive0
    DEVICE = "device"


@dataclass(frozen=True)
class PathClassification:
    format: PathFormat
    root_length: int

    @property
    def is_known(self) -> bool:
        return self.format is not PathFormat.UNKNOWN

    def root_of(self, path: str) -> str | None:
        if self.root_length < 0:
            return None
        return path[: self.root_length]

    def to_dict(self, path: str | None = None) -> dict[str, Any]:
        out: dict[str, Any] = {
            "format": self.format.value,
            "root_length": self.root_length,
        }
        if path is not None:
            out["root"] = self.root_of(path)
        return out


UNKNOWN_CLASSIFICATION = PathClassification(PathFormat.UNKNOWN, -1)
