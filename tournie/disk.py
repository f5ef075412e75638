"""Locating the SD card and reading what is installed on it."""

from __future__ import annotations

import xml.etree.ElementTree as ET
from pathlib import Path, PurePath

import psutil

SLIPPI_APP_NAME = "Slippi Nintendont"


class SDHandler:
    """A mounted SD card."""

    def __init__(self, path: str | Path):
        self.path = Path(path)

    def __repr__(self) -> str:
        return f"SDHandler({str(self.path)!r})"

    @classmethod
    def find_sd(cls, media_root: str | Path = "/media") -> SDHandler | None:
        """Return the first disk mounted under ``media_root``, if any."""
        root = PurePath(media_root)
        for partition in psutil.disk_partitions():
            mount = PurePath(partition.mountpoint)
            if mount == root or root in mount.parents:
                return cls(Path(partition.mountpoint))
        return None

    def slippi_version(self) -> str | None:
        """Return the version of the Slippi Nintendont app, if installed."""
        try:
            entries = sorted((self.path / "apps").iterdir())
        except OSError:
            return None
        for entry in entries:
            if not entry.is_dir():
                continue
            try:
                root = ET.parse(entry / "meta.xml").getroot()
            except (OSError, ET.ParseError):
                continue
            name = root.find("name")
            if name is None or "".join(name.itertext()) != SLIPPI_APP_NAME:
                continue
            version = root.find("version")
            if version is None:
                continue
            return "".join(version.itertext())
        return None