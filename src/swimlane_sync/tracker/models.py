"""Data models for the Tracker Client."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Session:
    """Tracker login session, sent back as a cookie."""

    name: str
    value: str

    @property
    def cookie(self) -> str:
        return f"{self.name}={self.value}"
