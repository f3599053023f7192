"""Named resources owned by systems."""

from __future__ import annotations


class Resource:
    """Something a system owns and releases when it is removed."""

    def __init__(self, name: str = "") -> None:
        self.name = name

    def close(self) -> None:
        """Release whatever the resource holds; nothing by default."""