from __future__ import annotations

from typing import Tuple

Point = Tuple[float, float]


class Undefined:
    """Marks a value that has not been assigned yet."""

    _inst = None

    def __new__(cls) -> Undefined:
        if cls._inst is None:
            cls._inst = super().__new__(cls)
        return cls._inst

    def __repr__(self) -> str:
        return "Undefined"


undefined = Undefined()
