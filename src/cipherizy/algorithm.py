"""Supported cipher algorithm identifiers."""

from __future__ import annotations

from enum import Enum


class Algorithm(str, Enum):
    """Closed set of algorithms the factory can hand out.

    Each member carries the byte sizes its cipher requires.
    """

    AES = "AES"

    @property
    def key_size(self) -> int:
        return _SIZES[self][0]

    @property
    def salt_size(self) -> int:
        return _SIZES[self][1]

    @property
    def block_size(self) -> int:
        return _SIZES[self][2]

    @classmethod
    def parse(cls, value: Algorithm | str) -> Algorithm:
        """Resolve an enum member from a member or its (case-insensitive) name.

        Raises
        ------
        ValueError
            If the value names no known algorithm
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            normalized = value.strip().upper()
            for member in cls:
                if member.value == normalized:
                    return member
        msg = f"Unknown algorithm: {value!r}"
        raise ValueError(msg)


# (key bytes, salt/IV bytes, block bytes)
_SIZES: dict[Algorithm, tuple[int, int, int]] = {
    Algorithm.AES: (16, 16, 16),
}
