"""Positional number bases used to render encrypted IDs as text."""

from __future__ import annotations

from dataclasses import dataclass, field


class InvalidDigitError(ValueError):
    """Raised when a string holds a character that is not a digit of its base."""


@dataclass(frozen=True)
class Base:
    """A number base defined by its ordered digit characters."""

    digits: str
    _index: dict = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if len(self.digits) < 2:
            raise ValueError("a base needs at least two digits")
        index = {char: value for value, char in enumerate(self.digits)}
        if len(index) != len(self.digits):
            raise ValueError("base digits must be distinct")
        object.__setattr__(self, "_index", index)

    @property
    def n(self) -> int:
        """The radix of this base."""
        return len(self.digits)

    def decode(self, text: str) -> int:
        """Return the non-negative integer that ``text`` denotes in this base."""
        value = 0
        radix = self.n
        for char in text:
            try:
                digit = self._index[char]
            except KeyError:
                raise InvalidDigitError(
                    f"invalid digit {char!r} for base{radix}"
                ) from None
            value = value * radix + digit
        return value

    def encode(self, value: int) -> str:
        """Return the shortest string denoting ``value`` in this base."""
        if value < 0:
            raise ValueError("cannot encode a negative value")
        if value == 0:
            return self.digits[0]
        radix = self.n
        out = []
        while value:
            value, digit = divmod(value, radix)
            out.append(self.digits[digit])
        return "".join(reversed(out))


BASE30 = Base("0123456789bcdfghjkmnpqrstvwxyz")
BASE50 = Base("0123456789bcdfghjkmnpqrstvwxyzBCDFGHJKMNPQRSTVWXYZ")
BINARY = Base("".join(map(chr, range(256))))


def convert(text: str, src: Base, dst: Base) -> str:
    """Re-express ``text``, written in base ``src``, in base ``dst``."""
    return dst.encode(src.decode(text))