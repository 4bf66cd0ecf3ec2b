"""A deterministic key store and a round-trip checker for exercising key stores."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from .core import AESBlockCipher, BlockFunc, KeyStore, NotFoundError, decode, encode

_MAX_KEY_ID = 999999


@dataclass(frozen=True)
class DemoKeyStore:
    """A key store whose keys are derived from their IDs.

    The key with ID ``k`` is 16 bytes holding ``k`` as a big-endian 32-bit
    number followed by zeros. The key for type ``t`` has ID ``t``; the type
    of key ``k`` is ``k`` modulo ``num_types`` (2 when ``num_types`` < 1).
    """

    num_types: int = 0
    version: int = 1

    @staticmethod
    def _cipher(key_id: int) -> AESBlockCipher:
        if key_id > _MAX_KEY_ID:
            raise NotFoundError(f"no key with ID {key_id}")
        key = (key_id & 0xFFFFFFFF).to_bytes(4, "big") + bytes(12)
        return AESBlockCipher(key)

    def decoder_by_id(self, key_id: int) -> tuple[int, BlockFunc]:
        modulus = self.num_types if self.num_types >= 1 else 2
        cipher = self._cipher(key_id)
        remainder = abs(key_id) % modulus
        typ = -remainder if key_id < 0 else remainder
        return typ, cipher.decrypt

    def encoder_by_type(self, typ: int) -> tuple[int, BlockFunc]:
        cipher = self._cipher(typ)
        return typ, cipher.encrypt


def check_round_trip(ks: KeyStore, num_types: int, values: Iterable[int]) -> int:
    """Encode and decode each positive value under every type in 1..num_types-1.

    Raises AssertionError on the first mismatch and returns the number of
    round trips performed.
    """
    checked = 0
    for n in values:
        if n <= 0:
            continue
        for typ in range(1, num_types):
            key_id, text = encode(ks, typ, n)
            got_typ, got_n = decode(ks, key_id, text)
            if (got_typ, got_n) != (typ, n):
                raise AssertionError(
                    f"decode(encode({typ}, {n})) = ({got_typ}, {got_n})"
                )
            checked += 1
    return checked