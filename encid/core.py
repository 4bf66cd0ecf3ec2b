"""Encrypted integer IDs.

A 64-bit signed integer is packed into one AES block, encrypted with a key
taken from a key store, and rendered as a base-30 or base-50 string. The ID
of the key travels alongside the string so that it can be decoded again.
"""

from __future__ import annotations

import os
from typing import Callable, Optional, Protocol

from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes

from .basexx import BASE30, BASE50, Base

BLOCK_SIZE = 16

_UINT64_MASK = (1 << 64) - 1
_INT64_MIN = -(1 << 63)
_INT64_MAX = (1 << 63) - 1
_MAX_VARINT_LEN = 10
_VERSION_BYTE = 2

BlockFunc = Callable[[bytes], bytes]


class NotFoundError(LookupError):
    """Raised by a key store that holds no key matching a request."""


class KeyStore(Protocol):
    """A store of block-cipher keys, each with a type and a unique ID.

    A store may also carry an integer ``version`` attribute; a store at
    version 2 or later uses the stricter block layout. Stores without one
    are treated as version 1.
    """

    def decoder_by_id(self, key_id: int) -> tuple[int, BlockFunc]:
        """Return the key's type and a function decrypting one block."""
        ...

    def encoder_by_type(self, typ: int) -> tuple[int, BlockFunc]:
        """Return a key ID for the type and a function encrypting one block."""
        ...


class AESBlockCipher:
    """Single-block AES encryption and decryption under one key."""

    def __init__(self, key: bytes) -> None:
        if len(key) not in (16, 24, 32):
            raise ValueError(f"invalid AES key size {len(key)}")
        self._cipher = Cipher(algorithms.AES(bytes(key)), modes.ECB())

    @staticmethod
    def _check(block: bytes) -> None:
        if len(block) != BLOCK_SIZE:
            raise ValueError(f"block must be {BLOCK_SIZE} bytes, got {len(block)}")

    def encrypt(self, block: bytes) -> bytes:
        """Encrypt exactly one 16-byte block."""
        self._check(block)
        encryptor = self._cipher.encryptor()
        return encryptor.update(bytes(block)) + encryptor.finalize()

    def decrypt(self, block: bytes) -> bytes:
        """Decrypt exactly one 16-byte block."""
        self._check(block)
        decryptor = self._cipher.decryptor()
        return decryptor.update(bytes(block)) + decryptor.finalize()


def keystore_version(ks: object) -> int:
    """Return the encoding version a key store asks for (1 if it states none)."""
    return int(getattr(ks, "version", 1))


def _check_int64(n: int) -> None:
    if not _INT64_MIN <= n <= _INT64_MAX:
        raise ValueError(f"{n} does not fit in a signed 64-bit integer")


def _put_varint(n: int) -> bytes:
    zigzag = (n << 1) & _UINT64_MASK
    if n < 0:
        zigzag = ~zigzag & _UINT64_MASK
    out = bytearray()
    while zigzag >= 0x80:
        out.append((zigzag & 0x7F) | 0x80)
        zigzag >>= 7
    out.append(zigzag)
    return bytes(out)


def _read_varint(buf: bytes) -> int:
    value = 0
    shift = 0
    for position, byte in enumerate(buf):
        if position == _MAX_VARINT_LEN:
            raise ValueError("decoding error")
        if byte < 0x80:
            if position == _MAX_VARINT_LEN - 1 and byte > 1:
                raise ValueError("decoding error")
            value |= byte << shift
            break
        value |= (byte & 0x7F) << shift
        shift += 7
    else:
        raise ValueError("decoding error")
    result = value >> 1
    if value & 1:
        result = ~result
    return result


def encode_with(
    ks: KeyStore,
    typ: int,
    n: int,
    base: Base,
    random_bytes: Optional[Callable[[int], bytes]] = None,
) -> tuple[int, str]:
    """Encrypt ``n`` with a key of type ``typ`` and render it in ``base``.

    ``random_bytes`` supplies the padding of version-1 blocks; it defaults
    to the operating system's random source.
    """
    _check_int64(n)
    key_id, encrypt = ks.encoder_by_type(typ)

    if keystore_version(ks) >= 2:
        block = (
            bytes([_VERSION_BYTE])
            + (n & _UINT64_MASK).to_bytes(8, "little")
            + bytes(BLOCK_SIZE - 9)
        )
    else:
        head = _put_varint(n)
        needed = BLOCK_SIZE - len(head)
        padding = (random_bytes or os.urandom)(needed)
        if len(padding) != needed:
            raise ValueError("padding cipher block with random bytes: short read")
        block = head + bytes(padding)

    encrypted = encrypt(block)
    return key_id, base.encode(int.from_bytes(encrypted, "big"))


def decode_with(ks: KeyStore, key_id: int, inp: str, base: Base) -> tuple[int, int]:
    """Decode ``inp``, written in ``base``, with the key ``key_id``.

    Returns the key's type and the integer that was encrypted.
    """
    typ, decrypt = ks.decoder_by_id(key_id)

    value = base.decode(inp)
    size = (value.bit_length() + 7) // 8
    if size > BLOCK_SIZE:
        raise ValueError(f"input string too long ({size} bytes)")

    block = decrypt(value.to_bytes(BLOCK_SIZE, "big"))

    if keystore_version(ks) >= 2:
        if block[0] != _VERSION_BYTE:
            raise ValueError(f"unexpected version byte {block[0]}")
        if any(block[9:]):
            raise ValueError("zero-padding check failed")
        n = int.from_bytes(block[1:9], "little")
        if n > _INT64_MAX:
            n -= 1 << 64
        return typ, n

    return typ, _read_varint(block)


def encode(ks: KeyStore, typ: int, n: int) -> tuple[int, str]:
    """Encode ``n`` in base 30; returns the key ID and the encrypted string."""
    return encode_with(ks, typ, n, BASE30)


def encode50(ks: KeyStore, typ: int, n: int) -> tuple[int, str]:
    """Encode ``n`` in base 50; returns the key ID and the encrypted string."""
    return encode_with(ks, typ, n, BASE50)


def decode(ks: KeyStore, key_id: int, inp: str) -> tuple[int, int]:
    """Decode a base-30 string from ``encode``; the input is lowercased first."""
    return decode_with(ks, key_id, inp.lower(), BASE30)


def decode50(ks: KeyStore, key_id: int, inp: str) -> tuple[int, int]:
    """Decode a base-50 string from ``encode50``; the input is case-sensitive."""
    return decode_with(ks, key_id, inp, BASE50)