"""A key store kept in an SQLite database file."""

from __future__ import annotations

import os
import sqlite3
from typing import Any, Callable, Optional

from .core import AESBlockCipher, BlockFunc, NotFoundError

CipherFactory = Callable[[bytes], Any]

_SCHEMA = """
CREATE TABLE IF NOT EXISTS keys (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    typ INTEGER NOT NULL,
    k BLOB NOT NULL
);
CREATE INDEX IF NOT EXISTS keys_typ ON keys (typ);
CREATE TABLE IF NOT EXISTS version (
    singleton INTEGER PRIMARY KEY CHECK (singleton = 0),
    version INTEGER NOT NULL
);
INSERT OR IGNORE INTO version (singleton, version) VALUES (0, 1);
"""


class SQLiteKeyStore:
    """A key store backed by an SQLite database.

    ``newcipher`` takes a key and returns an object with ``encrypt`` and
    ``decrypt`` methods working on single blocks; it defaults to AES.

    A store holding no keys when opened is set to version 2. A non-empty
    store created at version 1 stays at version 1, since the two encodings
    are not compatible.
    """

    def __init__(self, filename: str | os.PathLike, newcipher: Optional[CipherFactory] = None) -> None:
        self._db = sqlite3.connect(os.fspath(filename))
        try:
            self._db.executescript(_SCHEMA)
            with self._db:
                (nkeys,) = self._db.execute("SELECT COUNT(*) FROM keys").fetchone()
                if nkeys == 0:
                    self._db.execute(
                        "UPDATE version SET version = 2 WHERE singleton = 0 AND version < 2"
                    )
            (self._version,) = self._db.execute(
                "SELECT version FROM version WHERE singleton = 0"
            ).fetchone()
        except BaseException:
            self._db.close()
            raise
        self._newcipher: CipherFactory = newcipher or AESBlockCipher

    @property
    def version(self) -> int:
        """The encoding version this store uses."""
        return self._version

    def _make_cipher(self, key: bytes, key_id: int) -> Any:
        try:
            return self._newcipher(bytes(key))
        except Exception as exc:
            raise RuntimeError(f"creating cipher for key {key_id}: {exc}") from exc

    def decoder_by_id(self, key_id: int) -> tuple[int, BlockFunc]:
        """Return the type of key ``key_id`` and its block decryption function."""
        row = self._db.execute("SELECT typ, k FROM keys WHERE id = ?", (key_id,)).fetchone()
        if row is None:
            raise NotFoundError(f"no key with ID {key_id}")
        typ, key = row
        return typ, self._make_cipher(key, key_id).decrypt

    def encoder_by_type(self, typ: int) -> tuple[int, BlockFunc]:
        """Return the newest key ID of type ``typ`` and its block encryption function."""
        row = self._db.execute(
            "SELECT id, k FROM keys WHERE typ = ? ORDER BY id DESC LIMIT 1", (typ,)
        ).fetchone()
        if row is None:
            raise NotFoundError(f"no key with type {typ}")
        key_id, key = row
        return key_id, self._make_cipher(key, key_id).encrypt

    def new_key(self, typ: int, keysize: int) -> int:
        """Generate and store a random key of ``keysize`` bytes; return its ID."""
        key = os.urandom(keysize)
        with self._db:
            cursor = self._db.execute("INSERT INTO keys (typ, k) VALUES (?, ?)", (typ, key))
        return cursor.lastrowid

    def close(self) -> None:
        """Close the database connection."""
        self._db.close()

    def __enter__(self) -> "SQLiteKeyStore":
        return self

    def __exit__(self, *args: object) -> None:
        self.close()