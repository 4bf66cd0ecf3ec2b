# encid

Encrypted integer IDs. `encid` turns a signed 64-bit integer into a short,
opaque string by encrypting it, as a single AES block, with a key held in a
keystore. Anyone holding the keystore can turn the string back into the
original number; anyone without it sees only noise.

Each key has a *type* (an integer you choose, e.g. 1 for users, 2 for orders)
and a unique *key ID*. Encoding a number yields the key ID together with the
encrypted string; decoding needs both, and gives back the key's type and the
number.

Strings are written in base 30 (digits `0-9` plus the lowercase consonants
`bcdfghjkmnpqrstvwxyz`, so no vowels and no `l`) or base 50 (the same plus
the uppercase consonants `BCDFGHJKMNPQRSTVWXYZ`).

## Installation

```
pip install encid
```

For running the tests: `pip install "encid[test]"`.

## Command line

The `encid` command keeps its keys in a SQLite keystore, by default
`keystore.db` in the `encid` folder of your user configuration directory
(the folder is created if missing). Use `--keystore PATH` (or `-keystore
PATH`) before the subcommand to choose another file.

Create a key of type 1; the new key ID is printed:

```
encid newkey 1
```

Encode the number 42 with the newest key of type 1. If there is no key of
that type yet, one is created first. The output is the key ID followed by
the encoded string:

```
encid enc 1 42
```

Decode it again, giving the key ID and the string. The output is the key type
and the number:

```
encid dec 1 <string>
```

Add `-50` (or `--50`) to `enc` or `dec` to use base 50 instead of base 30.
On failure (unknown key, invalid string, database error) the command prints
a message prefixed with `encid:` to standard error and exits with status 1.

## Library

```python
from encid.core import encode, decode, encode50, decode50
from encid.sqlite_store import SQLiteKeyStore

with SQLiteKeyStore("keystore.db") as ks:
    ks.new_key(1, 16)
    key_id, text = encode(ks, 1, 42)
    typ, n = decode(ks, key_id, text)
    assert (typ, n) == (1, 42)
```

- `encid.core.encode(ks, typ, n)` / `encode50(ks, typ, n)` return
  `(key_id, text)`.
- `encid.core.decode(ks, key_id, text)` / `decode50(ks, key_id, text)` return
  `(typ, n)`. `decode` lowercases its input first; `decode50` does not, since
  base-50 strings are case-sensitive.
- `encid.core.encode_with(ks, typ, n, base, random_bytes=None)` and
  `decode_with(ks, key_id, inp, base)` take any `encid.basexx.Base`;
  `random_bytes` is a callable `size -> bytes` supplying the padding of
  version-1 blocks (default `os.urandom`).

Errors:

- an unknown key type or key ID raises `encid.core.NotFoundError`
  (a `LookupError`);
- a character outside the alphabet raises `encid.basexx.InvalidDigitError`
  (a `ValueError`);
- a string too long for one block, or a block that fails its checks after
  decryption, raises `ValueError`;
- a number outside the signed 64-bit range raises `ValueError`.

### SQLite keystore

`encid.sqlite_store.SQLiteKeyStore(filename, newcipher=None)` opens or
creates the database, creating its tables if needed. It offers
`new_key(typ, keysize)` (stores `keysize` random bytes and returns the new
key ID), `encoder_by_type(typ)` (uses the key of that type with the highest
ID), `decoder_by_id(key_id)`, `version`, `close()`, and use as a context
manager. `newcipher` takes key bytes and returns an object with single-block
`encrypt` and `decrypt` methods; it defaults to `encid.core.AESBlockCipher`,
so keys must be 16, 24 or 32 bytes. A failure to build the cipher raises
`RuntimeError`.

### Keystore versions

A keystore that holds no keys when opened is set to version 2 of the
encoding, which puts a version byte, the number in little-endian form and
zero padding into the block; decoding checks the version byte and the
padding, so most mistyped or tampered strings are rejected. A keystore that
already held keys at version 1 stays at version 1, where the block holds the
number as a varint followed by random padding. The two encodings are not
interchangeable.

### Custom keystores

Any object with `encoder_by_type(typ)` returning `(key_id, encrypt)` and
`decoder_by_id(key_id)` returning `(typ, decrypt)` can serve as a keystore
(see `encid.core.KeyStore`); the functions map one 16-byte block to another.
Give it a `version` attribute of 2 or more to use the version-2 encoding;
without one it is treated as version 1 (`encid.core.keystore_version`).

### Bases

`encid.basexx` provides `Base(digits)` with `encode(value)` and
`decode(text)`, the ready-made `BASE30`, `BASE50` and `BINARY`, and
`convert(text, src, dst)`.

### Testing helpers

`encid.testutil.DemoKeyStore(num_types=0, version=1)` is a deterministic
keystore whose keys are derived from their IDs (IDs above 999999 are not
found), and `encid.testutil.check_round_trip(ks, num_types, values)` encodes
and decodes each positive value under every type from 1 to `num_types - 1`,
raising `AssertionError` on a mismatch and returning the number of round
trips.

## Limitations

Keys can be created and used, but neither the command nor the library offers
a way to list, export or delete keys in a keystore.