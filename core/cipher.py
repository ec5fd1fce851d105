"""core/cipher.py — Framing, hashing and encryption of the save file.

On disk::

    AES-128-CBC / PKCS7 (
        i32     payload length
        32 B    SHA-256 of payload
        payload (see core/codec.py)
    )

The key and IV are fixed and sit right here in the source.  This is
**not** confidentiality: anyone with the code can decrypt the file.  It
keeps casual editors out and, with the hash, detects damaged files.
"""

from __future__ import annotations
import hashlib
import struct
from pathlib import Path

from Crypto.Cipher import AES
from Crypto.Util.Padding import pad, unpad

from core.codec import (
    CorruptRecord, MissingRecord, encode_record, decode_record,
)
from core.record import SaveRecord

_KEY = b"veryhappyMRMtaso"
_IV = b"Marimomarimomari"

_LENGTH = struct.Struct("<i")
_HASH_SIZE = 32
HEADER_SIZE = _LENGTH.size + _HASH_SIZE   # 36


def _cipher():
    # CBC objects are stateful; one per message
    return AES.new(_KEY, AES.MODE_CBC, iv=_IV)


def seal(payload: bytes) -> bytes:
    """Frame *payload* with its length and hash, then encrypt."""
    digest = hashlib.sha256(payload).digest()
    frame = _LENGTH.pack(len(payload)) + digest + payload
    return _cipher().encrypt(pad(frame, AES.block_size))


def unseal(blob: bytes) -> bytes:
    """Decrypt and verify; return the payload.  Raises ``CorruptRecord``."""
    if not blob or len(blob) % AES.block_size:
        raise CorruptRecord(f"ciphertext length {len(blob)} is not a whole number of blocks")
    try:
        frame = unpad(_cipher().decrypt(blob), AES.block_size)
    except ValueError as ex:
        # wrong ciphertext length or bad padding
        raise CorruptRecord(f"cannot decrypt save data: {ex}") from ex

    if len(frame) < HEADER_SIZE:
        raise CorruptRecord(f"frame too short ({len(frame)} bytes)")
    (length,) = _LENGTH.unpack_from(frame, 0)
    if length < 0 or HEADER_SIZE + length != len(frame):
        raise CorruptRecord(
            f"payload length {length} does not match {len(frame)} byte frame")

    stored = frame[_LENGTH.size:HEADER_SIZE]
    payload = frame[HEADER_SIZE:HEADER_SIZE + length]
    if hashlib.sha256(payload).digest() != stored:
        raise CorruptRecord("hash mismatch")
    return payload


def write_record(path: str | Path, record: SaveRecord) -> Path:
    """Encode, seal and write *record*, replacing any previous file.

    ``OSError`` propagates; the save controller decides what to do.
    """
    path = Path(path)
    blob = seal(encode_record(record))
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "wb") as f:
        f.write(blob)
    return path


def read_record(path: str | Path) -> SaveRecord | None:
    """Read a record from *path*.

    Returns ``None`` if there is no file.  Raises ``MissingRecord`` if
    the file can't be read and ``CorruptRecord`` (or its subclass
    ``MalformedRecord``) if its contents can't be trusted.
    """
    path = Path(path)
    if not path.exists():
        return None
    try:
        with open(path, "rb") as f:
            blob = f.read()
    except OSError as ex:
        raise MissingRecord(f"cannot read {path}: {ex}") from ex
    return decode_record(unseal(blob))
