"""
chachacrypt — key resolution and SecretKey
==========================================
Run with:  python -m pytest tests/ -v
"""

import pytest

from chachacrypt.errors import FileReadError, KeyLengthError
from chachacrypt.keys   import KEY_SIZE, SecretKey, resolve_key


# ── literal keys ─────────────────────────────────────────────────────────────
def test_literal_key_exact_length():
    key = resolve_key(literal="k" * 32)
    assert isinstance(key, SecretKey)
    assert bytes(key) == b"k" * 32

@pytest.mark.parametrize("length", [31, 33])
def test_literal_key_wrong_length(length):
    with pytest.raises(KeyLengthError) as info:
        resolve_key(literal="k" * length)
    assert (info.value.actual, info.value.expected) == (length, KEY_SIZE)
    assert str(info.value) == (
        f"Key length is invalid (Actual: {length} Expected: 32)"
    )

def test_empty_literal_rejected():
    with pytest.raises(KeyLengthError) as info:
        resolve_key(literal="")
    assert info.value.actual == 0

def test_literal_maps_one_byte_per_character():
    # low 8 bits of each code point, no UTF-8 expansion
    key = resolve_key(literal="ÿ" + "ā" + "a" * 30)
    assert len(key) == 32
    assert key[0] == 0xFF
    assert key[1] == 0x01

def test_key_length_error_is_value_error():
    with pytest.raises(ValueError):
        resolve_key(literal="short")


# ── key files ────────────────────────────────────────────────────────────────
def test_key_file_raw_bytes(tmp_path):
    raw  = bytes(range(32))
    path = tmp_path / "key.bin"
    path.write_bytes(raw)
    assert bytes(resolve_key(key_file=str(path))) == raw

def test_key_file_trailing_newline_counts(tmp_path):
    path = tmp_path / "key.txt"
    path.write_bytes(b"k" * 32 + b"\n")
    with pytest.raises(KeyLengthError) as info:
        resolve_key(key_file=str(path))
    assert info.value.actual == 33

def test_missing_key_file(tmp_path):
    missing = str(tmp_path / "nope.key")
    with pytest.raises(FileReadError) as info:
        resolve_key(key_file=missing)
    assert str(info.value) == f"Could not read file {missing}"


# ── argument contract ────────────────────────────────────────────────────────
def test_both_sources_rejected(tmp_path):
    with pytest.raises(ValueError):
        resolve_key(literal="k" * 32, key_file=str(tmp_path / "k"))

def test_no_source_rejected():
    with pytest.raises(ValueError):
        resolve_key()


# ── SecretKey ────────────────────────────────────────────────────────────────
def test_secret_key_wipe():
    key = SecretKey(b"\x07" * 32)
    key.wipe()
    assert len(key) == 32
    assert bytes(key) == bytes(32)

def test_secret_key_wiped_on_context_exit():
    with resolve_key(literal="z" * 32) as key:
        assert bytes(key) == b"z" * 32
    assert bytes(key) == bytes(32)

def test_secret_key_repr_hides_material():
    key = SecretKey(b"topsecret" + bytes(23))
    assert "topsecret" not in repr(key)
    assert "topsecret" not in str(key)
    assert repr(key) == "SecretKey(<32 bytes>)"
