import pytest

from polybase import InvalidSymbol, TruncatedSymbol
from polybase.alphabet import BASE256_EMOJI
from polybase.codecs import emoji

def test_table_is_a_bijection():
    """Tests that every byte value has its own single-character symbol."""
    symbols = BASE256_EMOJI.digits
    assert len(symbols) == 256
    assert len(set(symbols)) == 256
    for b in range(256):
        assert emoji.decode(BASE256_EMOJI, emoji.encode(BASE256_EMOJI, bytes([b]))) == bytes([b])

def test_all_symbols_decode_in_order():
    assert emoji.decode(BASE256_EMOJI, BASE256_EMOJI.digits) == bytes(range(256))

def test_known_symbols():
    assert emoji.encode(BASE256_EMOJI, b'\x00\x01\xff') == '🚀🪐🥂'

def test_utf8_input():
    raw = emoji.encode(BASE256_EMOJI, b'hello').encode('utf-8')
    assert emoji.decode(BASE256_EMOJI, raw) == b'hello'

def test_truncated_symbol():
    """Tests that raw input ending mid-symbol raises TruncatedSymbol."""
    raw = emoji.encode(BASE256_EMOJI, b'\x00\x00').encode('utf-8')
    with pytest.raises(TruncatedSymbol) as excinfo:
        emoji.decode(BASE256_EMOJI, raw[:-2])
    assert excinfo.value.position == 4
    assert excinfo.value.partial == raw[4:-2]

def test_invalid_utf8_is_invalid_symbol():
    with pytest.raises(InvalidSymbol):
        emoji.decode(BASE256_EMOJI, b'\xff\xfe\xfd\xfc\xfb')

def test_unknown_symbol():
    with pytest.raises(InvalidSymbol) as excinfo:
        emoji.decode(BASE256_EMOJI, '🚀a🚀')
    assert excinfo.value.symbol == 'a'
    assert excinfo.value.position == 1

def test_variation_selector():
    """Tests that U+FE0F after a symbol is only tolerated in permissive mode."""
    text = '\u2604\ufe0f🚀'
    with pytest.raises(InvalidSymbol):
        emoji.decode(BASE256_EMOJI, text, 'strict')
    assert emoji.decode(BASE256_EMOJI, text, 'permissive') == b'\x02\x00'
