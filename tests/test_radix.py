import pytest

from polybase import InvalidSymbol, decode, encode
from polybase.alphabet import BASE10, BASE36, BASE36_UPPER, BASE58_BTC, BASE58_FLICKR
from polybase.codecs import radix

def test_leading_zero_preservation():
    """Tests that leading zero bytes survive as leading zero digits."""
    assert encode('base58btc', b'\x00\x00\x01') == 'z112'
    assert decode('z112').data == b'\x00\x00\x01'

@pytest.mark.parametrize("alphabet", [BASE10, BASE36, BASE58_BTC, BASE58_FLICKR])
def test_all_zero_bytes(alphabet):
    """Tests that all-zero input is exactly one zero digit per byte."""
    assert radix.encode(alphabet, b'\0\0\0') == alphabet.zero * 3
    assert radix.decode(alphabet, alphabet.zero * 3) == b'\0\0\0'

def test_empty():
    assert radix.encode(BASE58_BTC, b'') == ''
    assert radix.decode(BASE58_BTC, '') == b''

def test_known_values():
    assert radix.encode(BASE58_BTC, b'Hello World!') == '2NEpo7TZRRrLZSi2U'
    assert radix.encode(BASE10, b'\x00\x01') == '01'
    assert radix.encode(BASE10, b'\x01\x00') == '256'
    assert radix.decode(BASE10, '256') == b'\x01\x00'

def test_flickr_and_bitcoin_differ():
    data = b'yes mani !'
    assert radix.encode(BASE58_FLICKR, data) == '7Pznk19XTTzBtx'
    assert radix.encode(BASE58_BTC, data) == '7paNL19xttacUY'

def test_large_input():
    """Tests conversions far wider than a machine word."""
    data = b'\0\0' + bytes(range(1, 256)) * 4
    assert radix.decode(BASE58_BTC, radix.encode(BASE58_BTC, data)) == data

@pytest.mark.parametrize("text,symbol,position", [('0', '0', 0), ('11l', 'l', 2), ('2O', 'O', 1)])
def test_invalid_symbol(text, symbol, position):
    with pytest.raises(InvalidSymbol) as excinfo:
        radix.decode(BASE58_BTC, text)
    assert excinfo.value.symbol == symbol
    assert excinfo.value.position == position

def test_base36_case():
    """Tests that base36 accepts the other case only in permissive mode."""
    with pytest.raises(InvalidSymbol):
        radix.decode(BASE36, '2LCPZO5YIKIDYNFL', 'strict')
    assert radix.decode(BASE36, '2LCPZO5YIKIDYNFL', 'permissive') == b'yes mani !'
    assert radix.decode(BASE36_UPPER, '2lcpzo5yikidynfl', 'permissive') == b'yes mani !'

def test_base58_has_no_case_translation():
    with pytest.raises(InvalidSymbol):
        radix.decode(BASE58_BTC, 'l', 'permissive')
