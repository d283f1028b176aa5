'''
Bit-packing codec for power-of-two bases (2, 8, 16, 32, 64). The input is
read as one big-endian bit stream, `bits` at a time.
'''

import math

from ..alphabet import Alphabet
from ..config import Mode
from ..exceptions import InvalidLength, InvalidPadding, InvalidSymbol, TrailingBits

__all__ = ('group_size', 'padding_for', 'encode', 'decode')

def group_size(alphabet: Alphabet) -> int:
    """Number of symbols in a block that ends on a byte boundary."""
    bits = alphabet.bits
    return math.lcm(8, bits) // bits

def padding_for(alphabet: Alphabet, length: int) -> int:
    """Canonical number of padding symbols after `length` data symbols."""
    if not alphabet.padding:
        return 0
    return -length % group_size(alphabet)

def encode(alphabet: Alphabet, bs: bytes) -> str:
    """Encodes bytes into a bit-packed string."""
    width = alphabet.bits
    digits = alphabet.digits
    mask = (1 << width) - 1
    bits = 0
    value = 0
    res: list[str] = []
    for byte in bs:
        value = (value << 8) | byte
        bits += 8
        while bits >= width:
            bits -= width
            res.append(digits[(value >> bits) & mask])
        value &= (1 << bits) - 1

    # Zero-fill the last partial group
    if bits > 0:
        res.append(digits[(value << (width - bits)) & mask])

    if alphabet.padding:
        res.append(alphabet.padding * padding_for(alphabet, len(res)))
    return ''.join(res)

def _strip_padding(alphabet: Alphabet, s: str, mode: Mode) -> str:
    pad = alphabet.padding
    body = s.rstrip(pad)
    if (pos := body.find(pad)) != -1:
        raise InvalidPadding(f'padding {pad!r} inside data at position {pos}')

    if mode == 'strict':
        actual = len(s) - len(body)
        expected = padding_for(alphabet, len(body))
        if actual != expected:
            raise InvalidPadding(
                f'expected {expected} padding symbols, got {actual}',
                expected, actual
            )
    return body

def decode(alphabet: Alphabet, s: str, mode: Mode='strict') -> bytes:
    """Decodes a bit-packed string back into bytes."""
    if alphabet.padding:
        s = _strip_padding(alphabet, s, mode)

    width = alphabet.bits
    table = alphabet.table(mode)
    out = bytearray()
    value = 0
    bits = 0
    for i, digit in enumerate(s):
        try: value = (value << width) | table[digit]
        except KeyError:
            raise InvalidSymbol(digit, i) from None
        bits += width
        if bits >= 8:
            bits -= 8
            out.append(value >> bits)
            value &= (1 << bits) - 1

    if mode == 'strict':
        # A whole symbol left over means no encoder could have produced it
        if bits >= width:
            raise InvalidLength(len(s))
        if value:
            raise TrailingBits(bits, value)

    return bytes(out)
