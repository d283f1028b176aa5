'''
RFC 9285 base45. Every two bytes become three symbols, least significant
first; a trailing single byte becomes two symbols.
'''

from ..alphabet import Alphabet
from ..config import Mode
from ..exceptions import InvalidGroup, InvalidLength, InvalidSymbol

__all__ = ('encode', 'decode')

def encode(alphabet: Alphabet, bs: bytes) -> str:
    digits = alphabet.digits
    res: list[str] = []
    for i in range(0, len(bs) - 1, 2):
        n = (bs[i] << 8) | bs[i + 1]
        n, c = divmod(n, 45)
        e, d = divmod(n, 45)
        res += (digits[c], digits[d], digits[e])

    if len(bs) % 2:
        d, c = divmod(bs[-1], 45)
        res += (digits[c], digits[d])

    return ''.join(res)

def decode(alphabet: Alphabet, s: str, mode: Mode='strict') -> bytes:
    if len(s) % 3 == 1:
        raise InvalidLength(len(s), 'base45')

    table = alphabet.table(mode)
    out = bytearray()
    for i in range(0, len(s), 3):
        group = s[i:i + 3]
        n = 0
        for j, digit in enumerate(reversed(group)):
            try: n = n * 45 + table[digit]
            except KeyError:
                raise InvalidSymbol(digit, i + len(group) - 1 - j, 'base45') from None

        if len(group) == 3:
            if n > 0xffff:
                raise InvalidGroup(group, n, 0xffff)
            out += n.to_bytes(2, byteorder='big')
        else:
            if n > 0xff:
                raise InvalidGroup(group, n, 0xff)
            out.append(n)

    return bytes(out)
