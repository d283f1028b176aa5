'''
Big-number codec for bases which aren't a power of two (10, 36, 58). The
bytes are read as one big-endian unsigned integer and leading zero bytes
are carried over as leading zero digits, as in Bitcoin's base58.
'''

from ..alphabet import Alphabet
from ..config import Mode
from ..exceptions import InvalidSymbol

__all__ = ('encode', 'decode')

def encode(alphabet: Alphabet, bs: bytes) -> str:
    """Encodes bytes as digits of a single big integer."""
    body = bs.lstrip(b'\0')
    zeros = len(bs) - len(body)
    digits = alphabet.digits
    base = len(digits)

    x = int.from_bytes(body, byteorder='big', signed=False)
    res: list[str] = []
    while x > 0:
        x, d = divmod(x, base)
        res.append(digits[d])
    res.reverse()

    return alphabet.zero * zeros + ''.join(res)

def decode(alphabet: Alphabet, s: str, mode: Mode='strict') -> bytes:
    """Decodes big integer digits back into bytes."""
    if mode == 'permissive' and (tr := alphabet.translation):
        s = ''.join(tr.get(c, c) for c in s)

    body = s.lstrip(alphabet.zero)
    zeros = len(s) - len(body)
    table = alphabet.table('strict')
    base = len(alphabet.digits)

    x = 0
    for i, digit in enumerate(body, zeros):
        try: x = x * base + table[digit]
        except KeyError:
            raise InvalidSymbol(digit, i) from None

    return b'\0' * zeros + x.to_bytes((x.bit_length() + 7) // 8, byteorder='big')
