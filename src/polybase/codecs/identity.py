from ..config import Mode
from ..exceptions import InvalidEncoding

__all__ = ('encode', 'decode')

def encode(bs: bytes) -> str:
    """Passes UTF-8 bytes through as text."""
    try: return bytes(bs).decode('utf-8')
    except UnicodeDecodeError as e:
        raise InvalidEncoding(bs, str(e)) from None

def decode(s: str, mode: Mode='strict') -> bytes:
    """Returns the UTF-8 bytes of the text, never fails."""
    return s.encode('utf-8', 'surrogatepass')
