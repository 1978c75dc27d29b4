"""
Descriptor checksum as defined in BIP380.

See https://github.com/bitcoin/bips/blob/master/bip-0380.mediawiki#checksum.
"""

from .errors import InvalidCharacterError

INPUT_CHARSET = (
    "0123456789()[],'/*abcdefgh@:$%{}"
    "IJKLMNOPQRSTUVWXYZ&+-.;<=>?!^_|~"
    "ijklmnopqrstuvwxyzABCDEFGH`#\"\\ "
)
CHECKSUM_CHARSET = "qpzry9x8gf2tvdw0s3jn54khce6mua7l"
GENERATOR = [0xF5DEE51989, 0xA9FDCA3312, 0x1BAB10E32D, 0x3706B1677A, 0x644D626FFD]

INPUT_POSITIONS = {c: i for i, c in enumerate(INPUT_CHARSET)}
CHECKSUM_POSITIONS = {c: i for i, c in enumerate(CHECKSUM_CHARSET)}


def descsum_polymod(symbols):
    """Internal function that computes the descriptor checksum.

    The 40 bits state is 8 groups of 5 bits, the most significant one being the oldest.
    """
    chk = 1
    for value in symbols:
        top = chk >> 35
        chk = (chk & 0x7FFFFFFFF) << 5 ^ value
        for i in range(5):
            chk ^= GENERATOR[i] if ((top >> i) & 1) else 0
    return chk


def descsum_expand(s):
    """Internal function that does the character to symbol expansion.

    Each character gives the low 5 bits of its position, and every group of 3
    characters gives an additional symbol for their classes (the high bits).
    """
    cls = 0
    clscount = 0
    symbols = []
    for index, c in enumerate(s):
        pos = INPUT_POSITIONS.get(c)
        if pos is None:
            raise InvalidCharacterError(c, index)
        symbols.append(pos & 31)
        cls = cls * 3 + (pos >> 5)
        clscount += 1
        if clscount == 3:
            symbols.append(cls)
            cls = 0
            clscount = 0
    if clscount > 0:
        symbols.append(cls)
    return symbols


def descsum_checksum(s):
    """Compute the 8 characters checksum of a descriptor (without its '#')."""
    symbols = descsum_expand(s) + [0] * 8
    checksum = descsum_polymod(symbols) ^ 1
    return "".join(CHECKSUM_CHARSET[(checksum >> (5 * (7 - i))) & 31] for i in range(8))


def descsum_create(s):
    """Add a checksum to a descriptor without"""
    return f"{s}#{descsum_checksum(s)}"


def descsum_check(s, require=True):
    """Verify that the checksum is correct in a descriptor

    :param require: whether a missing checksum should fail the check.
    """
    if "#" not in s:
        return not require
    if len(s) < 9 or s[-9] != "#":
        return False
    if not all(x in CHECKSUM_POSITIONS for x in s[-8:]):
        return False
    try:
        symbols = descsum_expand(s[:-9])
    except InvalidCharacterError:
        return False
    symbols += [CHECKSUM_POSITIONS[x] for x in s[-8:]]
    return descsum_polymod(symbols) == 1
