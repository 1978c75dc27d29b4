"""
Multipath key expressions as defined in BIP389.

See https://github.com/bitcoin/bips/blob/master/bip-0389.mediawiki.

Only tuples of two values are supported, as used by wallets for their receive
and change derivation paths (<0;1>/*).
"""

import re

from bip32 import HARDENED_INDEX
from typing import List

from .errors import (
    DuplicateTupleValueError,
    MalformedTupleValueError,
    MultipleTuplesPerKeyError,
    TupleInOriginError,
)

# <NUM;NUM> followed by /* or /NUM, each value possibly hardened (h, H or ').
MULTIPATH_RE = re.compile(
    r"<\s*([0-9]+)([hH']?)\s*;\s*([0-9]+)([hH']?)\s*>/(?:\*|[0-9]+)"
)
# Any <...> within an origin [xfp/path].
MULTIPATH_IN_ORIGIN_RE = re.compile(r"\[[^\]]*<[^>]+>[^\]]*\]")

OPENING_BRACKETS = "([{"
CLOSING_BRACKETS = ")]}"


class MultipathValue:
    """One of the derivation steps of a multipath tuple, e.g. the '1h' in '<0h;1h>'."""

    def __init__(self, digits: str, hardened_marker: str = ""):
        assert isinstance(digits, str) and hardened_marker in ["", "h", "H", "'"]

        self.digits: str = digits
        self.hardened_marker: str = hardened_marker
        # 2**31 has 10 digits, anything longer is out of range.
        if len(digits) > 10 or int(digits) >= HARDENED_INDEX:
            raise MalformedTupleValueError(
                f"Invalid derivation index in multipath tuple: '{self}'"
            )
        self.index: int = int(digits)

    def __repr__(self) -> str:
        return f"{self.digits}{self.hardened_marker}"

    def is_hardened(self) -> bool:
        return self.hardened_marker != ""


class MultipathTuple:
    """A multipath specifier found in a descriptor, along with its location."""

    def __init__(self, values: List[MultipathValue], start: int, end: int):
        assert isinstance(values, list) and len(values) == 2
        assert 0 <= start < end

        self.values: List[MultipathValue] = values
        # Span of the whole specifier, including the step following the tuple.
        self.start: int = start
        self.end: int = end

    def from_match(match: re.Match) -> "MultipathTuple":
        values = [
            MultipathValue(match.group(1), match.group(2)),
            MultipathValue(match.group(3), match.group(4)),
        ]
        return MultipathTuple(values, match.start(), match.end())

    def __repr__(self) -> str:
        return f"<{';'.join(str(v) for v in self.values)}>"

    @property
    def external(self) -> MultipathValue:
        return self.values[0]

    @property
    def internal(self) -> MultipathValue:
        return self.values[1]

    def has_duplicates(self) -> bool:
        indexes = [v.index for v in self.values]
        return len(set(indexes)) != len(indexes)


def find_multipath_tuples(desc_str: str) -> List[MultipathTuple]:
    """Get all the multipath specifiers of this descriptor, in order of apparition."""
    return [MultipathTuple.from_match(m) for m in MULTIPATH_RE.finditer(desc_str)]


def has_top_level_comma(text: str) -> bool:
    """Whether this text between two positions of a descriptor crosses a key expression
    boundary.

    Key expressions are separated by commas outside of any nested expression.
    """
    depth = 0
    for char in text:
        if char in OPENING_BRACKETS:
            depth += 1
        elif char in CLOSING_BRACKETS:
            depth -= 1
        elif char == "," and depth == 0:
            return True
    return False


def check_origins(desc_str: str) -> None:
    """Fail if any key origin of this descriptor contains a multipath specifier."""
    if MULTIPATH_IN_ORIGIN_RE.search(desc_str) is not None:
        raise TupleInOriginError()


def validate_multipath(desc_str: str) -> None:
    """Check the multipath specifiers of a descriptor against the BIP389 constraints.

    :param desc_str: the descriptor, without checksum.
    """
    check_origins(desc_str)

    tuples = find_multipath_tuples(desc_str)

    for tup in tuples:
        if tup.has_duplicates():
            raise DuplicateTupleValueError(
                f"Duplicate values not allowed in multipath tuple: '{tup}'"
            )

    for i, first in enumerate(tuples):
        for second in tuples[i + 1 :]:
            if not has_top_level_comma(desc_str[first.end : second.start]):
                raise MultipleTuplesPerKeyError()
