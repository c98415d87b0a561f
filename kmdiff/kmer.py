"""Significant k-mers and their binary record format."""

import dataclasses
import enum
import struct

from kmdiff.exceptions import IOError_

_LEN = struct.Struct("<H")
_BODY = struct.Struct("<diidd")
_DOUBLE = struct.Struct("<d")


class Significance(enum.Enum):
    CONTROL = 0
    CASE = 1
    NO = 2


_SIGN_CHARS = {
    Significance.CONTROL: "-",
    Significance.CASE: "+",
    Significance.NO: "$",
}


def significance_to_char(sign):
    """One-character tag: '-' control, '+' case, '$' none, '?' otherwise."""
    return _SIGN_CHARS.get(sign, "?")


def _read_exact(stream, size):
    data = stream.read(size)
    if len(data) != size:
        raise IOError_(f"Truncated k-mer record: expected {size} bytes, got {len(data)}.")
    return data


@dataclasses.dataclass(eq=False)
class KmerSign:
    """A k-mer with its p-value, the group it is significant in and mean counts.

    Two records are equal when their k-mers are equal. Ordering is reversed
    on the p-value, so that a larger p-value sorts first.
    """

    kmer: str
    pvalue: float = 0.0
    sign: Significance = Significance.NO
    mean_control: float = 0.0
    mean_case: float = 0.0
    counts_ratio: tuple = ()

    def __eq__(self, other):
        if not isinstance(other, KmerSign):
            return NotImplemented
        return self.kmer == other.kmer

    def __lt__(self, other):
        if not isinstance(other, KmerSign):
            return NotImplemented
        return self.pvalue > other.pvalue

    def __hash__(self):
        return hash(self.kmer)

    def __str__(self):
        return self.kmer

    def dump(self, stream):
        """Write this record to a binary stream."""
        encoded = self.kmer.encode("ascii")
        counts = tuple(float(c) for c in self.counts_ratio)
        stream.write(_LEN.pack(len(encoded)))
        stream.write(encoded)
        # The padding integer keeps the sign field four bytes wide.
        stream.write(
            _BODY.pack(self.pvalue, self.sign.value, 0, self.mean_control, self.mean_case)
        )
        stream.write(_LEN.pack(len(counts)))
        stream.write(b"".join(_DOUBLE.pack(c) for c in counts))

    @classmethod
    def load(cls, stream):
        """Read one record; return None at the end of the stream."""
        head = stream.read(_LEN.size)
        if not head:
            return None
        if len(head) != _LEN.size:
            raise IOError_("Truncated k-mer record header.")
        (length,) = _LEN.unpack(head)
        kmer = _read_exact(stream, length).decode("ascii")
        pvalue, sign, _, mean_control, mean_case = _BODY.unpack(
            _read_exact(stream, _BODY.size)
        )
        (nb_counts,) = _LEN.unpack(_read_exact(stream, _LEN.size))
        raw = _read_exact(stream, nb_counts * _DOUBLE.size)
        counts = tuple(v for (v,) in _DOUBLE.iter_unpack(raw))
        try:
            significance = Significance(sign)
        except ValueError as err:
            raise IOError_(f"Unknown significance value: {sign}") from err
        return cls(kmer, pvalue, significance, mean_control, mean_case, counts)