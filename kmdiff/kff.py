"""Two-bit packing of nucleotide sequences as used by KFF files.

Nucleotides are encoded A=0, C=1, T=2, G=3, most significant bits first.
When the length is not a multiple of four, the first byte carries the
leading remainder.
"""

_NUCLEOTIDES = "ACTG"


def pack_nucleotides(sequence):
    """Pack up to four nucleotides into one byte value."""
    value = 0
    for char in sequence:
        value = ((value << 2) + ((ord(char) >> 1) & 0b11)) & 0xFF
    return value


def encode_sequence(kmer):
    """Encode a k-mer string into its packed bytes."""
    remnant = len(kmer) % 4
    out = bytearray()
    if remnant:
        out.append(pack_nucleotides(kmer[:remnant]))
    out.extend(pack_nucleotides(kmer[i:i + 4]) for i in range(remnant, len(kmer), 4))
    return bytes(out)


def _byte_to_string(value):
    return "".join(_NUCLEOTIDES[(value >> shift) & 0b11] for shift in (6, 4, 2, 0))


def decode_sequence(data, kmer_size):
    """Decode packed bytes back into a k-mer of ``kmer_size`` nucleotides."""
    if kmer_size <= 0:
        return ""
    size = (kmer_size + 3) // 4
    if len(data) < size:
        raise ValueError(f"Need {size} bytes for a {kmer_size}-mer, got {len(data)}.")
    first = _byte_to_string(data[0])
    if kmer_size % 4:
        first = first[4 - kmer_size % 4:]
    return first + "".join(_byte_to_string(b) for b in data[1:size])