"""
Table-driven CRC-32 as used by PNG (ISO 3309 / ITU-T V.42, the same
checksum as Ethernet and zlib).

See https://www.w3.org/TR/png/#D-CRCAppendix
"""

POLYNOMIAL = 0xEDB88320
"""Reflected form of the IEEE 802.3 generator polynomial."""


def _make_table() -> tuple[int, ...]:
    table = []
    for n in range(256):
        c = n
        for _ in range(8):
            if c & 1:
                c = POLYNOMIAL ^ (c >> 1)
            else:
                c >>= 1
        table.append(c)
    return tuple(table)


CRC_TABLE = _make_table()


def crc32(data: bytes, crc: int = 0) -> int:
    """
    Compute the CRC-32 of data.

    Pass the result of a previous call as crc to continue a running checksum,
    i.e. crc32(b, crc32(a)) == crc32(a + b).
    """
    c = crc ^ 0xFFFFFFFF
    table = CRC_TABLE
    for byte in data:
        c = table[(c ^ byte) & 0xFF] ^ (c >> 8)
    return c ^ 0xFFFFFFFF
