from collections.abc import Iterator

# Control characters are shown as "." so chunk previews stay on one line.
_control_char_trans = str.maketrans({x: ord(".") for x in (*range(32), 127)})


def escape_control_characters(text: str) -> str:
    """Replace all C0 control characters and DEL in text with a single "."."""
    if not isinstance(text, str):
        raise ValueError(f"text type must be unicode but is {type(text).__name__}")
    return text.translate(_control_char_trans)


def bytes_to_escaped_str(data: bytes) -> str:
    """
    Take bytes and return a safe string that can be displayed to the user.

    Double quotes are never escaped, single quotes are.
    """
    if not isinstance(data, bytes):
        raise ValueError(f"data must be bytes, but is {data.__class__.__name__}")
    # Prefixing a double quote makes repr() pick single quotes for us.
    ret = repr(b'"' + data).lstrip("b")[2:-1]
    return ret


def is_mostly_bin(data: bytes) -> bool:
    if not data:
        return False
    head = data[:100]
    return sum(i < 9 or 13 < i < 32 or 126 < i for i in head) / len(head) > 0.3


def preview(data: bytes, limit: int = 40) -> str:
    """
    A short, single-line rendering of chunk data for listings.

    Mostly binary data is shown as hex, everything else as an escaped string.
    """
    cut = data[:limit]
    if is_mostly_bin(cut):
        ret = cut.hex(" ")
    else:
        ret = bytes_to_escaped_str(cut)
    if len(data) > limit:
        ret += "..."
    return ret


def hexdump(data: bytes) -> Iterator[tuple[str, str, str]]:
    """
    Returns:
        A generator of (offset, hex, str) tuples, 16 bytes per line.
    """
    for i in range(0, len(data), 16):
        offset = f"{i:0=10x}"
        part = data[i : i + 16]
        x = " ".join(f"{b:0=2x}" for b in part)
        x = x.ljust(47)  # 16*2 + 15
        part_repr = escape_control_characters(
            part.decode("ascii", "replace").replace("\ufffd", ".")
        )
        yield offset, x, part_repr
