SIZE_SUFFIXES = ("k", "m", "g")


def pretty_size(size: int) -> str:
    """Format a chunk length for listings, e.g. 13b, 1.5k or 150m."""
    if size < 1024:
        return f"{size}b"
    value = float(size)
    for suffix in SIZE_SUFFIXES:
        value /= 1024
        # chunk data is capped at 2 GiB, so "g" is as far as it goes
        if value < 1024 or suffix == SIZE_SUFFIXES[-1]:
            break
    if value < 99.95:
        return f"{value:.1f}{suffix}"
    return f"{value:.0f}{suffix}"


def format_flags(critical: bool, public: bool, safe_to_copy: bool) -> str:
    """
    Render the chunk type properties as a compact three letter string,
    e.g. "CPu" for a critical, public, unsafe-to-copy chunk.
    """
    return "".join(
        [
            "C" if critical else "a",
            "P" if public else "p",
            "s" if safe_to_copy else "u",
        ]
    )
