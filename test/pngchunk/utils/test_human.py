from pngchunk.utils import human


def test_pretty_size():
    assert human.pretty_size(0) == "0b"
    assert human.pretty_size(100) == "100b"
    assert human.pretty_size(1024) == "1.0k"
    assert human.pretty_size(1024 + 512) == "1.5k"
    assert human.pretty_size(1024 * 1024) == "1.0m"
    assert human.pretty_size(150 * 1024 * 1024) == "150m"


def test_format_flags():
    assert human.format_flags(True, True, False) == "CPu"
    assert human.format_flags(False, False, True) == "aps"


def test_pretty_size_largest_chunk():
    assert human.pretty_size(2**31 - 1) == "2.0g"
