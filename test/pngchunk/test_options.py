import pytest

from pngchunk import exceptions
from pngchunk import options


def test_defaults():
    opts = options.Options()
    assert not opts.strict
    assert not opts.assume_yes
    assert opts.default_chunk_type == "ruSt"
    assert opts.termlog_verbosity == "info"
    assert opts.keys() == {
        "strict",
        "assume_yes",
        "default_chunk_type",
        "termlog_verbosity",
    }


def test_update():
    opts = options.Options()
    opts.update(strict=True, default_chunk_type="abCd")
    assert opts.strict
    assert opts.default_chunk_type == "abCd"
    with pytest.raises(exceptions.OptionsError, match="Unknown options: nonexistent"):
        opts.update(nonexistent=True)
    with pytest.raises(exceptions.OptionsError, match="Expected bool for strict"):
        opts.update(strict="yes")
    with pytest.raises(exceptions.OptionsError, match="Invalid termlog_verbosity"):
        opts.update(termlog_verbosity="loud")
    with pytest.raises(exceptions.OptionsError, match="Invalid default_chunk_type"):
        opts.update(default_chunk_type="ab1d", assume_yes=True)
    # failed updates are rolled back
    assert opts.strict is True
    assert opts.default_chunk_type == "abCd"
    assert opts.assume_yes is False


def test_invalid_construction():
    with pytest.raises(exceptions.OptionsError):
        options.Options(default_chunk_type="toolong")


def test_parse():
    assert options.parse("") == {}
    assert options.parse("# nothing") == {}
    assert options.parse("strict: true") == {"strict": True}
    with pytest.raises(exceptions.OptionsError, match="Config error at line"):
        options.parse("strict: [")
    with pytest.raises(exceptions.OptionsError, match="no keys found"):
        options.parse("just a string")


def test_load():
    opts = options.Options()
    options.load(opts, "assume_yes: true\ntermlog_verbosity: debug\n")
    assert opts.assume_yes
    assert opts.termlog_verbosity == "debug"


def test_load_paths(tmp_path):
    opts = options.Options()
    first = tmp_path / "config.yaml"
    second = tmp_path / "config.yml"
    first.write_text("default_chunk_type: abCd\nstrict: true\n")
    second.write_text("default_chunk_type: efGh\n")
    options.load_paths(opts, first, second, tmp_path / "missing.yaml")
    assert opts.strict
    assert opts.default_chunk_type == "efGh"

    second.write_text("strict: 42\n")
    with pytest.raises(exceptions.OptionsError, match="Error reading .*config.yml"):
        options.load_paths(opts, second)

    second.write_bytes(b"\xff\xfe\x00")
    with pytest.raises(exceptions.OptionsError, match="Error reading"):
        options.load_paths(opts, second)


def test_config_paths(tmp_path):
    assert options.config_paths(tmp_path) == [
        tmp_path / "config.yaml",
        tmp_path / "config.yml",
    ]
