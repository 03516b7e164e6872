import pytest

from retrokit.ini import ConfigItem, IniParser, ItemType


def test_section_and_bools():
    parser = IniParser.loads("[mods]\nA=true\nB=false\n")
    assert parser.get_bool("mods", "A") is True
    assert parser.get_bool("mods", "B") is False
    assert parser.items[0].has_section is True


def test_sectionless_string():
    parser = IniParser.loads("Name=My Mod\nAuthor=Someone\n")
    assert parser.get_string("", "Name") == "My Mod"
    assert parser.get_string("", "Author") == "Someone"


def test_leading_whitespace_of_value_skipped():
    parser = IniParser.loads("Name=   Value\n")
    assert parser.get_string("", "Name") == "Value"


def test_whitespace_only_value_kept():
    parser = IniParser.loads("Key=   \n")
    assert parser.get_string("", "Key") == "   "


def test_key_keeps_trailing_space():
    parser = IniParser.loads("Key = v\n")
    assert parser.get_string("", "Key ") == "v"
    assert parser.get_string("", "Key") is None


def test_tab_ends_value():
    parser = IniParser.loads("Key=abc\tdef\r\n")
    assert parser.get_string("", "Key") == "abc"


def test_comments_and_junk_ignored():
    parser = IniParser.loads("# Name=hidden\n; note=x\nbad;key=1\n\nReal=yes\n")
    assert [item.key for item in parser.items] == ["Real"]


def test_missing_key_returns_none():
    parser = IniParser.loads("[a]\nx=1\n")
    assert parser.get_string("a", "y") is None
    assert parser.get_integer("b", "x") is None
    assert parser.get_bool("", "x") is None


@pytest.mark.parametrize("raw, expected", [("42", 42), ("-7x", -7), ("abc", 0)])
def test_get_integer_parses_prefix(raw, expected):
    parser = IniParser.loads(f"v={raw}\n")
    assert parser.get_integer("", "v") == expected


@pytest.mark.parametrize("raw, expected", [("1.5x", 1.5), ("-2e2", -200.0), ("text", 0.0)])
def test_get_float_parses_prefix(raw, expected):
    parser = IniParser.loads(f"v={raw}\n")
    assert parser.get_float("", "v") == pytest.approx(expected)


@pytest.mark.parametrize(
    "raw, expected",
    [("true", True), ("TRUE", True), ("True", True), ("1", True), ("0", False), ("yes", False)],
)
def test_get_bool_values(raw, expected):
    parser = IniParser.loads(f"[s]\nflag={raw}\n")
    assert parser.get_bool("s", "flag") is expected


def test_set_overwrites_in_place_and_appends_new():
    parser = IniParser.loads("[s]\na=1\nb=2\n")
    parser.set_integer("s", "a", 10)
    parser.set_string("s", "c", "new")
    assert [item.key for item in parser.items] == ["a", "b", "c"]
    assert parser.get_integer("s", "a") == 10
    assert parser.items[0].type is ItemType.INT


def test_set_float_uses_six_decimals():
    parser = IniParser()
    parser.set_float("s", "f", 2.5)
    assert parser.get_string("s", "f") == "2.500000"
    assert parser.get_float("s", "f") == pytest.approx(2.5)


def test_dumps_layout():
    parser = IniParser()
    parser.set_string("", "Name", "Mod")
    parser.set_comment("mods", "c", "hello")
    parser.set_bool("mods", "A", True)
    assert parser.dumps() == "Name=Mod\n\n[mods]\n; hello\nA=true\n"


def test_dumps_round_trip_with_several_sections():
    parser = IniParser()
    parser.set_string("", "Top", "t")
    parser.set_integer("one", "x", 3)
    parser.set_bool("two", "y", False)
    parser.set_string("one", "z", "later")
    reread = IniParser.loads(parser.dumps())
    triples = {(i.section, i.key, i.value) for i in reread.items}
    assert triples == {(i.section, i.key, i.value) for i in parser.items}
    assert "\n\n[two]\n" in parser.dumps()


def test_write_and_read_file(tmp_path):
    path = tmp_path / "modconfig.ini"
    parser = IniParser()
    parser.set_bool("mods", "First", True)
    parser.set_bool("mods", "Second", False)
    parser.write(path)
    loaded = IniParser(path)
    assert loaded.get_bool("mods", "First") is True
    assert loaded.get_bool("mods", "Second") is False


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        IniParser(tmp_path / "absent.ini")


def test_config_item_render():
    assert ConfigItem(key="k", value="v").render() == "k=v\n"
    assert ConfigItem(value="note", type=ItemType.COMMENT).render() == "; note\n"