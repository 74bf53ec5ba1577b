"""字形转换测试"""
import pytest

from hanzi_collate.helper import HanziHelper


@pytest.mark.parametrize("text, expected", [
    ("头发", "頭髮"),
    ("发展", "發展"),
    ("理发", "理髮"),
    ("皇后以后", "皇后以後"),
    ("面条", "麵條"),
    ("面子", "面子"),
    ("一万个", "一萬個"),
    ("abc 头", "abc 頭"),
])
def test_to_traditional(helper, text, expected):
    assert helper.to_traditional(text) == expected


@pytest.mark.parametrize("text, expected", [
    ("頭髮", "头发"),
    ("發展", "发展"),
    ("以後", "以后"),
    ("一萬箇", "一万个"),
])
def test_to_simplified(helper, text, expected):
    assert helper.to_simplified(text) == expected


@pytest.mark.parametrize("text", ["头发", "發展", "皇后以后", "國家", "面条"])
def test_round_trip_is_stable(helper, text):
    once = helper.to_simplified(helper.to_traditional(text))
    twice = helper.to_simplified(helper.to_traditional(once))
    assert twice == once


def test_empty_registry_is_identity(empty_helper):
    assert empty_helper.to_traditional("头发 abc") == "头发 abc"
    assert empty_helper.to_simplified("頭髮") == "頭髮"


def test_convert_file(helper, tmp_path):
    in_file = tmp_path / "in.txt"
    out_file = tmp_path / "out" / "out.txt"
    in_file.write_text("头发\n发展\n", encoding="utf-8")

    count = helper.converter.convert_file(str(in_file), str(out_file), True)

    assert count == 2
    assert out_file.read_bytes().decode("utf-8") == "頭髮\r\n發展\r\n"


def test_convert_file_requires_names(helper):
    with pytest.raises(ValueError):
        helper.converter.convert_file("", "out.txt", True)
    with pytest.raises(ValueError):
        helper.converter.convert_file("in.txt", "", False)


def test_none_input_rejected(helper):
    with pytest.raises(ValueError):
        helper.to_traditional(None)


def test_helper_from_records(records):
    helper = HanziHelper.from_records(records)
    assert len(helper.registry) == len(records)
    assert helper.to_traditional("头发") == "頭髮"

    helper = HanziHelper.from_records([{"spelling": "国國"}, {"spelling": "门門", "pronunciation": "men2"}])
    assert helper.to_traditional("国门") == "國門"
