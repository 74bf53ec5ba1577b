"""字符数据文件读写测试"""
import threading

import pytest

from config.settings import DEFAULT_CSV_FILE
from hanzi_collate.registry import CharacterRegistry
from hanzi_collate.registry.loader import (
    parse_line,
    parse_lines,
    load_registry,
    save_registry,
    format_entry
)
from hanzi_collate.helper import HanziHelper, get_default_helper, reset_default_helper


def test_parse_line():
    record = parse_line("发髮,fa4,頭~;理~,髮型")
    assert record.spelling == "发髮"
    assert record.pronunciation == "fa4"
    assert record.concepts == [["頭~", "理~"], ["髮型"]]


def test_parse_line_fullwidth_delimiters():
    record = parse_line("发髮，fa4，頭～；理～。")
    assert record.spelling == "发髮"
    assert record.concepts == [["頭～", "理～"]]

    registry = CharacterRegistry([record])
    assert registry.lookup_by_vocabulary("頭髮")
    assert registry.lookup_by_vocabulary("理髮")


def test_parse_line_without_optional_fields():
    record = parse_line("国國")
    assert record.pronunciation is None
    assert record.concepts == []

    record = parse_line("发髮,,頭~")
    assert record.pronunciation is None
    assert record.concepts == [["頭~"]]


@pytest.mark.parametrize("line", ["", "# 注释", "\r\n"])
def test_comments_and_empty_lines_skipped(line):
    assert parse_line(line) is None


def test_parse_lines_keeps_malformed_for_registry_to_skip():
    records = parse_lines(["# 头", "万萬,wan4", "万", "", "国國"])
    assert [r.spelling for r in records] == ["万萬", "万", "国國"]
    assert len(CharacterRegistry(records)) == 2


def test_load_bundled_registry():
    registry = load_registry(DEFAULT_CSV_FILE)
    helper = HanziHelper(registry)
    assert len(registry) > 0
    assert helper.to_traditional("头发") == "頭髮"
    assert helper.to_traditional("以后") == "以後"
    assert helper.to_traditional("皇后") == "皇后"
    assert helper.to_traditional("干净") != ""


def test_load_missing_file_falls_back_to_bundled(tmp_path):
    registry = load_registry(str(tmp_path / "missing.csv"))
    assert len(registry) == len(load_registry(DEFAULT_CSV_FILE))


def test_save_and_reload(tmp_path):
    registry = load_registry(DEFAULT_CSV_FILE)
    out_file = tmp_path / "saved" / "chinese.csv"

    count = save_registry(registry, str(out_file))
    reloaded = load_registry(str(out_file))

    assert count == len(registry)
    assert [format_entry(e) for e in reloaded.entries] == \
        [format_entry(e) for e in registry.entries]
    assert out_file.read_bytes().endswith(b"\r\n")


def test_save_requires_file_name():
    with pytest.raises(ValueError):
        save_registry(CharacterRegistry(), "")


def test_default_helper_built_once():
    reset_default_helper()
    results = []

    def worker():
        results.append(get_default_helper())

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert len(results) == 8
    assert all(h is results[0] for h in results)
    assert len(results[0].registry) > 0
    reset_default_helper()
