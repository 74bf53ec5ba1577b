"""
字符表测试

验证条目构建、字符与词汇登记、占位符替换以及繁简写法的词汇传播。
"""

import pytest

from conftest import make_records
from hanzi_collate.registry import CanonicalEntry, CharacterRegistry


def _entry(registry, char, form="traditional"):
    """按字形找到唯一的条目"""
    matches = [e for e in registry.entries if getattr(e, form) == char]
    assert len(matches) == 1
    return matches[0]


def test_build_creates_one_entry_per_record(registry):
    assert len(registry) == 11
    entry = _entry(registry, "萬")
    assert entry.simplified == "万"
    assert entry.variants == ()
    assert entry.pronunciation == "wan4"


def test_variants_are_registered(registry):
    entry = _entry(registry, "個")
    assert entry.variants == ("箇",)
    assert registry.lookup_by_codepoint("箇") == (entry,)
    assert registry.lookup_by_codepoint("个") == (entry,)


def test_ambiguous_codepoint_keeps_registration_order(registry):
    fa1 = _entry(registry, "發")
    fa4 = _entry(registry, "髮")
    assert registry.lookup_by_codepoint("发") == (fa1, fa4)
    assert registry.lookup_by_codepoint("發") == (fa1,)
    assert registry.lookup_by_codepoint("髮") == (fa4,)


def test_adjacent_duplicate_codepoint_registered_once():
    registry = CharacterRegistry(make_records([("干干", "gan1", [])]))
    assert len(registry.lookup_by_codepoint("干")) == 1


def test_placeholder_replaced_with_traditional_char(registry):
    fa4 = _entry(registry, "髮")
    assert fa4.concepts[0].vocabs == ("頭髮", "理髮")
    assert fa4 in registry.lookup_by_vocabulary("頭髮")


def test_fullwidth_placeholder():
    registry = CharacterRegistry(make_records([("发髮", "fa4", [["頭～"]])]))
    assert registry.lookup_by_vocabulary("頭髮")


def test_vocabulary_propagated_to_simplified_form(registry):
    fa4 = _entry(registry, "髮")
    assert fa4 in registry.lookup_by_vocabulary("头发")
    assert fa4 in registry.lookup_by_vocabulary("理发")

    hou = _entry(registry, "後")
    assert registry.lookup_by_vocabulary("以后") == (hou,)


def test_vocabulary_propagated_to_traditional_form():
    registry = CharacterRegistry(make_records([
        ("头頭", "tou2", [["~脑"]]),
        ("脑腦", "nao3", [["头~"]]),
    ]))
    tou = _entry(registry, "頭")
    nao = _entry(registry, "腦")
    # "頭脑" 与 "头腦" 的繁体写法都是 "頭腦"，简体写法都是 "头脑"
    assert registry.lookup_by_vocabulary("頭腦") == (nao, tou)
    assert registry.lookup_by_vocabulary("头脑") == (nao, tou)
    assert registry.lookup_by_vocabulary("頭脑") == (tou,)


def test_ambiguous_vocabulary_keeps_own_form(registry):
    hou = _entry(registry, "后", form="traditional")
    assert registry.lookup_by_vocabulary("皇后") == (hou,)


def test_malformed_record_is_skipped():
    registry = CharacterRegistry(make_records([
        ("万萬", "wan4", []),
        ("x", None, []),
        ("", None, []),
        ("国國", "guo2", []),
    ]))
    assert len(registry) == 2
    assert registry.lookup_by_codepoint("x") == ()


def test_entries_compare_by_identity():
    registry = CharacterRegistry(make_records([
        ("发發", "fa1", []),
        ("发發", "fa1", []),
    ]))
    first, second = registry.entries
    assert first is not second
    assert first != second
    assert registry.lookup_by_codepoint("发") == (first, second)


def test_entry_is_immutable(registry):
    entry = registry.entries[0]
    with pytest.raises(Exception):
        entry.traditional = "x"


def test_empty_registry():
    registry = CharacterRegistry()
    assert registry.is_empty()
    assert len(registry) == 0
    assert registry.lookup_by_codepoint("发") == ()
    assert registry.lookup_by_vocabulary("头发") == ()


def test_rebuild_replaces_tables(registry):
    count = registry.build(make_records([("国國", "guo2", [])]))
    assert count == 1
    assert registry.lookup_by_codepoint("发") == ()
    assert len(registry.lookup_by_codepoint("国")) == 1


def test_build_accepts_mappings():
    registry = CharacterRegistry([
        {"spelling": "发髮", "pronunciation": "fa4", "concepts": [["頭~"]]},
    ])
    assert len(registry) == 1
    assert registry.lookup_by_vocabulary("頭髮")


def test_build_rejects_none():
    with pytest.raises(ValueError):
        CharacterRegistry().build(None)


def test_entry_str_matches_record_format(registry):
    entry = _entry(registry, "髮")
    assert str(entry) == "发髮,fa4,頭髮;理髮"

    bare = CanonicalEntry(traditional="國", simplified="国")
    assert str(bare) == "国國"


def test_statistics(registry):
    stats = registry.get_statistics()
    assert stats["entries"] == 11
    # 发、后、面 各有两个候选
    assert stats["ambiguous_codepoints"] == 3
