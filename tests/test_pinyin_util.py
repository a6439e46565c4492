import pytest

from hanzistroke import pinyin_util
from hanzistroke.pinyin_util import PINYIN_FALLBACK, generate_pinyin, looks_cjk, resolve


def test_resolve_single_character():
    assert resolve("爱") == "ài"


def test_resolve_uses_first_character_only():
    assert resolve("中国") == "zhōng"


def test_resolve_empty_string_gives_sentinel():
    assert resolve("") == PINYIN_FALLBACK == "?"


def test_resolve_swallows_lookup_errors(monkeypatch):
    def boom(*args, **kwargs):
        raise RuntimeError("dictionary missing")

    monkeypatch.setattr(pinyin_util, "pinyin", boom)
    assert resolve("爱") == "?"


@pytest.mark.parametrize("lookup_result", [[], [[]], [[""]], None])
def test_resolve_empty_results_give_sentinel(monkeypatch, lookup_result):
    monkeypatch.setattr(pinyin_util, "pinyin", lambda *a, **kw: lookup_result)
    assert resolve("爱") == "?"


def test_resolve_requests_tone_marks_without_heteronyms(monkeypatch):
    seen = {}

    def fake(text, **kwargs):
        seen.update(kwargs)
        return [["hǎo"]]

    monkeypatch.setattr(pinyin_util, "pinyin", fake)
    assert resolve("好") == "hǎo"
    assert seen == {"style": pinyin_util.Style.TONE, "heteronym": False}


def test_generate_pinyin_joins_every_character():
    assert generate_pinyin("中国") == "zhōng guó"


def test_looks_cjk():
    assert looks_cjk("爱")
    assert looks_cjk("⺀")
    assert not looks_cjk("a")
    assert not looks_cjk("中国")
    assert not looks_cjk("")


def test_resolve_non_chinese_run_is_kept_whole():
    # pypinyin returns a run of non-hanzi text as one item
    assert resolve("abc") == "abc"
    assert resolve("abc爱") == "abc"
    assert resolve("爱abc") == "ài"
