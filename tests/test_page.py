from html.parser import HTMLParser

import pytest

from hanzistroke.config import PageConfig
from hanzistroke.page import generate_page, js_string, page_filename, write_page


class _Collector(HTMLParser):
    def __init__(self):
        super().__init__(convert_charrefs=True)
        self.stack = []
        self.unclosed = 0
        self.title = ""
        self.text_by_class = {}

    def handle_starttag(self, tag, attrs):
        if tag in ("meta", "br"):
            return
        self.stack.append((tag, dict(attrs).get("class")))

    def handle_endtag(self, tag):
        if self.stack and self.stack[-1][0] == tag:
            self.stack.pop()
        else:
            self.unclosed += 1

    def handle_data(self, data):
        if not self.stack:
            return
        tag, cls = self.stack[-1]
        if tag == "title":
            self.title += data
        elif cls:
            self.text_by_class[cls] = self.text_by_class.get(cls, "") + data


def _parse(page):
    p = _Collector()
    p.feed(page)
    p.close()
    return p


def test_page_embeds_character_and_pinyin():
    page = generate_page("爱", "ài")
    parsed = _parse(page)

    assert page.startswith("<!DOCTYPE html>")
    assert parsed.unclosed == 0
    assert parsed.stack == []
    assert parsed.title == '汉字 "爱" - 拼音: ài'
    assert parsed.text_by_class["char-display"] == "爱"
    assert parsed.text_by_class["pinyin"] == "ài"
    assert "HanziWriter.create('character-target', \"爱\", {" in page


def test_page_loads_hanzi_writer_and_wires_buttons():
    page = generate_page("国", "guó")
    assert '<script src="https://cdn.jsdelivr.net/npm/hanzi-writer@3.5/dist/hanzi-writer.min.js"></script>' in page
    for handler in ("animateStroke()", "quizMode()", "slowAnimate()", "reset()"):
        assert f'onclick="{handler}"' in page
    assert "}, 800);" in page
    assert "strokeAnimationSpeed: 1," in page
    assert "delayBetweenStrokes: 300," in page
    assert "showOutline: true," in page


def test_page_uses_config():
    config = PageConfig(width=400, height=420, stroke_color="#000", autoplay_delay_ms=0, show_outline=False)
    page = generate_page("山", "shān", config=config)
    assert "width: 400px;" in page
    assert "height: 420px;" in page
    assert "width: 400," in page
    assert 'strokeColor: "#000",' in page
    assert "showOutline: false," in page
    assert "}, 0);" in page


def test_page_is_pure():
    assert generate_page("学", "xué") == generate_page("学", "xué")


def test_special_characters_are_escaped_by_default():
    hostile = "</script><script>alert('x')</script>"
    page = generate_page(hostile, '<b>"py"</b>')

    assert page.count("</script>") == 2
    assert "&lt;/script&gt;&lt;script&gt;alert(&#x27;x&#x27;)&lt;/script&gt;" in page
    assert "&lt;b&gt;&quot;py&quot;&lt;/b&gt;" in page
    assert "<b>" not in page
    assert js_string(hostile) in page


def test_no_escape_keeps_raw_interpolation():
    page = generate_page("<i>", "<b>", escape=False)
    assert '<div class="char-display"><i></div>' in page
    assert '<div class="pinyin"><b></div>' in page
    assert "HanziWriter.create('character-target', '<i>', {" in page


@pytest.mark.parametrize("value, expected", [
    ("爱", '"爱"'),
    ("a'b", '"a\'b"'),
    ('a"b', '"a\\"b"'),
    ("</script>", '"\\u003c/script\\u003e"'),
    ("a&b", '"a\\u0026b"'),
    ("\u2028", '"\\u2028"'),
])
def test_js_string(value, expected):
    assert js_string(value) == expected


def test_page_filename():
    assert page_filename("爱") == "爱.html"


def test_write_page_overwrites(tmp_path):
    first = write_page("爱", "old", out_dir=tmp_path)
    page = generate_page("爱", "ài")
    second = write_page("爱", page, out_dir=tmp_path)

    assert first == second == (tmp_path / "爱.html").resolve()
    assert second.is_absolute()
    assert second.read_text(encoding="utf-8") == page


def test_write_page_defaults_to_cwd(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    path = write_page("中", "<html></html>")
    assert path == (tmp_path / "中.html").resolve()


def test_write_page_missing_directory_raises(tmp_path):
    with pytest.raises(OSError):
        write_page("爱", "x", out_dir=tmp_path / "missing")
