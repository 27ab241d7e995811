from anttools.htmltext import (
    entities,
    entities_decode,
    special_chars,
    special_chars_decode,
    strip_tags,
)

SRC = '<p>Test paragraph.</p><!-- Comment -->  <a href="#fragment">Other text</a>'
SRC2 = "A 'quote' \"is\" <b>bold</b>"
ESCAPED = "A &#39;quote&#39; &#34;is&#34; &lt;b&gt;bold&lt;/b&gt;"


def test_strip_tags():
    assert strip_tags(SRC) == "Test paragraph.  Other text"


def test_strip_tags_keeps_lone_angle_bracket():
    assert strip_tags("a < b and <i>c</i>") == "a < b and c"


def test_entities_and_decode():
    data = entities(SRC2)
    assert data == ESCAPED
    assert entities_decode(data) == SRC2


def test_entities_decode_named_and_numeric():
    assert entities_decode("&eacute;&lt;&#x41;&amp;") == "é<A&"


def test_special_chars_round_trip():
    data = special_chars(SRC2)
    assert data == ESCAPED
    assert special_chars_decode(data) == SRC2


def test_special_chars_decode_single_pass():
    assert special_chars_decode("&amp;lt;") == "&lt;"