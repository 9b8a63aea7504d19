import re

import pytest

from renderer.sanitizer import escape_html


def test_escape_all_special_characters():
    text = "<a href=\"x\">Tom & 'Jerry'</a>"
    expected = "&lt;a href=&quot;x&quot;&gt;Tom &amp; &#039;Jerry&#039;&lt;/a&gt;"
    assert escape_html(text) == expected


@pytest.mark.parametrize(
    "text",
    [
        "&",
        "<script>alert('x')</script>",
        "a \"quoted\" value",
        "1 < 2 && 3 > 2",
        "'single'",
    ],
)
def test_no_raw_special_characters_left(text):
    result = escape_html(text)
    assert not any(ch in result for ch in "<>\"'")
    # every remaining ampersand starts one of the produced entities
    assert "&" not in re.sub(r"&(amp|lt|gt|quot|#039);", "", result)


def test_escaping_twice_only_double_escapes_ampersands():
    once = escape_html("Fish & <Chips>")
    assert escape_html(once) == "Fish &amp;amp; &amp;lt;Chips&amp;gt;"
    assert escape_html("&amp;") == "&amp;amp;"


def test_other_characters_unchanged():
    text = "Привет, мир! 100% / #tag @user"
    assert escape_html(text) == text


def test_none_and_numbers():
    assert escape_html(None) == ""
    assert escape_html(42) == "42"
