import pytest

from wolfpix.colors import lookup_color
from wolfpix.xpm import (
    TRANSPARENT,
    XpmError,
    XpmImage,
    color_key,
    extract_strings,
    load_xpm,
    parse_xpm,
    parse_xpm_text,
    strip_comments,
)

SAMPLE = """/* XPM */
static char *sample[] = {
/* columns rows colors chars-per-pixel */
"3 2 3 1",
"  c None",
". c #FF0000",
"X c red",
" .X",
"X. ",
};
"""


def test_sample_dimensions():
    image = parse_xpm_text(SAMPLE)
    assert (image.width, image.height) == (3, 2)
    assert len(image.pixels) == 6


def test_sample_pixels():
    image = parse_xpm_text(SAMPLE)
    assert image.pixel(0, 0) == TRANSPARENT
    assert image.pixel(1, 0) == 0xFF0000
    assert image.pixel(2, 0) == lookup_color("red")
    assert image.pixel(0, 1) == lookup_color("red")
    assert image.pixel(2, 1) == TRANSPARENT


def test_none_color_is_transparent_value():
    image = parse_xpm(["1 1 1 1", ". c None", "."])
    assert image.pixel(0, 0) == 0xFF000000
    assert TRANSPARENT == 0xFF000000


def test_pixel_out_of_range():
    image = parse_xpm_text(SAMPLE)
    with pytest.raises(IndexError):
        image.pixel(3, 0)
    with pytest.raises(IndexError):
        image.pixel(0, -1)


def test_image_checks_pixel_count():
    with pytest.raises(ValueError):
        XpmImage(2, 2, (0, 0, 0))


def test_color_key_single_char():
    assert color_key("a") == ord("a")


def test_color_key_order_matters():
    assert color_key("ab") < color_key("ba")


def test_strip_block_comment():
    result = strip_comments("a/* x */b")
    assert result == "a" + " " * 7 + "b"


def test_strip_keeps_quoted_comment():
    text = '"/* kept */"'
    assert strip_comments(text) == text


def test_strip_line_comment_with_newline():
    text = "x // c\ny"
    result = strip_comments(text)
    assert len(result) == len(text)
    assert result.startswith("x") and result.endswith("y")
    assert "c" not in result and "\n" not in result


def test_extract_strings():
    assert list(extract_strings('x "ab" y "cd" z')) == ["ab", "cd"]


def test_extract_strings_unterminated():
    assert list(extract_strings('"ab" "cd')) == ["ab"]


def test_parse_from_lines_two_word_color():
    image = parse_xpm(["1 1 1 1", ". c light blue", "."])
    assert image.pixel(0, 0) == lookup_color("light blue")


def test_unknown_color_gives_zero():
    image = parse_xpm(["1 1 1 1", ". c nosuchcolour", "."])
    assert image.pixel(0, 0) == 0


def test_short_keys_last_definition_wins():
    image = parse_xpm(["1 1 2 1", ". c #000001", ". c #000002", "."])
    assert image.pixel(0, 0) == 0x000002


def test_long_keys_first_definition_wins():
    image = parse_xpm(["1 1 2 3", "abc c #000001", "abc c #000002", "abc"])
    assert image.pixel(0, 0) == 0x000001


def test_multi_char_pixels():
    image = parse_xpm(["2 1 2 2", "aa c #000010", "bb c #000020", "bbaa"])
    assert image.pixels == (0x000020, 0x000010)


@pytest.mark.parametrize(
    "header", ["0 1 1 1", "1 0 1 1", "1 1 0 1", "1 1 1 0", "w 1 1 1", "1 1 1"]
)
def test_bad_header(header):
    with pytest.raises(XpmError):
        parse_xpm([header, ". c red", "."])


def test_missing_c_entry():
    with pytest.raises(XpmError):
        parse_xpm(["1 1 1 1", ". m white", "."])


def test_nothing_after_c():
    with pytest.raises(XpmError):
        parse_xpm(["1 1 1 1", ". c", "."])


def test_truncated_data():
    with pytest.raises(XpmError):
        parse_xpm(["1 2 1 1", ". c red", "."])


def test_short_row():
    with pytest.raises(XpmError):
        parse_xpm(["3 1 1 1", ". c red", ".."])


def test_empty_input():
    with pytest.raises(XpmError):
        parse_xpm([])


def test_load_xpm(tmp_path):
    path = tmp_path / "sample.xpm"
    path.write_text(SAMPLE)
    assert load_xpm(path) == parse_xpm_text(SAMPLE)


def test_load_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_xpm(tmp_path / "absent.xpm")