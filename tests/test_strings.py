import pytest

from wolfpix.strings import (
    striter,
    striteri,
    strjoin,
    strlcat,
    strlen_esp,
    strmap,
    strmapi,
    strncat,
    strncmp,
    strncpy,
    strndup,
    strnequ,
    strnew,
)


def test_striter_visits_every_character_in_order():
    seen = []
    striter("wolf", seen.append)
    assert seen == list("wolf")


def test_striter_ignores_missing_arguments():
    seen = []
    striter(None, seen.append)
    assert seen == []


def test_striteri_passes_indices():
    seen = []
    striteri("map", lambda i, c: seen.append((i, c)))
    assert seen == list(enumerate("map"))


def test_striteri_ignores_missing_function():
    seen = []
    striteri("map", None)
    striteri(None, lambda i, c: seen.append(i))
    assert seen == []


def test_strjoin_concatenates():
    s1, s2 = "mur", ".xpm"
    assert strjoin(s1, s2) == s1 + s2


@pytest.mark.parametrize("s1, s2", [(None, "a"), ("a", None), (None, None)])
def test_strjoin_returns_none_for_missing(s1, s2):
    assert strjoin(s1, s2) is None


def test_strlcat_full_append():
    dst, src = "abc", "def"
    assert strlcat(dst, src, 100) == (dst + src, len(dst) + len(src))


def test_strlcat_truncates_to_buffer():
    dst, src = "abc", "defgh"
    result, length = strlcat(dst, src, len(dst) + 3)
    assert result == dst + src[:2]
    assert length == len(dst) + len(src)
    assert len(result) == len(dst) + 3 - 1


def test_strlcat_size_smaller_than_destination():
    dst, src = "abcdef", "xy"
    assert strlcat(dst, src, 2) == (dst, len(src) + 2)


def test_strlen_esp_stops_at_whitespace():
    word = "arme0"
    assert strlen_esp(word + " rest") == len(word)
    assert strlen_esp(word + "\tx") == len(word)
    assert strlen_esp(word) == len(word)
    assert strlen_esp(" lead") == 0


def test_strmap_applies_function():
    assert strmap("abc", str.upper) == "ABC"


def test_strmap_stops_at_nul():
    assert strmap("abc", lambda c: "\0" if c == "b" else c) == "a"
    assert strmap(None, str.upper) is None
    assert strmap("abc", None) is None


def test_strmapi_uses_index():
    text = "aaaa"
    result = strmapi(text, lambda i, c: c.upper() if i % 2 else c)
    assert result == "aAaA"
    assert len(result) == len(text)
    assert strmapi(None, lambda i, c: c) is None


def test_strncat_limits_appended_characters():
    s1, s2 = "wolf", "3dgame"
    assert strncat(s1, s2, 2) == s1 + s2[:2]
    assert strncat(s1, s2, 50) == s1 + s2
    assert strncat(s1, s2, 0) == s1


def test_strncmp_equal_and_zero_length():
    assert strncmp("abc", "abc", 3) == 0
    assert strncmp("abc", "xyz", 0) == 0
    assert strncmp("abcd", "abcz", 3) == 0


def test_strncmp_returns_code_difference():
    assert strncmp("abc", "abd", 3) == ord("c") - ord("d")
    assert strncmp("b", "a", 5) == ord("b") - ord("a")


def test_strncmp_shorter_string():
    assert strncmp("ab", "abc", 5) == -ord("c")
    assert strncmp("abc", "ab", 5) == ord("c")


def test_strncmp_is_antisymmetric():
    pairs = [("hello", "help"), ("a", "abc"), ("zz", "za")]
    for a, b in pairs:
        assert strncmp(a, b, 10) == -strncmp(b, a, 10)


def test_strncpy_pads_and_truncates():
    src = "ab"
    assert strncpy(src, 5) == src + "\0" * 3
    assert strncpy("abcdef", 3) == "abcdef"[:3]
    assert len(strncpy(src, 7)) == 7


def test_strncpy_rejects_negative_length():
    with pytest.raises(ValueError):
        strncpy("ab", -1)


def test_strndup_copies_prefix():
    text = "texture"
    assert strndup(text, 3) == text[:3]
    assert strndup(text, 100) == text
    with pytest.raises(ValueError):
        strndup(text, -2)


def test_strnequ_matches_strncmp():
    assert strnequ("abcx", "abcy", 3) is True
    assert strnequ("abcx", "abcy", 4) is False
    assert strnequ("", "", 1) is True


def test_strnew_makes_nul_string():
    buf = strnew(4)
    assert len(buf) == 4
    assert set(buf) == {"\0"}
    assert strnew(0) == ""


def test_strnew_rejects_negative_size():
    with pytest.raises(ValueError):
        strnew(-1)