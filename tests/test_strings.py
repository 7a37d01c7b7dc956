import pytest

from fdfkit.strings import (
    strchr,
    strjoin,
    striteri,
    strlcat,
    strlcpy,
    strmapi,
    strncmp,
    strnstr,
    strrchr,
    strtrim,
    substr,
)


def test_strchr_finds_first_occurrence():
    text = "hello"
    index = strchr(text, "l")
    assert text[index] == "l"
    assert "l" not in text[:index]


def test_strchr_missing_returns_none():
    assert strchr("hello", "z") is None


def test_strchr_nul_finds_end():
    assert strchr("hello", "\0") == len("hello")
    assert strchr("hello", 0) == len("hello")


def test_strchr_accepts_code():
    assert strchr("abc", ord("b")) == strchr("abc", "b")


def test_strchr_rejects_bad_char():
    with pytest.raises(ValueError):
        strchr("abc", "ab")
    with pytest.raises(TypeError):
        strchr("abc", 1.5)


def test_strrchr_finds_last_occurrence():
    text = "hello"
    index = strrchr(text, "l")
    assert text[index] == "l"
    assert "l" not in text[index + 1:]
    assert index > strchr(text, "l")


def test_strrchr_missing_and_nul():
    assert strrchr("hello", "q") is None
    assert strrchr("hello", "\0") == len("hello")


def test_strnstr_empty_little_is_start():
    assert strnstr("anything", "", 3) == 0


def test_strnstr_found_within_length():
    big, little = "foo bar baz", "bar"
    index = strnstr(big, little, len(big))
    assert big[index:index + len(little)] == little


def test_strnstr_match_must_fit_in_length():
    big, little = "foo bar baz", "bar"
    full = strnstr(big, little, len(big))
    assert strnstr(big, little, full + len(little)) == full
    assert strnstr(big, little, full + len(little) - 1) is None


def test_strnstr_negative_length():
    with pytest.raises(ValueError):
        strnstr("abc", "a", -1)


def test_strncmp_equal_and_ordering():
    assert strncmp("abc", "abc", 3) == 0
    assert strncmp("abc", "abd", 3) < 0
    assert strncmp("abd", "abc", 3) > 0


def test_strncmp_respects_limit():
    assert strncmp("abc", "abd", 2) == 0
    assert strncmp("abc", "xyz", 0) == 0


def test_strncmp_shorter_string_sorts_first():
    assert strncmp("ab", "abc", 3) < 0
    assert strncmp("abc", "ab", 3) > 0
    assert strncmp("ab", "ab", 10) == 0


@pytest.mark.parametrize("a,b", [("apple", "apply"), ("Zed", "zed"), ("", "x")])
def test_strncmp_antisymmetric(a, b):
    assert strncmp(a, b, 5) == -strncmp(b, a, 5)


def test_strlcpy_truncates_to_size():
    src = "hello"
    copied, total = strlcpy(src, 3)
    assert src.startswith(copied)
    assert len(copied) == 3 - 1
    assert total == len(src)


def test_strlcpy_full_copy_and_zero_size():
    src = "hello"
    assert strlcpy(src, len(src) + 1) == (src, len(src))
    assert strlcpy(src, 0) == ("", len(src))


def test_strlcat_with_room():
    dst, src = "foo", "bar"
    assert strlcat(dst, src, 20) == (dst + src, len(dst) + len(src))


def test_strlcat_truncates():
    dst, src = "foo", "barbaz"
    result, total = strlcat(dst, src, 6)
    assert result.startswith(dst)
    assert len(result) == 6 - 1
    assert (dst + src).startswith(result)
    assert total == len(dst) + len(src)


def test_strlcat_size_not_larger_than_dst():
    dst, src = "foobar", "baz"
    assert strlcat(dst, src, 4) == (dst, 4 + len(src))


def test_strjoin_concatenates():
    joined = strjoin("left", "right")
    assert joined.startswith("left")
    assert joined.endswith("right")
    assert len(joined) == len("left") + len("right")


def test_substr_middle():
    assert substr("hello world", 6, 5) == "world"


def test_substr_clamps_and_past_end():
    text = "hello"
    assert substr(text, 2, 100) == text[2:]
    assert substr(text, len(text) + 1, 3) == ""
    assert substr(text, len(text), 3) == ""


def test_substr_rejects_negative():
    with pytest.raises(ValueError):
        substr("abc", -1, 2)
    with pytest.raises(ValueError):
        substr("abc", 0, -2)


def test_strtrim_both_ends():
    assert strtrim("xxhixx", "x") == "hi"


def test_strtrim_all_and_empty_set():
    assert strtrim("abab", "ab") == ""
    assert strtrim(" keep ", "") == " keep "


def test_strmapi_applies_function_with_indices():
    seen = []

    def upper(i, ch):
        seen.append(i)
        return ch.upper()

    text = "abc"
    assert strmapi(text, upper) == text.upper()
    assert seen == list(range(len(text)))


def test_striteri_modifies_in_place():
    chars = list("abc")
    result = striteri(chars, lambda i, ch: ch.upper())
    assert result is chars
    assert "".join(chars) == "abc".upper()


def test_striteri_none_keeps_element():
    chars = list("abcd")
    striteri(chars, lambda i, ch: ch.upper() if i % 2 == 0 else None)
    assert chars[1] == "b"
    assert chars[3] == "d"
    assert chars[0] == "a".upper()