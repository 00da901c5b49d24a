import string

import pytest

from cubkit.text_search import (
    compare_bytes,
    compare_n,
    find_bounded,
    find_byte,
    find_char,
    is_alnum,
    is_alpha,
    is_ascii,
    is_digit,
    is_print,
    rfind_char,
    to_lower,
    to_upper,
)


@pytest.mark.parametrize("c", list(string.ascii_letters))
def test_is_alpha_letters(c):
    assert is_alpha(c) is True
    assert is_alpha(ord(c)) is True


@pytest.mark.parametrize("c", [".", "0", " ", "{", "@", "[", "`"])
def test_is_alpha_rejects(c):
    assert is_alpha(c) is False


def test_is_digit_matches_stdlib_for_ascii():
    for code in range(128):
        assert is_digit(code) == (chr(code) in string.digits)


def test_is_alnum_matches_union():
    for code in range(-5, 200):
        assert is_alnum(code) == (is_alpha(code) or is_digit(code))


def test_is_ascii_bounds():
    assert is_ascii(0) is True
    assert is_ascii(127) is True
    assert is_ascii(128) is False
    assert is_ascii(-1) is False


def test_is_print_bounds():
    assert is_print(" ") is True
    assert is_print("~") is True
    assert is_print(31) is False
    assert is_print(127) is False


def test_case_mapping_round_trip():
    for c in string.ascii_lowercase:
        assert to_lower(to_upper(c)) == c
        assert to_upper(c) == c.upper()
    for c in string.ascii_uppercase:
        assert to_lower(c) == c.lower()


def test_case_mapping_keeps_type_and_others():
    assert to_upper(ord("a")) == ord("A")
    assert to_lower("5") == "5"
    assert to_upper("{") == "{"


def test_single_character_required():
    with pytest.raises(ValueError):
        is_alpha("ab")
    with pytest.raises(TypeError):
        is_digit(1.5)


def test_find_char_first_occurrence():
    text = "teste"
    index = find_char(text, "e")
    assert text[index] == "e"
    assert "e" not in text[:index]


def test_find_char_missing_and_nul():
    assert find_char("teste", "z") is None
    assert find_char("teste", "\0") == len("teste")


def test_rfind_char_last_occurrence():
    text = "ou est le R ici ?"
    index = rfind_char(text, "e")
    assert text[index] == "e"
    assert "e" not in text[index + 1:]
    assert rfind_char(text, "\0") == len(text)
    assert rfind_char(text, "Z") is None


def test_find_bounded_full_length():
    haystack = "Hello World"
    index = find_bounded(haystack, "World", 11)
    assert haystack[index:index + 5] == "World"


def test_find_bounded_cut_short():
    assert find_bounded("Hello World", "Wor", 5) is None
    assert find_bounded("Hello World", "!", 11) is None


def test_find_bounded_exact_fit():
    index = find_bounded("Hello World", "lo", 5)
    assert index is not None
    assert index + len("lo") <= 5
    assert "Hello World"[index:index + 2] == "lo"


def test_find_bounded_empty_needle():
    assert find_bounded("Hello World", "", 11) == 0


def test_compare_n_equal_and_prefix():
    assert compare_n("abc", "abc", 10) == 0
    assert compare_n("abcdef", "abcxyz", 3) == 0
    assert compare_n("abc", "abd", 0) == 0


def test_compare_n_sign_and_value():
    assert compare_n("abc", "abd", 3) == ord("c") - ord("d")
    assert compare_n("abd", "abc", 3) > 0
    assert compare_n("ab", "abc", 5) == -ord("c")


def test_compare_bytes():
    assert compare_bytes(b"abc", b"abc", 3) == 0
    assert compare_bytes(b"\xff", b"\x01", 1) == 0xFF - 0x01
    assert compare_bytes(b"abc", b"xyz", 0) == 0


def test_compare_bytes_out_of_range():
    with pytest.raises(ValueError):
        compare_bytes(b"ab", b"abc", 3)


def test_find_byte():
    data = b"hello"
    index = find_byte(data, ord("l"), len(data))
    assert data[index] == ord("l")
    assert ord("l") not in data[:index]
    assert find_byte(data, ord("o"), 4) is None
    assert find_byte(b"\x00\xff", 0x1FF, 2) == 1


def test_find_byte_out_of_range():
    with pytest.raises(ValueError):
        find_byte(b"abc", 0, 4)