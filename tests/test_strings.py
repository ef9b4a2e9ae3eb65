import pytest

from leetsolve.strings import is_palindrome, longest_palindrome, reverse_string, str_str


def test_longest_palindrome_prefers_first():
    assert longest_palindrome("babad") == "bab"


def test_longest_palindrome_even_length():
    assert longest_palindrome("cbbd") == "bb"


@pytest.mark.parametrize("text", ["racecar", "abba", "x", "aaaa"])
def test_longest_palindrome_whole_string(text):
    assert longest_palindrome(text) == text


def test_longest_palindrome_empty():
    assert longest_palindrome("") == ""


@pytest.mark.parametrize("text", ["forgeeksskeegfor", "abacdfgdcaba", "abcde", "aab"])
def test_longest_palindrome_is_palindromic_substring(text):
    result = longest_palindrome(text)
    assert result == result[::-1]
    assert result in text
    assert len(result) >= 1


@pytest.mark.parametrize(
    "haystack, needle",
    [("sadbutsad", "sad"), ("hello", "ll"), ("mississippi", "issip"), ("abc", "c")],
)
def test_str_str_finds_first_occurrence(haystack, needle):
    index = str_str(haystack, needle)
    assert haystack[index : index + len(needle)] == needle
    assert needle not in haystack[: index + len(needle) - 1]


@pytest.mark.parametrize(
    "haystack, needle", [("leetcode", "leeto"), ("a", "aa"), ("", "a")]
)
def test_str_str_missing(haystack, needle):
    assert str_str(haystack, needle) == -1


def test_str_str_empty_needle():
    assert str_str("abc", "") == 0


def test_is_palindrome_phrase():
    assert is_palindrome("A man, a plan, a canal: Panama") is True


def test_is_palindrome_rejects():
    assert is_palindrome("race a car") is False


def test_is_palindrome_only_punctuation():
    assert is_palindrome(" .,") is True


def test_is_palindrome_digits_and_letters_differ():
    assert is_palindrome("0P") is False


def test_reverse_string_in_place():
    chars = list("hello")
    original = list(chars)
    assert reverse_string(chars) is None
    assert chars == original[::-1]


def test_reverse_string_twice_restores():
    chars = list("Hannah!")
    original = list(chars)
    reverse_string(chars)
    reverse_string(chars)
    assert chars == original