"""String searching and palindrome helpers."""

__all__ = ["longest_palindrome", "str_str", "is_palindrome", "reverse_string"]


def _expand(s: str, left: int, right: int) -> str:
    best = ""
    while left >= 0 and right < len(s) and s[left] == s[right]:
        best = s[left : right + 1]
        left -= 1
        right += 1
    return best


def longest_palindrome(s: str) -> str:
    """Return the first longest palindromic substring of ``s``."""
    best = ""
    for center in range(len(s)):
        for candidate in (_expand(s, center, center), _expand(s, center, center + 1)):
            if len(candidate) > len(best):
                best = candidate
    return best


def str_str(haystack: str, needle: str) -> int:
    """Return the index of the first occurrence of ``needle``, or -1."""
    return haystack.find(needle)


def is_palindrome(s: str) -> bool:
    """Tell whether ``s`` reads the same both ways, ignoring case and non-alphanumerics."""
    cleaned = [ch for ch in s.lower() if ch.isalnum()]
    return cleaned == cleaned[::-1]


def reverse_string(chars: list[str]) -> None:
    """Reverse the list of characters in place."""
    chars.reverse()