import pytest

from dsakit.strings import (
    add_large_numbers,
    are_k_anagrams,
    atoi,
    contains_word,
    count_distinct_subsequences,
    count_equal_012_substrings,
    count_vowels,
    excel_column,
    is_pangram,
    is_rotated_by_two,
    longest_common_prefix,
    longest_subsequence_word,
    min_word_distance,
    reverse_in_place,
    text_length,
    to_roman,
)

_ROMAN = {"I": 1, "V": 5, "X": 10, "L": 50, "C": 100, "D": 500, "M": 1000}


def _from_roman(numeral):
    total = 0
    for ch, nxt in zip(numeral, numeral[1:] + " "):
        value = _ROMAN[ch]
        total += -value if nxt != " " and _ROMAN[nxt] > value else value
    return total


@pytest.mark.parametrize("value", [0, 7, -7, 12345, 2**31 - 1, -(2**31)])
def test_atoi_round_trip(value):
    assert atoi(str(value)) == value


def test_atoi_source_example():
    assert atoi("  -0012g4") == -12


def test_atoi_clamps_overflow():
    assert atoi("99999999999") == 2**31 - 1
    assert atoi("-99999999999") == -(2**31)


def test_atoi_plus_sign_and_spaces():
    assert atoi("   +42abc") == atoi("42")


@pytest.mark.parametrize("n", [1, 4, 9, 14, 40, 90, 400, 900, 1994, 3549, 3999])
def test_roman_round_trip(n):
    assert _from_roman(to_roman(n)) == n


def test_roman_source_number():
    assert to_roman(3549) == "MMMDXLIX"


def test_roman_non_positive_is_empty():
    assert to_roman(0) == ""


def test_distinct_subsequences_source_example():
    # "gfg" has 7 distinct subsequences including the empty one.
    assert count_distinct_subsequences("gfg") + 1 == 7


def test_distinct_subsequences_all_different_chars():
    text = "abcd"
    assert count_distinct_subsequences(text) == 2 ** len(text) - 1


def test_distinct_subsequences_empty():
    assert count_distinct_subsequences("") == 0


@pytest.mark.parametrize(
    "n, name",
    [(26, "Z"), (51, "AY"), (52, "AZ"), (80, "CB"), (676, "YZ"), (702, "ZZ"), (705, "AAC")],
)
def test_excel_column_table(n, name):
    assert excel_column(n) == name


def test_excel_column_rejects_zero():
    with pytest.raises(ValueError):
        excel_column(0)


def test_k_anagram_different_lengths():
    assert are_k_anagrams("abc", "abcd", 10) is False


def test_k_anagram_true_anagrams_need_no_changes():
    assert are_k_anagrams("listen", "silent", 0) is True


def test_longest_subsequence_word_source_example():
    words = ["ale", "apple", "monkey", "plea"]
    assert longest_subsequence_word(words, "abpcplea") == "apple"


def test_longest_subsequence_word_none():
    assert longest_subsequence_word(["xyz"], "abc") is None


def test_longest_common_prefix_source_example():
    assert longest_common_prefix(["geeksforgeeks", "geeks", "geek", "geezer"]) == "gee"


def test_longest_common_prefix_is_prefix_of_all():
    words = ["geeksforgeeks", "geeks", "geek"]
    prefix = longest_common_prefix(words)
    assert all(w.startswith(prefix) for w in words)
    assert prefix == "geek"


def test_longest_common_prefix_empty():
    assert longest_common_prefix([]) == ""


def test_min_word_distance_source_example():
    words = ["the", "quick", "brown", "fox", "quick"]
    assert min_word_distance(words, "the", "fox") == 3


def test_min_word_distance_missing_word():
    assert min_word_distance(["the", "quick"], "the", "fox") is None


def test_pangram_source_sentence():
    assert is_pangram("The quick brown fox jumps over the lazy dog") is True


def test_not_pangram():
    assert is_pangram("college for student") is False


def test_rotation_source_examples():
    assert is_rotated_by_two("amazon", "azonam") is True
    assert is_rotated_by_two("amazon", "onamaz") is True


def test_rotation_rejects_other_rotation():
    assert is_rotated_by_two("amazon", "mazona") is False


def test_rotation_different_lengths():
    assert is_rotated_by_two("amazon", "amazo") is False


@pytest.mark.parametrize("text, expected", [("0102010", 2), ("102100211", 5)])
def test_equal_012_source_examples(text, expected):
    assert count_equal_012_substrings(text) == expected


def test_equal_012_without_all_digits():
    assert count_equal_012_substrings("000111") == 0


@pytest.mark.parametrize(
    "a, b", [("44422222221111", "987654321"), ("0", "0"), ("999", "1"), ("12", "34")]
)
def test_add_large_numbers_matches_int(a, b):
    assert int(add_large_numbers(a, b)) == int(a) + int(b)


def test_add_large_numbers_commutes():
    assert add_large_numbers("123456789", "44422222221111") == add_large_numbers(
        "44422222221111", "123456789"
    )


def test_add_large_numbers_rejects_non_digits():
    with pytest.raises(ValueError):
        add_large_numbers("12a", "3")


def test_count_vowels_source_example():
    assert count_vowels("abcdeioj") == 4


def test_count_vowels_upper_case():
    text = "AEIOUaeiou"
    assert count_vowels(text) == len(text)


def test_contains_word_source_example():
    assert contains_word("college for student", "study") is False
    assert contains_word("college for student", "student") is True


def test_text_length_stops_at_nul():
    assert text_length("abc\0def") == len("abc")
    assert text_length(b"niraj\0xx") == len(b"niraj")


def test_text_length_without_nul():
    assert text_length("niraj") == len("niraj")


def test_reverse_in_place_list():
    chars = list("niraj")
    reverse_in_place(chars)
    assert "".join(chars) == "niraj"[::-1]


def test_reverse_in_place_bytearray_twice_restores():
    buffer = bytearray(b"kumar")
    reverse_in_place(buffer)
    reverse_in_place(buffer)
    assert buffer == bytearray(b"kumar")