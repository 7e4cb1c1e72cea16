import pytest

from soundalike.phonetic import encode, encode_letters


def test_empty_input_gives_empty_code():
    assert encode("") == ""
    assert encode("... !!") == ""
    assert encode_letters("") == ""


def test_known_codes():
    assert encode("Robert") == "R163"
    assert encode("Rupert") == "R163"
    assert encode("Tymczak") == "T522"
    assert encode("A") == "A000"
    assert encode_letters("ACDC") == "A232"
    assert encode("&") == "A530"


def test_first_letter_is_not_collapsed_with_its_own_class():
    assert encode("BB") == "B100"
    assert encode("Pfister") == "P1236"


def test_zeros_split_duplicates():
    # the vowel keeps the two S sounds apart until zeros are dropped
    assert encode("forty six and two") == "F632253"


def test_long_codes_are_not_truncated():
    assert encode("Exclamation") == "E24535"
    assert encode("Expansion") == "E21525"


@pytest.mark.parametrize("word", ["a", "Lee", "Steel", "Led Zeppelin", "2pac", "Metallica", "x y z"])
def test_codes_are_at_least_four_long(word):
    assert len(encode(word)) >= 4


@pytest.mark.parametrize("word", ["Steel", "ac/dc", "Guns 'n' Roses", "summer of 69"])
def test_case_insensitive(word):
    assert encode(word) == encode(word.upper()) == encode(word.lower())


def test_punctuation_insensitive():
    assert encode("AC/DC") == encode("AC-DC") == encode("acdc")
