import string

import pygame
import pytest

from deemak.keys import key_to_char


def test_letters_round_trip_lowercase():
    for letter in string.ascii_lowercase:
        assert key_to_char(ord(letter), False) == letter


def test_letters_with_shift_are_uppercase():
    for letter in string.ascii_lowercase:
        assert key_to_char(ord(letter), True) == letter.upper()


def test_pygame_letter_constants():
    assert key_to_char(pygame.K_a, False) == "a"
    assert key_to_char(pygame.K_z, True) == "Z"


@pytest.mark.parametrize(
    "key, plain, shifted",
    [
        (pygame.K_0, "0", ")"),
        (pygame.K_1, "1", "!"),
        (pygame.K_2, "2", "@"),
        (pygame.K_3, "3", "#"),
        (pygame.K_4, "4", "$"),
        (pygame.K_5, "5", "%"),
        (pygame.K_6, "6", "^"),
        (pygame.K_7, "7", "&"),
        (pygame.K_8, "8", "*"),
        (pygame.K_9, "9", "("),
        (pygame.K_COMMA, ",", "<"),
        (pygame.K_PERIOD, ".", ">"),
        (pygame.K_SLASH, "/", "?"),
        (pygame.K_SEMICOLON, ";", ":"),
        (pygame.K_QUOTE, "'", '"'),
        (pygame.K_LEFTBRACKET, "[", "{"),
        (pygame.K_RIGHTBRACKET, "]", "}"),
        (pygame.K_MINUS, "-", "_"),
        (pygame.K_EQUALS, "=", "+"),
        (pygame.K_BACKSLASH, "\\", "|"),
        (pygame.K_BACKQUOTE, "`", "~"),
    ],
)
def test_symbol_keys(key, plain, shifted):
    assert key_to_char(key, False) == plain
    assert key_to_char(key, True) == shifted


def test_space_ignores_shift():
    assert key_to_char(pygame.K_SPACE, False) == " "
    assert key_to_char(pygame.K_SPACE, True) == " "


@pytest.mark.parametrize(
    "key", [pygame.K_RETURN, pygame.K_BACKSPACE, pygame.K_LSHIFT, pygame.K_F1, pygame.K_TAB]
)
def test_non_printable_keys_give_none(key):
    assert key_to_char(key, False) is None
    assert key_to_char(key, True) is None


def test_uppercase_code_is_not_a_key():
    assert key_to_char(ord("A"), False) is None