"""Calibration values recovered from lines of text."""

import re

_DIGIT_WORDS = {
    "one": 1,
    "two": 2,
    "three": 3,
    "four": 4,
    "five": 5,
    "six": 6,
    "seven": 7,
    "eight": 8,
    "nine": 9,
}

_SPELLED = re.compile(r"(?=([0-9]|" + "|".join(_DIGIT_WORDS) + "))")


def _combine(first, last):
    return int(f"{first}{last}")


def calibration(line):
    """Combine the first and last digit of ``line``; 0 when there are none."""
    digits = [ord(char) - ord("0") for char in line if char.isdecimal()]
    if not digits:
        return 0
    return _combine(digits[0], digits[-1])


def calibration_sum(lines):
    """Sum the calibration values of ``lines``."""
    return sum(calibration(line) for line in lines)


def _number_value(token):
    return _DIGIT_WORDS.get(token) or int(token)


def spelled_calibration(line):
    """Like :func:`calibration`, but digits spelled as words count too."""
    numbers = [_number_value(match[1]) for match in _SPELLED.finditer(line)]
    if not numbers:
        return 0
    return _combine(numbers[0], numbers[-1])


def spelled_calibration_sum(lines):
    """Sum the spelled calibration values of ``lines``."""
    return sum(spelled_calibration(line) for line in lines)


def solve(text):
    """Return the answers to both parts for the given puzzle input."""
    lines = text.split("\n")
    return calibration_sum(lines), spelled_calibration_sum(lines)