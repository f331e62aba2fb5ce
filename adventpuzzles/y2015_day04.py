"""Mining coins by searching for MD5 hashes with leading zeros."""

import hashlib
from itertools import count


def mine_advent_coin(prefix):
    """Return the lowest positive number whose hash with ``prefix`` starts with five zeros."""
    for suffix in count(1):
        digest = hashlib.md5(f"{prefix}{suffix}".encode()).hexdigest()
        if digest.startswith("00000"):
            return suffix
    raise AssertionError("unreachable")


def solve(text):
    """Return the answer for the secret key given as the puzzle input."""
    return (mine_advent_coin(text.strip()),)