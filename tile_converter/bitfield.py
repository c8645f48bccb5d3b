#!/usr/bin/env python3
"""
Bit field helpers
Get and set runs of bits inside an unsigned integer word
"""


def bitmask(nbits: int) -> int:
    """Return a mask with the lowest ``nbits`` bits set."""
    return (1 << nbits) - 1


def getbits(word: int, bitno: int, nbits: int) -> int:
    """
    Extract a bit field.

    Args:
        word: Unsigned integer to read from
        bitno: Position of the field's least significant bit
        nbits: Width of the field

    Returns:
        The field value, in the range [0, 2**nbits)
    """
    return (word >> bitno) & bitmask(nbits)


def setbits(word: int, bitno: int, nbits: int, value: int) -> int:
    """
    Store ``value`` into a bit field, leaving every other bit untouched.

    Bits of ``value`` above ``nbits`` are discarded.

    Args:
        word: Unsigned integer to modify
        bitno: Position of the field's least significant bit
        nbits: Width of the field
        value: Value to store

    Returns:
        The modified word
    """
    mask = bitmask(nbits)
    return (word & ~(mask << bitno)) | ((value & mask) << bitno)


def getbit(word: int, bitno: int) -> int:
    """Return bit ``bitno`` of ``word`` (0 or 1)."""
    return getbits(word, bitno, 1)


def setbit(word: int, bitno: int, value: int) -> int:
    """Set bit ``bitno`` of ``word`` to the lowest bit of ``value``."""
    return setbits(word, bitno, 1, value)
