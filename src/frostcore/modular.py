"""
Arithmetic over the residues modulo m.

Every scalar and group element computed by frostcore passes through these
functions, so every intermediate value stays normalized into [0, m).
"""

import builtins
from math import gcd

from .errors import ModularArithmeticError


def _check(modulus: int, *operands: int) -> None:
    for value in (modulus,) + operands:
        if not isinstance(value, int) or isinstance(value, bool):
            raise TypeError(f"Expected an integer, got {type(value).__name__}.")
    if modulus <= 1:
        raise ModularArithmeticError("The modulus must be greater than 1.")


def add(a: int, b: int, modulus: int) -> int:
    _check(modulus, a, b)
    return (a + b) % modulus


def sub(a: int, b: int, modulus: int) -> int:
    _check(modulus, a, b)
    return (a - b) % modulus


def mul(a: int, b: int, modulus: int) -> int:
    _check(modulus, a, b)
    return (a * b) % modulus


def inverse(a: int, modulus: int) -> int:
    """
    Compute the multiplicative inverse of a modulo m.

    Parameters:
    a (int): The residue to invert.
    modulus (int): The modulus m.

    Returns:
    int: The unique x in [0, m) with a * x = 1 (mod m).

    Raises:
    ModularArithmeticError: If gcd(a, m) != 1.
    """
    _check(modulus, a)
    if gcd(a % modulus, modulus) != 1:
        raise ModularArithmeticError(f"{a} has no inverse modulo {modulus}.")
    return builtins.pow(a, -1, modulus)


def div(a: int, b: int, modulus: int) -> int:
    """Multiply a by the inverse of b modulo m."""
    return mul(a, inverse(b, modulus), modulus)


def pow(base: int, exponent: int, modulus: int) -> int:
    """
    Modular exponentiation.

    Parameters:
    base (int): The base, reduced modulo m before exponentiation.
    exponent (int): A non-negative exponent.
    modulus (int): The modulus m.

    Returns:
    int: base^exponent mod m.

    Raises:
    ModularArithmeticError: If the exponent is negative.
    """
    _check(modulus, base, exponent)
    if exponent < 0:
        raise ModularArithmeticError("The exponent must be non-negative.")
    return builtins.pow(base % modulus, exponent, modulus)
