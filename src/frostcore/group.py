"""
This module defines the GroupContext class, the immutable set of group
parameters shared by every operation of a signing session.

A context is passed explicitly into each function rather than read from module
state, so sessions over different groups can run side by side.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional

from . import modular
from .constants import P, Q, G


@dataclass(frozen=True)
class GroupContext:
    """
    Parameters of the group a signing session works in.

    Attributes:
    q (int): The prime order used for every scalar (nonces, shares, binding
        factors, challenges, responses).
    g (int): The generator of the subgroup of order q.
    p (Optional[int]): The modulus of the group elements. Defaults to q, in
        which case every operation, scalar or element, is carried out mod q.
        That only reproduces the single-modulus arithmetic: g has an order
        dividing q - 1 there, so responses reduced mod q do not verify. Pass
        p with q | p - 1 to get verifiable signatures.
    """

    q: int
    g: int
    p: Optional[int] = None

    def __post_init__(self):
        if self.p is None:
            object.__setattr__(self, "p", self.q)
        if not all(isinstance(value, int) for value in (self.q, self.g, self.p)):
            raise ValueError("Group parameters must be integers.")
        if self.q <= 1 or self.p <= 1:
            raise ValueError("Group moduli must be greater than 1.")
        if not 1 < self.g < self.p:
            raise ValueError("The generator must lie in (1, p).")

    @classmethod
    def default(cls) -> GroupContext:
        """Return the context for the RFC 3526 2048-bit MODP group."""
        return cls(q=Q, g=G, p=P)

    def exp(self, exponent: int) -> int:
        """Return g^exponent in the group."""
        return modular.pow(self.g, exponent, self.p)
