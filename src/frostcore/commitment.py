"""
This module defines the values a participant produces for one signing round:
the secret NoncePair, which may be read exactly once, and the PublicCommitment
published to the other signers.

The canonical string form of a commitment, "<id>::<d>::<e>", is part of the
binding factor hash input. Anything that transmits commitments between
participants must reproduce it exactly.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Tuple

from .constants import COMMITMENT_SEPARATOR
from .errors import NonceReuseError
from .group import GroupContext


class NoncePair:
    """
    A participant's secret nonce pair (d_i, e_i) for a single signature.

    The raw scalars can only be obtained through consume(), which succeeds
    once. Signing two messages with the same pair reveals the private share.
    """

    __slots__ = ("_nonces", "_consumed")

    def __init__(self, first_nonce: int, second_nonce: int):
        if not all(isinstance(n, int) for n in (first_nonce, second_nonce)):
            raise ValueError("Nonces must be integers.")
        self._nonces: Tuple[int, int] = (first_nonce, second_nonce)
        self._consumed = False

    def __repr__(self) -> str:
        state = "consumed" if self._consumed else "unused"
        return f"NoncePair(<{state}>)"

    @property
    def consumed(self) -> bool:
        return self._consumed

    def commitments(self, context: GroupContext) -> Tuple[int, int]:
        """
        Compute the public commitments (D_i, E_i) = (g^d_i, g^e_i).

        This does not consume the pair.
        """
        if self._consumed:
            raise NonceReuseError("Nonce pair has already been consumed.")
        first_nonce, second_nonce = self._nonces
        return context.exp(first_nonce), context.exp(second_nonce)

    def consume(self) -> Tuple[int, int]:
        """
        Return (d_i, e_i) and mark the pair as used.

        Raises:
        NonceReuseError: If the pair was already consumed.
        """
        if self._consumed:
            raise NonceReuseError("Nonce pair has already been consumed.")
        self._consumed = True
        nonces = self._nonces
        self._nonces = (0, 0)
        return nonces


@dataclass(frozen=True)
class PublicCommitment:
    """A participant's published commitment for one signing round."""

    participant_id: int
    d: int
    e: int
    public_share: int

    @classmethod
    def from_nonces(
        cls,
        context: GroupContext,
        participant_id: int,
        nonce_pair: NoncePair,
        public_share: int,
    ) -> PublicCommitment:
        # (D_i, E_i) = (g^d_i, g^e_i)
        d, e = nonce_pair.commitments(context)
        return cls(participant_id, d, e, public_share)

    def to_string(self) -> str:
        return COMMITMENT_SEPARATOR.join(
            str(value) for value in (self.participant_id, self.d, self.e)
        )

    def __str__(self) -> str:
        return self.to_string()
