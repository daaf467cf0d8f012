"""
This module checks signature shares and combines them into the final
signature.

Verification never raises on a mismatch: every check returns a bool, and
mismatches are logged, so the coordinating layer can exclude a misbehaving
participant and retry with another signing set.
"""

from __future__ import annotations
from dataclasses import dataclass
import logging
from typing import Iterable, Sequence, Union

from . import modular
from .commitment import PublicCommitment
from .constants import COMMITMENT_SEPARATOR
from .group import GroupContext
from .signing import (
    compute_challenge,
    compute_partial_commitment,
    lagrange_coefficient,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AggregateSignature:
    """The final signature σ = (R, z)."""

    group_commitment: int
    response: int

    def to_string(self) -> str:
        return f"{self.group_commitment}{COMMITMENT_SEPARATOR}{self.response}"

    @classmethod
    def from_string(cls, signature: str) -> AggregateSignature:
        """
        Parse the "<R>::<z>" form produced by to_string.

        Raises:
        ValueError: If the string is not two decimal integers.
        """
        parts = signature.split(COMMITMENT_SEPARATOR)
        if len(parts) != 2 or not all(p.isascii() and p.isdigit() for p in parts):
            raise ValueError("Signature must have the form '<R>::<z>'.")
        group_commitment, response = (int(part, 10) for part in parts)
        return cls(group_commitment, response)


def _in_range(context: GroupContext, response: int, label: str) -> bool:
    # z ∈ [0, q)
    if isinstance(response, int) and not isinstance(response, bool):
        if 0 <= response < context.q:
            return True
    logger.warning(f"{label} is out of range")
    return False


def _expected_term(
    context: GroupContext,
    commitment: PublicCommitment,
    message: str,
    challenge: int,
    participants: Union[int, Sequence[int]],
) -> int:
    # r_i * Y_i^(c * λ_i)
    coefficient = lagrange_coefficient(
        context, commitment.participant_id, participants
    )
    return modular.mul(
        compute_partial_commitment(context, commitment, message),
        modular.pow(
            commitment.public_share,
            modular.mul(challenge, coefficient, context.q),
            context.p,
        ),
        context.p,
    )


def verify_participants(
    context: GroupContext,
    commitments: Sequence[PublicCommitment],
    message: str,
    response: int,
    challenge: int,
    participants: Union[int, Sequence[int]],
) -> bool:
    """
    Compare every participant's term r_i * Y_i^(c * λ_i) against g^z.

    Each term is checked against the same response z. This only holds when
    the signing set has a single member; for two or more signers use
    verify_signature_share on each share, or verify_signature on the result.

    Parameters:
    context (GroupContext): The group parameters.
    commitments (Sequence[PublicCommitment]): The session's commitments.
    message (str): The signed message.
    response (int): The response z to compare against.
    challenge (int): The session challenge c.
    participants (Union[int, Sequence[int]]): The signing set, as for
        lagrange_coefficient.

    Returns:
    bool: True if every term matches g^z.
    """
    if not _in_range(context, response, "Response"):
        return False
    gz = context.exp(response)
    valid = True
    for commitment in commitments:
        term = _expected_term(context, commitment, message, challenge, participants)
        if term != gz:
            logger.warning(
                f"Participant {commitment.participant_id} failed verification"
            )
            valid = False
    return valid


def verify_signature_share(
    context: GroupContext,
    commitment: PublicCommitment,
    message: str,
    share: int,
    challenge: int,
    participants: Union[int, Sequence[int]],
) -> bool:
    """
    Check one participant's share: g^z_i ≟ r_i * Y_i^(c * λ_i).

    A share outside [0, q) is reported as invalid.
    """
    if not _in_range(
        context, share, f"Signature share of participant {commitment.participant_id}"
    ):
        return False
    # g^z_i ≟ D_i * (E_i)^p_i * Y_i^(c * λ_i)
    valid = context.exp(share) == _expected_term(
        context, commitment, message, challenge, participants
    )
    if not valid:
        logger.warning(
            f"Signature share of participant {commitment.participant_id} is invalid"
        )
    return valid


def verify_signature(
    context: GroupContext,
    signature: AggregateSignature,
    group_public_key: int,
    message: str,
) -> bool:
    """
    Check an aggregate signature against the group public key.

    Parameters:
    context (GroupContext): The group parameters.
    signature (AggregateSignature): The signature (R, z).
    group_public_key (int): The group public key Y.
    message (str): The signed message.

    Returns:
    bool: True if g^z == R * Y^c with c = H(R, Y, m).
    """
    if not _in_range(context, signature.response, "Aggregate response"):
        return False
    challenge = compute_challenge(
        context, signature.group_commitment, group_public_key, message
    )
    # g^z ≟ R * Y^c
    return context.exp(signature.response) == modular.mul(
        signature.group_commitment,
        modular.pow(group_public_key, challenge, context.p),
        context.p,
    )


def compute_aggregate_response(context: GroupContext, responses: Iterable[int]) -> int:
    # z = ∑ z_i, i ∈ S
    aggregate = 0
    for response in responses:
        aggregate = modular.add(aggregate, response, context.q)
    return aggregate
