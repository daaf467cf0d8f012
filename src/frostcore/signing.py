"""
This module implements the per-round signing mathematics: binding factors,
the group commitment and challenge, Lagrange coefficients, and a
participant's signature share.

All functions are pure. They take a GroupContext and plain integers or
PublicCommitment values, and route every computation through
frostcore.modular. Group elements are reduced modulo context.p, scalars
modulo context.q.
"""

from hashlib import sha256
from typing import Sequence, Tuple, Union

from . import modular
from .commitment import NoncePair, PublicCommitment
from .constants import FIELD_SEPARATOR
from .errors import HashParseError
from .group import GroupContext


def hash_to_scalar(context: GroupContext, *fields: object) -> int:
    """
    Hash the "::::" framed fields with SHA-256 and reduce the digest mod q.

    Parameters:
    context (GroupContext): The group parameters.
    *fields (object): The values to frame, rendered with str().

    Returns:
    int: The digest read as a base-16 integer, reduced modulo q.

    Raises:
    HashParseError: If the hex digest cannot be parsed.
    """
    preimage = FIELD_SEPARATOR.join(str(field) for field in fields)
    digest = sha256(preimage.encode("utf-8")).hexdigest()
    try:
        value = int(digest, 16)
    except ValueError as e:
        raise HashParseError(f"Digest {digest!r} is not a base-16 integer.") from e
    return value % context.q


def compute_binding_value(
    context: GroupContext, commitment: PublicCommitment, message: str
) -> int:
    """
    Compute the binding factor of a participant for a message.

    The factor ties the participant's nonce commitments to its own id and the
    message, so one participant's nonces cannot be substituted for another's.

    Parameters:
    context (GroupContext): The group parameters.
    commitment (PublicCommitment): The participant's published commitment.
    message (str): The message being signed.

    Returns:
    int: p_i = H(i :::: m :::: i::D_i::E_i) mod q.
    """
    # p_i = H_1(i, m, B_i)
    return hash_to_scalar(
        context, commitment.participant_id, message, commitment.to_string()
    )


def compute_partial_commitment(
    context: GroupContext, commitment: PublicCommitment, message: str
) -> int:
    # r_i = D_i * (E_i)^p_i
    binding_value = compute_binding_value(context, commitment, message)
    return modular.mul(
        commitment.d,
        modular.pow(commitment.e, binding_value, context.p),
        context.p,
    )


def _check_unique(participant_ids: Sequence[int]) -> None:
    if len(participant_ids) != len(set(participant_ids)):
        raise ValueError("Participant ids must be unique.")


def compute_group_commitment(
    context: GroupContext, commitments: Sequence[PublicCommitment], message: str
) -> int:
    """
    Fold every participant's commitment into the group commitment R.

    Raises:
    ValueError: If two commitments share a participant id.
    """
    _check_unique([commitment.participant_id for commitment in commitments])

    # R = ∏ D_i * (E_i)^p_i, i ∈ S
    group_commitment = 1
    for commitment in commitments:
        group_commitment = modular.mul(
            group_commitment,
            compute_partial_commitment(context, commitment, message),
            context.p,
        )
    return group_commitment


def compute_challenge(
    context: GroupContext, group_commitment: int, group_public_key: int, message: str
) -> int:
    # c = H_2(R, Y, m)
    return hash_to_scalar(context, group_commitment, group_public_key, message)


def compute_group_commitment_and_challenge(
    context: GroupContext,
    commitments: Sequence[PublicCommitment],
    message: str,
    group_public_key: int,
) -> Tuple[int, int]:
    """
    Compute the group commitment R and the Fiat-Shamir challenge c.

    Parameters:
    context (GroupContext): The group parameters.
    commitments (Sequence[PublicCommitment]): The commitments of every signer
        in the session. The same set must be used by all signers.
    message (str): The message being signed.
    group_public_key (int): The group public key Y.

    Returns:
    Tuple[int, int]: (R, c).
    """
    group_commitment = compute_group_commitment(context, commitments, message)
    challenge = compute_challenge(context, group_commitment, group_public_key, message)
    return group_commitment, challenge


def signer_ids(participants: Union[int, Sequence[int]]) -> Tuple[int, ...]:
    """
    Normalize a signing set: an explicit sequence of ids, or a count n
    standing for the ids 1..n.
    """
    if isinstance(participants, bool):
        raise ValueError("The signing set must be a count or a sequence of ids.")
    if isinstance(participants, int):
        if participants < 0:
            raise ValueError("The number of participants cannot be negative.")
        return tuple(range(1, participants + 1))
    return tuple(participants)


def lagrange_coefficient(
    context: GroupContext,
    participant_id: int,
    participants: Union[int, Sequence[int]],
) -> int:
    """
    Calculate the Lagrange coefficient of a participant at x = 0.

    Parameters:
    context (GroupContext): The group parameters.
    participant_id (int): The id of the participant the coefficient is for.
    participants (Union[int, Sequence[int]]): The ids of the signers, or
        their number n when they carry the ids 1..n.

    Returns:
    int: λ_i = ∏ j / (j - i) mod q, j ∈ S, j ≠ i. The empty product is 1.

    Raises:
    ValueError: If the ids are not unique.
    ModularArithmeticError: If some j - i has no inverse mod q.
    """
    participant_ids = signer_ids(participants)
    _check_unique(participant_ids)

    # λ_i(0) = ∏ p_j/(p_j - p_i), j ∈ S, j ≠ i
    coefficient = 1
    for index in participant_ids:
        if index == participant_id:
            continue
        coefficient = modular.mul(
            coefficient,
            modular.div(
                index, modular.sub(index, participant_id, context.q), context.q
            ),
            context.q,
        )
    return coefficient


def compute_own_response(
    context: GroupContext,
    own_commitment: PublicCommitment,
    private_share: int,
    nonce_pair: NoncePair,
    lagrange_coefficient: int,
    challenge: int,
    message: str,
) -> int:
    """
    Compute this participant's signature share.

    The nonce pair is consumed; calling this twice with the same pair raises
    NonceReuseError.

    Parameters:
    context (GroupContext): The group parameters.
    own_commitment (PublicCommitment): The commitment this participant
        published for the session.
    private_share (int): The participant's secret share s_i.
    nonce_pair (NoncePair): The secret nonces behind own_commitment.
    lagrange_coefficient (int): λ_i for the signing set.
    challenge (int): The session challenge c.
    message (str): The message being signed.

    Returns:
    int: z_i = d_i + (e_i * p_i) + λ_i * s_i * c mod q.
    """
    binding_value = compute_binding_value(context, own_commitment, message)
    first_nonce, second_nonce = nonce_pair.consume()
    q = context.q
    return modular.add(
        first_nonce,
        modular.add(
            modular.mul(second_nonce, binding_value, q),
            modular.mul(modular.mul(lagrange_coefficient, private_share, q), challenge, q),
            q,
        ),
        q,
    )
