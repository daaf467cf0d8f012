"""
This module defines the Participant class, one signer's side of a FROST
signing round.

A participant holds its secret share, publishes a commitment to a fresh
nonce pair, and turns the session's commitments into its signature share.
Key generation and nonce sampling happen outside this package; the
participant receives its share and nonce pair ready-made.
"""

import logging
from typing import Optional, Sequence

from .commitment import NoncePair, PublicCommitment
from .group import GroupContext
from .signing import (
    compute_group_commitment_and_challenge,
    compute_own_response,
    lagrange_coefficient,
)

logger = logging.getLogger(__name__)


class Participant:
    """Class representing a FROST signer."""

    def __init__(
        self,
        context: GroupContext,
        index: int,
        private_share: int,
        group_public_key: int,
    ):
        """
        Initialize a new Participant.

        Parameters:
        context (GroupContext): The group parameters of the deployment.
        index (int): The nonzero id of the participant, unique within a session.
        private_share (int): The participant's secret share s_i, in [0, q).
        group_public_key (int): The group public key Y.

        Raises:
        ValueError: If any argument is not an integer, the index is zero, or
        the share is out of range.
        """
        if not all(
            isinstance(arg, int) for arg in (index, private_share, group_public_key)
        ):
            raise ValueError(
                "All arguments (index, private_share, group_public_key) must be integers."
            )
        if index == 0:
            raise ValueError("Participant index must be nonzero.")
        if not 0 <= private_share < context.q:
            raise ValueError("Private share must lie in [0, q).")

        self.context = context
        self.index = index
        self.private_share = private_share
        self.group_public_key = group_public_key
        self.nonce_pair: Optional[NoncePair] = None
        self.commitment: Optional[PublicCommitment] = None

    def __repr__(self) -> str:
        return f"Participant(index={self.index})"

    @property
    def public_share(self) -> int:
        # Y_i = g^s_i
        return self.context.exp(self.private_share)

    def commit(self, nonce_pair: NoncePair) -> PublicCommitment:
        """
        Take a fresh nonce pair for the next signature and publish its commitment.

        Parameters:
        nonce_pair (NoncePair): An unused nonce pair.

        Returns:
        PublicCommitment: (i, D_i, E_i, Y_i) to send to the aggregator.
        """
        commitment = PublicCommitment.from_nonces(
            self.context, self.index, nonce_pair, self.public_share
        )
        self.nonce_pair = nonce_pair
        self.commitment = commitment
        logger.debug(f"Participant {self.index} published commitment")
        return commitment

    def sign(self, message: str, commitments: Sequence[PublicCommitment]) -> int:
        """
        Generate this participant's signature share.

        The signing set is the set of ids present in commitments. The held
        nonce pair is consumed; a new one must be committed before the next
        signature.

        Parameters:
        message (str): The message being signed.
        commitments (Sequence[PublicCommitment]): Every signer's commitment
            for the session, including this participant's.

        Returns:
        int: The signature share z_i.

        Raises:
        ValueError: If no nonce pair is held or this participant's own
        commitment is missing from, or altered in, commitments.
        """
        if self.nonce_pair is None or self.commitment is None:
            raise ValueError("Nonce pair has not been committed.")

        own = [c for c in commitments if c.participant_id == self.index]
        if len(own) != 1:
            raise ValueError(
                f"Commitments must contain exactly one entry for participant {self.index}."
            )
        if own[0] != self.commitment:
            raise ValueError("Commitment does not match the one this participant published.")

        participant_ids = tuple(c.participant_id for c in commitments)

        # R, c = H_2(R, Y, m)
        _, challenge = compute_group_commitment_and_challenge(
            self.context, commitments, message, self.group_public_key
        )
        # λ_i
        coefficient = lagrange_coefficient(self.context, self.index, participant_ids)

        nonce_pair = self.nonce_pair
        self.nonce_pair = None
        self.commitment = None

        # z_i = d_i + (e_i * p_i) + λ_i * s_i * c
        share = compute_own_response(
            self.context,
            own[0],
            self.private_share,
            nonce_pair,
            coefficient,
            challenge,
            message,
        )
        logger.debug(
            f"Participant {self.index} signed with {len(participant_ids)} signers"
        )
        return share
