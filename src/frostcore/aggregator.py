"""
This module defines the Aggregator class used in the FROST (Flexible
Round-Optimized Schnorr Threshold) signature scheme. The Aggregator
collects the signers' commitments for one message, hands out the signing
inputs, and combines the returned signature shares into the final
signature.

Every share is verified before it is combined. A bad share is reported with
InvalidSignatureShare naming the participant, so the caller can drop that
signer and start a new session with another signing set.
"""

import logging
from typing import Mapping, Sequence, Tuple

from .commitment import PublicCommitment
from .errors import InvalidSignatureShare
from .group import GroupContext
from .signing import compute_group_commitment_and_challenge
from .verification import (
    AggregateSignature,
    compute_aggregate_response,
    verify_signature_share,
)

logger = logging.getLogger(__name__)


class Aggregator:
    """Class representing the signature aggregator."""

    def __init__(
        self,
        context: GroupContext,
        public_key: int,
        message: str,
        commitments: Sequence[PublicCommitment],
    ):
        """
        Initialize the Aggregator for one signing session.

        Parameters:
        context (GroupContext): The group parameters.
        public_key (int): The group public key Y.
        message (str): The message that is being signed.
        commitments (Sequence[PublicCommitment]): The commitment of every
            participant in the signing set.

        Raises:
        ValueError: If no commitments are given or two share an id.
        """
        if not commitments:
            raise ValueError("At least one commitment is required.")
        participant_ids = [c.participant_id for c in commitments]
        if len(participant_ids) != len(set(participant_ids)):
            raise ValueError("Participant ids must be unique.")

        self.context = context
        # Y
        self.public_key = public_key
        # m
        self.message = message
        # B
        self.commitments: Tuple[PublicCommitment, ...] = tuple(commitments)
        # S
        self.participant_ids: Tuple[int, ...] = tuple(participant_ids)

    def signing_inputs(self) -> Tuple[str, Tuple[PublicCommitment, ...]]:
        """
        Returns the signing inputs to be used by the signers.

        Returns:
        Tuple[str, Tuple[PublicCommitment, ...]]: (m, B).
        """
        return (self.message, self.commitments)

    def group_commitment_and_challenge(self) -> Tuple[int, int]:
        # (R, c)
        return compute_group_commitment_and_challenge(
            self.context, self.commitments, self.message, self.public_key
        )

    def signature(self, signature_shares: Mapping[int, int]) -> AggregateSignature:
        """
        Verify each signature share and combine them into the final signature.

        Parameters:
        signature_shares (Mapping[int, int]): The share z_i of each
            participant, keyed by participant id.

        Returns:
        AggregateSignature: σ = (R, z).

        Raises:
        ValueError: If the shares do not come from exactly the signing set.
        InvalidSignatureShare: If a share fails verification.
        """
        if set(signature_shares) != set(self.participant_ids):
            raise ValueError("Signature shares must match the signing set.")

        group_commitment, challenge = self.group_commitment_and_challenge()

        for commitment in self.commitments:
            share = signature_shares[commitment.participant_id]
            if not verify_signature_share(
                self.context,
                commitment,
                self.message,
                share,
                challenge,
                self.participant_ids,
            ):
                raise InvalidSignatureShare(commitment.participant_id)

        # z = ∑ z_i, i ∈ S
        z = compute_aggregate_response(
            self.context, (signature_shares[i] for i in self.participant_ids)
        )
        logger.debug(f"Aggregated {len(self.participant_ids)} signature shares")

        # σ = (R, z)
        return AggregateSignature(group_commitment, z)
