"""
Copyright (c) 2024 The frostcore developers

Distributed under the MIT software license, see the accompanying file LICENSE
or http://www.opensource.org/licenses/mit-license.php.

This code is currently a work in progress. It's not secure nor stable.  IT IS
EXTREMELY DANGEROUS AND RECKLESS TO USE THIS MODULE IN PRODUCTION!

This package implements the signing round of the FROST threshold Schnorr
signature scheme over a prime-order multiplicative group.

Modules:
- constants: The default group (RFC 3526 2048-bit MODP) and hash framing.
- group: The GroupContext class holding the group parameters.
- modular: Add, sub, mul, div and pow over the residues mod m.
- commitment: The single-use NoncePair and the PublicCommitment it yields.
- signing: Binding factors, group commitment, challenge, Lagrange
  coefficients and signature shares.
- verification: Share and signature checks, and share aggregation.
- participant: The Participant class, one signer's side of a round.
- aggregator: The Aggregator class that combines the shares.

Nonce sampling, key generation and transport are left to the caller.
"""

from .group import GroupContext
from .commitment import NoncePair, PublicCommitment
from .errors import (
    FrostError,
    HashParseError,
    InvalidSignatureShare,
    ModularArithmeticError,
    NonceReuseError,
)
from .signing import (
    compute_binding_value,
    compute_challenge,
    compute_group_commitment,
    compute_group_commitment_and_challenge,
    compute_own_response,
    lagrange_coefficient,
)
from .verification import (
    AggregateSignature,
    compute_aggregate_response,
    verify_participants,
    verify_signature,
    verify_signature_share,
)
from .participant import Participant
from .aggregator import Aggregator
