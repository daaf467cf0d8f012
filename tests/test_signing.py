import unittest
from unittest import mock

import secrets
from hashlib import sha256
from frostcore import (
    GroupContext,
    NoncePair,
    PublicCommitment,
    HashParseError,
    ModularArithmeticError,
    NonceReuseError,
    compute_aggregate_response,
    compute_binding_value,
    compute_challenge,
    compute_group_commitment,
    compute_group_commitment_and_challenge,
    compute_own_response,
    lagrange_coefficient,
    verify_participants,
)


class Tests(unittest.TestCase):
    def setUp(self):
        self.context = GroupContext.default()
        context = self.context
        self.commitments = [
            PublicCommitment(i, context.exp(10 + i), context.exp(20 + i), context.exp(i))
            for i in (1, 2, 3)
        ]

    def test_binding_value(self):
        context = self.context
        commitment = self.commitments[0]

        rho = compute_binding_value(context, commitment, "fnord!")
        self.assertEqual(rho, compute_binding_value(context, commitment, "fnord!"))

        preimage = f"1::::fnord!::::1::{commitment.d}::{commitment.e}"
        expected = int(sha256(preimage.encode("utf-8")).hexdigest(), 16) % context.q
        self.assertEqual(rho, expected)

        d, e, y = commitment.d, commitment.e, commitment.public_share
        self.assertNotEqual(rho, compute_binding_value(context, commitment, "fnord?"))
        self.assertNotEqual(
            rho, compute_binding_value(context, PublicCommitment(4, d, e, y), "fnord!")
        )
        self.assertNotEqual(
            rho,
            compute_binding_value(context, PublicCommitment(1, e, e, y), "fnord!"),
        )
        self.assertNotEqual(
            rho,
            compute_binding_value(context, PublicCommitment(1, d, d, y), "fnord!"),
        )

    def test_binding_value_ignores_public_share(self):
        commitment = self.commitments[0]
        other = PublicCommitment(
            commitment.participant_id, commitment.d, commitment.e, 12345
        )
        self.assertEqual(
            compute_binding_value(self.context, commitment, "m"),
            compute_binding_value(self.context, other, "m"),
        )

    def test_commitment_string(self):
        self.assertEqual(str(PublicCommitment(7, 11, 13, 17)), "7::11::13")

    def test_unparseable_digest(self):
        with mock.patch("frostcore.signing.sha256") as digest:
            digest.return_value.hexdigest.return_value = "not hex"
            with self.assertRaises(HashParseError):
                compute_binding_value(self.context, self.commitments[0], "m")

    def test_group_commitment_and_challenge(self):
        context = self.context
        public_key = context.exp(42)
        group_commitment, challenge = compute_group_commitment_and_challenge(
            context, self.commitments, "fnord!", public_key
        )

        expected = 1
        for c in self.commitments:
            rho = compute_binding_value(context, c, "fnord!")
            expected = expected * c.d * pow(c.e, rho, context.p) % context.p
        self.assertEqual(group_commitment, expected)

        preimage = f"{group_commitment}::::{public_key}::::fnord!"
        self.assertEqual(
            challenge,
            int(sha256(preimage.encode("utf-8")).hexdigest(), 16) % context.q,
        )
        self.assertEqual(
            challenge, compute_challenge(context, group_commitment, public_key, "fnord!")
        )

    def test_group_commitment_order_invariant(self):
        context = self.context
        forward = compute_group_commitment(context, self.commitments, "m")
        backward = compute_group_commitment(context, self.commitments[::-1], "m")
        self.assertEqual(forward, backward)

    def test_group_commitment_edge_cases(self):
        self.assertEqual(compute_group_commitment(self.context, [], "m"), 1)
        with self.assertRaises(ValueError):
            compute_group_commitment(
                self.context, [self.commitments[0], self.commitments[0]], "m"
            )

    def test_lagrange_coefficient(self):
        context = self.context
        q = context.q
        self.assertEqual(lagrange_coefficient(context, 1, 0), 1)
        self.assertEqual(lagrange_coefficient(context, 1, ()), 1)
        self.assertEqual(lagrange_coefficient(context, 1, 1), 1)
        self.assertEqual(lagrange_coefficient(context, 1, 2), 2)
        self.assertEqual(lagrange_coefficient(context, 2, 2), q - 1)
        self.assertEqual(lagrange_coefficient(context, 1, (1, 2)), 2)
        self.assertEqual(lagrange_coefficient(context, 3, [1, 3]), (q - 1) // 2)

    def test_lagrange_interpolation(self):
        q = self.context.q
        secret = secrets.randbelow(q)
        slope = secrets.randbelow(q)
        shares = {i: (secret + slope * i) % q for i in (1, 2, 3)}
        for signers in ((1, 2), (1, 3), (2, 3), (1, 2, 3)):
            reconstructed = (
                sum(
                    lagrange_coefficient(self.context, i, signers) * shares[i]
                    for i in signers
                )
                % q
            )
            self.assertEqual(reconstructed, secret)

    def test_lagrange_invalid(self):
        with self.assertRaises(ValueError):
            lagrange_coefficient(self.context, 1, (1, 2, 2))
        with self.assertRaises(ValueError):
            lagrange_coefficient(self.context, 1, -1)
        small = GroupContext(q=11, g=4, p=23)
        with self.assertRaises(ModularArithmeticError):
            lagrange_coefficient(small, 1, (1, 12))

    def test_nonce_pair_single_use(self):
        context = self.context
        nonce_pair = NoncePair(5, 7)
        commitment = PublicCommitment.from_nonces(context, 1, nonce_pair, context.exp(3))
        self.assertEqual(commitment.d, context.exp(5))
        self.assertEqual(commitment.e, context.exp(7))
        self.assertFalse(nonce_pair.consumed)
        self.assertNotIn("5", repr(nonce_pair))

        compute_own_response(context, commitment, 3, nonce_pair, 1, 9, "m")
        self.assertTrue(nonce_pair.consumed)
        with self.assertRaises(NonceReuseError):
            compute_own_response(context, commitment, 3, nonce_pair, 1, 9, "other")
        with self.assertRaises(NonceReuseError):
            nonce_pair.commitments(context)

    def test_own_response(self):
        context = self.context
        q = context.q
        commitment = PublicCommitment.from_nonces(
            context, 1, NoncePair(5, 7), context.exp(3)
        )
        rho = compute_binding_value(context, commitment, "m")
        z = compute_own_response(context, commitment, 3, NoncePair(5, 7), 2, 9, "m")
        self.assertEqual(z, (5 + 7 * rho + 2 * 3 * 9) % q)

    def test_single_participant(self):
        context = self.context
        q = context.q
        message = "fnord!"

        private_share = secrets.randbelow(q)
        public_share = context.exp(private_share)
        nonce_pair = NoncePair(secrets.randbelow(q), secrets.randbelow(q))
        commitment = PublicCommitment.from_nonces(context, 1, nonce_pair, public_share)

        group_commitment, challenge = compute_group_commitment_and_challenge(
            context, [commitment], message, public_share
        )
        coefficient = lagrange_coefficient(context, 1, 1)
        self.assertEqual(coefficient, 1)
        z = compute_own_response(
            context,
            commitment,
            private_share,
            nonce_pair,
            coefficient,
            challenge,
            message,
        )

        self.assertTrue(
            verify_participants(context, [commitment], message, z, challenge, 1)
        )
        # g^z ≟ R * Y^c
        self.assertEqual(
            context.exp(z),
            group_commitment * pow(public_share, challenge, context.p) % context.p,
        )

        # Flip one bit of the message without recomputing z
        tampered = message[:-1] + chr(ord(message[-1]) ^ 1)
        self.assertFalse(
            verify_participants(context, [commitment], tampered, z, challenge, 1)
        )

    def test_aggregate_response(self):
        context = self.context
        q = context.q
        responses = [q - 1, q - 2, 5]
        self.assertEqual(compute_aggregate_response(context, responses), (2 * q + 2) % q)
        self.assertEqual(
            compute_aggregate_response(context, responses),
            compute_aggregate_response(context, [5, q - 1, q - 2]),
        )
        self.assertEqual(compute_aggregate_response(context, []), 0)


if __name__ == "__main__":
    unittest.main()
