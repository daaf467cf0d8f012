"""
Exceptions raised by the signing core.

Bad input is reported with ValueError subclasses, arithmetic that cannot be
carried out inside the field with ArithmeticError subclasses. Verification
never raises; it returns a bool so that callers can decide which participant
to exclude.
"""


class FrostError(Exception):
    """Base class for all errors raised by frostcore."""


class ModularArithmeticError(FrostError, ArithmeticError):
    """Raised when an operation has no result in the residue ring."""


class HashParseError(ModularArithmeticError):
    """Raised when a digest cannot be read as a base-16 integer."""


class NonceReuseError(FrostError, ValueError):
    """Raised when a secret nonce pair is read a second time."""


class InvalidSignatureShare(FrostError, ValueError):
    """Raised by the aggregator when a participant's share fails verification."""

    def __init__(self, participant_id: int):
        super().__init__(f"Signature share of participant {participant_id} is invalid.")
        self.participant_id = participant_id
