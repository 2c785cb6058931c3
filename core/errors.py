"""Exception taxonomy for the equity engine.

Every error derives from :class:`EquityError`, itself a ``ValueError``,
so callers that already guard card-string parsing with ``except
ValueError`` keep working.  All failures are deterministic for a given
input; nothing here is retried.
"""

from __future__ import annotations


class EquityError(ValueError):
    """Base class for all engine errors."""


class InvalidNotationError(EquityError):
    """Shorthand notation (``"AKs"``, ``"QQ"`` ...) could not be parsed."""


class PairSuffixError(InvalidNotationError):
    """A pocket pair was given a suited/offsuit suffix."""


class UnavailableCardsError(EquityError):
    """No legal suit assignment remains for the requested notation."""


class CardCollisionError(EquityError):
    """The same card appears more than once across the hole cards."""


class CardCountError(EquityError):
    """An operation received the wrong number of cards."""


class InvalidIterationsError(EquityError):
    """Iteration count is not a positive integer."""
