"""Tails of a hypothesis test."""

import enum

from ._exceptions import InvalidTailError

# Alternative hypothesis names accepted by the functional interface.
_ALTERNATIVES = {
    "two-sided": "both",
    "less": "left",
    "greater": "right",
}


class Tail(enum.Enum):
    """Tail of the null distribution a p-value is computed from.

    ``BOTH`` is the two-sided test, ``LEFT`` tests whether the first sample
    tends to be smaller than the second, ``RIGHT`` whether it tends to be
    larger.
    """

    BOTH = "both"
    LEFT = "left"
    RIGHT = "right"

    @classmethod
    def parse(cls, tail: "Tail | str") -> "Tail":
        """Convert ``tail`` to a ``Tail``.

        Raises
        ------
        InvalidTailError
            If ``tail`` is neither a ``Tail`` nor one of ``"both"``,
            ``"left"`` and ``"right"``.
        """
        if isinstance(tail, cls):
            return tail
        if isinstance(tail, str):
            try:
                return cls(tail)
            except ValueError:
                pass
        raise InvalidTailError(
            f"tail={tail!r} is invalid, expected one of "
            f"{[member.value for member in cls]}"
        )

    @classmethod
    def from_alternative(cls, alternative: str) -> "Tail":
        """Map ``"two-sided"``, ``"less"`` or ``"greater"`` to a ``Tail``."""
        try:
            return cls(_ALTERNATIVES[alternative])
        except (KeyError, TypeError):
            raise InvalidTailError(
                f"alternative={alternative!r} is invalid, expected one of "
                f"{list(_ALTERNATIVES)}"
            ) from None
