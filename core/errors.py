"""Exceptions raised by the ring element types."""

from core.digits import int_to_digits


class NotInvertibleError(ZeroDivisionError):
    """Element has no multiplicative inverse in its ring.

    Subclasses ZeroDivisionError so inverting zero and inverting a
    non-unit can be caught the same way.
    """

    def __init__(self, element, detail: str = ""):
        self.element = element
        msg = f"element not invertible: {element}"
        if detail:
            msg += f" ({detail})"
        super().__init__(msg)


class RationalParseError(ValueError):
    """Malformed rational literal."""

    def __init__(self, text, reason: str = "malformed rational"):
        self.text = text
        super().__init__(f"{reason}: {text!r}")


class ModulusTooLargeError(ValueError):
    """Modulus exceeds the bound of the word-sized modular ring."""

    def __init__(self, modulus, bound):
        self.modulus = modulus
        self.bound = bound
        super().__init__(f"modulus too large for word ring: {int_to_digits(modulus)} > {bound}")
