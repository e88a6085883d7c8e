"""Biscuits exception hierarchy.

Every error raised by the library derives from ``BiscuitError``. The
concrete errors also subclass ``ValueError`` so callers that only care
about "bad input" can catch the builtin.
"""


class BiscuitError(Exception):
    """Base for all biscuits-specific errors."""


class ReservedFieldError(BiscuitError, ValueError):
    """Raised when a data key collides with a reserved cookie directive.

    Directives (``domain``, ``path``, ``expires``, ``max-age``, ``secure``,
    ``httponly``) have dedicated accessors and can never be stored as
    cookie data.
    """

    def __init__(self, key: str) -> None:
        self.key = key
        super().__init__(f"Key {key!r} cannot be set: it is a reserved cookie field.")


class FormatError(BiscuitError, ValueError):
    """Raised when a stored directive does not match its expected layout."""

    def __init__(self, field: str, value: str | None, layout: str) -> None:
        self.field = field
        self.value = value
        self.layout = layout
        if value:
            detail = f"{value!r} does not match {layout!r}"
        else:
            detail = "value is not set"
        super().__init__(f"Cannot convert {field}: {detail}")


class ParseError(BiscuitError, ValueError):
    """Raised by strict parsing when a token cannot be classified.

    ``position`` is the 0-based index of the token within the
    ``;``-separated input.
    """

    def __init__(self, token: str, position: int) -> None:
        self.token = token
        self.position = position
        super().__init__(f"Malformed cookie token {token!r} at position {position}")
