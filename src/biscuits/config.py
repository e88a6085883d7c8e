"""Parser configuration.

ParseConfig is a frozen dataclass — immutable after creation, safe to share
as a module-level default.
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ParseConfig:
    """Options for ``parse_biscuit``.

    The default is permissive: malformed tokens are dropped. Opt into
    strict parsing to surface them instead::

        biscuit = parse_biscuit(header, ParseConfig(strict=True))
    """

    # Raise ParseError for tokens that would otherwise be dropped
    strict: bool = False


DEFAULT_CONFIG = ParseConfig()
