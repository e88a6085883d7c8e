"""Biscuits — HTTP cookies with many data pairs and first-class directives.

Keeps cookie data (your key/value pairs) apart from cookie directives
(domain, path, expires, max-age, secure, httponly).

Basic usage::

    from biscuits import create_biscuit, parse_biscuit

    biscuit = parse_biscuit("username=John Doe; path=/; secure")
    biscuit.get_key("username")  # 'John Doe'
    biscuit.set_key("userLevel", "admin")
    biscuit.set_path("/app/")

    create_biscuit("k", "v", path="/", max_age="300", http_only=True).to_string(include_name=True)
    # 'Set-Cookie: k=v; path=/; max-age=300; HttpOnly'
"""

from importlib import import_module

__version__ = "0.1.0"
__all__ = [
    "EXPIRES_FORMAT",
    "RESERVED",
    "Biscuit",
    "BiscuitError",
    "FormatError",
    "ParseConfig",
    "ParseError",
    "ReservedFieldError",
    "create_biscuit",
    "parse_biscuit",
    "to_string",
]

# Public name -> defining module
_LAZY_IMPORTS: dict[str, str] = {
    "EXPIRES_FORMAT": "biscuits.timefmt",
    "RESERVED": "biscuits.directives",
    "Biscuit": "biscuits.cookie",
    "BiscuitError": "biscuits.errors",
    "FormatError": "biscuits.errors",
    "ParseConfig": "biscuits.config",
    "ParseError": "biscuits.errors",
    "ReservedFieldError": "biscuits.errors",
    "create_biscuit": "biscuits.cookie",
    "parse_biscuit": "biscuits.parser",
    "to_string": "biscuits.serializer",
}


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import biscuits`` fast while providing a clean top-level API.
    """
    module_name = _LAZY_IMPORTS.get(name)
    if module_name is None:
        msg = f"module {__name__!r} has no attribute {name!r}"
        raise AttributeError(msg)
    return getattr(import_module(module_name), name)
