"""The Biscuit cookie model.

A Biscuit keeps cookie *data* (arbitrary key/value pairs) apart from cookie
*directives* (domain, path, expires, max-age, secure, httponly). Data lives
in an insertion-ordered dict; each directive has its own field.

Basic usage::

    from biscuits import create_biscuit

    biscuit = create_biscuit("session", "abc", path="/", http_only=True)
    biscuit["theme"] = "dark"
    biscuit.set_max_age("300")
    str(biscuit)  # 'session=abc; theme=dark; path=/; max-age=300; HttpOnly'
"""

from collections.abc import Iterator, Mapping
from datetime import datetime, timedelta
from types import MappingProxyType
from typing import overload

from biscuits.directives import is_reserved
from biscuits.errors import ReservedFieldError
from biscuits.serializer import to_string
from biscuits.timefmt import format_expires, format_max_age, parse_expires, parse_max_age


class Biscuit:
    """A cookie with multiple data pairs and separate directive fields.

    String directives are ``None`` when absent. An empty string is kept as
    stored but reads, compares, and serializes exactly like ``None``.

    Instances are mutable and therefore unhashable.
    """

    __slots__ = ("_data", "_domain", "_expires", "_http_only", "_max_age", "_path", "_secure")

    def __init__(
        self,
        data: Mapping[str, str] | None = None,
        *,
        domain: str | None = None,
        path: str | None = None,
        expires: str | None = None,
        max_age: str | None = None,
        secure: bool = False,
        http_only: bool = False,
    ) -> None:
        self._data: dict[str, str] = {}
        self._domain = domain
        self._path = path
        self._expires = expires
        self._max_age = max_age
        self._secure = secure
        self._http_only = http_only
        if data:
            for key, value in data.items():
                self.set_key(key, value)

    @property
    def data(self) -> Mapping[str, str]:
        """Read-only view of the data pairs. Mutate through ``set_key``."""
        return MappingProxyType(self._data)

    # -- Data --

    def has_key(self, key: str) -> bool:
        """True if *key* is a data key (case-sensitive)."""
        return key in self._data

    def get_key(self, key: str, default: str = "") -> str:
        """Return the value for *key*, or *default* if it is not set."""
        return self._data.get(key, default)

    def set_key(self, key: str, value: str, overwrite: bool = True) -> bool:
        """Store *value* under *key*.

        Returns ``False`` without changing anything when *key* already
        exists and *overwrite* is false; ``True`` otherwise.

        Raises:
            ReservedFieldError: *key* is a directive name (any casing).
        """
        if is_reserved(key):
            raise ReservedFieldError(key)
        if not overwrite and key in self._data:
            return False
        self._data[key] = value
        return True

    def clear_keys(self) -> list[str]:
        """Remove every data pair and return the removed keys in insertion order."""
        keys = list(self._data)
        self._data.clear()
        return keys

    def items(self) -> Iterator[tuple[str, str]]:
        yield from self._data.items()

    def keys(self) -> Iterator[str]:
        yield from self._data

    def values(self) -> Iterator[str]:
        yield from self._data.values()

    # -- Directives --

    def has_domain(self) -> bool:
        return bool(self._domain)

    def get_domain(self, default: str = "") -> str:
        """Return the domain, or *default* if it is not set."""
        return self._domain or default

    def set_domain(self, domain: str | None) -> str:
        """Set the domain and return the previous one (``""`` if unset)."""
        previous = self._domain
        self._domain = domain
        return previous or ""

    def has_path(self) -> bool:
        return bool(self._path)

    def get_path(self, default: str = "") -> str:
        """Return the path, or *default* if it is not set."""
        return self._path or default

    def set_path(self, path: str | None) -> str:
        """Set the path and return the previous one (``""`` if unset)."""
        previous = self._path
        self._path = path
        return previous or ""

    def has_expires(self) -> bool:
        return bool(self._expires)

    def get_expires(self, default: str = "") -> str:
        """Return the raw expires string, or *default* if it is not set."""
        return self._expires or default

    def set_expires(self, expires: str | None) -> str:
        """Set the raw expires string and return the previous one (``""`` if unset)."""
        previous = self._expires
        self._expires = expires
        return previous or ""

    def get_expires_as_time(self) -> datetime:
        """Return expires as an aware UTC ``datetime``.

        Raises:
            FormatError: expires is unset or not in the
                ``ddd, dd MMM yyyy HH:mm:ss UTC`` layout.
        """
        return parse_expires(self._expires)

    def set_expires_as_time(self, when: datetime) -> datetime:
        """Store *when* as the expires directive and return the previous one.

        The previous value is converted before anything is stored, so a
        ``FormatError`` leaves the cookie unchanged.

        Raises:
            FormatError: the previous expires is unset or not in the
                ``ddd, dd MMM yyyy HH:mm:ss UTC`` layout.
        """
        previous = parse_expires(self._expires)
        self._expires = format_expires(when)
        return previous

    def has_max_age(self) -> bool:
        return bool(self._max_age)

    def get_max_age(self, default: str = "") -> str:
        """Return the raw max-age string, or *default* if it is not set."""
        return self._max_age or default

    def set_max_age(self, max_age: str | None) -> str:
        """Set the raw max-age string and return the previous one (``""`` if unset)."""
        previous = self._max_age
        self._max_age = max_age
        return previous or ""

    def get_max_age_as_time(self) -> timedelta:
        """Return max-age as a ``timedelta``.

        Raises:
            FormatError: max-age is unset or not a number of seconds.
        """
        return parse_max_age(self._max_age)

    def set_max_age_as_time(self, duration: timedelta) -> timedelta:
        """Store *duration* as whole seconds and return the previous max-age.

        Like ``set_expires_as_time``, the previous value must convert before
        anything is stored.

        Raises:
            FormatError: the previous max-age is unset or not a number of seconds.
        """
        previous = parse_max_age(self._max_age)
        self._max_age = format_max_age(duration)
        return previous

    def is_secure(self) -> bool:
        return self._secure

    def set_secure(self, secure: bool) -> bool:
        """Set the secure flag and return the previous value."""
        previous = self._secure
        self._secure = secure
        return previous

    def is_http_only(self) -> bool:
        return self._http_only

    def set_http_only(self, http_only: bool) -> bool:
        """Set the HttpOnly flag and return the previous value."""
        previous = self._http_only
        self._http_only = http_only
        return previous

    # -- Serialization --

    def to_string(self, include_name: bool = False) -> str:
        """Serialize; see ``biscuits.serializer.to_string``."""
        return to_string(self, include_name=include_name)

    def __str__(self) -> str:
        return to_string(self)

    def __repr__(self) -> str:
        fields = [repr(self._data)]
        for name, value in (
            ("domain", self._domain),
            ("path", self._path),
            ("expires", self._expires),
            ("max_age", self._max_age),
        ):
            if value:
                fields.append(f"{name}={value!r}")
        if self._secure:
            fields.append("secure=True")
        if self._http_only:
            fields.append("http_only=True")
        return f"Biscuit({', '.join(fields)})"

    # -- Mapping-style sugar --

    def __getitem__(self, key: str) -> str:
        """Shortcut for ``get_key``. Missing keys read as ``""``."""
        return self.get_key(key)

    def __setitem__(self, key: str, value: str) -> None:
        """Shortcut for ``set_key`` with overwrite."""
        self.set_key(key, value)

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.has_key(key)

    def __iter__(self) -> Iterator[str]:
        return self.keys()

    def __len__(self) -> int:
        return len(self._data)

    # -- Comparison --

    def _directives(self) -> tuple[str | None, str | None, str | None, str | None, bool, bool]:
        """Directive fields with empty strings folded into ``None``."""
        return (
            self._domain or None,
            self._path or None,
            self._expires or None,
            self._max_age or None,
            self._secure,
            self._http_only,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Biscuit):
            return NotImplemented
        return self._directives() == other._directives() and self._data == other._data

    __hash__ = None  # type: ignore[assignment]


@overload
def create_biscuit(
    key: str,
    value: str,
    /,
    *,
    domain: str | None = None,
    path: str | None = None,
    expires: str | None = None,
    max_age: str | None = None,
    secure: bool = False,
    http_only: bool = False,
) -> Biscuit: ...


@overload
def create_biscuit(
    data: Mapping[str, str],
    /,
    *,
    domain: str | None = None,
    path: str | None = None,
    expires: str | None = None,
    max_age: str | None = None,
    secure: bool = False,
    http_only: bool = False,
) -> Biscuit: ...


def create_biscuit(
    key_or_data: str | Mapping[str, str],
    value: str | None = None,
    /,
    *,
    domain: str | None = None,
    path: str | None = None,
    expires: str | None = None,
    max_age: str | None = None,
    secure: bool = False,
    http_only: bool = False,
) -> Biscuit:
    """Create a Biscuit from one key/value pair or from a mapping of pairs.

    ::

        create_biscuit("thisisakey", "thisisavalue", path="/", max_age="300")
        create_biscuit({"user": "ann", "lang": "en"}, secure=True)

    The mapping is copied; later changes to it do not affect the cookie.

    Raises:
        ReservedFieldError: a data key is a directive name.
    """
    if isinstance(key_or_data, str):
        if value is None:
            msg = "create_biscuit() requires a value when called with a key"
            raise TypeError(msg)
        data: Mapping[str, str] = {key_or_data: value}
    else:
        if value is not None:
            msg = "create_biscuit() takes no value when called with a mapping"
            raise TypeError(msg)
        data = key_or_data
    return Biscuit(
        data,
        domain=domain,
        path=path,
        expires=expires,
        max_age=max_age,
        secure=secure,
        http_only=http_only,
    )
