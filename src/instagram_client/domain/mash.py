from __future__ import annotations

from collections.abc import Mapping
from typing import Any


class Mash(dict):
    """Dictionary whose keys can also be read as attributes.

    Nested mappings become Mash instances and lists are converted item by item,
    so ``user.counts.media`` and ``user["counts"]["media"]`` are equivalent.
    Only existing keys are exposed as attributes; dict methods win over keys
    with the same name (use item access for those).
    """

    def __init__(self, source: Mapping[str, Any] | None = None, **kwargs: Any) -> None:
        super().__init__()
        for key, value in dict(source or {}, **kwargs).items():
            self[str(key)] = self.convert(value)

    @classmethod
    def convert(cls, value: Any) -> Any:
        if isinstance(value, Mash):
            return value
        if isinstance(value, Mapping):
            return cls(value)
        if isinstance(value, list):
            return [cls.convert(item) for item in value]
        return value

    def __getattr__(self, name: str) -> Any:
        try:
            return self[name]
        except KeyError:
            raise AttributeError(f"{type(self).__name__} has no key {name!r}") from None

    def __setattr__(self, name: str, value: Any) -> None:
        self[name] = self.convert(value)

    def __delattr__(self, name: str) -> None:
        try:
            del self[name]
        except KeyError:
            raise AttributeError(name) from None

    def __dir__(self) -> list[str]:
        return sorted(set(super().__dir__()) | {k for k in self if k.isidentifier()})

    def __repr__(self) -> str:
        return f"{type(self).__name__}({dict.__repr__(self)})"

    def to_dict(self) -> dict[str, Any]:
        """Plain-dict copy, recursively."""
        return {key: _unwrap(value) for key, value in self.items()}


def _unwrap(value: Any) -> Any:
    if isinstance(value, Mash):
        return value.to_dict()
    if isinstance(value, list):
        return [_unwrap(item) for item in value]
    return value
