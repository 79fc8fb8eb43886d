"""Shallow composition helpers for settings and other key/value objects."""

from __future__ import annotations

from typing import Any, Dict, Mapping, MutableMapping, TypeVar

M = TypeVar("M", bound=MutableMapping[str, Any])


def merge_defaults(defaults: Mapping[str, Any], settings: Mapping[str, Any]) -> Dict[str, Any]:
    """Return a new dict with ``settings`` replacing ``defaults``.

    ``defaults`` defines the full set of output keys: keys that only exist in
    ``settings`` are dropped. A key present in ``settings`` wins even if its
    value is ``None``. Values are copied by reference.
    """

    merged: Dict[str, Any] = {}
    for key in defaults.keys():
        if key in settings:
            merged[key] = settings[key]
        else:
            merged[key] = defaults[key]
    return merged


def merge(destination: M, source: Mapping[str, Any]) -> M:
    """Copy every key of ``source`` onto ``destination`` and return ``destination``.

    Existing keys are overwritten, keys only on ``destination`` are kept.
    Mutates ``destination`` in place; nothing is cloned.
    """

    for key in source.keys():
        destination[key] = source[key]
    return destination
