"""Typed solver inputs and the JSON share-document loader."""

from __future__ import annotations

import json
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Any, List, Mapping, Optional, Tuple

from ..errors import InvalidConfiguration

KEYS_FIELD = "keys"
PROVIDED_FIELD = "provided_shares"
RESERVED_FIELDS = (KEYS_FIELD, PROVIDED_FIELD)
INTEGER_PATTERN = re.compile(r"-?[0-9]+")


@dataclass(frozen=True)
class SolverConfig:
    """Threshold parameters of a share document."""

    k: int
    n: Optional[int] = None
    provided_shares: Optional[Tuple[str, ...]] = None

    def __post_init__(self) -> None:
        if self.k < 1:
            raise InvalidConfiguration(f"Threshold k must be positive, got {self.k}.")


@dataclass(frozen=True)
class ShareEncoding:
    """A raw share entry: identifier plus a y value written in ``base``."""

    identifier: str
    base: int
    value: str


def _as_int(raw: Any, field: str) -> int:
    if isinstance(raw, int) and not isinstance(raw, bool):
        return raw
    if isinstance(raw, float) and raw.is_integer():
        return int(raw)
    if isinstance(raw, str) and INTEGER_PATTERN.fullmatch(raw):
        return int(raw)
    raise InvalidConfiguration(f"Field {field!r} must be an integer, got {raw!r}.")


def load_request(document: Mapping[str, Any]) -> Tuple[SolverConfig, List[ShareEncoding]]:
    """Split a parsed share document into its config and share entries."""
    keys = document.get(KEYS_FIELD)
    if not isinstance(keys, Mapping) or "k" not in keys:
        raise InvalidConfiguration(f"Document needs a {KEYS_FIELD!r} object with 'k'.")
    k = _as_int(keys["k"], "keys.k")
    n = _as_int(keys["n"], "keys.n") if keys.get("n") is not None else None

    provided: Optional[Tuple[str, ...]] = None
    raw_provided = document.get(PROVIDED_FIELD)
    if raw_provided is not None:
        if isinstance(raw_provided, (str, bytes)) or not isinstance(raw_provided, (list, tuple)):
            raise InvalidConfiguration(f"{PROVIDED_FIELD!r} must be a list of identifiers.")
        provided = tuple(str(item) for item in raw_provided)

    encodings: List[ShareEncoding] = []
    for identifier, entry in document.items():
        if identifier in RESERVED_FIELDS:
            continue
        if not isinstance(entry, Mapping) or "base" not in entry or "value" not in entry:
            raise InvalidConfiguration(
                f"Share {identifier!r} must be an object with 'base' and 'value'."
            )
        encodings.append(
            ShareEncoding(
                identifier=str(identifier),
                base=_as_int(entry["base"], f"{identifier}.base"),
                value=str(entry["value"]),
            )
        )
    return SolverConfig(k=k, n=n, provided_shares=provided), encodings


def load_request_file(path: Path | str) -> Tuple[SolverConfig, List[ShareEncoding]]:
    """Read a JSON share document from disk."""
    path = Path(path)
    try:
        document = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise InvalidConfiguration(f"{path} is not valid JSON: {exc}") from exc
    if not isinstance(document, Mapping):
        raise InvalidConfiguration(f"{path} must contain a JSON object.")
    return load_request(document)


__all__ = [
    "SolverConfig",
    "ShareEncoding",
    "load_request",
    "load_request_file",
]
