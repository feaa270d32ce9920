"""Structured serialization of registry values.

to_dict(value) -> dict: field dict tagged with "_type".
from_dict(data) -> Result: decode and re-validate through the smart constructors.
canonical_bytes(value) -> Result[bytes, RegistryError]: deterministic JSON bytes.
content_hash(value) -> Result[str, RegistryError]: SHA-256 hex of canonical bytes.
"""

from __future__ import annotations

import dataclasses
import hashlib
import json
from collections.abc import Mapping
from typing import Any

from validbr.cnpj import Branch, Cnpj
from validbr.core.errors import InvalidFormatError, RegistryError
from validbr.core.result import Err, Ok
from validbr.cpf import Cpf
from validbr.rg import Rg

type Registry = Cpf | Cnpj | Branch | Rg

_TYPES: dict[str, type[Any]] = {t.__name__: t for t in (Cpf, Cnpj, Branch, Rg)}


def _to_serializable(obj: object) -> Any:
    """Recursively convert a registry value to a JSON-compatible Python value."""
    if isinstance(obj, bool):
        raise TypeError("bool is not a registry field")
    if isinstance(obj, int | str):
        return obj
    if isinstance(obj, tuple | list):
        return [_to_serializable(x) for x in obj]
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        field_names = sorted(f.name for f in dataclasses.fields(obj))
        result: dict[str, Any] = {"_type": type(obj).__name__}
        for name in field_names:
            result[name] = _to_serializable(getattr(obj, name))
        return result
    msg = f"Cannot serialize {type(obj).__name__}"
    raise TypeError(msg)


def to_dict(value: Registry) -> dict[str, Any]:
    """Field dict for a registry value, e.g. {"_type": "Cpf", "base": [...], "check": [...]}."""
    result = _to_serializable(value)
    assert isinstance(result, dict)
    return result


def _invalid(data: object, reason: str) -> Err[RegistryError]:
    error = InvalidFormatError.of("serialized", repr(data), "serialization.from_dict")
    return Err(error.with_context(reason))


def from_dict(data: Mapping[str, Any]) -> Ok[Registry] | Err[RegistryError]:
    """Rebuild a registry value from to_dict() output, re-validating every field."""
    if not isinstance(data, Mapping):
        return _invalid(data, "expected a mapping")
    type_name = data.get("_type")
    if not isinstance(type_name, str) or type_name not in _TYPES:
        return _invalid(data, f"unknown _type {type_name!r}")
    try:
        match type_name:
            case "Cpf":
                return Cpf.create(data["base"], data["check"])
            case "Cnpj":
                return Cnpj.create(data["base"], data["branch"], data["check"])
            case "Branch":
                return Branch.create(data["digits"])
            case _:
                return Rg.create(data["code"], data["issuer"])
    except KeyError as e:
        return _invalid(data, f"missing field {e.args[0]!r}")


def canonical_bytes(value: Registry) -> Ok[bytes] | Err[RegistryError]:
    """Sorted-key compact JSON bytes. Err on values that are not registry types."""
    if not isinstance(value, tuple(_TYPES.values())):
        return _invalid(value, f"unsupported type {type(value).__name__}")
    try:
        serializable = _to_serializable(value)
    except TypeError as e:
        return _invalid(value, f"unsupported type in canonical serialization: {e}")
    return Ok(
        json.dumps(serializable, sort_keys=True, separators=(",", ":")).encode("utf-8")
    )


def content_hash(value: Registry) -> Ok[str] | Err[RegistryError]:
    """SHA-256 hex digest of canonical_bytes(value)."""
    match canonical_bytes(value):
        case Err() as e:
            return e
        case Ok(b):
            return Ok(hashlib.sha256(b).hexdigest())


def loads(raw: str | bytes) -> Ok[Registry] | Err[RegistryError]:
    """Decode canonical JSON back into a validated registry value."""
    try:
        data = json.loads(raw)
    except ValueError as e:  # JSONDecodeError, UnicodeDecodeError
        return _invalid(raw, f"malformed JSON: {e}")
    return from_dict(data)
