"""Query parameter encoding shared by every endpoint descriptor.

Each endpoint has a ``Params`` dataclass. A field is left out of the query
string while it holds its "absent" value:

- ``None`` for optional booleans, integers, durations, timestamps and
  opaque scalars
- ``""`` for strings and ``[]`` for lists
- ``False`` for flags, i.e. boolean fields whose default is ``False``

Everything else is rendered as a string, see ``encode_value``.
"""

from __future__ import annotations

import dataclasses
from collections.abc import Sequence
from datetime import UTC, datetime, timedelta
from typing import Any

_MILLISECOND = timedelta(milliseconds=1)


def query_key(name: str, **kwargs: Any) -> Any:
    """Dataclass field whose query key differs from its attribute name."""
    return dataclasses.field(metadata={"param": name}, **kwargs)


def format_duration(value: timedelta) -> str:
    """Render a duration the way the server accepts it.

    Whole milliseconds (truncated) from 1ms up, nanoseconds below that.
    """
    if value < _MILLISECOND:
        micros = (value.days * 86_400 + value.seconds) * 1_000_000 + value.microseconds
        return f"{micros * 1000}nanos"
    return f"{value // _MILLISECOND}ms"


def format_timestamp(value: datetime) -> str:
    """ISO-8601 in UTC; naive datetimes are taken as UTC already."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=UTC)
    else:
        value = value.astimezone(UTC)
    text = value.strftime("%Y-%m-%dT%H:%M:%S")
    if value.microsecond:
        text += f".{value.microsecond:06d}"
    return text + "Z"


def encode_value(value: Any, *, flag: bool = False) -> str | None:
    """Encode one field value, or return None when it must be omitted."""
    if value is None:
        return None
    if isinstance(value, bool):
        if flag and not value:
            return None
        return "true" if value else "false"
    if isinstance(value, timedelta):
        return format_duration(value) if value else None
    if isinstance(value, datetime):
        return format_timestamp(value)
    if isinstance(value, str):
        return value or None
    if isinstance(value, Sequence):
        return ",".join(str(item) for item in value) or None
    return str(value)


def encode_params(params: Any) -> dict[str, str]:
    """Flatten a ``Params`` dataclass into a query-string mapping."""
    encoded: dict[str, str] = {}
    for f in dataclasses.fields(params):
        value = encode_value(getattr(params, f.name), flag=f.default is False)
        if value is not None:
            encoded[f.metadata.get("param", f.name)] = value
    return encoded


@dataclasses.dataclass(kw_only=True)
class Params:
    """Debug parameters accepted by every endpoint."""

    pretty: bool = False
    human: bool = False
    error_trace: bool = False
    filter_path: list[str] = dataclasses.field(default_factory=list)

    def get(self) -> dict[str, str]:
        return encode_params(self)
