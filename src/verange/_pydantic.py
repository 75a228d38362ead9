# SPDX-License-Identifier: MIT
"""Read/write-as-string hooks so versions and ranges can live in pydantic models."""

from __future__ import annotations

from typing import Any, Callable

from pydantic_core import core_schema


def string_backed_schema(cls: type, parse: Callable[[str], Any]) -> core_schema.CoreSchema:
    """Build a core schema that parses ``cls`` from text and dumps it with ``str()``.

    Instances of ``cls`` pass through validation unchanged in Python mode.
    In JSON mode (and in the generated JSON schema) the value is a plain string.
    """
    from_str = core_schema.no_info_after_validator_function(parse, core_schema.str_schema())
    return core_schema.json_or_python_schema(
        json_schema=from_str,
        python_schema=core_schema.union_schema(
            [core_schema.is_instance_schema(cls), from_str]
        ),
        serialization=core_schema.to_string_ser_schema(),
    )
