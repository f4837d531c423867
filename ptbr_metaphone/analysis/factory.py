"""Build a PhoneticFilter from a settings mapping.

WHY: Filters are usually declared in configuration (an index mapping,
a JSON request body, a YAML file) rather than constructed in code. A
typo such as "injct" must fail loudly instead of silently falling back
to the default mode.

HOW: The settings dict is checked against FILTER_SETTINGS_SCHEMA with
jsonschema. Unknown keys are reported first with their names; then the
inject value is coerced (booleans as-is, "true"/"false" strings parsed)
and the filter is created. Missing inject falls back to
config.DEFAULT_INJECT.

RULES:
- FILTER_NAME is the registered name of this filter ("br_metaphone")
- Only one setting exists: inject (boolean or boolean string)
- Unknown keys → ValueError("Unknown parameters: ...")
- Wrong types or unparseable strings → ValueError
"""

from __future__ import annotations

from typing import Any, Mapping, Optional

import jsonschema

from ptbr_metaphone import config
from ptbr_metaphone.analysis.filter import PhoneticFilter

FILTER_NAME = "br_metaphone"

INJECT = "inject"

FILTER_SETTINGS_SCHEMA = {
    "$schema": "http://json-schema.org/draft-07/schema#",
    "title": "br_metaphone filter settings",
    "type": "object",
    "properties": {
        INJECT: {"type": ["boolean", "string"]},
    },
    "additionalProperties": False,
}


def _coerce_inject(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    try:
        return config.parse_bool(value)
    except ValueError:
        raise ValueError("Setting '{}' must be a boolean, got {!r}".format(INJECT, value))


def create_filter(settings: Optional[Mapping[str, Any]] = None) -> PhoneticFilter:
    """Validate ``settings`` and return a configured PhoneticFilter.

    Args:
        settings: Filter settings, e.g. ``{"inject": False}``. None or an
                  empty mapping gives the configured defaults.

    Raises:
        ValueError: On unknown keys or an invalid inject value.
    """
    settings = dict(settings or {})

    unknown = sorted(set(settings) - set(FILTER_SETTINGS_SCHEMA["properties"]))
    if unknown:
        raise ValueError("Unknown parameters: {}".format(", ".join(unknown)))

    try:
        jsonschema.validate(instance=settings, schema=FILTER_SETTINGS_SCHEMA)
    except jsonschema.ValidationError as exc:
        raise ValueError("Invalid {} settings: {}".format(FILTER_NAME, exc.message)) from exc

    inject = config.DEFAULT_INJECT
    if INJECT in settings:
        inject = _coerce_inject(settings[INJECT])
    return PhoneticFilter(inject=inject)
