from __future__ import annotations

from validation.definitions import academic, fees, library, settings
from validation.validator import RequestDefinition


REGISTRY: dict[str, RequestDefinition] = {
    d.name: d for d in (*academic.DEFINITIONS, *library.DEFINITIONS, *fees.DEFINITIONS, *settings.DEFINITIONS)
}


def get_definition(name: str) -> RequestDefinition:
    try:
        return REGISTRY[name]
    except KeyError:
        raise LookupError(f"No request definition named {name!r}") from None
