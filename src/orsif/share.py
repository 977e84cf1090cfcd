"""Share links: input values carried in URL query parameters.

A query string containing ``vsl`` means "load overrides". Every
recognised input present in the query is then applied to the engine and
the result is treated as a custom configuration.
"""

import logging
from typing import Any, Dict, Mapping
from urllib.parse import urlencode

from orsif.core.inputs import InputKey, InputSet
from orsif.engine import EconomicCalculator

logger = logging.getLogger(__name__)

OVERRIDE_MARKER = InputKey.VSL.value


def inputs_to_query_params(inputs: InputSet) -> Dict[str, str]:
    """Every input as a query parameter, using the shortest exact repr."""
    return {key.value: repr(inputs[key]) for key in InputKey}


def build_share_query(inputs: InputSet) -> str:
    """Query string (without leading '?') encoding every input."""
    return urlencode(inputs_to_query_params(inputs))


def _last_value(value: Any) -> Any:
    if isinstance(value, (list, tuple)):
        return value[-1] if value else ""
    return value


def apply_query_params(engine: EconomicCalculator, params: Mapping[str, Any]) -> bool:
    """Apply URL overrides to an engine.

    Args:
        engine: Engine to update.
        params: Query parameters. List values (as produced by
            urllib.parse.parse_qs) use their last element.

    Returns:
        True if overrides were present and applied, False otherwise.
    """
    if OVERRIDE_MARKER not in params:
        return False

    applied = 0
    for key in InputKey:
        if key.value in params:
            if engine.update_input(key.value, _last_value(params[key.value])):
                applied += 1

    engine.mark_custom()
    logger.info(f"Applied {applied} input override(s) from URL")
    return True
