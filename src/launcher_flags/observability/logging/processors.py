"""Observability – structlog processors and get_logger helper."""
from __future__ import annotations

from typing import Any

import structlog


def add_flag_fields(
    logger: Any,           # noqa: ARG001
    method_name: str,      # noqa: ARG001
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    """structlog processor that flattens a bound ``flag`` object.

    Call sites may pass ``flag=<BooleanFlag|IntFlag>``; the processor
    replaces it with ``flag`` (the name) and ``tracking_id`` so the JSON
    renderer never sees a dataclass.
    """
    flag = event_dict.get("flag")
    name = getattr(flag, "name", None)
    if name is not None:
        event_dict["flag"] = name
        event_dict.setdefault("tracking_id", getattr(flag, "tracking_id", None))
    return event_dict


def get_logger(name: str | None = None, **initial_values: Any) -> Any:
    """Return a bound structlog logger.

    Parameters
    ----------
    name:
        Logger name (typically ``__name__`` of the calling module).
    **initial_values:
        Key-value pairs to bind on the returned logger.
    """
    logger = structlog.get_logger(name)
    if initial_values:
        logger = logger.bind(**initial_values)
    return logger


__all__ = ["add_flag_fields", "get_logger"]
