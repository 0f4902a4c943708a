"""Shared type aliases used across routekit modules."""

from collections.abc import Callable, Mapping
from re import Pattern
from typing import Any

# Route handler — opaque callable, conventionally (request, response, next)
type Handler = Callable[..., Any]

# Any accepted path argument: string, compiled pattern, or descriptor mapping
type PathSpec = str | Pattern[str] | Mapping[str, Any]
