"""Version/tag derivation for CI workflows."""

from .errors import ValidationError
from .model import VersionInfo, WorkflowContext, WorkflowType
from .resolver import resolve

__all__ = [
    "ValidationError",
    "VersionInfo",
    "WorkflowContext",
    "WorkflowType",
    "resolve",
]
