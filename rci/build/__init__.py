"""Rust build helpers."""

from .target import BuildTool, TargetError, TargetTriple, host_triple, select_build_tool

__all__ = [
    "BuildTool",
    "TargetError",
    "TargetTriple",
    "host_triple",
    "select_build_tool",
]
