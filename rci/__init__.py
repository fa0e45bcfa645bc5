"""Rust CI helpers: version/tag derivation and build tool selection."""

__version__ = "0.1.0"
