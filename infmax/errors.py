from __future__ import annotations


class InvalidArgumentError(ValueError):
    """Raised when a caller passes an argument outside the accepted domain."""


class UnsealedGraphError(RuntimeError):
    """Raised when a graph is used for diffusion before its weights are sealed."""
