"""Exceptions raised by the strict (validating) atmosphere functions."""

from __future__ import annotations


class AtmosphereDomainError(ValueError):
    """An input lies outside the physically meaningful domain."""


__all__ = ["AtmosphereDomainError"]
