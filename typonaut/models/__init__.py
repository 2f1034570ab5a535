"""Shared models for Typonaut."""

from .base import TyponautBaseModel


__all__ = ["TyponautBaseModel"]
