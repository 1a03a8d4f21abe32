"""Data models for ledcolor."""

from .color import Color

__all__ = ["Color"]
