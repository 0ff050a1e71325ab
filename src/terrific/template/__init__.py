"""Compiled template objects."""

from terrific.template.core import Template

__all__ = ["Template"]
