"""Deepseek client package."""

from .client import DeepseekClient

__all__ = ["DeepseekClient"]
