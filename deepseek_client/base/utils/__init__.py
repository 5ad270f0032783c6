"""Small stand-alone helpers."""

from .json_extract import extract_json, extract_json_content

__all__ = ["extract_json", "extract_json_content"]
