#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Utility helpers shared by docsink sinks and parsers."""

from docsink.utils.attributes import AttributeSet, filter_attributes, merge_attributes
from docsink.utils.html_utils import encode_id, encode_url, escape_html, is_id

__all__ = [
    "AttributeSet",
    "filter_attributes",
    "merge_attributes",
    "encode_id",
    "encode_url",
    "escape_html",
    "is_id",
]
