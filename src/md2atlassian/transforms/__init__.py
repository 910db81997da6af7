#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Document transforms used by the conversion pipeline."""

from md2atlassian.transforms.builtin import (
    AddHeadingIdsTransform,
    HeadingOffsetTransform,
    InsertTocMarkerTransform,
    clamp_heading_level,
)

__all__ = [
    "AddHeadingIdsTransform",
    "HeadingOffsetTransform",
    "InsertTocMarkerTransform",
    "clamp_heading_level",
]
