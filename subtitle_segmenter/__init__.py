"""Break subtitle lines into at most two display lines without cutting words."""

from subtitle_segmenter.config import SegmenterSettings, load_settings
from subtitle_segmenter.core import SegmentationTrace, Tier, explain, segment

__all__ = [
    "SegmentationTrace",
    "SegmenterSettings",
    "Tier",
    "explain",
    "load_settings",
    "segment",
]
