"""Configuration settings and constants for the mediacat package."""

from typing import FrozenSet

# Video file extensions (matched case-insensitively, without the dot)
VIDEO_EXTENSIONS: FrozenSet[str] = frozenset({
    "ASX", "GXF", "M2V", "M3U", "M4V", "MPEG1", "MPEG2", "MTS", "MXF",
    "OGM", "PLS", "BUP", "B4S", "CUE", "DIVX", "DV", "FLV", "M1V", "M2TS",
    "MKV", "MOV", "MPEG4", "TS", "VLC", "VOB", "XSPF", "DAT", "IFO", "3G2",
    "MPEG", "MPG", "OGG", "3GP", "WMV", "AVI", "ASF", "MP4", "M4P",
})

# Subtitle file extensions
SUBTITLE_EXTENSIONS: FrozenSet[str] = frozenset({"SRT", "SUB", "IDX"})

# Bytes per megabyte
BYTES_PER_MB: int = 1_048_576

# Files strictly larger than this are candidate movies
MIN_VIDEO_SIZE_MB: int = 50
MIN_VIDEO_SIZE_BYTES: int = MIN_VIDEO_SIZE_MB * BYTES_PER_MB

# Log file settings
LOG_FILE: str = "mediacat.log"
LOG_ROTATION: str = "10 MB"
LOG_RETENTION: str = "7 days"
