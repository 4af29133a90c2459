from .mpd_builder import ManifestBuilder, ManifestError, generate_manifest
from .schemas import ByteRange, ManifestOptions, StreamFormat, VideoInfo

__all__ = [
    "ManifestBuilder",
    "ManifestError",
    "generate_manifest",
    "ByteRange",
    "ManifestOptions",
    "StreamFormat",
    "VideoInfo",
]
