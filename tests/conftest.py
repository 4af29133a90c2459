"""
Shared fixtures for manifest generation tests.

Formats are written in the upstream metadata shape (camelCase keys, byte offsets
as strings) so the tests exercise the same validation path as real payloads.
"""

import pytest


def make_format(itag: int, mime_type: str | None = 'video/mp4; codecs="avc1.4d401f"', **overrides) -> dict:
    """Build a usable adaptive format, overriding any key through ``overrides``."""
    fmt = {
        "itag": itag,
        "mimeType": mime_type,
        "hasAudio": mime_type is not None and mime_type.startswith("audio/"),
        "hasVideo": mime_type is not None and mime_type.startswith("video/"),
        "bitrate": 1000000,
        "initRange": {"start": "0", "end": "740"},
        "indexRange": {"start": "741", "end": "1884"},
        "url": f"https://rr1---sn-example.googlevideo.com/videoplayback?itag={itag}&ip=203.0.113.7&mime=x",
    }
    if fmt["hasVideo"]:
        fmt.update({"width": 1280, "height": 720, "fps": 30})
    fmt.update(overrides)
    return fmt


@pytest.fixture
def format_factory():
    """Factory fixture returning ``make_format``."""
    return make_format


@pytest.fixture
def video_info():
    """Upstream-shaped video description with a mix of usable and unusable formats."""
    return {
        "videoDetails": {"videoId": "dQw4w9WgXcQ", "lengthSeconds": "212"},
        "formats": [
            make_format(18, 'video/mp4; codecs="avc1.42001E, mp4a.40.2"', hasAudio=True, bitrate=503000),
            make_format(137, 'video/mp4; codecs="avc1.640028"', width=1920, height=1080, bitrate=4400000),
            make_format(248, 'video/webm; codecs="vp9"', width=1920, height=1080, bitrate=2600000),
            make_format(140, 'audio/mp4; codecs="mp4a.40.2"', bitrate=130000),
            make_format(136, 'video/mp4; codecs="avc1.4d401f"', bitrate=1100000),
            make_format(251, 'audio/webm; codecs="opus"', bitrate=140000),
            make_format(399, 'video/mp4; codecs="av01.0.08M.08"', indexRange=None),
        ],
    }
