import re
from typing import Dict, Iterable, List, Optional, Union

import xmltodict

from dash_manifest.const import (
    AUDIO_CHANNEL_CONFIGURATION_SCHEME,
    AUDIO_CHANNEL_CONFIGURATION_VALUE,
    MAX_PLAYOUT_RATE,
    MPD_NAMESPACE,
    MPD_PROFILE,
    MPD_TYPE,
    START_WITH_SAP,
    SUBSEGMENT_ALIGNMENT,
)
from dash_manifest.schemas import ManifestOptions, StreamFormat, VideoInfo

CODECS_PATTERN = re.compile(r'"[^"]*')


def parse_mpd(mpd_content: Union[str, bytes]) -> dict:
    """Parses the MPD content into a dictionary."""
    return xmltodict.parse(mpd_content)


def unparse_mpd(mpd_dict: dict) -> str:
    """Serializes an MPD dictionary into an XML document string."""
    return xmltodict.unparse(mpd_dict, encoding="UTF-8", short_empty_elements=True)


def format_number(value: Union[int, float]) -> str:
    """
    Formats a frame rate or buffer time without a trailing ``.0``.

    Integral floats are written without a fractional part, so ``30.0`` becomes ``"30"``
    while ``1.5`` stays ``"1.5"``. Exponent-form values keep Python's notation (``"1e-07"``).
    """
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def extract_codec(mime_type: Optional[str]) -> str:
    """
    Extracts the codec string from a mime type such as ``video/mp4; codecs="avc1.4d401f"``.

    Args:
        mime_type (str, optional): The full mime type of the stream.

    Returns:
        str: The first quoted codec run, or an empty string when there is none.
    """
    if not mime_type:
        return ""
    parts = mime_type.split(" ")
    if len(parts) < 2:
        return ""
    match = CODECS_PATTERN.search(parts[1])
    if not match:
        return ""
    return match.group(0)[1:]


def classify_formats(formats: Iterable[StreamFormat]) -> Dict[str, List[StreamFormat]]:
    """
    Groups adaptive formats by mime base, in order of first appearance.

    Muxed (audio+video) formats and formats lacking an init range, an index range or a
    mime type cannot be described with a SegmentBase and are left out.
    """
    mimes: Dict[str, List[StreamFormat]] = {}
    for fmt in formats:
        if fmt.has_audio and fmt.has_video:
            continue
        if fmt.init_range is None or fmt.index_range is None or not fmt.mime_type:
            continue
        mimes.setdefault(fmt.mime_base, []).append(fmt)
    return mimes


def _representation_attributes(fmt: StreamFormat) -> dict:
    return {
        "@id": str(fmt.itag),
        "@codecs": extract_codec(fmt.mime_type),
        "@bandwidth": str(fmt.bitrate) if fmt.bitrate is not None else "0",
    }


def _segment_elements(fmt: StreamFormat) -> dict:
    return {
        "BaseURL": fmt.url,
        "SegmentBase": {
            "@indexRange": str(fmt.index_range),
            "Initialization": {"@range": str(fmt.init_range)},
        },
    }


def build_video_representation(fmt: StreamFormat) -> dict:
    """Builds the Representation element of a video-only format."""
    representation = _representation_attributes(fmt)
    if fmt.width is not None:
        representation["@width"] = str(fmt.width)
    if fmt.height is not None:
        representation["@height"] = str(fmt.height)
    if fmt.fps is not None:
        representation["@frameRate"] = format_number(fmt.fps)
    representation["@maxPlayoutRate"] = MAX_PLAYOUT_RATE
    representation.update(_segment_elements(fmt))
    return representation


def build_audio_representation(fmt: StreamFormat) -> dict:
    """Builds the Representation element of an audio-only format."""
    representation = _representation_attributes(fmt)
    representation["AudioChannelConfiguration"] = {
        "@schemeIdUri": AUDIO_CHANNEL_CONFIGURATION_SCHEME,
        "@value": AUDIO_CHANNEL_CONFIGURATION_VALUE,
    }
    representation.update(_segment_elements(fmt))
    return representation


def build_adaptation_sets(formats: Iterable[StreamFormat]) -> List[dict]:
    """
    Builds one AdaptationSet per mime base found among the usable formats.

    Args:
        formats (Iterable[StreamFormat]): The formats of the video, in upstream order.

    Returns:
        List[dict]: AdaptationSet elements with sequential ids starting at 0.
    """
    adaptation_sets = []
    for index, (mime, mime_formats) in enumerate(classify_formats(formats).items()):
        if mime.startswith("video/"):
            representations = [build_video_representation(fmt) for fmt in mime_formats]
        else:
            representations = [build_audio_representation(fmt) for fmt in mime_formats]
        adaptation_sets.append(
            {
                "@id": str(index),
                "@mimeType": mime,
                "@startWithSAP": START_WITH_SAP,
                "@subsegmentAlignment": SUBSEGMENT_ALIGNMENT,
                "Representation": representations,
            }
        )
    return adaptation_sets


def build_mpd_dict(video: VideoInfo, options: ManifestOptions) -> dict:
    """
    Builds the full MPD tree for a video as an xmltodict-compatible dictionary.

    Args:
        video (VideoInfo): The validated video description.
        options (ManifestOptions): The manifest options.

    Returns:
        dict: The MPD document, ready for ``unparse_mpd``.
    """
    return {
        "MPD": {
            "@xmlns": MPD_NAMESPACE,
            "@profiles": MPD_PROFILE,
            "@type": MPD_TYPE,
            "@minBufferTime": f"PT{format_number(options.min_buffer_time)}S",
            "@mediaPresentationDuration": f"PT{video.length_seconds}S",
            "Period": {"AdaptationSet": build_adaptation_sets(video.formats)},
        }
    }
