from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator

from dash_manifest.configs import settings


class GenericModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class ByteRange(GenericModel):
    model_config = ConfigDict(frozen=True)

    start: int = Field(..., ge=0, description="First byte offset of the range.")
    end: int = Field(..., ge=0, description="Last byte offset of the range (inclusive).")

    def __str__(self) -> str:
        return f"{self.start}-{self.end}"


class StreamFormat(GenericModel):
    """A single adaptive stream as described by the upstream metadata service."""

    model_config = ConfigDict(frozen=True)

    itag: int = Field(..., description="Stable numeric identifier of the stream.")
    mime_type: Optional[str] = Field(
        None, alias="mimeType", description='Mime type with codecs parameter, e.g. video/mp4; codecs="avc1.4d401f".'
    )
    has_audio: bool = Field(False, alias="hasAudio", description="Whether the stream carries an audio track.")
    has_video: bool = Field(False, alias="hasVideo", description="Whether the stream carries a video track.")
    bitrate: Optional[int] = Field(None, description="Bitrate in bits per second.")
    width: Optional[int] = Field(None, description="Frame width in pixels (video only).")
    height: Optional[int] = Field(None, description="Frame height in pixels (video only).")
    fps: Optional[float] = Field(None, description="Frame rate (video only).")
    init_range: Optional[ByteRange] = Field(None, alias="initRange", description="Byte range of the init segment.")
    index_range: Optional[ByteRange] = Field(None, alias="indexRange", description="Byte range of the segment index.")
    url: str = Field("", description="Playback URL of the media resource.")

    @property
    def mime_base(self) -> Optional[str]:
        if not self.mime_type:
            return None
        return self.mime_type.split(";")[0]


class VideoInfo(GenericModel):
    length_seconds: int = Field(..., ge=0, alias="lengthSeconds", description="Duration of the video in seconds.")
    formats: List[StreamFormat] = Field(..., description="Available streams, in upstream order.")

    @field_validator("formats", mode="before")
    @classmethod
    def drop_malformed_formats(cls, value: Any) -> Any:
        """Validate each format on its own, leaving out the ones that cannot be read."""
        if not isinstance(value, (list, tuple)):
            return value
        formats = []
        for entry in value:
            if isinstance(entry, StreamFormat):
                formats.append(entry)
                continue
            try:
                formats.append(StreamFormat.model_validate(entry))
            except ValidationError:
                continue
        return formats

    @model_validator(mode="before")
    @classmethod
    def flatten_video_details(cls, data: Any) -> Any:
        """Accept the upstream shape where the duration lives under ``videoDetails``."""
        if not isinstance(data, dict) or "lengthSeconds" in data or "length_seconds" in data:
            return data
        details = data.get("videoDetails")
        if isinstance(details, dict) and "lengthSeconds" in details:
            return {**data, "lengthSeconds": details["lengthSeconds"]}
        return data


class ManifestOptions(GenericModel):
    min_buffer_time: float = Field(
        default_factory=lambda: settings.mpd_min_buffer_time,
        ge=0,
        alias="minBufferTime",
        description="Minimum buffer time in seconds advertised to players.",
    )
    replace_ips: bool = Field(
        default_factory=lambda: settings.mpd_replace_ips,
        alias="replaceIPs",
        description="Whether to replace ip=/ip/ addresses embedded in BaseURLs with 0.0.0.0.",
    )
