import logging
from typing import Any, Mapping, Optional, Union

from pydantic import ValidationError

from dash_manifest.schemas import ManifestOptions, VideoInfo
from dash_manifest.utils.ip_utils import redact_ips
from dash_manifest.utils.mpd_utils import build_mpd_dict, unparse_mpd

logger = logging.getLogger(__name__)


class ManifestError(Exception):
    """Raised when a video description cannot be turned into a manifest."""

    pass


class ManifestBuilder:
    """Builds static MPEG-DASH manifests from adaptive format descriptions."""

    def __init__(self, options: Union[ManifestOptions, Mapping[str, Any], None] = None, **overrides):
        self.options = self._resolve_options(options, overrides)

    @staticmethod
    def _resolve_options(options, overrides: dict) -> ManifestOptions:
        if isinstance(options, ManifestOptions):
            if not overrides:
                return options
            options = options.model_dump()
        try:
            return ManifestOptions.model_validate({**(options or {}), **overrides})
        except (ValidationError, TypeError) as e:
            logger.error(f"Invalid manifest options: {e}")
            raise ManifestError(f"Invalid manifest options: {e}") from e

    @staticmethod
    def _resolve_video(video) -> VideoInfo:
        if isinstance(video, VideoInfo):
            return video
        try:
            return VideoInfo.model_validate(video)
        except ValidationError as e:
            logger.error(f"Invalid video description: {e}")
            raise ManifestError(f"Invalid video description: {e}") from e

    def build(self, video: Union[VideoInfo, Mapping[str, Any]]) -> str:
        """
        Generates the MPD document for a video.

        Args:
            video (VideoInfo | Mapping): The video description, either validated or in upstream form.

        Returns:
            str: The manifest, starting with the XML declaration.

        Raises:
            ManifestError: If the video description or the options are invalid.
        """
        video_info = self._resolve_video(video)
        mpd_dict = build_mpd_dict(video_info, self.options)
        adaptation_sets = mpd_dict["MPD"]["Period"]["AdaptationSet"]
        logger.debug(
            f"Built MPD with {len(adaptation_sets)} adaptation sets and "
            f"{sum(len(a['Representation']) for a in adaptation_sets)} representations "
            f"out of {len(video_info.formats)} formats"
        )

        mpd_content = unparse_mpd(mpd_dict)
        if self.options.replace_ips:
            logger.debug("Replacing IP addresses in manifest")
            mpd_content = redact_ips(mpd_content)
        return mpd_content


def generate_manifest(
    video: Union[VideoInfo, Mapping[str, Any]],
    options: Optional[Union[ManifestOptions, Mapping[str, Any]]] = None,
    **overrides,
) -> str:
    """
    Generates a static MPEG-DASH manifest for the adaptive formats of a video.

    Args:
        video (VideoInfo | Mapping): The video description.
        options (ManifestOptions | Mapping, optional): Manifest options. Defaults to the configured settings.
        **overrides: Individual option overrides, e.g. ``replace_ips=True``.

    Returns:
        str: The manifest document.
    """
    return ManifestBuilder(options, **overrides).build(video)
