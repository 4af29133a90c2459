MPD_NAMESPACE = "urn:mpeg:dash:schema:mpd:2011"
MPD_PROFILE = "urn:mpeg:dash:profile:full:2011"
MPD_TYPE = "static"

AUDIO_CHANNEL_CONFIGURATION_SCHEME = "urn:mpeg:dash:23003:3:audio_channel_configuration:2011"
AUDIO_CHANNEL_CONFIGURATION_VALUE = "2"

MAX_PLAYOUT_RATE = "1"
START_WITH_SAP = "1"
SUBSEGMENT_ALIGNMENT = "true"

REDACTED_IP = "0.0.0.0"
