import re

from dash_manifest.const import REDACTED_IP

IPV4_PATTERN = r"(?:(?:25[0-5]|2[0-4]\d|[01]?\d\d?)\.){3}(?:25[0-5]|2[0-4]\d|[01]?\d\d?)"
IPV6_PATTERN = r"[0-9a-f]{1,4}(?:(?::|%3A)[0-9a-f]{1,4}){7}"

# Matches the "ip=" / "ip%3D" / "ip/" marker signed into googlevideo-style URLs.
IP_MARKER_PATTERN = re.compile(rf"(ip(?:=|%3D|/))(?:{IPV4_PATTERN}|{IPV6_PATTERN})", re.IGNORECASE)


def redact_ips(text: str) -> str:
    """
    Replaces every address following an ``ip=``, ``ip%3D`` or ``ip/`` marker with ``0.0.0.0``.

    Args:
        text (str): The text to scrub, typically a serialized manifest.

    Returns:
        str: The text with the marker kept and the address replaced.
    """
    return IP_MARKER_PATTERN.sub(rf"\g<1>{REDACTED_IP}", text)
