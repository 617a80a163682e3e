from urllib.parse import parse_qs, urlparse

from django import template

register = template.Library()


def youtube_video_id(value: str) -> str:
    """
    Pull the video id out of the YouTube URL shapes editors paste:
    watch?v=ID, youtu.be/ID, /embed/ID and /shorts/ID. Empty string otherwise.
    """
    if not value:
        return ""
    try:
        u = urlparse(str(value).strip())
    except ValueError:
        return ""

    host = (u.netloc or "").lower()
    path = u.path or ""

    if host.endswith("youtu.be"):
        return path.lstrip("/").split("/")[0]
    if not (host.endswith("youtube.com") or host.endswith("youtube-nocookie.com")):
        return ""
    if path.startswith("/watch"):
        return (parse_qs(u.query or "").get("v") or [""])[0]
    parts = [p for p in path.split("/") if p]
    for marker in ("embed", "shorts"):
        if marker in parts:
            index = parts.index(marker)
            if index + 1 < len(parts):
                return parts[index + 1]
    return ""


@register.filter
def youtube_embed_url(value: str) -> str:
    """Embeddable player URL for a YouTube link; other video URLs come back unchanged."""
    video_id = youtube_video_id(value)
    if video_id:
        return f"https://www.youtube-nocookie.com/embed/{video_id}"
    return value or ""


@register.filter
def is_youtube(value: str) -> bool:
    return bool(youtube_video_id(value))
