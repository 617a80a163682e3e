from __future__ import annotations

import io
import textwrap

from PIL import Image, ImageDraw, ImageFont

FORMAT_TXT = "txt"
FORMAT_MD = "md"
FORMAT_PNG = "png"

CONTENT_TYPES = {
    FORMAT_TXT: "text/plain; charset=utf-8",
    FORMAT_MD: "text/markdown; charset=utf-8",
    FORMAT_PNG: "image/png",
}

PAGE_WIDTH = 1000
MARGIN = 48
LINE_HEIGHT = 18
WRAP_COLUMNS = 130
BACKGROUND = (255, 255, 255)
INK = (31, 41, 55)
RULE = (220, 224, 229)


def export_filename(fmt: str, stem: str = "career-plan") -> str:
    return f"{stem}.{fmt}"


def _wrapped_lines(text: str):
    for paragraph in (text or "").splitlines() or [""]:
        if not paragraph.strip():
            yield ""
            continue
        yield from textwrap.wrap(paragraph, width=WRAP_COLUMNS) or [""]


def render_png(text: str, title: str = "Career Plan") -> bytes:
    """Draw the plan onto a single tall white page."""
    lines = list(_wrapped_lines(text))
    height = MARGIN * 2 + LINE_HEIGHT * (len(lines) + 3)

    img = Image.new("RGB", (PAGE_WIDTH, height), color=BACKGROUND)
    draw = ImageDraw.Draw(img)
    font = ImageFont.load_default()

    draw.text((MARGIN, MARGIN), title, fill=INK, font=font)
    y = MARGIN + LINE_HEIGHT * 2
    draw.line([(MARGIN, y - LINE_HEIGHT // 2), (PAGE_WIDTH - MARGIN, y - LINE_HEIGHT // 2)], fill=RULE, width=1)
    for line in lines:
        draw.text((MARGIN, y), line, fill=INK, font=font)
        y += LINE_HEIGHT

    buf = io.BytesIO()
    img.save(buf, format="PNG")
    return buf.getvalue()


def render(fmt: str, text: str) -> bytes:
    """Bytes for a download in ``fmt``. Text formats are the content as given."""
    if fmt == FORMAT_PNG:
        return render_png(text)
    if fmt in (FORMAT_TXT, FORMAT_MD):
        return (text or "").encode("utf-8")
    raise ValueError(f"Unsupported export format: {fmt}")
