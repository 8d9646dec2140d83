"""
Social preview (OG) image renderer.

Draws 1200x630 PNG cards with Pillow:
- Dark background with teal / gold glows and a left accent bar
- Badge, favicon, title and subtitle
- Builder avatars and highlighted stats along the bottom
"""
import logging
from dataclasses import dataclass, field
from io import BytesIO
from pathlib import Path

import httpx
from PIL import Image, ImageDraw, ImageFont, ImageOps

logger = logging.getLogger(__name__)

# Palette
BACKGROUND = "#050505"
TEAL = (0, 212, 170)
GOLD = (245, 166, 35)
WHITE = "#ffffff"
GREY = "#a3a3a3"
MUTED = "#737373"
BORDER = "#252525"
BRAND = "#404040"

PADDING_X = 64
PADDING_Y = 56
MAX_AVATARS = 4
SUBTITLE_MAX_CHARS = 90

# Font role -> file name in the fonts directory
FONT_FILES = {
    "sans": "DMSans-Regular.ttf",
    "sans_medium": "DMSans-Medium.ttf",
    "sans_bold": "DMSans-Bold.ttf",
    "serif": "InstrumentSerif-Regular.ttf",
    "serif_italic": "InstrumentSerif-Italic.ttf",
    "mono": "SpaceMono-Regular.ttf",
    "mono_bold": "SpaceMono-Bold.ttf",
}


@dataclass
class OgStat:
    label: str
    value: str
    is_gold: bool = False


@dataclass
class OgAvatar:
    url: str | None
    name: str


@dataclass
class OgImageOptions:
    """Content of one preview card."""
    title: str
    subtitle: str | None = None
    badge: str | None = None
    stats: list[OgStat] = field(default_factory=list)
    favicon_url: str | None = None
    avatars: list[OgAvatar] = field(default_factory=list)


def title_font_size(title: str) -> int:
    """Shrink long titles so they fit the card."""
    length = len(title)
    if length > 50:
        return 52
    if length > 35:
        return 64
    if length > 25:
        return 80
    return 96


def truncate_subtitle(subtitle: str, limit: int = SUBTITLE_MAX_CHARS) -> str:
    return subtitle[:limit] + "..." if len(subtitle) > limit else subtitle


class ImageCache:
    """
    Fetched and resized remote images, keyed by (url, size).

    Unbounded: one build renders a small, fixed set of images. Failed
    fetches are not cached.
    """

    def __init__(self, timeout: float = 5.0, http_client: httpx.Client | None = None):
        self._client = http_client or httpx.Client(timeout=timeout, follow_redirects=True)
        self._images: dict[tuple[str, int], bytes] = {}

    def __len__(self) -> int:
        return len(self._images)

    def __contains__(self, key: tuple[str, int]) -> bool:
        return key in self._images

    def get(self, url: str | None, size: int) -> Image.Image | None:
        """
        Fetch an image and crop it to a size x size square.

        Returns:
            RGBA image, or None if the URL is empty or the fetch failed
        """
        if not url:
            return None

        key = (url, size)
        if key not in self._images:
            data = self._fetch(url, size)
            if data is None:
                return None
            self._images[key] = data

        return Image.open(BytesIO(self._images[key])).convert("RGBA")

    def _fetch(self, url: str, size: int) -> bytes | None:
        try:
            response = self._client.get(url)
            if response.status_code != 200:
                logger.warning(f"Failed to fetch image: {url} ({response.status_code})")
                return None
            image = Image.open(BytesIO(response.content))
            image = ImageOps.fit(image.convert("RGBA"), (size, size))
        except (httpx.HTTPError, OSError) as e:
            logger.warning(f"Failed to fetch image: {url} ({e})")
            return None

        buffer = BytesIO()
        image.save(buffer, format="PNG", optimize=True)
        return buffer.getvalue()

    def clear(self):
        self._images.clear()

    def close(self):
        self._client.close()


class OgImageRenderer:
    """
    Renders OgImageOptions into PNG bytes.
    """

    def __init__(
        self,
        fonts_dir: str | Path | None = None,
        brand_text: str = "zypherpunk.d4mr.com",
        width: int = 1200,
        height: int = 630,
        image_cache: ImageCache | None = None
    ):
        """
        Args:
            fonts_dir: Directory with the TTF files in FONT_FILES; missing
                files fall back to Pillow's built-in font
            brand_text: Domain shown in the top-right corner
            width: Card width in pixels
            height: Card height in pixels
            image_cache: Cache for favicons and avatars
        """
        self.fonts_dir = Path(fonts_dir) if fonts_dir else None
        self.brand_text = brand_text
        self.width = width
        self.height = height
        self.images = image_cache or ImageCache()
        self._fonts: dict[tuple[str, int], ImageFont.ImageFont] = {}

    @classmethod
    def from_settings(cls, settings) -> "OgImageRenderer":
        fonts_dir = settings.og.fonts_dir
        if not fonts_dir.is_absolute():
            fonts_dir = settings.project_root / fonts_dir
        return cls(
            fonts_dir=fonts_dir,
            brand_text=settings.og.brand_text,
            width=settings.og.width,
            height=settings.og.height,
            image_cache=ImageCache(timeout=settings.og.image_timeout),
        )

    def font(self, role: str, size: int):
        key = (role, size)
        if key not in self._fonts:
            path = self.fonts_dir / FONT_FILES[role] if self.fonts_dir else None
            if path and path.exists():
                self._fonts[key] = ImageFont.truetype(str(path), size)
            else:
                self._fonts[key] = ImageFont.load_default(size=size)
        return self._fonts[key]

    # --------------------------------------------------------
    # Rendering
    # --------------------------------------------------------

    def render(self, options: OgImageOptions) -> bytes:
        """Render a card and return PNG bytes."""
        canvas = Image.new("RGBA", (self.width, self.height), BACKGROUND)

        self._draw_glow(canvas, TEAL, (-100, -100), 600, 0.25)
        self._draw_glow(canvas, GOLD, (self.width - 400, self.height - 350), 500, 0.15)
        self._draw_accent_bar(canvas)

        draw = ImageDraw.Draw(canvas)
        y = PADDING_Y

        if options.badge:
            y = self._draw_badge(draw, options.badge, y)

        y = self._draw_title(canvas, draw, options, y)

        if options.subtitle:
            draw.text(
                (PADDING_X, y),
                truncate_subtitle(options.subtitle),
                font=self.font("sans", 36),
                fill=GREY,
            )

        self._draw_brand(draw)
        self._draw_avatars(canvas, draw, options.avatars)
        self._draw_stats(draw, options.stats)

        buffer = BytesIO()
        canvas.convert("RGB").save(buffer, format="PNG")
        return buffer.getvalue()

    def _draw_glow(self, canvas: Image.Image, color, origin: tuple[int, int], size: int, strength: float):
        # Radial fade from the centre to transparent at 60% of the radius
        gradient = Image.radial_gradient("L").resize((size, size))
        mask = gradient.point(lambda v: int(max(0.0, 1 - v / (255 * 0.6)) * strength * 255))
        layer = Image.new("RGBA", (size, size), color + (255,))
        canvas.paste(layer, origin, mask)

    def _draw_accent_bar(self, canvas: Image.Image):
        bar_height = self.height - 2 * PADDING_Y
        mask = Image.new("L", (4, bar_height))
        solid = int(bar_height * 0.3)
        for row in range(bar_height):
            alpha = 255 if row < solid else int(255 * (1 - (row - solid) / max(1, bar_height - solid)))
            mask.paste(alpha, (0, row, 4, row + 1))
        canvas.paste(Image.new("RGBA", (4, bar_height), TEAL + (255,)), (0, PADDING_Y), mask)

    def _draw_badge(self, draw: ImageDraw.ImageDraw, badge: str, y: int) -> int:
        draw.ellipse((PADDING_X, y + 7, PADDING_X + 10, y + 17), fill=TEAL)
        draw.text((PADDING_X + 22, y), badge.upper(), font=self.font("mono_bold", 18), fill=TEAL)
        return y + 18 + 28

    def _draw_title(self, canvas: Image.Image, draw: ImageDraw.ImageDraw, options: OgImageOptions, y: int) -> int:
        x = PADDING_X
        favicon = self.images.get(options.favicon_url, 100)
        if favicon is not None:
            mask = Image.new("L", favicon.size, 0)
            ImageDraw.Draw(mask).rounded_rectangle((0, 0, 99, 99), radius=20, fill=255)
            canvas.paste(favicon, (x, y), mask)
            draw.rounded_rectangle((x, y, x + 99, y + 99), radius=20, outline=BORDER, width=2)
            x += 100 + 24

        size = title_font_size(options.title)
        font = self.font("serif", size)
        max_width = self.width - x - PADDING_X
        lines = self._wrap(draw, options.title, font, max_width)

        line_height = int(size * 1.05)
        for i, line in enumerate(lines):
            draw.text((x, y + i * line_height), line, font=font, fill=WHITE)

        text_height = line_height * len(lines)
        block_height = max(text_height, 100 if favicon is not None else 0)
        return y + block_height + (16 if options.subtitle else 32)

    @staticmethod
    def _wrap(draw: ImageDraw.ImageDraw, text: str, font, max_width: int) -> list[str]:
        lines: list[str] = []
        current = ""
        for word in text.split():
            candidate = f"{current} {word}".strip()
            if current and draw.textlength(candidate, font=font) > max_width:
                lines.append(current)
                current = word
            else:
                current = candidate
        if current:
            lines.append(current)
        return lines or [text]

    def _draw_brand(self, draw: ImageDraw.ImageDraw):
        font = self.font("mono", 24)
        text_width = draw.textlength(self.brand_text, font=font)
        draw.text((self.width - PADDING_X - text_width, PADDING_Y), self.brand_text, font=font, fill=BRAND)

    def _draw_avatars(self, canvas: Image.Image, draw: ImageDraw.ImageDraw, avatars: list[OgAvatar]):
        size = 56
        y = self.height - PADDING_Y - size
        for i, avatar in enumerate(avatars[:MAX_AVATARS]):
            x = PADDING_X + i * (size - 16)
            image = self.images.get(avatar.url, size)
            if image is not None:
                mask = Image.new("L", (size, size), 0)
                ImageDraw.Draw(mask).ellipse((0, 0, size - 1, size - 1), fill=255)
                canvas.paste(image, (x, y), mask)
            else:
                draw.ellipse((x, y, x + size - 1, y + size - 1), fill=BORDER)
                initial = (avatar.name[:1] or "?").upper()
                font = self.font("sans_medium", 20)
                w = draw.textlength(initial, font=font)
                draw.text((x + (size - w) / 2, y + 16), initial, font=font, fill=MUTED)
            draw.ellipse((x, y, x + size - 1, y + size - 1), outline=BACKGROUND, width=3)

    def _draw_stats(self, draw: ImageDraw.ImageDraw, stats: list[OgStat]):
        value_font = self.font("mono_bold", 48)
        label_font = self.font("mono", 14)
        right = self.width - PADDING_X
        value_y = self.height - PADDING_Y - 48 - 4 - 14

        # Laid out right to left
        for stat in reversed(stats):
            label = stat.label.upper()
            value_width = draw.textlength(stat.value, font=value_font)
            label_width = draw.textlength(label, font=label_font)
            width = max(value_width, label_width)

            draw.text((right - value_width, value_y), stat.value, font=value_font,
                      fill=GOLD if stat.is_gold else WHITE)
            draw.text((right - label_width, value_y + 52), label, font=label_font, fill=MUTED)
            right -= width + 48
