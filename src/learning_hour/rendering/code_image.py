"""Render code snippets to PNG for whiteboard upload."""

import io
import logging
import re
import threading
from collections import OrderedDict
from typing import Callable, Optional, Tuple

from PIL import Image, ImageDraw, ImageFont
from pygments import highlight
from pygments.formatters import ImageFormatter
from pygments.lexers import get_lexer_by_name, guess_lexer
from pygments.util import ClassNotFound

from ..exceptions import UpstreamError
from ..models import CodeImage

logger = logging.getLogger(__name__)

DEFAULT_THEME = "monokai"
LIGHT_THEME = "default"
DEFAULT_PADDING = 32
CACHE_SIZE = 128
TITLE_BAR_HEIGHT = 32

CODE_FENCE = re.compile(r"^```\w*\n([\s\S]*?)\n```$")

# (code, language, theme, dark_mode, padding, title) -> (png bytes, width, height)
Renderer = Callable[[str, Optional[str], str, bool, int, Optional[str]], Tuple[bytes, int, int]]


def render_with_pygments(
    code: str,
    language: Optional[str],
    theme: str,
    dark_mode: bool,
    padding: int,
    title: Optional[str],
) -> Tuple[bytes, int, int]:
    """Highlight code with Pygments and rasterize it with Pillow."""
    try:
        lexer = get_lexer_by_name(language) if language else guess_lexer(code)
    except ClassNotFound:
        lexer = get_lexer_by_name("text")

    formatter = ImageFormatter(
        style=theme if dark_mode else LIGHT_THEME,
        image_format="png",
        image_pad=padding,
        line_numbers=False,
        font_size=16,
    )
    png = highlight(code, lexer, formatter)

    image = Image.open(io.BytesIO(png))
    if title:
        image = _add_title_bar(image, title, dark_mode)

    buffer = io.BytesIO()
    image.save(buffer, format="PNG")
    return buffer.getvalue(), image.width, image.height


def _add_title_bar(image: Image.Image, title: str, dark_mode: bool) -> Image.Image:
    background = (30, 30, 30) if dark_mode else (240, 240, 240)
    foreground = (212, 212, 212) if dark_mode else (40, 40, 40)

    framed = Image.new("RGB", (image.width, image.height + TITLE_BAR_HEIGHT), background)
    framed.paste(image, (0, TITLE_BAR_HEIGHT))
    draw = ImageDraw.Draw(framed)
    draw.text((12, 9), title, fill=foreground, font=ImageFont.load_default())
    return framed


class CodeImageGenerator:
    """Memoizing code-to-image renderer.

    At most one render runs at a time. Callers that miss the cache wait for
    the render lock and then look in the cache again, so concurrent requests
    for the same snippet render it once.
    """

    def __init__(self, renderer: Optional[Renderer] = None, cache_size: int = CACHE_SIZE):
        self.renderer = renderer or render_with_pygments
        self.cache_size = cache_size
        self._cache: "OrderedDict[tuple, CodeImage]" = OrderedDict()
        self._cache_lock = threading.Lock()
        self._render_lock = threading.Lock()

    def generate_code_image(
        self,
        code: str,
        language: Optional[str] = None,
        theme: str = DEFAULT_THEME,
        dark_mode: bool = True,
        padding: int = DEFAULT_PADDING,
        title: Optional[str] = None,
    ) -> CodeImage:
        """Render code to a PNG, reusing a cached image when available.

        Raises:
            UpstreamError: If the renderer fails
        """
        key = (code, language, theme, dark_mode)

        cached = self._lookup(key)
        if cached is not None:
            return cached

        with self._render_lock:
            cached = self._lookup(key)
            if cached is not None:
                return cached

            try:
                data, width, height = self.renderer(code, language, theme, dark_mode, padding, title)
            except Exception as e:
                raise UpstreamError(f"Failed to generate code image: {e}", operation="render code image") from e

            image = CodeImage(data=data, width=width, height=height)
            self._store(key, image)
            logger.debug("Rendered %dx%d code image (%s)", width, height, language or "auto")
            return image

    def clean_code_snippet(self, code: str) -> str:
        """Strip a surrounding Markdown code fence, if any."""
        match = CODE_FENCE.match(code)
        return match.group(1) if match else code

    def _lookup(self, key: tuple) -> Optional[CodeImage]:
        with self._cache_lock:
            image = self._cache.get(key)
            if image is not None:
                self._cache.move_to_end(key)
            return image

    def _store(self, key: tuple, image: CodeImage) -> None:
        with self._cache_lock:
            self._cache[key] = image
            self._cache.move_to_end(key)
            while len(self._cache) > self.cache_size:
                self._cache.popitem(last=False)
