"""Code image rendering."""

from .code_image import CodeImageGenerator, render_with_pygments

__all__ = ["CodeImageGenerator", "render_with_pygments"]
