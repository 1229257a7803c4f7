"""Tests for code image rendering and caching."""

import threading
import pytest

from pygments.formatters.img import FontNotFound

from learning_hour.exceptions import UpstreamError
from learning_hour.rendering.code_image import CodeImageGenerator, render_with_pygments


class CountingRenderer:
    def __init__(self):
        self.calls = []

    def __call__(self, code, language, theme, dark_mode, padding, title):
        self.calls.append((code, language, theme, dark_mode, padding, title))
        return f"png:{code}".encode(), 100 + len(code), 50


@pytest.fixture
def renderer():
    return CountingRenderer()


def test_identical_requests_render_once(renderer):
    generator = CodeImageGenerator(renderer=renderer)

    first = generator.generate_code_image("x = 1", language="python")
    second = generator.generate_code_image("x = 1", language="python")

    assert first == second
    assert len(renderer.calls) == 1
    assert first.data == b"png:x = 1"
    assert first.width == 105
    assert first.mime_type == "image/png"


def test_cache_key_includes_theme_and_mode(renderer):
    generator = CodeImageGenerator(renderer=renderer)

    generator.generate_code_image("x = 1", language="python")
    generator.generate_code_image("x = 1", language="python", theme="dracula")
    generator.generate_code_image("x = 1", language="python", dark_mode=False)
    generator.generate_code_image("x = 1", language="java")

    assert len(renderer.calls) == 4


def test_least_recently_used_entry_evicted(renderer):
    generator = CodeImageGenerator(renderer=renderer, cache_size=2)

    generator.generate_code_image("a")
    generator.generate_code_image("b")
    generator.generate_code_image("a")  # refresh a
    generator.generate_code_image("c")  # evicts b
    generator.generate_code_image("a")
    generator.generate_code_image("b")

    assert [call[0] for call in renderer.calls] == ["a", "b", "c", "b"]


def test_concurrent_requests_render_once(renderer):
    generator = CodeImageGenerator(renderer=renderer)
    results = []

    def worker():
        results.append(generator.generate_code_image("shared", language="python"))

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert len(results) == 8
    assert len(renderer.calls) == 1


def test_renderer_failure_wrapped():
    def broken(*args):
        raise OSError("cannot open font")

    generator = CodeImageGenerator(renderer=broken)

    with pytest.raises(UpstreamError, match="Failed to generate code image: cannot open font"):
        generator.generate_code_image("x = 1")


def test_data_url(renderer):
    image = CodeImageGenerator(renderer=renderer).generate_code_image("hi")
    assert image.data_url.startswith("data:image/png;base64,")


class TestCleanCodeSnippet:
    def test_strips_fence_with_language(self):
        generator = CodeImageGenerator(renderer=CountingRenderer())
        assert generator.clean_code_snippet("```java\nint x = 1;\nint y = 2;\n```") == "int x = 1;\nint y = 2;"

    def test_strips_bare_fence(self):
        generator = CodeImageGenerator(renderer=CountingRenderer())
        assert generator.clean_code_snippet("```\nx\n```") == "x"

    def test_unfenced_code_unchanged(self):
        generator = CodeImageGenerator(renderer=CountingRenderer())
        assert generator.clean_code_snippet("x = 1") == "x = 1"


def test_render_with_pygments_produces_png():
    try:
        data, width, height = render_with_pygments("x = 1\n", "python", "monokai", True, 8, "Example")
    except FontNotFound:
        pytest.skip("no monospace font installed")

    assert data.startswith(b"\x89PNG")
    assert width > 0
    assert height > 32


def test_render_with_unknown_language_falls_back_to_text():
    try:
        data, _, _ = render_with_pygments("plain words", "no-such-lexer", "monokai", False, 8, None)
    except FontNotFound:
        pytest.skip("no monospace font installed")

    assert data.startswith(b"\x89PNG")
