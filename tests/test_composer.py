"""
Tests for core.composer
"""

from __future__ import annotations

import io

import pytest
from PIL import Image

from core.composer import SlideComposer, encode_image
from core.models import OutputDeck, PlacementBox

PNG_SIGNATURE = b"\x89PNG\r\n\x1a\n"
BOX = PlacementBox(x=2.83, y=0.0, width=4.35, height=5.625)


class TestEncodeImage:

    def test_png_roundtrip_keeps_size(self):
        data = encode_image(Image.new("RGB", (96, 124), "white"))
        assert data.startswith(PNG_SIGNATURE)
        with Image.open(io.BytesIO(data)) as decoded:
            assert decoded.size == (96, 124)


class TestSlideComposer:

    def test_slides_numbered_in_append_order(self, canvas):
        composer = SlideComposer(canvas)
        first = composer.append_slide(b"one", BOX)
        second = composer.append_slide(b"two", BOX)

        assert (first.index, second.index) == (1, 2)
        assert composer.slide_count == 2

    def test_finalize_returns_ordered_deck(self, canvas):
        composer = SlideComposer(canvas)
        for data in (b"a", b"b", b"c"):
            composer.append_slide(data, BOX)

        deck = composer.finalize()

        assert isinstance(deck, OutputDeck)
        assert len(deck) == 3
        assert [slide.image_data for slide in deck] == [b"a", b"b", b"c"]
        assert deck.canvas == canvas

    def test_finalize_only_once(self, canvas):
        composer = SlideComposer(canvas)
        composer.finalize()
        with pytest.raises(RuntimeError):
            composer.finalize()

    def test_no_append_after_finalize(self, canvas):
        composer = SlideComposer(canvas)
        composer.finalize()
        with pytest.raises(RuntimeError):
            composer.append_slide(b"late", BOX)

    def test_empty_deck(self, canvas):
        assert len(SlideComposer(canvas).finalize()) == 0

    def test_deck_is_immutable(self, canvas):
        composer = SlideComposer(canvas)
        composer.append_slide(b"a", BOX)
        deck = composer.finalize()
        with pytest.raises(AttributeError):
            deck.slides = ()  # type: ignore[misc]
