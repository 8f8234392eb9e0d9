"""
Tests for core.pdf_renderer

pdf2image is patched so no Poppler install is needed.
"""

from __future__ import annotations

from unittest import mock

import pytest
from pdf2image.exceptions import PDFPageCountError, PDFSyntaxError
from PIL import Image

from core.errors import RenderFailure
from core.models import Page
from core.pdf_renderer import PopplerDocumentSource, parse_page_sizes

PDFINFO = {
    "Producer": "test",
    "Pages": 3,
    "Page    1 size": "612 x 792 pts (letter)",
    "Page    1 rot": "0",
    "Page    2 size": "595.276 x 841.89 pts (A4)",
    "Page    2 rot": "90",
    "Page    3 size": "0 x 792 pts",
    "Page    3 rot": "0",
}


@pytest.fixture
def pdf_file(tmp_path):
    path = tmp_path / "talk.pdf"
    path.write_bytes(b"%PDF-1.4\n")
    return path


@pytest.fixture
def pdfinfo():
    with mock.patch("core.pdf_renderer.pdfinfo_from_path", return_value=PDFINFO) as patched:
        yield patched


class TestParsePageSizes:

    def test_sizes_and_rotation(self):
        sizes = parse_page_sizes(PDFINFO)
        assert sizes[1] == (612.0, 792.0)
        assert sizes[2] == (841.89, 595.276)
        assert sizes[3] == (0.0, 792.0)

    def test_ignores_other_fields(self):
        assert parse_page_sizes({"Pages": 1, "Page size": "612 x 792 pts"}) == {}

    def test_upside_down_keeps_orientation(self):
        info = {"Page    1 size": "612 x 792 pts", "Page    1 rot": "180"}
        assert parse_page_sizes(info) == {1: (612.0, 792.0)}


class TestPopplerDocumentSource:

    def test_page_count_and_pages(self, pdf_file, pdfinfo):
        source = PopplerDocumentSource(pdf_file)

        assert source.page_count == 3
        assert source.page(1) == Page(1, 612.0, 792.0)
        assert source.page(2) == Page(2, 841.89, 595.276)

        # Metadata is read once; second call asks for the page range
        source.page(3)
        assert pdfinfo.call_count == 2
        assert pdfinfo.call_args.kwargs["first_page"] == 1
        assert pdfinfo.call_args.kwargs["last_page"] == 3

    def test_page_out_of_range(self, pdf_file, pdfinfo):
        with pytest.raises(RenderFailure):
            PopplerDocumentSource(pdf_file).page(4)

    def test_missing_file(self, tmp_path):
        with pytest.raises(RenderFailure) as exc:
            PopplerDocumentSource(tmp_path / "nope.pdf").page_count
        assert exc.value.page_index is None

    def test_unreadable_pdf(self, pdf_file):
        with mock.patch("core.pdf_renderer.pdfinfo_from_path", side_effect=PDFPageCountError("no pages")):
            with pytest.raises(RenderFailure) as exc:
                PopplerDocumentSource(pdf_file).page_count
        assert "no pages" in str(exc.value)

    def test_render_single_page_at_exact_size(self, pdf_file, pdfinfo):
        source = PopplerDocumentSource(pdf_file, poppler_path="/opt/poppler/bin")
        page = source.page(1)

        with mock.patch(
            "core.pdf_renderer.convert_from_path",
            return_value=[Image.new("RGB", (960, 1242))],
        ) as convert:
            surface = source.render(page, 960 / 612)

        assert (surface.width, surface.height) == (960, 1242)
        assert surface.image.size == (960, 1242)
        kwargs = convert.call_args.kwargs
        assert kwargs["first_page"] == kwargs["last_page"] == 1
        assert kwargs["size"] == (960, 1242)
        assert kwargs["poppler_path"] == "/opt/poppler/bin"

    def test_render_resizes_off_by_one_output(self, pdf_file, pdfinfo):
        source = PopplerDocumentSource(pdf_file)

        with mock.patch(
            "core.pdf_renderer.convert_from_path",
            return_value=[Image.new("RGB", (961, 1243))],
        ):
            surface = source.render(source.page(1), 960 / 612)

        assert surface.image.size == (960, 1242)

    def test_render_error(self, pdf_file, pdfinfo):
        source = PopplerDocumentSource(pdf_file)

        with mock.patch("core.pdf_renderer.convert_from_path", side_effect=PDFSyntaxError("broken xref")):
            with pytest.raises(RenderFailure) as exc:
                source.render(source.page(1), 1.0)

        assert exc.value.page_index == 1
        assert "broken xref" in str(exc.value)

    def test_render_no_output(self, pdf_file, pdfinfo):
        source = PopplerDocumentSource(pdf_file)

        with mock.patch("core.pdf_renderer.convert_from_path", return_value=[]):
            with pytest.raises(RenderFailure):
                source.render(source.page(1), 1.0)
