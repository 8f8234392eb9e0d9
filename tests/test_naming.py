"""
Tests for core.naming
"""

from __future__ import annotations

import pytest

from core.naming import output_name_for


@pytest.mark.parametrize(
    "source,expected",
    [
        ("report.pdf", "report.pptx"),
        ("Report.PDF", "Report.pptx"),
        ("scan.Pdf", "scan.pptx"),
        ("my.pdf.pdf", "my.pdf.pptx"),
        ("notes", "notes.pptx"),
        ("archive.pdf.zip", "archive.pdf.zip.pptx"),
        ("pdf", "pdf.pptx"),
        ("quarterly review 2024.pdf", "quarterly review 2024.pptx"),
    ],
)
def test_output_name(source, expected):
    assert output_name_for(source) == expected


def test_custom_extensions():
    assert output_name_for("slides.XPS", source_ext=".xps", deck_ext=".odp") == "slides.odp"
    assert output_name_for("slides.pdf", source_ext=".xps", deck_ext=".odp") == "slides.pdf.odp"
