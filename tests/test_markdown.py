from datetime import datetime

import pytest

from hapiq.markdown import PDFConverter, render_document, title_case


@pytest.fixture
def converter():
    return PDFConverter(False, False, True)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("This  has   multiple    spaces", "This has multiple spaces"),
        ("Text\u00a0with\u00a0non-breaking\u00a0spaces", "Text with non-breaking spaces"),
        (
            "\u201cQuoted text\u201d and \u2018single quotes\u2019",
            "\"Quoted text\" and 'single quotes'",
        ),
        ("Dash\u2013example\u2014test", "Dash-example--test"),
        ("Line one\nLine two\n\nNew paragraph", "Line one\nLine two\n\nNew paragraph"),
        ("Text\n\n\n\n\nMore text", "Text\n\nMore text"),
        ("a\x07b\tc", "ab c"),
    ],
)
def test_clean_text(converter, text, expected):
    assert converter.clean_text(text) == expected


@pytest.mark.parametrize(
    "line, expected",
    [
        ("1. Introduction", True),
        ("2.1. Methods", True),
        ("METHODS AND RESULTS", True),
        ("Data Analysis Workflow", True),
        ("This is a regular sentence with punctuation.", False),
        (
            "This is way too long to be a header and contains many words that would "
            "not typically appear in a section heading or title",
            False,
        ),
        ("No", False),
        ("The results show significant differences, with p < 0.05", False),
        ("Results and Discussion", True),
    ],
)
def test_is_header(converter, line, expected):
    assert converter.is_header(line) is expected


@pytest.mark.parametrize(
    "line, expected",
    [
        ("1. Introduction", 2),
        ("2.1. Methods", 3),
        ("2.1.1. Data Collection", 4),
        ("RESULTS", 2),
        ("Statistical Analysis", 3),
    ],
)
def test_determine_header_level(converter, line, expected):
    assert converter.determine_header_level(line) == expected


@pytest.mark.parametrize(
    "line, expected",
    [
        ("1. Introduction", "Introduction"),
        ("2.1. Methods", "Methods"),
        ("RESULTS AND DISCUSSION", "Results And Discussion"),
        ("Statistical Analysis", "Statistical Analysis"),
        ("3.2.1. Data Processing Pipeline", "Data Processing Pipeline"),
    ],
)
def test_clean_header_text(converter, line, expected):
    assert converter.clean_header_text(line) == expected


@pytest.mark.parametrize(
    "line, expected",
    [
        ("• First item", True),
        ("- Second item", True),
        ("* Third item", True),
        ("1. First numbered item", True),
        ("(1) Another numbered item", True),
        ("a) Lettered item", True),
        ("This is regular text", False),
    ],
)
def test_is_list_item(converter, line, expected):
    assert converter.is_list_item(line) is expected


@pytest.mark.parametrize(
    "line, expected",
    [
        ("• First item", "- First item"),
        ("- Second item", "- Second item"),
        ("1. First numbered item", "1. First numbered item"),
        ("(1) Another numbered item", "- Another numbered item"),
        ("a) Lettered item", "- Lettered item"),
    ],
)
def test_format_list_item(converter, line, expected):
    assert converter.format_list_item(line) == expected


def test_process_page_text_with_headers(converter):
    text = (
        "1. Introduction\n"
        "This is a paragraph of text that should be formatted properly.\n"
        "\n"
        "2. Methods\n"
        "Another paragraph here."
    )
    expected = (
        "## Introduction\n\n"
        "This is a paragraph of text that should be formatted properly.\n\n"
        "## Methods\n\n"
        "Another paragraph here.\n\n"
    )
    assert converter.process_page_text(text) == expected


def test_process_page_text_with_list_items(converter):
    text = (
        "The following items are important:\n"
        "• First item\n"
        "• Second item\n"
        "• Third item\n"
        "\n"
        "This is the conclusion."
    )
    expected = (
        "The following items are important:\n\n"
        "- First item\n"
        "- Second item\n"
        "- Third item\n\n"
        "This is the conclusion.\n\n"
    )
    assert converter.process_page_text(text) == expected


def test_process_page_text_preserve_layout():
    layout = PDFConverter(True, False, True)
    text = "Line one\nLine two\n\nLine four"
    expected = "Line one\n\nLine two\n\n\nLine four\n\n"
    assert layout.process_page_text(text) == expected


def test_process_page_text_without_header_detection():
    plain = PDFConverter(False, False, False)
    assert plain.process_page_text("1. Introduction\nBody text.") == (
        "1. Introduction\n\nBody text.\n\n"
    )


def test_process_paragraph_joins_lines(converter):
    result = converter.process_paragraph("  Alpha beta gamma\ndelta epsilon  ")
    assert result == "Alpha beta gamma delta epsilon\n\n"


def test_process_document_text(converter):
    text = "1. Introduction\nSome text here.\n\n\n\nFinal words."
    expected = (
        "## Introduction\n\n"
        "Some text here.\n\n"
        "\n\n"
        "Final words.\n\n"
    )
    assert converter.process_document_text(text) == expected


@pytest.mark.parametrize(
    "preserve_layout, include_pages, extract_headers",
    [
        (False, False, True),
        (True, False, True),
        (False, True, True),
        (True, True, True),
    ],
)
def test_converter_options(preserve_layout, include_pages, extract_headers):
    conv = PDFConverter(preserve_layout, include_pages, extract_headers)
    assert conv.preserve_layout is preserve_layout
    assert conv.include_pages is include_pages
    assert conv.extract_headers is extract_headers


@pytest.mark.parametrize(
    "text, expected",
    [
        (
            "SupplementaryinformationTheonlineversioncontainssupplementarymaterial",
            "Supplementary information The online version contains supplementary material",
        ),
        (
            "availableathttps://doi.org/10.1038/s41467-021-23778-6Correspondence",
            "available at https://doi.org/10.1038/s 41467-021-23778-6 Correspondence",
        ),
        (
            "PeerreviewinformationNatureCommunicationsthankstheanonymousreviewers",
            "Peer review information Nature Communications thanks the anonymous reviewers",
        ),
        (
            "workPeerreviewerreportsareavailableReprintsandpermission",
            "work Peer reviewer reports are available Reprints and permission",
        ),
        (
            "This text is already properly spaced.",
            "This text is already properly spaced.",
        ),
        (
            "TestCase1andTestCase2forExperiment3analysis",
            "Test Case 1 and Test Case 2 for Experiment 3 analysis",
        ),
    ],
)
def test_add_basic_spacing(converter, text, expected):
    assert converter.add_basic_spacing(text) == expected


@pytest.mark.parametrize(
    "text, expected",
    [
        ("", ""),
        ("hello WORLD  foo", "Hello World Foo"),
        ("my test paper", "My Test Paper"),
    ],
)
def test_title_case(text, expected):
    assert title_case(text) == expected


def test_render_document_with_metadata():
    result = render_document(
        "Some body text here.",
        "papers/my_test_paper.pdf",
        PDFConverter(False, False, True),
        {"title": "Sample", "author": ""},
        datetime(2024, 1, 2, 3, 4, 5),
    )
    assert result == (
        "# My Test Paper\n\n"
        "*Converted from PDF: papers/my_test_paper.pdf*\n"
        "*Conversion date: 2024-01-02 03:04:05*\n\n"
        "## Document Metadata\n\n"
        "- **Title**: Sample\n\n"
        "Some body text here.\n\n"
    )


def test_render_document_without_metadata():
    result = render_document(
        "Body.", "report.pdf", None, None, datetime(2023, 12, 31, 23, 59, 0)
    )
    assert result == (
        "# Report\n\n"
        "*Converted from PDF: report.pdf*\n"
        "*Conversion date: 2023-12-31 23:59:00*\n\n"
        "Body.\n\n"
    )


def test_render_document_rejects_empty_body():
    with pytest.raises(ValueError, match="no readable text"):
        render_document("   \n  ", "empty.pdf", None, None, None)