#!/usr/bin/env python3
"""
Tests for page modeling: running line stripping, font statistics and page classification
"""

from chapter_locator.extractors import PageClassifier
from chapter_locator.processors import LayoutAnalyzer

from conftest import build_page, body_rows, model_pages, page_number_row


def test_percentile_uses_floor_index():
    assert LayoutAnalyzer.percentile([13, 10, 12, 11], 0.75) == 12
    assert LayoutAnalyzer.percentile([13, 10, 12, 11], 0.90) == 12
    assert LayoutAnalyzer.percentile([11], 0.90) == 11
    assert LayoutAnalyzer.percentile([], 0.75) == 10.0


def test_top_frac_spans_page_extent():
    page = build_page(0, [("Top line", 11.0), ("Middle line", 11.0), ("Bottom line", 11.0)])
    model = model_pages([page])[0]
    assert [round(line.top_frac, 2) for line in model.lines] == [1.0, 0.5, 0.0]


def test_single_line_page_is_at_top():
    model = model_pages([build_page(0, [("Only line here", 11.0)])])[0]
    assert model.lines[0].top_frac == 1.0


def test_page_number_lines_are_stripped():
    page = build_page(4, body_rows(5) + [("6", 10.0, 700.0), page_number_row(4)])
    model = model_pages([page])[0]
    texts = [line.text for line in model.lines]
    assert "5" not in texts
    assert "6" in texts
    assert model.stripped == 1


def test_running_header_needs_minimum_repeats():
    header = ("Educational Psychology", 9.0, 40.0)
    repeated = [build_page(i, [header] + body_rows(10, seed=i)) for i in range(6)]
    models = model_pages(repeated)
    assert all("Educational Psychology" not in [line.text for line in m.lines] for m in models)

    rare = [build_page(i, [header] + body_rows(10, seed=i)) for i in range(5)]
    models = model_pages(rare)
    assert all(m.lines[0].text == "Educational Psychology" for m in models)


def test_running_line_only_removed_in_its_band():
    header = ("Cognitive Development", 9.0, 40.0)
    pages = [build_page(i, [header] + body_rows(10, seed=i)) for i in range(6)]
    # same text as a mid-page title on an opening page is kept
    pages.append(build_page(6, body_rows(4, seed=6) + [("Cognitive Development", 18.0)] + body_rows(4, seed=7)))
    models = model_pages(pages)
    assert "Cognitive Development" in [line.text for line in models[6].lines]


def test_font_percentiles_exclude_stripped_lines():
    footer = ("Chapter Review", 40.0, 760.0)
    pages = [build_page(i, body_rows(3, seed=i) + [footer]) for i in range(8)]
    models = model_pages(pages)
    for model in models:
        assert model.font90 == 11.0
        assert all(line.text != "Chapter Review" for line in model.lines)
        assert not model.is_summary


def test_toc_detected_by_marker_and_contents_line():
    classifier = PageClassifier()
    assert classifier.is_toc("Table of Contents Preface xiii")
    assert classifier.is_toc("Brief Contents Preface", ["Brief Contents", "Preface"])
    assert not classifier.is_toc("The contents of working memory decay quickly.", ["The contents of working memory"])


def test_toc_detected_by_dot_leaders_and_chapter_mentions():
    classifier = PageClassifier()
    entries = " ".join(f"Chapter {n} Some Title ........ {n * 10}" for n in range(1, 6))
    assert classifier.is_toc(entries)
    assert not classifier.is_toc("Chapter 1 Title ........ 3 Chapter 2 Title ........ 9")
    assert not classifier.is_toc("See Chapter 1, Chapter 2, Chapter 3 and Chapter 4 for details.")


def test_summary_markers():
    classifier = PageClassifier()
    assert classifier.is_summary("Key Terms: schema, scaffolding")
    assert classifier.is_summary("SELF ASSESSMENT: PRACTICING FOR LICENSURE")
    assert classifier.is_summary("Chapter Review")
    assert not classifier.is_summary("Students reviewed their notes together.")
