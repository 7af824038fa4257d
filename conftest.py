"""Shared synthetic page builders for the test modules."""

import fitz
import pytest

from chapter_locator import DetectorConfig, Fragment, PageContent
from chapter_locator.processors import LayoutAnalyzer, LineReconstructor

TITLES = [
    'Educational Psychology: A Foundation for Teaching',
    'Cognitive Development',
    'Social, Moral, and Emotional Development',
    'Student Diversity',
    'Behavioral and Social Theories of Learning',
    'Cognitive Theories of Learning',
    'The Direct Instruction Lesson',
    'Student-Centered and Constructivist Approaches to Instruction',
    'Grouping, Differentiation, and Technology',
    'Motivating Students to Learn',
    'Effective Learning Environments',
    'Learners with Exceptionalities'
]

BODY_SIZE = 11.0
LINE_STEP = 16.0
TOP_Y = 72.0
PAGE_NUMBER_Y = 780.0


def build_page(index, rows, text=None):
    """PageContent from (text, size) or (text, size, y) rows, laid out top-down."""
    fragments = []
    y = TOP_Y
    for row in rows:
        if len(row) == 3:
            row_text, size, y = row
        else:
            row_text, size = row
        fragments.append(Fragment(x=72.0, y=y, font_size=size, text=row_text))
        y += LINE_STEP
    return PageContent(index=index, fragments=fragments, text=text)


def body_rows(count, seed=0):
    return [(f"Body line {seed}-{k} about classroom practice and student work.", BODY_SIZE)
            for k in range(count)]


def page_number_row(index):
    return (str(index + 1), 10.0, PAGE_NUMBER_Y)


def chapter_rows(number, title, body_count=20):
    return [(f"Chapter {number}", 24.0), (title, 18.0)] + body_rows(body_count, seed=number)


def model_pages(pages, analyzer=None):
    """Page models for synthetic pages using default line and layout settings."""
    builder = LineReconstructor()
    analyzer = analyzer or LayoutAnalyzer()
    return analyzer.build_page_models(pages, [builder.build_lines(p.fragments) for p in pages])


@pytest.fixture
def titles():
    return list(TITLES)


@pytest.fixture
def config(titles):
    return DetectorConfig(expected_titles=titles)


def build_pdf_bytes(openings=None, total_pages=12):
    """Letter-size PDF with a chapter heading and title on each opening page index."""
    openings = {1: 1, 6: 2} if openings is None else openings
    doc = fitz.open()
    for i in range(total_pages):
        page = doc.new_page(width=612, height=792)
        y = 90
        if i in openings:
            number = openings[i]
            page.insert_text((72, y), f"Chapter {number}", fontsize=24)
            page.insert_text((72, y + 40), TITLES[number - 1], fontsize=18)
            y += 80
        for k in range(20):
            page.insert_text((72, y + 16 * k), f"Body line {i}-{k} about classroom practice.", fontsize=11)
        page.insert_text((300, 770), str(i + 1), fontsize=10)
    data = doc.tobytes()
    doc.close()
    return data
