"""
Tests for the PDF quote generator
"""

import os
from datetime import datetime

from cleanquote.pdf_generator import QuotePDFGenerator, generate_pdf_for_quote
from cleanquote.quote_engine import compute_quote


def make_generator(quote_input, **kwargs):
    return QuotePDFGenerator(
        quote_input, compute_quote(quote_input),
        company_name="Sparkle Commercial Cleaning",
        generated_at=datetime(2026, 3, 14, 9, 30),
        **kwargs
    )


def test_space_detail_rows(busy_input):
    rows = make_generator(busy_input).space_detail_rows()

    assert rows == [
        ['Square Footage', '12,000 sqft'],
        ['Flooring Type', 'Multiple floor types'],
        ['Bathrooms', '3 (Locker-room w/ showers)'],
        ['Building Age', '15+ years'],
        ['Service Frequency', 'Weekly'],
    ]


def test_breakdown_rows_skip_zero_items(sample_input):
    rows = make_generator(sample_input).breakdown_rows()
    assert rows == [['Floor Cleaning', '$500.00'], ['Bathrooms', '$90.00']]


def test_totals_rows_show_discounts_as_negative(busy_input):
    rows = make_generator(busy_input).totals_rows()

    assert rows == [
        ['Subtotal', '$4,786.00'],
        ['Service Frequency Discount (15%)', '-$717.90'],
        ['Area Discount (15%)', '-$717.90'],
        ['Total After Discounts', '$3,350.20'],
        ['Margin (40%)', '$1,340.08'],
        ['Final Quote', '$4,690.28'],
    ]


def test_totals_rows_omit_zero_discounts(sample_input):
    labels = [row[0] for row in make_generator(sample_input).totals_rows()]

    assert labels == [
        'Subtotal', 'Area Discount (10%)', 'Total After Discounts', 'Margin (35%)', 'Final Quote'
    ]


def test_generate_bytes(busy_input):
    pdf = make_generator(busy_input).generate_bytes()

    assert pdf.startswith(b'%PDF')
    assert len(pdf) > 1000


def test_generate_with_no_billable_items(sample_input):
    import dataclasses

    empty = dataclasses.replace(sample_input, square_footage=0, bathroom_count=0)
    generator = make_generator(empty)

    assert generator.breakdown_rows() == []
    assert generator.generate_bytes().startswith(b'%PDF')


def test_generate_writes_file(tmp_path, sample_input):
    output_path = tmp_path / "out" / "quote.pdf"

    written = make_generator(sample_input).generate(str(output_path))

    assert written == str(output_path)
    assert output_path.read_bytes().startswith(b'%PDF')


def test_generate_pdf_for_quote(tmp_path, sample_input):
    path = generate_pdf_for_quote(
        sample_input, compute_quote(sample_input),
        output_dir=str(tmp_path),
        company_name="Sparkle Commercial Cleaning",
        generated_at=datetime(2026, 3, 14, 9, 30)
    )

    assert os.path.basename(path) == "cleaning_quote_20260314_093000.pdf"
    assert os.path.exists(path)
