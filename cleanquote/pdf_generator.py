"""
PDF Report Generator for Cleaning Quotes
Renders the quote breakdown as a single-page downloadable estimate
"""

import logging
import os
from datetime import datetime
from io import BytesIO
from typing import List, Optional

from reportlab.lib import colors
from reportlab.lib.enums import TA_LEFT
from reportlab.lib.pagesizes import letter
from reportlab.lib.styles import getSampleStyleSheet, ParagraphStyle
from reportlab.lib.units import inch
from reportlab.platypus import SimpleDocTemplate, Table, TableStyle, Paragraph, Spacer

from cleanquote.config import get_settings
from cleanquote.models.quote import QuoteInput, QuoteResult
from cleanquote.utils import (
    format_currency, format_percent, get_bathroom_display_name,
    get_building_age_display_name, get_flooring_display_name,
    get_service_frequency_display_name
)

logger = logging.getLogger(__name__)


CLOSING_NOTE = (
    "Thank you for considering our cleaning services. This quote is an estimate based on "
    "the details provided and may be adjusted after an on-site walkthrough."
)


class QuotePDFGenerator:
    """Generates PDF estimates for cleaning quotes"""

    PRIMARY_TEAL = colors.HexColor('#1F6F78')
    LIGHT_TEAL = colors.HexColor('#E6F2F3')
    BLACK = colors.black

    def __init__(self, quote_input: QuoteInput, result: QuoteResult,
                 company_name: Optional[str] = None,
                 generated_at: Optional[datetime] = None):
        self.quote_input = quote_input
        self.result = result
        self.company_name = company_name or get_settings().company_name
        self.generated_at = generated_at or datetime.now()

    def generate(self, output_path: str) -> str:
        """
        Generate PDF file
        """
        dir_path = os.path.dirname(output_path)
        if dir_path:
            os.makedirs(dir_path, exist_ok=True)

        self._build_document(output_path)
        logger.info("Wrote quote PDF to %s", output_path)
        return output_path

    def generate_bytes(self) -> bytes:
        """
        Render the PDF in memory, for HTTP downloads
        """
        buffer = BytesIO()
        self._build_document(buffer)
        return buffer.getvalue()

    def _build_document(self, target):
        doc = SimpleDocTemplate(
            target,
            pagesize=letter,
            rightMargin=0.6*inch,
            leftMargin=0.6*inch,
            topMargin=0.5*inch,
            bottomMargin=0.5*inch,
            title="Cleaning Quote",
            author=self.company_name
        )

        story = []
        story.extend(self._build_header())
        story.extend(self._build_space_details())
        story.extend(self._build_breakdown())
        story.extend(self._build_totals())
        story.extend(self._build_closing_note())

        doc.build(story)

    # Table rows, kept as plain text so the layout order can be checked directly

    def space_detail_rows(self) -> List[List[str]]:
        quote_input = self.quote_input
        bathrooms = (
            f"{quote_input.bathroom_count} "
            f"({get_bathroom_display_name(quote_input.bathroom_type)})"
        )
        return [
            ['Square Footage', f"{quote_input.square_footage:,.0f} sqft"],
            ['Flooring Type', get_flooring_display_name(quote_input.flooring_type)],
            ['Bathrooms', bathrooms],
            ['Building Age', get_building_age_display_name(quote_input.building_age)],
            ['Service Frequency', get_service_frequency_display_name(quote_input.service_frequency)],
        ]

    def breakdown_rows(self) -> List[List[str]]:
        return [
            [item.label, format_currency(item.amount)]
            for item in self.result.nonzero_line_items()
        ]

    def totals_rows(self) -> List[List[str]]:
        result = self.result
        rows = [['Subtotal', format_currency(result.subtotal)]]

        if result.service_frequency_discount != 0:
            rows.append([
                f"Service Frequency Discount ({format_percent(result.service_frequency_discount_rate)})",
                format_currency(-result.service_frequency_discount)
            ])
        if result.area_discount != 0:
            rows.append([
                f"Area Discount ({format_percent(result.area_discount_rate)})",
                format_currency(-result.area_discount)
            ])

        rows.append(['Total After Discounts', format_currency(result.total_after_discounts)])
        rows.append([f"Margin ({result.margin_percent:g}%)", format_currency(result.margin)])
        rows.append(['Final Quote', format_currency(result.final_quote)])
        return rows

    def _section_title(self, text: str) -> Paragraph:
        styles = getSampleStyleSheet()
        title_style = ParagraphStyle(
            'SectionTitle',
            parent=styles['Normal'],
            fontSize=11,
            textColor=self.BLACK,
            spaceAfter=5,
            alignment=TA_LEFT,
            fontName='Helvetica-Bold'
        )
        return Paragraph(f"<b>{text}</b>", title_style)

    def _build_header(self):
        """Build header with company name, title and generation date"""
        elements = []

        header_table = Table(
            [[self.company_name, 'Cleaning Quote']],
            colWidths=[4.3*inch, 3*inch]
        )
        header_table.setStyle(TableStyle([
            ('BACKGROUND', (0, 0), (-1, -1), self.PRIMARY_TEAL),
            ('TEXTCOLOR', (0, 0), (-1, -1), colors.white),
            ('FONTNAME', (0, 0), (-1, -1), 'Helvetica-Bold'),
            ('FONTSIZE', (0, 0), (0, 0), 15),
            ('FONTSIZE', (1, 0), (1, 0), 18),
            ('ALIGN', (0, 0), (0, 0), 'LEFT'),
            ('ALIGN', (1, 0), (1, 0), 'RIGHT'),
            ('VALIGN', (0, 0), (-1, -1), 'MIDDLE'),
            ('TOPPADDING', (0, 0), (-1, -1), 12),
            ('BOTTOMPADDING', (0, 0), (-1, -1), 12),
            ('LEFTPADDING', (0, 0), (-1, -1), 12),
            ('RIGHTPADDING', (0, 0), (-1, -1), 12),
        ]))
        elements.append(header_table)

        metadata_text = f"Generated: {self.generated_at.strftime('%B %d, %Y')}"
        if self.quote_input.quoter_name:
            metadata_text += f" | Prepared by: {self.quote_input.quoter_name}"

        metadata_table = Table([[metadata_text]], colWidths=[7.3*inch])
        metadata_table.setStyle(TableStyle([
            ('BACKGROUND', (0, 0), (-1, -1), self.LIGHT_TEAL),
            ('FONTNAME', (0, 0), (-1, -1), 'Helvetica'),
            ('FONTSIZE', (0, 0), (-1, -1), 9),
            ('TOPPADDING', (0, 0), (-1, -1), 6),
            ('BOTTOMPADDING', (0, 0), (-1, -1), 6),
            ('LEFTPADDING', (0, 0), (-1, -1), 12),
        ]))
        elements.append(metadata_table)
        elements.append(Spacer(1, 0.2*inch))

        return elements

    def _build_space_details(self):
        elements = [self._section_title("Space Details")]

        details_table = Table(self.space_detail_rows(), colWidths=[2.0*inch, 5.3*inch])
        details_table.setStyle(TableStyle([
            ('BACKGROUND', (0, 0), (0, -1), self.LIGHT_TEAL),
            ('FONTNAME', (0, 0), (0, -1), 'Helvetica-Bold'),
            ('FONTNAME', (1, 0), (1, -1), 'Helvetica'),
            ('FONTSIZE', (0, 0), (-1, -1), 9),
            ('VALIGN', (0, 0), (-1, -1), 'MIDDLE'),
            ('TOPPADDING', (0, 0), (-1, -1), 5),
            ('BOTTOMPADDING', (0, 0), (-1, -1), 5),
            ('GRID', (0, 0), (-1, -1), 0.5, colors.grey),
        ]))
        elements.append(details_table)
        elements.append(Spacer(1, 0.2*inch))

        return elements

    def _build_breakdown(self):
        """Build the line-item table; zero-amount items are left out"""
        elements = [self._section_title("Cost Breakdown")]

        table_data = [['Item', 'Amount']] + self.breakdown_rows()
        if len(table_data) == 1:
            table_data.append(['No billable items', format_currency(0)])

        breakdown_table = Table(table_data, colWidths=[5.3*inch, 2.0*inch])
        breakdown_table.setStyle(TableStyle([
            ('BACKGROUND', (0, 0), (-1, 0), self.PRIMARY_TEAL),
            ('TEXTCOLOR', (0, 0), (-1, 0), colors.white),
            ('FONTNAME', (0, 0), (-1, 0), 'Helvetica-Bold'),
            ('FONTNAME', (0, 1), (-1, -1), 'Helvetica'),
            ('FONTSIZE', (0, 0), (-1, -1), 9),
            ('ALIGN', (1, 0), (1, -1), 'RIGHT'),
            ('TOPPADDING', (0, 0), (-1, -1), 4),
            ('BOTTOMPADDING', (0, 0), (-1, -1), 4),
            ('GRID', (0, 0), (-1, -1), 0.5, colors.grey),
        ]))
        elements.append(breakdown_table)
        elements.append(Spacer(1, 0.15*inch))

        return elements

    def _build_totals(self):
        """Subtotal, discounts, margin and final quote; final row highlighted"""
        elements = []

        totals_table = Table(self.totals_rows(), colWidths=[5.3*inch, 2.0*inch])
        totals_table.setStyle(TableStyle([
            ('FONTNAME', (0, 0), (-1, -2), 'Helvetica'),
            ('FONTSIZE', (0, 0), (-1, -2), 9),
            ('ALIGN', (1, 0), (1, -1), 'RIGHT'),
            ('LINEABOVE', (0, 0), (-1, 0), 0.5, colors.grey),
            ('BACKGROUND', (0, -1), (-1, -1), self.PRIMARY_TEAL),
            ('TEXTCOLOR', (0, -1), (-1, -1), colors.white),
            ('FONTNAME', (0, -1), (-1, -1), 'Helvetica-Bold'),
            ('FONTSIZE', (0, -1), (-1, -1), 11),
            ('TOPPADDING', (0, 0), (-1, -1), 4),
            ('BOTTOMPADDING', (0, 0), (-1, -1), 4),
        ]))
        elements.append(totals_table)
        elements.append(Spacer(1, 0.25*inch))

        return elements

    def _build_closing_note(self):
        styles = getSampleStyleSheet()
        note_style = ParagraphStyle(
            'ClosingNote',
            parent=styles['Normal'],
            fontSize=8,
            textColor=self.BLACK,
            alignment=TA_LEFT,
            leading=10
        )
        return [Paragraph(f"<i>{CLOSING_NOTE}</i>", note_style)]


def generate_pdf_for_quote(quote_input: QuoteInput, result: QuoteResult,
                           output_dir: Optional[str] = None,
                           **kwargs) -> str:
    """
    Convenience function to generate a PDF file for a quote
    """
    generator = QuotePDFGenerator(quote_input, result, **kwargs)

    output_dir = output_dir or get_settings().pdf_output_dir
    os.makedirs(output_dir, exist_ok=True)

    filename = f"cleaning_quote_{generator.generated_at.strftime('%Y%m%d_%H%M%S')}.pdf"
    output_path = os.path.join(output_dir, filename)

    return generator.generate(output_path)
