"""ReportLab PDF Generation Service Implementation

Implements tax invoice rendering using ReportLab library.
"""

from io import BytesIO
from xml.sax.saxutils import escape
from typing import List, Optional
from decimal import Decimal

from reportlab.lib import colors
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import getSampleStyleSheet, ParagraphStyle
from reportlab.lib.units import mm
from reportlab.platypus import (
    SimpleDocTemplate,
    Table,
    TableStyle,
    Paragraph,
    Spacer,
)

from src.app.services.pdf_service import CompanyDetails, PdfService
from src.domain.customer import Customer
from src.domain.invoice import Invoice, InvoiceStatus
from src.domain.invoice_line import InvoiceLine

CURRENCY_LABEL = "Rs."


def format_money(amount: Decimal) -> str:
    return f"{CURRENCY_LABEL} {Decimal(amount):,.2f}"


def format_percent(value: Decimal) -> str:
    return f"{Decimal(value):.2f}".rstrip("0").rstrip(".") + "%"


def format_address(address: dict) -> List[str]:
    street = ", ".join(part for part in (address.get("street1"), address.get("street2")) if part)
    locality = ", ".join(
        part for part in (address.get("city"), address.get("state"), address.get("pin_code")) if part
    )
    return [line for line in (street, locality, address.get("country")) if line]


class ReportLabPdfService(PdfService):
    """
    ReportLab implementation of PdfService

    Lays out seller details, bill-to block, the GST line table and the
    totals block. Amounts are printed exactly as persisted on the invoice.
    """

    def render_invoice(
        self,
        invoice: Invoice,
        invoice_lines: List[InvoiceLine],
        customer: Optional[Customer],
        company: CompanyDetails,
    ) -> bytes:
        """
        Generate a tax invoice PDF

        Args:
            invoice: Invoice with its persisted totals
            invoice_lines: Line items in display order
            customer: Billed customer, None if it was deleted
            company: Seller details

        Returns:
            PDF document as bytes
        """
        buffer = BytesIO()
        doc = SimpleDocTemplate(
            buffer,
            pagesize=A4,
            rightMargin=15 * mm,
            leftMargin=15 * mm,
            topMargin=15 * mm,
            bottomMargin=15 * mm,
            title=f"Invoice {invoice.invoice_number}",
        )

        styles = getSampleStyleSheet()
        elements = []

        title_style = ParagraphStyle(
            "TitleStyle",
            parent=styles["Heading1"],
            fontSize=22,
            spaceAfter=6,
            textColor=colors.HexColor("#2C3E50"),
        )
        heading_style = ParagraphStyle(
            "HeadingStyle",
            parent=styles["Heading2"],
            fontSize=14,
            textColor=colors.HexColor("#2C3E50"),
            spaceAfter=10,
        )
        header_style = ParagraphStyle(
            "HeaderStyle",
            parent=styles["Normal"],
            fontSize=9,
            textColor=colors.HexColor("#7F8C8D"),
        )
        normal_style = ParagraphStyle(
            "NormalStyle",
            parent=styles["Normal"],
            fontSize=10,
        )
        bold_style = ParagraphStyle(
            "BoldStyle",
            parent=styles["Normal"],
            fontSize=10,
            fontName="Helvetica-Bold",
        )

        # Seller block
        elements.append(Paragraph(escape(company.company_name), title_style))
        for line in (
            company.address,
            f"Phone: {company.phone_number}",
            f"Email: {company.email}",
            company.website,
            f"GSTIN: {company.tax_id}",
        ):
            elements.append(Paragraph(escape(line), header_style))
        elements.append(Spacer(1, 8 * mm))
        elements.append(Paragraph("TAX INVOICE", heading_style))

        invoice_info = [
            ["Invoice Number:", invoice.invoice_number],
            ["Invoice Date:", invoice.invoice_date.strftime("%d %b %Y")],
        ]
        if invoice.due_date:
            invoice_info.append(["Due Date:", invoice.due_date.strftime("%d %b %Y")])
        if invoice.order_number:
            invoice_info.append(["Order Number:", invoice.order_number])
        invoice_info.append(["Status:", invoice.status.value])

        invoice_table = Table(invoice_info, colWidths=[40 * mm, 100 * mm])
        invoice_table.setStyle(
            TableStyle(
                [
                    ("FONTNAME", (0, 0), (0, -1), "Helvetica-Bold"),
                    ("FONTSIZE", (0, 0), (-1, -1), 10),
                    ("TEXTCOLOR", (0, 0), (0, -1), colors.HexColor("#7F8C8D")),
                    ("VALIGN", (0, 0), (-1, -1), "TOP"),
                    ("BOTTOMPADDING", (0, 0), (-1, -1), 4),
                ]
            )
        )
        elements.append(invoice_table)
        elements.append(Spacer(1, 8 * mm))

        # Bill to
        elements.append(Paragraph("Bill To:", bold_style))
        if customer is not None:
            elements.append(Paragraph(escape(customer.customer_name), normal_style))
            if customer.company_name:
                elements.append(Paragraph(escape(customer.company_name), normal_style))
            for line in format_address(customer.billing_address or {}):
                elements.append(Paragraph(escape(line), normal_style))
            if customer.gst_in:
                elements.append(Paragraph(escape(f"GSTIN: {customer.gst_in}"), normal_style))
        else:
            elements.append(Paragraph("Unknown", normal_style))
        elements.append(Spacer(1, 8 * mm))

        # Line items
        line_data = [["#", "Item", "HSN/SAC", "Qty", "Rate", "Discount", "CGST", "SGST", "Amount"]]
        for index, line in enumerate(invoice_lines, start=1):
            line_data.append(
                [
                    str(index),
                    Paragraph(escape(line.name), normal_style),
                    line.hsn_code,
                    str(line.quantity),
                    f"{Decimal(line.rate):,.2f}",
                    f"{Decimal(line.discount):,.2f}",
                    format_percent(line.cgst_percent),
                    format_percent(line.sgst_percent),
                    f"{Decimal(line.amount):,.2f}",
                ]
            )

        col_widths = [8 * mm, 44 * mm, 22 * mm, 12 * mm, 20 * mm, 18 * mm, 14 * mm, 14 * mm, 28 * mm]
        line_table = Table(line_data, colWidths=col_widths, repeatRows=1)
        line_table.setStyle(
            TableStyle(
                [
                    # Header row
                    ("BACKGROUND", (0, 0), (-1, 0), colors.HexColor("#2C3E50")),
                    ("TEXTCOLOR", (0, 0), (-1, 0), colors.white),
                    ("FONTNAME", (0, 0), (-1, 0), "Helvetica-Bold"),
                    ("FONTSIZE", (0, 0), (-1, 0), 9),
                    ("ALIGN", (0, 0), (-1, 0), "CENTER"),
                    # Data rows
                    ("FONTSIZE", (0, 1), (-1, -1), 9),
                    ("ALIGN", (3, 1), (-1, -1), "RIGHT"),
                    ("VALIGN", (0, 0), (-1, -1), "MIDDLE"),
                    ("GRID", (0, 0), (-1, -1), 0.5, colors.HexColor("#BDC3C7")),
                    ("BOTTOMPADDING", (0, 0), (-1, -1), 5),
                    ("TOPPADDING", (0, 0), (-1, -1), 5),
                    (
                        "ROWBACKGROUNDS",
                        (0, 1),
                        (-1, -1),
                        [colors.white, colors.HexColor("#F8F9F9")],
                    ),
                ]
            )
        )
        elements.append(line_table)
        elements.append(Spacer(1, 5 * mm))

        # Totals
        total_data = [
            ["Sub Total:", format_money(invoice.subtotal)],
            ["Discount:", f"- {format_money(invoice.discount)}"],
            ["CGST:", format_money(invoice.cgst)],
            ["SGST:", format_money(invoice.sgst)],
            ["Adjustment:", format_money(invoice.adjustment)],
            ["Total:", format_money(invoice.total)],
            ["Paid Amount:", format_money(invoice.paid_amount)],
            ["Balance Due:", format_money(invoice.balance_amount)],
        ]
        total_table = Table(total_data, colWidths=[40 * mm, 40 * mm], hAlign="RIGHT")
        total_table.setStyle(
            TableStyle(
                [
                    ("FONTSIZE", (0, 0), (-1, -1), 10),
                    ("ALIGN", (0, 0), (-1, -1), "RIGHT"),
                    ("FONTNAME", (0, 5), (-1, 5), "Helvetica-Bold"),
                    ("LINEABOVE", (0, 5), (-1, 5), 1.5, colors.HexColor("#2C3E50")),
                    ("FONTNAME", (0, 7), (-1, 7), "Helvetica-Bold"),
                    ("TOPPADDING", (0, 0), (-1, -1), 3),
                ]
            )
        )
        elements.append(total_table)
        elements.append(Spacer(1, 4 * mm))

        status_color = "#E74C3C" if invoice.status == InvoiceStatus.CREDIT else "#27AE60"
        elements.append(
            Paragraph(
                f'<font color="{status_color}"><b>{invoice.status.value}</b></font>',
                ParagraphStyle("StatusStyle", parent=normal_style, alignment=2),
            )
        )
        elements.append(Spacer(1, 10 * mm))

        if invoice.terms_and_conditions:
            elements.append(Paragraph("Terms &amp; Conditions", bold_style))
            elements.append(Paragraph(escape(invoice.terms_and_conditions), normal_style))
            elements.append(Spacer(1, 4 * mm))
        if invoice.remarks:
            elements.append(Paragraph("Remarks", bold_style))
            elements.append(Paragraph(escape(invoice.remarks), normal_style))

        doc.build(elements)
        pdf_bytes = buffer.getvalue()
        buffer.close()

        return pdf_bytes
