"""
Booking voucher PDF generator.

Lab bookings, confirmed doctor appointments and confirmed nurse bookings get a
branded one-document voucher that is attached to the outgoing emails. PDFs are
rendered in memory with reportlab in invariant mode, so the same request and
the same generation instant always produce identical bytes.
"""

import base64
import io
import logging
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Optional
from xml.sax.saxutils import escape

from reportlab.lib import colors
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import ParagraphStyle, getSampleStyleSheet
from reportlab.lib.units import inch
from reportlab.platypus import Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle

from ...config import LAB_VOUCHER_VALIDITY_DAYS, SUPPORT_EMAIL, SUPPORT_PHONE
from .formatting import (
    discount_percent,
    display_date,
    items,
    lab_totals,
    parse_date,
    rupees,
    text,
)
from .schemas import NotificationRequest, NotificationType

logger = logging.getLogger(__name__)

LAB_INSTRUCTIONS = [
    "Present this voucher and a valid CNIC at the lab reception.",
    "Some tests require fasting for 10-12 hours. Please check with the lab before your visit.",
    "Prices shown are valid only until the expiry date printed on this voucher.",
    "Reports are shared through the lab or your MyPakLabs account once ready.",
]

APPOINTMENT_INSTRUCTIONS = [
    "Please arrive 10 minutes before your scheduled time.",
    "Bring any previous medical records, reports or prescriptions.",
    "For online consultations, keep your phone reachable at the appointment time.",
    "To reschedule or cancel, contact MyPakLabs support as early as possible.",
]

NURSE_INSTRUCTIONS = [
    "The nurse will contact you before the visit to confirm the address and timing.",
    "Keep the patient's prescriptions and medical supplies ready.",
    "Payment is made directly to the nurse unless agreed otherwise.",
    "To reschedule or cancel, contact MyPakLabs support as early as possible.",
]


@dataclass
class VoucherPDF:
    filename: str
    content: bytes

    @property
    def base64_content(self) -> str:
        return base64.b64encode(self.content).decode("utf-8")

    def as_attachment(self) -> dict:
        return {"filename": self.filename, "content": self.base64_content}


class BookingVoucherPDF:
    """Shared layout: brand header, info tables, instructions footer, page numbers"""

    document_title = "Booking Voucher"

    def __init__(self, request: NotificationRequest, generated_at: Optional[datetime] = None):
        self.request = request
        self.generated_at = generated_at or datetime.now()

        self.page_width, self.page_height = A4
        self.margin = 0.6 * inch
        self.content_width = self.page_width - (2 * self.margin)

        self.brand_color = colors.HexColor("#0ea5e9")
        self.dark_gray = colors.HexColor("#1e293b")
        self.muted_gray = colors.HexColor("#64748b")
        self.light_gray = colors.HexColor("#f1f5f9")

        styles = getSampleStyleSheet()
        self.title_style = ParagraphStyle(
            "VoucherTitle",
            parent=styles["Heading1"],
            fontSize=20,
            textColor=self.brand_color,
            spaceAfter=4,
            alignment=1,  # Center
        )
        self.subtitle_style = ParagraphStyle(
            "VoucherSubtitle",
            parent=styles["Normal"],
            fontSize=10,
            textColor=self.muted_gray,
            alignment=1,
        )
        self.heading_style = ParagraphStyle(
            "VoucherHeading",
            parent=styles["Heading2"],
            fontSize=13,
            textColor=self.dark_gray,
            spaceBefore=14,
            spaceAfter=6,
        )
        self.body_style = ParagraphStyle(
            "VoucherBody",
            parent=styles["Normal"],
            fontSize=9,
            textColor=self.dark_gray,
            spaceAfter=4,
        )

    def filename(self) -> str:
        raise NotImplementedError

    def build_story(self) -> list:
        raise NotImplementedError

    def instructions(self) -> list[str]:
        return []

    def generate(self) -> bytes:
        """Render the voucher and return the PDF bytes"""
        buffer = io.BytesIO()
        doc = SimpleDocTemplate(
            buffer,
            pagesize=A4,
            rightMargin=self.margin,
            leftMargin=self.margin,
            topMargin=self.margin,
            bottomMargin=self.margin,
            title=f"MyPakLabs - {self.document_title}",
            author="MyPakLabs",
            invariant=1,
        )

        story = self._header() + self.build_story() + self._footer()
        doc.build(story, onFirstPage=self._add_page_number, onLaterPages=self._add_page_number)

        pdf_bytes = buffer.getvalue()
        buffer.close()
        return pdf_bytes

    def _header(self) -> list:
        return [
            Paragraph("MyPakLabs", self.title_style),
            Paragraph(self.document_title.upper(), self.subtitle_style),
            Spacer(1, 0.1 * inch),
            Paragraph(
                f"Generated: {self.generated_at.strftime('%d %b %Y %I:%M %p')}",
                self.subtitle_style,
            ),
            Spacer(1, 0.25 * inch),
        ]

    def _footer(self) -> list:
        story = []
        instructions = self.instructions()
        if instructions:
            story.append(Paragraph("Important Instructions", self.heading_style))
            for number, line in enumerate(instructions, start=1):
                story.append(Paragraph(f"{number}. {escape(line)}", self.body_style))

        story.append(Spacer(1, 0.3 * inch))
        story.append(
            Paragraph(
                f"<i>Questions? Call {escape(SUPPORT_PHONE)} or email {escape(SUPPORT_EMAIL)}</i>",
                ParagraphStyle(
                    "Footer",
                    parent=self.body_style,
                    fontSize=8,
                    textColor=colors.grey,
                    alignment=1,
                ),
            )
        )
        return story

    def section(self, title: str, rows: list[tuple[str, str]]) -> list:
        """Heading followed by a two-column label/value table"""
        table = Table(
            [[label, value] for label, value in rows],
            colWidths=[1.8 * inch, self.content_width - 1.8 * inch],
        )
        table.setStyle(
            TableStyle(
                [
                    ("FONT", (0, 0), (0, -1), "Helvetica-Bold", 9),
                    ("FONT", (1, 0), (1, -1), "Helvetica", 9),
                    ("TEXTCOLOR", (0, 0), (-1, -1), self.dark_gray),
                    ("VALIGN", (0, 0), (-1, -1), "TOP"),
                    ("BOTTOMPADDING", (0, 0), (-1, -1), 5),
                ]
            )
        )
        return [Paragraph(title, self.heading_style), table]

    def patient_section(self) -> list:
        r = self.request
        return self.section(
            "Patient Details",
            [
                ("Name:", text(r.patientName)),
                ("Phone:", text(r.patientPhone)),
                ("Email:", text(r.patientEmail)),
                ("Age / Gender:", f"{text(r.patientAge)} / {text(r.patientGender)}"),
                ("City:", text(r.patientCity)),
            ],
        )

    def _add_page_number(self, canvas_obj, doc):
        """Add page numbers to PDF"""
        page_num = canvas_obj.getPageNumber()
        canvas_obj.setFont("Helvetica", 8)
        canvas_obj.setFillColor(colors.grey)
        canvas_obj.drawRightString(
            self.page_width - self.margin, self.margin / 2, f"Page {page_num}"
        )


class LabBookingVoucher(BookingVoucherPDF):
    """Priced line-item voucher for lab test bookings"""

    document_title = "Lab Test Booking Voucher"

    def filename(self) -> str:
        return f"MyPakLabs-Booking-{text(self.request.orderId, 'voucher')}.pdf"

    def instructions(self) -> list[str]:
        return LAB_INSTRUCTIONS

    def validity_window(self) -> tuple[datetime, datetime]:
        """Booking date (or generation date) through booking date + validity days"""
        created = parse_date(self.request.bookingDate) or self.generated_at
        days = self.request.validityDays or LAB_VOUCHER_VALIDITY_DAYS
        return created, created + timedelta(days=days)

    def totals(self) -> tuple[float, float]:
        return lab_totals(self.request)

    def line_item_rows(self) -> list[list[str]]:
        """Header, one row per test, and the total row"""
        rows = [["Test", "Original Price", "Discount", "Payable"]]
        for test in items(self.request.tests):
            rows.append(
                [
                    text(test.name),
                    rupees(test.originalPrice),
                    f"{discount_percent(test.originalPrice, test.discountedPrice)}%",
                    rupees(test.discountedPrice),
                ]
            )

        total_original, total_discounted = self.totals()
        overall = (
            f"{self.request.discountPercentage:g}%"
            if self.request.discountPercentage is not None
            else f"{discount_percent(total_original, total_discounted)}%"
        )
        rows.append(["Total", rupees(total_original), overall, rupees(total_discounted)])
        return rows

    def build_story(self) -> list:
        r = self.request
        valid_from, valid_until = self.validity_window()
        total_original, total_discounted = self.totals()
        savings = r.totalSavings if r.totalSavings is not None else total_original - total_discounted

        story = self.section(
            "Booking Details",
            [
                ("Booking ID:", text(r.orderId)),
                ("Lab:", text(r.labName)),
                ("Booking Date:", display_date(valid_from)),
                ("Valid Until:", display_date(valid_until)),
            ],
        )
        story += self.patient_section()

        story.append(Paragraph("Tests", self.heading_style))
        rows = self.line_item_rows()
        table = Table(
            rows,
            colWidths=[
                self.content_width - 4.2 * inch,
                1.5 * inch,
                1.1 * inch,
                1.6 * inch,
            ],
            repeatRows=1,
        )
        table.setStyle(
            TableStyle(
                [
                    # Header row
                    ("BACKGROUND", (0, 0), (-1, 0), self.brand_color),
                    ("TEXTCOLOR", (0, 0), (-1, 0), colors.white),
                    ("FONT", (0, 0), (-1, 0), "Helvetica-Bold", 9),
                    # Data rows
                    ("FONT", (0, 1), (-1, -2), "Helvetica", 9),
                    ("TEXTCOLOR", (0, 1), (-1, -1), self.dark_gray),
                    ("ROWBACKGROUNDS", (0, 1), (-1, -2), [colors.white, self.light_gray]),
                    # Total row
                    ("FONT", (0, -1), (-1, -1), "Helvetica-Bold", 10),
                    ("LINEABOVE", (0, -1), (-1, -1), 1, self.dark_gray),
                    ("ALIGN", (1, 0), (-1, -1), "RIGHT"),
                    ("VALIGN", (0, 0), (-1, -1), "MIDDLE"),
                    ("GRID", (0, 0), (-1, -2), 0.5, colors.grey),
                    ("TOPPADDING", (0, 0), (-1, -1), 6),
                    ("BOTTOMPADDING", (0, 0), (-1, -1), 6),
                ]
            )
        )
        story.append(table)
        story.append(Spacer(1, 0.15 * inch))
        story.append(
            Paragraph(f"<b>You save {rupees(savings)}</b> on this booking.", self.body_style)
        )
        return story


class AppointmentConfirmationVoucher(BookingVoucherPDF):
    """Confirmation slip for a confirmed doctor appointment"""

    document_title = "Appointment Confirmation"

    def filename(self) -> str:
        ref = self.request.orderId or text(self.request.appointmentDate, "appointment")
        return f"MyPakLabs-Appointment-{ref}.pdf".replace(" ", "-")

    def instructions(self) -> list[str]:
        return APPOINTMENT_INSTRUCTIONS

    def build_story(self) -> list:
        r = self.request
        story = self.patient_section()
        story += self.section("Doctor", [("Name:", f"Dr. {text(r.doctorName)}")])
        story += self.section(
            "Appointment",
            [
                ("Date:", text(r.appointmentDate)),
                ("Time:", text(r.appointmentTime)),
                ("Consultation Type:", text(r.consultationType, "Physical Visit")),
                ("Consultation Fee:", rupees(r.appointmentFee)),
            ],
        )
        return story


class NurseBookingVoucher(BookingVoucherPDF):
    """Confirmation slip for a confirmed home nursing booking"""

    document_title = "Nurse Booking Confirmation"

    def filename(self) -> str:
        ref = self.request.orderId or text(self.request.preferredDate, "booking")
        return f"MyPakLabs-Nurse-Booking-{ref}.pdf".replace(" ", "-")

    def instructions(self) -> list[str]:
        return NURSE_INSTRUCTIONS

    def build_story(self) -> list:
        r = self.request
        story = self.patient_section()
        story += self.section("Nurse", [("Name:", text(r.nurseName))])
        story += self.section(
            "Service",
            [
                ("Service:", text(r.serviceNeeded)),
                ("Date:", text(r.preferredDate)),
                ("Time:", text(r.preferredTime)),
                ("Fee:", rupees(r.serviceFee)),
            ],
        )
        if r.notes and r.notes.strip():
            story.append(Paragraph("Notes", self.heading_style))
            story.append(Paragraph(escape(r.notes.strip()), self.body_style))
        return story


def select_voucher(request: NotificationRequest) -> Optional[type[BookingVoucherPDF]]:
    """Which voucher, if any, a (type, status) combination gets"""
    kind = request.type
    has_tests = bool(items(request.tests))

    if kind == NotificationType.ORDER.value and has_tests:
        return LabBookingVoucher
    if kind == NotificationType.PRESCRIPTION.value and request.is_confirmation and has_tests:
        return LabBookingVoucher
    if kind == NotificationType.DOCTOR_APPOINTMENT.value and request.is_confirmation:
        return AppointmentConfirmationVoucher
    if kind == NotificationType.NURSE_BOOKING.value and request.is_confirmation:
        return NurseBookingVoucher
    return None


def generate_voucher_pdf(
    request: NotificationRequest, generated_at: Optional[datetime] = None
) -> Optional[VoucherPDF]:
    """Render the voucher for this request, or None when it does not get one"""
    voucher_cls = select_voucher(request)
    if voucher_cls is None:
        return None

    voucher = voucher_cls(request, generated_at=generated_at)
    logger.info(f"📄 Generating {voucher.document_title} for {request.type}")
    content = voucher.generate()
    logger.info(f"✅ Generated PDF ({len(content)} bytes)")
    return VoucherPDF(filename=voucher.filename(), content=content)


__all__ = [
    "AppointmentConfirmationVoucher",
    "LabBookingVoucher",
    "NurseBookingVoucher",
    "VoucherPDF",
    "generate_voucher_pdf",
    "select_voucher",
]
