"""
MJML building blocks shared by every booking email.
"""

import html
from dataclasses import dataclass
from typing import Optional

from ....config import FRONTEND_URL, SUPPORT_EMAIL, SUPPORT_PHONE
from ..formatting import items, joined, lab_totals, rupees, safe

THEME = {
    "primary": "#0ea5e9",
    "background": "#f8fafc",
    "card_bg": "#ffffff",
    "text_primary": "#1e293b",
    "text_secondary": "#334155",
    "text_muted": "#64748b",
    "border": "#e2e8f0",
    # Per-service accents
    "lab": "#22c55e",
    "prescription": "#0ea5e9",
    "doctor": "#8b5cf6",
    "nurse": "#ec4899",
    "pharmacy": "#14b8a6",
    "critical": "#ef4444",
    "urgent": "#f97316",
    "scheduled": "#3b82f6",
}


@dataclass(frozen=True)
class RenderedEmail:
    subject: str
    mjml: str


def detail_rows(rows: list[tuple[str, str]], accent: Optional[str] = None) -> str:
    """Label/value pairs inside a bordered card; the first value uses the accent colour"""
    blocks = []
    for index, (label, value) in enumerate(rows):
        highlight = accent if (accent and index == 0) else THEME["text_primary"]
        size = "18px" if (accent and index == 0) else "15px"
        blocks.append(
            f'<p style="margin: 0; color: {THEME["text_muted"]}; font-size: 12px; '
            f'text-transform: uppercase;">{label}</p>'
            f'<p style="margin: 4px 0 14px; color: {highlight}; font-size: {size}; '
            f'font-weight: 600;">{value}</p>'
        )

    return f"""
    <mj-text padding="8px 0 16px 0">
      <div style="border: 1px solid {THEME['border']}; border-radius: 12px; padding: 20px;">
        {''.join(blocks)}
      </div>
    </mj-text>
    """


def paragraph(content: str) -> str:
    return f"""
    <mj-text padding="0 0 12px 0">
      {content}
    </mj-text>
    """


def callout(content: str, background: str, border: str, color: str) -> str:
    return f"""
    <mj-text padding="8px 0 16px 0">
      <div style="background: {background}; border: 1px solid {border}; border-radius: 8px; padding: 14px; color: {color}; font-size: 14px;">
        {content}
      </div>
    </mj-text>
    """


def line_items_table(rows: list[list[str]]) -> str:
    """Simple HTML table for priced test line-items"""
    header, *body = rows
    head_html = "".join(
        f'<th style="text-align: left; padding: 8px; border-bottom: 2px solid {THEME["border"]}; '
        f'font-size: 12px; color: {THEME["text_muted"]};">{cell}</th>'
        for cell in header
    )
    body_html = ""
    for index, row in enumerate(body):
        weight = "700" if index == len(body) - 1 else "400"
        cells = "".join(
            f'<td style="padding: 8px; border-bottom: 1px solid {THEME["border"]}; '
            f'font-size: 14px; font-weight: {weight};">{cell}</td>'
            for cell in row
        )
        body_html += f"<tr>{cells}</tr>"

    return f"""
    <mj-text padding="8px 0 16px 0">
      <table style="width: 100%; border-collapse: collapse;">
        <tr>{head_html}</tr>
        {body_html}
      </table>
    </mj-text>
    """


def get_base_template(
    title: str,
    preview_text: str,
    content_sections: str,
    accent: str = THEME["primary"],
    cta_url: Optional[str] = None,
    cta_label: Optional[str] = None,
    is_admin_email: bool = False,
) -> str:
    """Base MJML template wrapper for all emails; title and preview are plain text"""

    title = html.escape(title, quote=False)
    preview_text = html.escape(preview_text, quote=False)

    cta_section = ""
    if cta_url and cta_label:
        cta_section = f"""
        <mj-section background-color="#ffffff" padding="0 40px 32px 40px">
          <mj-column>
            <mj-button
              href="{cta_url}"
              background-color="{accent}"
              color="#ffffff"
              font-weight="600"
              border-radius="8px"
              padding="0"
              inner-padding="14px 28px"
              font-size="16px">
              {cta_label}
            </mj-button>
          </mj-column>
        </mj-section>
        """

    if is_admin_email:
        footer_notice = f"""
            <mj-text align="center" font-size="12px" color="#94a3b8" padding="0">
              This is an automated notification from MyPakLabs.<br />
              Contact: {SUPPORT_PHONE} | {SUPPORT_EMAIL}
            </mj-text>
        """
    else:
        footer_notice = f"""
            <mj-text align="center" font-size="14px" color="{THEME['text_muted']}" padding="0">
              Thank you for choosing MyPakLabs!
            </mj-text>
            <mj-text align="center" font-size="12px" color="#94a3b8" padding="10px 0 0 0">
              For any queries, contact us at: {SUPPORT_PHONE} | {SUPPORT_EMAIL}
            </mj-text>
            <mj-text align="center" font-size="14px" padding="12px 0 0 0">
              <a href="{FRONTEND_URL}" style="color: {THEME['primary']}; text-decoration: none;">Visit MyPakLabs</a>
            </mj-text>
        """

    return f"""
    <mjml>
      <mj-head>
        <mj-title>{title}</mj-title>
        <mj-preview>{preview_text}</mj-preview>
        <mj-attributes>
          <mj-all font-family="'Plus Jakarta Sans', Arial, sans-serif" />
          <mj-text font-size="16px" line-height="1.6" color="{THEME['text_secondary']}" />
        </mj-attributes>
      </mj-head>
      <mj-body background-color="{THEME['background']}">
        <!-- Header -->
        <mj-section background-color="{accent}" padding="28px 20px">
          <mj-column>
            <mj-text align="center" font-size="24px" font-weight="700" color="#ffffff" padding="0">
              {title}
            </mj-text>
          </mj-column>
        </mj-section>

        <!-- Main Content -->
        <mj-section background-color="#ffffff" padding="32px 40px 16px 40px">
          <mj-column>
            {content_sections}
          </mj-column>
        </mj-section>

        {cta_section}

        <!-- Footer -->
        <mj-section padding="24px 20px">
          <mj-column>
            {footer_notice}
          </mj-column>
        </mj-section>
      </mj-body>
    </mjml>
    """


def urgency_style(urgency: Optional[str]) -> tuple[str, str]:
    """Accent colour and label for an emergency request's urgency"""
    if urgency == "critical":
        return THEME["critical"], "Critical"
    if urgency == "within_1_hour":
        return THEME["urgent"], "Urgent"
    return THEME["scheduled"], "Scheduled"


def lab_items_section(data) -> str:
    """Test line-items of a lab booking, or just the test names when no prices were sent"""
    if not data.tests:
        if data.testNames:
            return detail_rows([("Tests", safe(joined(data.testNames)))])
        return ""

    rows = [["Test", "Original", "Payable"]]
    for test in items(data.tests):
        rows.append([safe(test.name), rupees(test.originalPrice), rupees(test.discountedPrice)])

    total_original, total_discounted = lab_totals(data)
    rows.append(["Total", rupees(total_original), rupees(total_discounted)])
    return line_items_table(rows)
