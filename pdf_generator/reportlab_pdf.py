import os
import re
from xml.sax.saxutils import escape

from reportlab.lib.pagesizes import A4
from reportlab.platypus import (
    SimpleDocTemplate, Paragraph, Spacer,
    Preformatted, HRFlowable
)
from reportlab.lib.styles import getSampleStyleSheet, ParagraphStyle
from reportlab.lib.units import mm
from reportlab.pdfbase import pdfmetrics
from reportlab.pdfbase.ttfonts import TTFont

DEFAULT_FONT_PATH = "fonts/DejaVuSans.ttf"


def register_fonts():
    # DejaVu renders the ❌/✅ markers; Helvetica is the fallback
    if os.path.exists(DEFAULT_FONT_PATH) and 'DejaVuSans' not in pdfmetrics.getRegisteredFontNames():
        pdfmetrics.registerFont(TTFont('DejaVuSans', DEFAULT_FONT_PATH))


def generate_pdf(run_meta: dict, results: list, summary: dict, out_path: str):

    register_fonts()
    styles = getSampleStyleSheet()

    # Use DejaVu if installed
    base_font = (
        'DejaVuSans'
        if 'DejaVuSans' in pdfmetrics.getRegisteredFontNames()
        else 'Helvetica'
    )

    title_style = ParagraphStyle(
        "Title",
        parent=styles['Heading1'],
        fontName=base_font,
        fontSize=18,
        spaceAfter=10,
        textColor="#003566"
    )

    header_style = ParagraphStyle(
        "Header",
        parent=styles['Normal'],
        fontName=base_font,
        fontSize=11,
        leading=14,
    )

    section_title_style = ParagraphStyle(
        "SectionTitle",
        parent=styles['Heading3'],
        fontName=base_font,
        fontSize=13,
        spaceBefore=8,
        spaceAfter=4,
        textColor="#03045E"
    )

    normal_style = ParagraphStyle(
        "NormalFixed",
        parent=styles['Normal'],
        fontName=base_font,
        fontSize=10,
        leading=14,
    )

    doc = SimpleDocTemplate(
        out_path,
        pagesize=A4,
        rightMargin=15 * mm,
        leftMargin=15 * mm,
        topMargin=15 * mm,
        bottomMargin=15 * mm
    )

    flow = []

    # -------------------------
    # TITLE
    # -------------------------
    flow.append(Paragraph("SQL DDL Lint Report", title_style))
    flow.append(Spacer(1, 6))

    # -------------------------
    # META BLOCK
    # -------------------------
    meta_text = f"""
    <b>Script:</b> {escape(str(run_meta.get('script', '-')))}<br/>
    <b>Name:</b> {escape(str(run_meta.get('name', '-')))}<br/>
    <b>Team:</b> {escape(str(run_meta.get('team', '-')))}<br/>
    <b>Generated At:</b> {escape(str(run_meta.get('generated_at', '')))}
    """
    flow.append(Paragraph(meta_text, header_style))
    flow.append(Spacer(1, 10))

    # -------------------------
    # SUMMARY
    # -------------------------
    if summary.get('parse_error'):
        flow.append(Paragraph("Parse Error", section_title_style))
        flow.append(Paragraph(
            f"<font color='red'>{escape(summary['parse_error'])}</font>", normal_style
        ))
        flow.append(Spacer(1, 12))

    summary_text = (
        f"<b>Total Statements:</b> {summary.get('total', 0)} &nbsp;&nbsp; "
        f"<b>Passed:</b> <font color='green'>{summary.get('passed', 0)}</font> &nbsp;&nbsp; "
        f"<b>Failed:</b> <font color='red'>{summary.get('failed', 0)}</font> &nbsp;&nbsp; "
        f"<b>Violations:</b> {summary.get('violations', 0)}"
    )
    flow.append(Paragraph(summary_text, header_style))
    flow.append(Spacer(1, 14))

    flow.append(HRFlowable(width="100%", thickness=1, color="#cccccc"))
    flow.append(Spacer(1, 10))

    # -------------------------
    # EACH STATEMENT
    # -------------------------
    for idx, item in enumerate(results, start=1):

        flow.append(Paragraph(f"Statement #{idx} (line {item.get('line', '?')})", section_title_style))

        # SQL block
        sql_text = item.get("query", "")
        sql_text = _insert_soft_breaks(sql_text, 200)

        flow.append(Preformatted(sql_text, normal_style))
        flow.append(Spacer(1, 4))

        validations = item.get("validations", [])
        if not validations:
            flow.append(Paragraph("<font color='green'>No violations.</font>", normal_style))

        for msg in validations:
            flow.append(
                Paragraph(f"<font color='red'>{escape(msg)}</font>", normal_style)
            )

        flow.append(Spacer(1, 10))
        flow.append(HRFlowable(width="100%", thickness=0.8, color="#e0e0e0"))
        flow.append(Spacer(1, 10))

    doc.build(flow)
    return out_path


def _insert_soft_breaks(text, max_len):
    """Prevents long lines from breaking the entire PDF layout."""

    def repl(m):
        s = m.group(0)
        if len(s) > max_len:
            parts = [s[i:i + max_len] for i in range(0, len(s), max_len)]
            return "\u200b".join(parts)
        return s

    return re.sub(r'\S{' + str(max_len + 1) + r',}', repl, text)
