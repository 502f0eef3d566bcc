"""Render report tables to Excel and PDF."""

import io
from datetime import date
from typing import List

import pandas as pd
from openpyxl.styles import Font
from openpyxl.utils import get_column_letter
from reportlab.lib.pagesizes import A4, landscape
from reportlab.lib.units import cm
from reportlab.pdfbase.pdfmetrics import stringWidth
from reportlab.pdfgen import canvas

from components.finance.formatting import format_currency, format_date, format_number
from components.report.tables import MONEY_COLUMNS, PERCENT_COLUMNS, ReportHeader

XLSX_MEDIA_TYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"
PDF_MEDIA_TYPE = "application/pdf"

FONT = "Helvetica"
FONT_BOLD = "Helvetica-Bold"
FONT_SIZE = 9
ROW_HEIGHT = 0.6 * cm
MARGIN = 1.5 * cm


def to_excel(df: pd.DataFrame, header: ReportHeader, sheet_name: str = "Laporan") -> bytes:
    """Write the table below the header lines, money as ``#,##0``."""
    lines = header.lines()
    start_row = len(lines) + 1  # blank row between header and table

    output = io.BytesIO()
    with pd.ExcelWriter(output, engine="openpyxl") as writer:
        df.to_excel(writer, sheet_name=sheet_name, index=False, startrow=start_row)
        sheet = writer.sheets[sheet_name]

        for row, line in enumerate(lines, start=1):
            cell = sheet.cell(row=row, column=1, value=line)
            cell.font = Font(bold=row == 1, size=14 if row == 1 else 11)

        for col, name in enumerate(df.columns, start=1):
            letter = get_column_letter(col)
            width = max([len(str(name))] + [len(str(value)) for value in df[name].tolist()])
            sheet.column_dimensions[letter].width = min(max(width + 2, 8), 50)

            if name in MONEY_COLUMNS or name in PERCENT_COLUMNS:
                number_format = "#,##0" if name in MONEY_COLUMNS else "0.00"
                for row in range(start_row + 2, start_row + 2 + len(df)):
                    sheet.cell(row=row, column=col).number_format = number_format

    return output.getvalue()


def _cell_text(name: str, value) -> str:
    if value is None or (not isinstance(value, str) and pd.isna(value)):
        return ""
    if name in MONEY_COLUMNS:
        return format_currency(float(value))
    if name in PERCENT_COLUMNS:
        return f"{format_number(float(value), max_decimals=2)}%"
    return str(value)


def _fit(text: str, width: float, font: str) -> str:
    """Cut ``text`` so it fits ``width`` points."""
    if stringWidth(text, font, FONT_SIZE) <= width:
        return text
    while text and stringWidth(text + "...", font, FONT_SIZE) > width:
        text = text[:-1]
    return text + "..."


def _column_widths(df: pd.DataFrame, total: float) -> List[float]:
    weights = []
    for name in df.columns:
        longest = max([len(str(name))] + [len(_cell_text(name, v)) for v in df[name].tolist()])
        weights.append(min(max(longest, 4), 40))
    scale = total / sum(weights)
    return [weight * scale for weight in weights]


def to_pdf(df: pd.DataFrame, header: ReportHeader, signed_on: date) -> bytes:
    """Landscape A4 table with header lines, page numbers and a signature block."""
    output = io.BytesIO()
    page_width, page_height = landscape(A4)
    c = canvas.Canvas(output, pagesize=(page_width, page_height))
    widths = _column_widths(df, page_width - 2 * MARGIN)
    page = 1

    def draw_row(y: float, values: List[str], font: str) -> None:
        x = MARGIN
        c.setFont(font, FONT_SIZE)
        for name, text, width in zip(df.columns, values, widths):
            text = _fit(text, width - 4, font)
            if name in MONEY_COLUMNS or name in PERCENT_COLUMNS:
                c.drawRightString(x + width - 2, y + 4, text)
            else:
                c.drawString(x + 2, y + 4, text)
            c.rect(x, y, width, ROW_HEIGHT)
            x += width

    def footer() -> None:
        c.setFont(FONT, 8)
        c.drawRightString(page_width - MARGIN, MARGIN / 2, f"Halaman {page}")

    y = page_height - MARGIN
    for index, line in enumerate(header.lines()):
        c.setFont(FONT_BOLD if index == 0 else FONT, 14 if index == 0 else 10)
        c.drawCentredString(page_width / 2, y, line)
        y -= 0.6 * cm
    y -= 0.4 * cm

    columns = [str(name) for name in df.columns]
    y -= ROW_HEIGHT
    draw_row(y, columns, FONT_BOLD)

    for record in df.itertuples(index=False):
        if y - ROW_HEIGHT < MARGIN:
            footer()
            c.showPage()
            page += 1
            y = page_height - MARGIN - ROW_HEIGHT
            draw_row(y, columns, FONT_BOLD)
        y -= ROW_HEIGHT
        values = [_cell_text(name, value) for name, value in zip(df.columns, record)]
        # Section titles and total rows
        bold = values[0].isupper() or any(v.startswith(("TOTAL", "SALDO")) for v in values)
        draw_row(y, values, FONT_BOLD if bold else FONT)

    # Signature block
    block_height = 4.5 * cm
    if y - block_height < MARGIN:
        footer()
        c.showPage()
        page += 1
        y = page_height - MARGIN
    settings = header.settings
    left_x = MARGIN + 3 * cm
    right_x = page_width - MARGIN - 3 * cm
    y -= 1 * cm
    c.setFont(FONT, 10)
    place = f"{settings.city}, " if settings.city else ""
    c.drawCentredString(right_x, y, f"{place}{format_date(signed_on)}")
    y -= 0.5 * cm
    c.drawCentredString(left_x, y, "Mengetahui,")
    c.drawCentredString(left_x, y - 0.5 * cm, "Pimpinan")
    c.drawCentredString(right_x, y - 0.5 * cm, "Bendahara")
    y -= 3 * cm
    c.setFont(FONT_BOLD, 10)
    c.drawCentredString(left_x, y, settings.leader or "(....................)")
    c.drawCentredString(right_x, y, settings.treasurer or "(....................)")

    footer()
    c.save()
    return output.getvalue()
