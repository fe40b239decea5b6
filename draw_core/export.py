# draw_core/export.py
from __future__ import annotations
from typing import Dict, Sequence
import io

import pandas as pd
from reportlab.lib import colors
from reportlab.lib.pagesizes import letter
from reportlab.pdfgen import canvas
from reportlab.platypus import Table, TableStyle

COLUMNS = ["player", "champion"]


def assignment_to_df(assignment: Dict[str, str], roster: Sequence[str] | None = None) -> pd.DataFrame:
    """One row per drawn pair, in roster order when a roster is given."""
    order = [m for m in (roster or assignment.keys()) if m in assignment]
    rows = [{"player": m, "champion": assignment[m]} for m in order]
    return pd.DataFrame(rows, columns=COLUMNS)


def assignment_csv_bytes(df: pd.DataFrame) -> bytes:
    buf = io.StringIO()
    df.to_csv(buf, index=False)
    return buf.getvalue().encode("utf-8")


def render_pdf(df: pd.DataFrame, title: str = "Champion Draw") -> bytes:
    buf = io.BytesIO()
    page_size = letter
    c = canvas.Canvas(buf, pagesize=page_size)

    c.setFont("Helvetica-Bold", 16)
    c.drawString(40, page_size[1] - 40, title)

    data = [["Player", "Champion"]]
    for row in df.itertuples(index=False):
        data.append([str(row.player), str(row.champion)])

    t = Table(data, repeatRows=1)
    t.setStyle(TableStyle([
        ("BACKGROUND", (0,0), (-1,0), colors.lightgrey),
        ("TEXTCOLOR", (0,0), (-1,0), colors.black),
        ("FONTNAME", (0,0), (-1,0), "Helvetica-Bold"),
        ("FONTSIZE", (0,0), (-1,0), 11),
        ("GRID", (0,0), (-1,-1), 0.5, colors.grey),
        ("ALIGN", (0,0), (-1,-1), "LEFT"),
        ("VALIGN", (0,0), (-1,-1), "MIDDLE"),
    ]))

    table_w, table_h = t.wrapOn(c, page_size[0] - 80, page_size[1] - 100)
    t.drawOn(c, 40, page_size[1] - 80 - table_h)

    c.showPage()
    c.save()
    return buf.getvalue()
