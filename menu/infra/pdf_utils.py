import io
from reportlab.lib.pagesizes import A4, landscape
from reportlab.platypus import SimpleDocTemplate, Table, TableStyle, Paragraph, Spacer
from reportlab.lib import colors
from reportlab.lib.styles import getSampleStyleSheet

from menu.domain.Plan import WeeklyPlan


def generate_pdf_for_plan(plan: WeeklyPlan, title: str = "Combo Menu Plan") -> bytes:
    """Generate a PDF table: Day / Combo / Main / Side / Drink / kcal / Popularity for the provided plan."""
    buf = io.BytesIO()
    doc = SimpleDocTemplate(
        buf, pagesize=landscape(A4),
        rightMargin=20, leftMargin=20, topMargin=20, bottomMargin=20
    )

    styles = getSampleStyleSheet()
    elements = [
        Paragraph(title, styles["Title"]),
        Spacer(1, 16),
    ]

    data = [["Day", "Combo", "Main", "Side", "Drink", "kcal", "Popularity"]]
    for daily in plan.days:
        if not daily.combos:
            data.append([daily.day, "-", "-", "-", "-", "-", "-"])
            continue
        for combo in daily.combos:
            data.append([
                daily.day,
                combo.combo_id,
                combo.main,
                combo.side,
                combo.drink,
                str(combo.calorie_count),
                f"{combo.popularity_score:.2f}",
            ])

    table = Table(data, repeatRows=1)
    table.setStyle(TableStyle([
        ("BACKGROUND", (0,0), (-1,0), colors.HexColor("#4CAF50")),
        ("TEXTCOLOR", (0,0), (-1,0), colors.whitesmoke),
        ("ALIGN", (0,0), (-1,-1), "CENTER"),
        ("FONTNAME", (0,0), (-1,0), "Helvetica-Bold"),
        ("FONTSIZE", (0,0), (-1,0), 12),
        ("BOTTOMPADDING", (0,0), (-1,0), 10),
        ("GRID", (0,0), (-1,-1), 0.5, colors.grey),
    ]))

    elements.append(table)
    doc.build(elements)
    return buf.getvalue()
