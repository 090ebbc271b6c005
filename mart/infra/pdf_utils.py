import io
from reportlab.lib.pagesizes import A4, landscape
from reportlab.platypus import SimpleDocTemplate, Table, TableStyle, Paragraph, Spacer
from reportlab.lib import colors
from reportlab.lib.styles import getSampleStyleSheet

from mart.logic.reporting.nutrition import compute_week_nutrition, index_products
from mart.utilities.constants import DAYS


def _fmt(value) -> str:
    return f"{value:.0f}" if value >= 10 else f"{value:.1f}"


def generate_pdf_for_week(plan, products, owner: str = ""):
    """Printable week: one row per day with its items and nutrient totals, plus a week total."""
    index = index_products(products)
    nutrition = compute_week_nutrition(plan, index)

    buf = io.BytesIO()
    doc = SimpleDocTemplate(
        buf, pagesize=landscape(A4),
        rightMargin=20, leftMargin=20, topMargin=20, bottomMargin=20
    )

    styles = getSampleStyleSheet()
    title = f"Weekly Plan - {owner}" if owner else "Weekly Plan"
    elements = [Paragraph(title, styles["Title"]), Spacer(1, 16)]

    data = [["Day", "Items", "Kcal", "Protein (g)", "Fiber (g)", "Vit C (mg)", "Calcium (mg)", "Iron (mg)"]]
    for day in DAYS:
        names = []
        for entry in plan.entries(day):
            product = index.get(entry.product_id)
            if product:
                names.append(f"{product.name} x{entry.quantity}")
        totals = nutrition['days'][day]
        data.append([
            day, Paragraph(", ".join(names) or "-", styles["BodyText"]),
            _fmt(totals["calories"]), _fmt(totals["protein"]), _fmt(totals["fiber"]),
            _fmt(totals["vitaminC"]), _fmt(totals["calcium"]), _fmt(totals["iron"]),
        ])
    week = nutrition['week_totals']
    data.append([
        "Week", f"{week['totalQuantity']} item(s)",
        _fmt(week["calories"]), _fmt(week["protein"]), _fmt(week["fiber"]),
        _fmt(week["vitaminC"]), _fmt(week["calcium"]), _fmt(week["iron"]),
    ])

    table = Table(data, repeatRows=1, colWidths=[70, 300, 50, 70, 60, 65, 80, 60])
    table.setStyle(TableStyle([
        ("BACKGROUND", (0,0), (-1,0), colors.HexColor("#27AE60")),
        ("TEXTCOLOR", (0,0), (-1,0), colors.whitesmoke),
        ("ALIGN", (2,0), (-1,-1), "CENTER"),
        ("VALIGN", (0,0), (-1,-1), "MIDDLE"),
        ("FONTNAME", (0,0), (-1,0), "Helvetica-Bold"),
        ("FONTNAME", (0,-1), (-1,-1), "Helvetica-Bold"),
        ("FONTSIZE", (0,0), (-1,0), 11),
        ("BOTTOMPADDING", (0,0), (-1,0), 10),
        ("GRID", (0,0), (-1,-1), 0.5, colors.grey),
    ]))

    elements.append(table)
    doc.build(elements)
    return buf.getvalue()
