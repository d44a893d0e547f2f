import io
from reportlab.lib.pagesizes import A4, landscape
from reportlab.platypus import SimpleDocTemplate, Table, TableStyle, Paragraph, Spacer
from reportlab.lib import colors
from reportlab.lib.styles import getSampleStyleSheet

from averse.domain.Ingredient import format_amount
from averse.utilities.constants import WEEK

_TABLE_STYLE = TableStyle([
    ("BACKGROUND", (0,0), (-1,0), colors.HexColor("#4CAF50")),
    ("TEXTCOLOR", (0,0), (-1,0), colors.whitesmoke),
    ("ALIGN", (0,0), (-1,-1), "LEFT"),
    ("VALIGN", (0,0), (-1,-1), "TOP"),
    ("FONTNAME", (0,0), (-1,0), "Helvetica-Bold"),
    ("FONTSIZE", (0,0), (-1,0), 12),
    ("BOTTOMPADDING", (0,0), (-1,0), 10),
    ("GRID", (0,0), (-1,-1), 0.5, colors.grey),
])


def generate_pdf_for_plan(plan):
    """Generate a PDF with the week's Day / Recipes table and, if compiled, the grocery list."""
    buf = io.BytesIO()
    doc = SimpleDocTemplate(
        buf, pagesize=landscape(A4),
        rightMargin=20, leftMargin=20, topMargin=20, bottomMargin=20
    )

    styles = getSampleStyleSheet()
    elements = [
        Paragraph(f"Meal Plan – {plan.name}", styles["Title"]),
        Spacer(1, 16),
    ]

    week = [["Day", "Recipes"]]
    for day in WEEK:
        week.append([day, "\n".join(plan.recipes_for(day)) or "-"])
    week_table = Table(week, repeatRows=1)
    week_table.setStyle(_TABLE_STYLE)
    elements.append(week_table)

    if plan.groceries:
        elements += [Spacer(1, 16), Paragraph("Grocery List", styles["Heading2"]), Spacer(1, 8)]
        groceries = [["Amount", "Unit", "Ingredient"]]
        for ing in plan.groceries:
            groceries.append([format_amount(ing.amount), str(ing.unit), ing.name])
        grocery_table = Table(groceries, repeatRows=1)
        grocery_table.setStyle(_TABLE_STYLE)
        elements.append(grocery_table)

    doc.build(elements)
    return buf.getvalue()
