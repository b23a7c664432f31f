"""
PDF packaging quote sheet.

Generates a one-page spec sheet from a NormalizedProduct and its
PackagingResult. Uses fpdf2 (pure Python, no system dependencies).

Sections:
1. Header + product specifications
2. Box specification
3. Materials (per unit)
4. Cost breakdown
5. Shipping & sustainability
6. Recommendation text (when one was generated)
"""

from datetime import datetime
from typing import Optional

from fpdf import FPDF

from .config import settings


def _fmt(amount) -> str:
    """Format a number as $X,XXX.XX"""
    try:
        return f"${float(amount):,.2f}"
    except (ValueError, TypeError):
        return "$0.00"


def _safe(text: str) -> str:
    """Replace Unicode chars that can't be rendered by built-in PDF fonts (latin-1)."""
    if not text:
        return ""
    return (
        text
        .replace("•", "-")    # bullet
        .replace("—", " - ")  # em dash
        .replace("–", "-")    # en dash
        .replace("“", '"')
        .replace("”", '"')
        .replace("‘", "'")
        .replace("’", "'")
        .encode("latin-1", errors="replace")
        .decode("latin-1")
    )


class PackagingPDF(FPDF):
    """Spec sheet layout helpers."""

    def __init__(self, title=""):
        super().__init__()
        self.set_title(title)
        self.set_auto_page_break(auto=True, margin=20)

    def header(self):
        pass  # Drawn manually on the first page

    def footer(self):
        self.set_y(-15)
        self.set_font("Helvetica", "I", 8)
        self.set_text_color(150, 150, 150)
        self.cell(0, 10, f"Page {self.page_no()}/{{nb}}", align="C")

    def section_header(self, title):
        self.set_font("Helvetica", "B", 11)
        self.set_fill_color(34, 84, 61)
        self.set_text_color(255, 255, 255)
        self.cell(0, 8, f"  {title}", fill=True, new_x="LMARGIN", new_y="NEXT")
        self.set_text_color(0, 0, 0)
        self.ln(2)

    def key_value(self, label, value):
        self.set_font("Helvetica", "", 9)
        self.cell(70, 5.5, _safe(label))
        self.set_font("Helvetica", "B", 9)
        self.cell(0, 5.5, _safe(str(value)), new_x="LMARGIN", new_y="NEXT")

    def table_header(self, cols):
        """cols: [(label, width), ...]"""
        self.set_font("Helvetica", "B", 8)
        self.set_fill_color(240, 240, 240)
        for label, width in cols:
            align = "R" if label in ("Unit Cost",) else "L"
            self.cell(width, 6, label, border="B", fill=True, align=align)
        self.ln()

    def table_row(self, values, widths):
        self.set_font("Helvetica", "", 8)
        for i, (val, width) in enumerate(zip(values, widths)):
            align = "R" if i == len(widths) - 1 else "L"
            self.cell(width, 5.5, _safe(str(val)), align=align)
        self.ln()


def generate_packaging_pdf(product: dict, result: dict,
                           recommendation: Optional[str] = None) -> bytes:
    """
    Generate the packaging quote sheet.

    Args:
        product: NormalizedProduct dict
        result: PackagingResult dict for the same product
        recommendation: provider text, printed verbatim when given

    Returns:
        PDF bytes
    """
    pdf = PackagingPDF(title=settings.APP_NAME)
    pdf.alias_nb_pages()
    pdf.add_page()
    pw = pdf.w - pdf.l_margin - pdf.r_margin

    # -- SECTION 1: Header --
    pdf.set_font("Helvetica", "B", 18)
    pdf.cell(0, 10, _safe(settings.APP_NAME), new_x="LMARGIN", new_y="NEXT")
    pdf.set_font("Helvetica", "", 10)
    pdf.cell(0, 5, "Packaging Specification & Cost Estimate", new_x="LMARGIN", new_y="NEXT")
    pdf.cell(0, 5, f"Date: {datetime.utcnow().strftime('%B %d, %Y')}", new_x="LMARGIN", new_y="NEXT")
    pdf.ln(4)

    pdf.section_header("PRODUCT")
    pdf.key_value("Dimensions (L x W x H)",
                  f"{product['length']:.1f} x {product['width']:.1f} x {product['height']:.1f} in")
    pdf.key_value("Weight", f"{product['weight']:.1f} lbs")
    pdf.key_value("Fragility", f"{product['fragility_level']}/5 - {result['fragility_label']}")
    pdf.key_value("Quantity", f"{product['quantity']:,} units")
    pdf.ln(3)

    # -- SECTION 2: Box --
    pdf.section_header("BOX SPECIFICATION")
    pdf.key_value("Box size", f"{result['box_size']} in")
    pdf.key_value("Padding per side", f"{result['padding_per_side']:.1f} in")
    pdf.key_value("Box type", result["box_type"])
    pdf.key_value("Strength", result["box_strength"])
    pdf.key_value("Protection", result["protection_need"])
    pdf.ln(3)

    # -- SECTION 3: Materials --
    pdf.section_header("MATERIALS (PER UNIT)")
    cols = [("Material", 110), ("Type", 40), ("Unit Cost", 40)]
    widths = [c[1] for c in cols]
    pdf.table_header(cols)
    for item in result.get("material_items", []):
        pdf.table_row(
            [item["description"][:60], item["category"].title(), _fmt(item["unit_cost"])],
            widths,
        )
    pdf.ln(3)

    # -- SECTION 4: Costs --
    pdf.section_header("COST BREAKDOWN")
    pdf.key_value("Box", _fmt(result["box_unit_cost"]))
    pdf.key_value("Padding materials", _fmt(result["padding_unit_cost"]))
    pdf.key_value("Unit cost before discount", _fmt(result["unit_cost_before_discount"]))
    pdf.key_value("Bulk discount",
                  f"{result['discount_pct']}% (tier {result['discount_tier']:,}+ units)")
    pdf.key_value("Final unit cost", _fmt(result["unit_cost"]))

    pdf.ln(1)
    pdf.set_fill_color(34, 84, 61)
    pdf.set_text_color(255, 255, 255)
    pdf.set_font("Helvetica", "B", 13)
    pdf.cell(130, 10, "  TOTAL ORDER COST", fill=True)
    pdf.cell(60, 10, f"{_fmt(result['total_cost'])}  ", fill=True, align="R")
    pdf.set_text_color(0, 0, 0)
    pdf.ln(14)

    # -- SECTION 5: Shipping & sustainability --
    pdf.section_header("SHIPPING & SUSTAINABILITY")
    pdf.key_value("Estimated shipping weight", f"{result['shipping_weight_lbs']:.1f} lbs")
    pdf.key_value("Weight category", result["weight_category"])
    pdf.key_value("Box volume", f"{result['volume_cu_in']:,.1f} cu in")
    pdf.key_value("Recycled content", f"{result['recycled_content_pct']}%")
    pdf.key_value("Sustainability score", f"{result['sustainability_score']}/10")
    pdf.ln(3)

    # -- SECTION 6: Recommendation --
    if recommendation:
        pdf.section_header("RECOMMENDATION")
        pdf.set_font("Helvetica", "", 8)
        pdf.set_x(pdf.l_margin)
        pdf.multi_cell(pw, 4.5, _safe(recommendation))
        pdf.ln(3)

    pdf.set_font("Helvetica", "I", 8)
    pdf.set_text_color(100, 100, 100)
    pdf.set_x(pdf.l_margin)
    pdf.cell(pw, 4, _safe(f"Supplier: {settings.SUPPLIER_NAME} ({settings.SUPPLIER_PHONE}), "
                          f"delivery {settings.SUPPLIER_DELIVERY}."),
             new_x="LMARGIN", new_y="NEXT")
    pdf.set_text_color(0, 0, 0)

    return bytes(pdf.output())
