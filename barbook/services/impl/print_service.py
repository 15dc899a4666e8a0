"""인쇄용 레시피 카드 (one-pager HTML) 생성"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from barbook.repositories.models import Cocktail
from barbook.utils.text import escape_html, format_price

NO_INGREDIENTS = "No ingredients found"

_STYLE = """
    @page { size: %(page_size)s; margin: %(margin)s; }
    :root { --ink: #111; --muted: #555; --border: #ddd; }
    * { box-sizing: border-box; }
    body {
      font-family: system-ui,-apple-system,Segoe UI,Roboto,Arial;
      color: var(--ink);
      margin: 0;
      padding: 20px;
      line-height: 1.2;
      background: white;
      -webkit-print-color-adjust: exact;
      print-color-adjust: exact;
    }
    h1 { margin: 0 0 4px; font-size: 18px; font-weight: 700; color: #000; }
    .muted { color: var(--muted); font-size: 11px; margin-bottom: 8px; }
    .row { margin: 4px 0; }
    .box { border: 1px solid var(--border); border-radius: 6px; padding: 8px; margin-bottom: 8px; background: #f9f9f9; }
    ul { margin: 6px 0 8px; padding-left: 16px; }
    li { margin: 2px 0; font-size: 13px; color: #000; }
    .footer { margin-top: 8px; font-size: 10px; color: var(--muted); }
    @media print { .noprint { display: none; } }
    .actions { position: fixed; right: 8px; top: 8px; z-index: 1000; }
    .btn { font: inherit; font-size: 11px; padding: 4px 8px; border-radius: 6px; border: 1px solid #bbb; background: #f3f4f6; cursor: pointer; margin-left: 6px; }
"""


@dataclass
class PrintOptions:
    """인쇄 옵션

    Attributes:
        page: "A5" | "HalfLetter" | "Letter" | "HalfLetterLandscape"
        orientation: "portrait" | "landscape"
        margin: CSS margin (예: "14mm")
        title: 문서 제목 (기본값: 칵테일명)
        auto_print: 열리자마자 인쇄 대화상자 표시
    """

    page: str = "HalfLetterLandscape"
    orientation: str = "landscape"
    margin: str = "8mm"
    title: Optional[str] = None
    auto_print: bool = True


def compute_page_size(page: str, orientation: str) -> str:
    """CSS @page size 값"""
    landscape = orientation == "landscape"
    if page == "HalfLetterLandscape":
        # 8.5x11의 절반: 5.5" x 8.5"
        return "5.5in 8.5in"
    if page == "HalfLetter":
        return "8.5in 5.5in" if landscape else "5.5in 8.5in"
    if page == "Letter":
        return "Letter landscape" if landscape else "Letter"
    return "A5 landscape" if landscape else "A5"


def render_one_pager(cocktail: Cocktail, lines: List[str], options: Optional[PrintOptions] = None) -> str:
    """칵테일 한 장짜리 레시피 카드 HTML"""
    opts = options or PrintOptions()
    title = opts.title or cocktail.name
    specs = lines or [NO_INGREDIENTS]

    subtitle = escape_html(cocktail.method or "")
    if cocktail.glass:
        subtitle += " • " + escape_html(cocktail.glass)

    details = ""
    if cocktail.garnish:
        details += f"<div><strong>Garnish:</strong> {escape_html(cocktail.garnish)}</div>"
    if cocktail.notes:
        details += f'<div class="row"><strong>Notes:</strong> {escape_html(cocktail.notes)}</div>'

    footer = f"Price: {format_price(cocktail.price)}"
    if cocktail.last_special_on:
        footer += " • Special: " + escape_html(cocktail.last_special_on.isoformat())

    script = "setTimeout(() => { window.print() }, 50);" if opts.auto_print else ""
    style = _STYLE % {
        "page_size": compute_page_size(opts.page, opts.orientation),
        "margin": opts.margin,
    }
    items = "".join(f"<li>{escape_html(line)}</li>" for line in specs)

    return f"""<!doctype html>
<html>
<head>
  <meta charset="utf-8"/>
  <title>{escape_html(title)}</title>
  <style>{style}</style>
</head>
<body>
  <div class="actions noprint">
    <button class="btn" onclick="window.print()">Print</button>
    <button class="btn" onclick="window.close()">Close</button>
  </div>

  <h1>{escape_html(cocktail.name)}</h1>
  <div class="muted">{subtitle}</div>

  <div class="row box">
    <strong>Specs</strong>
    <ul>{items}</ul>
    {details}
  </div>

  <div class="footer">{footer}</div>

  <script>{script}</script>
</body>
</html>
"""
