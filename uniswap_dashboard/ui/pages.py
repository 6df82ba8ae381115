from __future__ import annotations

from html import escape


PAGE_TITLE = "Uniswap Dashboard"


def render_page(body: str, *, title: str = PAGE_TITLE) -> str:
    return (
        "<!DOCTYPE html>"
        '<html lang="en"><head><meta charset="utf-8">'
        f"<title>{escape(title)}</title></head>"
        "<body><main>"
        '<nav><a href="/">Home</a> <a href="/pool">Pool</a> <a href="/factories">Factories</a></nav>'
        f"{body}"
        "</main></body></html>"
    )


def render_home() -> str:
    return render_page(
        f"<h1>{escape(PAGE_TITLE)}</h1>"
        "<p>Welcome to your Uniswap analytics dashboard</p>"
    )
