"""Example of building charts in Python with chained customizers.

Usage:
    python examples/chain_example.py > charts.html

Each call returns a new model, so intermediate models can be reused to
derive variants without affecting each other.
"""

from chartkit import (
    hbar,
    merge_styles,
    pie,
    render,
    set_colours,
    set_title,
    to_html,
    vbar,
)

# =============================================================================
# Horizontal bars (values are appended to labels automatically)
# =============================================================================

languages = hbar([42, 31, 18], ["Python", "Go", "Rust"])
languages = set_title("Languages in use", languages)
languages = merge_styles(
    "chart", [("background-color", "seagreen"), ("padding", "5px")], languages
)

# =============================================================================
# Vertical bars, recoloured
# =============================================================================

rainfall = vbar([80, 65, 40, 30, 55], ["Jan", "Feb", "Mar", "Apr", "May"])
rainfall = set_colours(["#4A9BD3"], rainfall)
rainfall = set_title("Rainfall (mm)", rainfall)

# =============================================================================
# Pie with a custom palette that wraps after two slices
# =============================================================================

budget = pie([50, 30, 20], ["Rent", "Food", "Other"])
budget = set_colours(["#B7514D", "#F6A55E"], budget)
budget = set_title("Monthly budget", budget)

if __name__ == "__main__":
    for model in (languages, rainfall, budget):
        print(to_html(render(model)))
