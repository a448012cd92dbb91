"""Tests for the default line chart renderer."""

from chartkit.charts import line_chart, merge_styles
from chartkit.line import polyline_points, render_line_chart


class TestPolylinePoints:
    """Test point scaling."""

    def test_spread_and_scale(self) -> None:
        """Test that points span the box and scale against the largest value."""
        assert polyline_points([0, 5, 10]) == "0,100 50,50 100,0"

    def test_fractional_points(self) -> None:
        """Test fractional coordinates."""
        assert polyline_points([2, 8, 4, 8, 8]) == "0,75 25,0 50,50 75,0 100,0"

    def test_single_point(self) -> None:
        """Test that a single point sits at the left edge."""
        assert polyline_points([3]) == "0,0"

    def test_all_zero(self) -> None:
        """Test that all-zero data lies on the baseline."""
        assert polyline_points([0, 0]) == "0,100 100,100"

    def test_empty(self) -> None:
        """Test that no data yields no points."""
        assert polyline_points([]) == ""


class TestRenderLineChart:
    """Test the line chart plot and legend."""

    def test_structure(self) -> None:
        """Test plot and legend regions."""
        model = line_chart([1, 2, 3], ["Jan", "Feb", "Mar"])
        plot, legend = render_line_chart(model, model.styles.get)
        assert plot.tag == "svg"
        assert plot.region == "chart"
        assert plot.attr("preserveAspectRatio") == "none"
        assert plot.children[0].region == "chart-elements"
        assert legend.region == "legend"
        assert [label.text for label in legend.children] == ["Jan", "Feb", "Mar"]

    def test_uses_style_lookup(self) -> None:
        """Test that styles come from the supplied lookup."""
        model = merge_styles("chart-elements", [("stroke", "firebrick")], line_chart([1], ["a"]))
        plot, _ = render_line_chart(model, model.styles.get)
        polyline = plot.children[0]
        assert polyline.style[0] == ("stroke", "firebrick")
