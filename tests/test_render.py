"""
Tests for the render-frame layer: view window, frame building, presentation.
"""

import io
import json

import pytest

from config import IndicatorsConfig
from domain import CandleColor, InvalidParameterError, OHLCBar
from domain.indicators import rolling_mean, typical_price
from orchestration import (
    ChartFrame,
    RenderOptions,
    build_frame,
    clamp_custom_window,
    grow_window,
    shrink_window,
    visible_window,
)
from presentation import format_frame_text, to_api_response, to_json, write_frame_text


# ============================================================================
# Fixtures
# ============================================================================

def _make_bars(n: int) -> list[OHLCBar]:
    bars = []
    for i in range(n):
        close = 100.0 + i + (0.5 if i % 3 == 0 else -0.5)
        open_ = 100.0 + i
        bars.append(OHLCBar(
            timestamp=1658361600 + 60 * i,
            open=open_,
            high=max(open_, close) + 1.0,
            low=min(open_, close) - 1.0,
            close=close,
        ))
    return bars


@pytest.fixture
def bars():
    return _make_bars(30)


# ============================================================================
# View window
# ============================================================================

class TestViewWindow:
    """Tests for visible window helpers."""

    def test_visible_window(self, bars):
        assert visible_window(bars, 10) == bars[:10]
        assert visible_window(bars, 100) == bars
        assert visible_window(bars, -3) == []

    def test_grow_saturates(self):
        assert grow_window(100, 5, 200) == 105
        assert grow_window(198, 5, 200) == 200

    def test_shrink_saturates(self):
        assert shrink_window(100, 5) == 95
        assert shrink_window(3, 5) == 0

    def test_clamp_custom_window(self):
        assert clamp_custom_window(25, 30) == 25
        assert clamp_custom_window(50, 30) == 30
        assert clamp_custom_window(4, 30) == 10

    def test_clamp_custom_window_too_few_bars(self):
        with pytest.raises(InvalidParameterError) as exc_info:
            clamp_custom_window(12, 5)
        assert exc_info.value.context["field"] == "custom_sma_window"


# ============================================================================
# Frame building
# ============================================================================

class TestBuildFrame:
    """Tests for build_frame."""

    def test_candles_only_by_default(self, bars):
        frame = build_frame(bars)
        assert frame.bar_count == 30
        assert len(frame.candles) == 30
        assert frame.candles[0].color == CandleColor.NEUTRAL
        assert frame.typical_price is None
        assert frame.sma == {}
        assert frame.bollinger is None
        assert frame.omitted == {}

    def test_empty_bars(self):
        frame = build_frame([], RenderOptions(show_typical_price=True, show_bollinger=True))
        assert frame.candles == []
        assert frame.typical_price == []
        assert frame.bollinger == []

    def test_typical_price_line(self, bars):
        frame = build_frame(bars, RenderOptions(show_typical_price=True))
        assert frame.typical_price == typical_price(bars)
        assert frame.sma == {}

    def test_sma_overlays(self, bars):
        options = RenderOptions(show_sma=True, sma_windows=[5, 10])
        frame = build_frame(bars, options)

        assert list(frame.sma) == [5, 10]
        assert frame.sma[5] == rolling_mean(typical_price(bars), 5)
        # Typical price is an input here, not a drawn line
        assert frame.typical_price is None

    def test_window_larger_than_view_is_all_none(self, bars):
        frame = build_frame(bars, RenderOptions(show_sma=True, sma_windows=[200]))
        assert frame.sma[200] == [None] * 30
        assert frame.omitted == {}

    def test_custom_window_added(self, bars):
        options = RenderOptions(show_sma=True, sma_windows=[5], custom_sma_window=12)
        frame = build_frame(bars, options)
        assert list(frame.sma) == [5]
        assert frame.custom_sma_window == 12
        assert frame.custom_sma == rolling_mean(typical_price(bars), 12)

    def test_custom_window_equal_to_configured(self, bars):
        options = RenderOptions(show_sma=True, sma_windows=[20], custom_sma_window=20)
        frame = build_frame(bars, options)
        # Configured line keeps its place; custom line is separate
        assert list(frame.sma) == [20]
        assert frame.custom_sma == frame.sma[20]

    def test_custom_window_clamped_to_view(self, bars):
        options = RenderOptions(show_sma=True, sma_windows=[], custom_sma_window=80)
        frame = build_frame(bars, options)
        assert frame.custom_sma_window == 30
        assert frame.custom_sma[-1] is not None

    def test_custom_window_omitted_with_few_bars(self):
        options = RenderOptions(show_sma=True, sma_windows=[2], custom_sma_window=12)
        frame = build_frame(_make_bars(5), options)
        assert list(frame.sma) == [2]
        assert frame.custom_sma is None
        assert "sma_custom" in frame.omitted

    def test_invalid_window_omits_only_that_overlay(self, bars):
        options = RenderOptions(show_sma=True, sma_windows=[0, 5], show_bollinger=True)
        frame = build_frame(bars, options)
        assert "sma_0" in frame.omitted
        assert list(frame.sma) == [5]
        assert len(frame.candles) == 30

    def test_bollinger_follows_first_sma_window(self, bars):
        options = RenderOptions(show_bollinger=True, sma_windows=[10, 20])
        frame = build_frame(bars, options)
        assert len(frame.bollinger) == 21
        assert frame.bollinger[0].index == 9.0

    def test_bollinger_follows_custom_window(self, bars):
        options = RenderOptions(show_bollinger=True, sma_windows=[10], custom_sma_window=15)
        frame = build_frame(bars, options)
        assert frame.bollinger[0].index == 14.0
        # Custom window alone does not draw an SMA line
        assert frame.sma == {}
        assert frame.custom_sma is None

    def test_bollinger_explicit_window(self, bars):
        options = RenderOptions(show_bollinger=True, bollinger_window=5, bollinger_std_devs=1.0)
        frame = build_frame(bars, options)
        assert len(frame.bollinger) == 26
        for p in frame.bollinger:
            assert p.upper >= p.lower

    def test_bollinger_not_enough_history(self):
        options = RenderOptions(show_bollinger=True, sma_windows=[20])
        frame = build_frame(_make_bars(10), options)
        assert frame.bollinger == []
        assert frame.omitted == {}

    def test_validate_bars(self, bars):
        broken = bars + [OHLCBar(timestamp=0, open=1, high=0.5, low=2, close=1)]
        with pytest.raises(InvalidParameterError):
            build_frame(broken, RenderOptions(validate_bars=True))
        # Not validated unless asked
        assert build_frame(broken).bar_count == 31

    def test_options_from_config(self):
        config = IndicatorsConfig(
            show_sma=True,
            sma_windows=[20, 50],
            custom_sma_window=33,
            bollinger_std_devs=2.5,
        )
        options = RenderOptions.from_config(config, validate=True)
        assert options.show_sma is True
        assert options.sma_windows == [20, 50]
        assert options.custom_sma_window == 33
        assert options.bollinger_std_devs == 2.5
        assert options.validate_bars is True
        assert options.needs_typical_price is True


# ============================================================================
# Presentation
# ============================================================================

class TestPresentation:
    """Tests for JSON and text output."""

    def test_to_json(self, bars):
        options = RenderOptions(
            show_typical_price=True,
            show_sma=True,
            sma_windows=[5],
            custom_sma_window=10,
            show_bollinger=True,
        )
        data = to_json(build_frame(bars, options))

        assert data["bar_count"] == 30
        assert data["candles"][0]["color"] == "neutral"
        assert data["typical_price"]["name"] == "typical_price"
        assert [line["name"] for line in data["sma"]] == ["sma_5", "sma_custom_10"]
        assert data["sma"][0]["values"][:4] == [None] * 4
        # Bands follow the custom window
        assert len(data["bollinger"]) == 21
        # Must survive a JSON round trip
        assert json.loads(json.dumps(data)) == data

    def test_to_api_response_defaults(self, bars):
        response = to_api_response(build_frame(bars))
        assert response.typical_price is None
        assert response.bollinger is None
        assert response.sma == []

    def test_text_summary(self, bars):
        options = RenderOptions(show_sma=True, sma_windows=[0, 5], show_bollinger=True)
        text = format_frame_text(build_frame(bars, options), tail=3)

        assert "Bars: 30" in text
        assert "sma_5" in text
        assert "Omitted sma_0" in text
        assert "bb_upper" in text
        # Header + 3 rows after the blank line
        table = text.strip().split("\n\n")[1].splitlines()
        assert len(table) == 4
        assert table[-1].startswith("29")

    def test_custom_window_keeps_configured_label(self, bars):
        options = RenderOptions(show_sma=True, sma_windows=[20], custom_sma_window=20)
        frame = build_frame(bars, options)

        data = to_json(frame)
        assert [line["name"] for line in data["sma"]] == ["sma_20", "sma_custom_20"]

        text = format_frame_text(frame)
        assert "Overlays: sma_20, sma_custom_20" in text

    def test_write_frame_text_to_stream(self, bars):
        frame = build_frame(bars, RenderOptions(show_sma=True, sma_windows=[5]))
        out = io.StringIO()

        content = write_frame_text(frame, output=out, tail=2)
        assert out.getvalue() == content
        assert content == format_frame_text(frame, tail=2)

    def test_write_frame_text_to_file(self, bars, tmp_path):
        frame = build_frame(bars)
        target = tmp_path / "frame.txt"

        content = write_frame_text(frame, filepath=str(target), tail=1)
        assert target.read_text() == content
        assert content.startswith("Bars: 30\n")

    def test_write_frame_text_defaults_to_stdout(self, bars, capsys):
        write_frame_text(build_frame(bars), tail=1)
        assert capsys.readouterr().out.startswith("Bars: 30\n")

    def test_text_empty_frame(self):
        text = format_frame_text(ChartFrame(bar_count=0))
        assert text == "Bars: 0\nOverlays: none\n"
