"""Tests for the dotplot visualization module."""

import logging
import os

import matplotlib.colors as mcolors
import matplotlib.figure
import matplotlib.pyplot as plt
import pytest

from maze.compare import compare
from maze.dotplot import DotPlotter
from tests.test_data import SEQ_A, SEQ_B


@pytest.fixture
def dotplot_result():
    """A comparison with both forward and reverse hits."""
    return compare(SEQ_A, SEQ_B, 4)


def _collection(fig, label):
    ax = fig.axes[0]
    matches = [c for c in ax.collections if c.get_label() == label]
    return matches[0] if matches else None


def test_dotplotter_creation(dotplot_result):
    """Test DotPlotter can be created."""
    plotter = DotPlotter(dotplot_result)
    assert plotter.result is dotplot_result
    assert plotter.reference_length == len(SEQ_A)
    assert plotter.query_length == len(SEQ_B)


def test_plot_returns_figure(dotplot_result):
    fig = DotPlotter(dotplot_result).plot()
    assert isinstance(fig, matplotlib.figure.Figure)
    plt.close(fig)


def test_plot_png(dotplot_result, tmp_path):
    """Test dotplot generation to a PNG file."""
    output = str(tmp_path / 'dotplot.png')
    fig = DotPlotter(dotplot_result).plot(output_path=output)
    plt.close(fig)
    assert os.path.exists(output)
    assert os.path.getsize(output) > 0


def test_plot_svg(dotplot_result, tmp_path):
    """The output format follows the file extension."""
    output = str(tmp_path / 'dotplot.svg')
    fig = DotPlotter(dotplot_result).plot(output_path=output)
    plt.close(fig)
    with open(output) as f:
        content = f.read(200)
    assert '<svg' in content or '<?xml' in content


def test_plot_explicit_format(dotplot_result, tmp_path):
    output = str(tmp_path / 'dotplot.out')
    fig = DotPlotter(dotplot_result).plot(output_path=output, format='pdf')
    plt.close(fig)
    with open(output, 'rb') as f:
        assert f.read(4) == b'%PDF'


def test_one_segment_per_hit(dotplot_result):
    fig = DotPlotter(dotplot_result).plot()
    forward = _collection(fig, 'forward')
    reverse = _collection(fig, 'reverse')
    assert len(forward.get_segments()) == len(dotplot_result.forward)
    assert len(reverse.get_segments()) == len(dotplot_result.reverse)
    assert len(dotplot_result.forward) > 0
    assert len(dotplot_result.reverse) > 0
    plt.close(fig)


def test_segment_orientation(dotplot_result):
    """Forward hits run along the diagonal, reverse hits along the anti-diagonal."""
    fig = DotPlotter(dotplot_result).plot()
    fwd_seg = _collection(fig, 'forward').get_segments()[0]
    rev_seg = _collection(fig, 'reverse').get_segments()[0]
    fwd_hit = dotplot_result.forward[0]
    rev_hit = dotplot_result.reverse[0]
    assert [tuple(p) for p in fwd_seg] == [
        (fwd_hit.reference_start, fwd_hit.query_start),
        (fwd_hit.reference_end, fwd_hit.query_end),
    ]
    assert [tuple(p) for p in rev_seg] == [
        (rev_hit.reference_start, rev_hit.query_end),
        (rev_hit.reference_end, rev_hit.query_start),
    ]
    plt.close(fig)


def test_default_colours(dotplot_result):
    fig = DotPlotter(dotplot_result).plot()
    forward_rgba = _collection(fig, 'forward').get_color()[0]
    reverse_rgba = _collection(fig, 'reverse').get_color()[0]
    assert mcolors.to_hex(forward_rgba) == mcolors.to_hex('dodgerblue')
    assert mcolors.to_hex(reverse_rgba) == mcolors.to_hex('red')
    plt.close(fig)


def test_custom_colours(dotplot_result):
    fig = DotPlotter(dotplot_result).plot(forward_color='green', reverse_color='orange')
    forward_rgba = _collection(fig, 'forward').get_color()[0]
    assert mcolors.to_hex(forward_rgba) == mcolors.to_hex('green')
    plt.close(fig)


def test_hide_reverse_strand(dotplot_result):
    fig = DotPlotter(dotplot_result).plot(show_reverse=False)
    assert _collection(fig, 'reverse') is None
    assert _collection(fig, 'forward') is not None
    plt.close(fig)


def test_axes_layout(dotplot_result):
    """Reference on top x axis, query increasing downward."""
    fig = DotPlotter(dotplot_result).plot()
    ax = fig.axes[0]
    assert ax.get_xlim() == (0, len(SEQ_A))
    assert ax.yaxis_inverted()
    assert ax.get_ylim() == (len(SEQ_B), 0)
    assert ax.get_xlabel() == 'Sequence 1'
    assert ax.get_ylabel() == 'Sequence 2'
    plt.close(fig)


def test_default_title(dotplot_result):
    fig = DotPlotter(dotplot_result).plot()
    assert fig._suptitle.get_text() == 'Reference vs Query'
    plt.close(fig)


def test_custom_labels_and_title(dotplot_result):
    fig = DotPlotter(dotplot_result).plot(
        reference_label='chr1', query_label='chr2', title='My plot'
    )
    ax = fig.axes[0]
    assert ax.get_xlabel() == 'chr1'
    assert ax.get_ylabel() == 'chr2'
    assert fig._suptitle.get_text() == 'My plot'
    plt.close(fig)


def test_view_sets_limits_and_filters_hits(dotplot_result):
    view = (0, 6, 0, 6)
    plotter = DotPlotter(dotplot_result)
    fig = plotter.plot(view=view)
    ax = fig.axes[0]
    assert ax.get_xlim() == (0, 6)
    assert ax.get_ylim() == (6, 0)
    expected = dotplot_result.hits.within((0, 6), (0, 6))
    assert plotter.visible_hits(view) == expected
    assert len(_collection(fig, 'forward').get_segments()) == len(expected.forward)
    assert len(expected.forward) < len(dotplot_result.forward)
    plt.close(fig)


def test_view_keeps_hits_crossing_the_edge():
    """A hit that only partly overlaps the window is still drawn."""
    result = compare('ACGTACGT', 'ACGTACGT', 4)
    view = (3, 5, 3, 5)
    plotter = DotPlotter(result)
    visible = plotter.visible_hits(view)
    assert (0, 0) in visible.pairs('+')
    assert (4, 4) in visible.pairs('+')
    fig = plotter.plot(view=view)
    assert len(_collection(fig, 'forward').get_segments()) == len(visible.forward)
    plt.close(fig)


def test_view_outside_plot_warns(dotplot_result, caplog):
    with caplog.at_level(logging.WARNING, logger='maze.dotplot'):
        fig = DotPlotter(dotplot_result).plot(view=(100, 200, 0, 5))
    plt.close(fig)
    assert any('outside' in msg for msg in caplog.messages)


def test_plot_without_hits(tmp_path):
    result = compare('AAAAAAAA', 'CCCCCCCC', 3)
    output = str(tmp_path / 'empty.png')
    fig = DotPlotter(result).plot(output_path=output)
    assert len(_collection(fig, 'forward').get_segments()) == 0
    plt.close(fig)
    assert os.path.exists(output)
