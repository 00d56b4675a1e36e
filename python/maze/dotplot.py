"""
Dotplot rendering for maze comparisons.

Provides the DotPlotter class for drawing the forward and
reverse-complement hits of a :class:`~maze.compare.ComparisonResult`
with matplotlib.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Union

import matplotlib.collections as mcollections
import matplotlib.figure
import matplotlib.pyplot as plt

from maze.compare import ComparisonResult
from maze.matches import Hit, HitSet

_log = logging.getLogger(__name__)

View = tuple[float, float, float, float]


class DotPlotter:
    """Draw a dot plot of one reference/query comparison.

    The reference runs along the x axis (ticks on top) and the query along
    the y axis, increasing downward.  Each forward hit is a segment from
    ``(reference_start, query_start)`` to ``(reference_end, query_end)``;
    each reverse-complement hit is drawn on the anti-diagonal from
    ``(reference_start, query_end)`` to ``(reference_end, query_start)``.

    Parameters
    ----------
    result : ComparisonResult
        The comparison to draw.

    Examples
    --------
    >>> from maze.compare import compare
    >>> from maze.dotplot import DotPlotter
    >>> result = compare('ACGTACGTTTGCA', 'ACGTACGTTTGCA', k=4)
    >>> plotter = DotPlotter(result)
    >>> fig = plotter.plot(output_path="dotplot.png")  # save to file
    >>> fig = plotter.plot(view=(0, 6, 0, 6))  # zoom into the top-left corner
    """

    def __init__(self, result: ComparisonResult) -> None:
        self.result = result

    @property
    def reference_length(self) -> int:
        return len(self.result.reference)

    @property
    def query_length(self) -> int:
        return len(self.result.query)

    def visible_hits(self, view: Optional[View] = None) -> HitSet:
        """Return the hits to draw for *view*.

        Parameters
        ----------
        view : tuple of float, optional
            ``(x0, x1, y0, y1)`` window in reference (x) and query (y)
            coordinates.  ``None`` means the whole plot.

        Returns
        -------
        HitSet
            All hits, or those overlapping *view*.
        """
        if view is None:
            return self.result.hits
        x0, x1, y0, y1 = view
        return self.result.hits.within(
            (min(x0, x1), max(x0, x1)), (min(y0, y1), max(y0, y1))
        )

    def plot(
        self,
        output_path: Optional[Union[str, Path]] = None,
        figsize: tuple[float, float] = (6.0, 6.0),
        line_width: float = 0.5,
        forward_color: str = 'dodgerblue',
        reverse_color: str = 'red',
        show_forward: bool = True,
        show_reverse: bool = True,
        reference_label: str = 'Sequence 1',
        query_label: str = 'Sequence 2',
        title: Optional[str] = None,
        view: Optional[View] = None,
        dpi: int = 150,
        format: Optional[str] = None,
    ) -> matplotlib.figure.Figure:
        """Plot the comparison.

        The figure is always returned so it can be displayed inline in a
        Jupyter notebook.  When ``output_path`` is provided the figure is
        also saved to disk.

        Parameters
        ----------
        output_path : str or Path, optional
            Output image file path.  When ``None`` (default) the figure is
            not saved to disk.  Use a ``.svg`` extension (or set
            ``format='svg'``) to produce an SVG vector image.
        figsize : tuple[float, float], optional
            Figure size as (width, height) in inches.  Default is
            ``(6, 6)``.
        line_width : float, optional
            Width of each hit segment.  Default is ``0.5``.
        forward_color : str, optional
            Colour for forward-strand (``+``) hits.  Default is
            ``"dodgerblue"``.
        reverse_color : str, optional
            Colour for reverse-complement (``-``) hits.  Default is
            ``"red"``.
        show_forward : bool, optional
            Draw forward hits.  Default is ``True``.
        show_reverse : bool, optional
            Draw reverse-complement hits.  Default is ``True``.
        reference_label : str, optional
            x-axis label.  Default is ``"Sequence 1"``.
        query_label : str, optional
            y-axis label.  Default is ``"Sequence 2"``.
        title : str, optional
            Plot title.  If ``None``, ``"<reference id> vs <query id>"`` is
            used when both sequences carry an identifier.
        view : tuple of float, optional
            ``(x0, x1, y0, y1)`` zoom window in sequence coordinates.
            Hits that do not overlap the window are skipped, so the
            visible picture is the same as the full plot cropped to
            those limits.  Default is the whole plot.
        dpi : int, optional
            Output image resolution.  Default is ``150``.
        format : str, optional
            Output image format (e.g. ``'png'``, ``'svg'``, ``'pdf'``).
            When ``None`` (default), the format is inferred from the
            ``output_path`` file extension.

        Returns
        -------
        matplotlib.figure.Figure
            The generated figure.  Call ``matplotlib.pyplot.close`` on it
            when it is no longer needed.
        """
        fig, ax = plt.subplots(figsize=figsize)
        self._plot_panel(
            ax,
            line_width=line_width,
            forward_color=forward_color,
            reverse_color=reverse_color,
            show_forward=show_forward,
            show_reverse=show_reverse,
            reference_label=reference_label,
            query_label=query_label,
            view=view,
        )

        if title is None:
            ref_id = self.result.reference.id
            query_id = self.result.query.id
            title = f'{ref_id} vs {query_id}' if ref_id and query_id else None
        if title:
            fig.suptitle(title, fontsize=10)

        plt.tight_layout()
        if output_path is not None:
            plt.savefig(str(output_path), dpi=dpi, bbox_inches='tight', format=format)
            _log.debug('Saved dot plot to %s', output_path)
        return fig

    def _plot_panel(
        self,
        ax: plt.Axes,
        line_width: float = 0.5,
        forward_color: str = 'dodgerblue',
        reverse_color: str = 'red',
        show_forward: bool = True,
        show_reverse: bool = True,
        reference_label: str = 'Sequence 1',
        query_label: str = 'Sequence 2',
        view: Optional[View] = None,
    ) -> None:
        """Render the hit segments, axes and frame onto *ax*."""
        ref_len = self.reference_length
        query_len = self.query_length

        if view is not None:
            x0, x1, y0, y1 = view
            outside_x = max(x0, x1) <= 0 or min(x0, x1) >= ref_len
            outside_y = max(y0, y1) <= 0 or min(y0, y1) >= query_len
            if outside_x or outside_y:
                _log.warning(
                    'View %r lies outside the %d x %d plot; nothing will be visible.',
                    view,
                    ref_len,
                    query_len,
                )
        hits = self.visible_hits(view)

        if show_forward:
            ax.add_collection(
                self._hit_collection(hits.forward, forward_color, line_width, 'forward')
            )
        if show_reverse:
            ax.add_collection(
                self._hit_collection(hits.reverse, reverse_color, line_width, 'reverse')
            )

        # Right and bottom frame lines.
        ax.plot([ref_len, ref_len], [0, query_len], color='black', linewidth=0.8)
        ax.plot([0, ref_len], [query_len, query_len], color='black', linewidth=0.8)

        if view is None:
            ax.set_xlim(0, ref_len)
            ax.set_ylim(0, query_len)
        else:
            x0, x1, y0, y1 = view
            ax.set_xlim(min(x0, x1), max(x0, x1))
            ax.set_ylim(min(y0, y1), max(y0, y1))
        ax.invert_yaxis()

        ax.xaxis.tick_top()
        ax.xaxis.set_label_position('top')
        ax.set_xlabel(reference_label, fontsize=8)
        ax.set_ylabel(query_label, fontsize=8)
        ax.tick_params(axis='both', labelsize=6)
        ax.set_aspect('auto')

    @staticmethod
    def _hit_collection(
        hits: tuple[Hit, ...], color: str, line_width: float, label: str
    ) -> mcollections.LineCollection:
        return mcollections.LineCollection(
            [hit.segment() for hit in hits],
            colors=color,
            linewidths=line_width,
            alpha=0.7,
            label=label,
        )
