import numpy as np
import plotly.graph_objects as go
from typing import List, Optional, Sequence

from .boundary import AngleLine
from .config import CANVAS_HEIGHT, CANVAS_WIDTH

POSITIVE_COLOR = '#2ca02c'
NEGATIVE_COLOR = '#d62728'
LINE_COLOR = '#FF6B35'
POINT_COLOR = '#004E89'


class CanvasFigures:
    """Plotly stand-ins for the drawing canvas."""

    @staticmethod
    def _canvas_layout(fig: go.Figure, title: str) -> go.Figure:
        # screen coordinates: y grows downwards
        fig.update_layout(
            title=title,
            xaxis=dict(range=[0, CANVAS_WIDTH], showgrid=False, zeroline=False),
            yaxis=dict(range=[CANVAS_HEIGHT, 0], showgrid=False, zeroline=False,
                       scaleanchor='x', scaleratio=1),
            height=CANVAS_HEIGHT,
            showlegend=False,
            plot_bgcolor='rgba(0,0,0,0)'
        )
        return fig

    @staticmethod
    def create_regression_canvas(points: np.ndarray, curve: Optional[np.ndarray] = None,
                                 iterations_left: Optional[int] = None) -> go.Figure:
        """Points plus the current regression curve."""
        fig = go.Figure()
        fig.add_trace(go.Scatter(
            x=points[:, 0],
            y=points[:, 1],
            mode='markers',
            marker=dict(color=POINT_COLOR, size=10, opacity=0.8, line=dict(width=1, color='white')),
            name='Points',
            hovertemplate='x: %{x:.1f}<br>y: %{y:.1f}<extra></extra>'
        ))

        if curve is not None and len(curve) > 1:
            fig.add_trace(go.Scatter(
                x=curve[:, 0],
                y=curve[:, 1],
                mode='lines',
                line=dict(color=LINE_COLOR, width=3),
                name='Regression'
            ))

        title = "Regression" if iterations_left is None else f"Iterations Left: {iterations_left}"
        return CanvasFigures._canvas_layout(fig, title)

    @staticmethod
    def create_classifier_canvas(points: np.ndarray, labels: np.ndarray,
                                 curves: Sequence[np.ndarray] = (),
                                 iterations_left: Optional[int] = None) -> go.Figure:
        """Both classes plus every boundary branch."""
        fig = go.Figure()
        for label, color, name in ((1, POSITIVE_COLOR, 'Class +1'), (-1, NEGATIVE_COLOR, 'Class -1')):
            mask = labels == label
            fig.add_trace(go.Scatter(
                x=points[mask, 0],
                y=points[mask, 1],
                mode='markers',
                marker=dict(color=color, size=10, opacity=0.8, line=dict(width=1, color='white')),
                name=name
            ))

        for i, curve in enumerate(curves):
            fig.add_trace(go.Scatter(
                x=curve[:, 0],
                y=curve[:, 1],
                mode='lines',
                line=dict(color=LINE_COLOR, width=3),
                name=f'Boundary {i + 1}'
            ))

        title = "Perceptron" if iterations_left is None else f"Iterations Left: {iterations_left}"
        return CanvasFigures._canvas_layout(fig, title)

    @staticmethod
    def create_cost_figure(cost_history: List[float]) -> go.Figure:
        """Cost per iteration, for display only."""
        fig = go.Figure()
        fig.add_trace(go.Scatter(
            x=list(range(1, len(cost_history) + 1)),
            y=cost_history,
            mode='lines',
            line=dict(color=LINE_COLOR, width=2),
            name='Cost'
        ))
        fig.update_layout(
            title="Cost Function Progress",
            xaxis_title="Iteration",
            yaxis_title="Cost",
            height=250
        )
        return fig

    @staticmethod
    def create_line_canvas(line: AngleLine, center: Sequence[float]) -> go.Figure:
        """Axes through the center, the line, and the perpendicular from the center."""
        fig = go.Figure()
        cx, cy = center
        for xs, ys in (([0, CANVAS_WIDTH], [cy, cy]), ([cx, cx], [0, CANVAS_HEIGHT])):
            fig.add_trace(go.Scatter(x=xs, y=ys, mode='lines', line=dict(color='green', width=2)))

        fig.add_trace(go.Scatter(
            x=[line.start[0], line.end[0]],
            y=[line.start[1], line.end[1]],
            mode='lines',
            line=dict(color='blue', width=3),
            name='Line'
        ))
        fig.add_trace(go.Scatter(
            x=[cx, line.foot[0]],
            y=[cy, line.foot[1]],
            mode='lines',
            line=dict(color='black', width=1),
            name='Distance'
        ))
        return CanvasFigures._canvas_layout(fig, "Equation of a Line")
