"""
Plotly charts for benchmark results.
"""

from __future__ import annotations

from pathlib import Path

import plotly.graph_objects as go

from pathbench.benchmark.runner import ExperimentResult


def create_timing_chart(results: list[ExperimentResult]) -> go.Figure:
    """Grouped bar chart of search time per experiment."""
    labels = [f"{r.source} (V={r.vertex_count})" for r in results]

    fig = go.Figure(data=[
        go.Bar(
            name="Dijkstra",
            x=labels,
            y=[r.dijkstra.elapsed_us for r in results],
            marker_color="#2ecc71",
        ),
        go.Bar(
            name="Bellman-Ford",
            x=labels,
            y=[r.bellman_ford.elapsed_us for r in results],
            marker_color="#3498db",
        ),
    ])

    fig.update_layout(
        title="Shortest-Path Search Time",
        yaxis_title="Time (µs)",
        barmode="group",
        height=380,
        margin=dict(t=45, b=70, l=60, r=15),
    )
    fig.update_xaxes(tickangle=45, tickfont=dict(size=9))
    return fig


def save_chart(fig: go.Figure, output_path: Path) -> Path:
    """Write a chart as a standalone HTML file."""
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    fig.write_html(output_path)
    return output_path
