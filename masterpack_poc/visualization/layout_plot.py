"""
Plotly-based 3D visualisation of inner packs stacked inside the master carton.
"""

from __future__ import annotations

from pathlib import Path
from typing import List, Tuple

import plotly.graph_objects as go
import plotly.io as pio

from masterpack_poc.core.planner import CalculationResult
from masterpack_poc.core.utils_geometry import Orientation, Placement, grid_placements
from masterpack_poc.models.dimensions import Arrangement

# (vertex indices, colour, ambient light) per face; top, front and right are lit brighter
_FACES: Tuple[Tuple[Tuple[int, int, int, int], str, float], ...] = (
    ((4, 5, 6, 7), "#4ade80", 0.7),
    ((0, 1, 5, 4), "#60a5fa", 0.7),
    ((1, 2, 6, 5), "#f87171", 0.7),
    ((2, 3, 7, 6), "#22c55e", 0.6),
    ((3, 0, 4, 7), "#3b82f6", 0.6),
    ((0, 3, 2, 1), "#ef4444", 0.6),
)

_EDGES = (
    (0, 1), (1, 2), (2, 3), (3, 0),
    (4, 5), (5, 6), (6, 7), (7, 4),
    (0, 4), (1, 5), (2, 6), (3, 7),
)

_AXIS_STYLE = dict(
    backgroundcolor="#f2f5fb",
    gridcolor="#cbd5e0",
    zerolinecolor="#a0aec0",
)


def _prism_vertices(
    x: float, y: float, z: float, dx: float, dy: float, dz: float
) -> Tuple[List[float], List[float], List[float]]:
    xs = [x, x + dx, x + dx, x, x, x + dx, x + dx, x]
    ys = [y, y, y + dy, y + dy, y, y, y + dy, y + dy]
    zs = [z, z, z, z, z + dz, z + dz, z + dz, z + dz]
    return xs, ys, zs


def _solid_prism(placement: Placement, name: str, opacity: float = 1.0) -> List[go.Mesh3d]:
    dx, dy, dz = placement.orientation
    xs, ys, zs = _prism_vertices(placement.x, placement.y, placement.z, dx, dy, dz)
    return [
        go.Mesh3d(
            x=[xs[v] for v in vertices],
            y=[ys[v] for v in vertices],
            z=[zs[v] for v in vertices],
            i=[0, 0],
            j=[1, 2],
            k=[2, 3],
            color=color,
            opacity=opacity,
            name=name,
            showscale=False,
            flatshading=True,
            lighting=dict(ambient=ambient, diffuse=0.9, specular=0.1),
            hoverinfo="skip",
        )
        for vertices, color, ambient in _FACES
    ]


def _wireframe(
    x: float,
    y: float,
    z: float,
    dims: Orientation,
    name: str,
    color: str,
    width: float,
    showlegend: bool,
) -> go.Scatter3d:
    xs, ys, zs = _prism_vertices(x, y, z, *dims)
    x_coords: List[float | None] = []
    y_coords: List[float | None] = []
    z_coords: List[float | None] = []
    for start, end in _EDGES:
        x_coords.extend([xs[start], xs[end], None])
        y_coords.extend([ys[start], ys[end], None])
        z_coords.extend([zs[start], zs[end], None])

    return go.Scatter3d(
        x=x_coords,
        y=y_coords,
        z=z_coords,
        mode="lines",
        line=dict(color=color, width=width),
        name=name,
        showlegend=showlegend,
        hoverinfo="skip",
    )


def _payload_orientation(result: CalculationResult) -> Tuple[Orientation, Arrangement]:
    """Inner pack size and master grid, turned on the base for rotated picks."""
    inner = result.inner_box_dims
    grid = result.master_arrangement
    if result.rotated:
        return (inner.width, inner.length, inner.height), Arrangement(l=grid.w, w=grid.l, h=grid.h)
    return inner.dimensions, grid


def nested_pack_placements(
    result: CalculationResult,
    include_products: bool = False,
) -> List[Placement]:
    """
    Lay out every inner pack inside the master carton from the origin corner.

    With ``include_products`` the products of each inner pack are appended
    after the inner packs, centred in the wall allowance.
    """
    cell, grid = _payload_orientation(result)
    placements = grid_placements(grid, cell)
    if not include_products:
        return placements

    inner_grid = result.inner_arrangement
    if result.rotated:
        inner_grid = Arrangement(l=inner_grid.w, w=inner_grid.l, h=inner_grid.h)
    wall = result.inner_wall_thickness
    product = tuple(
        _safe_div(size - wall, count) for size, count in zip(cell, inner_grid.as_tuple())
    )
    products: List[Placement] = []
    for pack in placements:
        origin = (pack.x + wall / 2.0, pack.y + wall / 2.0, pack.z + wall / 2.0)
        products.extend(
            grid_placements(inner_grid, product, origin, start_index=len(placements) + len(products))
        )
    return placements + products


def _safe_div(value: float, count: int) -> float:
    return value / count if count else 0.0


def packing_figure(result: CalculationResult, title: str = "Inner Packs inside Master Carton") -> go.Figure:
    fig = go.Figure()
    box = result.box
    fig.add_trace(
        _wireframe(0, 0, 0, box.dimensions, name=box.id, color="#2d3748", width=4, showlegend=True)
    )
    for placement in nested_pack_placements(result):
        name = f"Inner Pack {placement.item_index + 1}"
        for trace in _solid_prism(placement, name=name):
            fig.add_trace(trace)
        fig.add_trace(
            _wireframe(
                placement.x,
                placement.y,
                placement.z,
                placement.orientation,
                name=name,
                color="#000000",
                width=2.5,
                showlegend=False,
            )
        )

    fig.update_layout(
        title=title,
        scene=dict(
            xaxis_title="Length",
            yaxis_title="Width",
            zaxis_title="Height",
            aspectmode="data",
            xaxis=_AXIS_STYLE,
            yaxis=_AXIS_STYLE,
            zaxis=_AXIS_STYLE,
        ),
        paper_bgcolor="#f7f9fc",
        plot_bgcolor="#f7f9fc",
        legend=dict(
            bgcolor="rgba(255,255,255,0.8)",
            bordercolor="#cbd5e0",
            borderwidth=1,
        ),
        margin=dict(l=0, r=0, t=40, b=0),
    )
    return fig


def save_figure_image(fig: go.Figure, output_path: str | Path, width: int = 900, height: int = 650) -> None:
    """
    Persist a figure to disk as a static PNG using Kaleido.
    """
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    pio.write_image(fig, str(output_path), format="png", width=width, height=height, scale=2)
