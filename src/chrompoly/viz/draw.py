from __future__ import annotations

import networkx as nx
import matplotlib.pyplot as plt

from chrompoly.pipeline import ChromaticResult
from chrompoly.polynomial.format import polynomial_to_text
from .layouts import lattice_layout, lattice_to_nx


def draw_lattice(
    result: ChromaticResult,
    *,
    node_size: int = 600,
    font_size: int = 8,
    max_nodes_to_draw: int = 300,
    show_mobius: bool = True,
    save_path: str | None = None,
):
    """
    Draw the Hasse diagram of a computed lattice, one row per block count,
    with the chromatic polynomial as title.

    If save_path is set the figure is written there and closed, otherwise
    shown.  Returns the diagram as a networkx DiGraph.
    """
    H = lattice_to_nx(result.lattice, result.mobius)

    fig, ax = plt.subplots(figsize=(10, 7))
    ax.set_axis_off()
    ax.set_title(f"P(x) = {polynomial_to_text(result.coefficients)}   ({H.number_of_nodes()} submaps)")

    if H.number_of_nodes() <= max_nodes_to_draw:
        if show_mobius:
            labels = {v: f"{d['label']}\n{d['mobius']}" for v, d in H.nodes(data=True)}
        else:
            labels = {v: d["label"] for v, d in H.nodes(data=True)}
        nx.draw_networkx(
            H,
            pos=lattice_layout(H),
            ax=ax,
            labels=labels,
            node_size=node_size,
            font_size=font_size,
            node_color="#dde6f5",
            arrows=False,
        )
    else:
        ax.text(
            0.5,
            0.5,
            f"Too large to draw\n({H.number_of_nodes()} submaps)",
            ha="center",
            va="center",
            transform=ax.transAxes,
        )

    plt.tight_layout()
    if save_path:
        plt.savefig(save_path, dpi=150)
        plt.close(fig)
    else:
        plt.show()
    return H
