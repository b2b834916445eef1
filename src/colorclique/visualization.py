"""
Plots of found cliques and of the search's improvement history.
"""

import networkx as nx
from typing import Iterable, List, Optional, Tuple

from .graph import Graph


def plot_clique(
    graph: Graph,
    clique: Iterable[int],
    save_path: Optional[str] = None,
    show_plot: bool = False,
    title: Optional[str] = None,
    figsize: Tuple[int, int] = (8, 6)
):
    """
    Draw the graph with the clique vertices and edges highlighted.

    Args:
        graph: The graph that was searched.
        clique: Vertices of the clique.
        save_path: Path to save the plot.
        show_plot: Whether to display the plot.
        title: Plot title (default: clique size).
        figsize: Figure size tuple.

    Returns:
        The matplotlib figure, or None if matplotlib is not available.
    """
    try:
        import matplotlib.pyplot as plt
    except ImportError:
        print("Matplotlib not available for plotting")
        return None

    members = set(clique)
    nx_graph = graph.to_networkx()

    fig = plt.figure(figsize=figsize)
    pos = nx.spring_layout(nx_graph, seed=42)
    node_colors = ['red' if node in members else 'lightblue' for node in nx_graph.nodes()]
    edge_colors = [
        'red' if u in members and v in members else 'lightgray'
        for u, v in nx_graph.edges()
    ]
    nx.draw(nx_graph, pos, with_labels=True, node_color=node_colors,
            edge_color=edge_colors, node_size=500, font_size=10)
    plt.title(title if title is not None else f"Clique (size {len(members)})")

    if save_path:
        plt.savefig(save_path, dpi=150, bbox_inches='tight')
    if show_plot:
        plt.show()
    return fig


def plot_search_history(
    history: List[int],
    save_path: Optional[str] = None,
    show_plot: bool = False,
    figsize: Tuple[int, int] = (10, 5)
):
    """
    Plot the best clique size after the initial construction and each round.

    Returns:
        The matplotlib figure, or None if matplotlib is not available.
    """
    try:
        import matplotlib.pyplot as plt
    except ImportError:
        print("Matplotlib not available for plotting")
        return None

    fig, ax = plt.subplots(figsize=figsize)
    ax.step(range(len(history)), history, where='post', color='blue', linewidth=2)
    ax.set_xlabel('Round')
    ax.set_ylabel('Best clique size')
    ax.set_title('Clique search progress')
    ax.grid(True, alpha=0.3)

    if save_path:
        plt.savefig(save_path, dpi=150, bbox_inches='tight')
    if show_plot:
        plt.show()
    return fig
