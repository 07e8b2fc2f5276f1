"""Generate a bar chart of simulated wins per seat."""

from __future__ import annotations

import matplotlib
matplotlib.use("Agg")  # non-interactive backend

import matplotlib.pyplot as plt


def make_wins_chart(
    wins: dict[str, int],
    output_path: str = "goose_wins.png",
    title: str = "Goose Race Wins per Seat",
) -> str:
    """Create a horizontal bar chart of win counts in seat order.

    Returns the path to the saved PNG.
    """
    names = list(wins)
    counts = [wins[name] for name in names]
    total = sum(counts) or 1

    fig, ax = plt.subplots(figsize=(10, max(3, len(names) * 0.7)))
    bars = ax.barh(names, counts, color="#4A90D9", edgecolor="white")

    # Annotate bars with count and share of games
    for bar, count in zip(bars, counts):
        ax.text(
            bar.get_width() + 0.5, bar.get_y() + bar.get_height() / 2,
            f"{count} ({count / total:.0%})",
            va="center", fontsize=11, fontweight="bold",
        )

    ax.set_xlabel("Games won")
    ax.set_title(title, fontsize=14, fontweight="bold")
    ax.invert_yaxis()  # first seat on top
    ax.set_xlim(left=0, right=max(counts, default=0) * 1.2 + 1)

    plt.tight_layout()
    fig.savefig(output_path, dpi=150)
    plt.close(fig)
    return output_path
