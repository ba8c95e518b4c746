"""Graphviz descriptions of a social network and their rendering to PNG."""

from __future__ import annotations

import math
import os
import subprocess
from pathlib import Path
from typing import Iterator, Optional

from .network import MAX_FRIENDS, SocialNetwork
from .rbtree import Color, RBNode

COMMUNITY_COLORS = ("lightblue", "lightgreen", "lightpink", "lightyellow", "lightgray")

OUTPUTS = ("ag", "agac", "topluluklar", "etki")


def _ratio(numerator: float, denominator: float) -> float:
    """Divide like IEEE floats: a zero denominator gives inf or NaN."""
    try:
        return numerator / denominator
    except ZeroDivisionError:
        if numerator == 0 or math.isnan(numerator):
            return math.nan
        return math.copysign(math.inf, numerator)


def _max_score(scores: list[float]) -> float:
    highest = 0.0
    for score in scores:
        if score > highest:
            highest = score
    return highest


def network_dot(network: SocialNetwork) -> str:
    """Undirected graph of the spine users, sized and coloured by influence."""
    users = list(network.spine_users())
    scores = [network.influence_score(user.id) for user in users]
    highest = _max_score(scores)

    lines = [
        "graph SosyalAg {",
        "    rankdir=LR;",
        '    node [shape=circle, style=filled, fillcolor=lightblue, fontname="Arial"];',
        "    edge [color=gray, penwidth=1.5];",
        "",
    ]
    for user, score in zip(users, scores):
        size = 0.5 + _ratio(score, highest) * 1.5
        color = "lightgreen" if score > highest / 2 else "lightblue"
        lines.append(
            f'    {user.id} [label="{user.name}\\n({score:.2f})", '
            f'width={size:.2f}, height={size:.2f}, fillcolor="{color}"];'
        )
    for user in users:
        for friend in user.friends:
            if user.id < friend.id:
                lines.append(f"    {user.id} -- {friend.id};")
    lines.append("}")
    return "\n".join(lines) + "\n"


def _tree_lines(node: RBNode) -> Iterator[str]:
    user = node.value
    size = 0.5 + (user.friend_count / MAX_FRIENDS) * 1.5
    color = "red" if node.color is Color.RED else "black"
    yield (
        f'    {node.key} [label="{user.name}\\n({user.friend_count} arkadaş)", '
        f"width={size:.2f}, height={size:.2f}, fillcolor={color}, fontcolor=white];"
    )
    for child in (node.left, node.right):
        if child is not None:
            yield f"    {node.key} -> {child.key} [color=black];"
            yield from _tree_lines(child)


def tree_dot(network: SocialNetwork) -> str:
    """Directed graph of the red-black tree that indexes the users."""
    lines = [
        "digraph KirmiziSiyahAgac {",
        "    rankdir=TB;",
        '    node [shape=circle, style=filled, fontname="Arial"];',
        "    edge [color=black, penwidth=1.5];",
        "",
    ]
    root: Optional[RBNode] = network.tree.root
    if root is not None:
        lines.extend(_tree_lines(root))
    lines.append("}")
    return "\n".join(lines) + "\n"


def communities_dot(network: SocialNetwork) -> str:
    """Graph of the spine users coloured by a bucket of their friend count."""
    lines = [
        "graph Topluluklar {",
        "    rankdir=LR;",
        '    node [shape=circle, style=filled, fontname="Arial"];',
        "    edge [color=gray, penwidth=1.5];",
        "",
    ]
    for user in network.spine_users():
        color = COMMUNITY_COLORS[(user.friend_count // 5) % len(COMMUNITY_COLORS)]
        lines.append(f'    {user.id} [label="{user.name}", fillcolor="{color}"];')
        for friend in user.friends:
            if user.id < friend.id:
                lines.append(f"    {user.id} -- {friend.id};")
    lines.append("}")
    return "\n".join(lines) + "\n"


def influence_dot(network: SocialNetwork) -> str:
    """Bar-like chart of the spine users' influence scores."""
    users = list(network.spine_users())
    scores = [network.influence_score(user.id) for user in users]
    highest = _max_score(scores)

    lines = [
        "digraph EtkiPuanlari {",
        "    rankdir=LR;",
        '    node [shape=box, style=filled, fontname="Arial"];',
        "    edge [style=invis];",
        "",
    ]
    for index, (user, score) in enumerate(zip(users, scores)):
        height = 0.2 + _ratio(score, highest) * 2.0
        color = "lightgreen" if score > highest / 2 else "lightblue"
        lines.append(
            f'    {index} [label="{user.name}\\n({score:.2f})", '
            f'width=1.0, height={height:.2f}, fillcolor="{color}"];'
        )
    lines.extend(f"    {index} -> {index + 1};" for index in range(len(users) - 1))
    lines.append("}")
    return "\n".join(lines) + "\n"


def render(
    dot_source: str,
    dot_path: str | os.PathLike[str],
    png_path: str | os.PathLike[str],
) -> bool:
    """Write ``dot_source`` and convert it with Graphviz; return True on success."""
    Path(dot_path).write_text(dot_source, encoding="utf-8")
    try:
        result = subprocess.run(
            ["dot", "-Tpng", os.fspath(dot_path), "-o", os.fspath(png_path)],
            check=False,
        )
    except FileNotFoundError:
        return False
    return result.returncode == 0


def write_all(
    network: SocialNetwork, directory: str | os.PathLike[str] = "."
) -> list[tuple[Path, Path, bool]]:
    """Write and render all four views; return (dot path, png path, rendered)."""
    base = Path(directory)
    sources = (
        network_dot(network),
        tree_dot(network),
        communities_dot(network),
        influence_dot(network),
    )
    results = []
    for stem, source in zip(OUTPUTS, sources):
        dot_path = base / f"{stem}.dot"
        png_path = base / f"{stem}.png"
        results.append((dot_path, png_path, render(source, dot_path, png_path)))
    return results