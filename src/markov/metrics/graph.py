from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Iterable, List, Optional

from markov.chain.model import Model
from markov.types import Edge


@dataclass(frozen=True)
class DotStyle:
    rankdir: str = "LR"
    nodesep: float = 0.6
    ranksep: float = 0.9

    fontname: str = "Helvetica"
    node_fontsize: int = 14
    edge_fontsize: int = 11
    node_shape: str = "circle"
    edge_color: str = "#222222"

    prob_precision: int = 3
    show_counts: bool = False

    # Edges below this probability are dropped from the rendering.
    min_probability: float = 0.0


def to_edge_list(model: Model) -> List[Edge]:
    edges: List[Edge] = []
    for source, row in model.rows():
        for dest in row.destinations():
            edges.append((source.value(), dest.value(), row.count(dest), row.state_weight(dest)))
    return edges


def _escape_dot(s: str) -> str:
    return s.replace("\\", "\\\\").replace('"', '\\"').replace("\n", "\\n")


def to_dot(
    edges: Iterable[Edge],
    graph_name: str = "markov_chain",
    label: Optional[str] = None,
    style: Optional[DotStyle] = None,
) -> str:
    st = style or DotStyle()
    edges_list = [e for e in edges if e[3] >= st.min_probability]

    gname = _escape_dot(graph_name)
    if not edges_list:
        return f'digraph "{gname}" {{}}'

    node_ids: Dict[str, str] = {}
    for src, dst, _, _ in edges_list:
        for v in (src, dst):
            if v not in node_ids:
                node_ids[v] = f"n{len(node_ids)}"

    lines: List[str] = [f'digraph "{gname}" {{']
    lines.append(f"  rankdir={st.rankdir};")
    lines.append(f"  nodesep={st.nodesep};")
    lines.append(f"  ranksep={st.ranksep};")
    lines.append(f'  node [shape={st.node_shape}, fontname="{st.fontname}", fontsize={st.node_fontsize}];')
    lines.append(f'  edge [fontname="{st.fontname}", fontsize={st.edge_fontsize}, color="{st.edge_color}"];')
    if label is not None:
        lines.append(f'  label="{_escape_dot(label)}";')
        lines.append("  labelloc=t;")

    for value, node_id in node_ids.items():
        lines.append(f'  {node_id} [label="{_escape_dot(value)}"];')

    for src, dst, count, prob in edges_list:
        text = f"{prob:.{st.prob_precision}f}"
        if st.show_counts:
            text += f" ({count})"
        lines.append(f'  {node_ids[src]} -> {node_ids[dst]} [label="{text}"];')

    lines.append("}")
    return "\n".join(lines)


def save_dot(path: Path, dot: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(dot, encoding="utf-8")

