from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List, Optional, Set

from core.log import Log
from core.types import Node

__all__ = [
    "DEFAULT_TREE",
    "default_tree",
    "nodes_from_data",
    "nodes_to_data",
    "load_seed",
]

def _read_json(p: Path) -> Any:
    try:
        return json.loads(p.read_text(encoding="utf-8"))
    except FileNotFoundError as e:
        raise ValueError(f"Seed file not found: {p}") from e
    except json.JSONDecodeError as e:
        raise ValueError(f"Malformed JSON in {p}: {e}") from e

# ---------- Built-in data ----------

def _leaf(eid: str, label: str, color: str, checked: bool) -> Dict[str, Any]:
    return {"id": eid, "label": label, "color": color, "is_checked": checked, "children": []}

DEFAULT_TREE: List[Dict[str, Any]] = [
    {"id": "1", "label": "Marketing Campaign", "color": "red", "is_checked": True, "children": [
        _leaf("1-1", "Create Ad Copies", "pink", True),
        _leaf("1-2", "Design Landing Page", "purple", False),
    ]},
    {"id": "2", "label": "Product Roadmap", "color": "blue", "is_checked": True, "children": [
        _leaf("2-1", "Define Q1 Goals", "teal", True),
        _leaf("2-2", "Feature Prioritization", "yellow", True),
    ]},
    {"id": "3", "label": "User Research", "color": "green", "is_checked": False, "children": [
        _leaf("3-1", "Interview Users", "orange", True),
    ]},
    {"id": "4", "label": "Backend Tasks", "color": "gray", "is_checked": True, "children": [
        _leaf("4-1", "Optimize Database Queries", "black", True),
        _leaf("4-2", "Refactor API Endpoints", "blue", False),
    ]},
    {"id": "5", "label": "Frontend Tasks", "color": "purple", "is_checked": True, "children": [
        _leaf("5-1", "Fix UI Alignment", "indigo", True),
    ]},
    {"id": "6", "label": "Content Calendar", "color": "orange", "is_checked": True, "children": [
        _leaf("6-1", "Write Blog Article", "brown", True),
        _leaf("6-2", "Plan Social Media Posts", "cyan", True),
    ]},
    {"id": "7", "label": "Release v1.0.0", "color": "teal", "is_checked": True, "children": [
        _leaf("7-1", "Prepare Release Notes", "yellow", True),
        _leaf("7-2", "Smoke Testing", "red", True),
    ]},
]

def default_tree() -> List[Node]:
    return nodes_from_data(DEFAULT_TREE)

# ---------- dict <-> Node ----------

def nodes_from_data(data: Any) -> List[Node]:
    """
    Convert a JSON-style list of node dicts into Nodes.

    Raises ValueError on a malformed node or a repeated id.
    """
    if not isinstance(data, list):
        raise ValueError("Seed data must be a list of nodes")
    seen: Set[str] = set()
    return [_node_from_dict(d, seen, "") for d in data]

def _node_from_dict(d: Any, seen: Set[str], path: str) -> Node:
    if not isinstance(d, dict):
        raise ValueError(f"Seed node at '{path or '/'}' is not an object")

    eid = d.get("id")
    if not isinstance(eid, str) or not eid:
        raise ValueError(f"Seed node at '{path or '/'}' has no string id")
    if eid in seen:
        raise ValueError(f"Duplicate seed id: {eid}")
    seen.add(eid)

    children = d.get("children", [])
    if not isinstance(children, list):
        raise ValueError(f"Children of '{eid}' must be a list")

    here = f"{path}/{eid}"
    return Node(
        id=eid,
        label=str(d.get("label", "")),
        color=str(d.get("color", "default")),
        is_checked=bool(d.get("is_checked", False)),
        children=[_node_from_dict(c, seen, here) for c in children],
    )

def nodes_to_data(nodes: List[Node]) -> List[Dict[str, Any]]:
    return [
        {
            "id": n.id,
            "label": n.label,
            "color": n.color,
            "is_checked": n.is_checked,
            "children": nodes_to_data(n.children),
        }
        for n in nodes
    ]

# ---------- Seed files ----------

def load_seed(path: Optional[str] = None) -> List[Node]:
    """Load the tree from a JSON seed file, or the built-in tree when path is None."""
    if path is None:
        return default_tree()
    p = Path(path).expanduser().resolve()
    nodes = nodes_from_data(_read_json(p))
    Log.debug(f"Loaded seed {p} ({len(nodes)} top-level entries).", 1)
    return nodes
