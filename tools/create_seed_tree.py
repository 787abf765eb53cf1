import sys
import os
import random
import json
import subprocess
from pathlib import Path
from uuid import uuid4

# Run from the repo root: python tools/create_seed_tree.py out.json N [MAX_DEPTH]
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from core.seed import nodes_to_data
from core.types import Node

COLORS = ["red", "blue", "gray", "teal", "green", "purple", "pink", "orange", "yellow"]

def get_fortune_text():
    """Get random text from fortune command, with fallback if not available."""
    try:
        result = subprocess.run(['fortune', '-s'], capture_output=True, text=True, timeout=5)
        if result.returncode == 0 and result.stdout.strip():
            # Labels are single rows.
            return " ".join(result.stdout.split())[:80]
    except (subprocess.SubprocessError, FileNotFoundError):
        pass

    fallback_texts = [
        "Draft the kickoff agenda",
        "Review open pull requests",
        "Book the design review",
        "Update the onboarding guide",
        "Collect survey results",
        "Triage incoming bugs",
        "Plan the next sprint",
        "Write release notes",
        "Benchmark the import path",
        "Archive stale tickets",
        "Sync with marketing",
        "Prepare the demo",
    ]
    return random.choice(fallback_texts)

def create_node(text):
    return Node(
        id=uuid4().hex[:12],
        label=text,
        color=random.choice(COLORS),
        is_checked=random.random() < 0.5,
    )

def main():
    if len(sys.argv) not in (3, 4):
        print(f"Usage: {sys.argv[0]} /path/to/seed.json N [MAX_DEPTH]")
        print("Note: Install 'fortune' command for better random text (apt install fortune-mod or brew install fortune)")
        sys.exit(1)

    out_path = Path(sys.argv[1])
    count = int(sys.argv[2])
    max_depth = int(sys.argv[3]) if len(sys.argv) == 4 else 6

    if not os.path.isdir(out_path.parent):
        print(f"Error: {out_path.parent} is not a directory")
        sys.exit(1)

    roots = []
    # (node, depth) pairs that can still take children
    placed = []
    for i in range(count):
        open_slots = [(n, d) for n, d in placed if d < max_depth]
        if not open_slots or random.random() < 0.2:
            node = create_node(get_fortune_text())
            roots.append(node)
            placed.append((node, 0))
        else:
            parent, depth = random.choice(open_slots)
            node = create_node(get_fortune_text())
            parent.children.append(node)
            placed.append((node, depth + 1))
        if (i + 1) % 100 == 0:
            print(f"Created {i+1} nodes...")

    with open(out_path, 'w', encoding='utf-8') as f:
        json.dump(nodes_to_data(roots), f, indent=2)

    print(f"Wrote {count} nodes ({len(roots)} top-level) to {out_path}")

if __name__ == '__main__':
    main()
