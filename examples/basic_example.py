from pathlib import Path

from rich import print

from jsontree import JsonTree


def main() -> None:
    document = {
        "service": "billing",
        "replicas": 3,
        "healthy": True,
        "owner": {"team": "payments", "pager": None},
        "regions": ["eu-west-1", "us-east-1"],
    }

    tree = JsonTree(document)
    layout = tree.layout()
    target = Path("basic_example.svg")
    target.write_text(tree.render(layout), encoding="utf-8")

    print(f"[bold cyan]{len(layout.nodes)} nodes, {len(layout.edges)} edges[/bold cyan]")
    print(f"Canvas {layout.width:g} x {layout.height:g} written to {target}")


if __name__ == "__main__":
    main()
