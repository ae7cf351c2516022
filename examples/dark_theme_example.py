from rich import print

from jsontree import JsonTree, LayoutConfig

ORDER = {
    "id": "ord_1042",
    "customer": {"name": "Ana", "address": {"city": "Lisboa", "zip": "1100-148"}},
    "items": [
        {"sku": "A-1", "qty": 2},
        {"sku": "B-7", "qty": 1, "tags": ["gift", "fragile"]},
    ],
    "total": 59.9,
}


def main() -> None:
    config = LayoutConfig(horizontal_gap=60, sibling_gap=30)
    tree = JsonTree(ORDER, config=config, style="dark")

    for node in tree.layout().nodes:
        summary = ", ".join(line.text.lstrip(": ") for line in node.lines)
        print(f"[cyan]{node.element_id}[/cyan] @ ({node.rect.x:g}, {node.rect.y:g}) {summary}")


if __name__ == "__main__":
    main()
