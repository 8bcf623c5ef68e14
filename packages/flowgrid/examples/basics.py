"""Chain -- the reference five-entity flow, printed tick by tick.

Demonstrates:
- Seeding an EntityGraph with Resource values
- Reading the adjacency derived from grid positions
- Stepping the single-pass update and watching holdings move

Run: python -m examples.basics
"""

from flowgrid import EntityGraph
from flowgrid.scenario import setup_chain


def main() -> None:
    print("=== Chain ===\n")

    graph = EntityGraph()
    setup_chain(graph)

    for i in graph:
        print(f"  {i} at {graph.position(i)}  upstream={list(graph.upstream(i))}")
    print()

    print(f"  tick 0  |  {graph.holdings()}")
    for tick in range(1, 6):
        graph.update()
        print(f"  tick {tick}  |  {graph.holdings()}")


if __name__ == "__main__":
    main()
