"""Simple launcher for the shortest-route tool.

This script asks which operation to run on the bundled data set,
then hands over to the command line entry point.
"""

from __future__ import annotations

import sys
from pathlib import Path

from sssp.cli import main as cli_main


def main() -> int:
    project_root = Path(__file__).resolve().parent
    data_file = project_root / "data" / "routes.csv"

    print("=== Shortest route launcher ===")
    print("1) Route legs with grand total")
    print("2) Shortest route from one vertex to every vertex")
    print("3) Graph summary")
    choice = input("Choice (1/2/3): ").strip().lower()

    if choice in {"1", "routes", "r"}:
        operation = "routes"
    elif choice in {"2", "all", "a"}:
        operation = "all"
    elif choice in {"3", "info", "i"}:
        operation = "info"
    else:
        print("Choice not recognised, running the route legs.")
        operation = "routes"

    if not data_file.exists():
        print(f"Cannot find {data_file.relative_to(project_root)} in the project.")
        return 1

    argv = ["--data", str(data_file), "--operation", operation]
    if operation != "routes":
        source = input("Source vertex [Chicago]: ").strip()
        if source:
            argv += ["--source", source]

    return cli_main(argv)


if __name__ == "__main__":
    sys.exit(main())
