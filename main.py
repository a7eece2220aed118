# main.py
import sys

from route_nav.app.build import build
from route_nav.io.config import load_config


def run(config_path: str | None = None, algorithm: str | None = None) -> int:
    cfg = load_config(config_path) if config_path else None
    app = build(cfg)
    session = app.session

    ids = sorted(session.graph.nodes)
    if len(ids) < 2:
        print("graph has fewer than two nodes")
        return 1

    # Route across the map: first generated node to the last one
    report = session.find_route(ids[0], ids[-1], algorithm)
    if not report.found:
        print("No route found between selected points.")
        return 1

    print(
        f"{report.label}: {round(report.total_distance)} units, "
        f"{report.nodes_visited} nodes visited, {report.compute_ms:.2f} ms"
    )
    for i, step in enumerate(report.instructions, 1):
        line = f"{i}. {step.text}"
        if step.distance > 0:
            line += f" ({round(step.distance)} units)"
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(run(*sys.argv[1:3]))
