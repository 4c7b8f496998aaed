#!/usr/bin/env python3
import json
import time
from pathlib import Path

from mcp_simplex.lp.reference import reference_solve
from mcp_simplex.lp.simplex import solve
from mcp_simplex.schemas import SolveOptions, StandardLP
from scripts.generate_instances import generate_random_lp


def load_example(name: str) -> StandardLP:
    path = Path(__file__).resolve().parent.parent / "examples" / name
    return StandardLP.model_validate(json.loads(path.read_text()))


def main() -> None:
    opts = SolveOptions()
    cases = [("examples/canonical_optimal.json", load_example("canonical_optimal.json"))]
    for seed in range(3):
        cases.append((f"random-{seed}", generate_random_lp(3, 3, seed)))
    for seed in range(3):
        cases.append((f"mixed-{seed}", generate_random_lp(4, 5, seed, bounded=False)))

    print("name,status,objective,iterations,time_ms,reference_status,reference_objective")
    for name, problem in cases:
        start = time.perf_counter()
        outcome = solve(problem.A, problem.b, problem.c, opts)
        elapsed_ms = (time.perf_counter() - start) * 1000
        reference = reference_solve(problem.A, problem.b, problem.c, opts)
        print(
            f"{name},{outcome.status},{getattr(outcome, 'value', None)},{outcome.iterations},"
            f"{elapsed_ms:.2f},{reference.status},{getattr(reference, 'value', None)}"
        )


if __name__ == "__main__":
    main()
