#!/usr/bin/env python3
import argparse
import json
import random
from pathlib import Path
from typing import Optional

from mcp_simplex.schemas import StandardLP


def generate_random_lp(num_vars: int, num_constraints: int, seed: Optional[int] = None, bounded: bool = True) -> StandardLP:
    """
    Random max c.x s.t. A x <= b, x >= 0.

    With ``bounded`` every coefficient is positive and every rhs too, so the
    origin is feasible and the region is a polytope. Otherwise coefficients
    and right-hand sides take either sign and any outcome is possible.
    """

    rng = random.Random(seed)
    A = []
    b = []
    for _ in range(num_constraints):
        if bounded:
            A.append([rng.uniform(0.5, 5.0) for _ in range(num_vars)])
            b.append(rng.uniform(num_vars * 2.0, num_vars * 6.0))
        else:
            A.append([rng.uniform(-3.0, 3.0) for _ in range(num_vars)])
            b.append(rng.uniform(-2.0, 6.0))
    c = [rng.uniform(1.0, 4.0) if bounded else rng.uniform(-2.0, 4.0) for _ in range(num_vars)]
    return StandardLP(A=A, b=b, c=c)


def main() -> None:
    parser = argparse.ArgumentParser(description="Generate random standard-form LP instances.")
    parser.add_argument("--vars", type=int, default=3, help="Number of variables")
    parser.add_argument("--constraints", type=int, default=3, help="Number of constraints")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument("--count", type=int, default=1, help="Number of instances")
    parser.add_argument("--mixed", action="store_true", help="Allow negative coefficients and rhs")
    parser.add_argument("--out", type=Path, default=None, help="Optional output file")
    args = parser.parse_args()

    instances = [
        generate_random_lp(args.vars, args.constraints, (args.seed or 0) + idx, bounded=not args.mixed)
        for idx in range(args.count)
    ]
    payload = [instance.model_dump() for instance in instances]

    if args.out:
        Path(args.out).write_text(json.dumps(payload, indent=2))
    else:
        print(json.dumps(payload, indent=2))


if __name__ == "__main__":
    main()
