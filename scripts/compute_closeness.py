"""
Offline closeness calculator for edge-list CSVs.

Runs the same pipeline as the /closeness endpoint and prints the JSON report.

Usage:
  python scripts/compute_closeness.py --csv data/edges.csv --mode out --cutoff 3
"""

import argparse
import json
import logging
import os
import sys
import time

import pandas as pd


def main() -> int:
    parser = argparse.ArgumentParser(description="Compute closeness centrality for an edge-list CSV.")
    parser.add_argument("--csv", required=True, help="Path to CSV with source,target[,weight] columns.")
    parser.add_argument("--mode", default="all", help="out, in or all (default: all).")
    parser.add_argument(
        "--cutoff",
        type=float,
        default=-1,
        help="Maximum path length considered; negative for exact closeness.",
    )
    parser.add_argument("--weighted", action="store_true", help="Use the 'weight' column.")
    parser.add_argument("--undirected", action="store_true", help="Treat edges as undirected.")
    parser.add_argument("--raw", action="store_true", help="Do not normalize scores.")
    parser.add_argument("--top", type=int, default=0, help="Only print the N most central vertices.")
    args = parser.parse_args()

    if not os.path.exists(args.csv):
        print(f"Error: file not found: {args.csv}")
        return 1

    # Resolve project imports no matter where script is run from.
    project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
    if project_root not in sys.path:
        sys.path.insert(0, project_root)

    from app.config import LOG_LEVEL
    from core.common.errors import ClosenessError
    from services.processing_pipeline import ClosenessService

    logging.basicConfig(level=LOG_LEVEL, stream=sys.stderr)

    df = pd.read_csv(args.csv)

    t0 = time.time()
    try:
        result = ClosenessService().process(
            df,
            mode=args.mode,
            cutoff=args.cutoff,
            normalized=not args.raw,
            weighted=args.weighted,
            directed=not args.undirected,
        )
    except ClosenessError as e:
        print(f"Error: {e}")
        return 1
    result["summary"]["processing_time_seconds"] = round(time.time() - t0, 2)

    if args.top > 0:
        result["vertices"] = result["vertices"][: args.top]

    print(json.dumps(result, indent=2))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
