import argparse
import sys
import time
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Tuple

import numpy as np
import scipy.sparse as sp

# Ensure we can import structmat from source tree
sys.path.insert(0, str(Path(__file__).resolve().parents[1]))


# ---------- Builders ----------


def build_scipy_csc(n: int, density: float, seed: int) -> Tuple[sp.csc_matrix, int]:
    rs = np.random.RandomState(seed)
    A_coo = sp.random(n, n, density=density, format="coo", random_state=rs)
    A_csc = A_coo.tocsc()
    return A_csc, int(A_csc.nnz)


def build_coordinates(n: int, count: int, seed: int) -> np.ndarray:
    rs = np.random.RandomState(seed)
    return rs.randint(0, n, size=(count, 2))


def build_structmat_variants(A_scipy: sp.csc_matrix) -> Dict[str, Any]:
    try:
        from structmat import DenseMatrix, DiagonalMatrix, SparseMatrix, SymmetricMatrix
    except Exception:
        return {}
    dense = A_scipy.toarray()
    sym = np.tril(dense + dense.T)
    return {
        "diagonal": DiagonalMatrix(A_scipy.diagonal()),
        "symmetric": SymmetricMatrix([sym[i, : i + 1] for i in range(sym.shape[0])]),
        "dense": DenseMatrix(dense),
        "sparse": SparseMatrix(A_scipy.indptr, A_scipy.indices, A_scipy.data, A_scipy.shape),
    }


# ---------- Timing ----------


def time_op(fn: Callable[[], Any], warmup: int, repeat: int) -> List[float]:
    for _ in range(warmup):
        fn()
    times: List[float] = []
    for _ in range(repeat):
        t0 = time.perf_counter()
        fn()
        t1 = time.perf_counter()
        times.append(t1 - t0)
    return times


def summarize(name: str, times: List[float], lookups: int) -> Optional[Dict[str, float]]:
    if not times:
        return None
    arr = np.array(times, dtype=np.float64)
    return {
        "name": name,
        "min_ms": float(arr.min() * 1e3),
        "median_ms": float(np.median(arr) * 1e3),
        "mean_ms": float(arr.mean() * 1e3),
        "mlookups": float((lookups / arr.min()) / 1e6) if lookups > 0 else 0.0,
    }


def run_get_scipy(A: sp.csc_matrix, coords: np.ndarray) -> List[float]:
    return [float(A[i, j]) for i, j in coords]


def run_get_structmat(M: Any, coords: np.ndarray) -> List[float]:
    return [M.get(i, j) for i, j in coords]


def main():
    p = argparse.ArgumentParser(description="Element access benchmarks across matrix layouts")
    p.add_argument("--n", type=int, default=1024)
    p.add_argument("--density", type=float, default=0.01)
    p.add_argument("--lookups", type=int, default=20000)
    p.add_argument("--warmup", type=int, default=1)
    p.add_argument("--repeat", type=int, default=5)
    p.add_argument("--seed", type=int, default=0)
    p.add_argument("--no_scipy", action="store_true")
    p.add_argument("--validate", action="store_true")
    p.add_argument(
        "--layouts",
        type=str,
        default="all",
        help="Comma-separated layouts: diagonal, symmetric, dense, sparse",
    )

    args = p.parse_args()

    A_scipy, nnz = build_scipy_csc(args.n, args.density, args.seed)
    coords = build_coordinates(args.n, args.lookups, args.seed + 1)
    variants = build_structmat_variants(A_scipy)

    wanted = {name.strip().lower() for name in (args.layouts.split(",") if args.layouts else [])}
    if "all" in wanted or not wanted:
        wanted = set(variants)

    results: List[Dict[str, float]] = []

    if not args.no_scipy:
        times = time_op(lambda: run_get_scipy(A_scipy, coords), args.warmup, args.repeat)
        stats = summarize("scipy:csc", times, len(coords))
        if stats:
            results.append(stats)

    for name, M in variants.items():
        if name not in wanted:
            continue
        times = time_op(lambda: run_get_structmat(M, coords), args.warmup, args.repeat)
        stats = summarize("structmat:" + name, times, len(coords))
        if stats:
            results.append(stats)
        if args.validate and name in ("dense", "sparse"):
            out = np.array(run_get_structmat(M, coords))
            ref = np.array(run_get_scipy(A_scipy, coords))
            if not np.array_equal(out, ref):
                raise AssertionError(f"Validation failed: structmat {name} vs scipy")

    # ---- print summary ----
    print(
        f"Access Benchmarks: n={args.n} density={args.density} lookups={args.lookups} nnz={nnz}"
    )
    for r in results:
        if not r:
            continue
        print(
            f"{r['name']:>20}: min {r['min_ms']:.3f} ms | median {r['median_ms']:.3f} ms | mean {r['mean_ms']:.3f} ms | {r['mlookups']:.2f} Mlookups/s"
        )


if __name__ == "__main__":
    main()
