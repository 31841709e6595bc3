import argparse
import time

import numpy as np
import cachematrix


def time_rounds(fn, rounds, calls):
    times = []
    for _ in range(rounds):
        start = time.perf_counter()
        for _ in range(calls):
            fn()
        times.append(time.perf_counter() - start)
    return times


def benchmark_cache_solve(n=9, rounds=3, calls=10000):
    print(f"\n--- Benchmarking repeated inverse (Hilbert N={n}, {rounds} x {calls} calls) ---")

    h = cachematrix.hilbert(n)

    print("run timing for direct invert")
    direct = time_rounds(lambda: cachematrix.invert(h), rounds, calls)

    print("run timing for cache_solve")
    cm = cachematrix.CacheMatrix(h)
    cached = time_rounds(lambda: cachematrix.cache_solve(cm), rounds, calls)

    print(f"Direct times:   {' '.join(f'{t:.4f}' for t in direct)} s")
    print(f"Cached times:   {' '.join(f'{t:.4f}' for t in cached)} s")

    direct_mean = float(np.mean(direct))
    cached_mean = float(np.mean(cached))
    print(f"Direct mean:    {direct_mean:.4f} s")
    print(f"Cached mean:    {cached_mean:.4f} s")
    speedup = direct_mean / cached_mean if cached_mean > 0 else 0
    print(f"Speedup:        {speedup:.2f}x")
    print(f"Cache stats:    {cm.stats.as_dict()}")


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Compare direct inversion against cache_solve.")
    parser.add_argument("-n", type=int, default=9, help="Hilbert matrix order")
    parser.add_argument("--rounds", type=int, default=3)
    parser.add_argument("--calls", type=int, default=10000)
    args = parser.parse_args()
    benchmark_cache_solve(args.n, args.rounds, args.calls)
