"""
Benchmark frame evaluation per variant, resolution and engine.

Usage examples:
  python benchmark.py --variants mandelbrot,newton_cubic --res 80x24,800x600 \
      --max-iter 300 --runs 5 --engines full,striped --workers 8
"""

import os
import csv
import time
import logging
import argparse
import platform
from typing import List, Tuple

from fractals.registry import available_variants, get_variant
from rendering.engines.full_frame import FullFrameEngine
from rendering.engines.stripe import StripeEngine
from rendering.frame import FrameEvaluator
from utils.enums import OutputMode

logger = logging.getLogger("benchmark")


def parse_resolution_list(res_str: str) -> List[Tuple[int, int]]:
    """
    Parse resolutions like "80x24,800x600".
    """
    if not res_str:
        return [(80, 24), (800, 600), (1920, 1080)]
    out: List[Tuple[int, int]] = []
    for token in res_str.split(','):
        token = token.strip().lower()
        if not token:
            continue
        w, h = token.split('x')
        out.append((int(w), int(h)))
    return out


def make_engine(tag: str, workers: int):
    tag = tag.strip().lower()
    if tag == "full":
        return FullFrameEngine()
    if tag == "striped":
        return StripeEngine(workers=workers)
    raise ValueError(f"Unknown engine '{tag}' (use full or striped)")


def benchmark_frame(evaluator: FrameEvaluator, variant_id: str, width: int, height: int,
                    max_iter: int, runs: int = 3) -> Tuple[float, float]:
    fractal = get_variant(variant_id)
    vp = fractal.default_viewport
    # Warm-up compiles the kernels
    evaluator.evaluate(fractal, vp, width, height, max_iter, OutputMode.COLOR)
    times = []
    for _ in range(runs):
        start = time.perf_counter()
        evaluator.evaluate(fractal, vp, width, height, max_iter, OutputMode.COLOR)
        times.append(time.perf_counter() - start)
    avg_time = sum(times) / runs
    fps = 1.0 / avg_time if avg_time > 0 else 0
    return avg_time, fps


def main():
    ap = argparse.ArgumentParser(description=__doc__,
                                 formatter_class=argparse.RawDescriptionHelpFormatter)
    ap.add_argument("--variants", default="",
                    help="comma-separated variant ids (default: all)")
    ap.add_argument("--res", default="", help="resolutions, e.g. 80x24,800x600")
    ap.add_argument("--max-iter", type=int, default=300)
    ap.add_argument("--runs", type=int, default=3)
    ap.add_argument("--engines", default="full,striped")
    ap.add_argument("--workers", type=int, default=os.cpu_count() or 1)
    ap.add_argument("--csv", default="benchmark_results.csv")
    ap.add_argument("-v", "--verbose", action="store_true")
    args = ap.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                        format="%(asctime)s %(name)s %(levelname)s: %(message)s")

    variants = [v.strip() for v in args.variants.split(',') if v.strip()] \
        or [v.id for v in available_variants()]
    resolutions = parse_resolution_list(args.res)
    engines = [e for e in args.engines.split(',') if e.strip()]

    cpu_info = platform.processor() or platform.machine()
    logger.info("CPU: %s, workers: %d", cpu_info, args.workers)

    with open(args.csv, 'w', newline='') as f:
        writer = csv.writer(f)
        writer.writerow(['Hardware Summary'])
        writer.writerow(['CPU', cpu_info])
        writer.writerow([])
        writer.writerow(['Variant', 'Resolution', 'Engine', 'Time (s)', 'FPS'])
        for tag in engines:
            evaluator = FrameEvaluator(make_engine(tag, args.workers))
            for variant_id in variants:
                for width, height in resolutions:
                    avg, fps = benchmark_frame(evaluator, variant_id, width, height,
                                               args.max_iter, args.runs)
                    logger.info("%s %dx%d [%s]: %.3fs | FPS: %.2f",
                                variant_id, width, height, tag, avg, fps)
                    writer.writerow([variant_id, f'{width}x{height}', tag,
                                     f'{avg:.4f}', f'{fps:.2f}'])
    logger.info("Benchmark results saved to %s", args.csv)


if __name__ == '__main__':
    main()
