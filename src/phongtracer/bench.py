"""
Micro-benchmarks for the hot paths: hit selection, hit preparation,
4x4 matrix algebra and PPM encoding.
"""
import argparse
import logging
import time
from typing import Callable, Dict, Optional, Sequence

from phongtracer.core.color import Color
from phongtracer.core.matrix import Matrix
from phongtracer.core.ray import Ray
from phongtracer.core.tuple import point, vector
from phongtracer.geometry.computations import prepare_computation
from phongtracer.geometry.intersection import Intersection
from phongtracer.geometry.sphere import Sphere
from phongtracer.renderer.canvas import Canvas
from phongtracer.renderer.ppm import canvas_to_ppm

logger = logging.getLogger(__name__)

BENCH_MATRIX = Matrix([
    [-2, -8, 3, 5],
    [-3, 1, 7, 3],
    [1, 2, -9, 6],
    [-6, 7, 7, -9],
])


def _hit():
    origin = point(0, 0, -5)
    r = Ray(origin, (point(50, 50, 10) - origin).normalize())
    Sphere().intersect(r).hit()


def _outside_hit():
    prepare_computation(Intersection(4.0, Sphere()), Ray(point(0, 0, -5), vector(0, 0, 1)))


def _inside_hit():
    prepare_computation(Intersection(1.0, Sphere()), Ray(point(0, 0, 0), vector(0, 0, 1)))


def _ppm():
    canvas = Canvas(50, 30)
    canvas.write_pixel(0, 0, Color(1.5, 0, 0))
    canvas.write_pixel(2, 1, Color(0, 0.5, 0))
    canvas.write_pixel(4, 2, Color(-0.5, 0, 1))
    canvas_to_ppm(canvas)


BENCHMARKS: Dict[str, Callable[[], object]] = {
    "hit": _hit,
    "computations_outside": _outside_hit,
    "computations_inside": _inside_hit,
    "matrix_inverse": BENCH_MATRIX.inverse,
    "matrix_determinant": BENCH_MATRIX.determinant,
    "matrix_transpose": BENCH_MATRIX.transpose,
    "canvas_to_ppm": _ppm,
}


def time_call(fn: Callable[[], object], iterations: int) -> float:
    """Returns the mean wall time of one call of fn, in seconds."""
    if iterations < 1:
        raise ValueError(f"iterations must be positive, got {iterations}")
    start = time.perf_counter()
    for _ in range(iterations):
        fn()
    return (time.perf_counter() - start) / iterations


def run_benchmarks(iterations: int = 1000, names: Optional[Sequence[str]] = None) -> Dict[str, float]:
    selected = list(BENCHMARKS) if names is None else list(names)
    results = {}
    for name in selected:
        results[name] = time_call(BENCHMARKS[name], iterations)
        logger.debug("%s: %.3f us per call", name, results[name] * 1e6)
    return results


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Time the core ray tracing operations")
    parser.add_argument("-n", "--iterations", type=int, default=1000, help="Calls per benchmark (default: 1000)")
    parser.add_argument("names", nargs="*", metavar="NAME",
                        help=f"Benchmarks to run (default: all of {', '.join(BENCHMARKS)})")
    args = parser.parse_args(argv)
    if args.iterations < 1:
        parser.error("--iterations must be positive")
    unknown = sorted(set(args.names) - set(BENCHMARKS))
    if unknown:
        parser.error(f"unknown benchmark(s): {', '.join(unknown)}")
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    for name, seconds in run_benchmarks(args.iterations, args.names or None).items():
        print(f"{name:<22} {seconds * 1e6:10.2f} us")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
