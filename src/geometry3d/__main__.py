"""
Small demo: sample random directions, push them through a VertexRecorder
as unit-sphere vertices with matching normals and report what came out.
"""

import argparse
import logging
import random
import sys
from typing import Optional, Sequence

from .bounds import bounding_box
from .point3d import ORIGIN3D, Point3d
from .rendering import VertexRecorder
from .vector3d import Vector3d

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Sample points on the unit sphere")
    parser.add_argument(
        "-n",
        "--samples",
        type=int,
        default=1000,
        help="Number of random directions to draw",
    )
    parser.add_argument(
        "-s",
        "--seed",
        type=int,
        default=None,
        help="Seed for a reproducible run",
    )
    parser.add_argument(
        "-d",
        "--debug",
        action="store_true",
        help="Run in debug mode",
    )
    args = parser.parse_args(argv)
    if args.samples < 1:
        parser.error("--samples must be at least 1")
    return args


def run(samples: int, seed: Optional[int] = None) -> VertexRecorder:
    rng = random.Random(seed)
    recorder = VertexRecorder()
    logger.debug("drawing %d directions (seed %r)", samples, seed)
    for i in range(samples):
        direction = Vector3d.random_unit(rng)
        logger.debug("sample %d: %r", i, direction)
        direction.gl_normal(recorder.hooks)
        ORIGIN3D.plus(direction).gl_vertex(recorder.hooks)
    return recorder


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    if args.debug:
        logging.basicConfig(level=logging.DEBUG)
        print("Debug mode enabled")

    recorder = run(args.samples, args.seed)
    vertices = recorder.vertices
    points = [Point3d.with_components(v) for v in vertices]
    lo, hi = bounding_box(points)
    mean_norm = sum(ORIGIN3D.dist(p) for p in points) / len(points)
    mean_z = float(vertices[:, 2].mean())

    print(f"samples   {len(recorder)}")
    print(f"mean norm {mean_norm:.6f}")
    print(f"mean z    {mean_z:+.6f}")
    print(f"bbox min  {lo.components()}")
    print(f"bbox max  {hi.components()}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
