"""Escape-time iteration of the burning ship recurrence."""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Optional

import numpy as np
import tensorflow as tf

from .viewport import PlaneBounds, Viewport, compute_bounds, coordinate_field

MAX_ITERATION = 80
ESCAPE_RADIUS = 2.0


@dataclass(frozen=True)
class RenderResult:
    """Working grids and timing of a single generation cycle."""

    field: np.ndarray
    iterations: np.ndarray
    bounds: PlaneBounds
    elapsed: float


@tf.function
def _escape_step(zs: tf.Tensor, cs: tf.Tensor, ns: tf.Tensor, active: tf.Tensor) -> tuple[tf.Tensor, tf.Tensor, tf.Tensor]:
    """Advance every live point once; diverged points keep their state."""

    folded = tf.complex(tf.abs(tf.math.real(zs)), -tf.abs(tf.math.imag(zs)))
    zs_new = folded * folded + cs
    zs = tf.where(active, zs_new, zs)
    radius = tf.constant(ESCAPE_RADIUS, dtype=tf.float64)
    # Strict: a magnitude of exactly 2 is still live.
    active = tf.logical_and(active, tf.abs(zs) <= radius)
    ns = ns + tf.cast(active, tf.int32)
    return zs, ns, active


@tf.function
def _escape_run(cs: tf.Tensor, zs: tf.Tensor, ns: tf.Tensor, passes: tf.Tensor) -> tuple[tf.Tensor, tf.Tensor, tf.Tensor, tf.Tensor]:
    """Run up to ``passes`` whole-grid steps, stopping once nothing is live."""

    passes = tf.cast(passes, tf.int32)
    i = tf.constant(0, dtype=tf.int32)
    active = tf.ones_like(ns, tf.bool)

    def cond(i: tf.Tensor, zs: tf.Tensor, ns: tf.Tensor, active: tf.Tensor) -> tf.Tensor:
        return tf.logical_and(tf.less(i, passes), tf.reduce_any(active))

    def body(i: tf.Tensor, zs: tf.Tensor, ns: tf.Tensor, active: tf.Tensor) -> tuple[tf.Tensor, tf.Tensor, tf.Tensor, tf.Tensor]:
        zs, ns, active = _escape_step(zs, cs, ns, active)
        return i + 1, zs, ns, active

    return tf.while_loop(cond, body, (i, zs, ns, active))


def iterate_field(field: np.ndarray, max_iterations: int = MAX_ITERATION, *, device: Optional[str] = None) -> np.ndarray:
    """Count iterations before divergence for every constant in ``field``.

    The grid gets ``max_iterations + 1`` passes and counts saturate at
    ``max_iterations``. A point whose first iterate ``z_1 = c`` already
    lies outside the escape radius scores 0.
    """

    passes = tf.constant(max_iterations + 1, dtype=tf.int32)
    with tf.device(device if device is not None else "/CPU:0"):
        cs = tf.convert_to_tensor(field, dtype=tf.complex128)
        zs = tf.zeros_like(cs)
        ns = tf.zeros(tf.shape(cs), tf.int32)

        _, _, ns, _ = _escape_run(cs, zs, ns, passes)
        ns = tf.minimum(ns, tf.cast(max_iterations, tf.int32))

    return ns.numpy()


def render_frame(viewport: Viewport, max_iterations: int = MAX_ITERATION, *, device: Optional[str] = None) -> RenderResult:
    """Materialize the coordinate field of ``viewport`` and iterate it."""

    bounds = compute_bounds(viewport)
    field = coordinate_field(viewport)

    start = time.perf_counter()
    iterations = iterate_field(field, max_iterations, device=device)
    elapsed = time.perf_counter() - start

    return RenderResult(field=field, iterations=iterations, bounds=bounds, elapsed=elapsed)
