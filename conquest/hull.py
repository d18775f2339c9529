"""
concave hull of a 2D point cloud.

this is the core geometry for word conquest: start from the convex hull,
then repeatedly dig long edges inward toward nearby inner points until
no edge can be dug any further.

concavity is the edge length below which an edge is left alone, so large
values give the plain convex hull and small values give a tighter,
more concave boundary.

the result is always an open ring (closing vertex not repeated) wound
counter-clockwise, made only of input points.
"""

import math
from typing import Optional

import numpy as np
from numpy.typing import ArrayLike, NDArray

from .config import Config, DEFAULT_CONFIG


def _as_points(points: ArrayLike) -> NDArray[np.float64]:
    arr = np.asarray(points, dtype=np.float64)
    if arr.size == 0:
        return arr.reshape(0, 2)
    if arr.ndim != 2 or arr.shape[1] != 2:
        raise ValueError(f"points must have shape (N, 2), got: {arr.shape}")
    if not np.all(np.isfinite(arr)):
        raise ValueError("points must be finite")
    return arr


def unique_points(points: ArrayLike) -> NDArray[np.float64]:
    """drop duplicate points; result is sorted by x, then y."""
    arr = _as_points(points)
    if len(arr) == 0:
        return arr
    return np.unique(arr, axis=0)


def _orient(o, a, b) -> float:
    """z of (a - o) x (b - o): > 0 left turn, < 0 right turn, 0 collinear."""
    return (a[0] - o[0]) * (b[1] - o[1]) - (a[1] - o[1]) * (b[0] - o[0])


def _on_segment(a, b, p) -> bool:
    """p is already known to be collinear with a-b."""
    return (
        min(a[0], b[0]) <= p[0] <= max(a[0], b[0])
        and min(a[1], b[1]) <= p[1] <= max(a[1], b[1])
    )


def segments_intersect(p1, p2, p3, p4) -> bool:
    """
    check if segment p1-p2 and segment p3-p4 share any point.

    touching (an endpoint on the other segment) and collinear overlap
    both count as intersecting.
    """
    d1 = _orient(p3, p4, p1)
    d2 = _orient(p3, p4, p2)
    d3 = _orient(p1, p2, p3)
    d4 = _orient(p1, p2, p4)

    if ((d1 > 0 > d2) or (d1 < 0 < d2)) and ((d3 > 0 > d4) or (d3 < 0 < d4)):
        return True

    # collinear / touching cases
    if d1 == 0 and _on_segment(p3, p4, p1):
        return True
    if d2 == 0 and _on_segment(p3, p4, p2):
        return True
    if d3 == 0 and _on_segment(p1, p2, p3):
        return True
    if d4 == 0 and _on_segment(p1, p2, p4):
        return True
    return False


def _convex_indices(pts: NDArray[np.float64]) -> list[int]:
    """
    andrew's monotone chain over points sorted by (x, y).

    returns indices of hull vertices in counter-clockwise order.
    collinear points along an edge are dropped, so an all-collinear
    input gives just its two extreme points.
    """
    n = len(pts)
    if n < 3:
        return list(range(n))

    lower: list[int] = []
    for i in range(n):
        while len(lower) >= 2 and _orient(pts[lower[-2]], pts[lower[-1]], pts[i]) <= 0:
            lower.pop()
        lower.append(i)

    upper: list[int] = []
    for i in reversed(range(n)):
        while len(upper) >= 2 and _orient(pts[upper[-2]], pts[upper[-1]], pts[i]) <= 0:
            upper.pop()
        upper.append(i)

    # last point of each chain is the first point of the other
    return lower[:-1] + upper[:-1]


def convex_hull(points: ArrayLike) -> NDArray[np.float64]:
    """
    convex hull of a point set.

    args:
        points: array-like of shape (N, 2)

    returns:
        hull vertices, shape (H, 2), counter-clockwise. fewer than 3
        rows when the input has fewer than 3 unique points or is collinear.
    """
    pts = unique_points(points)
    return pts[_convex_indices(pts)]


def is_simple_polygon(ring: ArrayLike) -> bool:
    """check that an open ring has >= 3 vertices and no crossing edges."""
    ring = _as_points(ring)
    n = len(ring)
    if n < 3:
        return False

    # no repeated consecutive vertices (including the wraparound)
    if np.any(np.all(ring == np.roll(ring, -1, axis=0), axis=1)):
        return False

    for i in range(n):
        p1, p2 = ring[i], ring[(i + 1) % n]
        for j in range(i + 2, n):
            # edges n-1 and 0 share the first vertex
            if i == 0 and j == n - 1:
                continue
            if segments_intersect(p1, p2, ring[j], ring[(j + 1) % n]):
                return False
    return True


def points_in_polygon(ring: ArrayLike, points: ArrayLike, eps: float = 1e-12) -> NDArray[np.bool_]:
    """
    vectorized inside-or-on-boundary test.

    args:
        ring: open ring of shape (M, 2), M >= 3
        points: query points of shape (N, 2)
        eps: tolerance for "on an edge"

    returns:
        bool array of shape (N,)
    """
    ring = _as_points(ring)
    pts = _as_points(points)

    # shape (1, M) edge endpoints against (N, 1) query coords
    ax, ay = ring[:, 0][None, :], ring[:, 1][None, :]
    nxt = np.roll(ring, -1, axis=0)
    bx, by = nxt[:, 0][None, :], nxt[:, 1][None, :]
    px, py = pts[:, 0][:, None], pts[:, 1][:, None]

    # --- on boundary ---

    cross = (bx - ax) * (py - ay) - (by - ay) * (px - ax)
    within = (
        (np.minimum(ax, bx) - eps <= px) & (px <= np.maximum(ax, bx) + eps)
        & (np.minimum(ay, by) - eps <= py) & (py <= np.maximum(ay, by) + eps)
    )
    on_edge = ((np.abs(cross) <= eps) & within).any(axis=1)

    # --- ray casting to +x ---

    straddles = (ay > py) != (by > py)
    with np.errstate(divide="ignore", invalid="ignore"):
        x_cross = ax + (py - ay) * (bx - ax) / (by - ay)
    crossings = (straddles & (px < x_cross)).sum(axis=1)

    return on_edge | (crossings % 2 == 1)


def _cos(o, a, b) -> float:
    """cosine of the angle at o between o→a and o→b."""
    ax, ay = a[0] - o[0], a[1] - o[1]
    bx, by = b[0] - o[0], b[1] - o[1]
    return (ax * bx + ay * by) / math.sqrt((ax * ax + ay * ay) * (bx * bx + by * by))


def _crosses_ring(pts: NDArray[np.float64], start: int, end: int, ring: list[int]) -> bool:
    """check segment pts[start]-pts[end] against ring edges not touching start."""
    n = len(ring)
    for k in range(n):
        e0, e1 = ring[k], ring[(k + 1) % n]
        if start == e0 or start == e1:
            continue
        if segments_intersect(pts[start], pts[end], pts[e0], pts[e1]):
            return True
    return False


def _triangle_is_empty(pts: NDArray[np.float64], a: int, p: int, b: int) -> bool:
    """no other point lies in the closed triangle (a, p, b)."""
    others = np.delete(pts, [a, p, b], axis=0)
    if len(others) == 0:
        return True

    def side(u, v):
        return (v[0] - u[0]) * (others[:, 1] - u[1]) - (v[1] - u[1]) * (others[:, 0] - u[0])

    d1 = side(pts[a], pts[p])
    d2 = side(pts[p], pts[b])
    d3 = side(pts[b], pts[a])
    has_neg = (d1 < 0) | (d2 < 0) | (d3 < 0)
    has_pos = (d1 > 0) | (d2 > 0) | (d3 > 0)
    # outside iff signs disagree
    return bool(np.all(has_neg & has_pos))


def _mid_point(
    pts: NDArray[np.float64],
    a: int,
    b: int,
    candidates: NDArray[np.int64],
    ring: list[int],
    min_cos: float,
) -> Optional[int]:
    """
    pick the inner point to pull into edge (a, b), if any.

    a candidate must sit within the max angle of both endpoints, must not
    make either new edge cross the ring, and must not leave any point
    outside the new boundary. among those, keep the one that beats the
    current best on both angles.
    """
    best: Optional[int] = None
    best_cos_a = best_cos_b = min_cos

    for p in candidates:
        p = int(p)
        cos_a = _cos(pts[a], pts[b], pts[p])
        cos_b = _cos(pts[b], pts[a], pts[p])
        if cos_a <= best_cos_a or cos_b <= best_cos_b:
            continue
        if _crosses_ring(pts, a, p, ring) or _crosses_ring(pts, b, p, ring):
            continue
        if not _triangle_is_empty(pts, a, p, b):
            continue
        best, best_cos_a, best_cos_b = p, cos_a, cos_b

    return best


def concave_hull(
    points: ArrayLike,
    concavity: Optional[float] = None,
    config: Config = DEFAULT_CONFIG,
) -> NDArray[np.float64]:
    """
    compute the concave hull of a point set.

    args:
        points: array-like of shape (N, 2), duplicates allowed
        concavity: max edge length left undug (default: config.concavity)
        config: angle and search-box limits

    returns:
        open ring of shape (H, 2), counter-clockwise. with fewer than 3
        unique points (or all points collinear) the ring is degenerate
        and has fewer than 3 rows.
    """
    if concavity is None:
        concavity = config.concavity
    if concavity <= 0:
        raise ValueError(f"concavity must be positive, got: {concavity}")

    pts = unique_points(points)
    if len(pts) < 3:
        return pts

    hull_ids = _convex_indices(pts)
    convex = pts[hull_ids]
    if len(hull_ids) < 3:
        return convex

    inner = np.ones(len(pts), dtype=bool)
    inner[hull_ids] = False
    if not inner.any():
        return convex

    # --- search limits ---

    extent = pts.max(axis=0) - pts.min(axis=0)
    max_search = extent * config.max_search_bbox_fraction
    # grow the search box by roughly the mean point spacing per attempt
    step = math.sqrt(extent[0] * extent[1] / len(pts))
    max_sq_len = concavity ** 2
    min_cos = math.cos(math.radians(config.max_concave_angle_deg))

    ring = list(hull_ids)
    skip: set[tuple[int, int]] = set()

    # --- dig ---

    inserted = True
    while inserted:
        inserted = False
        i = 0
        while i < len(ring):
            a, b = ring[i], ring[(i + 1) % len(ring)]
            pa, pb = pts[a], pts[b]
            if (a, b) in skip or (pb[0] - pa[0]) ** 2 + (pb[1] - pa[1]) ** 2 < max_sq_len:
                i += 1
                continue

            lo = np.minimum(pa, pb)
            hi = np.maximum(pa, pb)
            grow = 0
            while True:
                box_lo = lo - grow * step
                box_hi = hi + grow * step
                width, height = box_hi - box_lo
                in_box = inner & np.all((pts >= box_lo) & (pts <= box_hi), axis=1)
                mid = _mid_point(pts, a, b, np.flatnonzero(in_box), ring, min_cos)
                grow += 1
                if mid is not None or not (max_search[0] > width or max_search[1] > height):
                    break

            if width >= max_search[0] and height >= max_search[1]:
                skip.add((a, b))

            if mid is not None:
                ring.insert(i + 1, mid)
                inner[mid] = False
                inserted = True

            i += 1

    result = pts[ring]

    # digging should never break the polygon; if it did, use the convex hull
    if not is_simple_polygon(result) or not points_in_polygon(result, pts).all():
        return convex
    return result
