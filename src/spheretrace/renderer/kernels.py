# renderer/kernels.py

import math

import numpy as np
from numba import njit, prange


@njit
def dot4(ax, ay, az, aw, bx, by, bz, bw):
    return ax * bx + ay * by + az * bz + aw * bw


@njit
def ray_sphere_hit(origin, dx, dy, dz, dw, position, radius):
    """
    Same quadratic as Sphere.intersect, reduced to the hit/miss answer.
    Operation order matches the object version so both agree bit for bit.
    """
    sx = origin[0] - position[0]
    sy = origin[1] - position[1]
    sz = origin[2] - position[2]
    sw = origin[3] - position[3]

    a = dot4(dx, dy, dz, dw, dx, dy, dz, dw)
    b = 2.0 * dot4(dx, dy, dz, dw, sx, sy, sz, sw)
    c = dot4(sx, sy, sz, sw, sx, sy, sz, sw) - radius * radius

    discriminant = b * b - 4.0 * a * c
    if discriminant < 0:
        return False

    sqrt_disc = math.sqrt(discriminant)
    t1 = (-b + sqrt_disc) / (2.0 * a)
    t2 = (-b - sqrt_disc) / (2.0 * a)
    return t1 > 0.0 or t2 > 0.0


@njit(parallel=True)
def hit_mask_kernel(width, height, ray_scalar, aspect_ratio, origin, position, radius, out):
    """
    Fills out[py, px] with the hit flag of every pixel ray.

    Parameters:
        width, height (int): Image dimensions
        ray_scalar (float): cos((90 - fov / 2) in radians)
        aspect_ratio (float): height / width
        origin (float64[4]): Camera position
        position (float64[4]): Sphere center
        radius (float): Sphere radius
        out (bool[height, width]): Output mask, one disjoint slot per pixel
    """
    for py in prange(height):
        dy = ((py / height) * 2.0 - 1.0) * aspect_ratio * ray_scalar
        for px in range(width):
            dx = ((px / width) * 2.0 - 1.0) * ray_scalar
            out[py, px] = ray_sphere_hit(origin, dx, dy, 1.0, 0.0, position, radius)


def compute_hit_mask(width, height, ray_scalar, aspect_ratio, origin, position, radius):
    out = np.zeros((height, width), dtype=np.bool_)
    hit_mask_kernel(width, height, ray_scalar, aspect_ratio,
                    np.ascontiguousarray(origin, dtype=np.float64),
                    np.ascontiguousarray(position, dtype=np.float64),
                    float(radius), out)
    return out
