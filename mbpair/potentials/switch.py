"""Smoothly switch pair terms off between an inner and outer cutoff."""

import math

import torch


def compute_switch(
    distances: torch.Tensor, r_inner: float, r_outer: float
) -> tuple[torch.Tensor, torch.Tensor]:
    """Computes a half-cosine switching function and its derivative.

    The switch is 1 up to ``r_inner``, falls as ``(1 + cos(x)) / 2`` with
    ``x = pi * (r - r_inner) / (r_outer - r_inner)`` across the band, and is 0 from
    ``r_outer`` onwards. Its derivative vanishes at both edges of the band.

    Args:
        distances: The distances [Å] to evaluate the switch at.
        r_inner: The distance [Å] at which the switch starts to turn off.
        r_outer: The distance [Å] at which the switch reaches zero.

    Returns:
        The value and derivative [Å^-1] of the switch at each distance.
    """

    scale = math.pi / (r_outer - r_inner)
    x = (distances - r_inner) * scale

    band_value = 0.5 * (1.0 + torch.cos(x))
    band_derivative = -0.5 * scale * torch.sin(x)

    is_inner = distances <= r_inner
    is_outer = distances >= r_outer

    value = torch.where(is_outer, 0.0, torch.where(is_inner, 1.0, band_value))
    derivative = torch.where(is_inner | is_outer, 0.0, band_derivative)

    return value, derivative
