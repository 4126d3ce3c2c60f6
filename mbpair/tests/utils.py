import itertools
import math
import typing

import torch

import mbpair
import mbpair.ff

_OH_DISTANCE = 0.9572
_HOH_ANGLE = math.radians(104.52)

WATER = torch.tensor(
    [
        [0.0, 0.0, 0.0],
        [_OH_DISTANCE, 0.0, 0.0],
        [_OH_DISTANCE * math.cos(_HOH_ANGLE), _OH_DISTANCE * math.sin(_HOH_ANGLE), 0.0],
    ],
    dtype=torch.float64,
)
"""The coordinates [Å] of a water molecule ordered O, H, H with O at the origin."""

N_VARIABLES = {
    mbpair.ff.WaterWaterParameters: 31,
    mbpair.ff.WaterIonParameters: 8,
    mbpair.ff.IonIonParameters: 1,
}


def random_rotation(generator: torch.Generator) -> torch.Tensor:
    """Returns a random orthogonal matrix."""

    matrix = torch.randn((3, 3), generator=generator, dtype=torch.float64)
    rotation, _ = torch.linalg.qr(matrix)

    return rotation


def body_coords(body: mbpair.BodyDef, generator: torch.Generator) -> torch.Tensor:
    """Returns randomly oriented coordinates [Å] of a body with its anchor at the
    origin."""

    if body.n_atoms == 1:
        return torch.zeros((1, 3), dtype=torch.float64)

    return WATER @ random_rotation(generator).T


def pair_coords(
    model: mbpair.TensorPairModel, distance: float, seed: int = 0
) -> tuple[torch.Tensor, torch.Tensor]:
    """Returns randomly oriented coordinates [Å] of the two bodies of a model, where
    the anchors of the two bodies are ``distance`` apart."""

    generator = torch.Generator().manual_seed(seed)

    direction = torch.randn(3, generator=generator, dtype=torch.float64)
    direction = direction / torch.norm(direction)

    coords_a = body_coords(model.body_a, generator)
    coords_b = body_coords(model.body_b, generator) + distance * direction

    return coords_a, coords_b


def batched_pair_coords(
    model: mbpair.TensorPairModel, distances: list[float], seed: int = 0
) -> tuple[torch.Tensor, torch.Tensor]:
    """Returns coordinates with ``shape=(n_confs, n_atoms, 3)`` of the two bodies at
    each of the requested anchor-anchor distances."""

    coords = [
        pair_coords(model, distance, seed + i) for i, distance in enumerate(distances)
    ]
    coords_a, coords_b = zip(*coords, strict=True)

    return torch.stack(coords_a), torch.stack(coords_b)


def build_test_model(name: str, seed: int = 0) -> mbpair.TensorPairModel:
    """Builds the model of a published fit. Fits whose polynomial basis is not
    shipped are given a random quadratic polynomial in their primitive variables."""

    parameters = mbpair.ff.PARAMETER_SETS[name]

    if isinstance(parameters, mbpair.ff.IonIonParameters):
        return mbpair.ff.build_model(name)

    polynomial = mbpair.MonomialPolynomial.full(N_VARIABLES[type(parameters)], 2)

    generator = torch.Generator().manual_seed(seed)
    coefficients = 0.1 * torch.randn(
        polynomial.n_terms, generator=generator, dtype=torch.float64
    )

    return mbpair.ff.build_model(name, polynomial, coefficients)


def compute_finite_difference_grad(
    fn: typing.Callable[[torch.Tensor], torch.Tensor],
    coords: torch.Tensor,
    step: float = 1.0e-5,
) -> torch.Tensor:
    """Computes the gradient of a scalar function using central finite differences."""

    grad = torch.zeros_like(coords)

    for idx in itertools.product(*(range(size) for size in coords.shape)):
        coords_plus, coords_minus = coords.clone(), coords.clone()
        coords_plus[idx] += step
        coords_minus[idx] -= step

        grad[idx] = (fn(coords_plus) - fn(coords_minus)) / (2.0 * step)

    return grad
