import pytest
import torch

from mbpair.potentials.switch import compute_switch

_R_INNER, _R_OUTER = 4.5, 6.5


@pytest.mark.parametrize(
    "distance, expected_value, expected_derivative",
    [
        (1.0, 1.0, 0.0),
        (4.5, 1.0, 0.0),
        (5.5, 0.5, -0.25 * torch.pi),
        (6.5, 0.0, 0.0),
        (10.0, 0.0, 0.0),
    ],
)
def test_compute_switch(distance, expected_value, expected_derivative):
    distances = torch.tensor([distance], dtype=torch.float64)

    value, derivative = compute_switch(distances, _R_INNER, _R_OUTER)

    assert torch.isclose(value, torch.tensor(expected_value, dtype=torch.float64))
    assert torch.isclose(
        derivative, torch.tensor(expected_derivative, dtype=torch.float64)
    )


def test_compute_switch_continuous():
    epsilon = 1.0e-9

    distances = torch.tensor(
        [_R_INNER - epsilon, _R_INNER + epsilon, _R_OUTER - epsilon, _R_OUTER + epsilon],
        dtype=torch.float64,
    )
    value, derivative = compute_switch(distances, _R_INNER, _R_OUTER)

    assert torch.allclose(value[0], value[1])
    assert torch.allclose(value[2], value[3])
    assert torch.allclose(derivative, torch.zeros_like(derivative), atol=1.0e-6)


def test_compute_switch_monotonic():
    distances = torch.linspace(3.0, 8.0, 501, dtype=torch.float64)
    value, derivative = compute_switch(distances, _R_INNER, _R_OUTER)

    assert (value[1:] <= value[:-1]).all()
    assert (derivative <= 0.0).all()

    assert ((value >= 0.0) & (value <= 1.0)).all()


def test_compute_switch_derivative():
    distances = torch.linspace(4.6, 6.4, 19, dtype=torch.float64)
    step = 1.0e-6

    _, derivative = compute_switch(distances, _R_INNER, _R_OUTER)

    value_plus, _ = compute_switch(distances + step, _R_INNER, _R_OUTER)
    value_minus, _ = compute_switch(distances - step, _R_INNER, _R_OUTER)

    expected_derivative = (value_plus - value_minus) / (2.0 * step)

    assert torch.allclose(derivative, expected_derivative, atol=1.0e-8)
