import pytest
import torch
import torch.autograd.functional

import mbpair.tests.utils
from mbpair.geometry import (
    RigidFrame,
    add_v_site_coords,
    compute_separation,
    compute_v_site_coords,
    distribute_v_site_grads,
)

_IN_PLANE = -9.721486914088159e-02
_OUT_OF_PLANE = 9.859272078406150e-02


def test_compute_separation():
    coords_1 = torch.tensor([[3.0, 4.0, 0.0], [1.0, 1.0, 1.0]])
    coords_2 = torch.tensor([[0.0, 0.0, 0.0], [1.0, 1.0, 3.0]])

    deltas, distances = compute_separation(coords_1, coords_2)

    assert torch.allclose(deltas, torch.tensor([[3.0, 4.0, 0.0], [0.0, 0.0, -2.0]]))
    assert torch.allclose(distances, torch.tensor([5.0, 2.0]))


def test_compute_v_site_coords():
    coords = torch.tensor(
        [[1.0, 1.0, 1.0], [2.0, 1.0, 1.0], [1.0, 2.0, 1.0]], dtype=torch.float64
    )

    v_site_coords = compute_v_site_coords(coords, 0.5, 0.25)

    expected_coords = torch.tensor(
        [[1.25, 1.25, 1.25], [1.25, 1.25, 0.75]], dtype=torch.float64
    )
    assert v_site_coords.shape == (2, 3)
    assert torch.allclose(v_site_coords, expected_coords)


def test_compute_v_site_coords_batched(water):
    rotation = mbpair.tests.utils.random_rotation(torch.Generator().manual_seed(1))

    coords = torch.stack([water, water @ rotation.T + 1.0])
    v_site_coords = compute_v_site_coords(coords, _IN_PLANE, _OUT_OF_PLANE)

    assert v_site_coords.shape == (2, 2, 3)

    for i in range(2):
        expected_coords = compute_v_site_coords(coords[i], _IN_PLANE, _OUT_OF_PLANE)
        assert torch.allclose(v_site_coords[i], expected_coords)


def test_compute_v_site_coords_symmetric(water):
    v_site_1, v_site_2 = compute_v_site_coords(water, _IN_PLANE, _OUT_OF_PLANE)

    # the two sites are mirror images through the plane of the molecule.
    assert torch.isclose(v_site_1[2], -v_site_2[2])
    assert torch.allclose(v_site_1[:2], v_site_2[:2])

    distance_1 = torch.norm(v_site_1 - water[0])
    distance_2 = torch.norm(v_site_2 - water[0])
    assert torch.isclose(distance_1, distance_2)


def test_add_v_site_coords(water):
    coords = add_v_site_coords(water, _IN_PLANE, _OUT_OF_PLANE)

    assert coords.shape == (5, 3)
    assert torch.allclose(coords[:3], water)
    assert torch.allclose(
        coords[3:], compute_v_site_coords(water, _IN_PLANE, _OUT_OF_PLANE)
    )


class TestRigidFrame:
    def test_from_coords(self, water):
        frame = RigidFrame.from_coords(water + 1.0, 0.5, 0.25)

        assert torch.allclose(frame.origin, torch.ones(3, dtype=torch.float64))
        assert torch.allclose(frame.bond_1, water[1])
        assert torch.allclose(frame.bond_2, water[2])
        assert frame.in_plane == 0.5
        assert frame.out_of_plane == 0.25

    @pytest.mark.parametrize("seed", [0, 1, 2])
    def test_adjoint_jacobian(self, water, seed):
        generator = torch.Generator().manual_seed(seed)

        coords = water @ mbpair.tests.utils.random_rotation(generator).T
        grads = torch.randn((2, 3), generator=generator, dtype=torch.float64)

        jacobian = torch.autograd.functional.jacobian(
            lambda x: compute_v_site_coords(x, _IN_PLANE, _OUT_OF_PLANE), coords
        )
        expected_grads = torch.einsum("vc,vcad->ad", grads, jacobian)

        frame = RigidFrame.from_coords(coords, _IN_PLANE, _OUT_OF_PLANE)
        atom_grads = frame.adjoint(grads[0], grads[1])

        assert atom_grads.shape == (3, 3)
        assert torch.allclose(atom_grads, expected_grads)

    def test_adjoint_finite_difference(self, water):
        generator = torch.Generator().manual_seed(3)
        grads = torch.randn((2, 3), generator=generator, dtype=torch.float64)

        def energy_fn(coords):
            v_site_coords = compute_v_site_coords(coords, _IN_PLANE, _OUT_OF_PLANE)
            return (grads * v_site_coords).sum()

        expected_grads = mbpair.tests.utils.compute_finite_difference_grad(
            energy_fn, water
        )
        atom_grads = distribute_v_site_grads(
            water, grads[0], grads[1], _IN_PLANE, _OUT_OF_PLANE
        )

        assert torch.allclose(atom_grads, expected_grads, atol=1.0e-8)

    def test_adjoint_conserves_momentum(self, water):
        generator = torch.Generator().manual_seed(4)
        grad_1, grad_2 = torch.randn((2, 3), generator=generator, dtype=torch.float64)

        frame = RigidFrame.from_coords(water, _IN_PLANE, _OUT_OF_PLANE)
        atom_grads = frame.adjoint(grad_1, grad_2)

        assert torch.allclose(atom_grads.sum(dim=0), grad_1 + grad_2)

    def test_adjoint_broadcast(self, water):
        generator = torch.Generator().manual_seed(5)

        coords = torch.stack([water, water + 2.0])
        grads = torch.randn((2, 4, 2, 3), generator=generator, dtype=torch.float64)

        frame = RigidFrame.from_coords(coords, _IN_PLANE, _OUT_OF_PLANE)
        broadcast_frame = RigidFrame(
            frame.origin[:, None],
            frame.bond_1[:, None],
            frame.bond_2[:, None],
            frame.in_plane,
            frame.out_of_plane,
        )
        atom_grads = broadcast_frame.adjoint(grads[..., 0, :], grads[..., 1, :])

        assert atom_grads.shape == (2, 4, 3, 3)

        for i in range(2):
            for j in range(4):
                expected_grads = distribute_v_site_grads(
                    coords[i],
                    grads[i, j, 0],
                    grads[i, j, 1],
                    _IN_PLANE,
                    _OUT_OF_PLANE,
                )
                assert torch.allclose(atom_grads[i, j], expected_grads)
