import torch

import mbpair
import mbpair.ff


def main():
    # Water-ion fits ship their coefficients but not the polynomial basis they were
    # fit with, so here a simple quadratic in the 8 primitive variables (with its own
    # coefficients) stands in for it. Any function of the coefficients and variables
    # can be used via ``mbpair.autograd_polynomial``.
    polynomial = mbpair.MonomialPolynomial.full(8, 2)
    coefficients = 0.1 * torch.ones(polynomial.n_terms, dtype=torch.float64)

    model = mbpair.ff.build_model("h2o-na-pol0", polynomial, coefficients)

    coords_water = torch.tensor(
        [[0.0, 0.0, 0.0], [0.9572, 0.0, 0.0], [-0.2400, 0.9266, 0.0]],
        dtype=torch.float64,
    )
    coords_na = torch.tensor([[-1.5, -1.5, 5.0]], dtype=torch.float64)

    energy, grad_water, grad_na, force_matrix = mbpair.compute_force_matrix(
        model, coords_water, coords_na
    )

    print(f"E={energy.item():.6f} kcal / mol")

    # Each row of the force matrix holds the contributions to the gradient of one
    # atom (O, H, H, Na) from each of the other atoms, with the lone pair sites
    # already folded back onto the water.
    names = ["O", "H1", "H2", "Na"]

    for i, name in enumerate(names):
        contributions = ", ".join(
            f"{other}={force_matrix[i, j].norm().item():.4f}"
            for j, other in enumerate(names)
        )
        print(f"{name}: {contributions}")

    grads = torch.cat([grad_water, grad_na])
    assert torch.allclose(force_matrix.sum(dim=1), grads)


if __name__ == "__main__":
    main()
