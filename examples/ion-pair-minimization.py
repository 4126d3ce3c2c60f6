import torch
import torch.optim

import mbpair
import mbpair.ff


def main():
    # Build the tensor model of the potassium-bromide two-body term, which ships
    # with its fitted polynomial coefficients.
    model = mbpair.ff.build_model("k-br")

    coords_k = torch.zeros((1, 3), dtype=torch.float64)
    coords_br = torch.tensor([[0.0, 0.0, 6.5]], dtype=torch.float64)
    coords_br.requires_grad = True

    # Minimize the position of the bromide ion. Back-propagating through
    # ``compute_pair_energy`` uses the analytic gradient of the term.
    optimizer = torch.optim.Adam([coords_br], lr=0.01)

    for epoch in range(100):
        energy = mbpair.compute_pair_energy(model, coords_k, coords_br)
        energy.backward()

        optimizer.step()
        optimizer.zero_grad()

        print(f"Epoch {epoch}: E={energy.item():.6f} kcal / mol")

    distance = torch.norm(coords_br.detach() - coords_k)
    print(f"final K-Br distance: {distance.item():.4f} Å")


if __name__ == "__main__":
    main()
