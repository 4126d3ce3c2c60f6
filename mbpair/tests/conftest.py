import pytest
import torch

import mbpair
import mbpair.tests.utils


@pytest.fixture
def water() -> torch.Tensor:
    """Returns the coordinates [Å] of a water molecule ordered O, H, H."""
    return mbpair.tests.utils.WATER.clone()


@pytest.fixture(scope="module")
def water_water_model() -> mbpair.TensorPairModel:
    """Returns a water-water model with a random quadratic polynomial."""
    return mbpair.tests.utils.build_test_model("mbpol")


@pytest.fixture(scope="module")
def water_ion_model() -> mbpair.TensorPairModel:
    """Returns a water-sodium model with a random quadratic polynomial."""
    return mbpair.tests.utils.build_test_model("h2o-na-pol0")


@pytest.fixture(scope="module")
def ion_ion_model() -> mbpair.TensorPairModel:
    """Returns the lithium-lithium model."""
    return mbpair.tests.utils.build_test_model("li-li")
