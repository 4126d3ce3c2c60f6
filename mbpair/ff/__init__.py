"""Calibrated constants of two-body fits and the builders that turn them into tensor
models."""

from mbpair.ff._config import (
    IonIonParameters,
    PairParameters,
    WaterIonParameters,
    WaterWaterParameters,
)
from mbpair.ff._ff import (
    build_ion_ion_model,
    build_model,
    build_water_ion_model,
    build_water_water_model,
    model_builder,
)
from mbpair.ff._parameters import PARAMETER_SETS

__all__ = [
    "PARAMETER_SETS",
    "IonIonParameters",
    "PairParameters",
    "WaterIonParameters",
    "WaterWaterParameters",
    "build_ion_ion_model",
    "build_model",
    "build_water_ion_model",
    "build_water_water_model",
    "model_builder",
]
