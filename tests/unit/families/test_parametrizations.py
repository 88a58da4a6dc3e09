"""
Tests for parametrizations and their constraints.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import dataclasses

import pytest

from statcalc_core.distributions.support import ContinuousSupport
from statcalc_core.families.parametric_family import ParametricFamily
from statcalc_core.families.parametrizations import Parametrization, constraint, parametrization
from statcalc_core.types import (
    CharacteristicName,
    DistributionKind,
    Interval1D,
    UnivariateContinuous,
)


def _make_family() -> ParametricFamily:
    return ParametricFamily(
        kind=DistributionKind.UNIFORM,
        name="Box",
        distr_type=UnivariateContinuous,
        parameter_ranges={"low": Interval1D(-10.0, 10.0), "high": Interval1D(-10.0, 10.0)},
        distr_characteristics={
            CharacteristicName.PDF: lambda p, x: 1.0 / (p.high - p.low),
            CharacteristicName.CDF: lambda p, x: (x - p.low) / (p.high - p.low),
            CharacteristicName.MEAN: lambda p, _: (p.low + p.high) / 2.0,
            CharacteristicName.VAR: lambda p, _: (p.high - p.low) ** 2 / 12.0,
        },
        support_by_parametrization=lambda p: ContinuousSupport(left=p.low, right=p.high),
    )


class TestParametrization:
    def setup_method(self):
        self.family = _make_family()

        @parametrization(family=self.family)
        class _Box(Parametrization):
            low: float
            high: float

            @constraint(description="low < high")
            def check_order(self) -> bool:
                return self.low < self.high

        self.cls = _Box

    def test_becomes_frozen_dataclass(self):
        assert dataclasses.is_dataclass(self.cls)
        instance = self.cls(0.0, 1.0)
        with pytest.raises(dataclasses.FrozenInstanceError):
            instance.low = 2.0  # type: ignore[misc]

    def test_registered_with_family(self):
        assert self.family.base is self.cls
        assert self.cls.__family__ is self.family

    def test_parameters_and_values(self):
        instance = self.cls(0.5, 2.0)
        assert instance.parameters == {"low": 0.5, "high": 2.0}
        assert instance.values == (0.5, 2.0)

    def test_constraints_collected(self):
        assert [c.description for c in self.cls(0.0, 1.0).constraints] == ["low < high"]

    def test_validation(self):
        assert self.cls(0.0, 1.0).is_valid
        invalid = self.cls(1.0, 0.0)
        assert not invalid.is_valid
        assert [c.description for c in invalid.violated_constraints()] == ["low < high"]
        with pytest.raises(ValueError, match='Constraint "low < high" does not hold'):
            invalid.validate()

    def test_second_parametrization_rejected(self):
        with pytest.raises(ValueError, match="already has a parametrization"):

            @parametrization(family=self.family)
            class _Other(Parametrization):
                low: float
                high: float


class TestParametrizationRegistration:
    def test_field_count_must_match_parameters(self):
        family = _make_family()
        with pytest.raises(ValueError, match="expected 2"):

            @parametrization(family=family)
            class _Single(Parametrization):
                low: float

    def test_constraint_must_be_instance_method(self):
        family = _make_family()
        with pytest.raises(TypeError):

            @parametrization(family=family)
            class _Static(Parametrization):
                low: float
                high: float

                @staticmethod
                @constraint(description="static")
                def check() -> bool:
                    return True

    def test_base_requires_registration(self):
        with pytest.raises(ValueError, match="not registered"):
            _ = _make_family().base
