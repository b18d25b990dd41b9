"""Tests for spline-backed property fields."""

import contextlib
import warnings

import pytest
import torch

from splinefield.material import (
    SplineDomainWarning,
    SplineProperty,
    SplinePropertyConfig,
    SplineVariableMismatchWarning,
    derivative_property_name,
)


@contextlib.contextmanager
def _assert_no_spline_warnings():
    with warnings.catch_warnings(record=True) as caught:
        warnings.simplefilter("always")
        yield
    assert not [
        w
        for w in caught
        if issubclass(
            w.category, (SplineDomainWarning, SplineVariableMismatchWarning)
        )
    ]


def _free_energy(**kwargs):
    options = dict(
        x=[0.0, 0.2, 0.45, 0.7, 1.0],
        y=[0.0, -0.12, -0.05, -0.14, 0.0],
        property_name="F",
        variable="c",
    )
    options.update(kwargs)
    return SplineProperty(SplinePropertyConfig(**options))


class TestDerivativePropertyName:
    def test_names(self):
        assert derivative_property_name("F", "c", 0) == "F"
        assert derivative_property_name("F", "c", 1) == "dF/dc"
        assert derivative_property_name("F", "c", 2) == "d^2F/dc^2"
        assert derivative_property_name("f_chem", "eta", 3) == (
            "d^3f_chem/deta^3"
        )

    def test_negative_order(self):
        with pytest.raises(ValueError):
            derivative_property_name("F", "c", -1)


class TestSplinePropertyConfig:
    def test_defaults(self):
        config = SplinePropertyConfig(
            x=[0.0, 1.0], y=[0.0, 1.0], property_name="F", variable="c"
        )

        assert config.boundary_left == 1e30
        assert config.boundary_right == 1e30
        assert config.spline_variable is None
        assert config.derivative_order == 2
        assert config.warn_on_clamp

    def test_empty_property_name(self):
        with pytest.raises(ValueError, match="property_name"):
            SplinePropertyConfig(
                x=[0.0, 1.0], y=[0.0, 1.0], property_name="", variable="c"
            )

    def test_empty_variable(self):
        with pytest.raises(ValueError, match="variable"):
            SplinePropertyConfig(
                x=[0.0, 1.0], y=[0.0, 1.0], property_name="F", variable=""
            )

    def test_negative_derivative_order(self):
        with pytest.raises(ValueError, match="derivative_order"):
            SplinePropertyConfig(
                x=[0.0, 1.0],
                y=[0.0, 1.0],
                property_name="F",
                variable="c",
                derivative_order=-1,
            )


class TestSplineProperty:
    def test_construction_error_propagates(self):
        from splinefield.spline import LengthMismatchError

        with pytest.raises(LengthMismatchError):
            _free_energy(x=[0.0, 1.0], y=[0.0, 1.0, 2.0])

    def test_property_names(self):
        assert _free_energy().property_names == ["F", "dF/dc", "d^2F/dc^2"]
        assert _free_energy(derivative_order=0).property_names == ["F"]
        assert _free_energy(derivative_order=1).property_names == [
            "F",
            "dF/dc",
        ]

    def test_compute_matches_engine(self):
        from splinefield.spline import cubic_spline_derivative

        free_energy = _free_energy(boundary_left=-1.0)
        c = torch.linspace(0.05, 0.95, 12, dtype=torch.float64).view(3, 4)

        fields = free_energy.compute(c)

        assert list(fields) == ["F", "dF/dc", "d^2F/dc^2"]
        for order, name in enumerate(free_energy.property_names):
            assert fields[name].shape == (3, 4)
            torch.testing.assert_close(
                fields[name],
                cubic_spline_derivative(free_energy.spline, c, order),
                atol=0,
                rtol=0,
            )

    def test_compute_interpolates_knots(self):
        free_energy = _free_energy()

        fields = free_energy.compute(free_energy.spline.knots)

        torch.testing.assert_close(
            fields["F"], free_energy.spline.knot_values, atol=1e-14, rtol=0
        )

    def test_compute_higher_order_is_zero(self):
        free_energy = _free_energy(derivative_order=3)
        c = torch.rand(5, dtype=torch.float64)

        fields = free_energy.compute(c)

        assert torch.equal(fields["d^3F/dc^3"], torch.zeros_like(c))

    def test_compute_scalar(self):
        fields = _free_energy().compute(0.3)

        assert all(value.shape == () for value in fields.values())

    def test_value_and_derivative(self):
        free_energy = _free_energy(boundary_right=0.8)

        torch.testing.assert_close(
            free_energy.derivative(1.0, 1),
            torch.tensor(0.8, dtype=torch.float64),
            rtol=1e-9,
            atol=0,
        )
        assert free_energy.value(0.45).item() == pytest.approx(-0.05)

    def test_spline_variable_mismatch_warns(self):
        with pytest.warns(SplineVariableMismatchWarning, match="'phi'"):
            free_energy = _free_energy(spline_variable="phi")

        assert free_energy.property_names[1] == "dF/dc"

    def test_spline_variable_match_is_silent(self):
        with _assert_no_spline_warnings():
            _free_energy(spline_variable="c")

    def test_out_of_domain_warns_once(self):
        free_energy = _free_energy()
        c = torch.tensor([-0.5, 0.5, 1.5], dtype=torch.float64)

        with pytest.warns(SplineDomainWarning, match="-0.5"):
            first = free_energy.compute(c)

        with _assert_no_spline_warnings():
            free_energy.compute(c)
            free_energy.value(2.0)

        assert free_energy.clamped_count == 5
        assert first["F"][0].item() == free_energy.value(0.0).item()
        assert first["F"][2].item() == free_energy.value(1.0).item()

    def test_in_domain_is_silent(self):
        free_energy = _free_energy()

        with _assert_no_spline_warnings():
            free_energy.compute(torch.linspace(0, 1, 11, dtype=torch.float64))

        assert free_energy.clamped_count == 0

    def test_warn_on_clamp_disabled(self):
        free_energy = _free_energy(warn_on_clamp=False)

        with _assert_no_spline_warnings():
            free_energy.compute(torch.tensor([-1.0, 2.0]))

        assert free_energy.clamped_count == 2

    def test_warning_state_is_per_instance(self):
        first = _free_energy()
        second = _free_energy()

        with pytest.warns(SplineDomainWarning):
            first.value(-1.0)
        with pytest.warns(SplineDomainWarning):
            second.value(-1.0)

    def test_check_derivatives_first(self):
        free_energy = _free_energy()
        c = torch.tensor([0.1, 0.3, 0.55, 0.85], dtype=torch.float64)

        check = free_energy.check_derivatives(c)

        assert check.first.shape == (4,)
        assert torch.all(check.first_difference < 1e-7)
        torch.testing.assert_close(
            check.first_difference,
            torch.abs(check.first - check.first_numerical),
        )

    def test_check_derivatives_second(self):
        free_energy = _free_energy()
        c = torch.tensor([0.1, 0.3, 0.55, 0.85], dtype=torch.float64)

        check = free_energy.check_derivatives(c, eps=1e-4)

        assert torch.all(check.second_difference < 1e-5)

    def test_check_derivatives_does_not_track_clamping(self):
        free_energy = _free_energy()

        with _assert_no_spline_warnings():
            free_energy.check_derivatives(torch.tensor([0.0, 1.0]))

        assert free_energy.clamped_count == 0

    def test_summary(self):
        summary = _free_energy(spline_variable="c").summary()

        assert summary.splitlines()[0] == "SplineProperty 'F':"
        assert "  Spline variable: c" in summary
        assert "  Domain: [0.0, 1.0]" in summary
        assert "  Number of data points: 5" in summary
        assert "  Derivative order: 2" in summary
        assert "  Properties: F, dF/dc, d^2F/dc^2" in summary
        assert "  X values: 0, 0.2, 0.45, 0.7, 1" in summary
        assert "  Y values: 0, -0.12, -0.05, -0.14, 0" in summary

    def test_summary_omits_long_knot_lists(self):
        x = torch.linspace(0, 1, 25, dtype=torch.float64)
        summary = _free_energy(x=x, y=x**2).summary()

        assert "Number of data points: 25" in summary
        assert "X values" not in summary

    def test_repr(self):
        assert repr(_free_energy()) == (
            "SplineProperty(property_name='F', variable='c', n_knots=5, "
            "derivative_order=2)"
        )
