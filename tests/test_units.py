import numpy as np
import pytest

from spatial_actuation.io.units import UnitsConfig, from_si, get_preset, label_for, to_si


def test_units_round_trip_scalar() -> None:
    cfg = UnitsConfig(preset="KM", enabled=True)
    for kind in ["length", "time", "velocity", "omega", "force", "torque", "power"]:
        original = 1.2345
        round_trip = from_si(to_si(original, kind, cfg), kind, cfg)
        assert np.isclose(round_trip, original)


def test_disabled_units_are_si() -> None:
    cfg = UnitsConfig(preset="KM", enabled=False)
    assert to_si(2.0, "length", cfg) == 2.0


def test_km_scales_torque_and_force() -> None:
    km = UnitsConfig(preset="KM", enabled=True)
    assert np.isclose(to_si(2.5, "torque", km), 2.5e6)
    assert np.allclose(to_si([1.0, 2.0], "force", km), [1000.0, 2000.0])


def test_only_si_and_km_presets() -> None:
    assert get_preset("SI").L == 1.0
    with pytest.raises(ValueError):
        get_preset("ASTRO")
    with pytest.raises(ValueError):
        to_si(1.0, "mass_flow", UnitsConfig(preset="SI"))


def test_labels() -> None:
    cfg = UnitsConfig(preset="KM", enabled=True)
    assert label_for("velocity", cfg) == "km/s"
    assert label_for("power", UnitsConfig(preset="SI")) == "kg*m^2/s^3"
