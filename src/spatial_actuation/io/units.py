"""Units presets and conversions for model definitions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import numpy as np


@dataclass(frozen=True, slots=True)
class UnitPreset:
    name: str
    L: float
    M: float
    T: float
    length_label: str
    mass_label: str
    time_label: str


@dataclass(frozen=True, slots=True)
class UnitsConfig:
    preset: str
    enabled: bool = True


PRESETS: dict[str, UnitPreset] = {
    "SI": UnitPreset("SI", 1.0, 1.0, 1.0, "m", "kg", "s"),
    "KM": UnitPreset("KM", 1000.0, 1.0, 1.0, "km", "kg", "s"),
}


def get_preset(name: str) -> UnitPreset:
    if name not in PRESETS:
        raise ValueError(f"unknown units preset: {name}")
    return PRESETS[name]


def default_config() -> UnitsConfig:
    return UnitsConfig(preset="SI", enabled=True)


def config_from_defn(defn: dict[str, Any]) -> UnitsConfig:
    units = defn.get("units", {})
    if not isinstance(units, dict):
        return default_config()
    preset = str(units.get("preset", "SI")).upper()
    enabled = bool(units.get("enabled", True))
    if preset not in PRESETS:
        preset = "SI"
    return UnitsConfig(preset=preset, enabled=enabled)


def label_for(kind: str, cfg: UnitsConfig) -> str:
    preset = _effective_preset(cfg)
    l = preset.length_label
    m = preset.mass_label
    t = preset.time_label
    labels = {
        "length": l,
        "time": t,
        "velocity": f"{l}/{t}",
        "omega": f"1/{t}",
        "force": f"{m}*{l}/{t}^2",
        "torque": f"{m}*{l}^2/{t}^2",
        "power": f"{m}*{l}^2/{t}^3",
    }
    return labels.get(kind, "")


def to_si(value: Any, kind: str, cfg: UnitsConfig) -> Any:
    scale = _scale_for_kind(kind, _effective_preset(cfg))
    return _apply_scale(value, scale)


def from_si(value: Any, kind: str, cfg: UnitsConfig) -> Any:
    scale = _scale_for_kind(kind, _effective_preset(cfg))
    return _apply_scale(value, 1.0 / scale)


def _effective_preset(cfg: UnitsConfig) -> UnitPreset:
    return get_preset(cfg.preset if cfg.enabled else "SI")


def _scale_for_kind(kind: str, preset: UnitPreset) -> float:
    if kind == "length":
        return preset.L
    if kind == "time":
        return preset.T
    if kind == "velocity":
        return preset.L / preset.T
    if kind == "omega":
        return 1.0 / preset.T
    if kind == "force":
        return preset.M * preset.L / (preset.T**2)
    if kind == "torque":
        return preset.M * (preset.L**2) / (preset.T**2)
    if kind == "power":
        return preset.M * (preset.L**2) / (preset.T**3)
    raise ValueError(f"unsupported unit kind: {kind}")


def _apply_scale(value: Any, scale: float) -> Any:
    if isinstance(value, (list, tuple, np.ndarray)):
        arr = np.asarray(value, dtype=np.float64)
        return (arr * scale).astype(np.float64)
    return float(value) * scale
