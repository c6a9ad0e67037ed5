"""Build models and states from in-memory definition dicts.

Schema (version 1)::

    {
      "schema_version": 1,
      "units": {"preset": "SI", "enabled": true},
      "time": 0.0,
      "bodies": [
        {"name": "torso", "pos": [x, y, z], "vel": [...],
         "quat": [w, x, y, z], "omega_body": [...]}
      ],
      "actuators": [
        {"type": "body_actuator", "name": "push", "body": "torso",
         "controls": [tx, ty, tz, fx, fy, fz]}
      ]
    }

Only ``name`` is required per body; kinematics default to rest at the origin.
"""

from __future__ import annotations

import logging
from typing import Any

import numpy as np

from ..core.actuators import BodyActuator
from ..core.controls import PrescribedControls
from ..core.model import Model
from ..core.state import RigidBodiesState, SystemState
from .units import PRESETS, UnitsConfig, config_from_defn, to_si


logger = logging.getLogger(__name__)

ModelDefinition = dict[str, Any]

ACTUATOR_TYPES = {"body_actuator"}


def model_from_definition(defn: ModelDefinition) -> Model:
    """Validate ``defn`` and return an assembled model."""
    defn = validate_definition(defn)
    units_cfg = config_from_defn(defn)

    controls = PrescribedControls()
    model = Model(name=str(defn.get("name", "model")), control_source=controls)
    for entry in defn["bodies"]:
        model.add_body(entry["name"])

    for idx, entry in enumerate(defn.get("actuators", [])):
        name = entry.get("name", f"body_actuator_{idx}")
        actuator = BodyActuator(name=name)
        actuator.set_body_name(entry["body"])
        model.add_actuator(actuator)
        if "controls" in entry:
            controls.set_controls(name, _controls_to_si(entry["controls"], units_cfg))

    model.finalize_connections()
    return model


def state_from_definition(defn: ModelDefinition) -> SystemState:
    defn = validate_definition(defn)
    units_cfg = config_from_defn(defn)
    bodies = defn["bodies"]
    m = len(bodies)

    def _column(key: str, default: list[float], kind: str | None) -> np.ndarray:
        rows = [entry.get(key, default) for entry in bodies]
        arr = np.asarray(rows, dtype=np.float64).reshape(m, len(default))
        if kind is not None:
            arr = np.asarray(to_si(arr, kind, units_cfg), dtype=np.float64)
        return arr

    rb = RigidBodiesState(
        pos=_column("pos", [0.0, 0.0, 0.0], "length"),
        vel=_column("vel", [0.0, 0.0, 0.0], "velocity"),
        quat=_column("quat", [1.0, 0.0, 0.0, 0.0], None),
        omega=_column("omega_body", [0.0, 0.0, 0.0], "omega"),
    )
    t = float(to_si(defn.get("time", 0.0), "time", units_cfg))
    return SystemState(rigid_bodies=rb, t=t)


def _controls_to_si(values: Any, units_cfg: UnitsConfig) -> np.ndarray:
    u = np.asarray(values, dtype=np.float64)
    torque = np.asarray(to_si(u[0:3], "torque", units_cfg), dtype=np.float64)
    force = np.asarray(to_si(u[3:6], "force", units_cfg), dtype=np.float64)
    return np.concatenate([torque, force])


def _require(obj: dict[str, Any], key: str, ctx: str) -> Any:
    if key not in obj:
        raise ValueError(f"missing required field: {ctx}.{key}")
    return obj[key]


def _validate_vector(value: Any, size: int, ctx: str) -> None:
    arr = np.asarray(value, dtype=np.float64)
    if arr.shape != (size,):
        raise ValueError(f"{ctx} must have length {size}")
    if not np.all(np.isfinite(arr)):
        raise ValueError(f"{ctx} must be finite")


def validate_definition(data: Any) -> ModelDefinition:
    if not isinstance(data, dict):
        raise ValueError("definition must be a dict")
    if data.get("schema_version") != 1:
        raise ValueError("schema_version must be 1")

    if "units" in data:
        units = data["units"]
        if not isinstance(units, dict):
            raise ValueError("units must be an object")
        if str(units.get("preset", "SI")).upper() not in PRESETS:
            raise ValueError("units.preset is not supported")
        if "enabled" in units and not isinstance(units["enabled"], bool):
            raise ValueError("units.enabled must be boolean")

    bodies = _require(data, "bodies", "definition")
    if not isinstance(bodies, list):
        raise ValueError("bodies must be a list")
    seen: set[str] = set()
    for idx, entry in enumerate(bodies):
        ctx = f"bodies[{idx}]"
        name = _require(entry, "name", ctx)
        if not isinstance(name, str) or not name:
            raise ValueError(f"{ctx}.name must be a non-empty string")
        if name in seen:
            raise ValueError(f"duplicate body name: {name}")
        seen.add(name)
        for key, size in (("pos", 3), ("vel", 3), ("quat", 4), ("omega_body", 3)):
            if key in entry:
                _validate_vector(entry[key], size, f"{ctx}.{key}")

    actuators = data.get("actuators", [])
    if not isinstance(actuators, list):
        raise ValueError("actuators must be a list")
    names: set[str] = set()
    for idx, entry in enumerate(actuators):
        ctx = f"actuators[{idx}]"
        kind = entry.get("type", "body_actuator")
        if kind not in ACTUATOR_TYPES:
            raise ValueError(f"{ctx}.type unsupported: {kind}")
        body = _require(entry, "body", ctx)
        if not isinstance(body, str):
            raise ValueError(f"{ctx}.body must be a string")
        name = entry.get("name", f"body_actuator_{idx}")
        if name in names:
            raise ValueError(f"duplicate actuator name: {name}")
        names.add(name)
        if "controls" in entry:
            _validate_vector(entry["controls"], BodyActuator.num_controls, f"{ctx}.controls")

    return data
