"""Shared fixtures for the ETL test suite."""

from __future__ import annotations

import copy
import json
from pathlib import Path
from typing import Any, Callable, Dict

import pytest

from evetl.build.compiler import decode_vehicle
from evetl.domain.vehicle import Vehicle

SAMPLE_TREE: Dict[str, Any] = {
    "schema_version": "1.0.0",
    "make": {"slug": "tesla", "name": "Tesla"},
    "model": {"slug": "model_3", "name": "Model 3"},
    "year": 2024,
    "trim": {"slug": "long_range", "name": "Long Range"},
    "vehicle_type": "passenger_car",
    "powertrain": {"drivetrain": "awd", "system_power_kw": 324.0, "system_torque_nm": 493},
    "battery": {
        "pack_capacity_kwh_gross": 82.0,
        "pack_capacity_kwh_net": 75.0,
        "chemistry": "NMC",
    },
    "charge_ports": [{"kind": "combo", "connector": "ccs2", "location": {"side": "left"}}],
    "charging": {"ac": {"max_power_kw": 11.0, "phases": 3}, "dc": {"max_power_kw": 250.0}},
    "range": {
        "rated": [
            {"cycle": "wltp", "range_km": 629.0},
            {"cycle": "epa", "range_km": 500.0},
        ]
    },
    "sources": [
        {
            "type": "oem",
            "title": "Tesla Model 3 Specifications",
            "url": "https://www.tesla.com/model3",
            "accessed_at": "2024-01-15T00:00:00Z",
        }
    ],
}


@pytest.fixture
def sample_tree() -> Dict[str, Any]:
    """A complete, valid vehicle tree."""
    return copy.deepcopy(SAMPLE_TREE)


@pytest.fixture
def make_vehicle() -> Callable[..., Vehicle]:
    """Build a Vehicle from the sample tree with top-level overrides."""

    def factory(**overrides: Any) -> Vehicle:
        tree = copy.deepcopy(SAMPLE_TREE)
        tree.update(overrides)
        return decode_vehicle(tree)

    return factory


@pytest.fixture
def write_json(tmp_path: Path) -> Callable[[str, Any], Path]:
    """Write a JSON document below tmp_path, creating parent directories."""

    def writer(relative: str, content: Any) -> Path:
        path = tmp_path / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(content), encoding="utf-8")
        return path

    return writer


@pytest.fixture
def layered_dataset(tmp_path: Path, write_json: Callable[[str, Any], Path]) -> Path:
    """tesla/model_3 with a model base, a year base and two variants."""
    base = copy.deepcopy(SAMPLE_TREE)
    del base["year"]
    del base["trim"]
    write_json("tesla/model_3/base.json", base)
    write_json(
        "tesla/model_3/2024/tesla_model_3.json",
        {"year": 2024, "trim": {"slug": "long_range", "name": "Long Range"}},
    )
    write_json(
        "tesla/model_3/2024/tesla_model_3_performance.json",
        {
            "trim": {"slug": "performance", "name": "Performance"},
            "powertrain": {"system_power_kw": 393.0},
        },
    )
    write_json(
        "tesla/model_3/2024/tesla_model_3_rwd.json",
        {
            "trim": {"slug": "rwd", "name": "RWD"},
            "powertrain": {"drivetrain": "rwd"},
            "charge_ports": [{"kind": "combo", "connector": "nacs"}],
        },
    )
    return tmp_path
