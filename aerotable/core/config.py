"""Design file management for AeroTable.

A design file is a JSON document holding project metadata, the vehicle
configuration and the sweep settings used to build its aerodynamic table.
"""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass, field
from datetime import datetime, timezone
from enum import Enum
from pathlib import Path
from typing import Any

import numpy as np

from aerotable.core.vehicle import RocketConfiguration, configuration_from_dict

logger = logging.getLogger(__name__)


# --- Project metadata ---


@dataclass
class ProjectMeta:
    """Top-level project metadata."""

    name: str = "Untitled"
    description: str = ""
    author: str = ""
    version: str = "0.1.0"
    created: str = ""
    modified: str = ""

    def touch(self) -> None:
        """Update the modified timestamp."""
        self.modified = datetime.now(timezone.utc).isoformat()


@dataclass
class SweepSettings:
    """Mach sweep parameters.

    Defaults reproduce the classic 0.00 to 3.00 sweep in steps of 0.01 at
    zero angle of attack; ``mach_stop`` is exclusive.
    """

    mach_start: float = 0.0
    mach_stop: float = 3.01
    mach_step: float = 0.01
    aoa: float = 0.0  # deg
    calculator: str = "barrowman"


@dataclass
class DesignState:
    """Complete design: metadata, vehicle and sweep settings."""

    meta: ProjectMeta = field(default_factory=ProjectMeta)
    vehicle: RocketConfiguration = field(default_factory=RocketConfiguration)
    sweep: SweepSettings = field(default_factory=SweepSettings)


# --- JSON serialization ---


class _DesignEncoder(json.JSONEncoder):
    """JSON encoder that handles numpy types and enums."""

    def default(self, obj: Any) -> Any:
        if isinstance(obj, np.ndarray):
            return obj.tolist()
        if isinstance(obj, (np.integer,)):
            return int(obj)
        if isinstance(obj, (np.floating,)):
            return float(obj)
        if isinstance(obj, Enum):
            return obj.value
        return super().default(obj)


def save_design_json(state: DesignState, path: str | Path) -> None:
    """Save design state to a JSON file."""
    path = Path(path)
    if not state.meta.created:
        state.meta.created = datetime.now(timezone.utc).isoformat()
    state.meta.touch()

    with open(path, "w", encoding="utf-8") as f:
        json.dump(asdict(state), f, indent=2, cls=_DesignEncoder)

    logger.info("Saved design to %s", path)


def load_design_json(path: str | Path) -> DesignState:
    """Load design state from a JSON file.

    Raises:
        ValueError: If the file content does not describe a design.
    """
    path = Path(path)
    with open(path, encoding="utf-8") as f:
        data = json.load(f)

    try:
        state = DesignState(
            meta=ProjectMeta(**data.get("meta", {})),
            vehicle=configuration_from_dict(data.get("vehicle", {})),
            sweep=SweepSettings(**data.get("sweep", {})),
        )
    except (TypeError, ValueError) as exc:
        raise ValueError(f"Invalid design file {path}: {exc}") from exc

    logger.info("Loaded design '%s' from %s", state.meta.name, path)
    return state
