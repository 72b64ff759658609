# SPDX-License-Identifier: MIT
"""
Core services: configuration, errors and logging.

The headless backend lives in `evosim.core.simulation_backend`; it is not
re-exported here because it depends on `evosim.sim`, which itself imports
this package.
"""

from .config import (  # noqa: F401
    BrainConfig,
    EyeConfig,
    GeneticConfig,
    SimConfig,
    SimulationConfig,
    WorldConfig,
    apply_overrides,
    load_config,
)
from .exceptions import (  # noqa: F401
    ConfigurationError,
    EmptyPopulationError,
    EvoSimError,
    InvalidTopologyError,
    LengthMismatchError,
    ParityError,
    UnsupportedOperationError,
)
