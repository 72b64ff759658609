# SPDX-License-Identifier: MIT
"""
Neuroevolution simulator package.

`evosim.nn` and `evosim.ga` are self-contained engines (feed-forward networks
and a genetic algorithm). `evosim.sim` wires them into a toroidal world of prey
and predators, while `evosim.core` hosts configuration, errors, logging and the
headless backend used by renderers. `evosim.main` is the command-line runner.
"""

__version__ = "0.1.0"

__all__ = ["main"]
