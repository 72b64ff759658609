# SPDX-License-Identifier: MIT
"""Error hierarchy shared by the engines and the simulation."""


class EvoSimError(Exception):
    """Base for all evosim exceptions."""

    pass


class ConfigurationError(EvoSimError, ValueError):
    """Invalid configuration value or override."""

    pass


class EmptyPopulationError(EvoSimError, ValueError):
    """An operation that needs at least one individual got none."""

    pass


class ParityError(EvoSimError, ValueError):
    """Parent chromosomes differ in length."""

    pass


class LengthMismatchError(EvoSimError, ValueError):
    """A flat vector does not match the width a network expects."""

    pass


class InvalidTopologyError(EvoSimError, ValueError):
    """Layer topology describes fewer than two layers."""

    pass


class UnsupportedOperationError(EvoSimError, NotImplementedError):
    """The individual cannot provide the requested view."""

    pass
