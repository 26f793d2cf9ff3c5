"""Exception types. Precondition errors are programmer mistakes, never retried."""

from __future__ import annotations


class ChartPreconditionError(ValueError):
    """A caller broke the contract of a chart kind."""


class MissingRandomizationError(ChartPreconditionError):
    """Mutation or randomizer absent on a kind that recurses with randomization."""


class UnsupportedChartKindError(ChartPreconditionError):
    """Kind handed to an adapter that does not serve it, or with no adapter at all."""


class ChartConsistencyError(RuntimeError):
    """Points and orders of one chart disagree (an adapter pair is broken)."""
