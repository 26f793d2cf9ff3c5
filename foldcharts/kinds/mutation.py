"""Per-call randomization state threaded through the recursive engines."""

from __future__ import annotations

from dataclasses import dataclass

from foldcharts.errors import MissingRandomizationError
from foldcharts.generator.randomizer import RandomGenerator
from foldcharts.models.shape import BaseChartConfig, Mutation


@dataclass
class MutationState:
    """Mutation bias plus the two seeded streams of one generation call.

    Created fresh for every call and discarded afterwards; each ``draw``
    advances the length stream first, then the angle stream.
    """

    mutation: Mutation
    length: RandomGenerator
    angle: RandomGenerator

    @classmethod
    def from_config(cls, config: BaseChartConfig) -> MutationState:
        if config.mutation is None or config.randomizer is None:
            raise MissingRandomizationError(
                f"{config.kind.value} needs both mutation and randomizer"
            )
        r = config.randomizer
        return cls(
            mutation=config.mutation,
            length=RandomGenerator(r.size_seed, r.size_amplitude),
            angle=RandomGenerator(r.angle_seed, r.angle_amplitude),
        )

    def draw(self, length: float, radian: float) -> tuple[float, float]:
        """Scale a nominal (length, radian) by one fresh mutated draw each."""
        length_random = self.length.generate()
        angle_random = self.angle.generate()
        return (
            length * (length_random + self.mutation.size),
            radian * (angle_random + self.mutation.angle),
        )
