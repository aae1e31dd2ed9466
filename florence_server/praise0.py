"""Praise event 0: logical AND of two inputs."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Praise0Input:
    """Inputs for praise event 0."""

    a: bool = False
    b: bool = False


@dataclass
class Praise0Output:
    """Result of praise event 0."""

    result: bool = False


class Praise0Algorithm:
    """Computes praise event 0."""

    def do_praise(self, inputs: Praise0Input, outputs: Praise0Output) -> None:
        """Store ``a and b`` in the output."""
        outputs.result = bool(inputs.a) and bool(inputs.b)