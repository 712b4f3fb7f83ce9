"""Base types for technical indicators."""

from typing import TypeAlias

# Index-aligned 1:1 with the bars it was derived from
ScalarSeries: TypeAlias = list[float]

# Same length as its source; None where the window is not yet full
OptionalScalarSeries: TypeAlias = list[float | None]
