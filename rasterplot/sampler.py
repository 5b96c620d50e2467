from __future__ import annotations

from dataclasses import dataclass
import logging
import math
from typing import Callable, Iterator, Union

from rasterplot.config import RenderConfig


LOGGER = logging.getLogger(__name__)

PlotFunction = Callable[[float], float]

DEFAULT_NOMINAL_STEP = 0.12
DEFAULT_MIN_STEP = 0.001
DEFAULT_STEEP_THRESHOLD = 1.0
DEFAULT_DOMAIN_SKIP_RATIO = 0.1


@dataclass(frozen=True)
class Evaluated:
    value: float


@dataclass(frozen=True)
class DomainFault:
    argument: float
    reason: str


EvalResult = Union[Evaluated, DomainFault]


@dataclass(frozen=True)
class AdaptiveStep:
    step: float
    value: float


StepOutcome = Union[AdaptiveStep, DomainFault]


@dataclass(frozen=True)
class SamplePoint:
    x: float
    y: float


@dataclass
class SamplerState:
    arg: float
    nominal_step: float
    iterations: int = 0
    plotted: int = 0
    skipped: int = 0


def evaluate(f: PlotFunction, x: float) -> EvalResult:
    """Call ``f(x)``, turning math domain failures into a ``DomainFault``.

    ``ValueError`` and ``ArithmeticError`` (which covers ``ZeroDivisionError``,
    ``OverflowError`` and ``DomainEvaluationError``) count as domain failures,
    as do complex, NaN and infinite results. Other exceptions propagate.
    """
    try:
        raw = f(x)
    except (ValueError, ArithmeticError) as exc:
        return DomainFault(argument=x, reason=str(exc) or type(exc).__name__)
    if isinstance(raw, complex):
        return DomainFault(argument=x, reason="complex result")
    value = float(raw)
    if not math.isfinite(value):
        return DomainFault(argument=x, reason=f"non-finite result {value}")
    return Evaluated(value)


def reset_step(
    x: float,
    step: float,
    f: PlotFunction,
    *,
    min_step: float = DEFAULT_MIN_STEP,
    threshold: float = DEFAULT_STEEP_THRESHOLD,
) -> StepOutcome:
    """Shrink ``step`` where ``f`` changes by more than ``threshold`` over it."""
    first = evaluate(f, x)
    if isinstance(first, DomainFault):
        return first
    second = evaluate(f, x + step)
    if isinstance(second, DomainFault):
        return second
    diff = abs(first.value - second.value)
    if diff > threshold:
        return AdaptiveStep(step=max(step / diff, min_step), value=first.value)
    return AdaptiveStep(step=step, value=first.value)


class AdaptiveFunctionSampler:
    """Walks ``[start, end)`` with a steepness-driven step, skipping undefined regions."""

    def __init__(
        self,
        nominal_step: float = DEFAULT_NOMINAL_STEP,
        *,
        min_step: float = DEFAULT_MIN_STEP,
        steep_threshold: float = DEFAULT_STEEP_THRESHOLD,
        domain_skip_ratio: float = DEFAULT_DOMAIN_SKIP_RATIO,
    ) -> None:
        if min_step <= 0:
            raise ValueError("min_step must be > 0")
        if nominal_step < min_step:
            raise ValueError("nominal_step must be >= min_step")
        if steep_threshold <= 0:
            raise ValueError("steep_threshold must be > 0")
        if domain_skip_ratio <= 0:
            raise ValueError("domain_skip_ratio must be > 0")
        self.nominal_step = float(nominal_step)
        self.min_step = float(min_step)
        self.steep_threshold = float(steep_threshold)
        self.domain_skip_ratio = float(domain_skip_ratio)
        self._last_state: SamplerState | None = None

    @classmethod
    def from_config(cls, config: RenderConfig) -> "AdaptiveFunctionSampler":
        return cls(
            config.nominal_step,
            min_step=config.min_step,
            steep_threshold=config.steep_threshold,
            domain_skip_ratio=config.domain_skip_ratio,
        )

    @property
    def last_state(self) -> SamplerState | None:
        return self._last_state

    def sample(self, f: PlotFunction, start: float, end: float) -> Iterator[SamplePoint]:
        if not (math.isfinite(start) and math.isfinite(end)):
            raise ValueError("sampling interval must be finite")
        state = SamplerState(arg=float(start), nominal_step=self.nominal_step)
        self._last_state = state
        while state.arg < end:
            state.iterations += 1
            outcome = reset_step(
                state.arg,
                state.nominal_step,
                f,
                min_step=self.min_step,
                threshold=self.steep_threshold,
            )
            if isinstance(outcome, DomainFault):
                state.skipped += 1
                state.arg = _advance(state.arg, state.nominal_step * self.domain_skip_ratio)
                continue
            state.plotted += 1
            yield SamplePoint(x=state.arg, y=outcome.value)
            state.arg = _advance(state.arg, outcome.step)
        LOGGER.debug(
            "sampled [%s, %s): %d iterations, %d points, %d skipped",
            start,
            end,
            state.iterations,
            state.plotted,
            state.skipped,
        )


def _advance(arg: float, step: float) -> float:
    # Far from zero a step can be smaller than the float spacing; move at least one ulp.
    nxt = arg + step
    if nxt <= arg:
        return math.nextafter(arg, math.inf)
    return nxt
