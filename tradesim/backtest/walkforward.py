"""tradesim.backtest.walkforward

Backtest orchestration without parameter optimisation.

Goal: see how one strategy behaves over different slices of history, without
letting one slice leak into the next.
- single run: one window, optional warmup prefix
- walk-forward: consecutive windows, engine reset after each
- Monte-Carlo: random windows of equal length, engine reset after each

Per window the protocol is fixed:
1) warmup pass over ``[start, start + warmup)``: engine state builds, nothing is scored
2) scored run over ``[start + warmup, end)``
3) ``engine.reset(False)`` for sweeps, unless state is explicitly continued

Windows run strictly one after another. The engine is a single mutable
resource; running two windows at once against it would mix their accounts.
All preconditions are checked before the first engine call.
"""

from __future__ import annotations

import logging
import threading
from collections import Counter
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from datetime import timedelta

import numpy as np

from tradesim.core.config import BacktestSettings
from tradesim.core.exceptions import ConfigError, EngineFailure, InvalidArgumentError
from tradesim.core.timeframe import DEFAULT_RESOLUTION, Timeframe
from tradesim.core.timespan import TimeSpan
from tradesim.core.types import Feed, SimulationEngine

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class WindowRun:
    """One executed window: the scored timeframe and the warmup before it."""

    name: str
    timeframe: Timeframe
    warmup: Timeframe | None = None

    @property
    def window(self) -> Timeframe:
        return self.timeframe if self.warmup is None else self.timeframe.with_start(self.warmup.start)


@dataclass(frozen=True, slots=True)
class _Plan:
    warmup: Timeframe | None
    scored: Timeframe


class _RunNames:
    """Names derived from window boundaries, suffixed when a window repeats."""

    def __init__(self) -> None:
        self._seen: Counter[str] = Counter()

    def next(self, timeframe: Timeframe) -> str:
        base = f"run-{timeframe}"
        self._seen[base] += 1
        n = self._seen[base]
        return base if n == 1 else f"{base}-{n}"


def plan_window(window: Timeframe, warmup: TimeSpan) -> tuple[Timeframe | None, Timeframe]:
    """Cut `window` into its warmup prefix and the scored remainder.

    Raises:
        InvalidArgumentError: if the warmup leaves nothing to score.
    """

    if warmup.is_zero:
        return None, window
    if warmup.is_negative:
        raise InvalidArgumentError(f"warmup must not be negative, got {warmup}")
    if not window.is_finite:
        raise InvalidArgumentError("warmup requires a finite timeframe")
    boundary = window.start + warmup
    if boundary >= window.end:
        raise InvalidArgumentError(f"warmup {warmup} leaves no evaluation period in {window}")
    return Timeframe(window.start, boundary), window.with_start(boundary)


class Backtest:
    """Drive `engine` over windows of `feed`.

    Holds no simulation state of its own. Everything that changes lives in the
    engine; independent sweeps need independent engines.
    """

    def __init__(self, feed: Feed, engine: SimulationEngine) -> None:
        self.feed = feed
        self.engine = engine

    def single_run(self, timeframe: Timeframe | None = None, warmup: TimeSpan = TimeSpan.ZERO) -> WindowRun:
        """Run once over `timeframe` (the feed's by default); the warmup is part of it."""

        tf = timeframe if timeframe is not None else self.feed.timeframe
        warm, scored = plan_window(tf, warmup)
        return self._execute(_Plan(warm, scored), _RunNames())

    def walk_forward(
        self,
        period: TimeSpan,
        warmup: TimeSpan = TimeSpan.ZERO,
        *,
        continue_state: bool = False,
        stop: threading.Event | None = None,
    ) -> list[WindowRun]:
        """Consecutive windows of `period + warmup` covering the feed timeframe.

        The warmup is exclusive: each window spends its first `warmup` warming
        up and scores the remaining `period`. A tail window too short to hold
        more than its warmup is dropped.
        """

        tf = self._finite_feed_timeframe()
        plans: list[_Plan] = []
        for window in tf.split(period, warmup):
            if not warmup.is_zero and window.start + warmup >= window.end:
                logger.warning("dropping window %s: not longer than warmup %s", window, warmup)
                continue
            plans.append(_Plan(*plan_window(window, warmup)))

        return self._sweep("walk-forward", plans, reset=not continue_state, stop=stop)

    def monte_carlo(
        self,
        period: TimeSpan,
        samples: int,
        warmup: TimeSpan = TimeSpan.ZERO,
        *,
        rng: np.random.Generator | None = None,
        seed: int | None = None,
        resolution: timedelta = DEFAULT_RESOLUTION,
        stop: threading.Event | None = None,
    ) -> list[WindowRun]:
        """`samples` random windows of `period + warmup` from the feed timeframe."""

        tf = self._finite_feed_timeframe()
        if not period.is_positive:
            raise InvalidArgumentError(f"period must be positive, got {period}")
        windows = tf.sample(period + warmup, samples, rng=rng, seed=seed, resolution=resolution)
        plans = [_Plan(*plan_window(w, warmup)) for w in windows]

        return self._sweep("monte-carlo", plans, reset=True, stop=stop)

    def run_configured(self, settings: BacktestSettings, *, stop: threading.Event | None = None) -> list[WindowRun]:
        """Run the mode selected in a config block."""

        if settings.mode == "single":
            return [self.single_run(warmup=settings.warmup)]

        if settings.period is None:
            raise ConfigError(f"mode {settings.mode} requires a period")
        if settings.mode == "walk_forward":
            return self.walk_forward(
                settings.period,
                settings.warmup,
                continue_state=settings.continue_state,
                stop=stop,
            )
        return self.monte_carlo(
            settings.period,
            settings.samples,
            settings.warmup,
            seed=settings.seed,
            resolution=settings.sample_resolution,
            stop=stop,
        )

    def _finite_feed_timeframe(self) -> Timeframe:
        tf = self.feed.timeframe
        if not tf.is_finite:
            raise InvalidArgumentError("feed needs a finite timeframe")
        return tf

    def _sweep(
        self,
        label: str,
        plans: list[_Plan],
        *,
        reset: bool,
        stop: threading.Event | None,
    ) -> list[WindowRun]:
        names = _RunNames()
        done: list[WindowRun] = []
        logger.info("%s: %d windows", label, len(plans))

        for plan in plans:
            if stop is not None and stop.is_set():
                logger.warning("%s stopped after %d of %d windows", label, len(done), len(plans))
                break
            done.append(self._execute(plan, names))
            if reset:
                self.engine.reset(False)

        return done

    def _execute(self, plan: _Plan, names: _RunNames) -> WindowRun:
        name = names.next(plan.scored)
        if plan.warmup is not None:
            logger.debug("warmup %s", plan.warmup, extra={"run": name})
            with _engine_call("warmup", name):
                self.engine.warmup(self.feed, plan.warmup)

        logger.info("run %s", name, extra={"run": name})
        with _engine_call("run", name):
            self.engine.run(self.feed, plan.scored, name=name)

        return WindowRun(name=name, timeframe=plan.scored, warmup=plan.warmup)


@contextmanager
def _engine_call(phase: str, name: str) -> Iterator[None]:
    try:
        yield
    except EngineFailure:
        logger.exception("engine %s failed", phase, extra={"run": name})
        raise
    except Exception as e:
        logger.exception("engine %s failed", phase, extra={"run": name})
        raise EngineFailure(f"{phase} failed for {name}: {type(e).__name__}: {e}") from e
