import logging
import numpy as np
from typing import Callable, List, Optional

from .solvers import BaseSolver, StepResult

logger = logging.getLogger(__name__)


class TrainingSession:
    """One training run: the coefficient vector, the iteration budget and a stop flag.

    The session does not schedule anything. Whoever drives it (an animation
    loop, a timer, a test) calls :meth:`tick` once per frame.
    """

    def __init__(self, solver: BaseSolver, dataset: np.ndarray, output: np.ndarray, iterations: int):
        self.solver = solver
        self.dataset = np.asarray(dataset, dtype=float)
        self.output = np.asarray(output, dtype=float)
        if self.dataset.ndim != 2 or len(self.dataset) != len(self.output):
            raise ValueError(
                f"Dataset of shape {self.dataset.shape} does not match {len(self.output)} outputs."
            )
        self.coefficients = np.zeros(self.dataset.shape[1])
        self.iterations = iterations
        self.iterations_left = iterations
        self.cost_history: List[float] = []
        self._stopped = False

        logger.info(
            "Starting %s run: %d samples, %d features, %d iterations",
            type(solver).__name__, self.dataset.shape[0], self.dataset.shape[1], iterations,
        )

    @property
    def running(self) -> bool:
        return not self._stopped and self.iterations_left > 0

    @property
    def last_cost(self) -> Optional[float]:
        return self.cost_history[-1] if self.cost_history else None

    @property
    def diverged(self) -> bool:
        """True once the latest cost is no longer a finite number."""
        return self.last_cost is not None and not np.isfinite(self.last_cost)

    def stop(self):
        """Cancel the run; takes effect before the next tick."""
        if self.running:
            logger.info("Run stopped with %d iterations left", self.iterations_left)
        self._stopped = True

    def tick(self) -> Optional[StepResult]:
        """Perform exactly one solver step, or nothing if the run is over."""
        if not self.running:
            return None

        result = self.solver.step(self.coefficients, self.dataset, self.output)
        self.coefficients = result.coefficients
        self.iterations_left -= 1
        self.cost_history.append(result.cost)

        if self.diverged:
            logger.warning("Cost became %s, training diverged. Try reducing the learning rate.", result.cost)

        if self.iterations_left == 0:
            logger.info("Run finished: final cost %.6g", result.cost)
        return result

    def run(self, callback: Optional[Callable[[int, StepResult], None]] = None, every: int = 1) -> List[float]:
        """Drive ticks until the budget is spent or the run is stopped.

        ``callback(iteration, result)`` is called every ``every`` ticks and on
        the last one; it may call :meth:`stop`.
        """
        if every < 1:
            raise ValueError(f"Callback interval must be at least 1, got {every}.")
        while self.running:
            result = self.tick()
            iteration = self.iterations - self.iterations_left
            if callback is not None and (iteration % every == 0 or not self.running):
                callback(iteration, result)
        return self.cost_history
