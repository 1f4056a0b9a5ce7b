"""
Runs every currency rule against every flight.

Validation happens in two phases:

1. Setup: the flight index is built and each checker's setup() runs in
   turn on the calling thread. The IFR rule resolves its grace-period
   table here, oldest flight first.
2. Fan-out: one task per flight is submitted to a thread pool; each task
   runs every checker against its flight. Checkers only read shared
   state during this phase.

Setup finishes before the first task is submitted, so no check ever sees
a half-built table. If any task raises, pending tasks are cancelled and
the exception propagates unchanged; no partial result is returned.
"""

import logging
import time
from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import Iterable, List, Optional, Sequence

from badbehavior.config import config
from badbehavior.records import Flight
from badbehavior.validation.checkers import CHECKERS, ViolationChecker
from badbehavior.validation.flight_index import FlightIndex
from badbehavior.validation.violations import FlightViolations

logger = logging.getLogger(__name__)


class Validator:
    """
    Checks a logbook against the full catalogue of currency rules.

    Usage:
        violations = Validator(flights).violations()
    """

    def __init__(self, flights: Iterable[Flight], max_workers: Optional[int] = None):
        self.flight_index = FlightIndex(flights)
        self.max_workers = max_workers or config.validation.max_workers
        self.checkers: Sequence[ViolationChecker] = tuple(
            checker_class(self.flight_index) for checker_class in CHECKERS
        )

    def violations(self) -> List[FlightViolations]:
        """
        Every flight with at least one violation, in no particular order.

        Raises whatever a checker raises.
        """
        started = time.perf_counter()
        self._setup()

        results: List[FlightViolations] = []
        with ThreadPoolExecutor(max_workers=self.max_workers,
                                thread_name_prefix='validator') as executor:
            futures = [
                executor.submit(self._check_flight, flight)
                for flight in self.flight_index
            ]
            try:
                for future in as_completed(futures):
                    result = future.result()
                    if result is not None:
                        results.append(result)
            except BaseException:
                for future in futures:
                    future.cancel()
                raise

        elapsed = time.perf_counter() - started
        logger.info(
            f'Checked {len(self.flight_index)} flights against {len(self.checkers)} rules '
            f'in {elapsed:.2f}s: {len(results)} flights with violations'
        )
        return results

    def _setup(self) -> None:
        for checker in self.checkers:
            started = time.perf_counter()
            checker.setup()
            logger.debug(
                f'{checker.name} setup took {(time.perf_counter() - started) * 1000:.1f}ms'
            )

    def _check_flight(self, flight: Flight) -> Optional[FlightViolations]:
        found = []
        for checker in self.checkers:
            violation = checker.check(flight)
            if violation is not None:
                found.append(violation)
        if not found:
            return None
        return FlightViolations(flight=flight, violations=tuple(found))


def validate(flights: Iterable[Flight], max_workers: Optional[int] = None) -> List[FlightViolations]:
    """Validate flights; see Validator.violations."""
    return Validator(flights, max_workers=max_workers).violations()
