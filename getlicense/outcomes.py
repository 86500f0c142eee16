import queue
from dataclasses import dataclass


@dataclass(frozen=True)
class RefreshOutcome:
    """
    Result of materializing one license: error is None on success.
    """

    key: str
    error: BaseException | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def Success(cls, key: str) -> "RefreshOutcome":
        return cls(key)

    @classmethod
    def Failure(cls, key: str, error: BaseException) -> "RefreshOutcome":
        return cls(key, error)


class OutcomeCollector:
    """
    Bounded multi-producer, single-consumer collection of refresh outcomes.
    Capacity equals the number of producers, so Post never blocks as long as each
    producer posts exactly once.
    Parameters
    ----------
    capacity : int
        Number of outcomes expected.
    """

    def __init__(self, capacity: int):

        self.capacity = capacity
        # maxsize=0 would make the queue unbounded
        self._queue: queue.Queue[RefreshOutcome] = queue.Queue(maxsize=max(capacity, 1))

    def Post(self, outcome: RefreshOutcome) -> None:

        self._queue.put_nowait(outcome)

    def Drain(self) -> list[RefreshOutcome]:
        """
        Returns all posted outcomes. Call only after every producer has finished.
        """

        outcomes = []

        while len(outcomes) < self.capacity:
            outcomes.append(self._queue.get_nowait())

        return outcomes
