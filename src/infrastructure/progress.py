"""Console progress reporting."""

from tqdm import tqdm


class TqdmProgress:
    """Progress bar on stderr. Counts are advisory only."""

    def __init__(self, description: str = "Building report"):
        self.description = description
        self._bar: tqdm | None = None

    def start(self, total: int) -> None:
        self.stop()
        self._bar = tqdm(total=total, desc=self.description, leave=False)

    def advance(self, steps: int = 1) -> None:
        if self._bar is None:
            return
        # The initial total is an estimate, grow it instead of overflowing
        if self._bar.n + steps > self._bar.total:
            self._bar.total = self._bar.n + steps
            self._bar.refresh()
        self._bar.update(steps)

    def stop(self) -> None:
        if self._bar is not None:
            self._bar.close()
            self._bar = None


class NullProgress:
    """Progress reporter that does nothing."""

    def start(self, total: int) -> None:
        pass

    def advance(self, steps: int = 1) -> None:
        pass

    def stop(self) -> None:
        pass
