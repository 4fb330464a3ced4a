"""
Fixed-period repeating timer driven by frame deltas.
"""


class RepeatingTimer:
    """
    Accumulates frame time and reports when a period has elapsed.

    A frame that crosses several periods still reports a single finish;
    the remainder carries over to the next frame.
    """

    def __init__(self, period: float):
        """
        Initialize the timer.

        Args:
            period: Seconds between finishes
        """
        if period <= 0:
            raise ValueError(f"Timer period must be positive, got {period}")

        self.period = period
        self.elapsed = 0.0
        self.times_finished_this_tick = 0

    def tick(self, delta: float) -> bool:
        """
        Advance the timer.

        Args:
            delta: Seconds elapsed since the last tick

        Returns:
            True if at least one period finished during this tick
        """
        self.elapsed += delta

        if self.elapsed >= self.period:
            self.times_finished_this_tick = int(self.elapsed // self.period)
            self.elapsed %= self.period
        else:
            self.times_finished_this_tick = 0

        return self.just_finished()

    def just_finished(self) -> bool:
        """True if the last tick finished a period."""
        return self.times_finished_this_tick > 0
