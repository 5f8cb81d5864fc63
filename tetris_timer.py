
"""Fixed-period tick scheduler"""


class TickTimer:
    """
    Fixed-timestep accumulator driven by the host clock.

    The host feeds elapsed milliseconds into advance(); the timer answers how
    many whole periods have elapsed since the last call. A stopped timer
    never fires again and cannot be restarted.
    """
    def __init__(self, period_ms: float):
        self.period_ms = float(period_ms)
        self.accumulator = 0.0
        self.running = False
        self.stopped = False

    def start(self):
        if self.stopped:
            raise RuntimeError("a stopped TickTimer cannot be restarted")
        self.running = True

    def stop(self):
        self.running = False
        self.stopped = True
        self.accumulator = 0.0

    def advance(self, elapsed_ms: float) -> int:
        if not self.running:
            return 0
        self.accumulator += elapsed_ms
        ticks = int(self.accumulator // self.period_ms)
        self.accumulator -= ticks * self.period_ms
        return ticks
