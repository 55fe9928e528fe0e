"""Frame scheduler.

Drives the fixed-order tick sequence at a fixed rate, independent of
how often the host calls in:

    1. revert timed effects that have expired
    2. move the paddle
    3. move the ball and resolve collisions (may halt the session)
    4. move power-ups
    5. collect power-ups and clean up the list
    6. hand a snapshot to the skin

A tick that halts the session still runs to the end; the next one
simply does not start.
"""

from brickfall.config import MAX_TICKS_PER_FRAME
from brickfall.logging import get_logger

from .level_controller import LevelController
from .physics.motion import MotionEngine
from .power_ups import PowerUpSystem
from .session import Session
from .skins.base import BrickBreakerSkin

log = get_logger('scheduler')


class FrameScheduler:
    """Owns the tick cadence of a session.

    Args:
        session: Session to advance
        motion: Paddle and ball movement
        power_ups: Power-up lifecycle
        levels: Phase transitions
        skin: Receives a snapshot after every tick
        tick_rate: Ticks per second
        max_ticks_per_frame: Upper bound on catch-up ticks per host frame
    """

    def __init__(
        self,
        session: Session,
        motion: MotionEngine,
        power_ups: PowerUpSystem,
        levels: LevelController,
        skin: BrickBreakerSkin,
        tick_rate: float = 60.0,
        max_ticks_per_frame: int = MAX_TICKS_PER_FRAME,
    ):
        self._session = session
        self._motion = motion
        self._power_ups = power_ups
        self._levels = levels
        self._skin = skin
        self._tick_interval = 1.0 / tick_rate
        self._max_ticks = max_ticks_per_frame
        self._accumulator = 0.0
        self._stopped = False
        self._tick_count = 0

    @property
    def tick_count(self) -> int:
        """Ticks executed since construction."""
        return self._tick_count

    @property
    def tick_interval(self) -> float:
        return self._tick_interval

    @property
    def is_running(self) -> bool:
        """True if the next advance() call will run ticks."""
        return not self._stopped and self._session.running

    @property
    def is_stopped(self) -> bool:
        return self._stopped

    def start(self) -> bool:
        """Start a session that is waiting on its start screen."""
        self._stopped = False
        self._accumulator = 0.0
        return self._levels.start_game(self._session)

    def pause(self) -> bool:
        """Suspend ticking. Pending timed effects keep their expiry times."""
        paused = self._levels.pause(self._session)
        if paused:
            log.info("Paused at tick %d", self._tick_count)
        return paused

    def resume(self) -> bool:
        resumed = self._levels.resume(self._session)
        if resumed:
            self._accumulator = 0.0
            log.info("Resumed")
        return resumed

    def toggle_pause(self) -> bool:
        """Pause if running, resume if paused. Returns True if anything changed."""
        return self.pause() or self.resume()

    def stop(self) -> None:
        """Stop ticking for good (until start() is called again)."""
        self._stopped = True
        self._accumulator = 0.0
        log.info("Stopped after %d ticks", self._tick_count)

    def tick(self) -> bool:
        """Run exactly one tick if the session is running.

        Returns:
            True if a tick ran
        """
        session = self._session
        if self._stopped or not session.running:
            return False

        self._power_ups.expire_effects(session)
        self._motion.move_paddle(session)
        self._motion.move_ball(session)
        self._power_ups.move(session)
        self._power_ups.collect(session)
        self._power_ups.cleanup(session)
        self._skin.render(session.snapshot())

        self._tick_count += 1
        log.trace("Tick %d: ball=(%.1f, %.1f) score=%d lives=%d",
                  self._tick_count, session.ball.x, session.ball.y,
                  session.score, session.lives)
        return True

    def advance(self, dt: float) -> int:
        """Account for ``dt`` seconds of host time.

        Runs as many whole ticks as the elapsed time allows (bounded by
        max_ticks_per_frame). While the session is not running no ticks
        run, but expired timed effects are still reverted.

        Args:
            dt: Seconds since the previous call

        Returns:
            Number of ticks run
        """
        if self._stopped:
            return 0

        session = self._session
        if not session.running:
            self._accumulator = 0.0
            if self._power_ups.expire_effects(session):
                self._skin.render(session.snapshot())
            return 0

        self._accumulator += dt
        ticks = 0
        while self._accumulator >= self._tick_interval and ticks < self._max_ticks:
            self._accumulator -= self._tick_interval
            self.tick()
            ticks += 1
            if not session.running:
                self._accumulator = 0.0
                break

        if ticks == self._max_ticks:
            # Drop the backlog rather than spiral after a long stall
            self._accumulator = min(self._accumulator, self._tick_interval)
        return ticks
