"""
Auto-advance driver — steps a TimelinePlayer on a timer ("Play" button).

The player itself is a pure state machine; this class owns the timer.
It uses one-shot threading.Timer callbacks, one per step:

    start() ──> Timer(interval) ──> _tick() ──> player.step(epoch) ──> Timer(interval) ──> ...
                                       │
                                       └── at end of timeline → stopped

Invariants:
- At most one timer is pending per advancer
- stop()/reset() cancel the pending timer. A callback that already fired
  and is waiting on the lock sees a newer generation (or the player sees a
  newer epoch) and does nothing
- Reaching the last event stops playback automatically
- set_interval() while playing swaps the pending timer for one with the new
  interval; the cursor does not move
"""

import logging
import threading
from typing import Callable, Optional

from scheduler.player import TimelinePlayer

logger = logging.getLogger(__name__)


class AutoAdvancer:

    def __init__(
        self,
        player: TimelinePlayer,
        interval: float,
        timer_factory: Callable[..., threading.Timer] = threading.Timer,
    ):
        if interval <= 0:
            raise ValueError(f"interval must be positive, got {interval}")
        self._player = player
        self._interval = interval
        self._timer_factory = timer_factory
        self._timer: Optional[threading.Timer] = None
        self._playing = False
        self._generation = 0
        self._play_epoch = 0
        self._lock = threading.Lock()

    @property
    def playing(self) -> bool:
        return self._playing

    @property
    def interval(self) -> float:
        return self._interval

    def start(self) -> bool:
        """Begin auto-advancing. Returns False if there is nothing left to play."""
        with self._lock:
            if self._playing:
                return True
            if self._player.total_steps == 0 or self._player.at_end:
                return False
            self._playing = True
            self._generation += 1
            self._play_epoch = self._player.epoch
            self._schedule_next(self._generation, self._play_epoch)
        logger.info(f"Playback started at step {self._player.current_step}")
        return True

    def stop(self) -> None:
        with self._lock:
            was_playing = self._playing
            self._cancel()
        if was_playing:
            logger.info(f"Playback stopped at step {self._player.current_step}")

    def reset(self) -> None:
        """Stop playback and rewind the player to the first event."""
        self.stop()
        self._player.reset()

    def set_interval(self, interval: float) -> None:
        """
        Change the delay between steps. While playing, the pending timer is
        replaced so the new pace applies from the next step on.
        """
        if interval <= 0:
            raise ValueError(f"interval must be positive, got {interval}")
        with self._lock:
            self._interval = interval
            if not self._playing:
                return
            if self._timer is not None:
                self._timer.cancel()
            self._generation += 1
            self._schedule_next(self._generation, self._play_epoch)
        logger.info(f"Playback interval set to {interval}s")

    def toggle(self) -> bool:
        """Play/pause. Returns the new playing state."""
        if self._playing:
            self.stop()
            return False
        return self.start()

    def _cancel(self) -> None:
        # Caller holds the lock
        self._playing = False
        self._generation += 1
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None

    def _schedule_next(self, generation: int, epoch: int) -> None:
        # Caller holds the lock
        timer = self._timer_factory(self._interval, self._tick, args=(generation, epoch))
        timer.daemon = True
        self._timer = timer
        timer.start()

    def _tick(self, generation: int, epoch: int) -> None:
        with self._lock:
            if generation != self._generation or not self._playing:
                return  # cancelled while this callback was pending
            self._timer = None

            if not self._player.step(epoch=epoch):
                # Either the end was reached or someone seeked/reset meanwhile
                self._playing = False
                self._generation += 1
                logger.debug(f"Playback halted at step {self._player.current_step}")
                return

            if self._player.at_end:
                self._playing = False
                self._generation += 1
                logger.info("Playback reached the end of the timeline")
                return

            self._schedule_next(generation, epoch)
