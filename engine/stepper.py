"""
stepper.py — Step-by-Step Playback Engine
==========================================
The StepEngine is the ONLY object the UI drives during a run.  It holds a
fully generated list of Steps plus a cursor, and exposes a clean
play / pause / step / seek / speed API.

State machine:
    load_steps()  →  cursor 0, paused
    paused   →  play()   →  playing
    playing  →  pause()  →  paused
    playing  →  (cursor on last step at a due tick)  →  paused + "complete"
    any      →  reset()  →  paused, cursor 0

Timing:
  Advancing is frame-driven, not a fixed-interval timer.  Each frame calls
  tick(); the cursor moves only when at least `speed` ms have elapsed since
  the last advance.  The host supplies the clock (ms) and, optionally, a
  `request_frame(callback)` hook used to schedule the next frame.

Cancellation:
  Every play session gets a fresh integer token.  pause() and load_steps()
  bump the token, so a frame callback queued under an older token does
  nothing when it fires.

Thread safety:
  This class is NOT thread-safe.  Listeners are called synchronously, in
  no guaranteed order, on the caller's thread.
"""

import logging
import time
from dataclasses import dataclass
from enum import Enum
from typing import Callable, List, Optional, Sequence, Set, Tuple

from algorithms.step import Step

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Events
# ---------------------------------------------------------------------------
class EngineEventType(Enum):
    STEP_CHANGE = "step-change"
    PLAY        = "play"
    PAUSE       = "pause"
    RESET       = "reset"
    COMPLETE    = "complete"


@dataclass(frozen=True)
class EngineEvent:
    type:   EngineEventType
    index:  Optional[int]  = None
    step:   Optional[Step] = None


EngineListener = Callable[[EngineEvent], None]


@dataclass(frozen=True)
class EngineState:
    """Read-only copy of the engine's internals."""

    steps:      Tuple[Step, ...]
    index:      int
    playing:    bool
    speed:      float
    last_tick:  float


# ---------------------------------------------------------------------------
# Speed presets (milliseconds per step)
# ---------------------------------------------------------------------------
DEFAULT_SPEED_MS = 500
MIN_SPEED_MS     = 50
MAX_SPEED_MS     = 2000

SPEED_PRESETS = {
    "slow":      1000,    # teaching mode
    "normal":    500,
    "fast":      200,
    "very_fast": 100,     # demo mode
}


def _monotonic_ms() -> float:
    return time.monotonic() * 1000


# ---------------------------------------------------------------------------
# StepEngine
# ---------------------------------------------------------------------------
class StepEngine:
    """
    Attributes:
        clock         : Zero-arg callable returning the current time in ms.
        request_frame : Optional hook; called with a zero-arg callback that
                        the host must invoke on its next frame.
    """

    def __init__(
        self,
        clock: Optional[Callable[[], float]] = None,
        request_frame: Optional[Callable[[Callable[[], None]], None]] = None,
        speed: float = DEFAULT_SPEED_MS,
    ):
        self.clock:          Callable[[], float] = clock or _monotonic_ms
        self.request_frame = request_frame

        self._steps:      List[Step]          = []
        self._index:      int                 = 0
        self._playing:    bool                = False
        self._speed:      float               = self._clamp_speed(speed)
        self._last_tick:  float               = 0.0
        self._token:      int                 = 0
        self._listeners:  Set[EngineListener] = set()

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------
    def load_steps(self, steps: Sequence[Step]) -> None:
        """Replace the step list.  Safe to call mid-playback."""
        self.pause()
        self._token    += 1
        self._steps     = list(steps)
        self._index     = 0
        self._last_tick = 0.0
        logger.debug("Loaded %d steps", len(self._steps))
        if self._steps:
            self._emit_current()
        self._emit(EngineEvent(EngineEventType.RESET, index=0))

    # ------------------------------------------------------------------
    # Play / Pause
    # ------------------------------------------------------------------
    def play(self) -> None:
        if not self._steps:
            return
        if self._index >= len(self._steps) - 1:
            self._index = 0
            self._emit_current()

        self._token    += 1
        self._playing   = True
        self._last_tick = self.clock()
        logger.debug("Play from step %d (token %d)", self._index, self._token)
        self._emit(EngineEvent(EngineEventType.PLAY, index=self._index))
        self._schedule(self._token)

    def pause(self) -> None:
        """Idempotent: a second call neither changes state nor notifies."""
        if not self._playing:
            return
        self._playing = False
        self._token  += 1
        logger.debug("Paused at step %d", self._index)
        self._emit(EngineEvent(EngineEventType.PAUSE, index=self._index))

    def toggle_play(self) -> None:
        if self._playing:
            self.pause()
        else:
            self.play()

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------
    def step_forward(self) -> None:
        if self._index < len(self._steps) - 1:
            self._index += 1
            self._emit_current()

    def step_back(self) -> None:
        if self._index > 0:
            self._index -= 1
            self._emit_current()

    def go_to_step(self, index: int) -> None:
        """Seek, clamped to [0, len-1].  Notifies only when the cursor moves."""
        if not self._steps:
            return
        target = max(0, min(int(index), len(self._steps) - 1))
        if target != self._index:
            self._index = target
            self._emit_current()

    def reset(self) -> None:
        self.pause()
        self._index = 0
        if self._steps:
            self._emit_current()
        self._emit(EngineEvent(EngineEventType.RESET, index=0))

    def go_to_end(self) -> None:
        self.pause()
        if not self._steps:
            return
        self._index = len(self._steps) - 1
        self._emit_current()
        self._emit(EngineEvent(EngineEventType.COMPLETE, index=self._index))

    # ------------------------------------------------------------------
    # Timed advance
    # ------------------------------------------------------------------
    def tick(self, now: Optional[float] = None) -> bool:
        """
        Frame handler.  Advances one step if `speed` ms have elapsed since
        the last advance.  On the last step it stops and emits "complete"
        instead.  Returns True when the cursor moved.
        """
        if not self._playing:
            return False
        now = self.clock() if now is None else now
        if now - self._last_tick < self._speed:
            return False

        self._last_tick = now
        if self._index < len(self._steps) - 1:
            self._index += 1
            self._emit_current()
            return True

        self._playing = False
        self._token  += 1
        logger.debug("Playback complete at step %d", self._index)
        self._emit(EngineEvent(EngineEventType.COMPLETE, index=self._index))
        return False

    def run(self, sleep: Callable[[float], None] = time.sleep) -> None:
        """Blocking driver: tick until playback stops.  `sleep` takes seconds."""
        while self._playing:
            self.tick()
            if self._playing:
                remaining = self._speed - (self.clock() - self._last_tick)
                sleep(max(remaining, 1.0) / 1000)

    def _schedule(self, token: int) -> None:
        if self.request_frame is None:
            return
        self.request_frame(lambda: self._on_frame(token))

    def _on_frame(self, token: int) -> None:
        if token != self._token or not self._playing:
            return
        self.tick()
        if self._playing:
            self._schedule(token)

    # ------------------------------------------------------------------
    # Speed
    # ------------------------------------------------------------------
    @staticmethod
    def _clamp_speed(ms: float) -> float:
        return max(MIN_SPEED_MS, min(MAX_SPEED_MS, float(ms)))

    def set_speed(self, ms: float) -> None:
        """Takes effect on the next tick; no restart needed."""
        self._speed = self._clamp_speed(ms)

    def set_speed_preset(self, preset: str) -> None:
        if preset not in SPEED_PRESETS:
            raise ValueError(f"unknown speed preset: {preset!r}")
        self.set_speed(SPEED_PRESETS[preset])

    # ------------------------------------------------------------------
    # Observers
    # ------------------------------------------------------------------
    def subscribe(self, listener: EngineListener) -> Callable[[], None]:
        """Returns a disposer.  Safe to call from inside a notification."""
        self._listeners.add(listener)
        return lambda: self._listeners.discard(listener)

    def _emit(self, event: EngineEvent) -> None:
        for listener in list(self._listeners):
            listener(event)

    def _emit_current(self) -> None:
        step = self.get_current_step()
        if step is not None:
            self._emit(EngineEvent(EngineEventType.STEP_CHANGE, index=self._index, step=step))

    # ------------------------------------------------------------------
    # Read-only accessors
    # ------------------------------------------------------------------
    def get_current_step(self) -> Optional[Step]:
        if 0 <= self._index < len(self._steps):
            return self._steps[self._index]
        return None

    @property
    def current_index(self) -> int:
        return self._index

    @property
    def total_steps(self) -> int:
        return len(self._steps)

    @property
    def steps(self) -> List[Step]:
        return list(self._steps)

    @property
    def is_playing(self) -> bool:
        return self._playing

    @property
    def is_at_end(self) -> bool:
        return not self._steps or self._index == len(self._steps) - 1

    @property
    def speed(self) -> float:
        return self._speed

    @property
    def state(self) -> EngineState:
        return EngineState(
            steps=tuple(self._steps),
            index=self._index,
            playing=self._playing,
            speed=self._speed,
            last_tick=self._last_tick,
        )

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    def destroy(self) -> None:
        self.pause()
        self._token += 1
        self._listeners.clear()
