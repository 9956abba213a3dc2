"""
game_state.py
-------------
Start / playing / game-over state machine and the commands that drive it.

Transitions
-----------
    START    + jump          -> reset, PLAYING, jump immediately
    PLAYING  + jump          -> jump
    PLAYING  + slide press   -> start slide
    PLAYING  + slide release -> end slide
    PLAYING  (lives == 0)    -> GAMEOVER (score saved to history)
    GAMEOVER + jump          -> reset, PLAYING (no jump)

START is only the very first state; later runs restart from GAMEOVER.
"""

from enum import Enum

from corgi_run.core.debug.debug_logger import DebugLogger
from corgi_run.core.services.event_manager import (
    EventManager, GameOverEvent, RunStartedEvent,
)


class GamePhase(Enum):
    START = "start"
    PLAYING = "playing"
    GAMEOVER = "gameover"


class GameController:
    """Owns the simulation and gates it on the current phase."""

    def __init__(self, simulation, history, events=None):
        """
        Args:
            simulation: Simulation context for the current run
            history: ScoreHistory store for final scores
            events: EventManager notified on run start and game over
        """
        self.simulation = simulation
        self.history = history
        self.events = events or EventManager()
        self.phase = GamePhase.START
        self.anim_time = 0.0
        self.last_best = history.best_score()

    @property
    def is_playing(self) -> bool:
        return self.phase is GamePhase.PLAYING

    # ===========================================================
    # Frame
    # ===========================================================

    def tick(self, dt: float):
        """One frame: cosmetic clock always runs, simulation only while playing."""
        self.anim_time += dt
        if not self.is_playing:
            return
        if self.simulation.update(dt):
            self._enter_gameover()

    def snapshot(self):
        return self.simulation.snapshot(self.anim_time)

    # ===========================================================
    # Commands
    # ===========================================================

    def jump_command(self):
        if self.phase is GamePhase.START:
            self._start_run()
            self.simulation.jump()
        elif self.phase is GamePhase.PLAYING:
            self.simulation.jump()
        elif self.phase is GamePhase.GAMEOVER:
            self._start_run()

    def slide_press(self):
        if self.is_playing:
            self.simulation.start_slide()

    def slide_release(self):
        if self.is_playing:
            self.simulation.end_slide()

    # ===========================================================
    # Transitions
    # ===========================================================

    def _start_run(self):
        self.simulation.reset()
        self._set_phase(GamePhase.PLAYING)
        self.events.dispatch(RunStartedEvent(best=self.last_best))

    def _enter_gameover(self):
        self._set_phase(GamePhase.GAMEOVER)
        score = self.simulation.run.score
        self.last_best = self.simulation.run.record_final(self.history)
        self.events.dispatch(GameOverEvent(
            score=score,
            best=self.last_best,
            history=tuple(self.history.read_history()),
        ))

    def _set_phase(self, phase: GamePhase):
        DebugLogger.state(f"{self.phase.value} -> {phase.value}")
        self.phase = phase
