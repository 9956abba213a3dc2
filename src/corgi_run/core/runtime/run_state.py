"""
run_state.py
------------
Score and lives ledger for the current run.

Responsibilities
----------------
- Track score, lives and scroll speed for one run.
- Award the pass reward and apply life gains (capped) and losses.
- Report when lives are exhausted so the caller can end the run.
- Record the final score into the persistent history.
"""

from corgi_run.core.debug.debug_logger import DebugLogger
from corgi_run.core.runtime.game_settings import Difficulty, PlayerConfig, Scoring


class RunState:
    """Container for run-specific values. Rebuilt on every reset."""

    def __init__(self, max_lives: int = PlayerConfig.MAX_LIVES,
                 initial_speed: float = Difficulty.INITIAL_SPEED):
        self.max_lives = max_lives
        self.score = 0
        self.lives = max_lives
        self.game_speed = initial_speed
        self.run_time = 0.0

    # ===========================================================
    # Progression
    # ===========================================================

    def advance(self, dt: float):
        """Speed up linearly; speed never decreases during a run."""
        self.game_speed += Difficulty.SPEED_INCREASE_PER_SEC * dt
        self.run_time += dt

    # ===========================================================
    # Score
    # ===========================================================

    def add_pass_reward(self, amount: int = Scoring.PASS_REWARD):
        self.score += amount
        DebugLogger.trace(f"Score +{amount} -> {self.score}", category="score")

    # ===========================================================
    # Lives
    # ===========================================================

    def gain_life(self) -> bool:
        """Add a life unless already at the cap. Returns True if it changed."""
        if self.lives >= self.max_lives:
            return False
        self.lives += 1
        return True

    def lose_life(self) -> bool:
        """Remove a life. Returns True when the run is over."""
        self.lives -= 1
        return self.lives <= 0

    @property
    def is_over(self) -> bool:
        return self.lives <= 0

    # ===========================================================
    # History
    # ===========================================================

    def record_final(self, history) -> int:
        """Persist the final score and return the best recorded score."""
        history.append_score(self.score)
        best = history.best_score()
        DebugLogger.system(f"Run finished: score={self.score} best={best}", category="score")
        return best
