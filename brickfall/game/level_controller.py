"""Level and session controller.

Owns the phase transitions of a session:

    READY --start--> RUNNING <--pause/resume--> PAUSED
    RUNNING --all breakable bricks cleared--> LEVEL_COMPLETE --continue--> RUNNING
    RUNNING --last life lost--> GAME_OVER --restart--> RUNNING

Triggers that arrive in the wrong phase are ignored.
"""

from brickfall.config import LevelProgression
from brickfall.logging import emit_record, get_logger
from brickfall.models import SessionPhase, SoundCue

from .session import Session
from .skins.base import BrickBreakerSkin

log = get_logger('session')

GAME_OVER_MESSAGE = "Game Over"


class LevelController:
    """Win/loss detection and lifecycle triggers.

    Args:
        progression: Difficulty steps applied per level
        skin: Receives cues, overlays and the level-start render
    """

    def __init__(self, progression: LevelProgression, skin: BrickBreakerSkin):
        self._progression = progression
        self._skin = skin

    def check_level_complete(self, session: Session) -> bool:
        """Advance to the next level if every breakable brick is cleared.

        Calling this again while the session is already waiting on the
        level-complete screen does nothing.

        Returns:
            True if the transition happened on this call
        """
        if session.phase == SessionPhase.LEVEL_COMPLETE:
            return False
        if not session.bricks.all_cleared():
            return False

        session.level += 1
        session.score = 0
        session.ball = session.ball.raise_max_speed(self._progression.ball_max_speed_step)
        session.paddle.increase_speed(self._progression.paddle_speed_step)
        session.bricks = session.new_brick_grid()
        session.respawn_ball()
        session.phase = SessionPhase.LEVEL_COMPLETE

        message = f"Level {session.level} Start!"
        self._skin.show_level_complete(message, show_continue=True)
        self._skin.play_cue(SoundCue.LEVEL_UP)
        self._skin.render(session.snapshot())

        log.info("Level complete, next level %d (max speed %.1f, paddle speed %.1f)",
                 session.level, session.ball.max_speed, session.paddle.speed)
        emit_record('session', {
            'type': 'level_complete',
            'level': session.level,
            'ball_max_speed': session.ball.max_speed,
            'paddle_speed': session.paddle.speed,
        })
        return True

    def lose_life(self, session: Session) -> bool:
        """Handle the ball leaving through the bottom of the field.

        Returns:
            True if this was the last life and the game is over
        """
        session.lives = max(0, session.lives - 1)
        self._skin.play_cue(SoundCue.LIFE_LOST)
        emit_record('session', {'type': 'life_lost', 'lives': session.lives,
                                'level': session.level, 'score': session.score})

        if session.lives <= 0:
            session.phase = SessionPhase.GAME_OVER
            self._skin.show_game_over(GAME_OVER_MESSAGE)
            self._skin.play_cue(SoundCue.GAME_OVER)
            log.info("Game over on level %d with score %d", session.level, session.score)
            emit_record('session', {'type': 'game_over', 'level': session.level,
                                    'score': session.score})
            return True

        log.debug("Life lost, %d remaining", session.lives)
        session.respawn_ball()
        return False

    def start_game(self, session: Session) -> bool:
        """Leave the start screen."""
        if session.phase != SessionPhase.READY:
            log.debug("Start ignored in phase %s", session.phase.value)
            return False
        self._skin.hide_overlay()
        session.phase = SessionPhase.RUNNING
        log.info("Game started")
        return True

    def continue_level(self, session: Session) -> bool:
        """Resume play after the level-complete screen."""
        if session.phase != SessionPhase.LEVEL_COMPLETE:
            log.debug("Continue ignored in phase %s", session.phase.value)
            return False
        self._skin.hide_overlay()
        session.phase = SessionPhase.RUNNING
        return True

    def reset_game(self, session: Session) -> None:
        """Return the session to its initial state without starting it."""
        session.reset()
        emit_record('session', {'type': 'reset'})

    def restart_game(self, session: Session) -> None:
        """Full reset followed by an immediate start."""
        self._skin.hide_overlay()
        self.reset_game(session)
        session.phase = SessionPhase.RUNNING
        log.info("Game restarted")

    def pause(self, session: Session) -> bool:
        if session.phase != SessionPhase.RUNNING:
            return False
        session.phase = SessionPhase.PAUSED
        return True

    def resume(self, session: Session) -> bool:
        if session.phase != SessionPhase.PAUSED:
            return False
        session.phase = SessionPhase.RUNNING
        return True
