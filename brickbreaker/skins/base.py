"""Base class for BrickBreaker skins.

Skins handle ALL rendering - the game only manages state and hands the
skin a GameSnapshot each frame.
"""

from abc import ABC, abstractmethod

import pygame

from ..config import BACKGROUND_COLOR
from ..snapshot import BallView, BrickView, GameSnapshot, PaddleView


class BrickBreakerSkin(ABC):
    """Base class for game skins.

    render() draws a full frame in a fixed order; subclasses fill in the
    individual pieces.
    """

    NAME: str = "base"
    DESCRIPTION: str = "Base skin"

    def render(self, snapshot: GameSnapshot, screen: pygame.Surface) -> None:
        """Draw one frame.

        Args:
            snapshot: Game state for this frame
            screen: Pygame surface to draw on
        """
        screen.fill(BACKGROUND_COLOR)
        self.render_background(screen)
        self.render_paddle(snapshot.paddle, screen)
        self.render_ball(snapshot.ball, snapshot.ball_launched, screen)
        for brick in snapshot.visible_bricks:
            self.render_brick(brick, screen)
        self.render_hud(snapshot, screen)

    def render_background(self, screen: pygame.Surface) -> None:
        """Render background decoration."""
        pass

    @abstractmethod
    def render_paddle(self, paddle: PaddleView, screen: pygame.Surface) -> None:
        """Render the paddle."""
        pass

    @abstractmethod
    def render_ball(self, ball: BallView, launched: bool, screen: pygame.Surface) -> None:
        """Render the ball.

        Args:
            ball: Ball to render
            launched: Whether the ball is in flight (for motion effects)
            screen: Pygame surface to draw on
        """
        pass

    @abstractmethod
    def render_brick(self, brick: BrickView, screen: pygame.Surface) -> None:
        """Render a visible brick."""
        pass

    def render_hud(self, snapshot: GameSnapshot, screen: pygame.Surface) -> None:
        """Render the heads-up display (score, lives, message)."""
        pass
