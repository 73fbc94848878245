"""Geometric skin - flat shapes on a faint grid."""

from typing import Optional, Tuple

import pygame

from .base import BrickBreakerSkin
from ..game_state import Lifecycle
from ..snapshot import BallView, BrickView, GameSnapshot, PaddleView


def darken(color: Tuple[int, int, int], amount: int) -> Tuple[int, int, int]:
    """Subtract `amount` from each channel, clamped at zero."""
    return tuple(max(0, c - amount) for c in color)  # type: ignore


class GeometricSkin(BrickBreakerSkin):
    """Renders the game with simple shapes.

    - Background: grid lines every 50 px
    - Paddle: teal rectangle with white outline
    - Ball: red circle, faint trail while launched
    - Bricks: row colour with a light highlight strip
    """

    NAME = "geometric"
    DESCRIPTION = "Flat shapes on a faint grid"

    GRID_SPACING = 50
    GRID_COLOR = (13, 13, 13)

    PADDLE_COLOR = (78, 205, 196)
    PADDLE_OUTLINE = (255, 255, 255)

    BALL_COLOR = (255, 107, 107)
    TRAIL_COLOR = (60, 25, 25)

    HUD_COLOR = (255, 255, 255)
    WIN_COLOR = (100, 255, 100)
    LOSE_COLOR = (255, 100, 100)

    def __init__(self):
        """Initialize geometric skin."""
        self._font: Optional[pygame.font.Font] = None

    def _ensure_font(self) -> None:
        """Ensure font is initialized."""
        if self._font is None:
            pygame.font.init()
            self._font = pygame.font.Font(None, 36)

    def render_background(self, screen: pygame.Surface) -> None:
        width, height = screen.get_size()
        for x in range(0, width, self.GRID_SPACING):
            pygame.draw.line(screen, self.GRID_COLOR, (x, 0), (x, height))
        for y in range(0, height, self.GRID_SPACING):
            pygame.draw.line(screen, self.GRID_COLOR, (0, y), (width, y))

    def render_paddle(self, paddle: PaddleView, screen: pygame.Surface) -> None:
        """Render paddle as a filled rectangle with outline."""
        pygame.draw.rect(screen, self.PADDLE_COLOR, paddle.rect)
        pygame.draw.rect(screen, self.PADDLE_OUTLINE, paddle.rect, 2)

    def render_ball(self, ball: BallView, launched: bool, screen: pygame.Surface) -> None:
        """Render ball, with a trail one tick behind when moving."""
        if launched:
            trail = (int(ball.x - ball.dx), int(ball.y - ball.dy))
            pygame.draw.circle(screen, self.TRAIL_COLOR, trail, int(ball.radius * 0.8))

        pygame.draw.circle(screen, self.BALL_COLOR, (int(ball.x), int(ball.y)), int(ball.radius))

    def render_brick(self, brick: BrickView, screen: pygame.Surface) -> None:
        """Render brick in its row colour with outline and highlight."""
        base = pygame.Color(brick.color)
        color = (base.r, base.g, base.b)

        pygame.draw.rect(screen, darken(color, 20), brick.rect)
        pygame.draw.rect(
            screen,
            color,
            (brick.x, brick.y, brick.width, brick.height / 2),
        )
        pygame.draw.rect(screen, (255, 255, 255), brick.rect, 1)
        pygame.draw.rect(
            screen,
            tuple(min(255, c + 50) for c in color),
            (brick.x + 2, brick.y + 2, brick.width - 4, 3),
        )

    def render_hud(self, snapshot: GameSnapshot, screen: pygame.Surface) -> None:
        """Render score (left), lives (right) and the status message."""
        self._ensure_font()
        if not self._font:
            return

        score_text = self._font.render(f"Score: {snapshot.score}", True, self.HUD_COLOR)
        screen.blit(score_text, (10, 10))

        lives_text = self._font.render(f"Lives: {snapshot.lives}", True, self.HUD_COLOR)
        lives_rect = lives_text.get_rect()
        lives_rect.topright = (screen.get_width() - 10, 10)
        screen.blit(lives_text, lives_rect)

        if snapshot.message:
            if snapshot.lifecycle == Lifecycle.WON:
                color = self.WIN_COLOR
            elif snapshot.lifecycle == Lifecycle.LOST:
                color = self.LOSE_COLOR
            else:
                color = self.HUD_COLOR
            text = self._font.render(snapshot.message, True, color)
            rect = text.get_rect(center=(screen.get_width() // 2, screen.get_height() // 2))
            screen.blit(text, rect)
