"""Layout, sizing and animation settings for the game."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union

from shitris.vec2 import Vec2

Number = Union[int, float]


@dataclass
class PulsingSize:
    """A size that grows or shrinks in steps between two bounds.

    A step is taken only while the value has not yet reached the bound it
    moves toward, so the value may pass a bound by less than one step.
    """

    minimum: Number
    maximum: Number
    step: Number
    initial: Number
    value: Number = field(init=False)

    def __post_init__(self) -> None:
        if self.minimum > self.maximum:
            raise ValueError("minimum must not exceed maximum")
        if self.step <= 0:
            raise ValueError("step must be positive")
        if not self.minimum <= self.initial <= self.maximum:
            raise ValueError("initial value must lie between minimum and maximum")
        self.value = self.initial

    def grow(self) -> Number:
        """Take one step up unless the maximum is reached; return the value."""
        if self.value < self.maximum:
            self.value += self.step
        return self.value

    def shrink(self) -> Number:
        """Take one step down unless the minimum is reached; return the value."""
        if self.value > self.minimum:
            self.value -= self.step
        return self.value

    def reset(self) -> Number:
        """Return to the initial value."""
        self.value = self.initial
        return self.value


# Window
SCREEN_WIDTH = 1920
SCREEN_HEIGHT = 1080
FPS = 60

# Board
CELL_SIZE = 45
PADDING = 5
BOARD_POSITION = Vec2(350, 100)
BOARD_SIZE = Vec2(10, 20)

# Score and level counters
SCORE_COUNTER_POSITION = Vec2(1220, 100)
SCORE_COUNTER_SIZE = 92
LEVEL_COUNTER_POSITION = Vec2(1220, 375)
LEVEL_COUNTER_SIZE = 80
LINES_COUNTER_POSITION = Vec2(1220, 625)
LINES_COUNTER_SIZE = 80

# Main menu: play button
PLAY_BUTTON_SIZE = Vec2(500, 150)
PLAY_BUTTON_TEXT_SIZE = PulsingSize(minimum=80, maximum=100, step=5, initial=100)
PLAY_BUTTON_POS = Vec2(SCREEN_WIDTH // 2 - PLAY_BUTTON_SIZE.x // 2, (SCREEN_HEIGHT // 5) * 3)
PLAY_BUTTON_TEXT_POS = PLAY_BUTTON_POS

# Main menu: title text
MAIN_TEXT_SIZE = 300

# Main menu: settings button
SETTINGS_BUTTON_SIZE = Vec2(110, 110)
SETTINGS_BUTTON_TEXTURE_SIZE = PulsingSize(
    minimum=0.1353125, maximum=0.1853125, step=0.01, initial=0.1853125
)
SETTINGS_BUTTON_POS = Vec2(75, 75)
SETTINGS_BUTTON_TEXTURE_POS = SETTINGS_BUTTON_POS + Vec2(6, 6)

# Main menu: credits button
CREDITS_BUTTON_SIZE = Vec2(500, 150)
CREDITS_BUTTON_TEXT_SIZE = PulsingSize(minimum=80, maximum=100, step=5, initial=100)
CREDITS_BUTTON_POS = PLAY_BUTTON_POS + Vec2(0, 200)
CREDITS_BUTTON_TEXT_POS = CREDITS_BUTTON_POS

# Main menu: quit button
QUIT_GAME_BUTTON_SIZE = Vec2(110, 110)
QUIT_GAME_BUTTON_TEXTURE_SIZE = PulsingSize(
    minimum=0.1403125, maximum=0.1903125, step=0.01, initial=0.1903125
)
QUIT_GAME_BUTTON_POS = Vec2(SCREEN_WIDTH - 250, 75)
QUIT_GAME_BUTTON_TEXTURE_POS = QUIT_GAME_BUTTON_POS

# Options menu: dividers
VERTICAL_DIVIDER_POS = Vec2(570, 0)
VERTICAL_DIVIDER_LENGTH = 175
VERTICAL_DIVIDER_POS2 = Vec2(SCREEN_WIDTH - 570, 0)
VERTICAL_DIVIDER_LENGTH2 = 175
HORIZONTAL_DIVIDER_POS = Vec2(0, 175)
HORIZONTAL_DIVIDER_LENGTH = SCREEN_WIDTH

# Options menu: controls heading
CONTROLS_TEXT_POS = Vec2(115, 63)
CONTROLS_TEXT_SIZE = PulsingSize(minimum=60, maximum=75, step=1, initial=60)


def _key_text_size() -> PulsingSize:
    return PulsingSize(minimum=60, maximum=70, step=1, initial=60)


# Options menu: key rows (label, primary binding, alternate binding)
ROTATE_RIGHT_KEY_TEXT_POS = Vec2(100, 200)
ROTATE_RIGHT_KEY_TEXT_SIZE = _key_text_size()
ALTERNATE_ROTATE_RIGHT_KEY_TEXT_SIZE = _key_text_size()
ROTATE_RIGHT_KEY_BUTTON_TEXT_POS = Vec2(700, 200)
ALTERNATE_ROTATE_RIGHT_KEY_BUTTON_TEXT_POS = Vec2(1200, 200)

ROTATE_LEFT_KEY_TEXT_POS = Vec2(100, 300)
ROTATE_LEFT_KEY_TEXT_SIZE = _key_text_size()
ALTERNATE_ROTATE_LEFT_KEY_TEXT_SIZE = _key_text_size()
ROTATE_LEFT_KEY_BUTTON_TEXT_POS = Vec2(700, 300)
ALTERNATE_ROTATE_LEFT_KEY_BUTTON_TEXT_POS = Vec2(1200, 300)

SWAP_KEY_TEXT_POS = Vec2(100, 400)
SWAP_KEY_TEXT_SIZE = _key_text_size()
ALTERNATE_SWAP_KEY_TEXT_SIZE = _key_text_size()
SWAP_KEY_BUTTON_TEXT_POS = Vec2(700, 400)
ALTERNATE_SWAP_KEY_BUTTON_TEXT_POS = Vec2(1200, 400)

MOVE_RIGHT_KEY_TEXT_POS = Vec2(100, 500)
MOVE_RIGHT_KEY_TEXT_SIZE = _key_text_size()
ALTERNATE_MOVE_RIGHT_KEY_TEXT_SIZE = _key_text_size()
MOVE_RIGHT_KEY_BUTTON_TEXT_POS = Vec2(700, 500)
ALTERNATE_MOVE_RIGHT_KEY_BUTTON_TEXT_POS = Vec2(1200, 500)

MOVE_LEFT_KEY_TEXT_POS = Vec2(100, 600)
MOVE_LEFT_KEY_TEXT_SIZE = _key_text_size()
ALTERNATE_MOVE_LEFT_KEY_TEXT_SIZE = _key_text_size()
MOVE_LEFT_KEY_BUTTON_TEXT_POS = Vec2(700, 600)
ALTERNATE_MOVE_LEFT_KEY_BUTTON_TEXT_POS = Vec2(1200, 600)

RESET_KEY_TEXT_POS = Vec2(100, 700)
RESET_KEY_TEXT_SIZE = _key_text_size()
ALTERNATE_RESET_KEY_TEXT_SIZE = _key_text_size()
RESET_KEY_BUTTON_TEXT_POS = Vec2(700, 700)
ALTERNATE_RESET_KEY_BUTTON_TEXT_POS = Vec2(1200, 700)

MENU_KEY_TEXT_POS = Vec2(100, 800)
MENU_KEY_TEXT_SIZE = _key_text_size()
ALTERNATE_MENU_KEY_TEXT_SIZE = _key_text_size()
MENU_KEY_BUTTON_TEXT_POS = Vec2(700, 800)
ALTERNATE_MENU_KEY_BUTTON_TEXT_POS = Vec2(1200, 800)

SOFT_DROP_KEY_TEXT_POS = Vec2(100, 900)
SOFT_DROP_KEY_TEXT_SIZE = _key_text_size()
ALTERNATE_SOFT_DROP_KEY_TEXT_SIZE = _key_text_size()
SOFT_DROP_KEY_BUTTON_TEXT_POS = Vec2(700, 900)
ALTERNATE_SOFT_DROP_KEY_BUTTON_TEXT_POS = Vec2(1200, 900)

HARD_DROP_KEY_TEXT_POS = Vec2(100, 1000)
HARD_DROP_KEY_TEXT_SIZE = _key_text_size()
ALTERNATE_HARD_DROP_KEY_TEXT_SIZE = _key_text_size()
HARD_DROP_KEY_BUTTON_TEXT_POS = Vec2(700, 1000)
ALTERNATE_HARD_DROP_KEY_BUTTON_TEXT_POS = Vec2(1200, 1000)

# Options menu: audio and graphics
AUDIO_AND_GRAPHICS_TEXT_POS = Vec2(660, 63)
AUDIO_AND_GRAPHICS_TEXT_SIZE = PulsingSize(minimum=60, maximum=75, step=1, initial=60)

VOLUME_SLIDER_BORDER_SIZE = Vec2(50, 610)
VOLUME_SLIDER_BORDER_POS = Vec2(
    SCREEN_WIDTH - VOLUME_SLIDER_BORDER_SIZE.x * 5,
    SCREEN_HEIGHT - int(VOLUME_SLIDER_BORDER_SIZE.y * 1.25),
)
VOLUME_SLIDER_SIZE = VOLUME_SLIDER_BORDER_SIZE - 10
VOLUME_SLIDER_POS = VOLUME_SLIDER_BORDER_POS + 5

# Return button, shared by the options, mode select and credits menus
RETURN_BUTTON_TEXT_POS = Vec2(SCREEN_WIDTH - 445, 63)
RETURN_TEXT_SIZE = PulsingSize(minimum=60, maximum=75, step=5, initial=60)

# Game over screen
GAME_OVER_TEXT_POSITION = Vec2(LEVEL_COUNTER_POSITION.x - 400, 300)
NEW_BEST_TEXT_POSITION = GAME_OVER_TEXT_POSITION - Vec2(0, -300)
GAME_OVER_ALL_REGULAR_TEXTS_SIZE = 92

RESTART_BUTTON_POS = GAME_OVER_TEXT_POSITION + Vec2(0, 250)
RESTART_BUTTON_SIZE = Vec2(257, 75)
RESTART_BUTTON_TEXT_SIZE = PulsingSize(minimum=30, maximum=35, step=1, initial=35)

MAIN_MENU_BUTTON_POS = RESTART_BUTTON_POS + Vec2(0, 100)
MAIN_MENU_BUTTON_SIZE = Vec2(257, 75)
MAIN_MENU_BUTTON_TEXT_SIZE = PulsingSize(minimum=30, maximum=35, step=1, initial=35)

# Pause menu options button, also shown on the game over screen
OPTIONS_BUTTON_POS = MAIN_MENU_BUTTON_POS + Vec2(0, 100)
OPTIONS_BUTTON_SIZE = Vec2(257, 75)
OPTIONS_BUTTON_TEXT_SIZE = PulsingSize(minimum=30, maximum=35, step=1, initial=35)

# Mode select menu
POSITION_OF_ELEMENT1 = Vec2(100, 150)
SELECT_MENU_PADDING = 1
SELECT_MENU_CELL_SIZE = 5
NAME_TEXT_SIZE = 25