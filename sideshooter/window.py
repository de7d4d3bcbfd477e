"""
Arcade presentation for Side Shooter.
This is a THIN ADAPTER - no game logic here.

The round controller works in canvas coordinates (origin top-left, y down);
arcade draws with the origin bottom-left and y up, so every y is flipped.

Run:
    python -m sideshooter.window
"""

import argparse
import logging

import arcade
import numpy as np

from .round import FrameInput, RenderFrame, RoundController

logger = logging.getLogger(__name__)

FONT_NAME = "Courier New"
UPDATE_RATE = 1 / 60


def draw_frame(frame: RenderFrame):
    """Draw a render frame produced by RoundController.display()"""
    h = frame.height

    for shape in frame.shapes:
        if shape.kind == "triangle":
            (x1, y1), (x2, y2), (x3, y3) = shape.points
            arcade.draw_triangle_filled(x1, h - y1, x2, h - y2, x3, h - y3, shape.color)
        elif shape.kind == "rect":
            (x0, y0), (x1, y1) = shape.points
            arcade.draw_lrbt_rectangle_filled(x0, x1, h - y1, h - y0, shape.color)

    for text in frame.texts:
        arcade.draw_text(
            text.content,
            text.x,
            h - text.y,
            text.color,
            text.size,
            anchor_x="center",
            font_name=FONT_NAME,
        )


class ShooterWindow(arcade.Window):
    """Arcade window that draws a round controller"""

    def __init__(self, controller: RoundController, title: str = "Side Shooter"):
        super().__init__(controller.width, controller.height, title, update_rate=UPDATE_RATE)
        self.controller = controller
        self.background_color = controller.display().background

    def on_draw(self):
        """Draw the current game state"""
        self.clear()
        draw_frame(self.controller.display())


class PlayWindow(ShooterWindow):
    """
    Interactive game window.

    Controls:
        Up/Down: move the ship
        Space: fire
        Enter: pause / resume
        Mouse: click "Play Again" on the game over screen
        Escape: quit
    """

    def __init__(self, controller: RoundController, title: str = "Side Shooter"):
        super().__init__(controller, title)
        self.held = FrameInput()

    def on_update(self, delta_time: float):
        # One core frame per tick; speeds are per frame, not per second
        for event in self.controller.update(self.held):
            logger.debug("%s", event)

    def on_key_press(self, symbol: int, modifiers: int):
        if symbol == arcade.key.ESCAPE:
            self.close()
        elif symbol == arcade.key.SPACE:
            self.controller.fire()
        elif symbol in (arcade.key.ENTER, arcade.key.RETURN):
            self.controller.toggle_pause()
        elif symbol == arcade.key.UP:
            self.held.up = True
        elif symbol == arcade.key.DOWN:
            self.held.down = True

    def on_key_release(self, symbol: int, modifiers: int):
        if symbol == arcade.key.UP:
            self.held.up = False
        elif symbol == arcade.key.DOWN:
            self.held.down = False

    def on_mouse_press(self, x: int, y: int, button: int, modifiers: int):
        self.controller.click(x, self.height - y)


def main():
    parser = argparse.ArgumentParser(description="Play Side Shooter")
    parser.add_argument("--width", type=int, default=800, help="Canvas width (default: 800)")
    parser.add_argument("--height", type=int, default=600, help="Canvas height (default: 600)")
    parser.add_argument("--seed", type=int, default=None, help="Seed for enemy spawn positions")
    parser.add_argument(
        "--log-level",
        type=str,
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: INFO)",
    )
    args = parser.parse_args()

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    controller = RoundController(
        width=args.width,
        height=args.height,
        rng=np.random.default_rng(args.seed),
    )

    print("Side Shooter - Starting...")
    print(PlayWindow.__doc__)

    PlayWindow(controller)
    arcade.run()


if __name__ == "__main__":
    main()
