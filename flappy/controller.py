"""Main loop tying a view to a model, and the command that starts the game."""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Optional, Sequence, Union

from .model import Model
from .view import PygameView, View


class Controller:
    """Feeds the view's input to the model and its states back to the view."""

    def __init__(self, view: View, model: Model):
        self.view = view
        self.model = model

    @classmethod
    def default(cls, assets: Union[str, Path, None] = None) -> "Controller":
        """A controller with a pygame window and a model sized to it."""
        view = PygameView(assets=assets)
        model = Model.default(view.size(), view.bird_texture(), view.pipe_texture())
        return cls(view, model)

    def run(self) -> None:
        """Play until the view is closed; the view is closed afterwards."""
        try:
            self.model.reset()
            while self.view.is_alive():
                state = self.model.update(self.view.action())
                self.view.show_state(state)
        finally:
            self.view.close()


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog="flappy", description="Play Flappy Bird.")
    parser.add_argument(
        "--assets",
        type=Path,
        default=Path("assets"),
        help="directory holding images, audio and fonts (default: ./assets)",
    )
    args = parser.parse_args(argv)
    Controller.default(args.assets).run()
    return 0