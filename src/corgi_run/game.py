"""
game.py
-------
Entry point for the ``corgi-run`` command.
"""

import sys

from corgi_run.core.runtime.game_loop import GameLoop


def main():
    GameLoop().run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
