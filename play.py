#!/usr/bin/env python3
"""Practice champion classes and abilities in the terminal.

Run this file to start a session:
    python play.py            # class trainer
    python play.py skills     # skills trainer
"""

from rift_trainer.game.interactive_trainer import main

if __name__ == "__main__":
    main()
