"""Main entry point for the combo_games package."""

from combo_games.cli import main

if __name__ == "__main__":
    main()
