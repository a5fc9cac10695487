"""Main entry point for the tanakh-range CLI when run as a module."""

from tanakhrange.cli.main import main

if __name__ == "__main__":  # pragma: no cover
    main()
