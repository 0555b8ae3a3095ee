"""Entry point for running albumsync as a module: python -m albumsync."""

from albumsync.cli import main

if __name__ == "__main__":
    main()
