"""Allow `python -m album_catalog`."""

from album_catalog.server import run

if __name__ == "__main__":
    run()
