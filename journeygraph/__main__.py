"""Module entrypoint for ``python -m journeygraph``."""

from journeygraph.cli import main

if __name__ == "__main__":
    main()
