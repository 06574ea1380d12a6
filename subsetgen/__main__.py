"""Module entrypoint for ``python -m subsetgen``."""

from subsetgen.cli import main

if __name__ == "__main__":
    main()
