"""Allow ``python -m tripgraph``."""

from tripgraph.cli import main

if __name__ == "__main__":
    main()
