"""Allow ``python -m pjbuilder``."""

from pjbuilder.cli import main

if __name__ == "__main__":
    main()
