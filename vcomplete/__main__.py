"""Allow `python -m vcomplete`."""

from .command import main

main()
