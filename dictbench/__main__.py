"""``python -m dictbench`` entry point."""

from dictbench.cli import main

main()
