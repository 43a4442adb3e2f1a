"""Run the swap solver: `python -m wafflesolver <from_board_file> <to_board_file>`."""

from sys import exit

from wafflesolver.cli import swaps_main

exit(swaps_main())
