"""Search routines for the Waffle solver: minimum swaps and word fill."""
