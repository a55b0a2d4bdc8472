"""Building blocks for StarCraft II bots: API transport, client launching, counting, grids and expansions."""

__version__ = "0.1.0"