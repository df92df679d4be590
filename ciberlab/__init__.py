"""Labs, simulation parameters, viewer commands and command-line options for a robot-mouse simulation environment."""

__version__ = "0.1.0"