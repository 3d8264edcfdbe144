"""A side-scrolling arcade game built on pygame, with its sprites, collision, clock and screen parts."""

__version__ = "0.1.0"