"""A side-scrolling zombie shooter with a boss battle, built on pygame."""

__version__ = "0.1.0"