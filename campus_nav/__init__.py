"""Top-level package for the Campus Navigator project.

This package keeps a weighted, undirected graph of named campus
locations and answers shortest-path queries over it. The graph engine
lives in ``campus_nav.graph``; persistence, map rendering and the
service layer wrap it for the admin and path-finder UI.
"""

__version__ = "0.1.0"
