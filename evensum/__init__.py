"""Package marker for the application.

This file intentionally contains no runtime logic. It allows the project to be
imported as a package (for ``python -m evensum.main`` execution and for tests).
"""
