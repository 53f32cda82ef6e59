"""svnkit — run the Subversion client and parse its XML reports into typed results."""

__version__ = "0.1.0"
