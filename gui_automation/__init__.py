"""Page objects and actions for the demoqa.com UI test suite."""

__version__ = "0.1.0"
