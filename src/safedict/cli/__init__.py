"""SafeDict command line interface."""
