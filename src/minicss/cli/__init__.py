"""minicss command line interface."""
