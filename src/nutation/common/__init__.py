"""Configuration, logging, errors, data loading & the command line interface."""
