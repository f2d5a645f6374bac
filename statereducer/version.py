"""Contains the current version of statereducer which can be queried from the package."""

__version__ = '0.1.0'
