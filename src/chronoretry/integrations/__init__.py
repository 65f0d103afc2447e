r"""Retry classifiers for third-party libraries."""
