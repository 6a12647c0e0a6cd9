"""Test suites for the emissions estimator service."""
