"""Logging, request tracing and Prometheus metrics for the pricing service."""
