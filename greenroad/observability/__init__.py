"""Observability helpers.

structlog JSON logging, a request instrumentation middleware and Prometheus
instruments bound to a per-application registry.
"""
