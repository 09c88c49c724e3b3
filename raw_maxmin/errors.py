"""Exceptions raised by the RAW Max-Min pipeline.

All of them derive from ``ValueError`` so callers that already guard numeric
helpers with ``except ValueError`` keep working.
"""


class RawMaxMinError(ValueError):
    """Base class for pipeline errors."""


class ConfigurationError(RawMaxMinError):
    """A configuration field is non-positive or has the wrong type."""


class DimensionMismatchError(RawMaxMinError):
    """Traffic load length does not match the configured station count."""


class DegenerateMetricError(RawMaxMinError):
    """A metric is undefined for its input (e.g. fairness of all-zero throughput)."""
