"""SCM Metadata: build properties describing a version-control checkout."""

__version__ = "0.1.0"
