"""jdkres - resolve JDK version requests to downloadable release artifacts."""

__version__ = "0.1.0"
