"""go-updater — install or upgrade the Go toolchain under /usr/local/go."""

__version__ = "0.1.0"
