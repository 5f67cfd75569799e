"""Error types shared by the core, adapters and CLI."""

from __future__ import annotations


class BundleMatrixError(Exception):
    """Base class for errors reported to the user."""


class ConfigurationError(BundleMatrixError):
    """The declared package list (or manifest) is malformed.

    A programmer error: raised before any descriptor reaches the bundler.
    """


class BundlerError(BundleMatrixError):
    """The external bundler failed; output is kept exactly as reported."""

    def __init__(self, returncode: int, output: str) -> None:
        super().__init__(f"bundler exited with code {returncode}")
        self.returncode = returncode
        self.output = output
