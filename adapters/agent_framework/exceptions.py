"""
Agent framework loading exceptions.
"""


class FrameworkLoadError(Exception):
    """Raised when an agent framework entry point cannot be imported."""

    def __init__(self, kind: str, import_path: str, error: str):
        self.kind = kind
        self.import_path = import_path
        self.error = error
        super().__init__(
            f"Failed to load {kind} agent framework from '{import_path}': {error}"
        )
