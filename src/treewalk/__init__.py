# Package initialization for treewalk.
# This file intentionally contains only minimal metadata.
# The walker lives in treewalk.traverse; import it from there.

__all__ = [
    "__version__",
]

# Package version.
# Duplicated in pyproject.toml; keep them in sync.
__version__ = "0.1.0"
