"""
Summary: Adapter exports for the counting feature.
Why: Provide the filesystem bridge that turns input names into byte sources.
"""

from .filesystem import open_source

__all__ = ["open_source"]
