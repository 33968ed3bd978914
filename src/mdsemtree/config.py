"""Options for the semantic tree builder."""

import os
from dataclasses import dataclass


@dataclass
class SemtreeOptions:
    """Configuration for build_semantic_tree."""
    # Copy List/ListItem subtrees as atomic units
    preserve_list_structure: bool = True

    @classmethod
    def from_env(cls) -> "SemtreeOptions":
        """Read options from MDSEMTREE_* environment variables."""
        raw = os.environ.get("MDSEMTREE_PRESERVE_LISTS")
        if raw is None:
            return cls()
        return cls(preserve_list_structure=raw.lower() in ("true", "1", "yes"))
