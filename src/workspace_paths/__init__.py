"""workspace-paths core package.

Resolves yarn/npm workspace membership for a build tool and exposes the
source directories of sibling packages so a bundler can compile them.
"""

from .core import build_config
from .errors import WorkspaceError
from .models import ResolvedConfig

__all__ = [
    "ResolvedConfig",
    "WorkspaceError",
    "build_config",
]
