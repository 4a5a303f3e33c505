"""Schema contracts.

Pydantic models and Literal-based choice types used to validate build
configuration and describe build results.

Export policy:
- Keep module imports explicit in most of the codebase:
    from respmatrix.contracts.build_config import BuildConfig
- The names re-exported here are a small set of convenience imports.
"""

from .choices import MissingStimulusPolicy, ResponseDTypeName
from .build_config import BuildConfig
from .results import ResponseMatrixSummary

__all__ = [
    "MissingStimulusPolicy",
    "ResponseDTypeName",
    "BuildConfig",
    "ResponseMatrixSummary",
]
