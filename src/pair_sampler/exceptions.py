"""Exception hierarchy for pair-sampler.

All exceptions derive from PairSamplerError, enabling broad catch patterns
at the application boundary while allowing fine-grained handling internally.
"""


class PairSamplerError(Exception):
    """Base exception for all pair-sampler errors."""


class PreconditionViolation(PairSamplerError):
    """Arguments passed to a sampler violate its call contract.

    Raised before any randomness is consumed when the domain is too small,
    the forbidden indices are not distinct, or a forbidden index lies
    outside ``range(0, length)``. This is a programmer error: callers must
    prevent it rather than recover from it.
    """


class ConfigValidationError(PairSamplerError):
    """Configuration field validation failed.

    Raised when per-call overrides contain unknown keys or attempt to
    override infrastructure fields.
    """
