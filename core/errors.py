"""Exceptions raised by DepReview."""


class DepReviewError(Exception):
    """Base class for DepReview errors."""


class PromptCancelled(DepReviewError):
    """The operator cancelled the selection prompt."""


class AnalysisLoadError(DepReviewError):
    """The analysis document could not be read or is malformed."""


class ManifestLoadError(DepReviewError):
    """The manifest file could not be read or is not a JSON object."""
