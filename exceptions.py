"""
Error taxonomy for the career analysis pipeline.

Insufficient data (no skills on record) is not an exception: the pipeline
returns ``None`` for it. A skill name missing from the category lookup table
is not an exception either; it falls back to the ``"Other"`` category.
"""


class CareerEngineError(Exception):
    """Base class for career engine errors"""


class UpstreamFetchFailure(CareerEngineError):
    """A required profile store read (the user's skills) failed."""

    def __init__(self, user_id, source, message=None):
        self.user_id = user_id
        self.source = source
        super().__init__(message or f"Failed to fetch {source} for user {user_id}")


class OptionalFetchFailure(CareerEngineError):
    """A non-required profile store read failed; the field defaults to empty."""

    def __init__(self, user_id, source, message=None):
        self.user_id = user_id
        self.source = source
        super().__init__(message or f"Failed to fetch {source} for user {user_id}")


class CatalogError(CareerEngineError):
    """A catalog source is unreadable or holds malformed entries."""


class RoleNotRecommended(CareerEngineError):
    """A study plan was requested for a role absent from the user's recommendations."""

    def __init__(self, job_title):
        self.job_title = job_title
        super().__init__(f"Job role not found in recommendations: {job_title}")
