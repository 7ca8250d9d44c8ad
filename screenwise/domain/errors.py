"""Exception hierarchy for the screening engine and guideline catalogue."""


class ScreenwiseError(Exception):
    """Base class for all errors raised by screenwise."""


class MalformedGuidelineError(ScreenwiseError):
    """A guideline record cannot be turned into a schedule entry."""

    def __init__(self, guideline_id: str, reason: str) -> None:
        super().__init__(f"Guideline {guideline_id!r} is malformed: {reason}")
        self.guideline_id = guideline_id
        self.reason = reason


class GuidelineNotFoundError(ScreenwiseError):
    def __init__(self, guideline_id: str) -> None:
        super().__init__(f"Guideline {guideline_id!r} not found")
        self.guideline_id = guideline_id


class GuidelinePermissionError(ScreenwiseError):
    """The acting user may not modify the guideline."""

    def __init__(self, guideline_id: str, user_id: str | None, action: str) -> None:
        super().__init__(f"User {user_id!r} may not {action} guideline {guideline_id!r}")
        self.guideline_id = guideline_id
        self.user_id = user_id
        self.action = action


class ProfileNotFoundError(ScreenwiseError):
    def __init__(self, user_id: str) -> None:
        super().__init__(f"No profile for user {user_id!r}")
        self.user_id = user_id
