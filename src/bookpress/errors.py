"""Exception hierarchy."""


class BookpressError(Exception):
    """Base class for all bookpress errors."""


class ValidationError(BookpressError):
    """Uploaded file failed the pre-parse checks."""


class ParseError(BookpressError):
    """Source bytes could not be converted into markup."""


class GenerationError(BookpressError):
    """An export artifact could not be produced."""


class IdmlIntegrityError(GenerationError):
    """IDML package references something it never declares, or reuses a Self id."""

    def __init__(self, problems: list[str]):
        self.problems = problems
        preview = ", ".join(problems[:5])
        more = f" (+{len(problems) - 5} more)" if len(problems) > 5 else ""
        super().__init__(f"IDML integrity check failed: {preview}{more}")
