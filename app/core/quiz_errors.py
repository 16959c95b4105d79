"""Exceptions raised by the quiz catalog, scorer and assessment store."""


class QuizError(Exception):
    """Base class for quiz errors."""


class InvalidQuizInputError(QuizError):
    """The caller supplied a missing or malformed catalog or response set."""


class CatalogConfigurationError(QuizError):
    """The static catalog or its lookup tables are inconsistent."""


class AssessmentStoreError(QuizError):
    """An assessment could not be stored."""
