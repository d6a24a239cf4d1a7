"""Storage configuration constants for the persistence gateway."""

DEFAULT_DATA_DIRECTORY: str = "data"
QUIZ_SUBDIRECTORY: str = "quizzes"
RESULT_SUBDIRECTORY: str = "results"
QUIZ_FILE_EXTENSION: str = ".quiz"
RESULT_FILE_EXTENSION: str = ".result"
JSON_INDENT: int = 2
