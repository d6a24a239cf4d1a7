"""Quiz-related constants shared across the core and its collaborators."""

DEFAULT_QUIZ_TITLE: str = "Untitled Quiz"
DEFAULT_CREATED_BY: str = "Anonymous"
DEFAULT_PASSING_PERCENTAGE: int = 50
DEFAULT_TIME_LIMIT_MINUTES: int = 0
DEFAULT_MARKS: int = 1

MIN_OPTIONS: int = 2
MAX_OPTIONS: int = 10

MIN_QUESTION_LENGTH: int = 5
MAX_QUESTION_LENGTH: int = 500
MAX_ANSWER_LENGTH: int = 200
MIN_MARKS: int = 1
MAX_MARKS: int = 100
MIN_TIME_LIMIT_MINUTES: int = 0
MAX_TIME_LIMIT_MINUTES: int = 300
MIN_TITLE_LENGTH: int = 3
MAX_TITLE_LENGTH: int = 100
MAX_DESCRIPTION_LENGTH: int = 500
MIN_NAME_LENGTH: int = 2
MAX_NAME_LENGTH: int = 50

TRUE_LABEL: str = "True"
FALSE_LABEL: str = "False"
TRUE_TOKENS: frozenset[str] = frozenset({"true", "t", "1"})
# Tokens accepted from a test-taker on top of TRUE_TOKENS ("a"/"b" map to the listed options).
TRUE_CHOICE_TOKENS: frozenset[str] = TRUE_TOKENS | {"a"}
FALSE_CHOICE_TOKENS: frozenset[str] = frozenset({"false", "f", "0", "b"})

SKIP_KEYWORD: str = "skip"

# Lower bounds, checked in descending order.
GRADE_BANDS: tuple[tuple[float, str], ...] = (
    (90.0, "A"),
    (80.0, "B"),
    (70.0, "C"),
    (60.0, "D"),
)
FAILING_GRADE: str = "F"

# Upper bounds (inclusive) of the score distribution buckets.
DISTRIBUTION_BANDS: tuple[tuple[float, str], ...] = (
    (20.0, "0-20%"),
    (40.0, "21-40%"),
    (60.0, "41-60%"),
    (80.0, "61-80%"),
    (100.0, "81-100%"),
)

PERFORMANCE_MESSAGES: tuple[tuple[float, str], ...] = (
    (95.0, "Outstanding! Perfect performance!"),
    (85.0, "Excellent work! You've mastered this topic!"),
    (75.0, "Great job! Keep up the good work!"),
    (65.0, "Good effort! You're on the right track!"),
    (50.0, "Not bad! Review the material and try again!"),
)
FALLBACK_PERFORMANCE_MESSAGE: str = "Keep practicing! You'll improve with more study!"

SAME_PERFORMANCE_TOLERANCE: float = 0.1
