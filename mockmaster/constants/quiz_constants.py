"""Quiz-related constants shared across UI and core layers."""

SECONDS_PER_QUESTION: int = 60
LOW_TIME_THRESHOLD_SECONDS: int = 60
TIMER_TICK_INTERVAL_MS: int = 1000

QUESTION_COUNT_CHOICES: tuple[int, ...] = (5, 10, 15, 20)
DEFAULT_QUESTION_COUNT: int = 5
DEFAULT_DIFFICULTY_LABEL: str = "Medium"
