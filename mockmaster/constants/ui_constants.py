"""Qt UI constants used across widgets."""

WINDOW_TITLE: str = "MockMaster AI"
FOOTER_TEXT: str = "MockMaster AI. Powered by Gemini."

HEADER_NEW_TOPIC_BUTTON: str = "New Topic"
HEADER_ABOUT_BUTTON: str = "About"
HEADER_HELP_BUTTON: str = "Help"

SETUP_TITLE: str = "Mock Test Generator"
SETUP_SUBTITLE: str = (
    "Create a timed mock test on any topic. Choose your difficulty, set the length, and test your skills."
)
SETUP_TOPIC_LABEL: str = "Test Topic"
SETUP_TOPIC_PLACEHOLDER: str = "e.g., Javascript Promises, World War II, Organic Chemistry..."
SETUP_DIFFICULTY_LABEL: str = "Difficulty Level"
SETUP_COUNT_LABEL: str = "Number of Questions"
SETUP_GENERATE_BUTTON: str = "Generate Test"
SETUP_GENERATING_BUTTON: str = "Generating Quiz…"

ACTIVE_NEXT_BUTTON: str = "Next"
ACTIVE_FINISH_BUTTON: str = "Finish Test"
ACTIVE_ANSWER_RECORDED: str = "Answer recorded"
ACTIVE_SELECT_OPTION: str = "Select an option"

RESULT_TITLE: str = "Quiz Completed!"
RESULT_RETRY_BUTTON: str = "Retry Quiz"
RESULT_NEW_TOPIC_BUTTON: str = "New Topic"
RESULT_BREAKDOWN_TITLE: str = "Detailed Breakdown"

GENERATION_FAILED_MESSAGE: str = (
    "Failed to generate quiz. Please check your API key or try a different topic."
)
CONFIRM_ABANDON_MESSAGE: str = "Leaving now discards your current test. Continue?"
