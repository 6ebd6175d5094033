"""Static metadata describing MockMaster."""

APP_NAME = "MockMaster"
APP_VERSION = "0.1"
APP_LICENSE = "MIT License"
APP_ABOUT_TEXT = (
    "MockMaster builds a timed multiple-choice mock test on any topic with Google Gemini. "
    "Pick a difficulty and a length, answer against the clock, then review every question "
    "with its explanation."
)

HELP_TEXT = (
    "Enter a topic, choose a difficulty and the number of questions, then press Generate Test.\n\n"
    "You get one minute per question. When the clock reaches zero the test is submitted "
    "with the answers you have given so far; unanswered questions count as wrong.\n\n"
    "Set GEMINI_API_KEY in the environment (or a .env file) before starting the app."
)
