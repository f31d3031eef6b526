"""Configuration constants for the lingua practice application."""

DEFAULT_MODEL = 'gemini-2.5-flash'
LEARNER_LEVEL = 'A2'

# Multiple-choice content
OPTION_COUNT = 3
BLANK_MARKER = '___'

# Feedback messages
CORRECT_MESSAGE = 'Correct! 🎉 +1 point for you 🎯'
LISTENING_WRONG_MESSAGE = 'Not quite! The correct answer was "{answer}". 💡'
GRAMMAR_WRONG_MESSAGE = 'Not quite. 💡 Hint: {hint}'
NO_MISTAKES_MESSAGE = 'No mistakes found! Great job! 🎉 +1 point for you 🎯'
SUGGESTIONS_HEADING = 'Here are some suggestions:'
BETTER_WAY_HEADING = '💡 A better way to say it:'

# Error messages shown to the user
GATEWAY_ERROR_MESSAGE = 'Failed to get a valid response from the AI. Please try again.'
UNKNOWN_ERROR_MESSAGE = 'An unknown error occurred.'
SPEECH_UNSUPPORTED_MESSAGE = "Speech recognition isn't supported here. Try a browser such as Chrome."
PLAYBACK_UNSUPPORTED_MESSAGE = "Speech playback isn't supported here."

# Main menu: (kind value, label, icon)
MENU_ITEMS = [
    ('listening', 'Listening', '🎧'),
    ('speaking', 'Speaking', '🎙️'),
    ('writing', 'Writing', '✍️'),
    ('vocabulary', 'Vocabulary', '📖'),
    ('grammar', 'Grammar', '📝'),
]
