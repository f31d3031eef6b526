"""Prompts and response schemas for each activity."""

from .config import LEARNER_LEVEL, OPTION_COUNT, BLANK_MARKER

LISTENING_PROMPT = f"""
    Generate a short English sentence for an {LEARNER_LEVEL}-level learner.
    The sentence will be spoken aloud.
    Add a multiple-choice comprehension question about it with exactly {OPTION_COUNT}
    different options, and give the correct answer copied exactly from the options.
"""

LISTENING_SCHEMA = {
    'type': 'OBJECT',
    'properties': {
        'sentence': {'type': 'STRING', 'description': 'A short, clear English sentence.'},
        'question': {'type': 'STRING', 'description': 'A comprehension question about the sentence.'},
        'options': {
            'type': 'ARRAY',
            'items': {'type': 'STRING'},
            'description': f'An array of {OPTION_COUNT} possible answers.'
        },
        'answer': {'type': 'STRING', 'description': 'The correct answer from the options.'}
    },
    'required': ['sentence', 'question', 'options', 'answer']
}

GRAMMAR_PROMPT = f"""
    Create a fill-in-the-blank grammar question for an English learner.
    Mark the blank with {BLANK_MARKER}. Give exactly {OPTION_COUNT} different options,
    the correct answer copied exactly from the options, and a short hint for a learner
    who gets it wrong.
    Example: "She {BLANK_MARKER} going to school." with options is / are / am.
"""

GRAMMAR_SCHEMA = {
    'type': 'OBJECT',
    'properties': {
        'question': {'type': 'STRING'},
        'options': {'type': 'ARRAY', 'items': {'type': 'STRING'}},
        'answer': {'type': 'STRING'},
        'hint': {'type': 'STRING'}
    },
    'required': ['question', 'options', 'answer', 'hint']
}

VOCABULARY_PROMPT = """
    Teach one new English word suitable for an intermediate learner.
    Provide its meaning, an example sentence, and one synonym.
"""

VOCABULARY_SCHEMA = {
    'type': 'OBJECT',
    'properties': {
        'word': {'type': 'STRING'},
        'meaning': {'type': 'STRING'},
        'example': {'type': 'STRING'},
        'synonym': {'type': 'STRING'}
    },
    'required': ['word', 'meaning', 'example', 'synonym']
}

SPEAKING_PROMPT = """
    Generate a simple, open-ended question for an English learner to answer out loud.
    For example: "What did you eat for breakfast today?" or "What is your favorite color?"
    Reply with the question only.
"""

WRITING_PROMPT = """
    Generate a short, simple daily writing topic for an English learner.
    For example: "Write 3 lines about your favorite food." or
    "Describe your morning routine in a few sentences."
    Reply with the topic only.
"""

SPEAKING_FEEDBACK_SCHEMA = {
    'type': 'OBJECT',
    'properties': {
        'praise': {'type': 'STRING', 'description': 'Encouraging and positive feedback for the learner.'},
        'correction': {
            'type': 'STRING',
            'description': "The corrected version of the learner's sentence. Empty if there are no mistakes."
        },
        'explanation': {
            'type': 'STRING',
            'description': 'A simple explanation of the correction. Empty if there are no mistakes.'
        }
    },
    'required': ['praise', 'correction', 'explanation']
}

WRITING_FEEDBACK_SCHEMA = {
    'type': 'OBJECT',
    'properties': {
        'praise': {'type': 'STRING', 'description': "Positive praise for the learner's writing effort."},
        'corrections': {
            'type': 'ARRAY',
            'items': {
                'type': 'OBJECT',
                'properties': {
                    'original': {'type': 'STRING'},
                    'corrected': {'type': 'STRING'},
                    'explanation': {'type': 'STRING'}
                },
                'required': ['original', 'corrected', 'explanation']
            }
        }
    },
    'required': ['praise', 'corrections']
}


def speaking_feedback_prompt(question: str, answer: str) -> str:
    return f"""
        An English learner was asked: "{question}". They replied: "{answer}".
        Provide encouraging feedback. Politely correct any mistakes and explain why.
        Keep the tone friendly and supportive. If there are no mistakes, just give praise
        and leave correction and explanation empty.
    """


def writing_feedback_prompt(text: str) -> str:
    return f"""
        An English learner wrote the following: "{text}".
        Check for grammar and spelling mistakes and praise their effort.
        List each correction with the original snippet, the corrected version and a brief
        explanation. If there are no mistakes, the corrections array must be empty.
    """


def vocabulary_feedback_prompt(word: str, sentence: str) -> str:
    return f"""
        An English learner was taught the word "{word}" and asked to use it in a sentence.
        They wrote: "{sentence}".
        Provide friendly feedback on their sentence. Confirm if they used it correctly,
        or gently correct them if they didn't.
    """
