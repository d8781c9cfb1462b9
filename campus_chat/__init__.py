"""
Campus Chat - institution question answering

Answers prospective-student questions from a Dialogflow intent corpus and
falls back to a hosted Gemini model when the local classifier is unsure.
"""

__version__ = "1.0.0"
