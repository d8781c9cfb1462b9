"""
Stand-ins for google-genai response objects.
"""

from types import SimpleNamespace


def gemini_response(text=None, candidate_text=None):
    """Shape-compatible stand-in for a generate_content response."""
    candidates = []
    if candidate_text is not None:
        part = SimpleNamespace(text=candidate_text)
        candidates = [SimpleNamespace(content=SimpleNamespace(parts=[part]))]
    return SimpleNamespace(text=text, candidates=candidates)
