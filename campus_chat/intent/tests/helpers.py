"""
Helpers for writing throwaway intent corpora in tests.
"""

import json


def write_intent(directory, name, response=None, utterances=None, language="en"):
    """Write a Dialogflow-style intent definition and (optionally) its usersays file."""
    definition = {"id": name, "name": name, "responses": []}
    if response is not None:
        definition["responses"] = [{"messages": [{"type": 0, "speech": [response]}]}]
    (directory / f"{name}.json").write_text(json.dumps(definition), encoding="utf-8")

    if utterances is not None:
        usersays = [{"data": [{"text": text}], "isTemplate": False} for text in utterances]
        (directory / f"{name}_usersays_{language}.json").write_text(json.dumps(usersays), encoding="utf-8")
