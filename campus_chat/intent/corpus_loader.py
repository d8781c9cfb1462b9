"""
Intent corpus loader for Dialogflow agent exports.

Reads every ``<intent>.json`` definition and its ``<intent>_usersays_<lang>.json``
example file from one directory and builds an IntentCorpus.

Usage:
    corpus = CorpusLoader("data/intents").load()
    print(f"{len(corpus.examples)} examples, {len(corpus.responses)} intents")
"""

import os
import json
import logging
from typing import Any, Dict, List, Tuple

from campus_chat.shared.exceptions import ConfigurationError, CorpusFileError
from .models import IntentCorpus, IntentExample
from .patterns import (
    DEFINITION_SUFFIX,
    EXAMPLES_INFIX,
    RESERVED_INTENT_MARKERS,
    examples_suffix,
    is_reserved_intent,
)

logger = logging.getLogger(__name__)


def _read_json(path: str) -> Any:
    try:
        with open(path, "r", encoding="utf-8") as f:
            return json.load(f)
    except (OSError, UnicodeDecodeError) as e:
        raise CorpusFileError(path, f"unreadable: {e}") from e
    except json.JSONDecodeError as e:
        raise CorpusFileError(path, f"invalid JSON: {e}") from e


def extract_response(definition: Any) -> str:
    """
    Return the first canned answer of an intent definition.

    Walks responses[0] -> messages[0] -> speech; ``speech`` may be a single
    string or a list of strings. Returns "" when nothing is there.
    """
    if not isinstance(definition, dict):
        return ""

    responses = definition.get("responses")
    if not isinstance(responses, list) or not responses or not isinstance(responses[0], dict):
        return ""

    messages = responses[0].get("messages")
    if not isinstance(messages, list) or not messages or not isinstance(messages[0], dict):
        return ""

    speech = messages[0].get("speech")
    if isinstance(speech, str):
        return speech.strip()
    if isinstance(speech, list):
        for text in speech:
            if isinstance(text, str) and text.strip():
                return text.strip()
    return ""


def extract_utterances(usersays: Any, path: str) -> List[str]:
    """
    Return the example utterances of a usersays file.

    Each entry looks like {"data": [{"text": "what are the "}, {"text": "fees", ...}]};
    the parts are concatenated because Dialogflow splits annotated entities out.
    """
    if not isinstance(usersays, list):
        raise CorpusFileError(path, "expected a list of examples")

    utterances = []
    for item in usersays:
        if not isinstance(item, dict):
            continue
        parts = item.get("data")
        if not isinstance(parts, list):
            continue
        text = "".join(
            part.get("text", "") for part in parts
            if isinstance(part, dict) and isinstance(part.get("text"), str)
        ).strip()
        if text:
            utterances.append(text)
    return utterances


class CorpusLoader:
    """
    Builds an IntentCorpus from a directory of per-intent JSON files.

    Attributes:
        intents_dir: Corpus root directory
        language: Language code used in usersays file names
        reserved_markers: Identifier markers of intents that are never trained
    """

    def __init__(
        self,
        intents_dir: str,
        language: str = "en",
        reserved_markers: Tuple[str, ...] = RESERVED_INTENT_MARKERS,
    ):
        self.intents_dir = intents_dir
        self.language = language
        self.reserved_markers = reserved_markers

    def load(self) -> IntentCorpus:
        """
        Load the corpus.

        Returns:
            IntentCorpus with examples, responses, skipped intents and warnings

        Raises:
            ConfigurationError: If the corpus directory does not exist
        """
        if not os.path.isdir(self.intents_dir):
            logger.error(f"❌ Intents directory not found: {self.intents_dir}")
            raise ConfigurationError(f"Intents directory not found: {self.intents_dir}")

        files = sorted(os.listdir(self.intents_dir))
        suffix = examples_suffix(self.language)

        usersays_files: Dict[str, str] = {}
        definition_files: List[str] = []
        for name in files:
            if name.endswith(suffix):
                usersays_files[name[: -len(suffix)]] = name
            elif name.endswith(DEFINITION_SUFFIX) and EXAMPLES_INFIX not in name:
                definition_files.append(name)

        examples: List[IntentExample] = []
        responses: Dict[str, str] = {}
        skipped: List[str] = []
        warnings: List[str] = []

        for name in definition_files:
            intent_name = name[: -len(DEFINITION_SUFFIX)]

            if is_reserved_intent(intent_name, self.reserved_markers):
                logger.debug(f"Skipping reserved intent: {intent_name}")
                skipped.append(intent_name)
                continue

            try:
                response = self._load_response(name)
            except CorpusFileError as e:
                logger.warning(f"⚠️ Skipping intent {intent_name}: {e}")
                warnings.append(str(e))
                continue

            usersays_file = usersays_files.get(intent_name)
            if usersays_file is not None:
                try:
                    examples.extend(self._load_examples(intent_name, usersays_file))
                except CorpusFileError as e:
                    logger.warning(f"⚠️ Ignoring examples of {intent_name}, keeping its response: {e}")
                    warnings.append(str(e))

            responses[intent_name] = response

        corpus = IntentCorpus(
            examples=tuple(examples),
            responses=responses,
            skipped_intents=tuple(skipped),
            warnings=tuple(warnings),
        )
        logger.info(
            f"✅ Corpus loaded from {self.intents_dir}: {len(corpus.trainable_intents)} trainable intents, "
            f"{len(examples)} examples, {len(skipped)} skipped, {len(warnings)} warnings"
        )
        return corpus

    def _load_response(self, definition_file: str) -> str:
        definition = _read_json(os.path.join(self.intents_dir, definition_file))
        if not isinstance(definition, dict):
            raise CorpusFileError(definition_file, "expected a JSON object")
        return extract_response(definition)

    def _load_examples(self, intent_name: str, usersays_file: str) -> List[IntentExample]:
        usersays = _read_json(os.path.join(self.intents_dir, usersays_file))
        utterances = extract_utterances(usersays, usersays_file)
        return [IntentExample(intent_label=intent_name, utterance_text=text) for text in utterances]


def load_corpus(
    intents_dir: str,
    language: str = "en",
    reserved_markers: Tuple[str, ...] = RESERVED_INTENT_MARKERS,
) -> IntentCorpus:
    """Convenience wrapper around CorpusLoader(...).load()."""
    return CorpusLoader(intents_dir, language, reserved_markers).load()
