"""
Lädt Fragen für das Batch-Review aus einer JSON-Datei.

Akzeptierte Formate:
- Liste von Fragen: [{"id": ..., "text": ..., "category": ..., "helpText": ...}, ...]
- Objekt mit Liste: {"questions": [...]}

Sowohl `helpText` (Frontend-Export) als auch `help_text` werden gelesen.
"""

import json
import logging
from pathlib import Path
from typing import Union

from pydantic import ValidationError

from app.models.pydantic import Question

logger = logging.getLogger(__name__)


class QuestionBankError(ValueError):
    """Fragen-Datei fehlt, ist kein gültiges JSON oder enthält ungültige Einträge."""


def parse_questions(data) -> list[Question]:
    if isinstance(data, dict):
        data = data.get("questions")
    if not isinstance(data, list):
        raise QuestionBankError("Expected a list of questions or an object with 'questions'")

    questions: list[Question] = []
    for i, item in enumerate(data):
        try:
            questions.append(Question.model_validate(item))
        except ValidationError as e:
            raise QuestionBankError(f"Invalid question at index {i}: {e}") from e
    return questions


def load_questions(path: Union[str, Path]) -> list[Question]:
    path = Path(path)
    if not path.exists():
        raise QuestionBankError(f"Question file not found: {path}")

    try:
        with path.open("r", encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise QuestionBankError(f"Invalid JSON in {path}: {e}") from e
    except (OSError, UnicodeDecodeError) as e:
        raise QuestionBankError(f"Cannot read question file {path}: {e}") from e

    questions = parse_questions(data)
    logger.info("Loaded %s questions from %s", len(questions), path)
    return questions
