"""HTTP client for the quiz content service.

Endpoints used:
    POST /parents/{parent_id}/kids/{child_id}/quizzes   generate a quiz
    GET  /parents/{parent_id}/kids/{child_id}/quizzes   list a child's quizzes
"""

import logging
from typing import Any

import httpx

from kidquiz.modules.analytics.interface import QuizRecord
from kidquiz.modules.quiz.interface import GeneratedQuiz, QuizContentProvider
from kidquiz.modules.quiz.schemas import parse_history, parse_quiz
from kidquiz.shared.config import Settings
from kidquiz.shared.exceptions import ContentGenerationError, InvalidQuizPayloadError

logger = logging.getLogger(__name__)


class HttpQuizContentProvider(QuizContentProvider):
    """Quiz content provider backed by the quiz REST API.

    Every failure (transport errors, non-success status codes, bodies that
    are not valid quiz JSON) is raised as ContentGenerationError. Requests
    are not retried.
    """

    SUCCESS_CODES = (200, 201)

    def __init__(
        self,
        base_url: str,
        parent_id: str,
        token: str | None = None,
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._parent_id = parent_id
        self._timeout = timeout
        self._transport = transport
        self._headers = {"Accept": "application/json"}
        if token:
            self._headers["Authorization"] = f"Bearer {token}"

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> "HttpQuizContentProvider":
        return cls(
            base_url=settings.quiz_api_base_url,
            parent_id=settings.quiz_api_parent_id,
            token=settings.quiz_api_token,
            timeout=settings.quiz_api_timeout,
            transport=transport,
        )

    async def generate(
        self,
        subject: str,
        difficulty: str,
        topic: str,
        question_count: int,
        child_id: str,
    ) -> GeneratedQuiz:
        """Ask the content service to generate a quiz.

        Args:
            subject: Subject of the quiz
            difficulty: Difficulty tier
            topic: Topic within the subject
            question_count: Number of questions to generate
            child_id: Child the quiz is for

        Returns:
            GeneratedQuiz

        Raises:
            ContentGenerationError: On any failure
        """
        body = {
            "subject": subject,
            "difficulty": difficulty,
            "nbrQuestions": question_count,
            "topic": topic,
        }
        logger.info(
            f"Generating quiz for child {child_id}: {subject} - {topic} "
            f"({difficulty}, {question_count} questions)"
        )

        data = await self._request("POST", self._quizzes_path(child_id), json=body)
        try:
            quiz = parse_quiz(data).to_generated_quiz()
        except InvalidQuizPayloadError as e:
            raise ContentGenerationError(f"Malformed quiz in response: {e.message}") from e

        logger.info(f"Generated quiz {quiz.id} with {len(quiz.questions)} questions")
        return quiz

    async def list_quizzes(self, child_id: str) -> list[QuizRecord]:
        """Fetch a child's quiz history, oldest first as returned by the service.

        Raises:
            ContentGenerationError: On any failure
        """
        data = await self._request("GET", self._quizzes_path(child_id))
        try:
            records = parse_history(data)
        except InvalidQuizPayloadError as e:
            raise ContentGenerationError(f"Malformed quiz history: {e.message}") from e

        logger.debug(f"Fetched {len(records)} quizzes for child {child_id}")
        return records

    def _quizzes_path(self, child_id: str) -> str:
        return f"/parents/{self._parent_id}/kids/{child_id}/quizzes"

    async def _request(
        self,
        method: str,
        path: str,
        json: dict[str, Any] | None = None,
    ) -> Any:
        try:
            async with httpx.AsyncClient(
                base_url=self._base_url,
                headers=self._headers,
                timeout=self._timeout,
                transport=self._transport,
            ) as client:
                response = await client.request(method, path, json=json)
        except httpx.HTTPError as e:
            logger.warning(f"Quiz service request failed: {method} {path}: {e}")
            raise ContentGenerationError(f"Request failed: {e}") from e

        if response.status_code not in self.SUCCESS_CODES:
            message = self._error_message(response)
            logger.warning(f"Quiz service returned {response.status_code}: {message}")
            raise ContentGenerationError(message, status_code=response.status_code)

        try:
            return response.json()
        except ValueError as e:
            raise ContentGenerationError("Response is not valid JSON") from e

    @staticmethod
    def _error_message(response: httpx.Response) -> str:
        """Use the server's message when the error body carries one."""
        fallback = f"Quiz service error: {response.status_code}"
        try:
            payload = response.json()
        except ValueError:
            return fallback
        if isinstance(payload, dict):
            message = payload.get("message") or payload.get("error")
            if isinstance(message, str) and message:
                return message
        return fallback
