"""
Input validation for proxy requests.

Single Responsibility: only checks presence, type and size of request fields.
"""

from typing import Any
from urllib.parse import urlparse

from .exceptions import ValidationError, PayloadTooLargeError


class InputValidator:
    """
    Validates fields of /api/ai requests before any provider is called.
    """

    MAX_QUESTION_LENGTH = 2000
    MAX_CONTEXT_LENGTH = 20000
    MAX_URL_LENGTH = 2048
    ALLOWED_URL_SCHEMES = {"http", "https"}

    @staticmethod
    def validate_ask(question: Any, context: Any) -> tuple:
        """
        Validate an ask request.

        :param question: Question from the request body
        :param context: Album context from the request body
        :return: Tuple of (question, context) as stripped strings
        :raises ValidationError: If either field is missing
        :raises PayloadTooLargeError: If the question is too long
        """
        if not question or not context:
            raise ValidationError("Missing question/context")

        question = str(question)
        context = str(context)

        if len(question) > InputValidator.MAX_QUESTION_LENGTH:
            raise PayloadTooLargeError("Question too long")

        if len(context) > InputValidator.MAX_CONTEXT_LENGTH:
            raise PayloadTooLargeError("Context too long")

        question = question.replace("\x00", "").strip()
        context = context.replace("\x00", "").strip()
        if not question or not context:
            raise ValidationError("Missing question/context")

        return question, context

    @staticmethod
    def validate_image_url(image_url: Any) -> str:
        """
        Validate an image URL for captioning.

        :param image_url: URL from the request body
        :return: The URL as a stripped string
        :raises ValidationError: If missing or not an http(s) URL
        """
        if not image_url or not isinstance(image_url, str):
            raise ValidationError("Missing imageUrl")

        image_url = image_url.strip()
        if len(image_url) > InputValidator.MAX_URL_LENGTH:
            raise PayloadTooLargeError("imageUrl too long")

        parsed = urlparse(image_url)
        if parsed.scheme not in InputValidator.ALLOWED_URL_SCHEMES or not parsed.netloc:
            raise ValidationError("imageUrl must be an absolute http(s) URL")

        return image_url
