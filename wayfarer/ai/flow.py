from __future__ import annotations

import json
import logging
from typing import Any, Generic, Mapping, Optional, Type, TypeVar

from openai import AsyncOpenAI, OpenAIError
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from wayfarer.ai.openai_client import get_client
from wayfarer.ai.prompts import SYSTEM_PROMPT
from wayfarer.core.config import settings
from wayfarer.core.errors import FlowFailedError, RequestValidationFailed

logger = logging.getLogger(__name__)

InputT = TypeVar("InputT", bound=BaseModel)
OutputT = TypeVar("OutputT", bound=BaseModel)


def validate_request(model: Type[InputT], payload: InputT | Mapping[str, Any]) -> InputT:
    """Parse ``payload`` into ``model``, reporting the first offending field."""
    if isinstance(payload, model):
        return payload
    if isinstance(payload, BaseModel):
        payload = payload.model_dump()
    try:
        return model.model_validate(payload)
    except PydanticValidationError as exc:
        first_error = exc.errors()[0]
        field = ".".join(str(item) for item in first_error.get("loc", ()))
        raise RequestValidationFailed(field, first_error.get("msg", "invalid value")) from exc


class Flow(Generic[InputT, OutputT]):
    """
    A named generation round trip: validate the request, render the prompt,
    ask the model for JSON and validate the reply against ``output_model``.
    Every failure after input validation surfaces as ``FlowFailedError``.
    """

    def __init__(
        self,
        name: str,
        template: str,
        input_model: Type[InputT],
        output_model: Type[OutputT],
        failure_message: str = "Failed to generate results. Please try again.",
        model: Optional[str] = None,
    ):
        self.name = name
        self.template = template
        self.input_model = input_model
        self.output_model = output_model
        self.failure_message = failure_message
        self.model = model

    def __repr__(self) -> str:
        return f"Flow({self.name!r})"

    def validate_input(self, payload: InputT | Mapping[str, Any]) -> InputT:
        return validate_request(self.input_model, payload)

    def render(self, request: InputT) -> str:
        return self.template.format(currency=settings.currency_symbol, **request.model_dump()).strip()

    def system_prompt(self) -> str:
        schema = json.dumps(self.output_model.model_json_schema(), ensure_ascii=False)
        return SYSTEM_PROMPT.format(schema=schema).strip()

    async def run(self, payload: InputT | Mapping[str, Any], client: Optional[AsyncOpenAI] = None) -> OutputT:
        request = self.validate_input(payload)
        client = client or get_client()
        if client is None:
            logger.warning("Flow %s called without a configured OpenAI client", self.name)
            raise FlowFailedError(self.name, self.failure_message)

        logger.info("Running flow %s", self.name)
        try:
            response = await client.chat.completions.create(
                model=self.model or settings.openai_model_flows,
                messages=[
                    {"role": "system", "content": self.system_prompt()},
                    {"role": "user", "content": self.render(request)},
                ],
                response_format={"type": "json_object"},
                temperature=settings.openai_temperature,
            )
        except OpenAIError as exc:
            logger.warning("Flow %s backend call failed: %s", self.name, exc)
            raise FlowFailedError(self.name, self.failure_message) from exc

        content = response.choices[0].message.content if response.choices else None
        if not content:
            logger.warning("Flow %s returned an empty payload", self.name)
            raise FlowFailedError(self.name, self.failure_message)

        try:
            return self.output_model.model_validate(json.loads(content))
        except (json.JSONDecodeError, PydanticValidationError) as exc:
            logger.warning("Flow %s returned a payload that does not match its schema: %s", self.name, exc)
            raise FlowFailedError(self.name, self.failure_message) from exc

    __call__ = run
