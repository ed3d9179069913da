import logging
from typing import Any, Generic, Optional, Sequence, Type, TypeVar

from fastapi import HTTPException, status
from langchain_core.exceptions import OutputParserException
from langchain_core.messages import BaseMessage, HumanMessage
from langchain_core.prompts import ChatPromptTemplate
from pydantic import BaseModel, ValidationError

from app.prompts.agrimitra_system_prompt import AGRIMITRA_SYSTEM_PROMPT

from .genai_client import get_structured_chat_model

logger = logging.getLogger(__name__)

OutputT = TypeVar("OutputT", bound=BaseModel)


class PromptFlow(Generic[OutputT]):
    """
    A named prompt template bound to the schema the model has to answer with.

    The template placeholders are filled from request fields, the rendered
    messages are sent to the hosted model with structured output enabled, and
    the reply comes back as an ``output_schema`` instance. ``None`` means the
    model produced no payload; what that implies is left to the caller.
    """

    def __init__(
        self,
        *,
        name: str,
        template: str,
        output_schema: Type[OutputT],
        system_prompt: str = AGRIMITRA_SYSTEM_PROMPT,
        model: Optional[str] = None,
        failure_detail: Optional[str] = None,
    ) -> None:
        self.name = name
        self.output_schema = output_schema
        self.system_prompt = system_prompt
        self.model = model
        self.failure_detail = failure_detail or (
            f"AI model could not complete {name}. Please try again later."
        )
        self.prompt = ChatPromptTemplate.from_messages(
            [("system", "{system_prompt}"), ("human", template)]
        )

    @property
    def input_variables(self) -> list[str]:
        return [
            variable
            for variable in self.prompt.input_variables
            if variable != "system_prompt"
        ]

    def format_messages(
        self,
        variables: dict[str, Any],
        media_urls: Sequence[str] = (),
    ) -> list[BaseMessage]:
        messages = self.prompt.format_messages(
            system_prompt=self.system_prompt, **variables
        )
        if media_urls:
            messages.append(
                HumanMessage(
                    content=[
                        {"type": "image_url", "image_url": {"url": url}}
                        for url in media_urls
                    ]
                )
            )
        return messages

    async def ainvoke(
        self,
        variables: dict[str, Any],
        media_urls: Sequence[str] = (),
    ) -> Optional[OutputT]:
        messages = self.format_messages(variables, media_urls)
        model = get_structured_chat_model(self.output_schema, model=self.model)
        try:
            output = await model.ainvoke(messages)
        except OutputParserException as exc:
            logger.warning("Unparseable %s output: %s", self.name, exc)
            raise self._malformed_response() from exc
        except Exception as model_exc:
            logger.exception("Model invocation failed for %s", self.name)
            raise HTTPException(
                status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
                detail=self.failure_detail,
            ) from model_exc

        if output is None:
            return None

        if not isinstance(output, self.output_schema):
            try:
                output = self.output_schema.model_validate(output)
            except ValidationError as exc:
                logger.warning("Malformed %s output: %s", self.name, exc)
                raise self._malformed_response() from exc

        logger.debug("%s output: %s", self.name, output.model_dump_json(indent=2))
        return output

    def _malformed_response(self) -> HTTPException:
        return HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"AI returned a malformed response for {self.name}.",
        )
