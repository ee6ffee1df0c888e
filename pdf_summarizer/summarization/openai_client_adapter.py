import httpx
import openai

from pdf_summarizer.logging.logger import Log
from pdf_summarizer.summarization.client_base import BaseSummarizationClient
from pdf_summarizer.summarization.exceptions import SummarizationNetworkError


class OpenAIClientAdapter(BaseSummarizationClient):
    """Summarization client built on the OpenAI-compatible async chat API."""

    DECLINED_FINISH_REASONS = ("content_filter",)

    def __init__(
        self,
        *,
        api_key: str,
        timeout_seconds: int,
        base_url: str | None = None,
    ) -> None:
        self._client = openai.AsyncOpenAI(
            api_key=api_key,
            timeout=timeout_seconds,
            base_url=base_url,
            max_retries=0,
        )

    async def create_chat_completion(
        self,
        *,
        model: str,
        temperature: float,
        system_prompt: str,
        user_prompt: str,
    ) -> str | None:
        try:
            response = await self._client.chat.completions.create(
                model=model,
                temperature=temperature,
                messages=[
                    {"role": "system", "content": system_prompt},
                    {"role": "user", "content": user_prompt},
                ],
            )
        except (openai.APIConnectionError, httpx.ConnectError, httpx.TimeoutException) as exc:
            raise SummarizationNetworkError(
                f"AI provider network error: {exc}"
            ) from exc
        except openai.APIError as exc:
            raise SummarizationNetworkError(
                f"AI provider API error: {exc}"
            ) from exc

        if not response.choices:
            Log.warning("AI returned no choices")
            return None
        choice = response.choices[0]
        if choice.finish_reason in self.DECLINED_FINISH_REASONS:
            Log.warning(f"AI declined to summarize (finish_reason={choice.finish_reason})")
            return None
        return choice.message.content
