from typing import Any

import httpx
from pydantic import SecretStr

from translation_guard.core.application.ports.translation_oracle_port import TranslationOraclePort
from translation_guard.core.exceptions import OracleRequestFailedError, OracleUnavailableError
from translation_guard.infrastructure.observability.logger_factory_service import get_logger

logger = get_logger(__name__)


class DeepLOracleAdapter(TranslationOraclePort):
    """Translation oracle backed by the DeepL `/v2/translate` endpoint.

    One request per text; nothing is cached or batched.
    """

    def __init__(self, base_url: str, api_key: SecretStr | None, timeout: float = 10.0):
        self.base_url = base_url.rstrip("/")
        self._api_key = api_key
        self._timeout = timeout

    async def translate(self, text: str, source_lang: str, target_lang: str) -> str:
        api_key = self._api_key.get_secret_value() if self._api_key else ""
        if not api_key:
            raise OracleUnavailableError()

        payload = {"text": [text], "source_lang": source_lang, "target_lang": target_lang}
        headers = {"Authorization": f"DeepL-Auth-Key {api_key}"}
        try:
            async with httpx.AsyncClient(timeout=self._timeout) as client:
                response = await client.post(
                    f"{self.base_url}/v2/translate", headers=headers, json=payload
                )
            response.raise_for_status()
            data = response.json()
        except httpx.HTTPStatusError as exc:
            code = exc.response.status_code
            raise OracleRequestFailedError(
                f"Request failed with status code {code}", status_code=code
            ) from exc
        except httpx.HTTPError as exc:
            raise OracleRequestFailedError(str(exc) or type(exc).__name__) from exc
        except ValueError as exc:
            raise OracleRequestFailedError("response body is not valid JSON") from exc

        translation = _first_translation(data)
        logger.debug("DeepL translated text", source_lang=source_lang, target_lang=target_lang)
        return translation


def _first_translation(data: Any) -> str:
    """Pull translations[0].text; any other shape is a protocol error."""
    translations = data.get("translations") if isinstance(data, dict) else None
    if not isinstance(translations, list) or not translations:
        raise OracleRequestFailedError("response has no translations")
    first = translations[0]
    text = first.get("text") if isinstance(first, dict) else None
    if not isinstance(text, str):
        raise OracleRequestFailedError("translation entry has no text")
    return text
