from abc import ABC, abstractmethod


class TranslationOraclePort(ABC):

    @abstractmethod
    async def translate(self, text: str, source_lang: str, target_lang: str) -> str:
        """Returns the machine translation of text.

        Raises OracleUnavailableError without a credential and
        OracleRequestFailedError when the call or its response is unusable.
        """
        pass
