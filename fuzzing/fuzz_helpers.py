import atheris

from base85.alphabet import BASE85_CHARS

# Alphabet plus the skipped whitespace and a few near misses
SYMBOLS = BASE85_CHARS + " \n\x0b\r\t\x0c\"',./:[]"


class EnhancedFuzzedDataProvider(atheris.FuzzedDataProvider):  # type: ignore[misc]
    def ConsumeRandomBytes(self) -> bytes:
        return bytes(self.ConsumeBytes(self.ConsumeIntInRange(0, self.remaining_bytes())))

    def ConsumeRandomString(self) -> str:
        return str(
            self.ConsumeUnicodeNoSurrogates(
                self.ConsumeIntInRange(0, self.remaining_bytes())
            )
        )

    def ConsumeRemainingBytes(self) -> bytes:
        return bytes(self.ConsumeBytes(self.remaining_bytes()))

    def ConsumeSymbolString(self) -> str:
        """Builds a string mostly drawn from the base85 alphabet."""
        count = self.ConsumeIntInRange(0, self.remaining_bytes())
        return "".join(
            SYMBOLS[self.ConsumeIntInRange(0, len(SYMBOLS) - 1)] for _ in range(count)
        )
