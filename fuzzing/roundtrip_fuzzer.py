import sys

import atheris

from fuzz_helpers import EnhancedFuzzedDataProvider

with atheris.instrument_imports():
    from utils import prepare_base85_fuzzing
    from base85 import decode, encode, encoded_length
    from base85.alphabet import BASE85_CHARS


def fuzz_one_input(data: bytes) -> None:
    fdp = EnhancedFuzzedDataProvider(data)
    raw = fdp.ConsumeRemainingBytes()

    encoded = encode(raw)
    assert len(encoded) == encoded_length(len(raw))
    assert set(encoded) <= set(BASE85_CHARS)
    assert decode(encoded) == raw


if __name__ == "__main__":
    prepare_base85_fuzzing()
    atheris.Setup(sys.argv, fuzz_one_input)
    atheris.Fuzz()
