import sys

import atheris

from fuzz_helpers import EnhancedFuzzedDataProvider

with atheris.instrument_imports():
    from utils import prepare_base85_fuzzing
    from base85 import decode, encode

from base85.b85exceptions import Base85Exception


def fuzz_one_input(data: bytes) -> None:
    fdp = EnhancedFuzzedDataProvider(data)
    if fdp.ConsumeBool():
        text = fdp.ConsumeSymbolString()
    else:
        text = fdp.ConsumeRandomString()

    try:
        raw = decode(text)
    except Base85Exception:
        return

    # Trailing groups have several spellings, the bytes must survive anyway
    assert decode(encode(raw)) == raw


if __name__ == "__main__":
    prepare_base85_fuzzing()
    atheris.Setup(sys.argv, fuzz_one_input)
    atheris.Fuzz()
