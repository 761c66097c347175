"""Utilities shared across the base85 fuzzing harnesses"""

import logging


def prepare_base85_fuzzing() -> None:
    """Used to disable logging of the base85 package"""
    logging.getLogger("base85").setLevel(logging.CRITICAL)
