"""
up_functions.providers

Purpose:
    Registry of provider name -> operation table module.

    Each provider runs as its own short-lived process, so tables are imported on
    demand: launching `up-env` never pays for importing Faker.
"""

from __future__ import annotations

import importlib
from typing import Dict

from up_functions.dispatch import OperationTable

PROVIDER_MODULES: Dict[str, str] = {
    "env": "up_functions.providers.env",
    "file": "up_functions.providers.filesystem",
    "id": "up_functions.providers.identifiers",
    "list": "up_functions.providers.lists",
    "math": "up_functions.providers.arithmetic",
    "random": "up_functions.providers.randomness",
    "string": "up_functions.providers.strings",
    "time": "up_functions.providers.timestamps",
    "fake": "up_functions.providers.fake",
}


def provider_names() -> list[str]:
    return sorted(PROVIDER_MODULES)


def get_operation_table(provider: str) -> OperationTable:
    module_name = PROVIDER_MODULES.get(provider)
    if module_name is None:
        raise ValueError(f"Unknown provider '{provider}'. Allowed providers: {provider_names()}")
    return importlib.import_module(module_name).OPERATIONS
