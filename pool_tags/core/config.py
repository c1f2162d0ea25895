from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv


load_dotenv()


SUBGRAPH_ID_ENV_PREFIX = "PANCAKE_SUBGRAPH_ID_"


def _env(name: str, default: str | None = None) -> str | None:
    return os.getenv(name, default)


def _subgraph_id_overrides() -> dict:
    overrides = {}
    for name, value in os.environ.items():
        if not name.startswith(SUBGRAPH_ID_ENV_PREFIX):
            continue
        chain_id = name[len(SUBGRAPH_ID_ENV_PREFIX):].strip()
        subgraph_id = (value or "").strip()
        if chain_id and subgraph_id:
            overrides[chain_id] = subgraph_id
    return overrides


@dataclass(frozen=True)
class Settings:
    graph_request_timeout_seconds: float
    subgraph_id_overrides: dict


def get_settings() -> Settings:
    return Settings(
        graph_request_timeout_seconds=float(_env("GRAPH_REQUEST_TIMEOUT_SECONDS", "10")),
        subgraph_id_overrides=_subgraph_id_overrides(),
    )
