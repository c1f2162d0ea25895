from __future__ import annotations


class PoolTagsError(Exception):
    """Base para erros ao gerar tags de pools."""


class UnsupportedChainError(PoolTagsError):
    """Chain id desconhecido ou nao numerico."""

    def __init__(self, chain_id: str, supported: list[str]):
        self.chain_id = chain_id
        self.supported = list(supported)
        super().__init__(
            f"Unsupported chain_id: {chain_id!r}. Valid chain ids: {', '.join(self.supported)}"
        )


class SubgraphHttpError(PoolTagsError):
    """Resposta HTTP sem sucesso do gateway."""

    def __init__(self, status_code: int):
        self.status_code = status_code
        super().__init__(f"Subgraph request failed with HTTP status {status_code}.")


class SubgraphGraphQLError(PoolTagsError):
    """Subgraph retornou erros de query."""

    def __init__(self, messages: list[str]):
        self.messages = list(messages)
        super().__init__("Subgraph returned GraphQL errors: " + " | ".join(self.messages))


class SubgraphMissingDataError(PoolTagsError):
    """Resposta sem o formato esperado de pairs."""


class UnexpectedReturnTagsError(PoolTagsError):
    """Falha nao classificada durante a busca."""

    MESSAGE = "Unexpected error while returning pool tags."

    def __init__(self):
        super().__init__(self.MESSAGE)
