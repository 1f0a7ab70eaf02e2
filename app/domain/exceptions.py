from __future__ import annotations


class DomainError(Exception):
    """Base para erros de dominio."""


class TradeRecordShapeError(DomainError):
    """Vetores paralelos do trade com tamanho diferente do numero de pools."""


class InvalidTokenAddressError(DomainError):
    """Endereco de token invalido."""


class OrderbookFetchError(DomainError):
    """Falha ao buscar o orderbook no servico de simulacao (pode tentar de novo)."""


class OrderbookBackendError(OrderbookFetchError):
    """Resposta com status de sucesso mas com erro embutido no corpo."""


class OrderbookPayloadError(DomainError):
    """Payload do orderbook nao respeita o schema esperado."""


class OrderbookNotFoundError(DomainError):
    """Nenhum snapshot publicado para o par solicitado."""


class DepthChartInputError(DomainError):
    """Configuracao de eixo invalida para o grafico de profundidade."""


class SelectionInputError(DomainError):
    """Ponto selecionado invalido para o compositor de swap."""
