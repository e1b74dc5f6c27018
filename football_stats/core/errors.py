"""Exceções da aplicação"""


class FootballStatsError(Exception):
    """Erro base, carrega o status HTTP da resposta"""

    http_status = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_response(self) -> dict:
        return {"message": self.message}


class InvalidRequestError(FootballStatsError):
    """Parâmetro obrigatório ausente ou inválido"""

    http_status = 400


class NotFoundError(FootballStatsError):
    """Nenhum registro corresponde à consulta"""

    http_status = 404


class InvalidTeamDataError(InvalidRequestError):
    """Corpo de criação incompleto ou com tipos inválidos"""

    def to_response(self) -> dict:
        return {"success": False, "message": self.message}


class DatabaseConnectionError(RuntimeError):
    """Banco indisponível no startup (fatal)"""
