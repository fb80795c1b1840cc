from flask import jsonify, request
from flask_limiter.errors import RateLimitExceeded
import logging


logger = logging.getLogger(__name__)


class PixError(Exception):
    mensagem = 'Erro no payload Pix'

    def __init__(self, mensagem=None):
        if mensagem is not None:
            self.mensagem = mensagem
        super().__init__(self.mensagem)


class ValidationError(PixError):
    def __init__(self, campo, mensagem=None):
        self.campo = campo
        super().__init__(mensagem or f'Valor inválido para {campo}')


class MissingRequiredField(ValidationError):
    def __init__(self, campo, mensagem=None):
        super().__init__(campo, mensagem or f'Campo obrigatório: {campo}')


class FieldTooLong(PixError):
    def __init__(self, tag, tamanho):
        self.tag = tag
        self.tamanho = tamanho
        super().__init__(
            f'Campo {tag} com {tamanho} caracteres excede o limite de 99')


class PayloadInvalido(PixError):
    mensagem = 'Payload Pix inválido'


class MalformedLength(PayloadInvalido):
    mensagem = 'Tamanho de campo não numérico'


class TruncatedPayload(PayloadInvalido):
    mensagem = 'Payload incompleto'


class TrailingGarbage(PayloadInvalido):
    mensagem = 'Caracteres sobrando no fim do payload'


class TagOutOfOrder(PayloadInvalido):
    mensagem = 'Tags fora de ordem ou repetidas'


class ChecksumMismatch(PayloadInvalido):
    mensagem = 'CRC16 não confere'


def register_erro_handlers(app):
    @app.errorhandler(ValidationError)
    def dados_pix_invalidos(erro):
        logger.warning(f'Dados Pix inválidos: {erro.mensagem}')
        return jsonify({'erro': erro.mensagem, 'campo': erro.campo}), 400

    @app.errorhandler(FieldTooLong)
    def campo_longo(erro):
        logger.warning(f'Campo Pix longo demais: {erro.mensagem}')
        return jsonify({'erro': erro.mensagem, 'campo': erro.tag}), 400

    @app.errorhandler(PayloadInvalido)
    def payload_invalido(erro):
        logger.warning(
            f'Payload Pix rejeitado ({type(erro).__name__}): {erro.mensagem}')
        return jsonify({'erro': erro.mensagem,
                        'tipo': type(erro).__name__}), 422

    @app.errorhandler(404)
    def rota_nao_encontrado(erro):
        logger.warning(f'Rota não encontrada: {str(erro)}')
        return jsonify({'erro': 'Rota não encontrada!'}), 404

    @app.errorhandler(RateLimitExceeded)
    def rate_limit_handler(e):
        logger.warning(
            f"RATE LIMIT excedido | IP={request.remote_addr} | rota={request.path}"
        )
        return jsonify({
            'erro': 'Muitas requisições. Tente novamente mais tarde.'
        }), 429

    @app.errorhandler(400)
    def dados_inválidos(erro):
        logger.warning(f'Dados inválidos na rota: {str(erro)}')
        return jsonify({'erro': 'Dados inválidos na rota!'}), 400

    @app.errorhandler(405)
    def metodo_errado(erro):
        logger.warning(f'Método HTTP não permitido nesta rota: {str(erro)}')
        return jsonify({'erro': 'Método HTTP não permitido nesta rota!'}), 405

    @app.errorhandler(Exception)
    def erro_interno(erro):
        logger.error(f'Erro inesperado ao acessar a rota: {str(erro)}')
        return jsonify({'erro': 'Erro inesperado ao acessar a rota!'}), 500
