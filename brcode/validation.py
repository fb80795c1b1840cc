from flask import request
from werkzeug.exceptions import BadRequest
from brcode.error import ValidationError, MissingRequiredField
from brcode.modelos import SolicitacaoPix
import logging


logger = logging.getLogger(__name__)


CAMPOS_TEXTO = ['chave_pix', 'nome_recebedor', 'cidade_recebedor', 'txid']


def validar_json():
    if not request.is_json:
        logger.warning('Requisição deve ser Content_type: application/json.')
        raise ValidationError(
            'corpo', 'Requisição deve ser Content-type: application/json!')

    try:
        dados = request.get_json()
    except BadRequest:
        logger.warning('JSON malformado! Dados inválidos no corpo da requisição.')
        raise ValidationError('corpo', 'JSON malformado. Dados inválidos!')

    if not dados or not isinstance(dados, dict):
        logger.warning('Dados ausentes ou inválidos no corpo da requisição.')
        raise ValidationError(
            'corpo', 'Dados ausentes ou inválidos no corpo da requisição!')

    return dados


def solicitacao_de_json(dados: dict) -> SolicitacaoPix:
    faltando = [c for c in ('chave_pix', 'nome_recebedor')
                if dados.get(c) in (None, '')]
    if faltando:
        logger.warning(f"Campo obrigatório: {', '.join(faltando)}")
        raise MissingRequiredField(faltando[0])

    for campo in CAMPOS_TEXTO:
        if dados.get(campo) is not None and not isinstance(dados[campo], str):
            logger.warning(f'Valor inválido para {campo}: {dados.get(campo)!r}')
            raise ValidationError(campo)

    ignorar_erros = dados.get('ignorar_erros', False)
    if not isinstance(ignorar_erros, bool):
        raise ValidationError('ignorar_erros')

    return SolicitacaoPix(
        chave_pix=dados['chave_pix'],
        nome_recebedor=dados['nome_recebedor'],
        cidade_recebedor=dados.get('cidade_recebedor') or None,
        valor=dados.get('valor'),
        txid=dados.get('txid') or None,
        ignorar_erros=ignorar_erros
    )
