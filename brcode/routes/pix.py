from flask import Blueprint, jsonify
from brcode.gerador_qr_code import gerar_qr_pix
from brcode.leitor_payload import ler_payload_pix
from brcode.validation import validar_json, solicitacao_de_json
from brcode.error import ValidationError
from brcode.rate_limit import limiter
from brcode.config import LIMITE_PADRAO
import logging


logger = logging.getLogger(__name__)


pix_bp = Blueprint('pix', __name__)


@pix_bp.route('/payload', methods=['POST'])
@limiter.limit(LIMITE_PADRAO)
def gerar_payload_pix():
    logger.info('Gerando payload Pix...')

    dados = validar_json()
    solicitacao = solicitacao_de_json(dados)

    payload = gerar_qr_pix(solicitacao)

    logger.info(f'Payload Pix gerado (dinâmico={solicitacao.dinamico}).')
    # Mesma string para o QR Code e para o Pix Copia e Cola.
    return jsonify({
        'payload': payload,
        'dinamico': solicitacao.dinamico
    }), 201


@pix_bp.route('/decodificar', methods=['POST'])
@limiter.limit(LIMITE_PADRAO)
def decodificar_payload_pix():
    logger.info('Decodificando payload Pix...')

    dados = validar_json()
    payload = dados.get('payload')

    if not isinstance(payload, str) or not payload.strip():
        logger.warning('Campo payload ausente ou inválido.')
        raise ValidationError('payload')

    lido = ler_payload_pix(payload)

    logger.info('Payload Pix decodificado com sucesso.')
    return jsonify({
        'chave_pix': lido.chave_pix,
        'nome_recebedor': lido.nome_recebedor,
        'cidade_recebedor': lido.cidade_recebedor,
        'valor': f'{lido.valor:.2f}' if lido.valor is not None else None,
        'txid': lido.txid,
        'metodo_iniciacao': lido.metodo_iniciacao,
        'dinamico': lido.dinamico,
        'crc': lido.crc
    }), 200
