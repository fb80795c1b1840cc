from brcode.config import (FORMATO_PAYLOAD, GUI_PIX, MCC_PADRAO, MOEDA_BRL,
                           PAIS_BR, INICIACAO_ESTATICA, INICIACAO_DINAMICA,
                           CIDADE_PADRAO, NOME_PADRAO, TAMANHO_NOME,
                           TAMANHO_CIDADE, TAMANHO_VALOR)
from brcode.crc16 import calcular_crc16
from brcode.error import ValidationError, MissingRequiredField
from brcode.modelos import SolicitacaoPix
from brcode.sanitizacao import sanitizar, sanitizar_chave, sanitizar_txid
from brcode.tlv import codificar_campo, codificar_grupo
from decimal import Decimal, ROUND_HALF_EVEN
import logging


logger = logging.getLogger(__name__)

CENTAVOS = Decimal('0.01')


def _formatar_valor(valor: Decimal | None, ignorar_erros: bool) -> str | None:
    if valor is None:
        return None

    if valor < 0:
        raise ValidationError('valor', f'Valor negativo: {valor}')

    # inteiros + ponto + duas casas
    if valor and valor.adjusted() + 4 > TAMANHO_VALOR:
        raise ValidationError('valor', f'Valor excede {TAMANHO_VALOR} caracteres: {valor}')

    arredondado = valor.quantize(CENTAVOS, rounding=ROUND_HALF_EVEN)
    if arredondado != valor:
        if not ignorar_erros:
            raise ValidationError(
                'valor', f'Valor com mais de duas casas decimais: {valor}')
        logger.warning(f'Valor {valor} arredondado para {arredondado}.')

    if arredondado == 0:
        return None

    texto = f'{arredondado:.2f}'
    if len(texto) > TAMANHO_VALOR:
        raise ValidationError('valor', f'Valor excede {TAMANHO_VALOR} caracteres: {texto}')

    return texto


def _nome(solicitacao: SolicitacaoPix) -> str:
    nome = sanitizar(solicitacao.nome_recebedor, TAMANHO_NOME,
                     ignorar_erros=True, campo='nome_recebedor')
    if nome:
        return nome

    if not solicitacao.ignorar_erros:
        raise MissingRequiredField('nome_recebedor')

    logger.warning(f'Nome do recebedor vazio, usando {NOME_PADRAO}.')
    return NOME_PADRAO


def _cidade(solicitacao: SolicitacaoPix) -> str:
    if solicitacao.cidade_recebedor is None:
        return CIDADE_PADRAO

    cidade = sanitizar(solicitacao.cidade_recebedor, TAMANHO_CIDADE,
                       campo='cidade_recebedor')
    if not cidade:
        logger.warning(f'Cidade vazia, usando {CIDADE_PADRAO}.')
        return CIDADE_PADRAO

    return cidade


def gerar_qr_pix(solicitacao: SolicitacaoPix) -> str:
    '''
    Gera payload PIX Cópia e Cola conforme padrão BACEN (EMV-Co).

    A mesma string alimenta o QR Code e o texto copiável, então a saída
    é determinística: mesma solicitação, mesmos bytes.
    '''
    ignorar = solicitacao.ignorar_erros

    chave = sanitizar_chave(solicitacao.chave_pix)
    valor = _formatar_valor(solicitacao.valor, ignorar)
    nome = _nome(solicitacao)
    cidade = _cidade(solicitacao)
    txid = sanitizar_txid(solicitacao.txid, ignorar)

    payload = (
        codificar_campo('00', FORMATO_PAYLOAD) +
        codificar_campo(
            '01', INICIACAO_DINAMICA if valor else INICIACAO_ESTATICA) +
        codificar_grupo('26', [
            codificar_campo('00', GUI_PIX),
            codificar_campo('01', chave)
        ]) +
        codificar_campo('52', MCC_PADRAO) +
        codificar_campo('53', MOEDA_BRL) +
        (codificar_campo('54', valor) if valor else '') +
        codificar_campo('58', PAIS_BR) +
        codificar_campo('59', nome) +
        codificar_campo('60', cidade) +
        codificar_grupo('62', [codificar_campo('05', txid)])
    )

    payload_crc = payload + '6304'
    crc = calcular_crc16(payload_crc)

    logger.debug(f'Payload Pix gerado para txid={txid}.')
    return payload_crc + crc


def gerar_payload(
        chave_pix: str,
        nome_recebedor: str,
        cidade_recebedor: str | None = None,
        valor=None,
        txid: str | None = None,
        ignorar_erros: bool = False
) -> str:
    return gerar_qr_pix(SolicitacaoPix(
        chave_pix=chave_pix,
        nome_recebedor=nome_recebedor,
        cidade_recebedor=cidade_recebedor,
        valor=valor,
        txid=txid,
        ignorar_erros=ignorar_erros
    ))
