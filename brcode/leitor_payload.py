'''
Leitura de payloads Pix Cópia e Cola.

Usado apenas em testes e diagnóstico, nunca no caminho de geração.
Qualquer anomalia estrutural ou de CRC é erro, sem tentativa de recuperação.
'''
from brcode.config import (FORMATO_PAYLOAD, GUI_PIX, INICIACAO_ESTATICA,
                           INICIACAO_DINAMICA)
from brcode.crc16 import calcular_crc16
from brcode.error import (PixError, ValidationError, MissingRequiredField,
                          ChecksumMismatch, TagOutOfOrder)
from brcode.modelos import PayloadPix
from brcode.tlv import decodificar_todos
from decimal import Decimal, InvalidOperation
import logging


logger = logging.getLogger(__name__)


def _conferir_crc(payload: str, campos: list[tuple[str, str]]) -> str:
    if not campos or campos[-1][0] != '63' or len(campos[-1][1]) != 4:
        raise ChecksumMismatch('Payload sem campo 63 (CRC16) no final')

    recebido = payload[-4:]
    calculado = calcular_crc16(payload[:-4])

    if calculado != recebido.upper():
        raise ChecksumMismatch(
            f'CRC16 não confere: recebido {recebido}, calculado {calculado}')

    return recebido.upper()


def _conferir_ordem(campos: list[tuple[str, str]], grupo: str = '') -> dict[str, str]:
    tags = [tag for tag, _ in campos]

    for anterior, atual in zip(tags, tags[1:]):
        if atual <= anterior:
            onde = f' no grupo {grupo}' if grupo else ''
            raise TagOutOfOrder(
                f'Tag {atual} depois de {anterior}{onde}')

    return dict(campos)


def _valor(texto: str | None) -> Decimal | None:
    if texto is None:
        return None

    try:
        valor = Decimal(texto)
    except InvalidOperation:
        raise ValidationError('54', f'Valor inválido no campo 54: {texto!r}')

    if not valor.is_finite() or valor < 0:
        raise ValidationError('54', f'Valor inválido no campo 54: {texto!r}')

    return valor


def ler_payload_pix(payload: str) -> PayloadPix:
    payload = payload.strip()

    campos = decodificar_todos(payload)
    crc = _conferir_crc(payload, campos)
    topo = _conferir_ordem(campos)

    if campos[0] != ('00', FORMATO_PAYLOAD):
        raise ValidationError('00', 'Payload deve começar com 000201')

    metodo = topo.get('01', INICIACAO_ESTATICA)
    if metodo not in (INICIACAO_ESTATICA, INICIACAO_DINAMICA):
        raise ValidationError('01', f'Método de iniciação inválido: {metodo!r}')

    if '26' not in topo:
        raise MissingRequiredField('26')

    conta = _conferir_ordem(decodificar_todos(topo['26']), '26')
    if conta.get('00', '').upper() != GUI_PIX:
        raise ValidationError('26', f"GUI inesperado: {conta.get('00')!r}")

    if not conta.get('01'):
        raise MissingRequiredField('chave_pix')

    if not topo.get('59'):
        raise MissingRequiredField('nome_recebedor')

    adicionais = _conferir_ordem(
        decodificar_todos(topo.get('62', '')), '62')

    return PayloadPix(
        chave_pix=conta['01'],
        nome_recebedor=topo['59'],
        cidade_recebedor=topo.get('60', ''),
        valor=_valor(topo.get('54')),
        txid=adicionais.get('05', ''),
        metodo_iniciacao=metodo,
        crc=crc,
        gui=conta['00'],
        campos=campos
    )


def payload_valido(payload: str) -> bool:
    try:
        ler_payload_pix(payload)
    except PixError as erro:
        logger.info(f'Payload Pix inválido ({type(erro).__name__}): {erro}')
        return False
    return True
