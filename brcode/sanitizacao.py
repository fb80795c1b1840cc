from brcode.config import TAMANHO_CHAVE, TAMANHO_TXID, TXID_PADRAO
from brcode.error import ValidationError, MissingRequiredField
import logging
import re
import unicodedata


logger = logging.getLogger(__name__)


PERMITIDOS = re.compile(r'[^A-Z0-9 .,\-/]')
ESPACOS = re.compile(r'\s+')
ALFANUMERICOS = re.compile(r'[^A-Za-z0-9]')


def _remover_acentos(texto: str) -> str:
    decomposto = unicodedata.normalize('NFKD', texto)
    return ''.join(c for c in decomposto if not unicodedata.combining(c))


def sanitizar(
        texto: str | None,
        tamanho_max: int,
        ignorar_erros: bool = False,
        campo: str | None = None,
        obrigatorio: bool = False
) -> str:
    '''
    Normaliza texto livre para o conjunto de caracteres aceito no BR Code:
    sem acentos, maiúsculo, apenas A-Z, 0-9, espaço e ".,-/".
    Trunca em tamanho_max sem nunca lançar erro por tamanho.
    '''
    limpo = ESPACOS.sub(' ', _remover_acentos(texto or '').upper())
    limpo = PERMITIDOS.sub('', limpo)
    limpo = ESPACOS.sub(' ', limpo).strip()

    if len(limpo) > tamanho_max:
        logger.debug(f'Campo {campo} truncado em {tamanho_max} caracteres.')
        limpo = limpo[:tamanho_max].rstrip()

    if not limpo and obrigatorio and not ignorar_erros:
        raise ValidationError(campo)

    return limpo


def sanitizar_chave(chave: str | None) -> str:
    # Chaves (e-mail, telefone, CPF/CNPJ, aleatória) mantêm caixa e pontuação.
    limpo = _remover_acentos(chave or '')
    limpo = ''.join(c for c in limpo if 33 <= ord(c) <= 126)

    if len(limpo) > TAMANHO_CHAVE:
        logger.warning(f'Chave Pix truncada em {TAMANHO_CHAVE} caracteres.')
        limpo = limpo[:TAMANHO_CHAVE]

    if not limpo:
        raise MissingRequiredField('chave_pix')

    return limpo


def sanitizar_txid(txid: str | None, ignorar_erros: bool = False) -> str:
    if txid is None or not txid.strip() or txid.strip() == TXID_PADRAO:
        return TXID_PADRAO

    limpo = ALFANUMERICOS.sub('', _remover_acentos(txid))[:TAMANHO_TXID]

    if not limpo:
        if not ignorar_erros:
            raise ValidationError('txid', f'txid sem caracteres alfanuméricos: {txid!r}')
        logger.warning(f'txid inválido {txid!r}, usando {TXID_PADRAO}.')
        return TXID_PADRAO

    return limpo
