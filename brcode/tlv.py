from brcode.config import TAMANHO_MAX_CAMPO
from brcode.error import (FieldTooLong, MalformedLength,
                          TruncatedPayload, TrailingGarbage)
import re


DOIS_DIGITOS = re.compile(r'[0-9]{2}')


def codificar_campo(tag: str, valor: str) -> str:
    if not DOIS_DIGITOS.fullmatch(tag or ''):
        raise ValueError(f'Tag deve ter dois dígitos: {tag!r}')

    if len(valor) > TAMANHO_MAX_CAMPO:
        raise FieldTooLong(tag, len(valor))

    return f'{tag}{len(valor):02d}{valor}'


def codificar_grupo(tag: str, filhos: list[str]) -> str:
    return codificar_campo(tag, ''.join(filhos))


def decodificar_proximo(texto: str, posicao: int = 0) -> tuple[str, int, str, int]:
    '''
    Lê um campo TLV a partir de posicao.

    Retorna (tag, tamanho, valor, proxima_posicao).
    '''
    cabecalho = texto[posicao:posicao + 4]
    if len(cabecalho) < 4:
        raise TruncatedPayload(
            f'Cabeçalho incompleto na posição {posicao}: {cabecalho!r}')

    tag, tamanho_txt = cabecalho[:2], cabecalho[2:]

    if not DOIS_DIGITOS.fullmatch(tag):
        raise MalformedLength(f'Tag não numérica na posição {posicao}: {tag!r}')

    if not DOIS_DIGITOS.fullmatch(tamanho_txt):
        raise MalformedLength(
            f'Tamanho não numérico no campo {tag}: {tamanho_txt!r}')

    tamanho = int(tamanho_txt)
    inicio = posicao + 4
    valor = texto[inicio:inicio + tamanho]

    if len(valor) < tamanho:
        raise TruncatedPayload(
            f'Campo {tag} declara {tamanho} caracteres, restam {len(valor)}')

    return tag, tamanho, valor, inicio + tamanho


def decodificar_todos(texto: str) -> list[tuple[str, str]]:
    campos = []
    posicao = 0

    while posicao < len(texto):
        tag, _, valor, posicao = decodificar_proximo(texto, posicao)
        campos.append((tag, valor))

    if posicao != len(texto):
        raise TrailingGarbage(
            f'Leitura terminou na posição {posicao} de {len(texto)}')

    return campos
