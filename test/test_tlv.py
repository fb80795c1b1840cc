import pytest
from brcode.tlv import (codificar_campo, codificar_grupo,
                        decodificar_proximo, decodificar_todos)
from brcode.error import (FieldTooLong, MalformedLength, TrailingGarbage,
                          TruncatedPayload, PayloadInvalido)


def test_codificar_campo():
    assert codificar_campo('00', '01') == '000201'
    assert codificar_campo('59', 'BRECHO DA MARIA') == '5915BRECHO DA MARIA'
    assert codificar_campo('62', '') == '6200'


def test_codificar_campo_limite_99():
    assert codificar_campo('26', 'x' * 99) == '2699' + 'x' * 99

    with pytest.raises(FieldTooLong) as erro:
        codificar_campo('26', 'x' * 100)
    assert erro.value.tag == '26'
    assert erro.value.tamanho == 100


def test_tag_invalida():
    with pytest.raises(ValueError):
        codificar_campo('5', 'x')
    with pytest.raises(ValueError):
        codificar_campo('ab', 'x')


def test_codificar_grupo():
    filhos = [codificar_campo('00', 'BR.GOV.BCB.PIX'),
              codificar_campo('01', 'chave@loja.com')]
    assert codificar_grupo('26', filhos) == (
        '2636' '0014BR.GOV.BCB.PIX' '0114chave@loja.com')


def test_decodificar_proximo():
    tag, tamanho, valor, proxima = decodificar_proximo('0002015303986', 6)
    assert (tag, tamanho, valor, proxima) == ('53', 3, '986', 13)


def test_decodificar_todos():
    assert decodificar_todos('00020101021153039865802BR') == [
        ('00', '01'), ('01', '11'), ('53', '986'), ('58', 'BR')]


def test_decodificar_vazio():
    assert decodificar_todos('') == []


def test_tamanho_nao_numerico():
    with pytest.raises(MalformedLength):
        decodificar_todos('0002015X03986')
    with pytest.raises(MalformedLength):
        decodificar_todos('AB0201')


def test_valor_incompleto():
    with pytest.raises(TruncatedPayload):
        decodificar_todos('0002016004SAO')
    with pytest.raises(TruncatedPayload):
        decodificar_todos('0002015915BRECHO')


def test_cabecalho_incompleto():
    with pytest.raises(TruncatedPayload):
        decodificar_todos('00020159')
    with pytest.raises(TruncatedPayload):
        decodificar_todos('0002015')


def test_erros_de_estrutura_sao_payload_invalido():
    with pytest.raises(PayloadInvalido):
        decodificar_todos('0099')


def test_leitura_que_passa_do_fim(monkeypatch):
    def proximo_que_avanca_demais(texto, posicao=0):
        return '00', 2, '01', len(texto) + 1

    monkeypatch.setattr('brcode.tlv.decodificar_proximo', proximo_que_avanca_demais)

    with pytest.raises(TrailingGarbage):
        decodificar_todos('000201')
