import pytest
from brcode.sanitizacao import sanitizar, sanitizar_chave, sanitizar_txid
from brcode.error import ValidationError, MissingRequiredField


def test_remove_acentos_e_coloca_maiusculo():
    assert sanitizar('São João', 25) == 'SAO JOAO'
    assert sanitizar('Brechó Açaí', 25) == 'BRECHO ACAI'


def test_remove_caracteres_fora_da_lista():
    assert sanitizar('Loja & Cia! #1', 25) == 'LOJA CIA 1'
    assert sanitizar('R. 7, Centro-Sul/SP', 25) == 'R. 7, CENTRO-SUL/SP'


def test_colapsa_espacos():
    assert sanitizar('  Brecho    da\tMaria  ', 25) == 'BRECHO DA MARIA'


def test_trunca_sem_erro():
    nome = 'Brecho Vintage Da Esquina Charmosa'
    assert len(nome) == 34
    assert sanitizar(nome, 25) == 'BRECHO VINTAGE DA ESQUINA'
    assert sanitizar(nome, 25, ignorar_erros=False) == 'BRECHO VINTAGE DA ESQUINA'


def test_truncamento_nao_deixa_espaco_no_fim():
    assert sanitizar('ABCD EFGH', 5) == 'ABCD'


def test_campo_obrigatorio_vazio_modo_estrito():
    with pytest.raises(ValidationError) as erro:
        sanitizar('!!!', 25, campo='nome_recebedor', obrigatorio=True)
    assert erro.value.campo == 'nome_recebedor'


def test_campo_obrigatorio_vazio_ignorando_erros():
    assert sanitizar('', 25, ignorar_erros=True, obrigatorio=True) == ''


def test_campo_opcional_vazio_nao_falha():
    assert sanitizar(None, 15) == ''


def test_chave_mantem_email():
    assert sanitizar_chave('fvcoelho@gmail.com') == 'fvcoelho@gmail.com'
    assert sanitizar_chave(' +5511999998888 ') == '+5511999998888'


def test_chave_remove_acentos_e_espacos():
    assert sanitizar_chave('joão @loja.com') == 'joao@loja.com'


def test_chave_trunca_em_77():
    assert len(sanitizar_chave('a' * 100)) == 77


def test_chave_vazia_sempre_falha():
    with pytest.raises(MissingRequiredField):
        sanitizar_chave('   ')
    with pytest.raises(MissingRequiredField):
        sanitizar_chave(None)


def test_txid_padrao():
    assert sanitizar_txid(None) == '***'
    assert sanitizar_txid('') == '***'
    assert sanitizar_txid('***') == '***'


def test_txid_apenas_alfanumerico():
    assert sanitizar_txid('PED-2024_001') == 'PED2024001'
    assert sanitizar_txid('x' * 30) == 'x' * 25


def test_txid_invalido():
    with pytest.raises(ValidationError):
        sanitizar_txid('---')
    assert sanitizar_txid('---', ignorar_erros=True) == '***'
