import pytest
from brcode import create_api
from brcode.modelos import SolicitacaoPix


@pytest.fixture(autouse=True)
def logs_temporarios(tmp_path, monkeypatch):
    monkeypatch.setattr('brcode.log.LOG_DIR', str(tmp_path))
    monkeypatch.setattr('brcode.log.LOG_ARQUIVO', str(tmp_path / 'app.log'))


@pytest.fixture
def client_pix():
    app = create_api({'TESTING': True, 'RATELIMIT_ENABLED': False})
    with app.app_context():
        with app.test_client() as client:
            yield client


@pytest.fixture
def solicitacao_brecho():
    return SolicitacaoPix(
        chave_pix='fvcoelho@gmail.com',
        nome_recebedor='Brecho Da Maria',
        cidade_recebedor='Sao Paulo',
        valor='89.90',
        txid='TESTPIX1234'
    )
