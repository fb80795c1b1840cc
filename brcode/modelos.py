from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation
from brcode.config import GUI_PIX, INICIACAO_DINAMICA
from brcode.error import ValidationError


def converter_valor(valor) -> Decimal | None:
    if valor is None or valor == '':
        return None

    if isinstance(valor, bool):
        raise ValidationError('valor')

    try:
        if isinstance(valor, float):
            valor = str(valor)
        convertido = Decimal(valor)
    except (InvalidOperation, TypeError, ValueError):
        raise ValidationError('valor', f'Valor não numérico: {valor!r}')

    if not convertido.is_finite():
        raise ValidationError('valor', f'Valor não numérico: {valor!r}')

    return convertido


@dataclass(frozen=True)
class SolicitacaoPix:
    '''
    Dados de entrada para gerar um payload Pix Cópia e Cola.

    O txid é sempre fornecido por quem chama; o gerador nunca cria
    identificadores.
    '''
    chave_pix: str
    nome_recebedor: str
    cidade_recebedor: str | None = None
    valor: Decimal | None = None
    txid: str | None = None
    ignorar_erros: bool = False

    def __post_init__(self):
        object.__setattr__(self, 'valor', converter_valor(self.valor))

    @property
    def dinamico(self) -> bool:
        return self.valor is not None and self.valor != 0


@dataclass(frozen=True)
class PayloadPix:
    chave_pix: str
    nome_recebedor: str
    cidade_recebedor: str
    valor: Decimal | None
    txid: str
    metodo_iniciacao: str
    crc: str
    gui: str = GUI_PIX
    campos: list[tuple[str, str]] = field(default_factory=list)

    @property
    def dinamico(self) -> bool:
        return self.metodo_iniciacao == INICIACAO_DINAMICA
