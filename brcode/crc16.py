import crcmod


# CRC-16/CCITT-FALSE: polinômio 0x1021, início 0xFFFF, sem reflexão
_crc16 = crcmod.mkCrcFun(0x11021, initCrc=0xFFFF, rev=False, xorOut=0x0000)


def calcular_crc16(dados) -> str:
    if isinstance(dados, str):
        dados = dados.encode('utf-8')
    return f'{_crc16(dados):04X}'


def verificar_crc16(dados, esperado: str) -> bool:
    return calcular_crc16(dados) == esperado.upper()
