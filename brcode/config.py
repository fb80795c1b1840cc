import os


LOG_DIR = os.getenv('BRCODE_LOG_DIR', 'logs')
LOG_ARQUIVO = os.path.join(LOG_DIR, 'app.log')
LOG_MAX_BYTES = int(os.getenv('BRCODE_LOG_MAX_BYTES', 2000000))
LOG_BACKUPS = int(os.getenv('BRCODE_LOG_BACKUPS', 5))

LIMITE_PADRAO = os.getenv('BRCODE_LIMITE', '100 per hour')


# Campos fixos do BR Code
FORMATO_PAYLOAD = '01'
GUI_PIX = 'BR.GOV.BCB.PIX'
MCC_PADRAO = '0000'
MOEDA_BRL = '986'
PAIS_BR = 'BR'

INICIACAO_ESTATICA = '11'
INICIACAO_DINAMICA = '12'

CIDADE_PADRAO = 'SAO PAULO'
TXID_PADRAO = '***'
NOME_PADRAO = 'RECEBEDOR'

TAMANHO_CHAVE = 77
TAMANHO_NOME = 25
TAMANHO_CIDADE = 15
TAMANHO_TXID = 25
TAMANHO_VALOR = 13
TAMANHO_MAX_CAMPO = 99
