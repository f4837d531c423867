"""Shared test data for the ptbr_metaphone test suite.

WHY: Several test modules check encoder output against the same
reference vocabulary. Centralizing it here avoids drift between the
core tests, the filter tests and the API tests.

HOW: REFERENCE_WORDS maps upper-case words (as a keyword tokenizer would
hand them over) to their expected codes. REFERENCE_PHRASE is a sentence
from Dom Casmurro with the codes the standard tokenizer + replace-mode
filter must produce.

RULES:
- Expected codes are authoritative; fix the encoder, never the table
- Words cover every letter rule, compounds and most x readings
"""

from typing import Dict, List

import pytest

REFERENCE_WORDS: Dict[str, str] = {
    "DILIGÊNCIA": "DLJNS",
    "REINICIAR": "2NS2",
    "TROPEIRO": "TRPR",
    "CLASSIFIQUEI": "KLSFK",
    "TOPONÍMICO": "TPNMK",
    "FROUXO": "FRX",
    "ARQUIVAR": "ARKV2",
    "AQUARELISTA": "AKRLST",
    "PARTICIPANTE": "PRTSPNT",
    "PROTUBERANTE": "PRTBRNT",
    "BRIGADEIRO-DO-AR": "BRGDR-D-A2",
    "ESTALAGEM": "ESTLJM",
    "ESTREPE": "ESTRP",
    "CRATERA": "KRTR",
    "PAÍS": "PS",
    "CANDEEIRO": "KNDR",
    "INTENDER": "INTND2",
    "CÊ-CEDILHA": "S-SD1",
    "SIMPÓSIO": "SMPZ",
    "RECOMENDAR": "2KMND2",
    "ENCORAJAR": "ENKRJ2",
    "SALVE-SE-QUEM-PUDER": "SV-S-KM-PD2",
    "DESTROÇOS": "DSTRSS",
    "REATIVO": "2TV",
    "ESCURA": "ESKR",
    "BOCA-DE-SINO": "BK-D-SN",
    "APÓLICE": "APLS",
    "HOLOCAUSTO": "OLKST",
    "SUBCONTINENTE": "SBKNTNNT",
    "ADAPTÁVEL": "ADPTV",
    "DIMINUENDO": "DMNND",
    "HIPERTIREOIDISMO": "IPRTRDSM",
    "ESPADA": "ESPD",
    "REBELADO": "2BLD",
    "PREGA": "PRG",
    "CAÇADOR": "KSD2",
    "CONSOLAÇÃO": "KNSLS",
    "DIRETRIZ": "DRTRS",
    "TEMPLO": "TMPL",
    "FANTOCHE": "FNTX",
    "MALTOSE": "MTZ",
    "PRECONCEBIDO": "PRKNSBD",
    "REBORDOSA": "2BRDZ",
    "FERRAGEM": "F2JM",
    "PROCRASTINADO": "PRKRSTND",
    "NEONAZISTA": "NNZST",
    "MEDROSO": "MDRZ",
    "LACAR": "LK2",
    "APELATIVA": "APLTV",
    "CONCEPCAO": "KNSPS",
    "TRABUCO": "TRBK",
    "ÁRVORES": "ARVRS",
    "MEDITAÇÃO": "MDTS",
    "CATEDRÁTICO": "KTDRTK",
    "AGREGAÇÃO": "AGRGS",
    "BIPE": "BP",
    "AGACHAR-SE": "AGX2-S",
    "LIBRIANO": "LBRN",
    "ANCORADOURO": "ANKRDR",
    "DECORAÇÃO": "DKRS",
    "PEQUENOS": "PKNS",
    "ADEQUADO": "ADKD",
    "ZANGÃO": "ZNG",
    "BUQUE": "BK",
    "CONTRATO": "KNTRT",
    "RESSENTIR": "2SNT2",
    "DESPROTEGER": "DSPRTJ2",
    "DISPARADO": "DSPRD",
    "NENUFAR": "NNF2",
    "RENDIMENTO": "2NDMNT",
    "ONÇA-PINTADA": "ONS-PNTD",
    "REPLANTAÇÃO": "2PLNTS",
    "CATORZE": "KTRZ",
    "PINACOTECA": "PNKTK",
    "VACINAR": "VSN2",
    "CALABOUÇO": "KLBS",
    "CONTINUAR": "KNTN2",
    "COALHAR": "K12",
    "TENTADOR": "TNTD2",
    "FAQUEIRO": "FKR",
    "AROMATIZADO": "ARMTZD",
    "DIRIMIR": "DRM2",
    "ABILOLADO": "ABLLD",
    "ANTECEDENTES": "ANTSDNTS",
    "DINAMARQUÊS": "DNMRKS",
    "DEDICATÓRIA": "DDKTR",
    "CHEFE-DE-ESQUADRA": "XF-D-ESKDR",
    "BRIGA": "BRG",
    "BRASILEIRISMO": "BRZLRSM",
    "MARMÓREO": "MRMR",
    "CONTRAPESO": "KNTRPZ",
    "PILÓRICO": "PLRK",
    "GAMBITO": "GMBT",
    "BÓRAX": "BRKS",
    "NEODARWINISMO": "NDRNSM",
    "REGULAR": "2GL2",
    "DESTACAMENTO": "DSTKMNT",
    "HORISTA": "ORST",
    "BENZEDEIRO": "BNZDR",
    "ARMADAS": "ARMDS",
    "MOLÉCULA": "MLKL",
    "RECRUTADOR": "2KRTD2",
    "SAMAMBAIA": "SMMB",
    "INTERCEPÇÃO": "INTRSPS",
    "PERISCÓPIO": "PRSKP",
    "MACHO": "MX",
    "ESPERMA": "ESPRM",
    "SISTEMA": "SSTM",
    "CONSANGÜINIDADE": "KNSNGNDD",
    "LOCAÇÃO": "LKS",
    "GRELHA": "GR1",
    "BURRADA": "B2D",
    "ALFORJE": "AFRJ",
    "CAVALHEIRESCO": "KV1RSK",
    "ENFEITIÇADO": "ENFTSD",
    "INCONSTITUCIONAL": "INKNSTTSN",
    "CHAUVINISTA": "XVNST",
    "CALCANHAR": "KK32",
    "BICHO-DE-SETE-CABEÇAS": "BX-D-ST-KBSS",
    "ELETIVO": "ELTV",
    "RADICADO": "2DKD",
    "DISSOCIACAO": "DSSS",
    "MASCULO": "MSKL",
    "OBTEMPERAR": "OBTMPR2",
    "MANIFESTACAO": "MNFSTS",
    "DESVENTURA": "DSVNTR",
    "PREVENÇÃO": "PRVNS",
    "DILATADO": "DLTD",
    "DELONGA": "DLNG",
    "REMONTAR": "2MNT2",
    "ESPREGUIÇAMENTO": "ESPRGSMNT",
    "POLINÉSIO": "PLNZ",
    "GENITAL": "JNT",
    "DESAPONTAMENTO": "DZPNTMNT",
    "COLONO": "KLN",
    "TRUCO": "TRK",
    "EXTENUADO": "ESTND",
    "HOMÔNIMO": "OMNM",
    "ENGRAÇADO": "ENGRSD",
    "MAGO": "MG",
    "INFERNAR": "INFRN2",
    "MARCAR": "MRK2",
    "REELEITO": "2LT",
    "CÁUSTICO": "KSTK",
    "DESENCAIXE": "DZNKX",
    "FIEL": "F",
    "ALCANÇAR": "AKNS2",
    "MARITICIDA": "MRTSD",
    "AXADREZAR": "AXDRZ2",
    "EFUSÃO": "EFZ",
    "BRITADEIRA": "BRTDR",
    "BALDE": "BD",
    "COMANDANTE": "KMNDNT",
    "AUDITORIA": "ADTR",
    "RESMA": "2SM",
    "EMOLDURADO": "EMDRD",
    "CAMINHÃO": "KM3",
    "REPOSIÇÃO": "2PZS",
    "AGREDIR": "AGRD2",
    "ENSACAR": "ENSK2",
    "ELAS": "ELS",
    "QUÁ-QUÁ-QUÁ": "K-K-K",
    "PÚNICO": "PNK",
    "INSATISFAÇÃO": "INSTSFS",
    "CANÔNICO": "KNNK",
    "OCO": "OK",
    "SUTURAR": "STR2",
    "BONÍSSIMO": "BNSM",
    "HISTORIOGRAFIA": "ISTRGRF",
    "OSSIFICAÇÃO": "OSFKS",
    "EMPILHAMENTO": "EMP1MNT",
    "FICAM": "FKM",
    "EXCRESCÊNCIA": "ESKRSNS",
    "CAVALO-VAPOR": "KVL-VP2",
    "EXEQUÍVEL": "EZKV",
    "PREDICAR": "PRDK2",
    "NUTRICIONAL": "NTRSN",
    "DESIMPEDIDO": "DZMPDD",
    "DISPENSAR": "DSPNS2",
    "INTERINIDADE": "INTRNDD",
    "ARRUACEIRO": "A2SR",
    "COLÔNIA": "KLN",
    "BIRRETÂNGULO": "B2TNGL",
    "REBAIXAMENTO": "2BXMNT",
    "SEMI-RETA": "SM-2T",
    "HUMANIDADE": "UMNDD",
    "SANEÁVEL": "SNV",
    "CARTÃO": "KRT",
    "PREESTABELECER": "PRSTBLS2",
    "EXTRAPOLAÇÃO": "ESTRPLS",
    "ASCENDÊNCIA": "ASNDNS",
    "PRÉ-PRIMÁRIO": "PR-PRMR",
    "CENTELHA": "SNT1",
    "URTICÁRIA": "URTKR",
    "COMIDA": "KMD",
    "MICRONÉSIO": "MKRNZ",
    "CLAMOR": "KLM2",
}

REFERENCE_PHRASE = "Você já reparou nos olhos dela? São assim de cigana oblíqua e dissimulada."

REFERENCE_PHRASE_CODES: List[str] = [
    "VS", "J", "2PR", "NS", "O1S", "DL", "S", "ASM", "D", "SGN", "OBLK", "E", "DSMLD",
]

REFERENCE_PHRASE_WORDS: List[str] = [
    "Você", "já", "reparou", "nos", "olhos", "dela", "São", "assim", "de",
    "cigana", "oblíqua", "e", "dissimulada",
]


@pytest.fixture
def reference_words():
    """The reference vocabulary as a fresh dict per test."""
    return dict(REFERENCE_WORDS)


@pytest.fixture
def reference_phrase():
    """The reference sentence, its words, and their replace-mode codes."""
    return REFERENCE_PHRASE, list(REFERENCE_PHRASE_WORDS), list(REFERENCE_PHRASE_CODES)
